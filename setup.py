"""Sign in with Slack for Flask apps."""

import re
from setuptools import find_packages, setup

with open("README.rst", encoding="utf8") as f:
    readme = f.read()

with open("flask_slack_oauth/__init__.py", encoding="utf8") as f:
    version = re.search(r'__version__ = "(.*?)"', f.read()).group(1)

install_requires = [
    "Flask>=2.3.0",
    "Flask-Login>=0.6.2",
    "Authlib>=1.2.0",
    "requests>=2.28.0",
    "blinker>=1.6",
]

extras_require = {
    "test": ["pytest>=7.0", "responses>=0.23"],
}

packages = find_packages(exclude=["tests"])

setup(
    name="Flask-Slack-OAuth",
    version=version,
    description=__doc__,
    long_description=readme,
    long_description_content_type="text/x-rst",
    keywords="flask slack oauth authlib",
    license="MIT",
    packages=packages,
    zip_safe=False,
    include_package_data=True,
    platforms="any",
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require=extras_require,
    classifiers=[
        "Environment :: Web Environment",
        "Framework :: Flask",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Development Status :: 4 - Beta",
    ],
)
