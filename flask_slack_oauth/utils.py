"""
    flask_slack_oauth.utils
    ~~~~~~~~~~~~~~~~~~~~~~~

    Flask-Slack-OAuth utils module

    :copyright: (c) 2024 by the Flask-Slack-OAuth authors.
    :license: MIT, see LICENSE for more details.
"""

from __future__ import annotations

import typing as t
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from flask import current_app, flash, request, url_for
from werkzeug.routing import BuildError

CONFIG_PREFIX = "SLACK_OAUTH_"


def config_value(key, app=None, default=None, strict=True):
    """Get a Flask-Slack-OAuth configuration value.

    :param key: The configuration key without the prefix `SLACK_OAUTH_`
    :param app: An optional specific application to inspect. Defaults to
                Flask's `current_app`
    :param default: An optional default value if the value is not set
    :param strict: if True, will raise ValueError if key doesn't exist
    """
    app = app or current_app
    key = f"{CONFIG_PREFIX}{key.upper()}"
    # protect against spelling mistakes
    if strict and key not in app.config:
        raise ValueError(f"Key {key} doesn't exist")
    return app.config.get(key, default)


def get_message(key: str, **kwargs: t.Any) -> tuple[str, str]:
    rv = config_value("MSG_" + key)
    return rv[0] % kwargs, rv[1]


def do_flash(message: str, category: str) -> None:
    """Flash a message depending on if the `FLASH_MESSAGES` configuration
    value is set.

    :param message: The flash message
    :param category: The flash message category
    """
    if config_value("FLASH_MESSAGES"):
        flash(message, category)


def transform_url(
    url: str, qparams: dict[str, str] | None = None, **kwargs: str
) -> str:
    """Modify url

    :param url: url to transform (can be relative)
    :param qparams: additional query params to add to end of url
    :param kwargs: pieces of URL to modify - e.g. netloc=localhost:8000
    :return: Modified URL
    """
    link_parse = urlsplit(url)
    if qparams:
        # keep blank and repeated params; qparams replace same-named ones
        pairs = [
            (k, v)
            for k, v in parse_qsl(link_parse.query, keep_blank_values=True)
            if k not in qparams
        ]
        pairs.extend(qparams.items())
        link_parse = link_parse._replace(query=urlencode(pairs))
    return urlunsplit(link_parse._replace(**kwargs))


def get_url(endpoint_or_url: str, qparams: dict[str, str] | None = None) -> str:
    """Returns a URL if a valid endpoint is found. Otherwise, returns the
    provided value.

    :param endpoint_or_url: The endpoint name or URL to default to
    :param qparams: additional query params to add to end of url
    :return: URL
    """
    try:
        return transform_url(url_for(endpoint_or_url), qparams)
    except BuildError:
        # This is a URL (no endpoint defined in app)
        return transform_url(endpoint_or_url, qparams)


def url_for_slack(endpoint: str, **values: t.Any) -> str:
    """Return a URL for the Slack OAuth blueprint

    :param endpoint: the endpoint of the URL (name of the function)
    :param values: the variable arguments of the URL rule
    """
    endpoint = f"{config_value('BLUEPRINT_NAME')}.{endpoint}"
    return url_for(endpoint, **values)


def validate_redirect_url(url: str | None) -> bool:
    """Only redirects to the same host (and scheme) are allowed."""
    if url is None or url.strip() == "":
        return False
    url_next = urlsplit(url)
    url_base = urlsplit(request.host_url)
    if (url_next.netloc or url_next.scheme) and url_next.netloc != url_base.netloc:
        return False
    return True


def get_post_login_redirect(next_loc: str | None) -> str:
    """
    Compute where to send the user after a successful login.
    The result is sent to Flask::redirect() - so the path is quoted to
    keep browsers from interpreting a lenient URL (e.g. ``\\\\evil.com``)
    as an external location.
    """
    if next_loc and validate_redirect_url(next_loc):
        rurl = next_loc
    else:
        rurl = get_url(config_value("POST_LOGIN_VIEW"))
    (scheme, netloc, path, query, fragment) = urlsplit(rurl)
    return urlunsplit((scheme, netloc, quote(path), query, fragment))
