"""
    conftest
    ~~~~~~~~

    Test fixtures and what not

    :copyright: (c) 2024 by the Flask-Slack-OAuth authors.
    :license: MIT, see LICENSE for more details.
"""

import typing as t

import pytest
from flask import Flask, Response
from flask_login import LoginManager, current_user, login_required

from flask_slack_oauth import SlackOAuth

from tests.test_utils import USERS, MockOAuth

if t.TYPE_CHECKING:  # pragma: no cover
    from flask.testing import FlaskClient


class SlackFixture(Flask):
    slack_oauth: SlackOAuth
    verify_calls: list


@pytest.fixture()
def app(request: pytest.FixtureRequest) -> "SlackFixture":
    app = SlackFixture(__name__)
    app.response_class = Response
    app.debug = True
    app.config["SECRET_KEY"] = "secret"
    app.config["TESTING"] = True
    app.config["SLACK_OAUTH_CLIENT_ID"] = "123-456-789"
    app.config["SLACK_OAUTH_CLIENT_SECRET"] = "shhh-its-a-secret"

    marker_getter = request.node.get_closest_marker

    # Override config settings as requested for this test
    settings = marker_getter("settings")
    if settings is not None:
        for key, value in settings.kwargs.items():
            app.config["SLACK_OAUTH_" + key.upper()] = value
    settings = marker_getter("app_settings")
    if settings is not None:
        for key, value in settings.kwargs.items():
            app.config[key.upper()] = value

    login_manager = LoginManager(app)

    @login_manager.user_loader
    def load_user(user_id):
        return USERS.get(user_id)

    @app.route("/")
    def index():
        return "Home Page"

    @app.route("/profile")
    @login_required
    def profile():
        return f"Profile Page {current_user.name}"

    @app.route("/post_login")
    @login_required
    def post_login():
        return "Post Login"

    @app.route("/login-error")
    def login_error():
        return "Login Error"

    return app


def _default_verify(app):
    app.verify_calls = []

    def verify(access_token, params, profile, done):
        app.verify_calls.append((access_token, params, profile))
        user_id = profile["user"]["id"] if profile else params["authed_user"]["id"]
        done(None, USERS.get(user_id))

    return verify


@pytest.fixture()
def slack_app(app: "SlackFixture") -> "SlackFixture":
    app.slack_oauth = SlackOAuth(app, verify=_default_verify(app), oauth=MockOAuth())
    return app


@pytest.fixture()
def client(slack_app: "SlackFixture") -> "FlaskClient":
    return slack_app.test_client()


@pytest.fixture()
def mock_client(slack_app):
    return slack_app.slack_oauth.authlib_provider
