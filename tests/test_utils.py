"""
    test_utils
    ~~~~~~~~~~

    Test utils - mock authlib registry/client and requests responses

    :copyright: (c) 2024 by the Flask-Slack-OAuth authors.
    :license: MIT, see LICENSE for more details.
"""

import json
import urllib.parse
from contextlib import contextmanager

import requests
from flask import redirect
from flask_login import UserMixin

from flask_slack_oauth.signals import slack_auth_failed, slack_authenticated


class User(UserMixin):
    def __init__(self, id, name):
        self.id = id
        self.name = name


USERS = {"U123": User("U123", "matt")}


class MockRequestsResponse:
    # authlib returns a Requests Response
    def __init__(self, contents=None, status_code=200, text=None):
        if text is None:
            text = json.dumps(contents)
        self.content = text.encode() if isinstance(text, str) else text
        self.status_code = status_code

    def json(self):
        return json.loads(self.content)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class MockSlackClient:
    """Stands in for authlib's FlaskOAuth2App registered as 'slack'."""

    def __init__(self, name):
        self.name = name
        self.raise_exception = None
        self.token = {"access_token": "xoxb-T1", "authed_user": {"id": "U123"}}
        self.profile_response = MockRequestsResponse(
            {"ok": True, "user": {"id": "U123", "name": "matt"}, "team": {"id": "T1"}}
        )
        self.requests = []
        self.exchange_kwargs = []

    def set_exception(self, raise_exception):
        self.raise_exception = raise_exception

    def set_token(self, token):
        self.token = token

    def set_profile_response(self, response):
        self.profile_response = response

    def authorize_access_token(self, **kwargs):
        self.exchange_kwargs.append(kwargs)
        if self.raise_exception:
            raise self.raise_exception
        return self.token

    def get(self, url, token=None, **kwargs):
        self.requests.append((url, token))
        if isinstance(self.profile_response, Exception):
            raise self.profile_response
        return self.profile_response

    def authorize_redirect(self, uri, **kwargs):
        qparams = dict(redirect_uri=uri, **kwargs)
        return redirect(f"/whatever?{urllib.parse.urlencode(qparams)}")


class MockOAuth:
    def __init__(self):
        self.registrations = {}

    def register(self, name, **kwargs):
        self.registrations[name] = kwargs
        setattr(self, name, MockSlackClient(name))


@contextmanager
def capture_signals():
    """Collect (signal name, kwargs) for authentication signals."""
    recorded = []

    def _authenticated(app, **kwargs):
        recorded.append(("authenticated", kwargs))

    def _failed(app, **kwargs):
        recorded.append(("failed", kwargs))

    slack_authenticated.connect(_authenticated)
    slack_auth_failed.connect(_failed)
    try:
        yield recorded
    finally:
        slack_authenticated.disconnect(_authenticated)
        slack_auth_failed.disconnect(_failed)


def get_redirect_qparams(location):
    split = urllib.parse.urlsplit(location)
    return dict(urllib.parse.parse_qsl(split.query))
