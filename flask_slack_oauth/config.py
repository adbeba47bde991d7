"""
    flask_slack_oauth.config
    ~~~~~~~~~~~~~~~~~~~~~~~~

    Default configuration and the immutable per-extension configuration
    object.

    :copyright: (c) 2024 by the Flask-Slack-OAuth authors.
    :license: MIT, see LICENSE for more details.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import typing as t

from .utils import config_value as cv

if t.TYPE_CHECKING:  # pragma: no cover
    import flask

SLACK_AUTHORIZATION_URL = "https://slack.com/oauth/v2/authorize"
SLACK_TOKEN_URL = "https://slack.com/api/oauth.v2.access"
SLACK_PROFILE_URL = "https://slack.com/api/users.identity"

#: Default Flask-Slack-OAuth configuration
_default_config: dict[str, t.Any] = {
    "PROVIDER_NAME": "slack",
    "BLUEPRINT_NAME": "slack_oauth",
    "URL_PREFIX": None,
    "SUBDOMAIN": None,
    "LOGIN_URL": "/slack/login",
    "CALLBACK_URL_PATH": "/slack/callback",
    "CLIENT_ID": None,
    "CLIENT_SECRET": None,
    "CALLBACK_URL": None,
    "AUTHORIZATION_URL": SLACK_AUTHORIZATION_URL,
    "TOKEN_URL": SLACK_TOKEN_URL,
    "PROFILE_URL": SLACK_PROFILE_URL,
    "SCOPE_SEPARATOR": ",",
    "CUSTOM_HEADERS": {},
    "SCOPE": [],
    "USER_SCOPE": ["identity.basic"],
    "EXTRA_PARAMS": {},
    "PASS_REQUEST_TO_CALLBACK": False,
    "SKIP_USER_PROFILE": False,
    "POST_LOGIN_VIEW": "/",
    "FAILURE_VIEW": None,
    "FLASH_MESSAGES": True,
    "REMEMBER": False,
}

#: Default Flask-Slack-OAuth messages
_default_messages: dict[str, tuple[str, str]] = {
    "HANDSHAKE_ERROR": (
        "An error occurred while communicating with Slack: "
        "%(exerror)s - %(exdesc)s",
        "error",
    ),
    "IDENTITY_REJECTED": ("Slack sign in was not accepted.", "error"),
}


@dataclass(frozen=True)
class SlackOAuthConfig:
    """Endpoint URLs, client credentials and flow options for one
    Slack provider. Built once - typically by :py:meth:`from_app`.

    :param callback_url: Where Slack redirects after the authorization grant.
     If None, the extension's own callback view is used.
    :param scope_separator: Slack expects comma separated scopes rather than
     the OAuth2 standard space.
    :param user_scope: Default user-level scopes requested in addition to
     ``scope``.
    :param custom_headers: Extra HTTP headers sent with the token exchange.
    :param pass_request_to_callback: If True the verify callback receives the
     request as its first argument.
    """

    client_id: str | None = None
    client_secret: str | None = None
    callback_url: str | None = None
    authorization_url: str = SLACK_AUTHORIZATION_URL
    token_url: str = SLACK_TOKEN_URL
    profile_url: str = SLACK_PROFILE_URL
    scope_separator: str = ","
    scope: tuple[str, ...] = ()
    user_scope: tuple[str, ...] = ()
    extra_params: t.Mapping[str, t.Any] = field(default_factory=dict)
    custom_headers: t.Mapping[str, str] = field(default_factory=dict)
    pass_request_to_callback: bool = False
    skip_user_profile: bool = False

    @classmethod
    def from_app(cls, app: flask.Flask) -> SlackOAuthConfig:
        return cls(
            client_id=cv("CLIENT_ID", app=app),
            client_secret=cv("CLIENT_SECRET", app=app),
            callback_url=cv("CALLBACK_URL", app=app),
            authorization_url=cv("AUTHORIZATION_URL", app=app),
            token_url=cv("TOKEN_URL", app=app),
            profile_url=cv("PROFILE_URL", app=app),
            scope_separator=cv("SCOPE_SEPARATOR", app=app),
            scope=tuple(cv("SCOPE", app=app) or ()),
            user_scope=tuple(cv("USER_SCOPE", app=app) or ()),
            extra_params=dict(cv("EXTRA_PARAMS", app=app) or {}),
            custom_headers=dict(cv("CUSTOM_HEADERS", app=app) or {}),
            pass_request_to_callback=bool(cv("PASS_REQUEST_TO_CALLBACK", app=app)),
            skip_user_profile=bool(cv("SKIP_USER_PROFILE", app=app)),
        )

    @property
    def scope_string(self) -> str | None:
        if not self.scope:
            return None
        return self.scope_separator.join(self.scope)
