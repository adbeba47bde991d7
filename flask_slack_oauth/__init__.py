"""
    flask_slack_oauth
    ~~~~~~~~~~~~~~~~~

    Flask-Slack-OAuth is a Flask extension adding "Sign in with Slack"
    (OAuth v2) via authlib and Flask-Login.

    :copyright: (c) 2024 by the Flask-Slack-OAuth authors.
    :license: MIT, see LICENSE for more details.
"""

# flake8: noqa: F401
from .config import SlackOAuthConfig
from .errors import (
    SlackOAuthError,
    MissingAccessToken,
    ProfileContextUnavailable,
    ProfileTransportError,
    ProfileParseError,
    ProfileProviderError,
)
from .glue import SlackOAuth
from .profile import ProfileFetcher, provider_error_reason
from .provider import SlackOAuthProvider
from .signals import slack_authenticated, slack_auth_failed
from .token_resolver import (
    TokenResolver,
    TokenResult,
    resolve_token,
    resolving_exchange,
)
from .verify import VerifyOutcome, wrap_verify

__version__ = "1.0.0"
