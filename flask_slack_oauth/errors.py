"""
    flask_slack_oauth.errors
    ~~~~~~~~~~~~~~~~~~~~~~~~

    Errors raised while resolving a Slack token or fetching the user profile.

    They all derive from authlib's OAuthError so that a failed handshake and
    a failed adapter step can be handled in one place.

    :copyright: (c) 2024 by the Flask-Slack-OAuth authors.
    :license: MIT, see LICENSE for more details.
"""

from __future__ import annotations

import typing as t

from authlib.integrations.base_client.errors import OAuthError


class SlackOAuthError(OAuthError):
    """Base class for all adapter errors.

    :param description: human readable reason for the failure.
    :param cause: the underlying exception, if any.
    """

    error = "slack_oauth_error"
    default_description = "Slack authentication failed"

    def __init__(
        self, description: str | None = None, cause: BaseException | None = None
    ):
        super().__init__(description=description or self.default_description)
        self.cause = cause

    @property
    def reason(self) -> str:
        return t.cast(str, self.description)


class MissingAccessToken(SlackOAuthError):
    error = "missing_access_token"
    default_description = "No access token returned"


class ProfileContextUnavailable(SlackOAuthError):
    error = "profile_unavailable"
    default_description = "Failed to fetch user profile"


class ProfileTransportError(SlackOAuthError):
    """The profile request itself failed - network error or an HTTP error
    status. If the error body carried a provider message it is the reason."""

    error = "profile_transport_error"
    default_description = "Failed to fetch user profile"


class ProfileParseError(SlackOAuthError):
    error = "profile_parse_error"
    default_description = "Failed to parse user profile"


class ProfileProviderError(SlackOAuthError):
    """Well formed response with ``ok`` false. The reason is Slack's
    error code (e.g. ``invalid_auth``)."""

    error = "profile_provider_error"
    default_description = "Slack returned an error for the user profile"
