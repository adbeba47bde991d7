"""
    flask_slack_oauth.profile
    ~~~~~~~~~~~~~~~~~~~~~~~~~

    Fetch the Slack user profile after the token exchange.

    :copyright: (c) 2024 by the Flask-Slack-OAuth authors.
    :license: MIT, see LICENSE for more details.
"""

from __future__ import annotations

import collections.abc as cabc
import json
import typing as t

import requests

from .errors import (
    ProfileContextUnavailable,
    ProfileParseError,
    ProfileProviderError,
    ProfileTransportError,
)
from .utils import transform_url

if t.TYPE_CHECKING:  # pragma: no cover
    from authlib.integrations.flask_client import FlaskOAuth2App
    from .token_resolver import TokenResult


def provider_error_reason(
    body: t.Any, keys: cabc.Sequence[str] = ("message", "error")
) -> str | None:
    """Return the reason Slack gave in an error envelope, if any.

    Slack uses ``error`` for codes (``{"ok": false, "error": "invalid_auth"}``)
    while gateway and HTTP error bodies tend to use ``message``. ``keys``
    gives the lookup order.
    """
    if not isinstance(body, cabc.Mapping):
        return None
    for key in keys:
        if body.get(key):
            return body[key]
    return None


def _load_json(text: str | bytes | None) -> t.Any:
    if not text:
        raise ValueError("empty body")
    return json.loads(text)


class ProfileFetcher:
    """Issue the single profile lookup.

    :param profile_url: The profile endpoint. ``users.identity`` by default;
     ``users.info`` works too since both accept ``user=<id>``.
    """

    def __init__(self, profile_url: str):
        self.profile_url = profile_url

    def profile_request_url(self, context: cabc.Mapping[str, t.Any]) -> str:
        return transform_url(self.profile_url, {"user": str(context["id"])})

    def fetch(self, client: FlaskOAuth2App, result: TokenResult) -> dict[str, t.Any]:
        """Fetch and validate the profile for the user in ``result``.

        :param client: the authlib client registered for Slack.
        :param result: the per-attempt token exchange result.
        :raises ProfileContextUnavailable: no ``authed_user`` was recorded.
        :raises ProfileTransportError: the request failed.
        :raises ProfileParseError: the body isn't JSON.
        :raises ProfileProviderError: Slack answered ``ok: false``.
        """
        context = result.profile_context
        if not context or not context.get("id"):
            raise ProfileContextUnavailable()

        access_token = context.get("access_token") or result.access_token
        url = self.profile_request_url(context)
        try:
            resp = client.get(
                url, token={"access_token": access_token, "token_type": "bearer"}
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            raise self._transport_failure(e) from e

        try:
            body = _load_json(resp.content)
        except ValueError as e:
            raise ProfileParseError(cause=e) from e
        if not isinstance(body, cabc.Mapping):
            raise ProfileParseError()

        if not body.get("ok"):
            raise ProfileProviderError(
                provider_error_reason(body, keys=("error", "message"))
            )
        return dict(body)

    @staticmethod
    def _transport_failure(e: requests.RequestException) -> ProfileTransportError:
        body = None
        if e.response is not None:
            try:
                body = _load_json(e.response.content)
            except ValueError:
                pass
        return ProfileTransportError(provider_error_reason(body), cause=e)
