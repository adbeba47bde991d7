"""
    flask_slack_oauth.token_resolver
    ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

    Slack's v2 token exchange can return two kinds of token: a workspace (bot)
    token at the top level and a user token nested under ``authed_user``.
    Which ones are populated depends on the requested scopes - if only user
    scopes were requested the top level ``access_token`` is absent.

    The resolver wraps the base code-for-token exchange and picks the
    effective access token. The ``authed_user`` object is carried forward
    in the returned :py:class:`TokenResult` so the profile fetch can use it.

    :copyright: (c) 2024 by the Flask-Slack-OAuth authors.
    :license: MIT, see LICENSE for more details.
"""

from __future__ import annotations

import collections.abc as cabc
from dataclasses import dataclass
import functools
import typing as t

from .errors import MissingAccessToken

ExchangeType = cabc.Callable[..., cabc.Mapping[str, t.Any]]


@dataclass(frozen=True)
class TokenResult:
    """Outcome of one token exchange. Created per authentication attempt."""

    access_token: str
    refresh_token: str | None
    params: cabc.Mapping[str, t.Any]
    #: The nested ``authed_user`` object - id, scope and (maybe) its own token.
    profile_context: cabc.Mapping[str, t.Any] | None = None


def resolve_token(params: cabc.Mapping[str, t.Any] | None) -> TokenResult:
    """Pick the effective access token out of a token exchange response.

    :raises MissingAccessToken: if neither a top level nor an
     ``authed_user`` access token is present.
    """
    params = params or {}
    authed_user = params.get("authed_user")
    if not isinstance(authed_user, cabc.Mapping):
        authed_user = None

    access_token = params.get("access_token")
    if not access_token:
        # Could be a user token and not a bot token
        if authed_user and authed_user.get("access_token"):
            access_token = authed_user["access_token"]
        else:
            raise MissingAccessToken()

    return TokenResult(
        access_token=access_token,
        refresh_token=params.get("refresh_token"),
        params=params,
        profile_context=authed_user,
    )


class TokenResolver:
    """Compose token resolution around a base exchange callable."""

    def exchange(self, fetch: ExchangeType, **kwargs: t.Any) -> TokenResult:
        """Call ``fetch`` (usually authlib's ``authorize_access_token``)
        and resolve what it returns. Errors from ``fetch`` propagate."""
        return resolve_token(fetch(**kwargs))

    def __call__(self, fetch: ExchangeType) -> cabc.Callable[..., TokenResult]:
        @functools.wraps(fetch)
        def wrapper(**kwargs: t.Any) -> TokenResult:
            return self.exchange(fetch, **kwargs)

        return wrapper


resolving_exchange = TokenResolver()
