"""
    flask_slack_oauth.provider
    ~~~~~~~~~~~~~~~~~~~~~~~~~~

    The Slack provider - authlib registration, authorization parameters and
    the resolve token -> fetch profile -> verify sequence.

    :copyright: (c) 2024 by the Flask-Slack-OAuth authors.
    :license: MIT, see LICENSE for more details.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as t

from authlib.integrations.base_client.errors import OAuthError
from flask import abort, current_app, redirect

from .config import SlackOAuthConfig
from .profile import ProfileFetcher
from .token_resolver import TokenResolver
from .utils import config_value as cv, do_flash, get_message, get_url
from .verify import VerifyCbType, VerifyOutcome, wrap_verify

# authlib's defaults for the token request
TOKEN_REQUEST_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/x-www-form-urlencoded;charset=UTF-8",
}

if t.TYPE_CHECKING:  # pragma: no cover
    from authlib.integrations.flask_client import FlaskOAuth2App
    from flask import Request
    from flask.typing import ResponseValue


class SlackOAuthProvider:
    """
    Subclass this to customize parts of the flow - in particular
    :py:meth:`oauth_response_failure` for a custom error path.

    :param name: name the provider is registered under with authlib's OAuth.
    :param config: endpoint URLs, credentials and flow options.
    :param verify: the application's verify callback.
    """

    def __init__(
        self,
        name: str,
        config: SlackOAuthConfig,
        verify: VerifyCbType | None = None,
    ):
        self.name = name
        self.config = config
        self.token_resolver = TokenResolver()
        self.profile_fetcher = ProfileFetcher(config.profile_url)
        self._verify: VerifyCbType | None = None
        if verify:
            self.set_verify(verify)

    def set_verify(self, verify: VerifyCbType) -> None:
        self._verify = verify
        self._host_verify = wrap_verify(
            verify, pass_request=self.config.pass_request_to_callback
        )

    def authlib_config(self) -> dict[str, t.Any]:
        """Return dict with authlib configuration.
        This is called as part of provider registration."""
        client_kwargs: dict[str, t.Any] = {}
        if self.config.scope_string:
            client_kwargs["scope"] = self.config.scope_string
        info = dict(
            access_token_url=self.config.token_url,
            access_token_params=None,
            authorize_url=self.config.authorization_url,
            authorize_params=None,
            client_kwargs=client_kwargs,
        )
        # Unset credentials are left for authlib to read from app.config
        # (e.g. SLACK_CLIENT_ID).
        if self.config.client_id:
            info["client_id"] = self.config.client_id
        if self.config.client_secret:
            info["client_secret"] = self.config.client_secret
        return info

    def authorization_params(
        self,
        user_scope: cabc.Iterable[str] | None = None,
        extra_params: cabc.Mapping[str, t.Any] | None = None,
    ) -> dict[str, t.Any]:
        """Extra parameters added to the authorization redirect.
        ``user_scope`` is always joined by comma - Slack's format."""
        if extra_params is None:
            extra_params = self.config.extra_params
        if user_scope is None:
            user_scope = self.config.user_scope
        extras = dict(extra_params)
        if user_scope:
            extras["user_scope"] = ",".join(user_scope)
        return extras

    def token_exchange_params(self) -> dict[str, t.Any]:
        """Keyword arguments passed through authlib to the token request.
        Custom headers are merged over authlib's form-post defaults since
        passing ``headers`` replaces them."""
        if not self.config.custom_headers:
            return {}
        headers = dict(TOKEN_REQUEST_HEADERS)
        headers.update(self.config.custom_headers)
        return {"headers": headers}

    def authenticate(self, client: FlaskOAuth2App, request: Request) -> VerifyOutcome:
        """Run one authentication attempt for the current callback request.

        Errors from the token exchange or the profile fetch propagate - they
        are all :py:class:`OAuthError`.
        """
        if not self._verify:
            raise RuntimeError(f"No verify callback set for provider {self.name}")

        result = self.token_resolver.exchange(
            client.authorize_access_token, **self.token_exchange_params()
        )
        profile = None
        if not self.config.skip_user_profile:
            profile = self.profile_fetcher.fetch(client, result)

        done = VerifyOutcome()
        self._host_verify(
            request,
            result.access_token,
            result.refresh_token,
            result.params,
            profile,
            done,
        )
        return done

    def oauth_response_failure(self, e: OAuthError | None) -> ResponseValue:
        """Called if the handshake or the verify callback failed.
        ``e`` is None if the verify callback rejected the identity without
        an error.
        """
        if e is not None:
            current_app.logger.warning("Slack authentication failed: %s", e)
            m, c = get_message("HANDSHAKE_ERROR", exerror=e.error, exdesc=e.description)
        else:
            m, c = get_message("IDENTITY_REJECTED")
        if not cv("FAILURE_VIEW"):
            abort(401)
        do_flash(m, c)
        return redirect(get_url(cv("FAILURE_VIEW")))
