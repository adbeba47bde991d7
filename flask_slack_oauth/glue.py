"""
    flask_slack_oauth.glue
    ~~~~~~~~~~~~~~~~~~~~~~

    Glue the Slack provider to a Flask app: authlib registration, the login
    start and callback views, and Flask-Login session identity.

    :copyright: (c) 2024 by the Flask-Slack-OAuth authors.
    :license: MIT, see LICENSE for more details.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as t

from authlib.integrations.base_client.errors import OAuthError
from authlib.integrations.flask_client import OAuth
from flask import Blueprint, abort, current_app, redirect, request, session
from flask_login import login_user

from .config import SlackOAuthConfig, _default_config, _default_messages
from .errors import SlackOAuthError
from .provider import SlackOAuthProvider
from .proxies import _slack_oauth
from .signals import slack_auth_failed, slack_authenticated
from .utils import (
    config_value as cv,
    get_post_login_redirect,
    url_for_slack,
)
from .verify import VerifyCbType

if t.TYPE_CHECKING:  # pragma: no cover
    import flask
    from flask.typing import ResponseValue

LoginHandlerType = cabc.Callable[[t.Any], t.Any]


def slack_login() -> ResponseValue:
    """View to start a Slack authentication.
    We never want to return here - some providers match on the entire
    redirect url - so 'next' is kept in the session.
    """
    session.pop("slack_oauth_next", None)
    if request.args.get("next"):
        session["slack_oauth_next"] = request.args.get("next")
    return _slack_oauth.get_redirect()


def slack_callback() -> ResponseValue:
    """
    Callback from Slack.
    N.B. all successful responses are redirects.
    """
    provider = _slack_oauth.provider
    client = _slack_oauth.authlib_provider
    if not client:  # pragma: no cover
        abort(404)
    try:
        outcome = provider.authenticate(client, request)
    except OAuthError as e:
        slack_auth_failed.send(current_app._get_current_object(), error=e, info=None)
        return provider.oauth_response_failure(e)

    if not outcome.completed:
        error: OAuthError | None = SlackOAuthError("Verify callback did not complete")
    elif outcome.error is not None and not isinstance(outcome.error, OAuthError):
        error = SlackOAuthError(str(outcome.error), cause=outcome.error)
    else:
        error = outcome.error
    if error is not None or not outcome.identity:
        slack_auth_failed.send(
            current_app._get_current_object(), error=error, info=outcome.info
        )
        return provider.oauth_response_failure(error)

    _slack_oauth.login_handler(outcome.identity)
    slack_authenticated.send(
        current_app._get_current_object(),
        identity=outcome.identity,
        info=outcome.info,
    )
    next_loc = session.pop("slack_oauth_next", None)
    return redirect(get_post_login_redirect(next_loc))


def _default_login_handler(identity: t.Any) -> None:
    login_user(identity, remember=cv("REMEMBER"))


class SlackOAuth:
    """
    Provide the glue between a Flask app, Flask-Login and authlib's oauth
    client for Slack's "Sign in with Slack" (OAuth v2).

    :param app: The application.
    :param verify: The verify callback - can also be set with
     :py:meth:`verify_handler`.
    :param oauth: An existing authlib OAuth registry. If the provider is
     already registered there (under `SLACK_OAUTH_PROVIDER_NAME`) it is used
     as is.
    :param login_handler: Called with the verified identity. Defaults to
     Flask-Login's ``login_user``.
    :param provider_cls: Subclass of :py:class:`SlackOAuthProvider` to use.

    See `Flask OAuth Client <https://docs.authlib.org/en/latest/client/flask.html>`_
    """

    def __init__(
        self,
        app: flask.Flask | None = None,
        verify: VerifyCbType | None = None,
        oauth: OAuth | None = None,
        login_handler: LoginHandlerType | None = None,
        provider_cls: type[SlackOAuthProvider] = SlackOAuthProvider,
    ):
        self._verify = verify
        self.oauth = oauth
        self.login_handler: LoginHandlerType = login_handler or _default_login_handler
        self.provider_cls = provider_cls
        self.provider: SlackOAuthProvider
        self.config: SlackOAuthConfig

        if app is not None:
            self.init_app(app)

    def init_app(self, app: flask.Flask, **kwargs: t.Any) -> None:
        """Initializes the extension for the specified application.

        :param kwargs: ``verify``, ``oauth`` and ``login_handler`` override
         what was passed to the constructor.
        """
        for key, value in _default_config.items():
            app.config.setdefault("SLACK_OAUTH_" + key, value)

        for key, value in _default_messages.items():
            app.config.setdefault("SLACK_OAUTH_MSG_" + key, value)

        for attr in ["oauth", "login_handler"]:
            if ov := kwargs.get(attr):
                setattr(self, attr, ov)
        if kwargs.get("verify"):
            self._verify = kwargs["verify"]

        if not self.oauth:
            self.oauth = OAuth(app)
        self.config = SlackOAuthConfig.from_app(app)
        self.provider = self.provider_cls(
            cv("PROVIDER_NAME", app=app), self.config, verify=self._verify
        )
        if not getattr(self.oauth, self.provider.name, None):
            self.oauth.register(self.provider.name, **self.provider.authlib_config())

        app.register_blueprint(self._create_blueprint(app))
        app.extensions["slack_oauth"] = self

    def _create_blueprint(self, app: flask.Flask) -> Blueprint:
        bp = Blueprint(
            cv("BLUEPRINT_NAME", app=app),
            __name__,
            url_prefix=cv("URL_PREFIX", app=app),
            subdomain=cv("SUBDOMAIN", app=app),
        )
        bp.route(cv("LOGIN_URL", app=app), methods=["GET"], endpoint="login")(
            slack_login
        )
        bp.route(
            cv("CALLBACK_URL_PATH", app=app), methods=["GET"], endpoint="callback"
        )(slack_callback)
        return bp

    def verify_handler(self, fn: VerifyCbType) -> VerifyCbType:
        """Decorator to set the verify callback::

            @slack_oauth.verify_handler
            def verify(access_token, params, profile, done):
                done(None, User.find(profile["user"]["id"]))
        """
        self._verify = fn
        if hasattr(self, "provider"):
            self.provider.set_verify(fn)
        return fn

    @property
    def authlib_provider(self):
        return getattr(self.oauth, self.provider.name, None)

    def callback_url(self) -> str:
        return self.config.callback_url or url_for_slack("callback", _external=True)

    def get_redirect(self, **values: t.Any) -> ResponseValue:
        """Redirect to Slack's authorization page.

        :param values: per-request authorization parameters - ``user_scope``
         and ``extra_params`` as understood by
         :py:meth:`SlackOAuthProvider.authorization_params`.
        """
        params = self.provider.authorization_params(
            user_scope=values.get("user_scope"),
            extra_params=values.get("extra_params"),
        )
        return self.authlib_provider.authorize_redirect(self.callback_url(), **params)
