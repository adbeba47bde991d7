"""
    flask_slack_oauth.verify
    ~~~~~~~~~~~~~~~~~~~~~~~~

    Adapt the verify callback the extension calls to the shape the
    application provides.

    The application's callback is one of::

        verify(access_token, params, profile, done)
        verify(request, access_token, params, profile, done)

    and must call ``done(error, identity, info=None)``.

    :copyright: (c) 2024 by the Flask-Slack-OAuth authors.
    :license: MIT, see LICENSE for more details.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as t

VerifyCbType = cabc.Callable[..., t.Any]
HostVerifyType = cabc.Callable[..., None]


class VerifyOutcome:
    """The ``done`` completion signal handed to the verify callback.

    Records the first report; later calls are ignored.
    """

    def __init__(self):
        self.completed = False
        self.error: BaseException | None = None
        self.identity: t.Any = None
        self.info: t.Any = None

    def __call__(
        self, error: BaseException | None, identity: t.Any = None, info: t.Any = None
    ) -> None:
        if self.completed:
            return
        self.completed = True
        self.error = error
        self.identity = identity
        self.info = info

    @property
    def succeeded(self) -> bool:
        return self.completed and self.error is None and bool(self.identity)


def wrap_verify(verify: VerifyCbType, pass_request: bool = False) -> HostVerifyType:
    """Return a callable with the hosting signature
    ``(request, access_token, refresh_token, params, profile, done)``.

    :param verify: the application's verify callback.
    :param pass_request: include the request as the first argument.
    """
    if pass_request:

        def _verify_with_request(
            request, access_token, refresh_token, params, profile, done
        ):
            verify(request, access_token, params, profile, done)

        return _verify_with_request

    def _verify(request, access_token, refresh_token, params, profile, done):
        verify(access_token, params, profile, done)

    return _verify
