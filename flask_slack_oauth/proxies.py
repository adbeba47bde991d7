# Copyright 2024 by the Flask-Slack-OAuth authors. All rights reserved.

import typing as t

from flask import current_app
from werkzeug.local import LocalProxy

if t.TYPE_CHECKING:  # pragma: no cover
    from .glue import SlackOAuth

# Convenient references
_slack_oauth: "SlackOAuth" = LocalProxy(  # type: ignore
    lambda: current_app.extensions["slack_oauth"]
)
