"""
    flask_slack_oauth.signals
    ~~~~~~~~~~~~~~~~~~~~~~~~~

    Flask-Slack-OAuth signals module

    :copyright: (c) 2024 by the Flask-Slack-OAuth authors.
    :license: MIT, see LICENSE for more details.
"""

import blinker

signals = blinker.Namespace()

# sent with identity and info
slack_authenticated = signals.signal("slack-authenticated")

# sent with error (may be None if the verify callback rejected the identity)
# and info
slack_auth_failed = signals.signal("slack-auth-failed")
