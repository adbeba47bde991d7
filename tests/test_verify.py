"""
    test_verify
    ~~~~~~~~~~~

    Verify callback adaptation

    :copyright: (c) 2024 by the Flask-Slack-OAuth authors.
    :license: MIT, see LICENSE for more details.
"""

from flask_slack_oauth import VerifyOutcome, wrap_verify


def test_without_request():
    calls = []

    def verify(*args):
        calls.append(args)
        args[-1](None, "user")

    done = VerifyOutcome()
    wrap_verify(verify)("req", "T1", "R1", {"p": 1}, {"ok": True}, done)
    assert calls == [("T1", {"p": 1}, {"ok": True}, done)]
    assert done.succeeded
    assert done.identity == "user"


def test_with_request():
    calls = []

    def verify(*args):
        calls.append(args)
        args[-1](None, "user", {"message": "welcome"})

    done = VerifyOutcome()
    wrap_verify(verify, pass_request=True)("req", "T1", "R1", {}, None, done)
    assert calls == [("req", "T1", {}, None, done)]
    assert done.info == {"message": "welcome"}


def test_outcome():
    done = VerifyOutcome()
    assert not done.completed
    assert not done.succeeded

    error = ValueError("nope")
    done(error)
    assert done.completed
    assert done.error is error
    assert not done.succeeded

    # only the first report counts
    done(None, "user")
    assert done.error is error
    assert done.identity is None


def test_outcome_no_identity():
    done = VerifyOutcome()
    done(None, False, {"message": "unknown user"})
    assert done.completed
    assert not done.succeeded
    assert done.info == {"message": "unknown user"}
