"""Tests for run_trigger."""

import pytest

from slack_socket_trigger.app import run_trigger
from slack_socket_trigger.context.fake import FakeTriggerContext
from slack_socket_trigger.nodes.dash import SlackSocketDashTrigger
from slack_socket_trigger.nodes.v2 import SlackSocketTriggerV2Trigger
from slack_socket_trigger.socket_app.fake import FakeSlackSocketApp

CREDENTIALS = {"slackSocketCredentialsApi": {"botToken": "xoxb-1", "appToken": "xapp-1"}}


class TestRunTrigger:
    """Tests for the local trigger runner."""

    def test_trigger_mode_starts_once_and_closes(self) -> None:
        app = FakeSlackSocketApp()
        context = FakeTriggerContext(credentials=CREDENTIALS, mode="trigger")
        states: list[bool] = []

        run_trigger(
            SlackSocketDashTrigger(app_factory=app.factory),
            context,
            wait=lambda: states.append(app.started),
        )

        assert states == [True]
        assert app.start_calls == 1
        assert app.stop_calls == 1

    def test_manual_mode_starts_through_manual_function(self) -> None:
        app = FakeSlackSocketApp()
        context = FakeTriggerContext(credentials=CREDENTIALS, mode="manual")

        run_trigger(SlackSocketDashTrigger(app_factory=app.factory), context, wait=lambda: None)

        assert app.start_calls == 1
        assert app.stop_calls == 1

    def test_forwards_events_while_waiting(self) -> None:
        app = FakeSlackSocketApp()
        context = FakeTriggerContext(
            credentials=CREDENTIALS, parameters={"triggerType": "events"}, mode="trigger"
        )

        run_trigger(
            SlackSocketTriggerV2Trigger(app_factory=app.factory),
            context,
            wait=lambda: app.dispatch_event("app_mention"),
        )

        assert len(context.emitted) == 1

    def test_closes_when_wait_is_interrupted(self) -> None:
        app = FakeSlackSocketApp()
        context = FakeTriggerContext(credentials=CREDENTIALS, mode="trigger")

        def interrupt() -> None:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            run_trigger(SlackSocketDashTrigger(app_factory=app.factory), context, wait=interrupt)

        assert app.stop_calls == 1

    def test_dash_start_failure_closes_before_raising(self) -> None:
        """trigger() raises before hooks exist, so the node closes the app itself."""
        app = FakeSlackSocketApp(start_error=ConnectionError("invalid_auth"))
        context = FakeTriggerContext(credentials=CREDENTIALS, mode="trigger")

        with pytest.raises(ConnectionError):
            run_trigger(SlackSocketDashTrigger(app_factory=app.factory), context, wait=lambda: None)

        assert app.stop_calls == 1
