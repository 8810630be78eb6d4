"""Tests for FakeSlackSocketApp."""

import re

import pytest

from slack_socket_trigger.socket_app.fake import FakeAck, FakeSlackSocketApp
from slack_socket_trigger.types import ListenerArgs


class TestFakeSlackSocketApp:
    """Tests for FakeSlackSocketApp."""

    def test_dispatch_without_listeners_invokes_nothing(self) -> None:
        app = FakeSlackSocketApp()

        assert app.dispatch_command("/deploy") == 0
        assert app.dispatch_event("message") == 0
        assert app.dispatch_action("button") == 0

    def test_string_matcher_requires_exact_match(self) -> None:
        app = FakeSlackSocketApp()
        received: list[ListenerArgs] = []
        app.command("/deploy", received.append)

        app.dispatch_command("/deploy")
        app.dispatch_command("/deploy2")

        assert len(received) == 1

    def test_regex_matcher_searches(self) -> None:
        app = FakeSlackSocketApp()
        received: list[ListenerArgs] = []
        app.event(re.compile("mention"), received.append)

        app.dispatch_event("app_mention")
        app.dispatch_event("message")

        assert [args.payload["type"] for args in received] == ["app_mention"]

    def test_only_first_matching_listener_runs(self) -> None:
        app = FakeSlackSocketApp()
        first: list[ListenerArgs] = []
        second: list[ListenerArgs] = []
        app.command(re.compile(".*"), first.append)
        app.command("/deploy", second.append)

        app.dispatch_command("/deploy")

        assert len(first) == 1
        assert second == []

    def test_command_args_match_sdk_shape(self) -> None:
        app = FakeSlackSocketApp()
        received: list[ListenerArgs] = []
        app.command("/deploy", received.append)

        app.dispatch_command("/deploy", text="prod")

        args = received[0]
        assert args.command is args.body
        assert args.payload is args.body
        assert args.command["text"] == "prod"

    def test_action_payload_is_the_action(self) -> None:
        app = FakeSlackSocketApp()
        received: list[ListenerArgs] = []
        app.action("approve", received.append)

        app.dispatch_action("approve")

        args = received[0]
        assert args.command is None
        assert args.body["type"] == "block_actions"
        assert args.payload == {"action_id": "approve", "type": "button"}

    def test_records_registration_before_and_after_start(self) -> None:
        app = FakeSlackSocketApp()
        app.command("/a", lambda args: None)
        app.start()
        app.command("/b", lambda args: None)

        assert [r.before_start for r in app.registrations] == [True, False]

    def test_start_error_is_raised_and_counted(self) -> None:
        app = FakeSlackSocketApp(start_error=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            app.start()

        assert app.start_calls == 1
        assert app.started is False

    def test_stop_error_is_raised_and_counted(self) -> None:
        app = FakeSlackSocketApp(stop_error=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            app.stop()

        assert app.stop_calls == 1

    def test_default_ack_counts_calls(self) -> None:
        ack = FakeAck()

        ack()
        ack()

        assert ack.calls == 2
