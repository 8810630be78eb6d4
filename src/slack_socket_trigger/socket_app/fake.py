"""Fake implementation of SlackSocketApp for testing."""

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

from slack_socket_trigger.socket_app.abc import Matcher, SlackSocketApp
from slack_socket_trigger.types import Listener, ListenerArgs, SlackCredential

ListenerKind = Literal["command", "event", "action"]


@dataclass(frozen=True)
class Registration:
    """Record of a listener registration for test assertions.

    Attributes:
        kind: Which registration method was called
        matcher: The matcher passed to it
        listener: The registered listener
        before_start: Whether the app had not been started yet
    """

    kind: ListenerKind
    matcher: Matcher
    listener: Listener
    before_start: bool


class FakeAck:
    """Counts acknowledgements for one dispatched request."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


class FakeSlackSocketApp(SlackSocketApp):
    """Fake app that records registrations and dispatches simulated requests.

    Matching follows the SDK: a string matcher must equal the value, a
    regex matcher must find a match anywhere in it.

    Example:
        >>> app = FakeSlackSocketApp()
        >>> app.command("/deploy", handle)
        >>> app.dispatch_command("/deploy", text="prod")
        1
    """

    def __init__(
        self,
        start_error: Exception | None = None,
        stop_error: Exception | None = None,
    ) -> None:
        self._start_error = start_error
        self._stop_error = stop_error
        self._registrations: list[Registration] = []
        self._credentials: list[SlackCredential] = []
        self._start_calls = 0
        self._stop_calls = 0
        self._started = False

    def factory(self, credential: SlackCredential) -> "FakeSlackSocketApp":
        """App factory that records the credential and returns this app."""
        self._credentials.append(credential)
        return self

    def command(self, matcher: Matcher, listener: Listener) -> None:
        self._register("command", matcher, listener)

    def event(self, matcher: Matcher, listener: Listener) -> None:
        self._register("event", matcher, listener)

    def action(self, matcher: Matcher, listener: Listener) -> None:
        self._register("action", matcher, listener)

    def start(self) -> None:
        self._start_calls += 1
        if self._start_error is not None:
            raise self._start_error
        self._started = True

    def stop(self) -> None:
        self._stop_calls += 1
        if self._stop_error is not None:
            raise self._stop_error
        self._started = False

    def dispatch_command(
        self,
        command: str,
        text: str = "",
        ack: Callable[[], Any] | None = None,
    ) -> int:
        """Simulate a slash command request.

        Returns:
            Number of listeners invoked
        """
        body = {
            "command": command,
            "text": text,
            "team_id": "T12345",
            "channel_id": "C12345",
            "user_id": "U12345",
        }
        args = ListenerArgs(
            ack=ack or FakeAck(),
            command=body,
            body=body,
            context={"team_id": "T12345"},
            payload=body,
        )
        return self._dispatch("command", command, args)

    def dispatch_event(
        self,
        event_type: str,
        event: dict[str, Any] | None = None,
        ack: Callable[[], Any] | None = None,
    ) -> int:
        """Simulate an Events API request.

        Returns:
            Number of listeners invoked
        """
        payload = {"type": event_type, **(event or {})}
        body = {"type": "event_callback", "team_id": "T12345", "event": payload}
        args = ListenerArgs(
            ack=ack or FakeAck(),
            command=None,
            body=body,
            context={"team_id": "T12345"},
            payload=payload,
        )
        return self._dispatch("event", event_type, args)

    def dispatch_action(
        self,
        action_id: str,
        value: str | None = None,
        ack: Callable[[], Any] | None = None,
    ) -> int:
        """Simulate a block_actions request.

        Returns:
            Number of listeners invoked
        """
        action: dict[str, Any] = {"action_id": action_id, "type": "button"}
        if value is not None:
            action["value"] = value
        body = {"type": "block_actions", "team": {"id": "T12345"}, "actions": [action]}
        args = ListenerArgs(
            ack=ack or FakeAck(),
            command=None,
            body=body,
            context={"team_id": "T12345"},
            payload=action,
        )
        return self._dispatch("action", action_id, args)

    @property
    def registrations(self) -> list[Registration]:
        """Read-only access to recorded registrations."""
        return list(self._registrations)

    @property
    def credentials(self) -> list[SlackCredential]:
        """Credentials passed to factory(), in call order."""
        return list(self._credentials)

    @property
    def start_calls(self) -> int:
        return self._start_calls

    @property
    def stop_calls(self) -> int:
        return self._stop_calls

    @property
    def started(self) -> bool:
        return self._started

    def _register(self, kind: ListenerKind, matcher: Matcher, listener: Listener) -> None:
        self._registrations.append(
            Registration(
                kind=kind,
                matcher=matcher,
                listener=listener,
                before_start=not self._started,
            )
        )

    def _dispatch(self, kind: ListenerKind, value: str, args: ListenerArgs) -> int:
        # Like the SDK, only the first matching listener runs
        for registration in self._registrations:
            if registration.kind == kind and _matches(registration.matcher, value):
                registration.listener(args)
                return 1
        return 0


def _matches(matcher: Matcher, value: str) -> bool:
    if isinstance(matcher, re.Pattern):
        return matcher.search(value) is not None
    return matcher == value
