"""Real implementation of SlackSocketApp using Slack Bolt Socket Mode."""

import logging
from typing import Any

from slack_bolt import Ack, App, BoltContext
from slack_bolt.adapter.socket_mode import SocketModeHandler

from slack_socket_trigger.socket_app.abc import Matcher, SlackSocketApp
from slack_socket_trigger.types import Listener, ListenerArgs, SlackCredential

logger = logging.getLogger(__name__)


class RealSlackSocketApp(SlackSocketApp):
    """Production implementation using Slack Bolt's Socket Mode.

    Bolt runs listeners on its own worker threads and owns framing,
    heartbeats and reconnection. This class only adapts Bolt's keyword
    injection to ListenerArgs and drives the handler lifecycle.

    Attributes:
        credential: Tokens for the Bolt app and the Socket Mode handler
    """

    def __init__(self, credential: SlackCredential) -> None:
        """Create the Bolt app without contacting Slack.

        The bot token is verified in start() so that a bad token surfaces
        as a start failure.

        Args:
            credential: Bot token, app token and signing secret
        """
        self._credential = credential
        self._app = App(
            token=credential.bot_token,
            signing_secret=credential.signing_secret,
            token_verification_enabled=False,
        )
        self._handler: SocketModeHandler | None = None

    @property
    def bolt_app(self) -> App:
        """The underlying Bolt app; the Socket Mode handler dispatches into it."""
        return self._app

    @classmethod
    def from_credential(cls, credential: SlackCredential) -> "RealSlackSocketApp":
        return cls(credential)

    def command(self, matcher: Matcher, listener: Listener) -> None:
        self._app.command(matcher)(_adapt(listener))

    def event(self, matcher: Matcher, listener: Listener) -> None:
        self._app.event(matcher)(_adapt(listener))

    def action(self, matcher: Matcher, listener: Listener) -> None:
        self._app.action(matcher)(_adapt(listener))

    def start(self) -> None:
        self._app.client.auth_test()
        if self._handler is None:
            self._handler = SocketModeHandler(self._app, self._credential.app_token)
        # connect() returns once the WebSocket is open; start() would block forever
        self._handler.connect()
        logger.debug("Socket Mode connection established")

    def stop(self) -> None:
        if self._handler is None:
            return
        handler = self._handler
        self._handler = None
        handler.close()


def _adapt(listener: Listener):
    """Wrap a Listener as a Bolt listener function.

    Bolt inspects parameter names to decide what to inject, so the names
    below must stay as they are.
    """

    def bolt_listener(
        ack: Ack,
        command: dict[str, Any] | None,
        body: dict[str, Any],
        context: BoltContext,
        payload: dict[str, Any] | None,
    ) -> None:
        listener(
            ListenerArgs(
                ack=ack,
                command=command,
                body=body,
                context=context,
                payload=payload,
            )
        )

    return bolt_listener
