"""Type definitions for the Slack Socket Mode triggers.

This module contains immutable dataclasses and literal types shared by
the trigger nodes, the host context and the Socket Mode app wrapper.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Literal

TriggerType = Literal["slashCommand", "events", "interactiveComponent"]
TriggerMode = Literal["trigger", "manual"]

TRIGGER_TYPES: tuple[TriggerType, ...] = ("slashCommand", "events", "interactiveComponent")
DEFAULT_TRIGGER_TYPE: TriggerType = "slashCommand"

SLACK_SOCKET_CREDENTIALS_NAME = "slackSocketCredentialsApi"


@dataclass(frozen=True)
class SlackCredential:
    """Slack app credentials for Socket Mode.

    Attributes:
        bot_token: Bot User OAuth Token (xoxb-...)
        app_token: App-Level Token for Socket Mode (xapp-...)
        signing_secret: Signing secret of the Slack app
    """

    bot_token: str
    app_token: str
    signing_secret: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, str]) -> "SlackCredential":
        """Build a credential from the host's field names.

        Missing fields become empty strings; validation is left to Slack.
        """
        return cls(
            bot_token=data.get("botToken", ""),
            app_token=data.get("appToken", ""),
            signing_secret=data.get("signingSecret", ""),
        )


@dataclass(frozen=True)
class TriggerConfig:
    """Node parameters read once at trigger setup.

    Attributes:
        trigger_type: Which kind of Slack traffic to listen for
        slash_command_name: Command to listen for (e.g., "/deploy"); empty means any
    """

    trigger_type: TriggerType
    slash_command_name: str


@dataclass(frozen=True)
class ListenerArgs:
    """Arguments handed to a registered listener for one inbound request.

    Fields the SDK did not supply for this kind of request are None.

    Attributes:
        ack: Acknowledges the request to Slack; must be called once
        command: Slash command payload
        body: Full request body
        context: Per-request context built by the SDK
        payload: The part of the body specific to the listener kind
    """

    ack: Callable[[], Any]
    command: dict[str, Any] | None
    body: dict[str, Any] | None
    context: Mapping[str, Any] | None
    payload: dict[str, Any] | None

    def event_fields(self) -> dict[str, Any]:
        """Return the supplied event fields, omitting those that are None."""
        fields = {
            "command": self.command,
            "body": self.body,
            "context": self.context,
            "payload": self.payload,
        }
        return {key: value for key, value in fields.items() if value is not None}


Listener = Callable[[ListenerArgs], None]


@dataclass(frozen=True)
class TriggerResponse:
    """Lifecycle hooks a trigger hands back to the host.

    Attributes:
        close_function: Closes the Socket Mode connection
        manual_trigger_function: Starts the connection for a test run
    """

    close_function: Callable[[], None]
    manual_trigger_function: Callable[[], None]

