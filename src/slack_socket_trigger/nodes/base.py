"""Shared setup routine for the Slack Socket Mode trigger nodes."""

import re
from collections.abc import Callable
from typing import ClassVar

from slack_socket_trigger.context.abc import TriggerContext, return_json_array
from slack_socket_trigger.description import NodeDescription
from slack_socket_trigger.socket_app.abc import Matcher, SlackSocketApp
from slack_socket_trigger.socket_app.real import RealSlackSocketApp
from slack_socket_trigger.types import (
    DEFAULT_TRIGGER_TYPE,
    SLACK_SOCKET_CREDENTIALS_NAME,
    TRIGGER_TYPES,
    ListenerArgs,
    SlackCredential,
    TriggerConfig,
    TriggerResponse,
)

AppFactory = Callable[[SlackCredential], SlackSocketApp]

ANY = re.compile(".*")


class InvalidTriggerTypeError(Exception):
    """Raised when the triggerType parameter holds an unknown value."""


class SlackSocketTriggerNode:
    """Trigger node that forwards Slack Socket Mode traffic into a workflow.

    Subclasses provide the node description and decide whether a failure
    to open the connection propagates to the host.
    """

    description: ClassVar[NodeDescription]
    propagate_start_errors: ClassVar[bool]

    def __init__(self, app_factory: AppFactory | None = None) -> None:
        """Initialize the node.

        Args:
            app_factory: Builds the Socket Mode app from credentials
                (defaults to the Bolt-backed implementation)
        """
        self._app_factory = app_factory or RealSlackSocketApp.from_credential

    def trigger(self, context: TriggerContext) -> TriggerResponse:
        """Connect to Slack and forward every matching request to the host.

        Listeners are registered before the connection opens. In "trigger"
        mode the connection opens immediately; in "manual" mode the host
        opens it through manual_trigger_function.

        Args:
            context: The host functions for this node instance

        Returns:
            TriggerResponse with the close and manual trigger hooks
        """
        credential = SlackCredential.from_mapping(
            context.get_credentials(SLACK_SOCKET_CREDENTIALS_NAME)
        )
        app = self._app_factory(credential)
        config = read_trigger_config(context)

        def process(args: ListenerArgs) -> None:
            # Slack reports dispatch_failed when the ack is missing or late
            args.ack()
            context.emit([return_json_array(args.event_fields())])

        register_listener(app, config, process)

        def start(mode_label: str) -> None:
            try:
                app.start()
                context.logger.info("Started Slack Socket app in %s mode", mode_label)
            except Exception:
                context.logger.error(
                    "Error starting Slack Socket app in %s mode", mode_label, exc_info=True
                )
                if self.propagate_start_errors:
                    # The host gets no close_function back, so close here
                    try:
                        app.stop()
                    except Exception:
                        context.logger.error(
                            "Error stopping Slack Socket app after failed start", exc_info=True
                        )
                    raise

        if context.get_mode() == "trigger":
            start("trigger")

        def manual_trigger_function() -> None:
            start("test")

        def close_function() -> None:
            try:
                app.stop()
                context.logger.info("Stopped Slack Socket app")
            except Exception:
                context.logger.error("Error stopping Slack Socket app", exc_info=True)

        return TriggerResponse(
            close_function=close_function,
            manual_trigger_function=manual_trigger_function,
        )


def read_trigger_config(context: TriggerContext) -> TriggerConfig:
    """Read the node parameters that select which requests to forward.

    Raises:
        InvalidTriggerTypeError: If triggerType is not a known value
    """
    trigger_type = context.get_node_parameter("triggerType", DEFAULT_TRIGGER_TYPE)
    if trigger_type not in TRIGGER_TYPES:
        raise InvalidTriggerTypeError(f"Unknown trigger type: {trigger_type!r}")
    slash_command_name = context.get_node_parameter("slashCommandName", "") or ""
    return TriggerConfig(
        trigger_type=trigger_type,
        slash_command_name=str(slash_command_name).strip(),
    )


def register_listener(
    app: SlackSocketApp,
    config: TriggerConfig,
    listener: Callable[[ListenerArgs], None],
) -> None:
    """Register exactly one listener for the configured trigger type."""
    if config.trigger_type == "slashCommand":
        matcher: Matcher = config.slash_command_name or ANY
        app.command(matcher, listener)
    elif config.trigger_type == "events":
        app.event(ANY, listener)
    else:
        app.action(ANY, listener)
