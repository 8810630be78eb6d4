"""Run a trigger node outside a workflow host."""

import threading
from collections.abc import Callable

from slack_socket_trigger.context.abc import TriggerContext
from slack_socket_trigger.nodes.base import SlackSocketTriggerNode


def wait_forever() -> None:
    """Block the calling thread until it is interrupted (Ctrl+C)."""
    threading.Event().wait()


def run_trigger(
    node: SlackSocketTriggerNode,
    context: TriggerContext,
    wait: Callable[[], None],
) -> None:
    """Set up a trigger, keep it running while wait() blocks, then close it.

    In "manual" mode the connection is opened through the node's manual
    trigger function, as a host does for a test run.

    Args:
        node: The trigger node to run
        context: Host functions for the node
        wait: Blocks for as long as the trigger should listen
    """
    response = node.trigger(context)
    try:
        if context.get_mode() == "manual":
            response.manual_trigger_function()
        wait()
    finally:
        response.close_function()
