"""Trigger node implementations and the registry the runner looks them up in."""

from slack_socket_trigger.nodes.base import SlackSocketTriggerNode
from slack_socket_trigger.nodes.dash import SlackSocketDashTrigger
from slack_socket_trigger.nodes.v2 import SlackSocketTriggerV2Trigger


class UnknownNodeError(Exception):
    """Raised when no node is registered under the requested name."""


NODE_TYPES: dict[str, type[SlackSocketTriggerNode]] = {
    SlackSocketDashTrigger.description.name: SlackSocketDashTrigger,
    SlackSocketTriggerV2Trigger.description.name: SlackSocketTriggerV2Trigger,
}


def get_node_type(name: str) -> type[SlackSocketTriggerNode]:
    """Look up a node class by its description name.

    Raises:
        UnknownNodeError: If name is not registered
    """
    node_type = NODE_TYPES.get(name)
    if node_type is None:
        known = ", ".join(sorted(NODE_TYPES))
        raise UnknownNodeError(f"Unknown node '{name}' (known: {known})")
    return node_type


__all__ = [
    "NODE_TYPES",
    "SlackSocketDashTrigger",
    "SlackSocketTriggerNode",
    "SlackSocketTriggerV2Trigger",
    "UnknownNodeError",
    "get_node_type",
]
