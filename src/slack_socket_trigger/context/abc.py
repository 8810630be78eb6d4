"""Abstract interface to the workflow host a trigger runs inside."""

import logging
from abc import ABC, abstractmethod
from typing import Any

from slack_socket_trigger.types import TriggerMode

WorkflowItem = dict[str, Any]


def return_json_array(data: dict[str, Any] | list[dict[str, Any]]) -> list[WorkflowItem]:
    """Wrap one or more JSON objects as host items.

    Args:
        data: A single object or a list of objects

    Returns:
        List of {"json": object} items
    """
    if isinstance(data, list):
        return [{"json": item} for item in data]
    return [{"json": data}]


class TriggerContext(ABC):
    """Functions the workflow host exposes to a trigger node.

    A context is bound to one node instance in one workflow. Contexts
    share no state with each other.
    """

    @abstractmethod
    def get_credentials(self, name: str) -> dict[str, str]:
        """Fetch stored credentials for the node.

        Args:
            name: The credential type name

        Returns:
            Mapping of credential field name to value
        """
        ...

    @abstractmethod
    def get_node_parameter(self, name: str, default: Any = None) -> Any:
        """Read a node parameter configured by the user.

        Args:
            name: Parameter name from the node description
            default: Returned when the parameter is unset

        Returns:
            The configured value, or default
        """
        ...

    @abstractmethod
    def get_mode(self) -> TriggerMode:
        """Return "trigger" for an activated workflow, "manual" for a test run."""
        ...

    @abstractmethod
    def emit(self, data: list[list[WorkflowItem]]) -> None:
        """Start a workflow run with the given output data.

        Args:
            data: One list of items per node output
        """
        ...

    @property
    @abstractmethod
    def logger(self) -> logging.Logger:
        """Logger provided by the host for this node."""
        ...
