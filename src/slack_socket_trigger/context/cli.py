"""TriggerContext for running a trigger node from the command line."""

import json
import logging
from typing import Any

import click

from slack_socket_trigger.context.abc import TriggerContext, WorkflowItem
from slack_socket_trigger.credentials.abc import CredentialStore
from slack_socket_trigger.types import TriggerMode


class CliTriggerContext(TriggerContext):
    """Standalone host that prints every emitted item as a JSON line.

    Parameters come from command-line options, credentials from a
    CredentialStore. Values that are not JSON serializable (such as the
    SDK's client objects inside the request context) are rendered with
    str().
    """

    def __init__(
        self,
        node_name: str,
        credential_store: CredentialStore,
        parameters: dict[str, Any],
        mode: TriggerMode,
    ) -> None:
        self._credential_store = credential_store
        self._parameters = parameters
        self._mode = mode
        self._logger = logging.getLogger(f"slack_socket_trigger.node.{node_name}")

    def get_credentials(self, name: str) -> dict[str, str]:
        return self._credential_store.get(name)

    def get_node_parameter(self, name: str, default: Any = None) -> Any:
        return self._parameters.get(name, default)

    def get_mode(self) -> TriggerMode:
        return self._mode

    def emit(self, data: list[list[WorkflowItem]]) -> None:
        for output in data:
            for item in output:
                click.echo(json.dumps(item.get("json", item), default=str, sort_keys=True))

    @property
    def logger(self) -> logging.Logger:
        return self._logger
