"""Fake implementation of TriggerContext for testing."""

import logging
import threading
from typing import Any

from slack_socket_trigger.context.abc import TriggerContext, WorkflowItem
from slack_socket_trigger.credentials.abc import MissingCredentialError
from slack_socket_trigger.types import TriggerMode


class FakeTriggerContext(TriggerContext):
    """Fake host that serves pre-configured values and records emissions.

    Example:
        >>> context = FakeTriggerContext(
        ...     credentials={"slackSocketCredentialsApi": {"botToken": "xoxb-1"}},
        ...     parameters={"triggerType": "events"},
        ... )
        >>> context.emit([[{"json": {"body": {}}}]])
        >>> len(context.emitted)
        1
    """

    def __init__(
        self,
        credentials: dict[str, dict[str, str]] | None = None,
        parameters: dict[str, Any] | None = None,
        mode: TriggerMode = "trigger",
        logger: logging.Logger | None = None,
    ) -> None:
        self._credentials = dict(credentials) if credentials is not None else {}
        self._parameters = dict(parameters) if parameters is not None else {}
        self._mode = mode
        self._logger = logger or logging.getLogger("slack_socket_trigger.fake_context")
        self._emitted: list[list[list[WorkflowItem]]] = []
        self._lock = threading.Lock()

    def get_credentials(self, name: str) -> dict[str, str]:
        if name not in self._credentials:
            raise MissingCredentialError(name)
        return dict(self._credentials[name])

    def get_node_parameter(self, name: str, default: Any = None) -> Any:
        return self._parameters.get(name, default)

    def get_mode(self) -> TriggerMode:
        return self._mode

    def emit(self, data: list[list[WorkflowItem]]) -> None:
        # Socket Mode listeners run on SDK worker threads
        with self._lock:
            self._emitted.append(data)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def emitted(self) -> list[list[list[WorkflowItem]]]:
        """Read-only access to emitted batches.

        Returns:
            Copy of the emitted batches, in emission order
        """
        with self._lock:
            return list(self._emitted)
