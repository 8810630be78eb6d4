"""Abstract interface over the Slack Socket Mode SDK."""

import re
from abc import ABC, abstractmethod

from slack_socket_trigger.types import Listener

Matcher = str | re.Pattern[str]


class SlackSocketApp(ABC):
    """Abstract interface for a Slack app connected via Socket Mode.

    Implementations own the connection. Listeners must be registered
    before start(); each registered listener receives ListenerArgs for
    every request its matcher accepts.
    """

    @abstractmethod
    def command(self, matcher: Matcher, listener: Listener) -> None:
        """Register a listener for slash commands.

        Args:
            matcher: Exact command name (e.g., "/deploy") or a regex
            listener: Called for each matching command
        """
        ...

    @abstractmethod
    def event(self, matcher: Matcher, listener: Listener) -> None:
        """Register a listener for Events API events.

        Args:
            matcher: Exact event type (e.g., "app_mention") or a regex
            listener: Called for each matching event
        """
        ...

    @abstractmethod
    def action(self, matcher: Matcher, listener: Listener) -> None:
        """Register a listener for interactive component actions.

        Args:
            matcher: Exact action_id or a regex
            listener: Called for each matching block action
        """
        ...

    @abstractmethod
    def start(self) -> None:
        """Open the Socket Mode connection.

        Returns once connected; events are delivered on SDK threads.
        """
        ...

    @abstractmethod
    def stop(self) -> None:
        """Close the Socket Mode connection."""
        ...
