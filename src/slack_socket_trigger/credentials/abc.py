"""Abstract interface for the host-managed credential store."""

from abc import ABC, abstractmethod


class MissingCredentialError(Exception):
    """Raised when a credential type has no stored values."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No credentials stored for '{name}'")
        self.name = name


class CredentialStore(ABC):
    """Abstract interface for looking up stored credentials by type name.

    Values are returned as the raw field mapping; callers convert them
    into typed credentials.
    """

    @abstractmethod
    def get(self, name: str) -> dict[str, str]:
        """Get the stored fields for a credential type.

        Args:
            name: The credential type name (e.g., "slackSocketCredentialsApi")

        Returns:
            Mapping of field name to value

        Raises:
            MissingCredentialError: If nothing is stored under name
        """
        ...
