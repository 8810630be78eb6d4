"""Fake implementation of CredentialStore for testing."""

from slack_socket_trigger.credentials.abc import CredentialStore, MissingCredentialError


class FakeCredentialStore(CredentialStore):
    """In-memory credential store.

    Example:
        >>> store = FakeCredentialStore({"slackSocketCredentialsApi": {"botToken": "xoxb-1"}})
        >>> store.get("slackSocketCredentialsApi")["botToken"]
        'xoxb-1'
    """

    def __init__(self, credentials: dict[str, dict[str, str]] | None = None) -> None:
        self._credentials = dict(credentials) if credentials is not None else {}
        self._lookups: list[str] = []

    def get(self, name: str) -> dict[str, str]:
        self._lookups.append(name)
        if name not in self._credentials:
            raise MissingCredentialError(name)
        return dict(self._credentials[name])

    @property
    def lookups(self) -> list[str]:
        """Names passed to get(), in call order."""
        return list(self._lookups)
