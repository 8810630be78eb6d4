"""Credential store backed by a TOML file."""

import tomllib
from pathlib import Path

from slack_socket_trigger.credentials.abc import CredentialStore, MissingCredentialError


class TomlCredentialStore(CredentialStore):
    """Reads credentials from tables in a TOML file.

    Example credentials.toml:
      [slackSocketCredentialsApi]
      botToken = "xoxb-..."
      appToken = "xapp-..."
      signingSecret = "..."

    Attributes:
        path: Path to the TOML file
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    def get(self, name: str) -> dict[str, str]:
        if not self._path.exists():
            raise MissingCredentialError(name)

        data = tomllib.loads(self._path.read_text(encoding="utf-8"))
        table = data.get(name)
        if not isinstance(table, dict):
            raise MissingCredentialError(name)
        return {str(key): str(value) for key, value in table.items()}
