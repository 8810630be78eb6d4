"""Credential store backed by environment variables."""

import os
from collections.abc import Mapping

from slack_socket_trigger.credentials.abc import CredentialStore, MissingCredentialError
from slack_socket_trigger.types import SLACK_SOCKET_CREDENTIALS_NAME

# credential type -> {field name: environment variable}
ENV_VARIABLES: dict[str, dict[str, str]] = {
    SLACK_SOCKET_CREDENTIALS_NAME: {
        "botToken": "SLACK_BOT_TOKEN",
        "appToken": "SLACK_APP_TOKEN",
        "signingSecret": "SLACK_SIGNING_SECRET",
    },
}


class EnvCredentialStore(CredentialStore):
    """Reads credentials from environment variables.

    Environment variables:
        SLACK_BOT_TOKEN: Bot User OAuth Token (xoxb-...)
        SLACK_APP_TOKEN: App-Level Token for Socket Mode (xapp-...)
        SLACK_SIGNING_SECRET: Signing secret of the Slack app
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Initialize the store.

        Args:
            environ: Environment to read from (defaults to os.environ)
        """
        self._environ = environ if environ is not None else os.environ

    def get(self, name: str) -> dict[str, str]:
        variables = ENV_VARIABLES.get(name)
        if variables is None:
            raise MissingCredentialError(name)

        values = {
            field_name: self._environ[var]
            for field_name, var in variables.items()
            if var in self._environ
        }
        # An unset signing secret is tolerated; Socket Mode does not sign requests
        if "botToken" not in values or "appToken" not in values:
            raise MissingCredentialError(name)
        return values
