"""Tests for EnvCredentialStore."""

import pytest

from slack_socket_trigger.credentials.abc import MissingCredentialError
from slack_socket_trigger.credentials.env import EnvCredentialStore


class TestEnvCredentialStore:
    """Tests for reading credentials from the environment."""

    def test_reads_all_fields(self) -> None:
        store = EnvCredentialStore(
            environ={
                "SLACK_BOT_TOKEN": "xoxb-env",
                "SLACK_APP_TOKEN": "xapp-env",
                "SLACK_SIGNING_SECRET": "secret-env",
            }
        )

        assert store.get("slackSocketCredentialsApi") == {
            "botToken": "xoxb-env",
            "appToken": "xapp-env",
            "signingSecret": "secret-env",
        }

    def test_signing_secret_is_optional(self) -> None:
        store = EnvCredentialStore(
            environ={"SLACK_BOT_TOKEN": "xoxb-env", "SLACK_APP_TOKEN": "xapp-env"}
        )

        assert "signingSecret" not in store.get("slackSocketCredentialsApi")

    def test_missing_app_token_raises(self) -> None:
        store = EnvCredentialStore(environ={"SLACK_BOT_TOKEN": "xoxb-env"})

        with pytest.raises(MissingCredentialError):
            store.get("slackSocketCredentialsApi")

    def test_unknown_credential_type_raises(self) -> None:
        store = EnvCredentialStore(environ={})

        with pytest.raises(MissingCredentialError, match="githubApi"):
            store.get("githubApi")

    def test_defaults_to_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-process")
        monkeypatch.setenv("SLACK_APP_TOKEN", "xapp-process")

        values = EnvCredentialStore().get("slackSocketCredentialsApi")

        assert values["botToken"] == "xoxb-process"
