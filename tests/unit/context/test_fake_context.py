"""Tests for FakeTriggerContext and return_json_array."""

import pytest

from slack_socket_trigger.context.abc import return_json_array
from slack_socket_trigger.context.fake import FakeTriggerContext
from slack_socket_trigger.credentials.abc import MissingCredentialError


class TestReturnJsonArray:
    """Tests for wrapping objects as host items."""

    def test_wraps_single_object(self) -> None:
        assert return_json_array({"a": 1}) == [{"json": {"a": 1}}]

    def test_wraps_each_object_in_list(self) -> None:
        assert return_json_array([{"a": 1}, {"b": 2}]) == [{"json": {"a": 1}}, {"json": {"b": 2}}]


class TestFakeTriggerContext:
    """Tests for FakeTriggerContext."""

    def test_parameter_falls_back_to_default(self) -> None:
        context = FakeTriggerContext(parameters={"triggerType": "events"})

        assert context.get_node_parameter("triggerType", "slashCommand") == "events"
        assert context.get_node_parameter("slashCommandName", "") == ""

    def test_missing_credentials_raise(self) -> None:
        context = FakeTriggerContext()

        with pytest.raises(MissingCredentialError):
            context.get_credentials("slackSocketCredentialsApi")

    def test_mode_defaults_to_trigger(self) -> None:
        assert FakeTriggerContext().get_mode() == "trigger"

    def test_records_emissions_in_order(self) -> None:
        context = FakeTriggerContext()

        context.emit([[{"json": {"n": 1}}]])
        context.emit([[{"json": {"n": 2}}]])

        assert [batch[0][0]["json"]["n"] for batch in context.emitted] == [1, 2]
