"""Slack Dash Trigger node."""

from slack_socket_trigger.description import TRIGGER_PROPERTIES, NodeCredential, NodeDescription
from slack_socket_trigger.nodes.base import SlackSocketTriggerNode
from slack_socket_trigger.types import SLACK_SOCKET_CREDENTIALS_NAME


class SlackSocketDashTrigger(SlackSocketTriggerNode):
    """Triggers a workflow when the dash bot receives a Slack request.

    A failure to open the connection is re-raised to the host.
    """

    description = NodeDescription(
        display_name="Slack Dash Trigger",
        name="slackSocketDashTrigger",
        description="Triggers workflow when a dash bot event gets triggered",
        icon="file:./assets/slack-dash.svg",
        defaults={"name": "Slack Dash Trigger"},
        credentials=(NodeCredential(name=SLACK_SOCKET_CREDENTIALS_NAME, required=True),),
        properties=TRIGGER_PROPERTIES,
    )
    propagate_start_errors = True
