"""Slack Socket Mode Trigger (V2) node."""

from slack_socket_trigger.description import TRIGGER_PROPERTIES, NodeCredential, NodeDescription
from slack_socket_trigger.nodes.base import SlackSocketTriggerNode
from slack_socket_trigger.types import SLACK_SOCKET_CREDENTIALS_NAME


class SlackSocketTriggerV2Trigger(SlackSocketTriggerNode):
    """Triggers a workflow for Slack requests received via Socket Mode.

    Unlike SlackSocketDashTrigger, a failure to open the connection is
    only logged. Whether the two nodes should differ here is undecided;
    see DESIGN.md.
    """

    description = NodeDescription(
        display_name="Slack Socket Mode Trigger / V2 Trigger",
        name="slackSocketTriggerV2Trigger",
        description="Triggers workflow when a Slack message matches a regex pattern via Socket Mode",
        icon="file:./assets/slack-socket-mode.svg",
        defaults={"name": "Slack Socket Mode Trigger"},
        credentials=(NodeCredential(name=SLACK_SOCKET_CREDENTIALS_NAME, required=True),),
        properties=TRIGGER_PROPERTIES,
    )
    propagate_start_errors = False
