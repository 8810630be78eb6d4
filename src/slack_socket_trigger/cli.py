"""Standalone CLI for slack-socket-trigger."""

import json
import logging
from pathlib import Path

import click

from slack_socket_trigger.app import run_trigger, wait_forever
from slack_socket_trigger.context.cli import CliTriggerContext
from slack_socket_trigger.credentials.abc import CredentialStore, MissingCredentialError
from slack_socket_trigger.credentials.env import EnvCredentialStore
from slack_socket_trigger.credentials.toml import TomlCredentialStore
from slack_socket_trigger.description import SLACK_SOCKET_CREDENTIALS
from slack_socket_trigger.nodes import NODE_TYPES, UnknownNodeError, get_node_type
from slack_socket_trigger.nodes.base import InvalidTriggerTypeError, SlackSocketTriggerNode
from slack_socket_trigger.types import DEFAULT_TRIGGER_TYPE, TRIGGER_TYPES

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool) -> None:
    """Run Slack Socket Mode trigger nodes locally."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")


@cli.command("list-nodes")
def list_nodes() -> None:
    """List the available trigger nodes."""
    for name, node_type in sorted(NODE_TYPES.items()):
        click.echo(f"{name}\t{node_type.description.display_name}")


@cli.command("describe")
@click.argument("node_name")
def describe(node_name: str) -> None:
    """Print a node's description and its credential type as JSON."""
    node_type = _resolve_node(node_name)
    output = {
        "node": node_type.description.to_dict(),
        "credentials": [SLACK_SOCKET_CREDENTIALS.to_dict()],
    }
    click.echo(json.dumps(output, indent=2))


@cli.command("run")
@click.argument("node_name")
@click.option(
    "--trigger-type",
    type=click.Choice(TRIGGER_TYPES),
    default=DEFAULT_TRIGGER_TYPE,
    show_default=True,
    help="Which Slack requests start the workflow",
)
@click.option(
    "--command",
    "slash_command_name",
    default="",
    help="Slash command to listen for (e.g., /deploy); empty listens for any command",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="TOML file with a [slackSocketCredentialsApi] table (defaults to environment)",
)
@click.option("--manual", is_flag=True, help="Start the connection as a test run")
def run(
    node_name: str,
    trigger_type: str,
    slash_command_name: str,
    config_path: Path | None,
    manual: bool,
) -> None:
    """Listen to Slack and print each forwarded event as a JSON line.

    Environment variables (when --config is not given):
        SLACK_BOT_TOKEN: Bot User OAuth Token (xoxb-...)
        SLACK_APP_TOKEN: App-Level Token for Socket Mode (xapp-...)
        SLACK_SIGNING_SECRET: Signing secret of the Slack app
    """
    node_type = _resolve_node(node_name)
    credential_store: CredentialStore
    if config_path is not None:
        credential_store = TomlCredentialStore(config_path)
    else:
        credential_store = EnvCredentialStore()

    context = CliTriggerContext(
        node_name=node_name,
        credential_store=credential_store,
        parameters={"triggerType": trigger_type, "slashCommandName": slash_command_name},
        mode="manual" if manual else "trigger",
    )

    click.echo(f"Starting {node_type.description.display_name} ({trigger_type})", err=True)
    click.echo("Listening for events... (Ctrl+C to stop)", err=True)
    try:
        run_trigger(node_type(), context, wait=wait_forever)
    except (MissingCredentialError, InvalidTriggerTypeError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None
    except Exception as e:
        click.echo(f"Error: failed to start Slack Socket app: {e}", err=True)
        raise SystemExit(1) from None
    except KeyboardInterrupt:
        click.echo("Stopped", err=True)


def _resolve_node(node_name: str) -> type[SlackSocketTriggerNode]:
    try:
        return get_node_type(node_name)
    except UnknownNodeError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None


if __name__ == "__main__":
    cli()
