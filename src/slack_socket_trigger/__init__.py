"""Slack Socket Mode trigger nodes.

This package provides workflow trigger nodes that listen to Slack via
Socket Mode and emit each inbound event into the workflow host. See
`slack-socket-trigger --help` for the local runner.
"""

from slack_socket_trigger.cli import cli


def main() -> None:
    """CLI entry point used by the `slack-socket-trigger` console script."""
    cli()
