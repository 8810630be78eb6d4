"""Declarative node and credential descriptions.

The workflow host renders these descriptions as the node's settings form.
Both trigger nodes share the same property list and credential type.
"""

from dataclasses import asdict, dataclass
from typing import Any

from slack_socket_trigger.types import DEFAULT_TRIGGER_TYPE, SLACK_SOCKET_CREDENTIALS_NAME


@dataclass(frozen=True)
class PropertyOption:
    """One entry of an options-typed property."""

    name: str
    value: str
    description: str


@dataclass(frozen=True)
class NodeProperty:
    """A user-facing field in the host's property schema.

    Attributes:
        display_name: Label shown in the host UI
        name: Parameter name used by get_node_parameter()
        type: Field type ("options", "string")
        default: Value used when the user leaves the field untouched
        description: Help text
        options: Choices for options-typed fields
        placeholder: Hint text for string fields
        type_options: Extra rendering hints (e.g., {"password": True})
        display_options: {"show": {param: [values]}} visibility rules
    """

    display_name: str
    name: str
    type: str
    default: Any
    description: str
    options: tuple[PropertyOption, ...] = ()
    placeholder: str | None = None
    type_options: dict[str, Any] | None = None
    display_options: dict[str, dict[str, list[str]]] | None = None


@dataclass(frozen=True)
class NodeCredential:
    """A credential type a node requires."""

    name: str
    required: bool


@dataclass(frozen=True)
class NodeDescription:
    """Static description of a trigger node."""

    display_name: str
    name: str
    description: str
    icon: str
    defaults: dict[str, str]
    credentials: tuple[NodeCredential, ...]
    properties: tuple[NodeProperty, ...]
    group: tuple[str, ...] = ("trigger",)
    version: int = 1
    inputs: tuple[str, ...] = ()
    outputs: tuple[str, ...] = ("main",)

    def to_dict(self) -> dict[str, Any]:
        return _camelize(asdict(self))


@dataclass(frozen=True)
class CredentialTypeDescription:
    """Static description of a credential type stored by the host."""

    name: str
    display_name: str
    properties: tuple[NodeProperty, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return _camelize(asdict(self))


def is_property_visible(prop: NodeProperty, parameters: dict[str, Any]) -> bool:
    """Evaluate a property's display_options against current parameter values.

    A property without display_options is always visible. Otherwise every
    parameter listed under "show" must currently hold one of its values.
    """
    if prop.display_options is None:
        return True
    show = prop.display_options.get("show", {})
    for param_name, allowed in show.items():
        if parameters.get(param_name) not in allowed:
            return False
    return True


def _camelize(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            _to_camel(key): _camelize(item)
            for key, item in value.items()
            if item is not None
        }
    if isinstance(value, (list, tuple)):
        return [_camelize(item) for item in value]
    return value


def _to_camel(key: str) -> str:
    # Parameter names inside display_options are already camelCase
    if "_" not in key:
        return key
    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)


TRIGGER_PROPERTIES: tuple[NodeProperty, ...] = (
    NodeProperty(
        display_name="Trigger Type",
        name="triggerType",
        type="options",
        options=(
            PropertyOption(
                name="Slash Command",
                value="slashCommand",
                description=(
                    "Trigger when a specific Slack slash command is invoked (e.g., /mycommand)"
                ),
            ),
            PropertyOption(
                name="Events",
                value="events",
                description=(
                    "Trigger on various Slack events (e.g., app_mention, message, user_change)"
                ),
            ),
            PropertyOption(
                name="Interactive Component (Actions)",
                value="interactiveComponent",
                description=(
                    "Trigger on user interactions with buttons, select menus, etc. "
                    "(block_actions)."
                ),
            ),
        ),
        default=DEFAULT_TRIGGER_TYPE,
        description=(
            "Select whether to trigger on Slack events, slash commands, or interactive components"
        ),
    ),
    NodeProperty(
        display_name="Slash Command",
        name="slashCommandName",
        type="string",
        default="",
        placeholder="/yourcommand",
        description=(
            "The full slash command to listen for (e.g., /mycommand). "
            "Leave empty to listen for any command."
        ),
        display_options={"show": {"triggerType": ["slashCommand"]}},
    ),
)

SLACK_SOCKET_CREDENTIALS = CredentialTypeDescription(
    name=SLACK_SOCKET_CREDENTIALS_NAME,
    display_name="Slack Socket Mode API",
    properties=(
        NodeProperty(
            display_name="Bot Token",
            name="botToken",
            type="string",
            default="",
            description="Bot User OAuth Token (xoxb-...)",
            type_options={"password": True},
        ),
        NodeProperty(
            display_name="App Token",
            name="appToken",
            type="string",
            default="",
            description="App-Level Token with connections:write scope (xapp-...)",
            type_options={"password": True},
        ),
        NodeProperty(
            display_name="Signing Secret",
            name="signingSecret",
            type="string",
            default="",
            description="Signing secret from the Slack app's Basic Information page",
            type_options={"password": True},
        ),
    ),
)
