"""CLI: unifiedpush build"""

import json
from typing import Any, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from unifiedpush_sender.builders.state import Builder
from unifiedpush_sender.errors import UnifiedPushError
from unifiedpush_sender.models.defaults import MessageDefaults
from unifiedpush_sender.unified_message import UnifiedMessage

console = Console()


def _load_defaults() -> MessageDefaults:
    from unifiedpush_sender.cli.main import _load_defaults
    return _load_defaults()


def _parse_pairs(ctx, param, values) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}")
        pairs[key] = value
    return pairs


def _json_default(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _format_value(value: Any) -> str:
    if isinstance(value, (set, frozenset)):
        return ", ".join(sorted(value))
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, default=_json_default)
    return str(value)


def assemble(
    defaults: Optional[MessageDefaults] = None,
    *,
    alert: Optional[str] = None,
    sound: Optional[str] = None,
    badge: Optional[str] = None,
    content_available: bool = False,
    action_category: Optional[str] = None,
    simple_push: Optional[str] = None,
    user_data: Optional[dict[str, str]] = None,
    attributes: Optional[dict[str, str]] = None,
    aliases: tuple[str, ...] = (),
    variants: tuple[str, ...] = (),
    categories: tuple[str, ...] = (),
    device_types: tuple[str, ...] = (),
    ttl: Optional[int] = None,
) -> UnifiedMessage:
    """Build a message from CLI options, on top of the saved defaults."""
    builder = Builder()
    if defaults is not None:
        defaults.apply(builder)

    if alert is not None:
        builder.message().alert(alert)
    if sound is not None:
        builder.message().sound(sound)
    if badge is not None:
        builder.message().badge(badge)
    if content_available:
        builder.message().content_available()
    if action_category is not None:
        builder.message().action_category(action_category)
    if simple_push is not None:
        builder.message().simple_push(simple_push)
    for key, value in (user_data or {}).items():
        builder.message().user_data(key, value)
    if attributes:
        builder.message().merge_attributes(attributes)

    if aliases:
        builder.criteria().aliases(aliases)
    if variants:
        builder.criteria().variants(variants)
    if categories:
        builder.criteria().categories(categories)
    if device_types:
        builder.criteria().device_type(device_types)

    if ttl is not None:
        builder.config().time_to_live(ttl)
    return builder.build()


@click.command("build")
@click.option("--alert", default=None, help="Alert text.")
@click.option("--sound", default=None, help="Sound file name, i.e. 'default'.")
@click.option("--badge", default=None, help="Badge number.")
@click.option("--content-available", is_flag=True, help="Mark as a silent / content-available push.")
@click.option("--action-category", default=None)
@click.option("--simple-push", default=None, help="SimplePush version, i.e. 'version=5'.")
@click.option("--user-data", multiple=True, callback=_parse_pairs, metavar="KEY=VALUE")
@click.option("--attribute", "attributes", multiple=True, callback=_parse_pairs, metavar="KEY=VALUE")
@click.option("--alias", "aliases", multiple=True)
@click.option("--variant", "variants", multiple=True)
@click.option("--category", "categories", multiple=True)
@click.option("--device-type", "device_types", multiple=True)
@click.option("--ttl", default=None, type=int, help="Time to live in seconds.")
@click.option("--no-defaults", is_flag=True, help="Ignore saved sender defaults.")
@click.option("--json-output", "--json", is_flag=True)
def build_cmd(no_defaults, json_output, **options):
    """Assemble a push message and print its payload."""
    try:
        defaults = None if no_defaults else _load_defaults()
        message = assemble(defaults, **options)
    except UnifiedPushError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    payload = message.to_payload()
    if json_output:
        click.echo(json.dumps(payload, indent=2, default=_json_default))
        return
    if not payload:
        console.print("[yellow]Nothing set — the message is empty.[/yellow]")
        return
    for group, attributes in payload.items():
        table = Table(title=group)
        table.add_column("Key", style="bold")
        table.add_column("Value")
        for key, value in attributes.items():
            table.add_row(escape(key), escape(_format_value(value)))
        console.print(table)
