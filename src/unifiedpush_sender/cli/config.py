"""CLI: unifiedpush config show|set|unset|reset"""

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from unifiedpush_sender.errors import UnifiedPushError
from unifiedpush_sender.models.defaults import MessageDefaults

console = Console()


def _load_config() -> dict:
    from unifiedpush_sender.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from unifiedpush_sender.cli.main import _save_config
    _save_config(cfg)


def _store(cfg: dict) -> MessageDefaults:
    try:
        defaults = MessageDefaults.load(cfg)
    except UnifiedPushError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)
    _save_config(defaults.model_dump(exclude_none=True))
    return defaults


@click.group()
def config():
    """Saved sender defaults."""


@config.command("show")
@click.option("--json-output", "--json", is_flag=True)
def config_show(json_output):
    """Show saved defaults."""
    cfg = _load_config()
    if json_output:
        click.echo(json.dumps(cfg, indent=2))
        return
    if not cfg:
        console.print("[yellow]No defaults saved.[/yellow]")
        return
    table = Table(title="Sender defaults")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in cfg.items():
        table.add_row(escape(key), escape(", ".join(str(v) for v in value) if isinstance(value, list) else str(value)))
    console.print(table)


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key, value):
    """Save a default. List values are comma-separated."""
    _store({**_load_config(), key: value})
    console.print(f"[green]Saved {escape(key)}.[/green]")


@config.command("unset")
@click.argument("key")
def config_unset(key):
    """Remove a saved default."""
    cfg = _load_config()
    if key not in cfg:
        console.print(f"[yellow]{escape(key)} is not set.[/yellow]")
        return
    del cfg[key]
    _store(cfg)
    console.print(f"[green]Removed {escape(key)}.[/green]")


@config.command("reset")
def config_reset():
    """Clear all saved defaults."""
    _save_config({})
    console.print("[green]Defaults cleared.[/green]")
