"""
UnifiedPush sender CLI — `unifiedpush` command.

Commands:
  unifiedpush build [options]       Assemble a message and print its payload
  unifiedpush config show|set|...   Manage saved sender defaults
"""

import json
import logging
from pathlib import Path

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
except ImportError:
    raise SystemExit("CLI requires extras: pip install unifiedpush-sender[cli]")

from unifiedpush_sender import __version__
from unifiedpush_sender.models.defaults import MessageDefaults

console = Console()
CONFIG_FILE = Path.home() / ".unifiedpush" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _load_defaults() -> MessageDefaults:
    return MessageDefaults.load(_load_config())


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log builder activity to stderr.")
def main(verbose):
    """UnifiedPush sender CLI — build and inspect push messages."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


# Register subcommands from separate modules
from unifiedpush_sender.cli.build import build_cmd
from unifiedpush_sender.cli.config import config

main.add_command(build_cmd)
main.add_command(config)


if __name__ == "__main__":
    main()
