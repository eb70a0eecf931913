"""Main CLI entry point for fxjournal.

This module provides the main click group and lazy loading
of command modules to keep startup fast.
"""

import locale
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger(__name__)


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.

    Command modules are only imported when the command is invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, lazily loading if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]

        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)

        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Lazily load a command from its module path."""
        import importlib

        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)

        attr = getattr(module, cmd_name, None)
        if not isinstance(attr, click.Command):
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(attr)
        return attr


LAZY_SUBCOMMANDS = {
    "login": "fxjournal.cli.auth",
    "logout": "fxjournal.cli.auth",
    # Trade log
    "add": "fxjournal.cli.trades",
    "delete": "fxjournal.cli.trades",
    "trades": "fxjournal.cli.trades",
    # Dashboard
    "stats": "fxjournal.cli.dashboard",
    "pairs": "fxjournal.cli.dashboard",
    # Account growth
    "growth": "fxjournal.cli.growth",
    "capital": "fxjournal.cli.growth",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _setup_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    from fxjournal.config import load_config

    level_name = "DEBUG" if verbose else str(load_config()["logging"]["level"]).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="fxjournal")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """fxjournal - trade journal and performance dashboard for forex traders.

    Log trades with their outcome and emotions, then review win rate,
    profit factor, P&L per pair and account growth.

    \b
    Quick Start:
      fxjournal login                              # Open a session
      fxjournal add -p EURUSD -t Breakout -a 120   # Log a trade
      fxjournal stats                              # View performance
    """
    _setup_logging(verbose)

    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        logger.debug("System collation locale unavailable, using the default")

    ctx.ensure_object(dict)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
