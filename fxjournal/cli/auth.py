"""Login and logout commands for fxjournal.

The login is a gate only: no credentials are checked. It flips a
session flag that the other commands require.
"""

import click
from rich.markup import escape
from rich.panel import Panel

from fxjournal.cli.common import console, error_panel, get_data_store


@click.command()
@click.option(
    "-u", "--username",
    default="trader",
    show_default=True,
    help="Name to greet. Not verified.",
)
def login(username: str) -> None:
    """Open a journal session.

    Creates a default config file on first use.

    \b
    Examples:
      fxjournal login
      fxjournal login --username alice
    """
    from fxjournal.config import create_template_config, get_config_path

    created = None
    if not get_config_path().exists():
        created = create_template_config()

    store = get_data_store()
    if not store.set_logged_in(True):
        error_panel("Could not start a session.", "See the log output for details.")
        raise SystemExit(1)

    text = f"[bold green]Welcome, {escape(username)}![/bold green]"
    if created is not None:
        text += f"\n\n[dim]Default configuration written to {escape(str(created))}[/dim]"

    console.print(Panel(
        text,
        title="[bold cyan]Trade Journal[/bold cyan]",
        border_style="cyan",
    ))


@click.command()
def logout() -> None:
    """Close the journal session.

    \b
    Examples:
      fxjournal logout
    """
    store = get_data_store()
    if not store.is_logged_in():
        console.print("[yellow]No active session[/yellow]")
        return

    store.set_logged_in(False)
    console.print("[green]✓ Logged out[/green]")
