"""Helpers shared by the fxjournal commands."""

from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

console = Console()


def _get_config() -> dict:
    """Lazily load configuration."""
    from fxjournal.config import load_config

    return load_config()


def get_data_store(config: Optional[dict] = None):
    """Get the data store instance."""
    from fxjournal.config import get_db_path
    from fxjournal.db.store import DataStore

    return DataStore(get_db_path(config or _get_config()))


def get_journal(config: Optional[dict] = None):
    """Open the trade journal, refusing to continue unless logged in.

    Returns:
        Tuple of (TradeJournal, DataStore, config).
    """
    from fxjournal.ledger import TradeJournal

    config = config or _get_config()
    store = get_data_store(config)

    if not store.is_logged_in():
        console.print(Panel(
            "[red]You are not logged in.[/red]\n\n"
            "Run [cyan]fxjournal login[/cyan] first.",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    journal = TradeJournal(store, default_capital=config["journal"]["default_capital"])
    return journal, store, config


def error_panel(message: str, detail: str = "") -> None:
    """Print a red error panel."""
    body = f"[red]{message}[/red]"
    if detail:
        body += f"\n\n{escape(detail)}"
    console.print(Panel(
        body,
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))


def describe_validation_error(error: ValidationError) -> str:
    """Turn a pydantic ValidationError into one line per problem."""
    lines = []
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"]) or "input"
        lines.append(f"{field}: {item['msg']}")
    return "\n".join(lines)


def format_money(amount: float, currency: str = "$") -> str:
    """Format an amount like -$1,234.50, escaped for rich markup."""
    sign = "-" if amount < 0 else ""
    return escape(f"{sign}{currency}{abs(amount):,.2f}")


def format_pnl(amount: float, currency: str = "$") -> str:
    """Format a signed P&L amount with rich color markup."""
    color = "green" if amount >= 0 else "red"
    sign = "+" if amount > 0 else ""
    return f"[{color}]{sign}{format_money(amount, currency)}[/{color}]"
