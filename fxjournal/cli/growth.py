"""Account growth commands for fxjournal.

Handles the balance curve display and the initial capital setting.
"""

import logging
from typing import Optional

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from fxjournal.cli.common import console, format_money, format_pnl, get_journal

logger = logging.getLogger(__name__)


@click.command()
def growth() -> None:
    """Display account growth from initial capital.

    Trades are applied in date order. Each row shows the balance after
    one trade.

    \b
    Examples:
      fxjournal growth
    """
    from fxjournal.analytics import total_return

    journal, _, config = get_journal()
    currency = config["journal"]["currency"]
    capital = journal.initial_capital
    curve = journal.balance_curve()
    absolute, percent = total_return(curve, capital)

    return_color = "green" if absolute >= 0 else "red"
    growth_text = (
        f"[bold]Account Growth[/bold]\n\n"
        f"Initial Capital: {format_money(capital, currency)}\n"
        f"Balance:         {format_money(curve[-1].balance, currency)}\n"
        f"{'─' * 30}\n"
        f"[bold]Total Return:    {format_pnl(absolute, currency)} "
        f"[{return_color}]({percent:.2f}%)[/{return_color}][/bold]"
    )

    console.print(Panel(
        growth_text,
        title="[bold cyan]Growth[/bold cyan]",
        border_style="cyan",
    ))

    if len(curve) == 1:
        console.print("[dim]No trades yet. Add one with fxjournal add.[/dim]")
        return

    table = Table(
        title="Balance History",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Point", style="bold")
    table.add_column("Balance", justify="right")
    table.add_column("Change", justify="right")

    previous = None
    for point in curve:
        change = "-" if previous is None else format_pnl(point.balance - previous, currency)
        table.add_row(point.label, format_money(point.balance, currency), change)
        previous = point.balance

    console.print(table)


@click.command()
@click.argument("amount", required=False)
def capital(amount: Optional[str]) -> None:
    """Show or update the initial capital.

    AMOUNT must be a number greater than zero. Anything else is ignored
    and the current capital is kept.

    \b
    Examples:
      fxjournal capital          # Show current capital
      fxjournal capital 25000    # Update capital
    """
    from fxjournal.ledger import parse_capital

    journal, _, config = get_journal()
    currency = config["journal"]["currency"]

    if amount is None:
        console.print(
            f"[bold]Initial Capital:[/bold] {format_money(journal.initial_capital, currency)}"
        )
        return

    new_capital = parse_capital(amount)
    if new_capital is None:
        logger.debug("Ignoring invalid capital input %r", amount)
        console.print(
            f"[dim]Ignored '{escape(amount)}'. Initial capital stays "
            f"{format_money(journal.initial_capital, currency)}[/dim]"
        )
        return

    journal.update_capital(new_capital)
    console.print(
        f"[green]✓ Initial capital set to {format_money(new_capital, currency)}[/green]"
    )
