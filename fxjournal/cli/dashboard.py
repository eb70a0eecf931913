"""Performance dashboard commands for fxjournal.

Shows aggregate statistics, the result distribution and P&L per pair.
"""

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from fxjournal.cli.common import console, format_money, format_pnl, get_journal


@click.command()
def stats() -> None:
    """Display win rate, profit factor and net P&L.

    \b
    Examples:
      fxjournal stats
    """
    from fxjournal.analytics import result_distribution, result_shares

    journal, _, config = get_journal()
    currency = config["journal"]["currency"]
    summary = journal.stats()

    stats_text = (
        f"[bold]Performance Summary[/bold]\n\n"
        f"Net P&L:       {format_pnl(summary.net_pnl, currency)}\n"
        f"Win Rate:      {summary.win_rate:.1f}%\n"
        f"Profit Factor: {summary.profit_factor:.2f}\n"
        f"{'─' * 30}\n"
        f"Total Profit:  [green]{format_money(summary.total_profit, currency)}[/green]\n"
        f"Total Loss:    [red]{format_money(summary.total_loss, currency)}[/red]\n\n"
        f"[dim]Trades: {summary.total_trades} | "
        f"Wins: {summary.wins} | "
        f"Losses: {summary.losses} | "
        f"Breakeven: {summary.breakeven}[/dim]"
    )

    console.print(Panel(
        stats_text,
        title="[bold cyan]Dashboard[/bold cyan]",
        border_style="cyan",
    ))

    if summary.total_trades == 0:
        return

    table = Table(
        title="Result Distribution",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Result", style="bold")
    table.add_column("Trades", justify="right")
    table.add_column("Share", justify="right")

    shares = dict(result_shares(summary))
    for name, count in result_distribution(summary):
        table.add_row(name, str(count), f"{shares[name]:.0f}%")

    console.print(table)


@click.command()
def pairs() -> None:
    """Display profit and loss per currency pair.

    Pairs are listed in the order they were first traded.

    \b
    Examples:
      fxjournal pairs
    """
    journal, _, config = get_journal()
    currency = config["journal"]["currency"]
    by_pair = journal.pnl_by_instrument()

    if not by_pair:
        console.print(Panel(
            "[dim]No trades recorded yet[/dim]",
            title="[bold]P&L by Pair[/bold]",
            border_style="dim",
        ))
        return

    table = Table(
        title="P&L by Pair",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Pair", style="bold")
    table.add_column("Profit", justify="right")
    table.add_column("Loss", justify="right")
    table.add_column("Net", justify="right")

    for pnl in by_pair.values():
        table.add_row(
            escape(pnl.name),
            f"[green]{format_money(pnl.profit, currency)}[/green]",
            f"[red]{format_money(pnl.loss, currency)}[/red]",
            format_pnl(pnl.net, currency),
        )

    console.print(table)
