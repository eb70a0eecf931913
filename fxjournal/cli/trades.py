"""Trade log commands for fxjournal.

Handles adding and deleting trades and the filterable, sortable trade table.
"""

from datetime import datetime
from typing import Optional

import click
from pydantic import ValidationError
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from fxjournal.cli.common import (
    console,
    describe_validation_error,
    error_panel,
    format_pnl,
    get_journal,
)
from fxjournal.models import POSITIONS, RESULTS, SORT_KEYS

COLUMN_TITLES = {
    "id": "ID",
    "date": "Date",
    "currency_pair": "Pair",
    "trade_type": "Type",
    "position": "Position",
    "result": "Result",
    "amount": "Amount",
    "notes": "Notes",
    "emotions": "Emotions",
}

RESULT_COLORS = {"Profit": "green", "Loss": "red", "Breakeven": "blue"}

ID_WIDTH = 8


def _truncate(text: str, width: int = 30) -> str:
    if not text:
        return "-"
    return escape((text[: width - 3] + "...") if len(text) > width else text)


def resolve_trade_id(trade_ids: list[str], text: str) -> str:
    """Expand a shortened id to the full id of a single matching trade.

    Args:
        trade_ids: Ids in the journal.
        text: Id or id prefix typed by the user.

    Returns:
        The full id when exactly one trade matches, otherwise the input.
        Blank input never matches by prefix.
    """
    if text in trade_ids or not text.strip():
        return text
    matches = [trade_id for trade_id in trade_ids if trade_id.startswith(text)]
    return matches[0] if len(matches) == 1 else text


@click.command()
@click.option(
    "-d", "--date", "trade_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Trade date (YYYY-MM-DD). Defaults to today.",
)
@click.option("-p", "--pair", default="", help="Currency pair, e.g. EURUSD.")
@click.option("-t", "--type", "trade_type", default="", help="Strategy or setup label.")
@click.option(
    "--position",
    type=click.Choice(POSITIONS),
    default="Buy",
    show_default=True,
    help="Position side.",
)
@click.option(
    "-r", "--result",
    type=click.Choice(RESULTS),
    default="Profit",
    show_default=True,
    help="Trade outcome.",
)
@click.option(
    "-a", "--amount",
    default="",
    help="Profit or loss amount. The sign is taken from --result.",
)
@click.option("-n", "--notes", default="", help="Notes about the trade.")
@click.option("-e", "--emotions", default="", help="How you felt during the trade.")
def add(
    trade_date: Optional[datetime],
    pair: str,
    trade_type: str,
    position: str,
    result: str,
    amount: str,
    notes: str,
    emotions: str,
) -> None:
    """Add a trade to the journal.

    Pair, type and a numeric amount are required. Loss amounts are
    always stored as negative numbers.

    \b
    Examples:
      fxjournal add -p EURUSD -t Breakout -a 120
      fxjournal add -p GBPUSD -t Reversal -r Loss -a 45 --position Sell
      fxjournal add -p USDJPY -t Range -r Breakeven -a 0 -d 2024-03-01
    """
    from fxjournal.models import TradeDraft

    journal, _, config = get_journal()
    currency = config["journal"]["currency"]

    fields = {
        "currency_pair": pair,
        "trade_type": trade_type,
        "position": position,
        "result": result,
        "amount": amount,
        "notes": notes,
        "emotions": emotions,
    }
    if trade_date is not None:
        fields["date"] = trade_date.date()

    try:
        draft = TradeDraft(**fields)
    except ValidationError as e:
        error_panel(
            "Please fill in all required fields correctly.",
            describe_validation_error(e),
        )
        raise SystemExit(1)

    trade = draft.to_trade()
    journal.add_trade(trade)

    console.print(Panel(
        f"[bold green]Trade Saved[/bold green]\n\n"
        f"ID:       {trade.id[:ID_WIDTH]}\n"
        f"Date:     {trade.date.isoformat()}\n"
        f"Pair:     {escape(trade.currency_pair)}\n"
        f"Type:     {escape(trade.trade_type)}\n"
        f"Position: {trade.position}\n"
        f"Result:   {trade.result}\n"
        f"Amount:   {format_pnl(trade.amount, currency)}",
        title="[bold cyan]Trade Journal[/bold cyan]",
        border_style="cyan",
    ))


@click.command()
@click.argument("trade_id")
def delete(trade_id: str) -> None:
    """Delete a trade from the journal.

    TRADE_ID is the id shown in the trade table. A unique prefix is enough.

    \b
    Examples:
      fxjournal delete 3f2a9c1b
    """
    journal, _, _ = get_journal()
    full_id = resolve_trade_id([t.id for t in journal.trades], trade_id)

    before = journal.state
    after = journal.delete_trade(full_id)
    if after is before:
        console.print(f"[yellow]No trade with id '{escape(trade_id)}'[/yellow]")
        return

    console.print(f"[green]✓ Deleted trade {escape(full_id[:ID_WIDTH])}[/green]")


@click.command()
@click.option("-p", "--pair", default="", help="Show pairs containing this text.")
@click.option(
    "--position",
    type=click.Choice(("all",) + POSITIONS),
    default="all",
    show_default=True,
    help="Show only this position side.",
)
@click.option(
    "-r", "--result",
    type=click.Choice(("all",) + RESULTS),
    default="all",
    show_default=True,
    help="Show only this result.",
)
@click.option(
    "-s", "--sort", "sort_key",
    type=click.Choice(SORT_KEYS),
    default=None,
    help="Sort by a column. Repeating the current column flips the direction.",
)
@click.option(
    "--no-sort",
    is_flag=True,
    default=False,
    help="Show trades in the order they were added.",
)
def trades(
    pair: str,
    position: str,
    result: str,
    sort_key: Optional[str],
    no_sort: bool,
) -> None:
    """Display the trade log.

    The chosen sort is remembered between runs. The log starts sorted
    by date, newest first.

    \b
    Examples:
      fxjournal trades
      fxjournal trades --pair usd --result Loss
      fxjournal trades --sort amount     # ascending
      fxjournal trades --sort amount     # again: descending
      fxjournal trades --no-sort
    """
    from fxjournal.analytics import DEFAULT_SORT, toggle_sort
    from fxjournal.models import TradeFilter

    if no_sort and sort_key is not None:
        raise click.UsageError("--sort and --no-sort cannot be used together.")

    journal, store, config = get_journal()
    currency = config["journal"]["currency"]

    if no_sort:
        sort_spec = None
        store.save_sort(None)
    elif sort_key is not None:
        sort_spec = toggle_sort(store.load_sort(default=DEFAULT_SORT), sort_key)
        store.save_sort(sort_spec)
    else:
        sort_spec = store.load_sort(default=DEFAULT_SORT)

    trade_filter = TradeFilter(currency_pair=pair, position=position, result=result)
    rows = journal.view(trade_filter, sort_spec)

    if not rows:
        console.print(Panel(
            "[dim]No trades match the filter criteria[/dim]",
            title="[bold]Trade Log[/bold]",
            border_style="dim",
        ))
        return

    table = Table(
        title="Trade Log",
        show_header=True,
        header_style="bold cyan",
    )

    for key, title in COLUMN_TITLES.items():
        if sort_spec is not None and sort_spec.key == key:
            title += " ▲" if sort_spec.direction == "ascending" else " ▼"
        justify = "right" if key == "amount" else "left"
        table.add_column(title, justify=justify, no_wrap=key in ("id", "date"))

    for trade in rows:
        result_color = RESULT_COLORS[trade.result]
        side_color = "green" if trade.position == "Buy" else "red"
        table.add_row(
            escape(trade.id[:ID_WIDTH]),
            trade.date.isoformat(),
            escape(trade.currency_pair),
            escape(trade.trade_type),
            f"[{side_color}]{trade.position}[/{side_color}]",
            f"[{result_color}]{trade.result}[/{result_color}]",
            format_pnl(trade.amount, currency),
            _truncate(trade.notes),
            _truncate(trade.emotions),
        )

    console.print(table)
    console.print(f"\n[bold]Showing:[/bold] {len(rows)} of {len(journal.trades)} trades")
