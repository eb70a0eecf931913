"""Ledger statistics for trade performance analysis.

This module aggregates a trade collection into win/loss counts, win rate,
gross profit and loss, net P&L and profit factor. All functions are pure.
"""

from typing import Iterable

from fxjournal.models import LedgerStats, Trade


def compute_stats(trades: Iterable[Trade]) -> LedgerStats:
    """Calculate aggregate statistics for a trade collection.

    Breakeven trades count toward ``total_trades`` but are excluded from
    the win rate denominator.

    Args:
        trades: Trades to aggregate.

    Returns:
        LedgerStats for the collection.
    """
    total_trades = 0
    wins = 0
    losses = 0
    total_profit = 0.0
    total_loss = 0.0

    for trade in trades:
        total_trades += 1
        if trade.result == "Profit":
            wins += 1
            total_profit += trade.amount
        elif trade.result == "Loss":
            losses += 1
            total_loss += trade.amount

    decided = wins + losses
    win_rate = (wins / decided * 100) if decided > 0 else 0.0
    # total_loss is already non-positive
    net_pnl = total_profit + total_loss
    profit_factor = (total_profit / -total_loss) if total_loss < 0 else 0.0

    return LedgerStats(
        total_trades=total_trades,
        wins=wins,
        losses=losses,
        breakeven=total_trades - wins - losses,
        total_profit=total_profit,
        total_loss=total_loss,
        win_rate=win_rate,
        net_pnl=net_pnl,
        profit_factor=profit_factor,
    )


def result_distribution(stats: LedgerStats) -> list[tuple[str, int]]:
    """Get trade counts per result, in display order.

    Args:
        stats: Previously computed statistics.

    Returns:
        List of (result, count) pairs for Profit, Loss and Breakeven.
    """
    return [
        ("Profit", stats.wins),
        ("Loss", stats.losses),
        ("Breakeven", stats.breakeven),
    ]


def result_shares(stats: LedgerStats) -> list[tuple[str, float]]:
    """Get the percentage share of each result.

    Args:
        stats: Previously computed statistics.

    Returns:
        List of (result, percent) pairs. All zero when there are no trades.
    """
    total = stats.total_trades
    return [
        (name, (count / total * 100) if total > 0 else 0.0)
        for name, count in result_distribution(stats)
    ]
