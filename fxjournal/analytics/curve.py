"""Account growth curve built from initial capital and trade amounts."""

from typing import Iterable

from fxjournal.models import BalancePoint, Trade

START_LABEL = "start"


def build_balance_curve(
    trades: Iterable[Trade], initial_capital: float
) -> list[BalancePoint]:
    """Build the running balance series for a trade collection.

    Trades are ordered by date before accumulating. Same-date trades keep
    their relative order.

    Args:
        trades: Trades in any order.
        initial_capital: Starting account balance.

    Returns:
        A start point followed by one point per trade, labeled
        'Trade 1', 'Trade 2', ...
    """
    curve = [BalancePoint(label=START_LABEL, balance=initial_capital)]
    balance = initial_capital

    for index, trade in enumerate(sorted(trades, key=lambda t: t.date), start=1):
        balance += trade.amount
        curve.append(BalancePoint(label=f"Trade {index}", balance=balance))

    return curve


def total_return(
    curve: list[BalancePoint], initial_capital: float
) -> tuple[float, float]:
    """Calculate the absolute and percentage return of a balance curve.

    Args:
        curve: Output of build_balance_curve.
        initial_capital: Starting account balance.

    Returns:
        Tuple of (absolute return, percent return).
    """
    absolute = curve[-1].balance - initial_capital if len(curve) > 1 else 0.0
    percent = (absolute / initial_capital * 100) if initial_capital > 0 else 0.0
    return absolute, percent
