"""Per-pair profit and loss aggregation."""

from typing import Iterable

from fxjournal.models import InstrumentPnL, Trade


def aggregate_by_instrument(trades: Iterable[Trade]) -> dict[str, InstrumentPnL]:
    """Sum profit and loss amounts per currency pair.

    Pairs are grouped by their exact label, in order of first appearance.
    Loss totals stay non-positive. Breakeven trades add a pair entry but
    contribute to neither bucket.

    Args:
        trades: Trades to aggregate.

    Returns:
        Mapping of currency pair to its InstrumentPnL.
    """
    totals: dict[str, list[float]] = {}

    for trade in trades:
        bucket = totals.setdefault(trade.currency_pair, [0.0, 0.0])
        if trade.result == "Profit":
            bucket[0] += trade.amount
        elif trade.result == "Loss":
            bucket[1] += trade.amount

    return {
        name: InstrumentPnL(name=name, profit=profit, loss=loss)
        for name, (profit, loss) in totals.items()
    }
