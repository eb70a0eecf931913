"""Filtering and sorting for the trade table.

Filters are ANDed. Sorting uses a single key: numeric values compare
numerically, anything else compares as text under the current collation
locale. Nothing here mutates its input.
"""

import locale
from functools import cmp_to_key
from typing import Any, Iterable, Optional

from fxjournal.models import SortSpec, Trade, TradeFilter

# Initial sort of the trade log: newest first.
DEFAULT_SORT = SortSpec(key="date", direction="descending")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def compare_values(a: Any, b: Any) -> float:
    """Compare two field values for sorting.

    Args:
        a: Left value.
        b: Right value.

    Returns:
        Negative, zero or positive like a classic cmp function.
    """
    if _is_number(a) and _is_number(b):
        return a - b
    return locale.strcoll(str(a), str(b))


def filter_trades(trades: Iterable[Trade], trade_filter: TradeFilter) -> list[Trade]:
    """Select trades matching every filter criterion.

    Args:
        trades: Trades to filter.
        trade_filter: Filter criteria.

    Returns:
        Matching trades in their original order.
    """
    needle = trade_filter.currency_pair.lower()
    return [
        trade
        for trade in trades
        if needle in trade.currency_pair.lower()
        and (trade_filter.position == "all" or trade.position == trade_filter.position)
        and (trade_filter.result == "all" or trade.result == trade_filter.result)
    ]


def sort_trades(
    trades: Iterable[Trade], sort_spec: Optional[SortSpec] = None
) -> list[Trade]:
    """Sort trades by a single field.

    The sort is stable, so trades with equal keys keep their order.

    Args:
        trades: Trades to sort.
        sort_spec: Key and direction. None keeps the original order.

    Returns:
        A new list of trades.
    """
    if sort_spec is None:
        return list(trades)

    sign = 1 if sort_spec.direction == "ascending" else -1
    key = sort_spec.key

    def _compare(left: Trade, right: Trade) -> float:
        return sign * compare_values(getattr(left, key), getattr(right, key))

    return sorted(trades, key=cmp_to_key(_compare))


def toggle_sort(current: Optional[SortSpec], key: str) -> SortSpec:
    """Get the next sort after the user picks a column.

    Picking the column already sorted ascending flips it to descending.
    Any other pick sorts the chosen column ascending.

    Args:
        current: The active sort, if any.
        key: Column picked by the user.

    Returns:
        The new SortSpec.
    """
    if current is not None and current.key == key and current.direction == "ascending":
        return SortSpec(key=key, direction="descending")
    return SortSpec(key=key, direction="ascending")


def view_trades(
    trades: Iterable[Trade],
    trade_filter: Optional[TradeFilter] = None,
    sort_spec: Optional[SortSpec] = None,
) -> list[Trade]:
    """Filter then sort trades for display.

    Args:
        trades: All trades.
        trade_filter: Filter criteria. None matches everything.
        sort_spec: Optional sort.

    Returns:
        The visible trades, in display order.
    """
    filtered = filter_trades(trades, trade_filter or TradeFilter())
    return sort_trades(filtered, sort_spec)
