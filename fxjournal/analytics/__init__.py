"""Trade analytics module."""

from fxjournal.analytics.curve import build_balance_curve, total_return
from fxjournal.analytics.instruments import aggregate_by_instrument
from fxjournal.analytics.ledger import compute_stats, result_distribution, result_shares
from fxjournal.analytics.table import (
    DEFAULT_SORT,
    filter_trades,
    sort_trades,
    toggle_sort,
    view_trades,
)

__all__ = [
    "DEFAULT_SORT",
    "aggregate_by_instrument",
    "build_balance_curve",
    "compute_stats",
    "filter_trades",
    "result_distribution",
    "result_shares",
    "sort_trades",
    "toggle_sort",
    "total_return",
    "view_trades",
]
