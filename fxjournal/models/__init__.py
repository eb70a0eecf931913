"""Data models for fxjournal."""

from fxjournal.models.trade import (
    POSITIONS,
    RESULTS,
    PositionSide,
    Trade,
    TradeDraft,
    TradeResult,
)
from fxjournal.models.stats import LedgerStats
from fxjournal.models.curve import BalancePoint
from fxjournal.models.instrument import InstrumentPnL
from fxjournal.models.view import SORT_KEYS, SortSpec, TradeFilter

__all__ = [
    "POSITIONS",
    "RESULTS",
    "SORT_KEYS",
    "PositionSide",
    "Trade",
    "TradeDraft",
    "TradeResult",
    "LedgerStats",
    "BalancePoint",
    "InstrumentPnL",
    "SortSpec",
    "TradeFilter",
]
