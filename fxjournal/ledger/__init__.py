"""Ledger state and the trade journal that owns it."""

from fxjournal.ledger.journal import TradeJournal
from fxjournal.ledger.state import DEFAULT_INITIAL_CAPITAL, LedgerState, parse_capital

__all__ = [
    "DEFAULT_INITIAL_CAPITAL",
    "LedgerState",
    "TradeJournal",
    "parse_capital",
]
