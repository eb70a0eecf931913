"""Immutable ledger state: the trade collection plus initial capital."""

import math
from typing import Optional, Union

from pydantic import BaseModel, Field, model_validator

from fxjournal.models import Trade

DEFAULT_INITIAL_CAPITAL = 10000.0


class LedgerState(BaseModel):
    """Trades and initial capital. Mutators return a new state."""

    trades: tuple[Trade, ...] = Field(default=(), description="Trades in insertion order")
    initial_capital: float = Field(
        default=DEFAULT_INITIAL_CAPITAL,
        gt=0,
        allow_inf_nan=False,
        description="Starting account balance",
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_unique_ids(self) -> "LedgerState":
        ids = [trade.id for trade in self.trades]
        if len(ids) != len(set(ids)):
            raise ValueError("Trade ids must be unique")
        return self

    def with_trade(self, trade: Trade) -> "LedgerState":
        """Return a state with the trade appended.

        Raises:
            ValueError: If a trade with the same id already exists.
        """
        if any(existing.id == trade.id for existing in self.trades):
            raise ValueError(f"Trade {trade.id} already exists")
        return self.model_copy(update={"trades": self.trades + (trade,)})

    def without_trade(self, trade_id: str) -> "LedgerState":
        """Return a state without the given trade. Unknown ids are a no-op."""
        if not any(trade.id == trade_id for trade in self.trades):
            return self
        return self.model_copy(
            update={"trades": tuple(t for t in self.trades if t.id != trade_id)}
        )

    def with_capital(self, initial_capital: float) -> "LedgerState":
        """Return a state with a new initial capital.

        Raises:
            ValueError: If the capital is not a positive finite number.
        """
        return LedgerState(trades=self.trades, initial_capital=initial_capital)


def parse_capital(value: Union[str, float, None]) -> Optional[float]:
    """Parse a user-entered capital amount.

    Args:
        value: Raw input.

    Returns:
        The amount if it is a finite number above zero, None otherwise.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(amount) or amount <= 0:
        return None
    return amount
