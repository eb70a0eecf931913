"""Trade and TradeDraft data models."""

import math
import uuid
from datetime import date as date_type
from typing import Literal, Union

from pydantic import BaseModel, Field, field_validator, model_validator

PositionSide = Literal["Buy", "Sell"]
TradeResult = Literal["Profit", "Loss", "Breakeven"]

POSITIONS: tuple[str, ...] = ("Buy", "Sell")
RESULTS: tuple[str, ...] = ("Profit", "Loss", "Breakeven")


class Trade(BaseModel):
    """Represents one journaled trade."""

    id: str = Field(..., min_length=1, description="Unique trade identifier")
    date: date_type = Field(..., description="Trade date")
    currency_pair: str = Field(
        ..., min_length=1, alias="currencyPair", description="Currency pair (e.g., EURUSD)"
    )
    trade_type: str = Field(
        ..., min_length=1, alias="tradeType", description="Strategy label"
    )
    position: PositionSide = Field(..., description="Position side")
    result: TradeResult = Field(..., description="Trade outcome")
    amount: float = Field(..., allow_inf_nan=False, description="Signed P&L amount")
    notes: str = Field(default="", description="Trade notes")
    emotions: str = Field(default="", description="Emotional state during the trade")

    model_config = {"frozen": True, "populate_by_name": True}

    @model_validator(mode="after")
    def _check_amount_sign(self) -> "Trade":
        if self.result == "Loss" and self.amount > 0:
            raise ValueError("Loss trades must have a non-positive amount")
        if self.result == "Profit" and self.amount < 0:
            raise ValueError("Profit trades must have a non-negative amount")
        return self


class TradeDraft(BaseModel):
    """A trade as entered by the user, before it gets an id.

    The amount is accepted as raw text so that form input can be
    validated in one place. Its sign is taken from ``result`` when the
    draft is turned into a Trade.
    """

    date: date_type = Field(default_factory=date_type.today, description="Trade date")
    currency_pair: str = Field(..., alias="currencyPair", description="Currency pair")
    trade_type: str = Field(..., alias="tradeType", description="Strategy label")
    position: PositionSide = Field(default="Buy", description="Position side")
    result: TradeResult = Field(default="Profit", description="Trade outcome")
    amount: Union[float, str] = Field(..., description="Amount as entered")
    notes: str = Field(default="", description="Trade notes")
    emotions: str = Field(default="", description="Emotional state during the trade")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("currency_pair", "trade_type")
    @classmethod
    def _require_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("amount")
    @classmethod
    def _parse_amount(cls, value: Union[float, str]) -> float:
        try:
            parsed = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"amount {value!r} is not a number") from None
        if not math.isfinite(parsed):
            raise ValueError("amount must be finite")
        return parsed

    def to_trade(self) -> Trade:
        """Create a Trade with a fresh id and the amount signed by result."""
        magnitude = abs(float(self.amount))
        amount = -magnitude if self.result == "Loss" else magnitude
        return Trade(
            id=uuid.uuid4().hex,
            date=self.date,
            currency_pair=self.currency_pair,
            trade_type=self.trade_type,
            position=self.position,
            result=self.result,
            amount=amount,
            notes=self.notes,
            emotions=self.emotions,
        )
