"""TradeFilter and SortSpec data models for the trade table."""

from typing import Literal, get_args

from pydantic import BaseModel, Field

SortKey = Literal[
    "id",
    "date",
    "currency_pair",
    "trade_type",
    "position",
    "result",
    "amount",
    "notes",
    "emotions",
]
SortDirection = Literal["ascending", "descending"]

SORT_KEYS: tuple[str, ...] = get_args(SortKey)


class TradeFilter(BaseModel):
    """Filter criteria for the trade table. Criteria are ANDed."""

    currency_pair: str = Field(default="", description="Case-insensitive substring")
    position: Literal["all", "Buy", "Sell"] = Field(default="all", description="Position or 'all'")
    result: Literal["all", "Profit", "Loss", "Breakeven"] = Field(
        default="all", description="Result or 'all'"
    )

    model_config = {"frozen": True}


class SortSpec(BaseModel):
    """Single-key sort for the trade table."""

    key: SortKey = Field(..., description="Trade field to sort by")
    direction: SortDirection = Field(default="ascending", description="Sort direction")

    model_config = {"frozen": True}
