"""BalancePoint data model."""

from pydantic import BaseModel, Field


class BalancePoint(BaseModel):
    """Represents one point of the account growth curve."""

    label: str = Field(..., description="Point label ('start' or 'Trade N')")
    balance: float = Field(..., description="Running account balance")

    model_config = {"frozen": True}
