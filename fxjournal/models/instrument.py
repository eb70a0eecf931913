"""InstrumentPnL data model."""

from pydantic import BaseModel, Field


class InstrumentPnL(BaseModel):
    """Profit and loss totals for one currency pair."""

    name: str = Field(..., description="Currency pair label")
    profit: float = Field(default=0.0, ge=0, description="Sum of profit amounts")
    loss: float = Field(default=0.0, le=0, description="Sum of loss amounts")

    model_config = {"frozen": True}

    @property
    def net(self) -> float:
        """Net P&L for the pair."""
        return self.profit + self.loss
