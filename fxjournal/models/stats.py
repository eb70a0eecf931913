"""LedgerStats data model."""

from pydantic import BaseModel, Field


class LedgerStats(BaseModel):
    """Aggregate performance statistics for a set of trades."""

    total_trades: int = Field(default=0, ge=0, description="Number of trades")
    wins: int = Field(default=0, ge=0, description="Profit trades")
    losses: int = Field(default=0, ge=0, description="Loss trades")
    breakeven: int = Field(default=0, ge=0, description="Breakeven trades")
    total_profit: float = Field(default=0.0, description="Sum of profit amounts")
    total_loss: float = Field(default=0.0, description="Sum of loss amounts (non-positive)")
    win_rate: float = Field(default=0.0, ge=0, le=100, description="Win rate percentage")
    net_pnl: float = Field(default=0.0, description="Net profit and loss")
    profit_factor: float = Field(default=0.0, ge=0, description="Gross profit / gross loss")

    model_config = {"frozen": True}
