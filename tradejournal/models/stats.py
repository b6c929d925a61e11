"""BasicStats data model."""

from pydantic import BaseModel, Field


class BasicStats(BaseModel):
    """Summary statistics from a performance report.

    Every field defaults to 0 so a report missing a label still
    produces a complete record.
    """

    total_net_profit: float = Field(default=0.0, description="Total net profit")
    gross_profit: float = Field(default=0.0, description="Gross profit")
    gross_loss: float = Field(default=0.0, description="Gross loss")
    profit_factor: float = Field(default=0.0, description="Gross profit / |gross loss|")
    max_drawdown: float = Field(default=0.0, description="Maximum drawdown")
    total_trades: int = Field(default=0, description="Total number of trades")
    winning_trades: int = Field(default=0, description="Number of winning trades")
    losing_trades: int = Field(default=0, description="Number of losing trades")
    even_trades: int = Field(default=0, description="Number of even trades")
    win_rate: float = Field(default=0.0, description="Percent profitable")
    avg_winning_trade: float = Field(default=0.0, description="Average winning trade")
    avg_losing_trade: float = Field(default=0.0, description="Average losing trade")
    largest_win: float = Field(default=0.0, description="Largest winning trade")
    largest_loss: float = Field(default=0.0, description="Largest losing trade")
    sharpe_ratio: float = Field(default=0.0, description="Sharpe ratio")
    sortino_ratio: float = Field(default=0.0, description="Sortino ratio")

    model_config = {"frozen": True}

    def outcome_counts(self) -> dict[str, int]:
        """Distribution of trades by outcome."""
        return {
            "winning": self.winning_trades,
            "losing": self.losing_trades,
            "even": self.even_trades,
        }
