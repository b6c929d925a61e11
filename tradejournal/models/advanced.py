"""AdvancedStats data model."""

from pydantic import BaseModel, Field


class AdvancedStats(BaseModel):
    """Statistics derived from the trade list and the report summary.

    Ratios with a zero denominator hold ``inf`` or ``nan``.
    """

    avg_trade_length_minutes: float = Field(default=0.0, description="Average holding time")
    best_day_of_week: str = Field(default="", description="Weekday with the highest P&L")
    worst_day_of_week: str = Field(default="", description="Weekday with the lowest P&L")
    best_time_of_day: str = Field(default="", description="Hour with the highest P&L (HH:00)")
    worst_time_of_day: str = Field(default="", description="Hour with the lowest P&L (HH:00)")
    consecutive_wins: int = Field(default=0, ge=0, description="Longest winning streak")
    consecutive_losses: int = Field(default=0, ge=0, description="Longest losing streak")
    avg_risk_reward_ratio: float = Field(default=0.0, description="|avg win / avg loss|")
    expectancy: float = Field(default=0.0, description="Expected P&L per trade")
    profit_per_day: float = Field(default=0.0, description="Net profit per trading day")

    model_config = {"frozen": True}
