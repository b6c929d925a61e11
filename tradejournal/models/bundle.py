"""StatisticsBundle data model."""

from pydantic import BaseModel, Field

from tradejournal.models.advanced import AdvancedStats
from tradejournal.models.breakdown import DailyStat, HourlyStat, InstrumentStat
from tradejournal.models.stats import BasicStats
from tradejournal.models.trade import Trade


class StatisticsBundle(BaseModel):
    """Everything the presentation layer reads after an import."""

    basic_stats: BasicStats = Field(default_factory=BasicStats)
    trades: tuple[Trade, ...] = Field(default=())
    daily_stats: tuple[DailyStat, ...] = Field(default=())
    instrument_stats: tuple[InstrumentStat, ...] = Field(default=())
    advanced_stats: AdvancedStats = Field(default_factory=AdvancedStats)
    hourly_stats: tuple[HourlyStat, ...] = Field(default=())

    model_config = {"frozen": True}
