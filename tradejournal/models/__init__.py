"""Data models for TradeJournal."""

from tradejournal.models.trade import Side, Trade
from tradejournal.models.stats import BasicStats
from tradejournal.models.breakdown import (
    DailyStat,
    HourlyStat,
    InstrumentStat,
    InstrumentSummary,
    TimeBucket,
)
from tradejournal.models.advanced import AdvancedStats
from tradejournal.models.bundle import StatisticsBundle

__all__ = [
    "Side",
    "Trade",
    "BasicStats",
    "DailyStat",
    "HourlyStat",
    "InstrumentStat",
    "InstrumentSummary",
    "TimeBucket",
    "AdvancedStats",
    "StatisticsBundle",
]
