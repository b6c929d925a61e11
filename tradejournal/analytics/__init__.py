"""Trade analytics for TradeJournal.

This package turns a performance report and a trade list into
summary, grouped and advanced statistics.
"""

from tradejournal.analytics.summary import parse_summary, summarize_trades
from tradejournal.analytics.buckets import (
    WEEKDAY_NAMES,
    best_bucket,
    bucket_by_hour,
    bucket_by_weekday,
    worst_bucket,
)
from tradejournal.analytics.grouping import compute_daily_stats, compute_instrument_stats
from tradejournal.analytics.advanced import compute_advanced_stats, longest_streaks

__all__ = [
    "parse_summary",
    "summarize_trades",
    "WEEKDAY_NAMES",
    "best_bucket",
    "bucket_by_hour",
    "bucket_by_weekday",
    "worst_bucket",
    "compute_daily_stats",
    "compute_instrument_stats",
    "compute_advanced_stats",
    "longest_streaks",
]
