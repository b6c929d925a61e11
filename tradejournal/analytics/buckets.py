"""Weekday and hour-of-day bucketing of trades."""

from typing import Iterable, Sequence

from tradejournal.models import TimeBucket, Trade

WEEKDAY_NAMES = {
    "en": ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
    "fr": ("Dimanche", "Lundi", "Mardi", "Mercredi", "Jeudi", "Vendredi", "Samedi"),
}


def weekday_index(trade: Trade) -> int:
    """Day of week of a trade, 0=Sunday .. 6=Saturday."""
    return trade.timestamp.isoweekday() % 7


def hour_index(trade: Trade) -> int:
    """Local hour of a trade, 0..23."""
    return trade.timestamp.hour


def hour_label(hour: int) -> str:
    """Format an hour slot as ``HH:00``."""
    return f"{hour:02d}:00"


def _bucket(trades: Iterable[Trade], size: int, index_of) -> list[TimeBucket]:
    counts = [0] * size
    sums = [0.0] * size
    for trade in trades:
        i = index_of(trade)
        counts[i] += 1
        sums[i] += trade.pnl
    return [TimeBucket(count=c, pnl_sum=s) for c, s in zip(counts, sums)]


def bucket_by_weekday(trades: Iterable[Trade]) -> list[TimeBucket]:
    """Bucket trades into 7 weekday slots (index 0 is Sunday)."""
    return _bucket(trades, 7, weekday_index)


def bucket_by_hour(trades: Iterable[Trade]) -> list[TimeBucket]:
    """Bucket trades into 24 hour-of-day slots."""
    return _bucket(trades, 24, hour_index)


def best_bucket(buckets: Sequence[TimeBucket]) -> int:
    """Index of the bucket with the highest P&L; ties go to the lowest index."""
    best = 0
    for i, bucket in enumerate(buckets):
        if bucket.pnl_sum > buckets[best].pnl_sum:
            best = i
    return best


def worst_bucket(buckets: Sequence[TimeBucket]) -> int:
    """Index of the bucket with the lowest P&L; ties go to the lowest index."""
    worst = 0
    for i, bucket in enumerate(buckets):
        if bucket.pnl_sum < buckets[worst].pnl_sum:
            worst = i
    return worst
