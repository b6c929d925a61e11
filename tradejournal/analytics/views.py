"""Read-only views over the trade list for display.

None of these mutate their inputs; filtering returns a new tuple.
"""

from datetime import date
from typing import Iterable, Optional, Sequence

from tradejournal.analytics.buckets import hour_index
from tradejournal.models import (
    DailyStat,
    HourlyStat,
    InstrumentStat,
    InstrumentSummary,
    Trade,
)

ALL_INSTRUMENTS = "all"


def filter_trades(
    trades: Iterable[Trade],
    instrument: Optional[str] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> tuple[Trade, ...]:
    """Filter trades by instrument and an inclusive date range.

    Args:
        trades: Trades to filter.
        instrument: Symbol to keep; None or "all" keeps every instrument.
        start: First date to keep (inclusive), or None for no lower bound.
        end: Last date to keep (inclusive), or None for no upper bound.

    Returns:
        Matching trades in their original order.
    """
    return tuple(
        trade
        for trade in trades
        if (instrument in (None, ALL_INSTRUMENTS) or trade.instrument == instrument)
        and (start is None or trade.date >= start)
        and (end is None or trade.date <= end)
    )


def list_instruments(trades: Iterable[Trade]) -> list[str]:
    """Distinct instruments in first-appearance order."""
    return list(dict.fromkeys(trade.instrument for trade in trades))


def hourly_distribution(trades: Sequence[Trade]) -> list[HourlyStat]:
    """Trade count and win rate for each hour of the day.

    Unlike the group win rate of daily stats, this is the share of
    trades in the hour that closed with ``pnl > 0``.
    """
    counts = [0] * 24
    winners = [0] * 24
    for trade in trades:
        hour = hour_index(trade)
        counts[hour] += 1
        if trade.pnl > 0:
            winners[hour] += 1

    return [
        HourlyStat(
            hour=hour,
            label=f"{hour:02d}h",
            trades=counts[hour],
            win_rate=(winners[hour] / counts[hour] * 100) if counts[hour] else 0.0,
        )
        for hour in range(24)
    ]


def instrument_breakdown(
    trades: Sequence[Trade],
    instrument_stats: Iterable[InstrumentStat],
) -> list[InstrumentSummary]:
    """Enrich instrument stats with average, best and worst trade P&L."""
    by_instrument: dict[str, list[float]] = {}
    for trade in trades:
        by_instrument.setdefault(trade.instrument, []).append(trade.pnl)

    summaries = []
    for stat in instrument_stats:
        pnls = by_instrument.get(stat.instrument)
        if not pnls:
            continue
        summaries.append(InstrumentSummary(
            instrument=stat.instrument,
            trades=stat.trades,
            win_rate=stat.win_rate,
            pnl=stat.pnl,
            avg_pnl=stat.pnl / stat.trades,
            best_trade=max(pnls),
            worst_trade=min(pnls),
        ))
    return summaries


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move a (year, month) pair by ``delta`` months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_days(daily_stats: Iterable[DailyStat], year: int, month: int) -> list[DailyStat]:
    """Daily stats falling in one calendar month, sorted by date."""
    return sorted(
        (stat for stat in daily_stats if stat.date.year == year and stat.date.month == month),
        key=lambda stat: stat.date,
    )
