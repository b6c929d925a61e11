"""Per-date and per-instrument trade grouping."""

from datetime import date
from typing import Callable, Hashable, Iterable

from tradejournal.models import DailyStat, InstrumentStat, Trade


def _group_totals(
    trades: Iterable[Trade],
    key: Callable[[Trade], Hashable],
) -> dict[Hashable, tuple[float, int]]:
    """Sum P&L and count trades per key, in first-appearance order."""
    totals: dict[Hashable, tuple[float, int]] = {}
    for trade in trades:
        pnl, count = totals.get(key(trade), (0.0, 0))
        totals[key(trade)] = (pnl + trade.pnl, count + 1)
    return totals


def group_win_rate(pnl: float, trades: int) -> float:
    """Group-level win rate: 100 when the group is net positive, else 0.

    This is not the share of winning trades inside the group.
    """
    if trades == 0:
        return 0.0
    return (trades if pnl > 0 else 0) / trades * 100


def compute_daily_stats(trades: Iterable[Trade]) -> dict[date, DailyStat]:
    """Aggregate trades by date.

    Args:
        trades: Trades in stored order.

    Returns:
        DailyStat per date, keyed and ordered by first appearance.
    """
    return {
        day: DailyStat(date=day, pnl=pnl, trades=count, win_rate=group_win_rate(pnl, count))
        for day, (pnl, count) in _group_totals(trades, lambda t: t.date).items()
    }


def compute_instrument_stats(trades: Iterable[Trade]) -> dict[str, InstrumentStat]:
    """Aggregate trades by instrument.

    Args:
        trades: Trades in stored order.

    Returns:
        InstrumentStat per symbol, keyed and ordered by first appearance.
    """
    return {
        symbol: InstrumentStat(
            instrument=symbol, pnl=pnl, trades=count, win_rate=group_win_rate(pnl, count)
        )
        for symbol, (pnl, count) in _group_totals(trades, lambda t: t.instrument).items()
    }
