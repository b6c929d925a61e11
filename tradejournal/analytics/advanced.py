"""Advanced statistics: streaks, seasonality and risk ratios."""

import math
from typing import Sequence

from tradejournal.analytics.buckets import (
    WEEKDAY_NAMES,
    best_bucket,
    bucket_by_hour,
    bucket_by_weekday,
    hour_label,
    worst_bucket,
)
from tradejournal.models import AdvancedStats, BasicStats, Trade


def float_ratio(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: x/0 is a signed infinity, 0/0 is NaN."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def longest_streaks(trades: Sequence[Trade]) -> tuple[int, int]:
    """Longest runs of winning and losing trades, in stored order.

    Even trades neither extend nor break a streak.

    Returns:
        Tuple of (max_win_streak, max_loss_streak).
    """
    current_wins = 0
    current_losses = 0
    max_wins = 0
    max_losses = 0

    for trade in trades:
        if trade.pnl > 0:
            current_wins += 1
            current_losses = 0
            max_wins = max(max_wins, current_wins)
        elif trade.pnl < 0:
            current_losses += 1
            current_wins = 0
            max_losses = max(max_losses, current_losses)

    return max_wins, max_losses


def expectancy(basic: BasicStats) -> float:
    """Expected P&L per trade from the report win rate and averages."""
    win_share = basic.win_rate / 100
    loss_share = (100 - basic.win_rate) / 100
    return win_share * basic.avg_winning_trade - loss_share * abs(basic.avg_losing_trade)


def risk_reward_ratio(basic: BasicStats) -> float:
    """Average win over average loss, ``inf``/``nan`` when there is no average loss."""
    return abs(float_ratio(basic.avg_winning_trade, basic.avg_losing_trade))


def compute_advanced_stats(
    trades: Sequence[Trade],
    basic: BasicStats,
    weekday_names: Sequence[str] = WEEKDAY_NAMES["en"],
) -> AdvancedStats:
    """Compute AdvancedStats from the trade list and report summary.

    Win rate and average win/loss come from ``basic``; everything else
    is derived from ``trades``. An empty trade list leaves the
    trade-derived fields at their zero values.

    Args:
        trades: Trades in stored order.
        basic: Summary statistics for the same session.
        weekday_names: Seven day names, Sunday first.

    Returns:
        AdvancedStats for the session.
    """
    report_fields = {
        "expectancy": expectancy(basic),
        "avg_risk_reward_ratio": risk_reward_ratio(basic),
    }
    if not trades:
        return AdvancedStats(**report_fields)

    wins, losses = longest_streaks(trades)
    by_weekday = bucket_by_weekday(trades)
    by_hour = bucket_by_hour(trades)
    trading_days = len({trade.date for trade in trades})

    return AdvancedStats(
        avg_trade_length_minutes=0.0,
        best_day_of_week=weekday_names[best_bucket(by_weekday)],
        worst_day_of_week=weekday_names[worst_bucket(by_weekday)],
        best_time_of_day=hour_label(best_bucket(by_hour)),
        worst_time_of_day=hour_label(worst_bucket(by_hour)),
        consecutive_wins=wins,
        consecutive_losses=losses,
        profit_per_day=float_ratio(basic.total_net_profit, trading_days),
        **report_fields,
    )
