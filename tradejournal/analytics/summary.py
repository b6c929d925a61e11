"""Performance report summary parsing.

A performance report export is a text blob of ``label;value`` lines.
Known labels are mapped onto BasicStats fields; anything else is
ignored, and values that cannot be read default to 0.
"""

import logging
import re
from typing import Callable, Iterable

from tradejournal.models import BasicStats, Trade

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ";"

# Leading numeric prefix, read the way spreadsheet exports are usually read
_FLOAT_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^[+-]?\d+")
_CURRENCY_CHARS = re.compile(r"[$ ,]")


def _parse_float(value: str) -> float:
    match = _FLOAT_PREFIX.match(value.strip())
    return float(match.group(0)) if match else 0.0


def _parse_int(value: str) -> int:
    match = _INT_PREFIX.match(value.strip().replace(",", ""))
    return int(match.group(0)) if match else 0


def parse_currency(value: str) -> float:
    """Parse a currency cell such as ``$1,234.50`` or ``($12.00)``.

    Accounting-style parentheses mark a negative amount.
    """
    cleaned = _CURRENCY_CHARS.sub("", value)
    if cleaned.startswith("(") and cleaned.endswith(")"):
        return -_parse_float(cleaned[1:-1])
    return _parse_float(cleaned)


def parse_percent(value: str) -> float:
    """Parse a percentage cell such as ``62.5%``."""
    return _parse_float(value.replace("%", ""))


# Report label -> (BasicStats field, value parser)
SUMMARY_LABELS: dict[str, tuple[str, Callable[[str], float]]] = {
    "Total net profit": ("total_net_profit", parse_currency),
    "Gross profit": ("gross_profit", parse_currency),
    "Gross loss": ("gross_loss", parse_currency),
    "Profit factor": ("profit_factor", _parse_float),
    "Max. drawdown": ("max_drawdown", parse_currency),
    "Total # of trades": ("total_trades", _parse_int),
    "# of winning trades": ("winning_trades", _parse_int),
    "# of losing trades": ("losing_trades", _parse_int),
    "# of even trades": ("even_trades", _parse_int),
    "Percent profitable": ("win_rate", parse_percent),
    "Avg. winning trade": ("avg_winning_trade", parse_currency),
    "Avg. losing trade": ("avg_losing_trade", parse_currency),
    "Largest winning trade": ("largest_win", parse_currency),
    "Largest losing trade": ("largest_loss", parse_currency),
    "Sharpe ratio": ("sharpe_ratio", _parse_float),
    "Sortino ratio": ("sortino_ratio", _parse_float),
}


def read_cells(text: str, delimiter: str = DEFAULT_DELIMITER) -> dict[str, str]:
    """Split report text into a label -> value map.

    Lines with fewer than two cells are skipped. A label seen more
    than once keeps its last value.
    """
    cells: dict[str, str] = {}
    # Only \n separates lines; a trailing \r is removed by strip()
    for line in text.removeprefix("\ufeff").split("\n"):
        parts = line.split(delimiter)
        if len(parts) >= 2:
            cells[parts[0].strip()] = parts[1].strip()
    return cells


def parse_summary(text: str, delimiter: str = DEFAULT_DELIMITER) -> BasicStats:
    """Parse a performance report into BasicStats.

    Args:
        text: Raw report text.
        delimiter: Field delimiter between label and value.

    Returns:
        A complete BasicStats; missing or unreadable fields are 0.
    """
    cells = read_cells(text, delimiter)
    values = {}
    for label, (field, parser) in SUMMARY_LABELS.items():
        if label in cells:
            values[field] = parser(cells[label])

    logger.info("Parsed %d of %d summary labels", len(values), len(SUMMARY_LABELS))
    return BasicStats(**values)


def summarize_trades(trades: Iterable[Trade]) -> BasicStats:
    """Build BasicStats from the trade list when no report is available.

    Sharpe and Sortino ratios are report inputs and stay 0.
    """
    gross_profit = 0.0
    gross_loss = 0.0
    winning = 0
    losing = 0
    even = 0
    largest_win = 0.0
    largest_loss = 0.0
    equity = 0.0
    peak = 0.0
    max_drawdown = 0.0

    for trade in trades:
        if trade.pnl > 0:
            winning += 1
            gross_profit += trade.pnl
            largest_win = max(largest_win, trade.pnl)
        elif trade.pnl < 0:
            losing += 1
            gross_loss += trade.pnl
            largest_loss = min(largest_loss, trade.pnl)
        else:
            even += 1

        equity += trade.pnl
        peak = max(peak, equity)
        max_drawdown = max(max_drawdown, peak - equity)

    total = winning + losing + even
    if total == 0:
        return BasicStats()

    return BasicStats(
        total_net_profit=gross_profit + gross_loss,
        gross_profit=gross_profit,
        gross_loss=gross_loss,
        profit_factor=(gross_profit / abs(gross_loss)) if gross_loss < 0 else 0.0,
        max_drawdown=-max_drawdown if max_drawdown else 0.0,
        total_trades=total,
        winning_trades=winning,
        losing_trades=losing,
        even_trades=even,
        win_rate=winning / total * 100,
        avg_winning_trade=(gross_profit / winning) if winning else 0.0,
        avg_losing_trade=(gross_loss / losing) if losing else 0.0,
        largest_win=largest_win,
        largest_loss=largest_loss,
    )
