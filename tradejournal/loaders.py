"""Source loading for TradeJournal.

Reads report and trade files, and parses delimited trade fills into
Trade models.
"""

import asyncio
import csv
import io
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from tradejournal.models import Side, Trade

logger = logging.getLogger(__name__)


class ImportFailedError(RuntimeError):
    """Raised when an input source cannot be read at all."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Import failed for {path}: {reason}")


# Normalized header -> Trade field
COLUMN_ALIASES = {
    "date": "date",
    "time": "time",
    "instrument": "instrument",
    "symbol": "instrument",
    "side": "side",
    "type": "side",
    "direction": "side",
    "size": "size",
    "quantity": "size",
    "qty": "size",
    "entryprice": "entry_price",
    "entry": "entry_price",
    "exitprice": "exit_price",
    "exit": "exit_price",
    "pnl": "pnl",
    "p&l": "pnl",
    "profit": "pnl",
    "commission": "commission",
    "notes": "notes",
    "setup": "setup",
    "chartlink": "chart_link",
    "chart": "chart_link",
    "tradingviewchart": "chart_link",
}

SIDE_ALIASES = {
    "LONG": Side.LONG,
    "BUY": Side.LONG,
    "SHORT": Side.SHORT,
    "SELL": Side.SHORT,
}

_NUMERIC_FIELDS = {"size", "entry_price", "exit_price", "pnl", "commission"}


async def read_source(path: Path, encoding: str = "utf-8-sig") -> str:
    """Read a source file without blocking the event loop.

    Args:
        path: File to read.
        encoding: Text encoding of the file.

    Returns:
        The file contents.

    Raises:
        ImportFailedError: If the file is missing, unreadable or not
            valid text in the given encoding.
    """
    path = Path(path)
    try:
        return await asyncio.to_thread(path.read_text, encoding=encoding)
    except FileNotFoundError:
        raise ImportFailedError(path, "file not found")
    except UnicodeDecodeError as e:
        raise ImportFailedError(path, f"not valid {encoding} text ({e.reason})")
    except OSError as e:
        raise ImportFailedError(path, e.strerror or str(e))


def _normalize_header(name: str) -> Optional[str]:
    key = name.strip().lower().replace(" ", "").replace("_", "").replace("-", "")
    return COLUMN_ALIASES.get(key)


def _clean_value(field: str, value: str):
    value = value.strip()
    if not value:
        return None
    if field == "side":
        return SIDE_ALIASES.get(value.upper(), value)
    if field in _NUMERIC_FIELDS:
        return value.replace("$", "").replace(",", "").replace(" ", "")
    return value


def parse_trade_row(row: dict[str, str]) -> Trade:
    """Build a Trade from one delimited row keyed by raw header names.

    Raises:
        ValidationError: If the row does not describe a valid trade.
    """
    fields = {}
    for header, value in row.items():
        if header is None or value is None:
            continue
        field = _normalize_header(header)
        if field is None:
            continue
        cleaned = _clean_value(field, value)
        if cleaned is not None:
            fields[field] = cleaned
    return Trade(**fields)


def parse_trades(text: str, delimiter: str = ";") -> list[Trade]:
    """Parse delimited trade fills with a header row.

    Rows that cannot be read or do not validate are skipped and
    counted in a warning.

    Args:
        text: Raw file contents.
        delimiter: Column delimiter.

    Returns:
        Trades in file order.
    """
    reader = csv.DictReader(io.StringIO(text.removeprefix("\ufeff")), delimiter=delimiter)
    trades = []
    skipped = 0
    while True:
        # The reader resumes at the next line after a csv.Error
        try:
            row = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            skipped += 1
            logger.debug("Skipping unreadable trade row %d: %s", reader.line_num, e)
            continue

        if not any((value or "").strip() for value in row.values() if isinstance(value, str)):
            continue
        try:
            trades.append(parse_trade_row(row))
        except ValidationError as e:
            skipped += 1
            logger.debug("Skipping trade row %d: %s", reader.line_num, e.errors()[0]["msg"])

    if skipped:
        logger.warning("Skipped %d invalid trade rows", skipped)
    logger.info("Parsed %d trades", len(trades))
    return trades
