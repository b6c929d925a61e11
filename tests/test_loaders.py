"""Tests for source reading and trade fill parsing.

**Feature: trade-journal**
"""

import asyncio
import logging
from datetime import date, time
from pathlib import Path

import pytest

from tradejournal.loaders import ImportFailedError, parse_trades, read_source
from tradejournal.models import Side


class TestParseTrades:
    """Delimited trade fills."""

    def test_basic_rows(self):
        text = (
            "date;time;instrument;side;size;entry_price;exit_price;pnl;commission;notes;setup;chart_link\n"
            "2024-01-07;10:30:00;EURUSD;LONG;1;1.1000;1.1050;50.00;2.50;clean break;ORB;https://example.com/c/1\n"
            "2024-01-08;09:15;GBPUSD;SHORT;2;1.2700;1.2750;-20.00;2.50;;;\n"
        )

        trades = parse_trades(text)

        assert len(trades) == 2
        first, second = trades
        assert first.date == date(2024, 1, 7)
        assert first.time == time(10, 30)
        assert first.side == Side.LONG
        assert first.pnl == 50.0
        assert first.notes == "clean break"
        assert first.setup == "ORB"
        assert first.chart_link == "https://example.com/c/1"
        assert second.side == Side.SHORT
        assert second.time == time(9, 15)
        assert second.notes is None
        assert second.chart_link is None

    def test_header_aliases(self):
        text = (
            "Date,Time,Symbol,Type,Quantity,Entry Price,Exit Price,P&L,Commission,tradingViewChart\n"
            "2024-02-01,11:00:00,ES,BUY,3,4800.25,4810.50,\"$1,537.50\",4.20,https://www.tradingview.com/chart\n"
            "2024-02-01,13:00:00,NQ,sell,1,17000,16990,-$200.00,4.20,\n"
        )

        trades = parse_trades(text, delimiter=",")

        assert [t.instrument for t in trades] == ["ES", "NQ"]
        assert trades[0].side == Side.LONG
        assert trades[0].size == 3
        assert trades[0].pnl == 1537.50
        assert trades[0].chart_link == "https://www.tradingview.com/chart"
        assert trades[1].side == Side.SHORT
        assert trades[1].pnl == -200.0

    def test_chart_link_passed_through(self):
        text = (
            "date;time;instrument;side;size;entry_price;exit_price;pnl;chart_link\n"
            "2024-01-07;10:30:00;EURUSD;LONG;1;1.1;1.2;5;not a url at all\n"
        )

        assert parse_trades(text)[0].chart_link == "not a url at all"

    def test_invalid_rows_skipped(self, caplog):
        text = (
            "date;time;instrument;side;size;entry_price;exit_price;pnl\n"
            "2024-01-07;10:30:00;EURUSD;LONG;1;1.1;1.2;5\n"
            "2024-01-07;10:30:00;EURUSD;LONG;-1;1.1;1.2;5\n"
            "not-a-date;10:30:00;EURUSD;LONG;1;1.1;1.2;5\n"
            "2024-01-07;10:30:00;EURUSD;SIDEWAYS;1;1.1;1.2;5\n"
            "2024-01-07;10:30:00;;LONG;1;1.1;1.2;5\n"
        )

        with caplog.at_level(logging.WARNING, logger="tradejournal.loaders"):
            trades = parse_trades(text)

        assert len(trades) == 1
        assert "Skipped 4 invalid trade rows" in caplog.text

    def test_blank_lines_ignored(self):
        text = (
            "date;time;instrument;side;size;entry_price;exit_price;pnl\n"
            "\n"
            "2024-01-07;10:30:00;EURUSD;LONG;1;1.1;1.2;5\n"
            ";;;;;;;\n"
        )

        assert len(parse_trades(text)) == 1

    def test_empty_text(self):
        assert parse_trades("") == []

    def test_header_only(self):
        assert parse_trades("date;time;instrument;side;size;entry_price;exit_price;pnl\n") == []

    def test_commission_defaults_to_zero(self):
        text = (
            "date;time;instrument;side;size;entry_price;exit_price;pnl\n"
            "2024-01-07;10:30:00;EURUSD;LONG;1;1.1;1.2;5\n"
        )

        assert parse_trades(text)[0].commission == 0.0

    def test_byte_order_mark_before_header(self):
        text = (
            "\ufeffdate;time;instrument;side;size;entry_price;exit_price;pnl\n"
            "2024-01-07;10:30:00;EURUSD;LONG;1;1.1;1.2;5\n"
        )

        trades = parse_trades(text)

        assert len(trades) == 1
        assert trades[0].date == date(2024, 1, 7)

    def test_oversized_field_skips_row(self, caplog):
        text = (
            "date;time;instrument;side;size;entry_price;exit_price;pnl;notes\n"
            "2024-01-07;10:30:00;EURUSD;LONG;1;1.1;1.2;5;ok\n"
            f"2024-01-08;10:30:00;EURUSD;LONG;1;1.1;1.2;5;{'x' * 200000}\n"
            "2024-01-09;10:30:00;EURUSD;SHORT;1;1.2;1.1;7;ok\n"
        )

        with caplog.at_level(logging.WARNING, logger="tradejournal.loaders"):
            trades = parse_trades(text)

        assert [t.date for t in trades] == [date(2024, 1, 7), date(2024, 1, 9)]
        assert "Skipped 1 invalid trade rows" in caplog.text


class TestReadSource:
    """Asynchronous file reads."""

    def test_reads_text(self, tmp_path: Path):
        path = tmp_path / "report.csv"
        path.write_text("Total net profit;$10\n", encoding="utf-8")

        assert asyncio.run(read_source(path)) == "Total net profit;$10\n"

    def test_empty_file_is_readable(self, tmp_path: Path):
        path = tmp_path / "empty.csv"
        path.write_text("")

        assert asyncio.run(read_source(path)) == ""

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ImportFailedError, match="file not found"):
            asyncio.run(read_source(tmp_path / "nope.csv"))

    def test_directory(self, tmp_path: Path):
        with pytest.raises(ImportFailedError):
            asyncio.run(read_source(tmp_path))

    def test_undecodable_file(self, tmp_path: Path):
        path = tmp_path / "binary.csv"
        path.write_bytes(b"\xff\xfe\xfa\x00 profit")

        with pytest.raises(ImportFailedError) as excinfo:
            asyncio.run(read_source(path))

        assert excinfo.value.path == path

    def test_other_encoding(self, tmp_path: Path):
        path = tmp_path / "latin.csv"
        path.write_bytes("Profit factor;1.5 \xe9".encode("latin-1"))

        assert asyncio.run(read_source(path, encoding="latin-1")).startswith("Profit factor")

    def test_byte_order_mark_is_dropped(self, tmp_path: Path):
        path = tmp_path / "report.csv"
        path.write_text("Total net profit;$10\n", encoding="utf-8-sig")

        assert asyncio.run(read_source(path)) == "Total net profit;$10\n"
