"""CLI commands for TradeJournal.

This package provides the command-line interface for TradeJournal:
importing a performance report and trade fills, and displaying the
derived statistics.
"""

from tradejournal.cli.main import cli, main

__all__ = ["cli", "main"]
