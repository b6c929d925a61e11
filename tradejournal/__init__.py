"""TradeJournal - trading performance analytics from execution history."""

__version__ = "0.1.0"
