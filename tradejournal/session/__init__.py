"""Session state for TradeJournal."""

from tradejournal.session.store import TradeStore
from tradejournal.session.facade import StatisticsFacade

__all__ = ["TradeStore", "StatisticsFacade"]
