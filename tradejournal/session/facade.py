"""Statistics facade: one entry point for import and recompute.

The facade owns the session state (trade store, current summary and
the published statistics bundle). Every import replaces all of it.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from tradejournal.analytics.advanced import compute_advanced_stats
from tradejournal.analytics.buckets import WEEKDAY_NAMES
from tradejournal.analytics.grouping import compute_daily_stats, compute_instrument_stats
from tradejournal.analytics.summary import parse_summary, summarize_trades
from tradejournal.analytics.views import hourly_distribution
from tradejournal.config import JournalConfig
from tradejournal.loaders import parse_trades, read_source
from tradejournal.models import BasicStats, StatisticsBundle, Trade
from tradejournal.session.store import TradeStore

logger = logging.getLogger(__name__)


class StatisticsFacade:
    """Orchestrates parsing, storage and derived statistics.

    Consumers read ``bundle``; it is replaced as a whole after each
    import and never updated in place.
    """

    def __init__(
        self,
        store: Optional[TradeStore] = None,
        config: Optional[JournalConfig] = None,
    ):
        """Initialize the facade.

        Args:
            store: Trade store to own. A new empty store if not provided.
            config: Import and display settings. Defaults if not provided.
        """
        self._store = store or TradeStore()
        self._config = config or JournalConfig()
        self._basic_stats = BasicStats()
        self._bundle = StatisticsBundle()
        self._generation = 0

    @property
    def store(self) -> TradeStore:
        """The trade store of this session."""
        return self._store

    @property
    def bundle(self) -> StatisticsBundle:
        """The most recently published statistics."""
        return self._bundle

    def recompute(self) -> StatisticsBundle:
        """Recompute every derived statistic from the current state.

        Returns:
            The newly published bundle.
        """
        trades = self._store.trades
        names = WEEKDAY_NAMES[self._config.weekday_names]

        self._bundle = StatisticsBundle(
            basic_stats=self._basic_stats,
            trades=trades,
            daily_stats=tuple(compute_daily_stats(trades).values()),
            instrument_stats=tuple(compute_instrument_stats(trades).values()),
            advanced_stats=compute_advanced_stats(trades, self._basic_stats, names),
            hourly_stats=tuple(hourly_distribution(trades)),
        )
        return self._bundle

    def load(
        self,
        summary_text: Optional[str] = None,
        trades: Optional[Iterable[Trade]] = None,
    ) -> StatisticsBundle:
        """Replace the session with a new summary and/or trade list.

        Without a summary, BasicStats are derived from the trades.
        Without trades, the trade list is emptied.

        Args:
            summary_text: Raw performance report text.
            trades: Trades in stored order.

        Returns:
            The newly published bundle.

        Raises:
            ValueError: If neither a summary nor trades are given.
        """
        if summary_text is None and trades is None:
            raise ValueError("Nothing to import: provide a summary, trades, or both")

        self._store.replace_all(trades or ())
        if summary_text is not None:
            self._basic_stats = parse_summary(summary_text, self._config.delimiter)
        else:
            self._basic_stats = summarize_trades(self._store.trades)

        logger.info("Loaded %d trades", len(self._store))
        return self.recompute()

    async def import_files(
        self,
        summary_path: Optional[Path] = None,
        trades_path: Optional[Path] = None,
    ) -> Optional[StatisticsBundle]:
        """Read source files and load them into the session.

        If another import starts while this one is reading, this one's
        result is dropped and the later import wins.

        Args:
            summary_path: Performance report file.
            trades_path: Delimited trade fills file.

        Returns:
            The published bundle, or None if a later import superseded it.

        Raises:
            ValueError: If neither path is given.
            ImportFailedError: If a file cannot be read.
        """
        if summary_path is None and trades_path is None:
            raise ValueError("Nothing to import: provide a summary, trades, or both")

        self._generation += 1
        generation = self._generation

        encoding = self._config.encoding
        summary_text = await read_source(summary_path, encoding) if summary_path else None
        trades_text = await read_source(trades_path, encoding) if trades_path else None

        if generation != self._generation:
            logger.debug("Import %d superseded by import %d", generation, self._generation)
            return None

        trades = parse_trades(trades_text, self._config.delimiter) if trades_text is not None else None
        return self.load(summary_text, trades)
