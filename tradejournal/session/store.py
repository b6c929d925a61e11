"""In-memory trade store for one analysis session."""

from typing import Iterable, Iterator

from tradejournal.models import Trade


class TradeStore:
    """Holds the ordered trade list of the current session.

    The only write is ``replace_all``; trades are never edited or
    removed individually.
    """

    def __init__(self, trades: Iterable[Trade] = ()):
        """Initialize the store.

        Args:
            trades: Initial trades, in stored order.
        """
        self._trades: tuple[Trade, ...] = tuple(trades)
        self._version = 0

    @property
    def trades(self) -> tuple[Trade, ...]:
        """Current trades in stored order."""
        return self._trades

    @property
    def version(self) -> int:
        """Number of replacements since the store was created."""
        return self._version

    def replace_all(self, trades: Iterable[Trade]) -> None:
        """Replace every stored trade with ``trades``."""
        self._trades = tuple(trades)
        self._version += 1

    def __len__(self) -> int:
        return len(self._trades)

    def __iter__(self) -> Iterator[Trade]:
        return iter(self._trades)
