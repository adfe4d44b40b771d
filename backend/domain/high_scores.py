"""
High-score table: a bounded ranking persisted through a storage collaborator.
"""

import bisect
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from .constants import DEFAULT_HIGH_SCORE_CAPACITY, MAX_NAME_LENGTH, DEFAULT_PLAYER_NAME
from .errors import PersistFailed

logger = logging.getLogger(__name__)


def normalize_name(name: Optional[str]) -> str:
    """Trim and shorten a player name; blank names become the default."""
    name = (name or "").strip()[:MAX_NAME_LENGTH]
    return name or DEFAULT_PLAYER_NAME


@dataclass
class HighScoreEntry:
    name: str
    score: int
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    rank: int = 0

    def __post_init__(self):
        self.name = normalize_name(self.name)


class HighScoreStore:
    """
    Ranked list of the best scores, highest first.

    The storage collaborator only needs load() -> list of HighScoreEntry
    and save(entries). The in-memory ranking is authoritative: a failed
    save never rolls it back.
    """

    def __init__(self, storage, capacity: int = DEFAULT_HIGH_SCORE_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"High-score capacity must be positive, got {capacity}.")
        self.storage = storage
        self.capacity = capacity
        self._entries: List[HighScoreEntry] = []

    def load(self) -> List[HighScoreEntry]:
        """
        Read the table from storage.

        Missing storage is an empty table. Unreadable storage is logged and
        also treated as empty so the game can still start.
        """
        try:
            rows = self.storage.load()
        except Exception as e:
            logger.warning(f"Could not load high scores, starting with an empty table: {e}")
            rows = []

        self._entries = sorted(rows, key=lambda entry: -entry.score)[:self.capacity]
        self._rerank()
        logger.info(f"Loaded {len(self._entries)} high scores")
        return self.entries()

    def entries(self) -> List[HighScoreEntry]:
        return list(self._entries)

    def is_full(self) -> bool:
        return len(self._entries) >= self.capacity

    def lowest_qualifying_score(self) -> int:
        """Smallest score that would make it into the table."""
        if not self.is_full():
            return 0
        return self._entries[-1].score + 1

    def qualifies(self, score: int) -> bool:
        return score >= self.lowest_qualifying_score()

    def insert(self, entry: HighScoreEntry) -> List[HighScoreEntry]:
        """
        Insert entry at its rank, drop whatever falls off the end and save.

        Equal scores rank below the ones already in the table.

        Raises:
            PersistFailed: if storage could not be written. The returned
                ranking is still updated in memory.
        """
        keys = [-existing.score for existing in self._entries]
        index = bisect.bisect_right(keys, -entry.score)
        self._entries.insert(index, entry)
        del self._entries[self.capacity:]
        self._rerank()

        try:
            self.storage.save(self.entries())
        except Exception as e:
            logger.error(f"Failed to persist high scores: {e}")
            raise PersistFailed(f"Could not save high scores: {e}") from e

        return self.entries()

    def _rerank(self) -> None:
        for rank, entry in enumerate(self._entries, start=1):
            entry.rank = rank

    def __repr__(self):
        return f"<HighScoreStore entries={len(self._entries)}/{self.capacity}>"
