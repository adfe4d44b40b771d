"""
Score repository - SQLite storage for the high-score table.
"""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, List, Optional
import sqlite3

import database
from domain.constants import TIMESTAMP_FORMAT
from domain.high_scores import HighScoreEntry

logger = logging.getLogger(__name__)


class ScoreRepository:
    """
    Repository for the high_scores table.

    Implements the storage collaborator interface (load/save/clear) used by
    HighScoreStore. save() replaces the whole table in one transaction.
    """

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path
        self._schema_ready = False

    def _ensure_schema(self) -> None:
        """Create the table on first use."""
        if not self._schema_ready:
            database.init_database(self.db_path)
            self._schema_ready = True

    @contextmanager
    def _cursor(self, write: bool = False) -> Iterator[sqlite3.Cursor]:
        """
        Open a short-lived connection for one unit of work.

        Writes are committed when the block exits cleanly and rolled back
        otherwise. The connection is always closed.
        """
        self._ensure_schema()
        conn = database.get_connection(self.db_path)
        cursor = conn.cursor()
        try:
            yield cursor
            if write:
                conn.commit()
        except Exception:
            if write:
                conn.rollback()
            raise
        finally:
            cursor.close()
            conn.close()

    def load(self) -> List[HighScoreEntry]:
        with self._cursor() as cursor:
            cursor.execute("""
                SELECT player, score, timestamp
                FROM high_scores
                ORDER BY rank ASC
            """)
            rows = cursor.fetchall()

        return [
            HighScoreEntry(
                name=row['player'],
                score=row['score'],
                timestamp=datetime.strptime(row['timestamp'], TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc),
            )
            for row in rows
        ]

    def save(self, entries: List[HighScoreEntry]) -> None:
        with self._cursor(write=True) as cursor:
            cursor.execute("DELETE FROM high_scores")
            cursor.executemany("""
                INSERT INTO high_scores (rank, player, score, timestamp)
                VALUES (?, ?, ?, ?)
            """, [
                (rank, entry.name, entry.score, entry.timestamp.strftime(TIMESTAMP_FORMAT))
                for rank, entry in enumerate(entries, start=1)
            ])
        logger.info(f"Saved {len(entries)} high scores to {database.get_database_path(self.db_path)}")

    def clear(self) -> int:
        """Delete every stored score; return how many rows were removed."""
        with self._cursor(write=True) as cursor:
            cursor.execute("DELETE FROM high_scores")
            deleted = cursor.rowcount
        logger.info(f"Deleted {deleted} high scores")
        return deleted
