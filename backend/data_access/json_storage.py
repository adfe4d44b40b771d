"""
JSON file storage for the high-score table.

File format: a JSON list of records, best first:
    [{"player": "ada", "score": 120, "timestamp": "2024/05/01 18:30:00"}, ...]
"""

import os
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from domain.constants import TIMESTAMP_FORMAT
from domain.high_scores import HighScoreEntry

logger = logging.getLogger(__name__)


class JsonScoreStorage:
    """Storage collaborator that keeps the ranking in a single JSON file."""

    def __init__(self, path: str):
        self.path = Path(path)

    def load(self) -> List[HighScoreEntry]:
        """
        Read the score file.

        A missing file is an empty table. An unreadable file is logged and
        also read as empty; malformed records are skipped.
        """
        if not self.path.exists():
            logger.info(f"No score file at {self.path}, starting with an empty table")
            return []

        try:
            with open(self.path, 'r') as f:
                records = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read score file {self.path}: {e}")
            return []

        if not isinstance(records, list):
            logger.warning(f"Score file {self.path} does not hold a list, ignoring it")
            return []

        entries = []
        for record in records:
            try:
                entries.append(self._from_record(record))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed score record {record!r}: {e}")
        return entries

    def save(self, entries: List[HighScoreEntry]) -> None:
        data = [self._to_record(entry) for entry in entries]
        os.makedirs(self.path.parent, exist_ok=True)
        with open(self.path, 'w') as f:
            json.dump(data, f, indent=2)
        logger.info(f"Saved {len(entries)} high scores to {self.path}")

    def clear(self) -> int:
        """Remove the score file; return how many records it held."""
        count = len(self.load())
        if self.path.exists():
            self.path.unlink()
        return count

    @staticmethod
    def _to_record(entry: HighScoreEntry) -> dict:
        return {
            "player": entry.name,
            "score": entry.score,
            "timestamp": entry.timestamp.strftime(TIMESTAMP_FORMAT),
        }

    @staticmethod
    def _from_record(record: dict) -> HighScoreEntry:
        player = record["player"]
        if not isinstance(player, str):
            raise ValueError(f"player must be a string, got {player!r}")
        score = record["score"]
        if not isinstance(score, int) or isinstance(score, bool):
            raise ValueError(f"score must be an integer, got {score!r}")
        timestamp = datetime.strptime(record["timestamp"], TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)
        return HighScoreEntry(name=player, score=score, timestamp=timestamp)
