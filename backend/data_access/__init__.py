"""
Data access layer for the high-score table.

Both storage backends expose load() / save(entries) / clear() so that
HighScoreStore never needs to know where scores live.
"""

from typing import Optional

from .json_storage import JsonScoreStorage
from .repositories import ScoreRepository

STORAGE_BACKENDS = {
    "json": JsonScoreStorage,
    "sqlite": ScoreRepository,
}


def create_score_storage(backend: str = "json", path: Optional[str] = None):
    """
    Build the storage collaborator for a backend name.

    Args:
        backend: 'json' or 'sqlite'
        path: score file (json) or database file (sqlite; None uses the
              default database location)

    Raises:
        ValueError: If backend is not recognized.
    """
    if backend not in STORAGE_BACKENDS:
        available = ", ".join(sorted(STORAGE_BACKENDS))
        raise ValueError(f"Unknown storage backend '{backend}'. Available backends: {available}")

    if backend == "json":
        if not path:
            raise ValueError("The json backend needs a score file path")
        return JsonScoreStorage(path)
    return ScoreRepository(path)


__all__ = [
    'JsonScoreStorage',
    'ScoreRepository',
    'STORAGE_BACKENDS',
    'create_score_storage',
]
