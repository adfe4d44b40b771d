"""
Database configuration and schema management for the high-score table.

This module provides SQLite connection management with environment-aware
path selection and schema initialization.
"""

import os
import logging
import sqlite3
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def get_database_path(db_path: Optional[str] = None) -> str:
    """
    Determine the SQLite database path.

    Priority:
    1. An explicit db_path argument
    2. SNAKE_DB_PATH environment variable
    3. snake_scores.db next to this module
    """
    if db_path:
        return db_path

    env_path = os.getenv('SNAKE_DB_PATH')
    if env_path:
        parent = os.path.dirname(env_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        return env_path

    backend_dir = Path(__file__).parent
    return str(backend_dir / 'snake_scores.db')


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """
    Get a database connection with appropriate settings.

    Returns:
        sqlite3.Connection: Database connection with row factory enabled.
    """
    conn = sqlite3.connect(get_database_path(db_path))
    conn.row_factory = sqlite3.Row  # Enable column access by name
    return conn


def init_database(db_path: Optional[str] = None) -> None:
    """
    Initialize the database schema.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    logger.info(f"Initializing database at: {get_database_path(db_path)}")

    conn = get_connection(db_path)
    cursor = conn.cursor()

    try:
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS high_scores (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                rank INTEGER NOT NULL,
                player TEXT NOT NULL,
                score INTEGER NOT NULL,
                timestamp TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        cursor.execute("CREATE INDEX IF NOT EXISTS idx_high_scores_rank ON high_scores(rank)")
        conn.commit()

    except Exception as e:
        conn.rollback()
        logger.error(f"Error initializing database: {e}")
        raise
    finally:
        conn.close()


if __name__ == "__main__":
    # Allow running this module directly to initialize the database
    logging.basicConfig(level=logging.INFO)
    init_database()
    print(f"Database ready at: {get_database_path()}")
