#!/usr/bin/env python3
"""
Reset the high-score table.

Deletes every stored score from the configured backend (JSON file or
SQLite table). The SQLite schema is preserved.

Usage:
    python backend/cli/reset_scores.py [--confirm] [--config game.yaml]
"""

import os
import sys
import argparse

# Add parent directory to path to import project modules
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))

from config import load_config  # noqa: E402
from data_access import create_score_storage  # noqa: E402


def reset_scores(storage, confirm: bool = False, prompt=input) -> bool:
    """
    Remove all high scores from storage.

    Args:
        storage: JsonScoreStorage or ScoreRepository
        confirm: If True, skip confirmation prompt
        prompt: function used to ask for confirmation

    Returns:
        True if reset was successful, False otherwise
    """
    if not confirm:
        print("=" * 70)
        print("HIGH SCORE RESET WARNING")
        print("=" * 70)
        print(f"Storage: {storage.__class__.__name__}")
        print("\nThis will DELETE ALL recorded high scores.")
        print("=" * 70)

        response = prompt("\nType 'RESET' to confirm: ")

        if response != 'RESET':
            print("Reset cancelled")
            return False

    try:
        deleted = storage.clear()
    except Exception as e:
        print(f"Error resetting high scores: {e}")
        return False

    print(f"High scores cleared: {deleted} entries deleted")
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(description="Reset the high-score table")
    parser.add_argument("--confirm", action="store_true",
                        help="Skip the confirmation prompt")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML config file naming the storage backend")
    parser.add_argument("--storage", dest="storage_backend", choices=["json", "sqlite"], default=None,
                        help="High-score storage backend")
    parser.add_argument("--scores-path", type=str, default=None,
                        help="Score file (json) or database (sqlite)")
    args = parser.parse_args(argv)

    config = load_config(args.config, {
        "storage_backend": args.storage_backend,
        "scores_path": args.scores_path,
    })
    storage = create_score_storage(config.storage_backend, config.score_storage_path)

    success = reset_scores(storage, confirm=args.confirm)
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
