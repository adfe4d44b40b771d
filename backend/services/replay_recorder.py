"""
Replay recording - keeps every snapshot of a game so it can be saved as
JSON and turned into a video later.

Replay file layout:
    {
        "metadata": {"game_id": ..., "start_time": ..., "end_time": ...,
                     "width": ..., "height": ..., "final_score": ...,
                     "death_reason": ..., "ticks": ...},
        "frames": [<GameSnapshot.to_dict()>, ...]
    }
"""

import os
import json
import uuid
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from domain.snapshot import GameSnapshot
from renderers.base import Renderer

logger = logging.getLogger(__name__)


class ReplayRecorder(Renderer):
    """Renderer that records snapshots instead of drawing them."""

    def __init__(self, game_id: Optional[str] = None):
        self.game_id = game_id or str(uuid.uuid4())
        self.start_time = datetime.now(timezone.utc)
        self.frames: List[GameSnapshot] = []

    def render(self, snapshot: GameSnapshot) -> None:
        self.frames.append(snapshot)

    def build_replay(self) -> Dict[str, Any]:
        last = self.frames[-1] if self.frames else None
        metadata = {
            "game_id": self.game_id,
            "start_time": self.start_time.isoformat(),
            "end_time": datetime.now(timezone.utc).isoformat(),
            "width": last.width if last else None,
            "height": last.height if last else None,
            "final_score": last.score if last else 0,
            "death_reason": last.death_reason if last else None,
            "ticks": last.tick if last else 0,
        }
        return {
            "metadata": metadata,
            "frames": [frame.to_dict() for frame in self.frames],
        }

    def save_json(self, path: Optional[str] = None) -> str:
        """Write the replay to path (default: completed_games/snake_game_<id>.json)."""
        if path is None:
            path = os.path.join("completed_games", f"snake_game_{self.game_id}.json")

        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.build_replay(), f, indent=2)

        logger.info(f"Saved replay with {len(self.frames)} frames to {path}")
        return path


def load_replay(path: str) -> Tuple[Dict[str, Any], List[GameSnapshot]]:
    """
    Load a replay file.

    Returns:
        (metadata, frames)

    Raises:
        FileNotFoundError: if path does not exist
        ValueError: if the file is not a replay
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Replay file not found: {path}")

    with open(path, 'r') as f:
        data = json.load(f)

    if not isinstance(data, dict) or "frames" not in data:
        raise ValueError(f"{path} is not a replay file (missing 'frames')")

    frames = [GameSnapshot.from_dict(frame) for frame in data["frames"]]
    logger.info(f"Loaded replay with {len(frames)} frames from {path}")
    return data.get("metadata", {}), frames
