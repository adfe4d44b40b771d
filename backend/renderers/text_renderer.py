"""
Text renderer - prints the board as characters.
"""

import sys
from typing import Optional, TextIO

from domain.constants import GAME_OVER, ENTERING_SCORE, PAUSED, DEATH_MESSAGES
from domain.snapshot import GameSnapshot
from .base import Renderer


def status_line(snapshot: GameSnapshot) -> str:
    line = f"Tick {snapshot.tick} | Score {snapshot.score} | Length {len(snapshot.snake)}"
    if snapshot.phase == PAUSED:
        line += " | PAUSED"
    elif snapshot.phase in (GAME_OVER, ENTERING_SCORE):
        cause = DEATH_MESSAGES.get(snapshot.death_reason, snapshot.death_reason)
        line += f" | GAME OVER: the snake {cause}"
    return line


class TextRenderer(Renderer):
    """Writes the board and a status line to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def render(self, snapshot: GameSnapshot) -> None:
        self.stream.write("\n" + snapshot.print_board() + "\n")
        self.stream.write(status_line(snapshot) + "\n")
        self.stream.flush()
