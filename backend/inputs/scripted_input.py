"""
Scripted input - replays a fixed sequence of moves.
"""

from typing import Iterable, List, Optional, Union

from domain.constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES
from domain.snapshot import GameSnapshot
from .base import InputSource

# One character per tick; '.' means "no input"
SCRIPT_CHARS = {
    "U": UP,
    "D": DOWN,
    "L": LEFT,
    "R": RIGHT,
    ".": None,
}


def parse_script(script: str) -> List[Optional[str]]:
    """
    Turn a move script such as "RRU.L" into a list of directions.

    Whitespace is ignored, letters are case-insensitive.

    Raises:
        ValueError: on any other character.
    """
    moves = []
    for char in script:
        if char.isspace():
            continue
        key = char.upper()
        if key not in SCRIPT_CHARS:
            raise ValueError(f"Invalid move '{char}' in script. Use U, D, L, R or '.'")
        moves.append(SCRIPT_CHARS[key])
    return moves


class ScriptedInput(InputSource):
    """
    Feeds one move per tick from a script, then nothing.

    Accepts either a script string or an iterable of directions/None.
    """

    def __init__(self, moves: Union[str, Iterable[Optional[str]]]):
        if isinstance(moves, str):
            self.moves = parse_script(moves)
        else:
            self.moves = list(moves)
            for move in self.moves:
                if move is not None and move not in VALID_MOVES:
                    raise ValueError(f"Unknown direction: {move}")
        self.position = 0

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.moves)

    def next_direction(self, snapshot: GameSnapshot) -> Optional[str]:
        if self.exhausted:
            return None
        move = self.moves[self.position]
        self.position += 1
        return move
