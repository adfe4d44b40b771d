"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple, Optional

from .constants import (
    RIGHT,
    VALID_MOVES,
    DIRECTION_VECTORS,
    OPPOSITE_DIRECTIONS,
    ADVANCE_OK,
    OUT_OF_BOUNDS,
    SELF_COLLISION,
)
from .grid import Grid


class Snake:
    """
    Represents a snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        direction: the direction the snake will move in on the next advance
        heading: the direction of the last completed move
        grow_pending: whether the next advance keeps the tail
        alive: whether this snake is still alive
        death_reason: e.g., 'wall', 'self'
    """

    def __init__(self, positions: List[Tuple[int, int]], direction: str = RIGHT):
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        if len(set(positions)) != len(positions):
            raise ValueError(f"Snake segments overlap: {positions}")
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction}")
        self.positions = deque(positions)
        self.direction = direction
        self.heading = direction
        self.grow_pending = False
        self.alive = True
        self.death_reason: Optional[str] = None

    @classmethod
    def spawn(cls, head: Tuple[int, int], length: int, direction: str = RIGHT) -> "Snake":
        """Build a straight snake whose body trails behind the head."""
        if length < 1:
            raise ValueError(f"Snake length must be at least 1, got {length}.")
        dx, dy = DIRECTION_VECTORS[direction]
        hx, hy = head
        positions = [(hx - i * dx, hy - i * dy) for i in range(length)]
        return cls(positions, direction)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        return self.positions[-1]

    @property
    def body(self) -> List[Tuple[int, int]]:
        return list(self.positions)

    def head_position(self) -> Tuple[int, int]:
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def occupies(self, pos: Tuple[int, int]) -> bool:
        return pos in self.positions

    def set_direction(self, direction: str) -> None:
        """
        Change the intended direction.

        Reversing onto the neck is ignored. The check is made against the
        direction of the last move, so several inputs inside one tick cannot
        turn the snake around either.
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction}")
        if direction == OPPOSITE_DIRECTIONS[self.heading]:
            return
        self.direction = direction

    def grow(self) -> None:
        self.grow_pending = True

    def next_head(self) -> Tuple[int, int]:
        dx, dy = DIRECTION_VECTORS[self.direction]
        hx, hy = self.head
        return (hx + dx, hy + dy)

    def advance(self, grid: Grid) -> str:
        """
        Move one cell in the current direction.

        Returns ADVANCE_OK, OUT_OF_BOUNDS or SELF_COLLISION. On a collision
        the body is left where it was and the snake is marked dead.
        """
        new_head = self.next_head()

        if not grid.contains(new_head):
            return self._die(OUT_OF_BOUNDS)

        # The tail vacates its cell this tick unless we are growing
        blocking = list(self.positions)
        if not self.grow_pending:
            blocking = blocking[:-1]
        if new_head in blocking:
            return self._die(SELF_COLLISION)

        self.positions.appendleft(new_head)
        if self.grow_pending:
            self.grow_pending = False
        else:
            self.positions.pop()
        self.heading = self.direction
        return ADVANCE_OK

    def _die(self, reason: str) -> str:
        self.alive = False
        self.death_reason = reason
        return reason

    def __repr__(self):
        return (
            f"<Snake head={self.head}, length={len(self)}, "
            f"direction={self.direction}, alive={self.alive}>"
        )
