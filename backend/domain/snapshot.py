"""
GameSnapshot entity - a read-only view of the game at one tick.

This is everything a renderer gets to see.
"""

from typing import Any, Dict, List, Tuple, Optional


class GameSnapshot:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick: number of completed ticks in this game
        snake: list of (x, y) from head to tail
        food: (x, y) of the food, or None once the board is full
        score: current score
        phase: one of the phase constants
        width, height: board dimensions
        death_reason: why the game ended, if it did
    """

    def __init__(
        self,
        tick: int,
        snake: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        score: int,
        phase: str,
        width: int,
        height: int,
        death_reason: Optional[str] = None
    ):
        self.tick = tick
        self.snake = snake
        self.food = food
        self.score = score
        self.phase = phase
        self.width = width
        self.height = height
        self.death_reason = death_reason

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        H = snake head
        T = snake body
        (0,0) is at the bottom left, x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'A'

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = []
        # Rows top to bottom
        for y in range(self.height - 1, -1, -1):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form; tuples become lists."""
        return {
            "tick": self.tick,
            "snake": [list(pos) for pos in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "phase": self.phase,
            "width": self.width,
            "height": self.height,
            "death_reason": self.death_reason,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameSnapshot":
        food = data.get("food")
        return cls(
            tick=data["tick"],
            snake=[tuple(pos) for pos in data["snake"]],
            food=tuple(food) if food is not None else None,
            score=data["score"],
            phase=data["phase"],
            width=data["width"],
            height=data["height"],
            death_reason=data.get("death_reason"),
        )

    def __repr__(self):
        return (
            f"<GameSnapshot tick={self.tick}, food={self.food}, "
            f"length={len(self.snake)}, score={self.score}, phase={self.phase}>"
        )
