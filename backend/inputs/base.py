"""
Base input interface for the game engine.
"""

from typing import Optional

from domain.snapshot import GameSnapshot


class InputSource:
    """
    Base class/interface for anything that steers the snake.

    The game loop asks once per tick; returning None keeps the current
    direction.
    """

    def next_direction(self, snapshot: GameSnapshot) -> Optional[str]:
        """
        Return the direction to apply on the coming tick.

        Args:
            snapshot: State of the game before the tick

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", or None
        """
        raise NotImplementedError
