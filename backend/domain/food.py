"""
Food entity - a single piece of food that tries to stay away from the snake.

Placement and movement are greedy heuristics, not path-finding:

* respawn() samples a handful of free cells and keeps the one that is far
  from the head (Manhattan distance) without sitting in a dead end. Every
  blocked neighbour (wall or snake) costs CORNER_PENALTY. Ties go to the
  candidate closest to the board centre so food never hides for good.
* try_evade() steps one cell away from the head (Euclidean distance), or
  stays put when no neighbour is further. How often it gets to move grows
  with the snake: len(snake) * speed_increase + 1 chances out of grid.area.
"""

import logging
from typing import Optional, Tuple

from .constants import (
    DIRECTION_VECTORS,
    FOOD_SPEED_INCREASE,
    RESPAWN_CANDIDATES,
    DISTANCE_WEIGHT,
    CORNER_PENALTY,
)
from .grid import Grid
from .snake import Snake

logger = logging.getLogger(__name__)


def manhattan_distance(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def squared_distance(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    """Squared Euclidean distance; keeps integer ties exact."""
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


class Food:
    """
    The single active piece of food.

    Attributes:
        grid: board the food lives on; its rng is the shared generator
        position: current (x, y), or None before the first respawn
        speed_increase: escape odds gained per snake segment
        candidates: how many free cells respawn() considers
    """

    def __init__(
        self,
        grid: Grid,
        position: Optional[Tuple[int, int]] = None,
        speed_increase: int = FOOD_SPEED_INCREASE,
        candidates: int = RESPAWN_CANDIDATES,
    ):
        if position is not None and not grid.contains(position):
            raise ValueError(f"Food out of bounds at {position}.")
        self.grid = grid
        self.position = position
        self.speed_increase = speed_increase
        self.candidates = candidates

    @property
    def rng(self):
        return self.grid.rng

    def placement_score(self, cell: Tuple[int, int], snake: Snake, occupied) -> float:
        blocked = len(DIRECTION_VECTORS) - self.grid.free_neighbor_count(cell, occupied)
        return DISTANCE_WEIGHT * manhattan_distance(cell, snake.head) - CORNER_PENALTY * blocked

    def respawn(self, snake: Snake) -> Tuple[int, int]:
        """
        Place the food on a hard-to-reach free cell.

        Raises:
            NoSpaceAvailable: if the snake covers the whole board.
        """
        occupied = set(snake.positions)
        candidates = self.grid.sample_empty_positions(occupied, self.candidates)
        center = self.grid.center

        # max() keeps the first sampled candidate among exact ties
        self.position = max(
            candidates,
            key=lambda cell: (
                self.placement_score(cell, snake, occupied),
                -squared_distance(cell, center),
            ),
        )
        logger.debug(f"Food respawned at {self.position} out of {len(candidates)} candidates")
        return self.position

    def best_escape(self, snake: Snake) -> Tuple[int, int]:
        """
        Return the cell (possibly the current one) furthest from the head.

        Cells off the board or on the snake are never considered. Equally
        good options are chosen between at random.
        """
        head = snake.head
        best_dist = squared_distance(self.position, head)
        best_cells = [self.position]

        fx, fy = self.position
        for dx, dy in DIRECTION_VECTORS.values():
            destination = (fx + dx, fy + dy)
            if not self.grid.contains(destination) or snake.occupies(destination):
                continue
            dist = squared_distance(destination, head)
            if dist > best_dist:
                best_dist = dist
                best_cells = [destination]
            elif dist == best_dist:
                best_cells.append(destination)

        return self.rng.choice(best_cells)

    def try_evade(self, snake: Snake) -> Tuple[int, int]:
        """Maybe step one cell away from the snake's head; return the position."""
        if self.position is None:
            raise ValueError("Food has not been placed yet.")

        area = self.grid.area
        weight = min(len(snake) * self.speed_increase, area)
        if self.rng.randrange(area) > weight:
            return self.position

        destination = self.best_escape(snake)
        if destination != self.position:
            logger.debug(f"Food evades from {self.position} to {destination}")
        self.position = destination
        return self.position

    def is_eaten_by(self, snake: Snake) -> bool:
        return self.position is not None and snake.head == self.position

    def __repr__(self):
        return f"<Food position={self.position}>"
