"""
Grid entity - the bounded board the snake and food live on.
"""

import random
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from .constants import DIRECTION_VECTORS
from .errors import NoSpaceAvailable

Position = Tuple[int, int]


class Grid:
    """
    A fixed-size board with cells (x, y), 0 <= x < width, 0 <= y < height.

    There is no wraparound: anything past an edge is out of bounds.

    Attributes:
        width, height: board dimensions in cells
        rng: random generator shared with everything that places food
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}.")
        self.width = width
        self.height = height
        self.rng = rng or random.Random()

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Tuple[float, float]:
        """Geometric centre of the board, in cell coordinates."""
        return ((self.width - 1) / 2, (self.height - 1) / 2)

    def contains(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def neighbors(self, pos: Position) -> List[Position]:
        """Return the in-bounds cells orthogonally adjacent to pos."""
        x, y = pos
        result = []
        for dx, dy in DIRECTION_VECTORS.values():
            candidate = (x + dx, y + dy)
            if self.contains(candidate):
                result.append(candidate)
        return result

    def free_neighbor_count(self, pos: Position, occupied: Iterable[Position]) -> int:
        occupied = set(occupied)
        return sum(1 for n in self.neighbors(pos) if n not in occupied)

    def sample_empty_positions(self, excluded: Iterable[Position], k: int) -> List[Position]:
        """
        Uniformly sample up to k distinct cells that are not in excluded.

        Raises:
            NoSpaceAvailable: if every cell is excluded.
        """
        excluded_set: Set[Position] = set(excluded)
        free = [cell for cell in self.cells() if cell not in excluded_set]
        if not free:
            raise NoSpaceAvailable(f"No free cell left on the {self.width}x{self.height} grid.")
        return self.rng.sample(free, min(k, len(free)))

    def random_empty_position(self, excluded: Iterable[Position]) -> Position:
        """Return a uniformly chosen cell not in excluded."""
        return self.sample_empty_positions(excluded, 1)[0]

    def __repr__(self):
        return f"<Grid {self.width}x{self.height}>"
