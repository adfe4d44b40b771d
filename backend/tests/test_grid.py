"""
Tests for domain/grid.py - board bounds and free-cell sampling.
"""

import pytest
import sys
import os
import random

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.grid import Grid
from domain.errors import NoSpaceAvailable


class TestGridBounds:
    """Tests for Grid.contains() and neighbours."""

    def test_contains_corners(self):
        """All four corners are on the board, one step past them is not."""
        grid = Grid(10, 8)

        assert grid.contains((0, 0))
        assert grid.contains((9, 0))
        assert grid.contains((0, 7))
        assert grid.contains((9, 7))
        assert not grid.contains((-1, 0))
        assert not grid.contains((10, 3))
        assert not grid.contains((3, 8))
        assert not grid.contains((3, -1))

    def test_rejects_non_positive_dimensions(self):
        with pytest.raises(ValueError):
            Grid(0, 5)
        with pytest.raises(ValueError):
            Grid(5, -1)

    def test_area_and_center(self):
        grid = Grid(4, 3)

        assert grid.area == 12
        assert grid.center == (1.5, 1.0)

    def test_neighbors_in_corner(self):
        """A corner cell only has two neighbours on the board."""
        grid = Grid(5, 5)

        assert sorted(grid.neighbors((0, 0))) == [(0, 1), (1, 0)]
        assert len(grid.neighbors((2, 2))) == 4

    def test_free_neighbor_count(self):
        grid = Grid(5, 5)

        assert grid.free_neighbor_count((2, 2), [(2, 3), (1, 2)]) == 2
        assert grid.free_neighbor_count((0, 0), []) == 2


class TestEmptyPositions:
    """Tests for random_empty_position() and sample_empty_positions()."""

    def test_never_returns_excluded_cell(self):
        """Sampled cells are always free and on the board."""
        grid = Grid(4, 4, random.Random(3))
        excluded = [(x, y) for x in range(4) for y in range(4) if (x + y) % 2 == 0]

        for _ in range(100):
            pos = grid.random_empty_position(excluded)
            assert pos not in excluded
            assert grid.contains(pos)

    def test_only_free_cell_is_returned(self):
        grid = Grid(3, 1)

        assert grid.random_empty_position([(0, 0), (2, 0)]) == (1, 0)

    def test_full_board_raises(self):
        grid = Grid(2, 2)

        with pytest.raises(NoSpaceAvailable):
            grid.random_empty_position(list(grid.cells()))

    def test_sample_is_distinct_and_capped(self):
        """Asking for more cells than are free returns every free cell once."""
        grid = Grid(3, 3, random.Random(1))
        excluded = [(0, 0), (1, 1)]

        sample = grid.sample_empty_positions(excluded, 50)

        assert len(sample) == 7
        assert len(set(sample)) == 7
        assert not set(sample) & set(excluded)

    def test_same_seed_same_positions(self):
        """Placement is reproducible when the generator is seeded."""
        first = Grid(20, 20, random.Random(42))
        second = Grid(20, 20, random.Random(42))

        a = [first.random_empty_position([(5, 5)]) for _ in range(10)]
        b = [second.random_empty_position([(5, 5)]) for _ in range(10)]

        assert a == b
