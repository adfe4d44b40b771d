"""
Tests for domain/snake.py - movement, growth and collisions.
"""

import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import (
    UP, DOWN, LEFT, RIGHT,
    ADVANCE_OK, OUT_OF_BOUNDS, SELF_COLLISION,
)
from domain.grid import Grid
from domain.snake import Snake


class TestSnakeConstruction:
    """Tests for building snakes."""

    def test_spawn_trails_behind_head(self):
        """spawn() lays the body out opposite the direction of travel."""
        snake = Snake.spawn((5, 5), 3, RIGHT)

        assert snake.body == [(5, 5), (4, 5), (3, 5)]
        assert snake.head == (5, 5)
        assert snake.tail == (3, 5)
        assert snake.direction == RIGHT
        assert snake.alive is True

    def test_spawn_facing_up(self):
        snake = Snake.spawn((2, 4), 2, UP)

        assert snake.body == [(2, 4), (2, 3)]

    def test_empty_snake_raises(self):
        with pytest.raises(ValueError):
            Snake([])

    def test_overlapping_segments_raise(self):
        with pytest.raises(ValueError):
            Snake([(1, 1), (1, 2), (1, 1)])

    def test_occupies(self):
        snake = Snake([(3, 3), (3, 2)])

        assert snake.occupies((3, 2))
        assert not snake.occupies((2, 2))


class TestSnakeDirection:
    """Tests for set_direction()."""

    def test_reversal_is_ignored(self):
        """Turning straight back onto the neck has no effect."""
        grid = Grid(10, 10)
        snake = Snake.spawn((5, 5), 3, RIGHT)

        snake.set_direction(LEFT)
        assert snake.direction == RIGHT

        assert snake.advance(grid) == ADVANCE_OK
        assert snake.head == (6, 5)

    def test_two_inputs_in_one_tick_cannot_reverse(self):
        """UP then LEFT before a move must not turn a RIGHT-moving snake around."""
        snake = Snake.spawn((5, 5), 3, RIGHT)

        snake.set_direction(UP)
        snake.set_direction(LEFT)

        assert snake.direction == UP

    def test_turn_after_move_is_checked_against_new_heading(self):
        grid = Grid(10, 10)
        snake = Snake.spawn((5, 5), 3, RIGHT)

        snake.set_direction(UP)
        snake.advance(grid)
        snake.set_direction(LEFT)

        assert snake.direction == LEFT

    def test_unknown_direction_raises(self):
        snake = Snake.spawn((5, 5), 1, RIGHT)

        with pytest.raises(ValueError):
            snake.set_direction("NORTH")


class TestSnakeAdvance:
    """Tests for advance()."""

    def test_move_without_growth_keeps_length(self):
        grid = Grid(10, 10)
        snake = Snake.spawn((5, 5), 3, RIGHT)

        result = snake.advance(grid)

        assert result == ADVANCE_OK
        assert snake.body == [(6, 5), (5, 5), (4, 5)]
        assert not snake.occupies((3, 5))

    def test_growth_adds_one_segment(self):
        grid = Grid(10, 10)
        snake = Snake.spawn((5, 5), 3, RIGHT)

        snake.grow()
        snake.advance(grid)

        assert len(snake) == 4
        assert snake.tail == (3, 5)
        assert snake.grow_pending is False

        snake.advance(grid)
        assert len(snake) == 4

    @pytest.mark.parametrize("length", [1, 2, 3, 5, 8])
    def test_length_changes_only_on_growth(self, length):
        """Without a pending growth length is constant; with one it goes up by one."""
        grid = Grid(20, 20)
        snake = Snake.spawn((10, 10), length, RIGHT)

        snake.advance(grid)
        assert len(snake) == length

        snake.grow()
        snake.advance(grid)
        assert len(snake) == length + 1

    def test_wall_collision(self):
        """Leaving the board kills the snake and leaves the body in place."""
        grid = Grid(10, 10)
        snake = Snake([(0, 3)], direction=LEFT)

        result = snake.advance(grid)

        assert result == OUT_OF_BOUNDS
        assert snake.alive is False
        assert snake.death_reason == OUT_OF_BOUNDS
        assert snake.body == [(0, 3)]

    def test_top_wall_collision(self):
        grid = Grid(5, 5)
        snake = Snake([(2, 4), (2, 3)], direction=UP)

        assert snake.advance(grid) == OUT_OF_BOUNDS

    def test_self_collision(self):
        """Running into a body segment that is not the tail is fatal."""
        grid = Grid(10, 10)
        snake = Snake([(2, 2), (3, 2), (3, 1), (2, 1), (1, 1)], direction=LEFT)

        snake.set_direction(DOWN)
        result = snake.advance(grid)

        assert result == SELF_COLLISION
        assert snake.alive is False
        assert snake.head == (2, 2)

    def test_moving_into_vacating_tail_is_allowed(self):
        """The tail leaves its cell this tick, so the head may take it."""
        grid = Grid(10, 10)
        snake = Snake([(1, 1), (1, 2), (2, 2), (2, 1)], direction=RIGHT)

        result = snake.advance(grid)

        assert result == ADVANCE_OK
        assert snake.body == [(2, 1), (1, 1), (1, 2), (2, 2)]

    def test_moving_into_tail_while_growing_is_fatal(self):
        """A growing snake keeps its tail, so the same move collides."""
        grid = Grid(10, 10)
        snake = Snake([(1, 1), (1, 2), (2, 2), (2, 1)], direction=RIGHT)
        snake.grow()

        assert snake.advance(grid) == SELF_COLLISION
