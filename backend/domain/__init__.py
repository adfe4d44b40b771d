"""
Domain entities for the escaping-food snake engine.

This module contains the core game entities that are independent of
infrastructure concerns (storage, rendering, input capture, etc.).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    OUT_OF_BOUNDS, SELF_COLLISION, BOARD_FILLED,
    RUNNING, PAUSED, GAME_OVER, ENTERING_SCORE,
    CONTINUING, DIED, IDLE,
)
from .errors import SnakeGameError, NoSpaceAvailable, PersistFailed, InvalidPhase, ConfigError
from .grid import Grid
from .snake import Snake
from .food import Food
from .snapshot import GameSnapshot
from .high_scores import HighScoreEntry, HighScoreStore
from .game_state import GameState, TickOutcome

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'OUT_OF_BOUNDS', 'SELF_COLLISION', 'BOARD_FILLED',
    'RUNNING', 'PAUSED', 'GAME_OVER', 'ENTERING_SCORE',
    'CONTINUING', 'DIED', 'IDLE',
    'SnakeGameError', 'NoSpaceAvailable', 'PersistFailed', 'InvalidPhase', 'ConfigError',
    'Grid',
    'Snake',
    'Food',
    'GameSnapshot',
    'HighScoreEntry',
    'HighScoreStore',
    'GameState',
    'TickOutcome',
]
