"""
Exceptions raised by the game engine.

Collisions are not exceptions: they are outcome codes (see constants) that
drive the RUNNING -> GAME_OVER transition.
"""


class SnakeGameError(Exception):
    """Base class for engine errors."""


class NoSpaceAvailable(SnakeGameError):
    """Every cell of the grid is occupied."""


class PersistFailed(SnakeGameError):
    """
    Writing the high-score table to storage failed.

    The in-memory ranking already holds the new entry when this is raised.
    """


class InvalidPhase(SnakeGameError):
    """An operation was called in a phase that does not allow it."""


class ConfigError(SnakeGameError, ValueError):
    """A configuration value is outside its recognised range."""
