"""
Input sources that steer the snake.

The engine only depends on the InputSource interface; key capture itself
belongs to whatever shell hosts the game.
"""

from .base import InputSource
from .scripted_input import ScriptedInput, parse_script
from .key_input import KeyEventInput, DEFAULT_KEYMAP, PAUSE, RESTART, QUIT

__all__ = [
    'InputSource',
    'ScriptedInput',
    'parse_script',
    'KeyEventInput',
    'DEFAULT_KEYMAP',
    'PAUSE',
    'RESTART',
    'QUIT',
]
