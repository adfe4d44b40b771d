"""
Key-event input - turns key presses delivered by a window or terminal
shell into directions and game commands.

Capturing the keys is the shell's job; it calls press() for every key it
sees and the game loop drains one direction per tick.
"""

from typing import Dict, List, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT
from domain.snapshot import GameSnapshot
from .base import InputSource

# Commands that are not directions
PAUSE = "PAUSE"
RESTART = "RESTART"
QUIT = "QUIT"

DEFAULT_KEYMAP: Dict[str, str] = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
    "p": PAUSE,
    "space": PAUSE,
    "r": RESTART,
    "escape": QUIT,
    "q": QUIT,
}


class KeyEventInput(InputSource):
    """
    Buffers key presses between ticks.

    Only the last direction pressed before a tick counts. Commands are
    queued separately for the shell to act on.
    """

    def __init__(self, keymap: Optional[Dict[str, str]] = None):
        self.keymap = dict(keymap or DEFAULT_KEYMAP)
        self._pending_direction: Optional[str] = None
        self._commands: List[str] = []

    def translate(self, key: str) -> Optional[str]:
        """Map a key name to a direction or command; unknown keys map to None."""
        return self.keymap.get(key.lower())

    def press(self, key: str) -> Optional[str]:
        action = self.translate(key)
        if action in (UP, DOWN, LEFT, RIGHT):
            self._pending_direction = action
        elif action is not None:
            self._commands.append(action)
        return action

    def next_direction(self, snapshot: GameSnapshot) -> Optional[str]:
        direction, self._pending_direction = self._pending_direction, None
        return direction

    def drain_commands(self) -> List[str]:
        commands, self._commands = self._commands, []
        return commands
