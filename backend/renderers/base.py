"""
Base renderer interface for the game engine.
"""

from domain.snapshot import GameSnapshot


class Renderer:
    """
    Base class/interface for anything that displays the game.

    Renderers receive a read-only snapshot once per tick and must not
    reach back into the game.
    """

    def render(self, snapshot: GameSnapshot) -> None:
        raise NotImplementedError
