"""
Image renderer - draws snapshots as Pillow images.

Layout: a score bar on top, the board below it with a grid, the snake
(darker head with eyes) and the food. (0, 0) is the bottom-left cell, so
y is flipped when converting to pixels.
"""

from typing import List, Tuple

from PIL import Image, ImageDraw, ImageFont

from domain.constants import GAME_OVER, ENTERING_SCORE, PAUSED, DEATH_MESSAGES
from domain.snapshot import GameSnapshot
from .base import Renderer

CELL_SIZE = 25  # Size of each grid cell in pixels
SCORE_BAR_HEIGHT = 30


class ColorScheme:
    """Colors for the board and its contents"""

    BACKGROUND = "#808080"
    BOARD = "#FFFFFF"
    GRID_LINE = "#E5E7EB"
    BORDER = "#000000"
    SNAKE = "#00CC00"
    FOOD = "#CC0000"
    SCORE_TEXT = "#CC0000"
    GAME_OVER_OVERLAY = (230, 0, 0, 128)
    PAUSE_OVERLAY = (0, 0, 0, 96)


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def darken_color(hex_color: str, amount: float = 0.3) -> Tuple[int, int, int]:
    """Darken a hex color by a given amount"""
    r, g, b = hex_to_rgb(hex_color)
    r = max(0, int(r * (1 - amount)))
    g = max(0, int(g * (1 - amount)))
    b = max(0, int(b * (1 - amount)))
    return (r, g, b)


class ImageRenderer(Renderer):
    """
    Renders each snapshot to an RGB image and keeps the frames.

    Attributes:
        cell_size: pixel size of one board cell
        frames: every image rendered through render(), in order
    """

    def __init__(self, cell_size: int = CELL_SIZE):
        self.cell_size = cell_size
        self.frames: List[Image.Image] = []
        self.font = ImageFont.load_default()

    def image_size(self, width: int, height: int) -> Tuple[int, int]:
        return (width * self.cell_size, height * self.cell_size + SCORE_BAR_HEIGHT)

    def render(self, snapshot: GameSnapshot) -> None:
        self.frames.append(self.render_frame(snapshot))

    def render_frame(self, snapshot: GameSnapshot) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new('RGB', self.image_size(snapshot.width, snapshot.height),
                        hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        self._draw_score_bar(draw, snapshot)
        self._draw_board(draw, snapshot)

        if snapshot.phase in (GAME_OVER, ENTERING_SCORE):
            img = self._overlay(img, ColorScheme.GAME_OVER_OVERLAY)
            draw = ImageDraw.Draw(img)
            cause = DEATH_MESSAGES.get(snapshot.death_reason, snapshot.death_reason)
            draw.text((5, SCORE_BAR_HEIGHT + 5), f"GAME OVER: {cause}",
                      fill=(255, 255, 255), font=self.font)
        elif snapshot.phase == PAUSED:
            img = self._overlay(img, ColorScheme.PAUSE_OVERLAY)

        return img

    def _draw_score_bar(self, draw: ImageDraw.ImageDraw, snapshot: GameSnapshot):
        width = snapshot.width * self.cell_size
        draw.rectangle([0, 0, width, SCORE_BAR_HEIGHT], fill=hex_to_rgb(ColorScheme.BORDER))
        draw.text((width // 2 - 20, SCORE_BAR_HEIGHT // 3), str(snapshot.score),
                  fill=hex_to_rgb(ColorScheme.SCORE_TEXT), font=self.font)

    def _cell_origin(self, pos: Tuple[int, int], board_height: int) -> Tuple[int, int]:
        x, y = pos
        flipped_y = board_height - 1 - y
        return (x * self.cell_size, SCORE_BAR_HEIGHT + flipped_y * self.cell_size)

    def _draw_board(self, draw: ImageDraw.ImageDraw, snapshot: GameSnapshot):
        cell = self.cell_size
        board_w = snapshot.width * cell
        board_h = snapshot.height * cell
        top = SCORE_BAR_HEIGHT

        draw.rectangle([0, top, board_w - 1, top + board_h - 1],
                       fill=hex_to_rgb(ColorScheme.BOARD),
                       outline=hex_to_rgb(ColorScheme.BORDER))

        for i in range(1, snapshot.width):
            draw.line([i * cell, top, i * cell, top + board_h], fill=hex_to_rgb(ColorScheme.GRID_LINE))
        for i in range(1, snapshot.height):
            draw.line([0, top + i * cell, board_w, top + i * cell], fill=hex_to_rgb(ColorScheme.GRID_LINE))

        if snapshot.food is not None:
            x, y = self._cell_origin(snapshot.food, snapshot.height)
            self._draw_cell(draw, x, y, hex_to_rgb(ColorScheme.FOOD), padding=2)

        for pos in snapshot.snake[1:]:
            x, y = self._cell_origin(pos, snapshot.height)
            self._draw_cell(draw, x, y, hex_to_rgb(ColorScheme.SNAKE), padding=1)

        if snapshot.snake:
            x, y = self._cell_origin(snapshot.snake[0], snapshot.height)
            self._draw_cell(draw, x, y, darken_color(ColorScheme.SNAKE, 0.3), padding=0)

            # Eyes
            eye_size = max(2, cell // 5)
            eye_y = y + cell // 3
            draw.ellipse([x + cell // 4, eye_y, x + cell // 4 + eye_size, eye_y + eye_size],
                         fill=(255, 255, 255))
            draw.ellipse([x + 3 * cell // 4 - eye_size, eye_y, x + 3 * cell // 4, eye_y + eye_size],
                         fill=(255, 255, 255))

    def _draw_cell(self, draw: ImageDraw.ImageDraw, x: int, y: int,
                   color: Tuple[int, int, int], padding: int = 1):
        """Draw a single cell (for snake body or food)"""
        size = self.cell_size
        draw.rectangle([x + padding, y + padding, x + size - 1 - padding, y + size - 1 - padding],
                       fill=color)

    @staticmethod
    def _overlay(img: Image.Image, rgba: Tuple[int, int, int, int]) -> Image.Image:
        layer = Image.new('RGBA', img.size, rgba)
        return Image.alpha_composite(img.convert('RGBA'), layer).convert('RGB')
