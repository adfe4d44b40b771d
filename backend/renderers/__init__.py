"""
Renderers that display game snapshots.
"""

from .base import Renderer
from .text_renderer import TextRenderer, status_line
from .image_renderer import ImageRenderer

__all__ = [
    'Renderer',
    'TextRenderer',
    'status_line',
    'ImageRenderer',
]
