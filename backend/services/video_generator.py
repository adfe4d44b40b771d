"""
Video Generation Service for Snake Game Replays

This service generates videos from recorded replays by:
1. Rendering each frame using PIL (Pillow) through ImageRenderer
2. Encoding frames to MP4 using MoviePy/FFmpeg, or to an animated GIF
   using Pillow alone
3. Saving the result to the local completed_games directory by default
"""

import os
import logging
from typing import List

import numpy as np
from moviepy import ImageSequenceClip
from PIL import Image

from domain.snapshot import GameSnapshot
from renderers.image_renderer import ImageRenderer, CELL_SIZE

logger = logging.getLogger(__name__)

backend_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Video settings
DEFAULT_FPS = 10  # One frame per 100 ms tick
GIF_EXTENSION = ".gif"


class SnakeVideoGenerator:
    """Generate MP4 or GIF videos from game replays"""

    def __init__(self, fps: int = DEFAULT_FPS, cell_size: int = CELL_SIZE):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = fps
        self.renderer = ImageRenderer(cell_size=cell_size)

    def render_frames(self, frames: List[GameSnapshot]) -> List[Image.Image]:
        logger.info(f"Rendering {len(frames)} frames")
        images = []
        for i, frame in enumerate(frames):
            if i % 100 == 0:
                logger.debug(f"Rendering frame {i + 1}/{len(frames)}")
            images.append(self.renderer.render_frame(frame))
        return images

    def generate_video(self, frames: List[GameSnapshot], output_path: str) -> str:
        """
        Generate a video from replay frames

        Args:
            frames: Snapshots in tick order
            output_path: Destination; a .gif extension writes an animated GIF,
                         anything else an H.264 MP4

        Returns:
            Path to the generated video file
        """
        if not frames:
            raise ValueError("Replay has no frames to render")

        images = self.render_frames(frames)

        parent = os.path.dirname(output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)

        if output_path.lower().endswith(GIF_EXTENSION):
            self._write_gif(images, output_path)
        else:
            self._write_mp4(images, output_path)

        logger.info(f"Video created successfully at {output_path}")
        return output_path

    def _write_gif(self, images: List[Image.Image], output_path: str) -> None:
        images[0].save(
            output_path,
            save_all=True,
            append_images=images[1:],
            duration=int(1000 / self.fps),
            loop=0,
        )

    def _write_mp4(self, images: List[Image.Image], output_path: str) -> None:
        clip = ImageSequenceClip([np.array(image) for image in images], fps=self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )


def get_video_local_path(game_id: str, extension: str = ".mp4") -> str:
    """
    Get the local path for a game's video

    Args:
        game_id: The game ID
        extension: '.mp4' or '.gif'

    Returns:
        Local path to the video file
    """
    return os.path.join(backend_path, "completed_games", f"{game_id}_replay{extension}")
