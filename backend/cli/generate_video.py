#!/usr/bin/env python3
"""
CLI tool to generate videos from Snake game replays

Usage:
    python generate_video.py <path_to_replay.json>

Examples:
    # Generate an MP4 next to the other completed games
    python generate_video.py ../completed_games/snake_game_xyz.json

    # Animated GIF instead of MP4
    python generate_video.py replay.json --output ./my_game.gif

    # Custom video settings
    python generate_video.py replay.json --fps 5 --cell-size 40
"""

import os
import sys
import argparse
import logging
from pathlib import Path

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv  # noqa: E402

from services.replay_recorder import load_replay  # noqa: E402
from services.video_generator import SnakeVideoGenerator, get_video_local_path, DEFAULT_FPS  # noqa: E402
from renderers.image_renderer import CELL_SIZE  # noqa: E402

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def extract_game_id_from_filename(file_path: str) -> str:
    """Extract game ID from filename"""
    # Expected format: snake_game_<game_id>.json
    filename = Path(file_path).stem
    if filename.startswith('snake_game_'):
        return filename.replace('snake_game_', '')
    return filename


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Generate MP4 or GIF videos from Snake game replays',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        'replay',
        type=str,
        help='Path to a replay JSON file'
    )
    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output video file path (default: local completed_games directory)'
    )
    parser.add_argument(
        '--fps',
        type=int,
        default=DEFAULT_FPS,
        help=f'Frames per second (default: {DEFAULT_FPS})'
    )
    parser.add_argument(
        '--cell-size',
        type=int,
        default=CELL_SIZE,
        help=f'Pixel size of one board cell (default: {CELL_SIZE})'
    )

    args = parser.parse_args(argv)

    try:
        metadata, frames = load_replay(args.replay)
        game_id = metadata.get('game_id') or extract_game_id_from_filename(args.replay)
        logger.info(f"Using game ID: {game_id}")

        output = args.output or get_video_local_path(game_id)

        generator = SnakeVideoGenerator(fps=args.fps, cell_size=args.cell_size)

        logger.info(f"Generating video for game {game_id}...")
        video_path = generator.generate_video(frames, output)

        logger.info(f"[OK] Video generated successfully: {video_path}")
        logger.info("Done!")

    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
