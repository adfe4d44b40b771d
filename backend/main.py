"""
Game runner: drives a GameState with an input source and renderers at a
fixed tick interval, then handles the high-score flow.

Usage:
    python main.py --moves "RRRUUULLL" --headless
    python main.py --width 10 --height 10 --seed 7 --replay replay.json
"""

import sys
import time
import logging
import argparse
import os
from typing import Callable, List, Optional

from dotenv import load_dotenv

from config import GameConfig, load_config
from data_access import create_score_storage
from domain.constants import DEATH_MESSAGES, ENTERING_SCORE, DIED
from domain.errors import ConfigError, PersistFailed
from domain.game_state import GameState
from domain.high_scores import HighScoreStore
from domain.snapshot import GameSnapshot
from inputs.base import InputSource
from inputs.key_input import PAUSE, RESTART, QUIT
from inputs.scripted_input import ScriptedInput
from renderers.base import Renderer
from renderers.text_renderer import TextRenderer
from services.replay_recorder import ReplayRecorder
from services.video_generator import SnakeVideoGenerator

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKS = 1000


def build_high_score_store(config: GameConfig) -> HighScoreStore:
    storage = create_score_storage(config.storage_backend, config.score_storage_path)
    store = HighScoreStore(storage, capacity=config.high_score_capacity)
    store.load()
    return store


def _handle_commands(game: GameState, input_source: InputSource) -> bool:
    """Apply pause/restart/quit commands; return False when asked to quit."""
    drain = getattr(input_source, "drain_commands", None)
    if drain is None:
        return True
    for command in drain():
        if command == PAUSE:
            game.toggle_pause()
        elif command == RESTART:
            game.new_game()
        elif command == QUIT:
            return False
    return True


def run_game(
    game: GameState,
    input_source: InputSource,
    renderers: List[Renderer],
    tick_interval: float = 0.0,
    max_ticks: Optional[int] = DEFAULT_MAX_TICKS,
    sleep: Callable[[float], None] = time.sleep
) -> GameSnapshot:
    """
    Run the tick loop until the game ends, the input asks to quit or
    max_ticks loop iterations have passed.

    Returns:
        The final snapshot.
    """
    snapshot = game.snapshot()
    for renderer in renderers:
        renderer.render(snapshot)

    iterations = 0
    while not game.is_over:
        if max_ticks is not None and iterations >= max_ticks:
            logger.info(f"Stopping after {max_ticks} ticks")
            break
        iterations += 1

        direction = input_source.next_direction(snapshot)
        if not _handle_commands(game, input_source):
            logger.info("Quit requested")
            break

        outcome = game.tick(direction)
        snapshot = outcome.snapshot
        for renderer in renderers:
            renderer.render(snapshot)

        if outcome.status == DIED:
            break
        if tick_interval > 0:
            sleep(tick_interval)

    return snapshot


def record_high_score(game: GameState, name: str) -> Optional[str]:
    """
    Submit the finished game under name.

    Returns:
        A warning message if the table could not be saved, else None.
    """
    try:
        game.submit_name(name)
    except PersistFailed as e:
        logger.warning(f"High score kept in memory only: {e}")
        return f"Warning: your score could not be saved ({e})"
    return None


def format_high_scores(store: HighScoreStore) -> str:
    lines = ["High scores:"]
    entries = store.entries()
    if not entries:
        lines.append("  (none yet)")
    for entry in entries:
        lines.append(f"  {entry.rank:2d}. {entry.name:<10} {entry.score:6d}  {entry.timestamp:%Y/%m/%d}")
    return "\n".join(lines)


def game_over_message(snapshot: GameSnapshot) -> str:
    cause = DEATH_MESSAGES.get(snapshot.death_reason, snapshot.death_reason)
    return f"Game Over: the snake {cause}. Final score: {snapshot.score}"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Snake against food that runs away from you."
    )
    parser.add_argument("--config", type=str, default=None,
                        help="YAML config file")
    parser.add_argument("--width", type=int, default=None,
                        help="Width of the board in cells")
    parser.add_argument("--height", type=int, default=None,
                        help="Height of the board in cells")
    parser.add_argument("--tick-interval-ms", type=int, default=None,
                        help="Milliseconds between ticks")
    parser.add_argument("--initial-length", type=int, default=None,
                        help="Length of the snake at the start")
    parser.add_argument("--score-per-food", type=int, default=None,
                        help="Points awarded per food eaten")
    parser.add_argument("--high-score-capacity", type=int, default=None,
                        help="Number of high scores kept")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement")
    parser.add_argument("--storage", dest="storage_backend", choices=["json", "sqlite"], default=None,
                        help="High-score storage backend")
    parser.add_argument("--scores-path", type=str, default=None,
                        help="Score file (json) or database (sqlite)")
    parser.add_argument("--moves", type=str, default="",
                        help="Move script, one character per tick: U, D, L, R or '.' for no input")
    parser.add_argument("--name", type=str, default=None,
                        help="Name to record if the score qualifies (prompted otherwise)")
    parser.add_argument("--max-ticks", type=int, default=DEFAULT_MAX_TICKS,
                        help="Stop after this many ticks")
    parser.add_argument("--headless", action="store_true",
                        help="Do not wait between ticks")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print the board every tick")
    parser.add_argument("--replay", type=str, default=None,
                        help="Save a JSON replay to this path")
    parser.add_argument("--video", type=str, default=None,
                        help="Render the game to a video (.mp4 or .gif)")
    parser.add_argument("--log-level", type=str, default=os.getenv("SNAKE_LOG_LEVEL", "WARNING"),
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = load_config(args.config, {
            "width": args.width,
            "height": args.height,
            "tick_interval_ms": args.tick_interval_ms,
            "initial_length": args.initial_length,
            "score_per_food": args.score_per_food,
            "high_score_capacity": args.high_score_capacity,
            "seed": args.seed,
            "storage_backend": args.storage_backend,
            "scores_path": args.scores_path,
        })
        game = GameState.from_config(config)
        input_source = ScriptedInput(args.moves)
    except (ConfigError, ValueError) as e:
        print(f"Invalid configuration: {e}")
        return 2

    renderers: List[Renderer] = []
    if not args.quiet:
        renderers.append(TextRenderer())
    recorder = None
    if args.replay or args.video:
        recorder = ReplayRecorder()
        renderers.append(recorder)

    try:
        store = build_high_score_store(config)
        game.high_scores = store

        final = run_game(
            game,
            input_source,
            renderers,
            tick_interval=0.0 if args.headless else config.tick_interval,
            max_ticks=args.max_ticks,
        )

        if game.is_over:
            print(game_over_message(final))
        else:
            print(f"Stopped at tick {final.tick} with score {final.score}")

        if game.phase == ENTERING_SCORE:
            name = args.name if args.name is not None else input("New high score! Enter your name: ")
            warning = record_high_score(game, name)
            if warning:
                print(warning)
        print(format_high_scores(store))

        if args.replay:
            recorder.save_json(args.replay)
            print(f"Replay saved to {args.replay}")
        if args.video:
            SnakeVideoGenerator(fps=max(1, round(1000 / config.tick_interval_ms))).generate_video(
                recorder.frames, args.video
            )
            print(f"Video saved to {args.video}")

    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        return 1
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
