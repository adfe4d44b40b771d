"""
GameState - owns one game session and advances it tick by tick.

Phases:
    RUNNING -> PAUSED -> RUNNING
    RUNNING -> GAME_OVER                      (collision or full board)
    GAME_OVER -> ENTERING_SCORE -> GAME_OVER  (score qualifies, name submitted)
new_game() goes back to RUNNING from any phase.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .constants import (
    RIGHT,
    VALID_MOVES,
    ADVANCE_OK,
    BOARD_FILLED,
    RUNNING,
    PAUSED,
    GAME_OVER,
    ENTERING_SCORE,
    CONTINUING,
    DIED,
    IDLE,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_INITIAL_LENGTH,
    DEFAULT_SCORE_PER_FOOD,
)
from .errors import ConfigError, InvalidPhase, NoSpaceAvailable
from .food import Food
from .grid import Grid
from .high_scores import HighScoreEntry, HighScoreStore
from .snake import Snake
from .snapshot import GameSnapshot

logger = logging.getLogger(__name__)


@dataclass
class TickOutcome:
    """What happened during one tick."""
    status: str
    snapshot: GameSnapshot
    reason: Optional[str] = None
    ate_food: bool = False

    @property
    def game_over(self) -> bool:
        return self.status == DIED


class GameState:
    """
    A single game session: snake, food, score and phase.

    Attributes:
        grid: the board, carrying the shared random generator
        snake, food: the two entities on the board
        score: points collected this game
        phase: current phase constant
        ticks: completed ticks this game
        foods_eaten: how many times the snake ate
        death_reason: why the last game ended, if it did
        high_scores: optional store consulted at game over
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        initial_length: int = DEFAULT_INITIAL_LENGTH,
        score_per_food: int = DEFAULT_SCORE_PER_FOOD,
        high_scores: Optional[HighScoreStore] = None,
        rng: Optional[random.Random] = None,
    ):
        if initial_length < 1:
            raise ConfigError(f"initial_length must be at least 1, got {initial_length}.")
        if score_per_food <= 0:
            raise ConfigError(f"score_per_food must be positive, got {score_per_food}.")

        self.grid = Grid(width, height, rng)
        self.initial_length = initial_length
        self.score_per_food = score_per_food
        self.high_scores = high_scores

        start = self.start_position()
        tail_x = start[0] - (initial_length - 1)
        if tail_x < 0 or initial_length >= self.grid.area:
            raise ConfigError(
                f"A snake of length {initial_length} does not fit on a "
                f"{width}x{height} board."
            )

        self.new_game()

    @classmethod
    def from_config(cls, config, high_scores: Optional[HighScoreStore] = None) -> "GameState":
        """Build a session from a GameConfig."""
        return cls(
            width=config.width,
            height=config.height,
            initial_length=config.initial_length,
            score_per_food=config.score_per_food,
            high_scores=high_scores,
            rng=random.Random(config.seed),
        )

    def start_position(self):
        return (self.grid.width // 2, self.grid.height // 2)

    def new_game(self) -> GameSnapshot:
        """Reset snake, food and score and start running."""
        self.snake = Snake.spawn(self.start_position(), self.initial_length, RIGHT)
        self.food = Food(self.grid)
        self.food.respawn(self.snake)
        self.score = 0
        self.ticks = 0
        self.foods_eaten = 0
        self.death_reason: Optional[str] = None
        self.phase = RUNNING
        logger.info(
            f"New game on {self.grid.width}x{self.grid.height}, snake at {self.snake.head}, "
            f"food at {self.food.position}"
        )
        return self.snapshot()

    # ------------------------------------------------------------------
    # Phase control
    # ------------------------------------------------------------------

    def pause(self) -> None:
        if self.phase == RUNNING:
            self.phase = PAUSED
            logger.info("Game paused")

    def resume(self) -> None:
        if self.phase == PAUSED:
            self.phase = RUNNING
            logger.info("Game resumed")

    def toggle_pause(self) -> None:
        if self.phase == PAUSED:
            self.resume()
        else:
            self.pause()

    @property
    def is_over(self) -> bool:
        return self.phase in (GAME_OVER, ENTERING_SCORE)

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def tick(self, direction: Optional[str] = None) -> TickOutcome:
        """
        Advance the game by one step.

        Steps:
          1) Outside RUNNING nothing moves; a direction while PAUSED resumes
          2) Apply the input
          3) Move the snake, ending the game on a collision
          4) Eat: grow, score, respawn (a full board wins the game)
          5) Otherwise let the food try to escape
        """
        if direction is not None and direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction: {direction}")

        if self.phase != RUNNING:
            if self.phase == PAUSED and direction is not None:
                self.resume()
                self.snake.set_direction(direction)
            return TickOutcome(IDLE, self.snapshot())

        if direction is not None:
            self.snake.set_direction(direction)

        result = self.snake.advance(self.grid)
        self.ticks += 1
        if result != ADVANCE_OK:
            self._end_game(result)
            return TickOutcome(DIED, self.snapshot(), reason=result)

        if self.food.is_eaten_by(self.snake):
            self.snake.grow()
            self.score += self.score_per_food
            self.foods_eaten += 1
            logger.info(f"Food eaten at {self.snake.head}, score {self.score}")
            try:
                self.food.respawn(self.snake)
            except NoSpaceAvailable:
                self.food.position = None
                self._end_game(BOARD_FILLED)
                return TickOutcome(DIED, self.snapshot(), reason=BOARD_FILLED, ate_food=True)
            return TickOutcome(CONTINUING, self.snapshot(), ate_food=True)

        self.food.try_evade(self.snake)
        logger.debug(f"Tick {self.ticks}: head {self.snake.head}, food {self.food.position}")
        return TickOutcome(CONTINUING, self.snapshot())

    def _end_game(self, reason: str) -> None:
        self.death_reason = reason
        self.phase = GAME_OVER
        logger.info(f"Game over after {self.ticks} ticks: {reason}, score {self.score}")

        if self.high_scores is not None and self.high_scores.qualifies(self.score):
            self.phase = ENTERING_SCORE
            logger.info(f"Score {self.score} qualifies for the high-score table")

    # ------------------------------------------------------------------
    # High scores
    # ------------------------------------------------------------------

    def submit_name(self, name: str):
        """
        Record the finished game under name.

        Returns the updated ranking. The phase moves to GAME_OVER before the
        table is written, so a PersistFailed from the store still leaves a
        consistent session.
        """
        if self.phase != ENTERING_SCORE:
            raise InvalidPhase(f"Cannot submit a name while {self.phase}.")

        self.phase = GAME_OVER
        return self.high_scores.insert(HighScoreEntry(name=name, score=self.score))

    def skip_name(self) -> None:
        if self.phase == ENTERING_SCORE:
            self.phase = GAME_OVER

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            tick=self.ticks,
            snake=self.snake.body,
            food=self.food.position,
            score=self.score,
            phase=self.phase,
            width=self.grid.width,
            height=self.grid.height,
            death_reason=self.death_reason,
        )

    def __repr__(self):
        return (
            f"<GameState tick={self.ticks}, phase={self.phase}, "
            f"score={self.score}, snake={self.snake!r}, food={self.food!r}>"
        )
