"""
Game configuration.

Values are layered, lowest priority first:
    1. defaults in GameConfig
    2. a YAML file (optional)
    3. SNAKE_* environment variables (a .env file is picked up too)
    4. explicit overrides, e.g. from command-line flags
"""

import os
import logging
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from domain.constants import (
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_TICK_INTERVAL_MS,
    DEFAULT_INITIAL_LENGTH,
    DEFAULT_SCORE_PER_FOOD,
    DEFAULT_HIGH_SCORE_CAPACITY,
)
from domain.errors import ConfigError

logger = logging.getLogger(__name__)

STORAGE_BACKENDS = {"json", "sqlite"}
DEFAULT_SCORES_PATH = str(Path(__file__).parent / "scores.json")

ENV_PREFIX = "SNAKE_"


@dataclass
class GameConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS
    initial_length: int = DEFAULT_INITIAL_LENGTH
    score_per_food: int = DEFAULT_SCORE_PER_FOOD
    high_score_capacity: int = DEFAULT_HIGH_SCORE_CAPACITY
    seed: Optional[int] = None
    storage_backend: str = "json"
    scores_path: Optional[str] = None

    def validate(self) -> "GameConfig":
        """
        Check every value is within its recognised range.

        Raises:
            ConfigError: naming the first offending option.
        """
        positive = ["width", "height", "tick_interval_ms", "score_per_food", "high_score_capacity"]
        for name in positive:
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")

        if not isinstance(self.initial_length, int) or self.initial_length < 1:
            raise ConfigError(f"initial_length must be at least 1, got {self.initial_length!r}")

        if self.seed is not None and not isinstance(self.seed, int):
            raise ConfigError(f"seed must be an integer, got {self.seed!r}")

        if self.storage_backend not in STORAGE_BACKENDS:
            available = ", ".join(sorted(STORAGE_BACKENDS))
            raise ConfigError(
                f"Unknown storage backend '{self.storage_backend}'. Available backends: {available}"
            )
        return self

    @property
    def score_storage_path(self) -> Optional[str]:
        """Score file for the json backend; None lets sqlite use its default database."""
        if self.scores_path:
            return self.scores_path
        return DEFAULT_SCORES_PATH if self.storage_backend == "json" else None

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_interval_ms / 1000.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _coerce(name: str, raw: Any) -> Any:
    """
    Convert a raw value to the type of the GameConfig field.

    Integers pass through; strings (environment, .env) are parsed. Floats,
    booleans and anything else are rejected rather than truncated.
    """
    if raw is None:
        return None
    if name in ("storage_backend", "scores_path"):
        return str(raw)
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if not isinstance(raw, str):
        raise ConfigError(f"{name} must be an integer, got {raw!r}")
    if raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def load_yaml_config(path: str) -> Dict[str, Any]:
    """Read a YAML mapping of option name -> value."""
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(GameConfig)}
    unknown = set(data) - known
    if unknown:
        raise ConfigError(f"Unknown config options in {path}: {', '.join(sorted(unknown))}")

    logger.info(f"Loaded config file {path}")
    return data


def env_overrides() -> Dict[str, Any]:
    """Collect SNAKE_<OPTION> environment variables."""
    load_dotenv()
    values = {}
    for f in fields(GameConfig):
        raw = os.getenv(ENV_PREFIX + f.name.upper())
        if raw is not None:
            values[f.name] = raw
    return values


def load_config(path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> GameConfig:
    """
    Build and validate a GameConfig from file, environment and overrides.

    Overrides set to None are ignored so argparse defaults can be passed
    through unchanged.
    """
    values: Dict[str, Any] = {}
    if path:
        values.update(load_yaml_config(path))
    values.update(env_overrides())
    for name, value in (overrides or {}).items():
        if value is not None:
            values[name] = value

    config = GameConfig(**{name: _coerce(name, value) for name, value in values.items()})
    return config.validate()
