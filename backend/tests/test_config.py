"""
Tests for config.py - defaults, YAML files, environment and overrides.
"""

import pytest
import sys
import os
from dataclasses import fields

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig, load_config, load_yaml_config, DEFAULT_SCORES_PATH
from domain.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Make sure SNAKE_* variables from the outer environment don't leak in."""
    for f in fields(GameConfig):
        monkeypatch.delenv("SNAKE_" + f.name.upper(), raising=False)


def write_yaml(tmp_path, text):
    path = tmp_path / "game.yaml"
    path.write_text(text)
    return str(path)


class TestDefaults:

    def test_defaults(self):
        config = load_config()

        assert config.width == 20
        assert config.height == 20
        assert config.tick_interval_ms == 100
        assert config.initial_length == 3
        assert config.high_score_capacity == 10
        assert config.seed is None
        assert config.storage_backend == "json"

    def test_tick_interval_in_seconds(self):
        assert GameConfig(tick_interval_ms=250).tick_interval == 0.25

    def test_score_storage_path(self):
        assert GameConfig().score_storage_path == DEFAULT_SCORES_PATH
        assert GameConfig(storage_backend="sqlite").score_storage_path is None
        assert GameConfig(scores_path="/tmp/x.json").score_storage_path == "/tmp/x.json"


class TestValidation:

    @pytest.mark.parametrize("option", ["width", "height", "tick_interval_ms", "score_per_food"])
    def test_non_positive_values_rejected(self, option):
        with pytest.raises(ConfigError):
            GameConfig(**{option: 0}).validate()

    def test_unknown_backend_rejected(self):
        with pytest.raises(ConfigError):
            GameConfig(storage_backend="redis").validate()

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            load_config(overrides={"width": -3})


class TestLayering:

    def test_yaml_file(self, tmp_path):
        path = write_yaml(tmp_path, "width: 12\nheight: 8\nseed: 3\n")

        config = load_config(path)

        assert (config.width, config.height, config.seed) == (12, 8, 3)
        assert config.tick_interval_ms == 100

    def test_environment_beats_yaml(self, tmp_path, monkeypatch):
        path = write_yaml(tmp_path, "width: 12\n")
        monkeypatch.setenv("SNAKE_WIDTH", "15")

        assert load_config(path).width == 15

    def test_overrides_beat_environment(self, monkeypatch):
        monkeypatch.setenv("SNAKE_HEIGHT", "15")

        config = load_config(overrides={"height": 9, "width": None})

        assert config.height == 9
        assert config.width == 20

    def test_environment_storage_backend(self, monkeypatch):
        monkeypatch.setenv("SNAKE_STORAGE_BACKEND", "sqlite")

        assert load_config().storage_backend == "sqlite"

    def test_non_integer_environment_value(self, monkeypatch):
        monkeypatch.setenv("SNAKE_WIDTH", "wide")

        with pytest.raises(ConfigError):
            load_config()


class TestYamlFile:

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_yaml_config(str(tmp_path / "nope.yaml"))

    def test_unknown_option(self, tmp_path):
        path = write_yaml(tmp_path, "width: 10\ncolour: green\n")

        with pytest.raises(ConfigError):
            load_yaml_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = write_yaml(tmp_path, "- 1\n- 2\n")

        with pytest.raises(ConfigError):
            load_yaml_config(path)

    @pytest.mark.parametrize("value", ["10.5", "true", "[10]"])
    def test_non_integer_yaml_value(self, tmp_path, value):
        """Floats and booleans are rejected instead of being truncated to ints."""
        path = write_yaml(tmp_path, f"width: {value}\n")

        with pytest.raises(ConfigError):
            load_config(path)

    def test_integer_yaml_value(self, tmp_path):
        path = write_yaml(tmp_path, "tick_interval_ms: 150\n")

        assert load_config(path).tick_interval_ms == 150

    def test_empty_file(self, tmp_path):
        path = write_yaml(tmp_path, "")

        assert load_yaml_config(path) == {}
