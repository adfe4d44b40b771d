"""
Tests for the input sources.
"""

import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT
from inputs import ScriptedInput, KeyEventInput, parse_script, PAUSE, QUIT


class TestParseScript:

    def test_parses_moves_and_gaps(self):
        assert parse_script("RRu.L") == [RIGHT, RIGHT, UP, None, LEFT]

    def test_whitespace_ignored(self):
        assert parse_script(" U D\n") == [UP, DOWN]

    def test_invalid_character(self):
        with pytest.raises(ValueError):
            parse_script("UX")


class TestScriptedInput:

    def test_moves_then_nothing(self):
        source = ScriptedInput("UL")

        assert source.next_direction(None) == UP
        assert source.next_direction(None) == LEFT
        assert source.exhausted
        assert source.next_direction(None) is None

    def test_accepts_direction_list(self):
        source = ScriptedInput([DOWN, None])

        assert source.next_direction(None) == DOWN
        assert source.next_direction(None) is None

    def test_rejects_unknown_direction(self):
        with pytest.raises(ValueError):
            ScriptedInput(["NORTH"])


class TestKeyEventInput:

    def test_last_direction_wins(self):
        source = KeyEventInput()
        source.press("Up")
        source.press("a")

        assert source.next_direction(None) == LEFT
        assert source.next_direction(None) is None

    def test_commands_are_queued_separately(self):
        source = KeyEventInput()
        source.press("p")
        source.press("right")
        source.press("escape")

        assert source.drain_commands() == [PAUSE, QUIT]
        assert source.drain_commands() == []
        assert source.next_direction(None) == RIGHT

    def test_unknown_key_is_ignored(self):
        source = KeyEventInput()

        assert source.press("F12") is None
        assert source.next_direction(None) is None
