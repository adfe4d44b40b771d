"""
Tests for replay recording and video generation.
"""

import pytest
import sys
import os
import json
import random
from unittest.mock import patch, MagicMock

from PIL import Image

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.game_state import GameState
from services.replay_recorder import ReplayRecorder, load_replay
from services.video_generator import SnakeVideoGenerator, get_video_local_path


def record_game(ticks=6):
    game = GameState(width=10, height=10, rng=random.Random(1))
    game.food.speed_increase = 0
    recorder = ReplayRecorder(game_id="game-123")
    recorder.render(game.snapshot())
    for _ in range(ticks):
        recorder.render(game.tick().snapshot)
    return recorder


class TestReplayRecorder:

    def test_build_replay_metadata(self):
        recorder = record_game(ticks=3)

        replay = recorder.build_replay()

        assert replay["metadata"]["game_id"] == "game-123"
        assert replay["metadata"]["ticks"] == 3
        assert replay["metadata"]["width"] == 10
        assert len(replay["frames"]) == 4

    def test_save_and_load(self, tmp_path):
        recorder = record_game(ticks=3)
        path = str(tmp_path / "replays" / "game.json")

        recorder.save_json(path)
        metadata, frames = load_replay(path)

        assert metadata["game_id"] == "game-123"
        assert [f.snake for f in frames] == [f.snake for f in recorder.frames]
        assert frames[-1].tick == 3

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_replay(str(tmp_path / "missing.json"))

    def test_load_non_replay(self, tmp_path):
        path = tmp_path / "other.json"
        path.write_text(json.dumps({"rounds": []}))

        with pytest.raises(ValueError):
            load_replay(str(path))


class TestSnakeVideoGenerator:

    def test_fps_must_be_positive(self):
        with pytest.raises(ValueError):
            SnakeVideoGenerator(fps=0)

    def test_empty_replay_raises(self, tmp_path):
        with pytest.raises(ValueError):
            SnakeVideoGenerator().generate_video([], str(tmp_path / "out.gif"))

    def test_render_frames(self):
        recorder = record_game(ticks=2)
        generator = SnakeVideoGenerator(cell_size=10)

        images = generator.render_frames(recorder.frames)

        assert len(images) == 3
        assert images[0].size == (100, 130)

    def test_gif_output(self, tmp_path):
        recorder = record_game()
        output = str(tmp_path / "videos" / "game.gif")

        path = SnakeVideoGenerator(fps=5, cell_size=10).generate_video(recorder.frames, output)

        assert path == output
        with Image.open(output) as gif:
            assert gif.n_frames > 1

    def test_mp4_output_uses_moviepy(self, tmp_path):
        recorder = record_game(ticks=2)
        output = str(tmp_path / "game.mp4")

        with patch("services.video_generator.ImageSequenceClip") as clip_cls:
            clip = MagicMock()
            clip_cls.return_value = clip
            SnakeVideoGenerator(fps=4, cell_size=10).generate_video(recorder.frames, output)

        frames_arg = clip_cls.call_args[0][0]
        assert len(frames_arg) == 3
        assert frames_arg[0].shape == (130, 100, 3)
        assert clip_cls.call_args[1]["fps"] == 4
        clip.write_videofile.assert_called_once()
        assert clip.write_videofile.call_args[0][0] == output

    def test_video_local_path(self):
        path = get_video_local_path("abc", ".gif")

        assert path.endswith(os.path.join("completed_games", "abc_replay.gif"))
