# tests/test_cli.py
import argparse
import logging

import pytest

from pyquarium.cli import _build_parser, _configure_logging, _positive_int
from pyquarium.config import DEFAULT_FPS, Settings


class TestParser:
    def test_defaults(self):
        args = _build_parser().parse_args([])
        assert args.classic is False
        assert args.fps == DEFAULT_FPS
        assert args.seed is None
        assert args.no_status is False
        assert args.log_file is None
        assert args.log_level == "WARNING"

    def test_all_options(self):
        args = _build_parser().parse_args([
            "--classic", "--fps", "15", "--seed", "42", "--no-status",
            "--log-file", "tank.log", "--log-level", "debug",
        ])
        settings = Settings.from_args(args)
        assert settings.classic is True
        assert settings.fps == 15
        assert settings.seed == 42
        assert settings.show_status is False
        assert settings.log_file == "tank.log"
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("fps", ["0", "-3", "fast"])
    def test_rejects_bad_fps(self, fps):
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["--fps", fps])

    def test_non_integer_fps_error_is_not_chained(self):
        with pytest.raises(argparse.ArgumentTypeError) as exc:
            _positive_int("fast")
        assert exc.value.__cause__ is None
        assert exc.value.__suppress_context__ is True

    def test_rejects_unknown_log_level(self):
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["--log-level", "chatty"])


class TestSettings:
    def test_frame_time(self):
        assert Settings(fps=20).frame_time == pytest.approx(0.05)

    def test_rejects_non_positive_fps(self):
        with pytest.raises(ValueError):
            Settings(fps=0)

    def test_rejects_unknown_level(self):
        with pytest.raises(ValueError):
            Settings(log_level="LOUD")

    def test_level_normalised(self):
        assert Settings(log_level="info").log_level == "INFO"


class TestLogging:
    def test_log_file(self, tmp_path, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        _configure_logging(Settings(log_file=str(tmp_path / "tank.log"), log_level="debug"))
        assert calls[0]["filename"] == str(tmp_path / "tank.log")
        assert calls[0]["level"] == "DEBUG"

    def test_no_log_file_stays_silent(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        _configure_logging(Settings())
        handlers = calls[0]["handlers"]
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)
