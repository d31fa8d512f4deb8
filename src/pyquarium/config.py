# config.py
"""Runtime settings and their defaults."""

import logging
from dataclasses import dataclass

DEFAULT_FPS = 30
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Settings:
    classic: bool = False
    fps: int = DEFAULT_FPS
    seed: int | None = None
    show_status: bool = True
    log_file: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"unknown log level: {self.log_level}")
        self.log_level = self.log_level.upper()

    @property
    def frame_time(self) -> float:
        return 1.0 / self.fps

    @classmethod
    def from_args(cls, args) -> "Settings":
        return cls(
            classic=args.classic,
            fps=args.fps,
            seed=args.seed,
            show_status=not args.no_status,
            log_file=args.log_file,
            log_level=args.log_level,
        )
