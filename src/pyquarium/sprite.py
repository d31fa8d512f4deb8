# sprite.py
"""Sprites, color masks and frame animations."""

import random
import time
from enum import Enum


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


TRANSPARENT_CHARS = frozenset({" ", "?", "\0"})

_MASK_COLORS = {
    "r": Color.RED,
    "g": Color.GREEN,
    "b": Color.BLUE,
    "y": Color.YELLOW,
    "m": Color.MAGENTA,
    "c": Color.CYAN,
    "w": Color.WHITE,
    "1": Color.RED,
    "2": Color.GREEN,
    "3": Color.YELLOW,
    "4": Color.BLUE,
    "5": Color.MAGENTA,
    "6": Color.CYAN,
    "7": Color.WHITE,
}

# Digit slots 1-9 (except 4, the eye) are filled from these at spawn time.
RANDOM_COLOR_CODES = "cCrRyYbBgGmM"


def mask_color(code: str) -> Color | None:
    """Map one mask character to its color, or None if it has no meaning."""
    return _MASK_COLORS.get(code.lower())


def random_color_map(rng=random) -> dict[str, str]:
    mapping = {digit: rng.choice(RANDOM_COLOR_CODES) for digit in "12356789"}
    mapping["4"] = "W"
    return mapping


def rand_color_mask(mask: list[str], rng=random,
                    color_map: dict[str, str] | None = None) -> list[str]:
    """Replace the digit color slots in a mask with concrete color letters.

    Pass the same ``color_map`` to color both facings of a creature alike.
    """
    if color_map is None:
        color_map = random_color_map(rng)
    table = str.maketrans(color_map)
    return [line.translate(table) for line in mask]


class Sprite:
    """One frame of ASCII art with an optional parallel color mask."""

    def __init__(self, lines: list[str], mask: list[str] | None = None,
                 transparent: frozenset = TRANSPARENT_CHARS):
        self.lines = list(lines)
        self.mask = list(mask) if mask is not None else None
        self.transparent = transparent

    def __repr__(self):
        w, h = self.bounding_box()
        return f"Sprite({w}x{h})"

    def bounding_box(self) -> tuple[int, int]:
        width = max((len(line) for line in self.lines), default=0)
        return width, len(self.lines)

    @property
    def width(self) -> int:
        return self.bounding_box()[0]

    @property
    def height(self) -> int:
        return len(self.lines)

    def char_at(self, col: int, row: int) -> str:
        if row < 0 or col < 0 or row >= len(self.lines):
            return " "
        line = self.lines[row]
        if col >= len(line):
            return " "
        return line[col]

    def is_transparent_at(self, col: int, row: int) -> bool:
        return self.char_at(col, row) in self.transparent

    def color_at(self, col: int, row: int) -> Color | None:
        if self.mask is None or row < 0 or col < 0 or row >= len(self.mask):
            return None
        line = self.mask[row]
        if col >= len(line):
            return None
        return mask_color(line[col])

    def opaque_cells(self):
        """Yield ``(col, row, char)`` for every cell that should be painted."""
        for row, line in enumerate(self.lines):
            for col, ch in enumerate(line):
                if ch not in self.transparent:
                    yield col, row, ch


class Animation:
    """A sequence of sprites shown for ``frame_duration`` seconds each."""

    def __init__(self, frames: list[Sprite], frame_duration: float, looping: bool = True):
        if not frames:
            raise ValueError("animation needs at least one frame")
        if frame_duration <= 0:
            raise ValueError(f"frame duration must be positive, got {frame_duration}")
        self.frames = list(frames)
        self.frame_duration = frame_duration
        self.looping = looping
        self.current_frame = 0
        self.last_advance = time.monotonic()

    def advance(self, now: float | None = None) -> bool:
        """Step to the next frame if enough time has passed. Returns True on a step."""
        if len(self.frames) < 2:
            return False
        if now is None:
            now = time.monotonic()
        if now - self.last_advance < self.frame_duration:
            return False
        if self.current_frame + 1 < len(self.frames):
            self.current_frame += 1
        elif self.looping:
            self.current_frame = 0
        else:
            return False
        self.last_advance = now
        return True

    def current_sprite(self) -> Sprite:
        return self.frames[self.current_frame]

    @property
    def finished(self) -> bool:
        return not self.looping and self.current_frame == len(self.frames) - 1

    def replace_frames(self, frames: list[Sprite]):
        """Swap in new frames, keeping the current position where possible."""
        if not frames:
            raise ValueError("animation needs at least one frame")
        self.frames = list(frames)
        self.current_frame %= len(self.frames)
