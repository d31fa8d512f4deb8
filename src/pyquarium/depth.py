# depth.py
"""Z-order layers. Lower depth paints later, so it ends up in front."""

import random

GUI_TEXT = 0
GUI = 1
SHARK = 2
FISH_START = 3
FISH_END = 20
SEAWEED = 21
CASTLE = 22

WATER_LINE3 = 2
WATER_GAP3 = 3
WATER_LINE2 = 4
WATER_GAP2 = 5
WATER_LINE1 = 6
WATER_GAP1 = 7
WATER_LINE0 = 8
WATER_GAP0 = 9

WHALE = WATER_GAP2
SEA_MONSTER = WATER_GAP2
SHIP = WATER_GAP1
BIG_FISH = SHARK

_WATER_LINES = (WATER_LINE0, WATER_LINE1, WATER_LINE2, WATER_LINE3)
_WATER_GAPS = (WATER_GAP0, WATER_GAP1, WATER_GAP2, WATER_GAP3)


def random_fish_depth(rng=random) -> int:
    return rng.randint(FISH_START, FISH_END)


def is_fish_depth(depth: int) -> bool:
    return FISH_START <= depth <= FISH_END


def is_water_surface_depth(depth: int) -> bool:
    return WATER_LINE3 <= depth <= WATER_GAP0


def water_line_depth(index: int) -> int:
    """Depth of water line ``index`` (0-3); unknown indices fall back to 0."""
    if 0 <= index < len(_WATER_LINES):
        return _WATER_LINES[index]
    return WATER_LINE0


def water_gap_depth(index: int) -> int:
    if 0 <= index < len(_WATER_GAPS):
        return _WATER_GAPS[index]
    return WATER_GAP0
