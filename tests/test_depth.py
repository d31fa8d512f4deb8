# tests/test_depth.py
import random

from pyquarium import depth


class TestDepthTable:
    def test_foreground_ordering(self):
        assert depth.GUI_TEXT < depth.GUI < depth.SHARK < depth.FISH_START
        assert depth.FISH_END < depth.SEAWEED < depth.CASTLE

    def test_random_fish_depth_in_range(self):
        rng = random.Random(7)
        depths = {depth.random_fish_depth(rng) for _ in range(500)}
        assert min(depths) == depth.FISH_START
        assert max(depths) == depth.FISH_END

    def test_is_fish_depth(self):
        assert depth.is_fish_depth(3)
        assert depth.is_fish_depth(20)
        assert not depth.is_fish_depth(2)
        assert not depth.is_fish_depth(21)

    def test_water_lines(self):
        assert [depth.water_line_depth(i) for i in range(4)] == [8, 6, 4, 2]
        assert [depth.water_gap_depth(i) for i in range(4)] == [9, 7, 5, 3]

    def test_unknown_water_index_falls_back_to_zero(self):
        assert depth.water_line_depth(4) == depth.WATER_LINE0
        assert depth.water_gap_depth(-1) == depth.WATER_GAP0

    def test_is_water_surface_depth(self):
        assert all(depth.is_water_surface_depth(d) for d in range(2, 10))
        assert not depth.is_water_surface_depth(1)
        assert not depth.is_water_surface_depth(10)
