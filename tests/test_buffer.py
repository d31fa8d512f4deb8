# tests/test_buffer.py
from pyquarium.buffer import Buffer
from pyquarium.sprite import Color


class TestBuffer:
    def test_out_of_bounds_writes_are_dropped(self):
        buf = Buffer(3, 2)
        buf.set_cell(-1, 0, "x")
        buf.set_cell(3, 0, "x")
        buf.set_cell(0, 2, "x")
        assert buf.row_text(0) == "   "
        assert buf.row_text(1) == "   "
        assert buf.get_cell(5, 5) is None

    def test_color_kept_when_none_given(self):
        buf = Buffer(2, 1)
        buf.set_cell(0, 0, "a", Color.RED)
        buf.set_cell(0, 0, "b")
        cell = buf.get_cell(0, 0)
        assert cell.char == "b"
        assert cell.color == Color.RED

    def test_write_text_clips(self):
        buf = Buffer(4, 1)
        buf.write_text(2, 0, "hello")
        assert buf.row_text(0) == "  he"

    def test_runs_group_by_color(self):
        buf = Buffer(4, 1)
        buf.write_text(0, 0, "ab", Color.CYAN)
        buf.write_text(2, 0, "cd", Color.RED)
        assert list(buf.runs(0)) == [(0, "ab", Color.CYAN), (2, "cd", Color.RED)]

    def test_clear(self):
        buf = Buffer(2, 1)
        buf.write_text(0, 0, "xy", Color.GREEN)
        buf.clear()
        assert buf.row_text(0) == "  "
        assert buf.get_cell(0, 0).color is None
