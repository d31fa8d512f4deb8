# buffer.py
"""Off-screen cell grid that entities paint into before it reaches curses."""

from dataclasses import dataclass

from .sprite import Color


@dataclass
class Cell:
    char: str = " "
    color: Color | None = None


class Buffer:
    """A width x height grid of cells. Writes outside the grid are dropped."""

    def __init__(self, width: int, height: int):
        self.width = max(0, width)
        self.height = max(0, height)
        self._cells = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_cell(self, x: int, y: int, char: str, color: Color | None = None):
        """Write a character; the color is only replaced when one is given."""
        if not self.in_bounds(x, y):
            return
        cell = self._cells[y][x]
        cell.char = char
        if color is not None:
            cell.color = color

    def get_cell(self, x: int, y: int) -> Cell | None:
        if not self.in_bounds(x, y):
            return None
        return self._cells[y][x]

    def write_text(self, x: int, y: int, text: str, color: Color | None = None):
        for i, ch in enumerate(text):
            self.set_cell(x + i, y, ch, color)

    def clear(self):
        for row in self._cells:
            for cell in row:
                cell.char = " "
                cell.color = None

    def row_text(self, y: int) -> str:
        if not 0 <= y < self.height:
            return ""
        return "".join(cell.char for cell in self._cells[y])

    def runs(self, y: int):
        """Yield ``(x, text, color)`` spans of same-colored cells in row ``y``."""
        if not 0 <= y < self.height:
            return
        row = self._cells[y]
        start = 0
        for x in range(1, self.width + 1):
            if x == self.width or row[x].color != row[start].color:
                yield start, "".join(c.char for c in row[start:x]), row[start].color
                start = x
