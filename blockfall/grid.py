"""The playing field: a rectangle of coloured cells, 0 meaning empty."""

from __future__ import annotations

from collections.abc import Iterator

GRID_WIDTH = 8
GRID_HEIGHT = 16

RENDER_GRID_X = 10
RENDER_GRID_Y = 10
RENDER_GRID_SCALE = 24
RENDER_GRID_SPACE = 4

EMPTY = 0

_LINE_SCORES = {0: 0, 1: 100, 2: 300, 3: 500, 4: 800}


class Grid:
    """A width x height field of colour values."""

    def __init__(self, width: int = GRID_WIDTH, height: int = GRID_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self._rows = [self._empty_row() for _ in range(height)]

    def _empty_row(self) -> list[int]:
        return [EMPTY] * self.width

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")

    def get(self, x: int, y: int) -> int:
        """Return the colour at column x, row y."""
        self._check(x, y)
        return self._rows[y][x]

    def set(self, x: int, y: int, color: int) -> None:
        """Store a colour at column x, row y."""
        self._check(x, y)
        self._rows[y][x] = color

    def clear(self) -> None:
        """Empty every cell."""
        self._rows = [self._empty_row() for _ in range(self.height)]

    def process_lines(self) -> int:
        """Clear full lines, drop the rest and return the score earned."""
        score = self.empty_lines()
        self.fall_lines()
        return score

    def fall_lines(self) -> None:
        """Remove empty rows, letting the rows above them fall down."""
        filled = [row for row in self._rows if any(cell != EMPTY for cell in row)]
        gap = self.height - len(filled)
        self._rows = [self._empty_row() for _ in range(gap)] + filled

    def empty_lines(self) -> int:
        """Empty every completely filled row and return the score for them."""
        cleared = 0
        for row in self._rows:
            if all(cell != EMPTY for cell in row):
                cleared += 1
                row[:] = self._empty_row()
        return _LINE_SCORES.get(cleared, 0)

    def cells(self) -> Iterator[tuple[int, int, int]]:
        """Yield (x, y, color) for every cell, row by row."""
        for y, row in enumerate(self._rows):
            for x, color in enumerate(row):
                yield x, y, color