"""The falling piece: four blocks placed relative to a pivot."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum

from blockfall.grid import EMPTY, Grid

SHAPE_BLOCK_AMOUNT = 4


class ShapeType(IntEnum):
    """The seven tetromino kinds."""

    I = 0  # noqa: E741
    O = 1  # noqa: E741
    S = 2
    Z = 3
    L = 4
    J = 5
    T = 6


def _default_blocks() -> list[tuple[int, int]]:
    return [(0, 0)] * SHAPE_BLOCK_AMOUNT


@dataclass
class Shape:
    """A piece positioned at (x, y) with blocks as offsets from that point."""

    blocks: list[tuple[int, int]] = field(default_factory=_default_blocks)
    x: int = 0
    y: int = 0
    kind: ShapeType = ShapeType.I
    color: int = 0

    def rotate_cw(self) -> None:
        """Turn the piece a quarter turn clockwise; the O piece never turns."""
        if self.kind == ShapeType.O:
            return
        self.blocks = [(-by, bx) for bx, by in self.blocks]

    def rotate_ccw(self) -> None:
        """Turn the piece a quarter turn counter-clockwise; the O piece never turns."""
        if self.kind == ShapeType.O:
            return
        self.blocks = [(by, -bx) for bx, by in self.blocks]

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield the absolute grid position of every block."""
        for bx, by in self.blocks:
            yield self.x + bx, self.y + by

    def collides(self, grid: Grid, offset_x: int = 0, offset_y: int = 0) -> bool:
        """Tell whether the piece, moved by the offset, leaves the grid or overlaps a block."""
        for cx, cy in self.cells():
            x, y = cx + offset_x, cy + offset_y
            if not (0 <= x < grid.width and 0 <= y < grid.height):
                return True
            if grid.get(x, y) != EMPTY:
                return True
        return False

    def apply_to_grid(self, grid: Grid) -> None:
        """Write the piece's colour into the grid at its blocks."""
        for x, y in self.cells():
            grid.set(x, y, self.color)