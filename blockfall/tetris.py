"""Game rules: spawning pieces, moving them and locking them into the grid."""

from __future__ import annotations

import random
from typing import Protocol

from blockfall.grid import EMPTY, GRID_HEIGHT, GRID_WIDTH, Grid
from blockfall.shape import Shape, ShapeType
from blockfall.toast import FPS_TARGET, Toast

SPAWN_X = 3

_SPAWNS: dict[ShapeType, tuple[list[tuple[int, int]], int]] = {
    ShapeType.I: ([(0, -2), (0, -1), (0, 0), (0, 1)], 2),
    ShapeType.O: ([(0, 0), (0, 1), (1, 0), (1, 1)], 0),
    ShapeType.S: ([(0, 0), (-1, 1), (0, 1), (1, 0)], 0),
    ShapeType.Z: ([(0, 0), (-1, -1), (0, -1), (1, 0)], 1),
    ShapeType.L: ([(0, 0), (0, -1), (0, 1), (1, 1)], 1),
    ShapeType.J: ([(0, 0), (0, -1), (0, 1), (-1, 1)], 1),
    ShapeType.T: ([(0, 0), (-1, 0), (1, 0), (0, 1)], 0),
}


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class TetrisState:
    """The grid, the falling piece and the score of one game."""

    def __init__(
        self,
        toast: Toast | None = None,
        rng: _RandomSource | None = None,
    ) -> None:
        self.toast = toast if toast is not None else Toast()
        self.rng = rng if rng is not None else random.Random()
        self.grid = Grid(GRID_WIDTH, GRID_HEIGHT)
        self.shape = Shape()
        self.playing = False
        self.over = False
        self.score = 0
        self.high_score = 0

    def _spawn(self) -> None:
        self.change_shape(self.rng.randrange(len(ShapeType)))
        self.shape.x = SPAWN_X

    def start(self) -> None:
        """Begin a new game on an empty grid."""
        self.grid.clear()
        self._spawn()
        self.playing = True
        self.over = False
        self.score = 0

    def stop(self) -> None:
        """End the game, recording a new high score if one was reached."""
        self.playing = False
        self.over = True
        if self.score > self.high_score:
            self.high_score = self.score
            self.toast.message("NEW RECORD", FPS_TARGET * 5)

    def _can_shift(self, step: int) -> bool:
        wall = 0 if step < 0 else self.grid.width - 1
        for x, y in self.shape.cells():
            if x == wall:
                return False
            if self.grid.get(x + step, y) != EMPTY:
                return False
        return True

    def move_left(self) -> None:
        """Shift the piece one column left unless a wall or block is in the way."""
        if self._can_shift(-1):
            self.shape.x -= 1

    def move_right(self) -> None:
        """Shift the piece one column right unless a wall or block is in the way."""
        if self._can_shift(1):
            self.shape.x += 1

    def rotate(self) -> None:
        """Turn the piece clockwise, undoing the turn if it would collide."""
        self.shape.rotate_cw()
        if self.shape.collides(self.grid, 0, 0):
            self.shape.rotate_ccw()

    def change_shape(self, shape_type: int) -> None:
        """Replace the piece's blocks, row and colour with those of the given kind."""
        kind = ShapeType(shape_type)
        blocks, y = _SPAWNS[kind]
        self.shape.blocks = list(blocks)
        self.shape.y = y
        self.shape.color = int(kind) + 1
        self.shape.kind = kind

    def update(self) -> None:
        """Drop the piece one row, or lock it, clear lines and spawn the next."""
        if not self.shape.collides(self.grid, 0, 1):
            self.shape.y += 1
            return

        if self.shape.collides(self.grid, 0, 0):
            self.toast.message("Game Over", FPS_TARGET * 5)
            self.stop()

        self.shape.apply_to_grid(self.grid)
        self.score += self.grid.process_lines()
        self._spawn()