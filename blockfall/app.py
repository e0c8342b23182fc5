"""The game window: input handling, timing and drawing."""

from __future__ import annotations

import argparse
import os
import random
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from blockfall.grid import (  # noqa: E402
    GRID_WIDTH,
    RENDER_GRID_SCALE,
    RENDER_GRID_SPACE,
    RENDER_GRID_X,
    RENDER_GRID_Y,
)
from blockfall.tetris import TetrisState  # noqa: E402
from blockfall.toast import FPS_TARGET, RENDER_HEIGHT, RENDER_WIDTH, Toast  # noqa: E402

WINDOW_WIDTH = 512
WINDOW_HEIGHT = 512

BACKGROUND = (10, 10, 10)
TEXT_COLOR = (200, 200, 200)
TOAST_COLOR = (50, 50, 50)
FONT_SIZE = 15

_PALETTE = {
    0: (0, 0, 0),
    1: (255, 0, 0),
    2: (0, 255, 0),
    3: (0, 0, 255),
    4: (255, 255, 0),
    5: (255, 0, 255),
    6: (0, 255, 255),
    7: (255, 128, 255),
}

_CELL_STEP = RENDER_GRID_SCALE + RENDER_GRID_SPACE
_SIDEBAR_X = RENDER_GRID_X + GRID_WIDTH * _CELL_STEP + 20


@dataclass
class GameState:
    """Loop-level state: whether to quit and how many frames have passed."""

    should_quit: bool = False
    paused: bool = False
    tick_count: int = 0


class Command(Enum):
    """Player actions bound to keys."""

    LEFT = auto()
    RIGHT = auto()
    ROTATE = auto()
    RESTART = auto()
    PAUSE = auto()


KEY_COMMANDS = {
    pygame.K_LEFT: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_UP: Command.ROTATE,
    pygame.K_r: Command.RESTART,
    pygame.K_p: Command.PAUSE,
}


def color_for(color: int) -> tuple[int, int, int]:
    """Return the RGB triple a cell colour is drawn with."""
    try:
        return _PALETTE[color]
    except KeyError:
        raise ValueError(f"unknown block colour {color}") from None


def handle_command(tetris: TetrisState, toast: Toast, command: Command) -> None:
    """Apply one player command to the game."""
    if command is Command.LEFT:
        tetris.move_left()
    elif command is Command.RIGHT:
        tetris.move_right()
    elif command is Command.ROTATE:
        tetris.rotate()
    elif command is Command.RESTART:
        tetris.start()
        toast.message("Restart", FPS_TARGET * 3)
    elif command is Command.PAUSE:
        tetris.playing = not tetris.playing
        if tetris.over:
            toast.message("Cannot unpause", FPS_TARGET * 3)
        elif not tetris.playing:
            toast.message("Paused", FPS_TARGET * 5)
        else:
            toast.message("Unpaused", FPS_TARGET * 3)

    # A finished game must stay stopped whatever was pressed.
    if tetris.over:
        tetris.playing = False


def tick(game: GameState, tetris: TetrisState, toast: Toast) -> None:
    """Advance one frame: drop the piece twice a second and age the toast."""
    if tetris.playing and game.tick_count % (FPS_TARGET // 2) == 0:
        tetris.update()
    toast.update()
    game.tick_count += 1


class Renderer:
    """Draws the game onto a surface."""

    def __init__(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        self.surface = surface
        self.font = font

    def _cell(self, x: int, y: int, color: int) -> None:
        rect = pygame.Rect(
            x * _CELL_STEP + RENDER_GRID_X,
            y * _CELL_STEP + RENDER_GRID_Y,
            RENDER_GRID_SCALE,
            RENDER_GRID_SCALE,
        )
        self.surface.fill(color_for(color), rect)

    def _text(self, text: str, x: int, y: int, alpha: int = 255) -> None:
        rendered = self.font.render(text, True, TEXT_COLOR)
        rendered.set_alpha(alpha)
        self.surface.blit(rendered, (x, y))

    def _toast(self, toast: Toast) -> None:
        if not toast.visible:
            return
        alpha = toast.alpha()
        x = WINDOW_WIDTH // 2 - RENDER_WIDTH // 2
        y = WINDOW_HEIGHT - RENDER_HEIGHT - 20
        box = pygame.Surface((RENDER_WIDTH, RENDER_HEIGHT), pygame.SRCALPHA)
        box.fill((*TOAST_COLOR, alpha))
        self.surface.blit(box, (x, y))
        self._text(toast.text, x + 4, y + 4, alpha)

    def draw(self, tetris: TetrisState, toast: Toast) -> None:
        """Draw the grid, the piece, the sidebar and the toast."""
        self.surface.fill(BACKGROUND)
        for x, y, color in tetris.grid.cells():
            self._cell(x, y, color)
        for x, y in tetris.shape.cells():
            self._cell(x, y, tetris.shape.color)

        self._text(f"Score: {tetris.score}", _SIDEBAR_X, 100)
        self._text(f"High Score: {tetris.high_score}", _SIDEBAR_X, 115)
        self._text("[P] - Pause/Unpause", _SIDEBAR_X, 145)
        self._text("[R] - Restart", _SIDEBAR_X, 160)

        self._toast(toast)


def _load_font(path: str) -> pygame.font.Font:
    if os.path.isfile(path):
        return pygame.font.Font(path, FONT_SIZE)
    return pygame.font.Font(None, FONT_SIZE)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="blockfall", description="Falling-block puzzle game.")
    parser.add_argument("--font", default="Roboto.ttf", help="TrueType font file for text")
    parser.add_argument("--seed", type=int, default=None, help="seed for piece selection")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Tetris")
        renderer = Renderer(screen, _load_font(args.font))
        clock = pygame.time.Clock()

        game = GameState()
        toast = Toast()
        tetris = TetrisState(toast, random.Random(args.seed))
        tetris.start()
        toast.message("Hello World!", FPS_TARGET * 5)

        while not game.should_quit:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.should_quit = True
                elif event.type == pygame.KEYDOWN and event.key in KEY_COMMANDS:
                    handle_command(tetris, toast, KEY_COMMANDS[event.key])

            tick(game, tetris, toast)
            renderer.surface = pygame.display.get_surface()
            renderer.draw(tetris, toast)
            pygame.display.flip()
            clock.tick(FPS_TARGET)
    finally:
        pygame.quit()
    return 0