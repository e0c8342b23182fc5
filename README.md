# blockfall

A small falling-block puzzle game. Pieces drop onto an 8 by 16 board. Fill a
whole row to clear it and score points. The game ends when a piece can no
longer move down while it already overlaps blocks on the board, which happens
once the pile reaches the spot where new pieces appear.

## Installing

```
pip install .
```

This installs pygame as a dependency.

## Playing

```
blockfall
```

The game opens a resizable 512 by 512 window titled "Tetris".

| Key   | Action                 |
|-------|------------------------|
| Left  | Move the piece left    |
| Right | Move the piece right   |
| Up    | Rotate clockwise       |
| P     | Pause or unpause       |
| R     | Restart                |

Options:

- `--font PATH` is the TrueType font used for text. The default is
  `Roboto.ttf` in the current directory. If that file does not exist, pygame's
  built-in font is used.
- `--seed N` seeds the random choice of pieces, so a game can be replayed with
  the same sequence.

Pieces fall one row every half second. A rotation that would push the piece
off the board or into a block is not carried out. The square piece does not
rotate. Clearing rows at the same time scores:

| Rows | Points |
|------|--------|
| 1    | 100    |
| 2    | 300    |
| 3    | 500    |
| 4    | 800    |

The panel beside the board shows your current score and your best score for
the session. Short messages such as "Paused", "Game Over" and "NEW RECORD"
appear at the bottom of the window and fade out during their last second. You
cannot unpause a game that has ended. Press R to start a new one.

## Using the pieces in code

The game logic in these modules does not need a window:

- `blockfall.grid.Grid` is the board of coloured cells, where 0 means empty.
  It provides `get`, `set`, `clear` and `cells`. `process_lines()` clears full
  rows, lets the rows above fall, and returns the points earned.
- `blockfall.shape.Shape` and `blockfall.shape.ShapeType` are the falling
  piece. `Shape` provides `rotate_cw`, `rotate_ccw`, `collides`,
  `apply_to_grid` and `cells`.
- `blockfall.toast.Toast` is the timed message. Its methods are `message`,
  `update` and `alpha`.
- `blockfall.tetris.TetrisState` runs a game. Drive it with `start()`,
  `move_left()`, `move_right()`, `rotate()` and `update()`. It takes an
  optional `Toast` and an optional random source that has a `randrange`
  method.

`blockfall.app` holds the pygame front end: `handle_command` applies a
`Command` to a game, `tick` advances one frame, `Renderer` draws a frame, and
`main` runs the window.

## What it does not do

The best score is kept only while the window is open. It is not saved between
sessions.

## Running the tests

```
pip install .[test]
pytest
```