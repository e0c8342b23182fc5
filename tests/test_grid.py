import pytest

from blockfall.grid import GRID_HEIGHT, GRID_WIDTH, Grid


def _fill_row(grid, y, color=1):
    for x in range(grid.width):
        grid.set(x, y, color)


def _occupied(grid):
    return sum(1 for _, _, c in grid.cells() if c != 0)


def test_new_grid_is_empty_and_sized():
    grid = Grid()
    cells = list(grid.cells())
    assert len(cells) == GRID_WIDTH * GRID_HEIGHT
    assert all(color == 0 for _, _, color in cells)


def test_set_get_round_trip():
    grid = Grid(4, 5)
    grid.set(3, 4, 6)
    assert grid.get(3, 4) == 6
    assert grid.get(0, 0) == 0


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 5)])
def test_out_of_range_raises(x, y):
    grid = Grid(4, 5)
    with pytest.raises(IndexError):
        grid.get(x, y)
    with pytest.raises(IndexError):
        grid.set(x, y, 1)


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        Grid(0, 3)


def test_clear_empties_everything():
    grid = Grid()
    _fill_row(grid, 3, 2)
    grid.set(1, 1, 4)
    grid.clear()
    assert _occupied(grid) == 0


def test_cells_row_major_order():
    grid = Grid(2, 2)
    grid.set(1, 0, 3)
    assert [(x, y) for x, y, _ in grid.cells()] == [(0, 0), (1, 0), (0, 1), (1, 1)]
    assert (1, 0, 3) in list(grid.cells())


@pytest.mark.parametrize("lines,score", [(0, 0), (1, 100), (2, 300), (3, 500), (4, 800)])
def test_empty_lines_scores(lines, score):
    grid = Grid()
    for y in range(GRID_HEIGHT - lines, GRID_HEIGHT):
        _fill_row(grid, y)
    assert grid.empty_lines() == score
    assert _occupied(grid) == 0


def test_empty_lines_keeps_partial_rows():
    grid = Grid(3, 3)
    _fill_row(grid, 2)
    grid.set(0, 1, 5)
    grid.empty_lines()
    assert grid.get(0, 1) == 5
    assert all(grid.get(x, 2) == 0 for x in range(3))


def test_fall_lines_moves_empty_rows_to_top():
    grid = Grid(3, 4)
    grid.set(0, 0, 5)
    grid.set(2, 2, 3)
    grid.set(1, 3, 4)
    grid.fall_lines()
    assert grid.get(0, 1) == 5
    assert grid.get(2, 2) == 3
    assert grid.get(1, 3) == 4
    assert grid.get(0, 0) == 0
    assert _occupied(grid) == 3


def test_fall_lines_preserves_order_of_filled_rows():
    grid = Grid(2, 5)
    grid.set(0, 0, 1)
    grid.set(0, 2, 2)
    grid.set(0, 4, 3)
    grid.fall_lines()
    assert [grid.get(0, y) for y in range(5)] == [0, 0, 1, 2, 3]


def test_process_lines_clears_and_drops():
    grid = Grid(3, 3)
    _fill_row(grid, 2)
    grid.set(1, 1, 7)
    assert grid.process_lines() == 100
    assert grid.get(1, 2) == 7
    assert grid.get(1, 1) == 0
    assert _occupied(grid) == 1


def test_process_lines_without_full_rows_scores_nothing():
    grid = Grid(3, 3)
    grid.set(0, 2, 1)
    assert grid.process_lines() == 0
    assert grid.get(0, 2) == 1