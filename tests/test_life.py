import random

import pytest

from quadsim.life import CellState, LifeGrid, next_state

A = CellState.ALIVE
D = CellState.DEAD


def grid_with(width, height, alive):
    grid = LifeGrid(width, height)
    for position in alive:
        grid[position] = A
    return grid


@pytest.mark.parametrize(
    "cell, count, expected",
    [
        (A, 0, D),
        (A, 1, D),
        (A, 2, A),
        (A, 3, A),
        (A, 4, D),
        (A, 8, D),
        (D, 3, A),
        (D, 2, D),
        (D, 4, D),
        (D, 0, D),
    ],
)
def test_next_state_rules(cell, count, expected):
    assert next_state(cell, count) is expected


def test_new_grid_is_dead():
    grid = LifeGrid(4, 3)
    assert list(grid.alive_cells()) == []
    assert len(grid.cells) == 12


def test_neighbors_ignore_outside_cells():
    grid = LifeGrid(3, 3, [A] * 9)
    assert grid.neighbors(1, 1) == 8
    assert grid.neighbors(0, 0) == 3
    assert grid.neighbors(1, 0) == 5


def test_neighbors_do_not_count_cell_itself():
    grid = grid_with(3, 3, [(1, 1)])
    assert grid.neighbors(1, 1) == 0


def test_lonely_cell_dies():
    grid = grid_with(5, 5, [(2, 2)])
    grid.step()
    assert list(grid.alive_cells()) == []


def test_block_is_still_life():
    block = [(1, 1), (2, 1), (1, 2), (2, 2)]
    grid = grid_with(4, 4, block)
    grid.step()
    assert sorted(grid.alive_cells()) == sorted(block)


def test_blinker_oscillates():
    horizontal = [(1, 2), (2, 2), (3, 2)]
    vertical = [(2, 1), (2, 2), (2, 3)]
    grid = grid_with(5, 5, horizontal)
    grid.step()
    assert sorted(grid.alive_cells()) == sorted(vertical)
    grid.step()
    assert sorted(grid.alive_cells()) == sorted(horizontal)


def test_random_is_reproducible_with_seed():
    first = LifeGrid.random(8, 6, random.Random(7))
    second = LifeGrid.random(8, 6, random.Random(7))
    assert first.cells == second.cells
    assert len(first.cells) == 48


class _ZeroRng:
    def randrange(self, start, stop):
        return start


class _OneRng:
    def randrange(self, start, stop):
        return start + 1


def test_random_alive_when_roll_is_zero():
    assert LifeGrid.random(3, 2, _ZeroRng()).cells == [A] * 6
    assert LifeGrid.random(3, 2, _OneRng()).cells == [D] * 6


def test_wrong_cell_count_rejected():
    with pytest.raises(ValueError):
        LifeGrid(2, 2, [A, D, A])


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        LifeGrid(0, 3)


def test_out_of_bounds_read_rejected():
    grid = LifeGrid(2, 2)
    with pytest.raises(IndexError):
        grid[2, 0]
    assert grid[1, 1] is D


def test_out_of_bounds_write_leaves_grid_unchanged():
    grid = LifeGrid(2, 2)
    with pytest.raises(IndexError):
        grid[0, -1] = A
    assert list(grid.alive_cells()) == []
    assert grid.cells == [D] * 4