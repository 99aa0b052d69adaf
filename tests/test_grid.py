"""Tests for the Grid module."""

import numpy as np
import pytest

from arcade_snake.grid import CellType, Grid


class TestGridInit:
    def test_default_size(self):
        grid = Grid()
        assert grid.size == 20
        assert grid.cells.shape == (20, 20)

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 4"):
            Grid(size=3)

    def test_all_cells_start_empty(self):
        grid = Grid(size=5)
        assert np.all(grid.cells == CellType.EMPTY)


class TestGridOperations:
    def test_set_and_get(self):
        grid = Grid(size=5)
        grid.set(3, 1, CellType.SNAKE)
        assert grid.get(3, 1) == CellType.SNAKE
        # Array is indexed [y, x].
        assert grid.cells[1, 3] == CellType.SNAKE

    def test_paint(self):
        grid = Grid(size=5)
        grid.paint([(0, 0), (1, 0), (2, 0)], CellType.SNAKE)
        assert grid.count(CellType.SNAKE) == 3

    def test_clear(self):
        grid = Grid(size=5)
        grid.set(0, 0, CellType.SNAKE)
        grid.set(1, 1, CellType.FOOD)
        grid.clear()
        assert np.all(grid.cells == CellType.EMPTY)

    def test_wrap(self):
        grid = Grid(size=20)
        assert grid.wrap(-1, 5) == (19, 5)
        assert grid.wrap(20, 5) == (0, 5)
        assert grid.wrap(5, -1) == (5, 19)
        assert grid.wrap(5, 20) == (5, 0)
        assert grid.wrap(7, 8) == (7, 8)

    def test_empty_cells_are_xy(self):
        grid = Grid(size=4)
        assert len(grid.empty_cells()) == 16
        grid.cells[:] = CellType.SNAKE
        grid.set(3, 1, CellType.EMPTY)
        assert grid.empty_cells() == [(3, 1)]
