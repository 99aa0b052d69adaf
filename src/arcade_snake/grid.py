"""Occupancy grid for the snake board."""

from __future__ import annotations

import enum

import numpy as np


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """NumPy-backed square board with toroidal coordinates.

    Positions are ``(x, y)``; the backing array is indexed ``[y, x]`` so
    that ``cells`` reads row by row the way the board is drawn.
    """

    def __init__(self, size: int = 20) -> None:
        if size < 4:
            raise ValueError("Grid size must be at least 4.")
        self.size = size
        self.cells = np.zeros((size, size), dtype=np.int8)

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = CellType.EMPTY

    def wrap(self, x: int, y: int) -> tuple[int, int]:
        """Wrap coordinates around the board edges."""
        return x % self.size, y % self.size

    def get(self, x: int, y: int) -> CellType:
        """Return the cell type at the given coordinate."""
        return CellType(self.cells[y, x])

    def set(self, x: int, y: int, cell_type: CellType) -> None:
        """Set the cell type at the given coordinate."""
        self.cells[y, x] = cell_type

    def paint(self, positions, cell_type: CellType) -> None:
        for x, y in positions:
            self.cells[y, x] = cell_type

    def empty_cells(self) -> list[tuple[int, int]]:
        """Return all empty cell coordinates as ``(x, y)`` pairs."""
        ys, xs = np.where(self.cells == CellType.EMPTY)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def count(self, cell_type: CellType) -> int:
        return int(np.count_nonzero(self.cells == cell_type))
