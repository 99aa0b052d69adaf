"""Food spawning logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from arcade_snake.grid import CellType

if TYPE_CHECKING:
    from arcade_snake.grid import Grid

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places the single food item on the board.

    Candidates are drawn uniformly over the whole board and rejected while
    they land on an occupied cell. After *max_attempts* rejections the
    spawner picks uniformly among the remaining empty cells instead, so a
    nearly full board still terminates. Uses a NumPy RNG for reproducible
    placement.
    """

    def __init__(
        self,
        grid: Grid,
        max_attempts: int = 64,
        rng: np.random.Generator | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.max_attempts = max_attempts
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position: tuple[int, int] | None = None

    def spawn(self) -> tuple[int, int] | None:
        """Move the food to a random empty cell and return it.

        Any previous food cell is cleared first. Returns ``None`` when the
        snake covers the whole board.
        """
        self.clear()

        size = self.grid.size
        for _ in range(self.max_attempts):
            x, y = (int(v) for v in self.rng.integers(size, size=2))
            if self.grid.get(x, y) == CellType.EMPTY:
                return self.place(x, y)

        empty = self.grid.empty_cells()
        if not empty:
            logger.warning("No empty cells available for food spawning.")
            return None
        logger.debug(
            "Random picks exhausted; choosing among %d free cells.",
            len(empty),
        )
        x, y = empty[int(self.rng.integers(len(empty)))]
        return self.place(x, y)

    def clear(self) -> None:
        """Remove the food from the board, if present."""
        if self.position is not None:
            x, y = self.position
            if self.grid.get(x, y) == CellType.FOOD:
                self.grid.set(x, y, CellType.EMPTY)
            self.position = None

    def place(self, x: int, y: int) -> tuple[int, int]:
        """Put the food on a specific cell, replacing any previous one."""
        if self.position is not None and self.position != (x, y):
            self.clear()
        self.grid.set(x, y, CellType.FOOD)
        self.position = (x, y)
        return self.position
