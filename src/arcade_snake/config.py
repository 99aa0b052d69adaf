"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from arcade_snake.snake import Direction

logger = logging.getLogger(__name__)

GRID_SIZE = 20
INITIAL_SPEED_MS = 200
SPEED_DECREMENT_MS = 5
MIN_SPEED_MS = 50
POINTS_PER_FOOD = 10


@dataclass(frozen=True)
class GameConfig:
    """Tunable constants for a single game.

    The defaults give a 20×20 toroidal board with a three-segment snake
    heading right from (10, 10), a 200 ms starting tick that shortens by
    5 ms per food down to 50 ms, and 10 points per food.
    """

    grid_size: int = GRID_SIZE
    initial_length: int = 3
    start_x: int = 10
    start_y: int = 10
    initial_direction: Direction = Direction.RIGHT

    initial_speed_ms: int = INITIAL_SPEED_MS
    speed_decrement_ms: int = SPEED_DECREMENT_MS
    min_speed_ms: int = MIN_SPEED_MS
    points_per_food: int = POINTS_PER_FOOD

    # Random picks before falling back to a scan of the free cells.
    spawn_attempts: int = 64
    seed: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.initial_direction, str):
            direction = Direction.parse(self.initial_direction)
            if direction is None:
                raise ValueError(
                    f"Unknown initial_direction {self.initial_direction!r}.",
                )
            object.__setattr__(self, "initial_direction", direction)

        if self.grid_size < 4:
            raise ValueError("grid_size must be at least 4.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        if not (
            0 <= self.start_x < self.grid_size
            and 0 <= self.start_y < self.grid_size
        ):
            raise ValueError("start position must lie inside the grid.")

        dx, dy = self.initial_direction.value
        tail_x = self.start_x - dx * (self.initial_length - 1)
        tail_y = self.start_y - dy * (self.initial_length - 1)
        if not (
            0 <= tail_x < self.grid_size and 0 <= tail_y < self.grid_size
        ):
            raise ValueError(
                "initial_length does not fit the grid behind the start "
                "position; move the start or shorten the snake."
            )

        if self.min_speed_ms <= 0:
            raise ValueError("min_speed_ms must be positive.")
        if self.initial_speed_ms < self.min_speed_ms:
            raise ValueError("initial_speed_ms must be >= min_speed_ms.")
        if self.speed_decrement_ms < 0:
            raise ValueError("speed_decrement_ms must be >= 0.")
        if self.points_per_food < 1:
            raise ValueError("points_per_food must be at least 1.")
        if self.spawn_attempts < 1:
            raise ValueError("spawn_attempts must be at least 1.")

    def to_dict(self) -> dict:
        """Serialize to a plain, JSON-compatible dict."""
        d = asdict(self)
        d["initial_direction"] = self.initial_direction.name.lower()
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
