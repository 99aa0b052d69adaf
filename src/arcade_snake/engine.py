"""Tick-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from arcade_snake.config import GameConfig
from arcade_snake.food import FoodSpawner
from arcade_snake.grid import CellType, Grid
from arcade_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)


class GameStatus(str, enum.Enum):
    """Lifecycle state derived from the pause and game-over flags."""

    PAUSED = "paused"
    RUNNING = "running"
    OVER = "over"


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the engine state after a mutation."""

    snake: tuple[tuple[int, int], ...]
    food: tuple[int, int] | None
    direction: Direction
    pending_direction: Direction
    score: int
    speed: int
    is_over: bool
    is_paused: bool
    tick: int
    grid_size: int

    @property
    def status(self) -> GameStatus:
        if self.is_over:
            return GameStatus.OVER
        if self.is_paused:
            return GameStatus.PAUSED
        return GameStatus.RUNNING

    @property
    def head(self) -> tuple[int, int]:
        return self.snake[0]

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "tick": self.tick,
            "score": self.score,
            "speed": self.speed,
            "is_over": self.is_over,
            "is_paused": self.is_paused,
            "status": self.status.value,
            "direction": self.direction.name.lower(),
            "pending_direction": self.pending_direction.name.lower(),
            "snake": [list(seg) for seg in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "grid_size": self.grid_size,
        }


class GameEngine:
    """Single-player snake engine on a toroidal board.

    The engine owns every piece of game state. Each public mutation
    returns a fresh :class:`GameSnapshot`; callers decide when to redraw
    and when to call :meth:`tick` again.

    Direction input is split in two: ``current_direction`` is what the
    snake did on the last tick, ``pending_direction`` is the latest
    accepted input and only takes effect at the start of the next tick.
    Reversal checks always compare against ``current_direction``.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.rng = np.random.default_rng(self.config.seed)
        self.grid = Grid(size=self.config.grid_size)
        self.food_spawner = FoodSpawner(
            self.grid, max_attempts=self.config.spawn_attempts, rng=self.rng,
        )
        self.reset()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def food(self) -> tuple[int, int] | None:
        return self.food_spawner.position

    @property
    def status(self) -> GameStatus:
        return self.snapshot().status

    def snapshot(self) -> GameSnapshot:
        """Return the current state as an immutable snapshot."""
        return GameSnapshot(
            snake=self.snake.segments(),
            food=self.food,
            direction=self.current_direction,
            pending_direction=self.pending_direction,
            score=self.score,
            speed=self.speed,
            is_over=self.is_over,
            is_paused=self.is_paused,
            tick=self.tick_count,
            grid_size=self.grid.size,
        )

    # ------------------------------------------------------------------
    # Input commands
    # ------------------------------------------------------------------

    def set_direction(self, direction: Direction) -> GameSnapshot:
        """Queue *direction* for the next tick.

        Input on a finished game, anything that is not a :class:`Direction`
        and a reversal of the current heading are all ignored. Any accepted
        input on a paused game also starts play.
        """
        if self.is_over or not isinstance(direction, Direction):
            return self.snapshot()
        if direction is self.current_direction.opposite:
            return self.snapshot()

        self.pending_direction = direction
        if self.is_paused:
            self.is_paused = False
        return self.snapshot()

    def toggle_pause(self) -> GameSnapshot:
        """Pause or resume; does nothing once the game is over."""
        if not self.is_over:
            self.is_paused = not self.is_paused
        return self.snapshot()

    def reset(self) -> GameSnapshot:
        """Restore the initial layout and spawn fresh food."""
        cfg = self.config
        self.grid.clear()
        self.snake = Snake(
            cfg.start_x, cfg.start_y, cfg.initial_direction,
            length=cfg.initial_length,
        )
        self.grid.paint(self.snake.body, CellType.SNAKE)
        self.food_spawner.position = None
        self.food_spawner.spawn()

        self.current_direction = cfg.initial_direction
        self.pending_direction = cfg.initial_direction
        self.score = 0
        self.speed = cfg.initial_speed_ms
        self.is_over = False
        self.is_paused = True
        self.tick_count = 0
        return self.snapshot()

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def tick(self) -> GameSnapshot:
        """Advance the game by one cell.

        Does nothing while paused or over.
        """
        if self.is_over or self.is_paused:
            return self.snapshot()

        self.current_direction = self.pending_direction
        new_head = self.grid.wrap(*self.snake.next_head(self.current_direction))
        self.tick_count += 1

        if new_head == self.food:
            # Paint the head before respawning so the new food avoids it.
            self.snake.advance(new_head, grow=True)
            self.grid.set(*new_head, CellType.SNAKE)
            self.food_spawner.spawn()
            self.score += self.config.points_per_food
            self.speed = max(
                self.config.min_speed_ms,
                self.speed - self.config.speed_decrement_ms,
            )
            logger.debug(
                "Food eaten at %s; score=%d speed=%dms.",
                new_head, self.score, self.speed,
            )
            return self.snapshot()

        vacated = self.snake.advance(new_head)
        self.grid.set(*vacated, CellType.EMPTY)
        self.grid.set(*new_head, CellType.SNAKE)

        if self.snake.self_collision():
            self.is_over = True
            logger.info(
                "Snake collided with itself at tick %d with score %d.",
                self.tick_count, self.score,
            )
        return self.snapshot()
