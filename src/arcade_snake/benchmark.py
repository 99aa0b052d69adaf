"""Headless simulation and throughput benchmarking."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, replace

import numpy as np

from arcade_snake.config import GameConfig
from arcade_snake.engine import GameEngine, GameSnapshot
from arcade_snake.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_games: int
    total_ticks: int
    best_score: int
    wall_time_seconds: float
    games_per_second: float
    ticks_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_games} games, "
            f"{self.total_ticks} ticks in {self.wall_time_seconds:.2f}s | "
            f"{self.games_per_second:.1f} games/s, "
            f"{self.ticks_per_second:.1f} ticks/s, "
            f"best score {self.best_score}"
        )


def simulate_game(
    engine: GameEngine,
    rng: np.random.Generator,
    *,
    max_ticks: int = 1_000,
    turn_probability: float = 0.2,
    on_frame: Callable[[GameSnapshot], None] | None = None,
) -> GameSnapshot:
    """Play one game with random turns until game over or *max_ticks*.

    The first input un-pauses the engine; after that a random direction is
    requested on roughly *turn_probability* of ticks. Reversals are left
    for the engine to reject.
    """
    snapshot = engine.set_direction(engine.current_direction)
    for _ in range(max_ticks):
        if rng.random() < turn_probability:
            engine.set_direction(_DIRECTIONS[int(rng.integers(4))])
        snapshot = engine.tick()
        if on_frame is not None:
            on_frame(snapshot)
        if snapshot.is_over:
            break
    return snapshot


def benchmark_throughput(
    *,
    num_games: int = 100,
    max_ticks: int = 1_000,
    config: GameConfig | None = None,
    seed: int = 42,
) -> BenchmarkResult:
    """Measure raw simulation throughput.

    Runs *num_games* headless games with random inputs and reports
    games/second and ticks/second.
    """
    base = config if config is not None else GameConfig()
    rng = np.random.default_rng(seed)

    total_ticks = 0
    best_score = 0
    start = time.perf_counter()

    for _ in range(num_games):
        engine = GameEngine(replace(base, seed=int(rng.integers(2**31))))
        final = simulate_game(engine, rng, max_ticks=max_ticks)
        total_ticks += final.tick
        best_score = max(best_score, final.score)

    elapsed = time.perf_counter() - start
    result = BenchmarkResult(
        total_games=num_games,
        total_ticks=total_ticks,
        best_score=best_score,
        wall_time_seconds=elapsed,
        games_per_second=num_games / max(elapsed, 1e-9),
        ticks_per_second=total_ticks / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
