"""Arcade Snake — single-player snake game engine."""

from arcade_snake.config import GameConfig
from arcade_snake.engine import GameEngine, GameSnapshot, GameStatus
from arcade_snake.grid import CellType, Grid
from arcade_snake.session import GameSession
from arcade_snake.snake import Direction, Snake

__all__ = [
    "CellType",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameSession",
    "GameSnapshot",
    "GameStatus",
    "Grid",
    "Snake",
]
