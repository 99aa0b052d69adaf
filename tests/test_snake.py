"""Tests for the Snake module."""

import pytest

from arcade_snake.snake import Direction, Snake


class TestDirection:
    def test_opposites(self):
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.DOWN.opposite is Direction.UP
        assert Direction.LEFT.opposite is Direction.RIGHT
        assert Direction.RIGHT.opposite is Direction.LEFT

    def test_parse_names(self):
        assert Direction.parse("up") is Direction.UP
        assert Direction.parse("Left") is Direction.LEFT
        assert Direction.parse(" RIGHT ") is Direction.RIGHT

    def test_parse_unknown(self):
        assert Direction.parse("north") is None
        assert Direction.parse("") is None
        assert Direction.parse(3) is None
        assert Direction.parse(None) is None


class TestSnakeInit:
    def test_default_creation(self):
        snake = Snake(10, 10)
        assert snake.head == (10, 10)
        assert len(snake) == 3

    def test_body_extends_opposite_to_direction(self):
        snake = Snake(10, 10, Direction.RIGHT, length=3)
        assert list(snake.body) == [(10, 10), (9, 10), (8, 10)]

    def test_body_extends_down_when_heading_up(self):
        snake = Snake(5, 5, Direction.UP, length=3)
        assert list(snake.body) == [(5, 5), (5, 6), (5, 7)]

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake(0, 0, length=0)


class TestSnakeMovement:
    def test_next_head(self):
        snake = Snake(5, 5, Direction.RIGHT)
        assert snake.next_head(Direction.RIGHT) == (6, 5)
        assert snake.next_head(Direction.UP) == (5, 4)
        assert snake.next_head(Direction.DOWN) == (5, 6)

    def test_next_head_is_unwrapped(self):
        snake = Snake(0, 0, Direction.LEFT, length=1)
        assert snake.next_head(Direction.LEFT) == (-1, 0)

    def test_advance_without_growth(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        vacated = snake.advance((6, 5))
        assert snake.head == (6, 5)
        assert len(snake) == 3
        assert vacated == (3, 5)

    def test_advance_with_growth(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        vacated = snake.advance((6, 5), grow=True)
        assert vacated is None
        assert list(snake.body) == [(6, 5), (5, 5), (4, 5), (3, 5)]


class TestSnakeQueries:
    def test_no_self_collision_initially(self):
        assert not Snake(5, 5).self_collision()

    def test_self_collision_detected(self):
        snake = Snake(5, 5, Direction.RIGHT, length=5)
        snake.body.appendleft((4, 5))
        assert snake.self_collision()

    def test_segments_is_tuple_copy(self):
        snake = Snake(5, 5)
        segments = snake.segments()
        snake.advance((6, 5))
        assert segments == ((5, 5), (4, 5), (3, 5))
