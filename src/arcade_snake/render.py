"""Plain-text board renderer."""

from __future__ import annotations

from arcade_snake.engine import GameSnapshot

HEAD = "@"
BODY = "o"
FOOD = "*"
EMPTY = "."


def render_text(snapshot: GameSnapshot) -> str:
    """Draw *snapshot* as a grid of glyphs followed by a status line."""
    size = snapshot.grid_size
    rows = [[EMPTY] * size for _ in range(size)]

    if snapshot.food is not None:
        fx, fy = snapshot.food
        rows[fy][fx] = FOOD
    for x, y in snapshot.snake[1:]:
        rows[y][x] = BODY
    hx, hy = snapshot.head
    rows[hy][hx] = HEAD

    lines = ["".join(row) for row in rows]
    lines.append(
        f"score={snapshot.score} speed={snapshot.speed}ms "
        f"tick={snapshot.tick} status={snapshot.status.value}"
    )
    return "\n".join(lines)
