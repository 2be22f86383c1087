"""Shared constants and grid helpers for Serpentine."""

from __future__ import annotations

from typing import Iterable, Tuple
import logging
import random

logger = logging.getLogger(__name__)

BG_COLOR = (35, 35, 35)
CHECKER_TINT = (255, 255, 255, 9)
SNAKE_COLOR = (246, 202, 159)
SNAKE_HEAD_COLOR = (249, 230, 207)
LOSE_FLASH_COLOR = (245, 85, 93)
FOOD_COLOR = (153, 230, 95)
WELCOME_BANNER = (191, 111, 74, 85)
LOSE_BANNER = (137, 30, 43)

Direction = Tuple[int, int]
Position = Tuple[int, int]
Color = Tuple[int, ...]

UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)
DIRECTIONS: tuple[Direction, ...] = (UP, DOWN, LEFT, RIGHT)

FOOD_SPAWN_ATTEMPTS = 64


def is_opposite(a: Direction, b: Direction) -> bool:
    """Return whether two directions are opposite vectors."""
    return a[0] == -b[0] and a[1] == -b[1]


def add_direction(position: Position, direction: Direction, step: int) -> Position:
    """Move a grid-aligned position by direction * step."""
    return (position[0] + direction[0] * step, position[1] + direction[1] * step)


def in_bounds(position: Position, width: int, height: int, cell: int) -> bool:
    """Check that a whole cell starting at position fits on the canvas."""
    x, y = position
    return 0 <= x <= width - cell and 0 <= y <= height - cell


def random_open_cell(
    occupied: Iterable[Position],
    columns: int,
    rows: int,
    cell: int,
    rng: random.Random | None = None,
    attempts: int = FOOD_SPAWN_ATTEMPTS,
) -> Position | None:
    """Return a random free grid cell, or None when the grid is full.

    Sampling is uniform over the whole grid and retried a bounded number of
    times. A crowded grid falls back to the first free cell in row-major order.
    """
    rng = rng or random
    occupied_set = set(occupied)
    for _ in range(attempts):
        candidate = (rng.randrange(columns) * cell, rng.randrange(rows) * cell)
        if candidate not in occupied_set:
            return candidate

    free = [
        (col * cell, row * cell)
        for row in range(rows)
        for col in range(columns)
        if (col * cell, row * cell) not in occupied_set
    ]
    if not free:
        logger.warning(f"No free cell left for food on a {columns}x{rows} grid")
        return None
    logger.warning(f"Random food placement gave up after {attempts} attempts, {len(free)} cells free")
    return free[0]
