"""Fixed game constants and key bindings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import pygame

from .utils import DOWN, LEFT, RIGHT, UP, Direction, Position


class Variant(str, Enum):
    """Available game flavours."""

    STANDARD = "standard"
    QUICK = "quick"


@dataclass(frozen=True, slots=True)
class GameSettings:
    """Constants for one game; not loaded from or saved to disk."""

    cell_size: int = 16
    columns: int = 24
    rows: int = 24
    base_interval_ms: float = 310.0
    difficulty_step: float = 0.085
    initial_length: int = 5
    self_collision_grace: int = 4
    fps: int = 60
    variant: Variant = Variant.STANDARD

    def __post_init__(self) -> None:
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError(f"grid must have positive dimensions, got {self.columns}x{self.rows}")
        if not 1 <= self.initial_length <= self.columns // 2 + 1:
            raise ValueError(f"initial_length {self.initial_length} does not fit a {self.columns}-column grid")

    @property
    def canvas_width(self) -> int:
        return self.columns * self.cell_size

    @property
    def canvas_height(self) -> int:
        return self.rows * self.cell_size

    @property
    def center(self) -> Position:
        """Return the canvas centre snapped down to the grid."""
        return (self.columns // 2 * self.cell_size, self.rows // 2 * self.cell_size)


def default_key_bindings() -> dict[int, Direction]:
    """Arrow keys and WASD mapped to grid directions."""
    return {
        pygame.K_UP: UP,
        pygame.K_w: UP,
        pygame.K_DOWN: DOWN,
        pygame.K_s: DOWN,
        pygame.K_LEFT: LEFT,
        pygame.K_a: LEFT,
        pygame.K_RIGHT: RIGHT,
        pygame.K_d: RIGHT,
    }
