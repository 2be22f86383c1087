"""The player-controlled segment chain."""

from __future__ import annotations

from dataclasses import dataclass, field

from .utils import RIGHT, Direction, Position, add_direction, is_opposite


@dataclass(slots=True)
class Snake:
    """Segments head-first plus the heading and the per-tick input latch."""

    start_head: Position
    initial_length: int
    cell_size: int

    segments: list[Position] = field(default_factory=list, init=False)
    direction: Direction = field(default=RIGHT, init=False)
    input_latched: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Lay the chain out to the left of the start cell, heading right."""
        x, y = self.start_head
        self.segments = [(x - i * self.cell_size, y) for i in range(self.initial_length)]
        self.direction = RIGHT
        self.input_latched = False

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def head(self) -> Position:
        return self.segments[0]

    @property
    def velocity(self) -> tuple[int, int]:
        """Heading scaled to one cell."""
        return (self.direction[0] * self.cell_size, self.direction[1] * self.cell_size)

    def request_turn(self, direction: Direction) -> bool:
        """Apply a direction change unless one was already taken this tick.

        Reversals are refused so the head can never fold onto the segment
        right behind it.
        """
        if self.input_latched or is_opposite(direction, self.direction):
            return False
        self.direction = direction
        self.input_latched = True
        return True

    def release_latch(self) -> None:
        self.input_latched = False

    def next_head(self) -> Position:
        """Compute the candidate head cell from the current heading."""
        return add_direction(self.head, self.direction, self.cell_size)

    def advance(self, new_head: Position, grow: bool) -> None:
        """Push a new head; the tail stays put when growing."""
        if not grow:
            self.segments.pop()
        self.segments.insert(0, new_head)

    def occupies(self, position: Position) -> bool:
        return position in self.segments
