"""Game state record, per-tick update, and collision rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Sequence
import logging
import random

from .settings import GameSettings, Variant
from .snake import Snake
from .utils import Direction, Position, in_bounds, random_open_cell

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Finite states of a game session."""

    READY = auto()
    PLAYING = auto()
    LOSE = auto()
    HALTED = auto()


class Collision(Enum):
    """What ended the game."""

    WALL = auto()
    SELF = auto()


@dataclass(slots=True)
class GameSession:
    """All mutable state of one game, owned by the loop driver."""

    settings: GameSettings
    snake: Snake
    food: Position | None = None
    score: int = 0
    difficulty: float = 0.0
    tick_count: int = 0
    state: GameState = GameState.READY


@dataclass(frozen=True, slots=True)
class TickResult:
    """Outcome of a single update step."""

    ate_food: bool = False
    collision: Collision | None = None


def initial_state(variant: Variant) -> GameState:
    return GameState.READY if variant == Variant.STANDARD else GameState.PLAYING


def new_session(settings: GameSettings, rng: random.Random | None = None) -> GameSession:
    """Build a fresh session with food already on the board."""
    snake = Snake(
        start_head=settings.center,
        initial_length=settings.initial_length,
        cell_size=settings.cell_size,
    )
    session = GameSession(settings=settings, snake=snake, state=initial_state(settings.variant))
    spawn_food(session, rng)
    return session


def reset_session(session: GameSession, rng: random.Random | None = None) -> None:
    """Return a session to its starting configuration."""
    session.tick_count = 0
    session.score = 0
    session.difficulty = 0.0
    session.snake.reset()
    session.state = initial_state(session.settings.variant)
    spawn_food(session, rng)
    logger.info(f"Session reset to {session.state.name}")


def spawn_food(session: GameSession, rng: random.Random | None = None) -> Position | None:
    """Place food on a random cell not covered by the snake."""
    settings = session.settings
    session.food = random_open_cell(
        session.snake.segments,
        settings.columns,
        settings.rows,
        settings.cell_size,
        rng=rng,
    )
    return session.food


def detect_collision(
    candidate: Position,
    segments: Sequence[Position],
    settings: GameSettings,
) -> Collision | None:
    """Check a candidate head against the walls and the pre-move body.

    The first ``self_collision_grace`` segments are exempt from the self
    check; the trailing body right behind the head is never reachable.
    """
    if not in_bounds(candidate, settings.canvas_width, settings.canvas_height, settings.cell_size):
        return Collision.WALL
    for segment in segments[settings.self_collision_grace:]:
        if segment == candidate:
            return Collision.SELF
    return None


def tick_interval_ms(session: GameSession) -> float:
    """Delay before the next tick; shrinks without bound as difficulty grows."""
    return session.settings.base_interval_ms / (1 + session.difficulty)


def handle_input(
    session: GameSession,
    direction: Direction | None,
    rng: random.Random | None = None,
) -> None:
    """Feed one key press into the session.

    ``direction`` is None for keys with no movement binding. Those still
    count as "any key" on the ready and lose screens.
    """
    state = session.state
    if state == GameState.READY:
        session.state = GameState.PLAYING
        logger.info("Game started")
    elif state == GameState.LOSE:
        reset_session(session, rng)
    elif state == GameState.PLAYING:
        if direction is not None:
            session.snake.request_turn(direction)
    elif state == GameState.HALTED:
        return
    else:
        raise ValueError(f"Unhandled game state: {state}")


def update(session: GameSession, rng: random.Random | None = None) -> TickResult:
    """Advance the session by one tick."""
    session.tick_count += 1
    state = session.state
    if state == GameState.PLAYING:
        return _step(session, rng)
    if state in (GameState.READY, GameState.LOSE, GameState.HALTED):
        return TickResult()
    raise ValueError(f"Unhandled game state: {state}")


def _step(session: GameSession, rng: random.Random | None) -> TickResult:
    snake = session.snake
    candidate = snake.next_head()

    collision = detect_collision(candidate, snake.segments, session.settings)
    if collision is not None:
        if session.settings.variant == Variant.STANDARD:
            session.state = GameState.LOSE
        else:
            session.state = GameState.HALTED
        logger.info(f"{collision.name.title()} collision at {candidate}, score {session.score}")
        return TickResult(collision=collision)

    ate_food = candidate == session.food
    snake.advance(candidate, grow=ate_food)
    if ate_food:
        session.score += 1
        session.difficulty += session.settings.difficulty_step
        spawn_food(session, rng)
        logger.debug(f"Food eaten, score {session.score}, difficulty {session.difficulty:.3f}")

    snake.release_latch()
    return TickResult(ate_food=ate_food)
