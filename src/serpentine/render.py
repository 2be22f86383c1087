"""Drawing contract, pygame adapter, and frame composition."""

from __future__ import annotations

from typing import Callable, Protocol
import logging
import pygame

from .rules import GameSession, GameState
from .utils import (
    BG_COLOR,
    CHECKER_TINT,
    FOOD_COLOR,
    LOSE_BANNER,
    LOSE_FLASH_COLOR,
    SNAKE_COLOR,
    SNAKE_HEAD_COLOR,
    WELCOME_BANNER,
    Color,
)

logger = logging.getLogger(__name__)

Region = tuple[int, int, int, int]


class RenderSurface(Protocol):
    """Minimal drawing capability the game needs from a canvas."""

    def clear(self, region: Region | None = None) -> None: ...

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None: ...

    def fill_circle(self, cx: float, cy: float, r: float, color: Color) -> None: ...

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color, align: str = "center") -> None: ...


class PygameSurface:
    """RenderSurface backed by a pygame surface."""

    def __init__(self, surface: pygame.Surface, font_name: str = "consolas") -> None:
        self.surface = surface
        self.font_name = font_name
        self._fonts: dict[int, pygame.font.Font] = {}
        self._patches: dict[tuple, pygame.Surface] = {}

    def clear(self, region: Region | None = None) -> None:
        rect = pygame.Rect(region) if region else self.surface.get_rect()
        self.surface.fill((0, 0, 0), rect)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        if len(color) == 4:
            self.surface.blit(self._patch(w, h, color), (x, y))
            return
        self.surface.fill(color, pygame.Rect(x, y, w, h))

    def _patch(self, w: int, h: int, color: Color) -> pygame.Surface:
        """Translucent fill of a given size, built once and reused."""
        key = (w, h, tuple(color))
        patch = self._patches.get(key)
        if patch is None:
            patch = pygame.Surface((w, h), pygame.SRCALPHA)
            patch.fill(color)
            self._patches[key] = patch
        return patch

    def fill_circle(self, cx: float, cy: float, r: float, color: Color) -> None:
        pygame.draw.circle(self.surface, color, (cx, cy), r)

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color, align: str = "center") -> None:
        """Draw text with ``y`` as the bottom edge and ``x`` per ``align``."""
        rendered = self._font(size).render(text, True, color)
        if align == "left":
            rect = rendered.get_rect(bottomleft=(x, y))
        elif align == "right":
            rect = rendered.get_rect(bottomright=(x, y))
        else:
            rect = rendered.get_rect(midbottom=(x, y))
        self.surface.blit(rendered, rect)

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.SysFont(self.font_name, size)
            self._fonts[size] = font
        return font


def draw_frame(surface: RenderSurface, session: GameSession) -> None:
    """Compose one full frame for the session's current state."""
    settings = session.settings
    width, height = settings.canvas_width, settings.canvas_height
    surface.clear((0, 0, width, height))
    surface.fill_rect(0, 0, width, height, BG_COLOR)
    draw_checkerboard(surface, session)

    state = session.state
    if state == GameState.READY:
        draw_snake(surface, session)
        draw_welcome_screen(surface, session)
    elif state in (GameState.PLAYING, GameState.HALTED):
        draw_food(surface, session)
        draw_snake(surface, session)
    elif state == GameState.LOSE:
        draw_snake(surface, session)
        draw_lose_screen(surface, session)
    else:
        raise ValueError(f"Unhandled game state: {state}")


def draw_checkerboard(surface: RenderSurface, session: GameSession) -> None:
    cell = session.settings.cell_size
    for row in range(session.settings.rows):
        for col in range(session.settings.columns):
            if (row + col) % 2 == 0:
                surface.fill_rect(col * cell, row * cell, cell, cell, CHECKER_TINT)


def body_color(session: GameSession) -> Color:
    """Body colour, flashing faster as the lost game's difficulty was higher."""
    if session.state == GameState.LOSE and session.tick_count % (int(session.difficulty) + 2) == 0:
        return LOSE_FLASH_COLOR
    return SNAKE_COLOR


def draw_snake(surface: RenderSurface, session: GameSession) -> None:
    cell = session.settings.cell_size
    color = body_color(session)
    for idx, (x, y) in enumerate(session.snake.segments):
        surface.fill_rect(x, y, cell, cell, SNAKE_HEAD_COLOR if idx == 0 else color)


def draw_food(surface: RenderSurface, session: GameSession) -> None:
    if session.food is None:
        return
    cell = session.settings.cell_size
    x, y = session.food
    surface.fill_circle(x + cell / 2, y + cell / 2, cell / 2.5, FOOD_COLOR)


def draw_welcome_screen(surface: RenderSurface, session: GameSession) -> None:
    cx, cy = session.settings.center
    surface.fill_rect(0, 32, session.settings.canvas_width, 80, WELCOME_BANNER)
    surface.draw_text("SNAKE", cx, cy - 110, 48, SNAKE_HEAD_COLOR)
    surface.draw_text("Arrow Keys or WASD to Move", cx, cy + 90, 16, FOOD_COLOR)
    if session.tick_count % 3 != 0:
        surface.draw_text("Press any key to PLAY", cx, cy + 130, 14, SNAKE_COLOR)


def draw_lose_screen(surface: RenderSurface, session: GameSession) -> None:
    cx, cy = session.settings.center
    surface.fill_rect(0, cy - 30, session.settings.canvas_width, 60, LOSE_BANNER)
    surface.draw_text("GAME OVER!", cx, cy + 16, 48, SNAKE_HEAD_COLOR)
    surface.draw_text("Press any key to Try Again", cx, cy + 50, 14, SNAKE_HEAD_COLOR)


class ScoreBoard:
    """Pushes the current score to an external text sink when it changes."""

    def __init__(self, title: str, sink: Callable[[str], None] | None = None) -> None:
        self.title = title
        self.sink = sink or pygame.display.set_caption
        self.score: int | None = None

    def update(self, score: int) -> None:
        if score == self.score:
            return
        self.score = score
        self.sink(f"{self.title} | Score: {score}")
        logger.debug(f"Score display updated to {score}")
