"""Pygame driver: event pumping, tick scheduling, and presentation."""

from __future__ import annotations

import logging
import random
import pygame

from .render import PygameSurface, ScoreBoard, draw_frame
from .rules import GameSession, GameState, TickResult, handle_input, new_session, tick_interval_ms, update
from .scheduler import TickScheduler
from .settings import GameSettings, default_key_bindings
from .utils import Direction

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Serpentine"


class SnakeGame:
    """Owns the window, the session, and the tick scheduler."""

    def __init__(self, settings: GameSettings | None = None, rng: random.Random | None = None) -> None:
        pygame.init()
        pygame.font.init()

        self.settings = settings or GameSettings()
        self.rng = rng
        self.screen = pygame.display.set_mode((self.settings.canvas_width, self.settings.canvas_height))
        self.canvas = PygameSurface(self.screen)
        self.clock = pygame.time.Clock()
        self.key_bindings: dict[int, Direction] = default_key_bindings()

        self.session: GameSession = new_session(self.settings, rng)
        self.scheduler = TickScheduler()
        self.scoreboard = ScoreBoard(WINDOW_TITLE)
        self.scoreboard.update(self.session.score)
        logger.info(
            f"Started {self.settings.variant.value} game on a {self.settings.columns}x{self.settings.rows} grid"
        )

    def run(self) -> None:
        """Main event/tick loop."""
        self._present()
        self.scheduler.arm(tick_interval_ms(self.session))
        running = True
        while running:
            dt_ms = self.clock.tick(self.settings.fps)
            running = self._handle_events()
            if not running:
                break
            elapsed_ms = float(dt_ms)
            while self.scheduler.advance(elapsed_ms):
                elapsed_ms = 0.0
                self.tick()

        pygame.quit()

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                return False
            self.press(event.key)
        return True

    def press(self, key: int) -> None:
        """Route a key press into the session."""
        handle_input(self.session, self.key_bindings.get(key), self.rng)
        self.scoreboard.update(self.session.score)

    def tick(self) -> TickResult:
        """Run one update+render cycle and schedule the next one."""
        result = update(self.session, self.rng)
        if result.ate_food:
            self.scoreboard.update(self.session.score)
        self._present()

        if self.session.state == GameState.HALTED:
            self.scheduler.stop()
            logger.info(f"Game halted with score {self.session.score}")
        else:
            self.scheduler.arm(tick_interval_ms(self.session))
        return result

    def _present(self) -> None:
        draw_frame(self.canvas, self.session)
        pygame.display.flip()
