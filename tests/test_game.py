from __future__ import annotations

import random

import pygame

from serpentine.game import SnakeGame
from serpentine.main import parse_args
from serpentine.rules import GameState
from serpentine.settings import GameSettings, Variant


def test_integration_ready_play_and_turn() -> None:
    game = SnakeGame(GameSettings(), rng=random.Random(5))
    game.session.food = (0, 0)
    assert game.session.state == GameState.READY

    game.press(pygame.K_SPACE)
    assert game.session.state == GameState.PLAYING

    game.press(pygame.K_w)
    game.press(pygame.K_a)
    game.tick()

    assert game.session.snake.head == (192, 176)
    assert game.scheduler.armed
    assert game.scheduler.remaining_ms == 310
    pygame.quit()


def test_integration_eating_updates_caption_and_speeds_up() -> None:
    game = SnakeGame(GameSettings(variant=Variant.QUICK), rng=random.Random(5))
    head_x, head_y = game.session.snake.head
    game.session.food = (head_x + 16, head_y)

    result = game.tick()

    assert result.ate_food
    assert game.scoreboard.score == 1
    assert "Score: 1" in pygame.display.get_caption()[0]
    assert game.scheduler.remaining_ms < 310
    pygame.quit()


def test_integration_quick_variant_stops_scheduler_on_crash() -> None:
    game = SnakeGame(GameSettings(variant=Variant.QUICK), rng=random.Random(5))
    game.session.snake.segments = [(368 - i * 16, 0) for i in range(5)]

    game.tick()

    assert game.session.state == GameState.HALTED
    assert game.scheduler.stopped
    game.press(pygame.K_SPACE)
    assert game.session.state == GameState.HALTED
    pygame.quit()


def test_integration_lose_then_any_key_resets() -> None:
    game = SnakeGame(GameSettings(), rng=random.Random(5))
    game.press(pygame.K_RETURN)
    game.session.snake.segments = [(368 - i * 16, 0) for i in range(5)]
    game.tick()
    assert game.session.state == GameState.LOSE
    assert game.scheduler.armed

    game.press(pygame.K_q)
    assert game.session.state == GameState.READY
    assert len(game.session.snake) == 5
    pygame.quit()


def test_parse_args_defaults_to_standard_variant() -> None:
    assert parse_args([]).variant == "standard"
    args = parse_args(["--variant", "quick", "--debug"])
    assert args.variant == "quick"
    assert args.debug


def test_main_returns_error_code_when_window_fails(monkeypatch) -> None:
    from serpentine import main as entry

    def _broken(settings):
        raise pygame.error("no display")

    monkeypatch.setattr(entry, "SnakeGame", _broken)
    assert entry.main([]) == 1
