"""Executable entrypoint for Serpentine."""

from __future__ import annotations

import argparse
import logging
import pygame

from .game import SnakeGame
from .settings import GameSettings, Variant

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="serpentine", description="Classic grid snake.")
    parser.add_argument(
        "--variant",
        choices=[v.value for v in Variant],
        default=Variant.STANDARD.value,
        help="standard has ready and game-over screens; quick starts at once and stops on a crash",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Launch the game."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    settings = GameSettings(variant=Variant(args.variant))
    try:
        game = SnakeGame(settings)
    except pygame.error as exc:
        logger.error(f"Could not open the game window: {exc}")
        return 1
    game.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
