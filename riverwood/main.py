"""Riverwood entry point.

Usage:
    Continue (or start) a game:   python -m riverwood.main
    Start over with a new world:  python -m riverwood.main --new
    Pick the world seed:          python -m riverwood.main --new --seed 42
    Use another save file:        python -m riverwood.main --save my.sav
"""

from __future__ import annotations

import argparse
import logging
import time

import pygame

from riverwood.config import DEFAULT_SAVE_PATH, SCREEN_HEIGHT, SCREEN_WIDTH
from riverwood.game import Game
from riverwood.persistence.storage import FileStorage, load_game


def _seed_arg(value: str) -> int:
    """Accept decimal or 0x-prefixed hex seeds."""
    return int(value, 0) & 0xFFFFFFFFFFFFFFFF


def main() -> None:
    parser = argparse.ArgumentParser(description="Riverwood — chop trees, bridge the river")
    parser.add_argument(
        "--seed", type=_seed_arg, default=None,
        help="World seed for a new game (default: derived from the clock)",
    )
    parser.add_argument(
        "--save", type=str, default=DEFAULT_SAVE_PATH, metavar="PATH",
        help=f"Save file (default: {DEFAULT_SAVE_PATH})",
    )
    parser.add_argument(
        "--new", action="store_true",
        help="Ignore any existing save and generate a new world",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    seed = args.seed
    if seed is None:
        seed = time.time_ns() & 0xFFFFFFFFFFFFFFFF

    storage = FileStorage(args.save)
    state = load_game(storage, resume=not args.new, seed=seed)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("Riverwood")

    game = Game(screen, storage, state)
    game.run()

    pygame.quit()


if __name__ == "__main__":
    main()
