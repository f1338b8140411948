"""Game session loop.

One simulation tick per display frame, at a fixed TICK_RATE. The loop
samples the keyboard, advances the simulation (which autosaves on its
own cadence), and draws. Closing the window or pressing ESC writes a
final snapshot before returning.
"""

from __future__ import annotations

import logging

import pygame

from riverwood.config import TICK_RATE
from riverwood.input.handler import InputHandler
from riverwood.persistence.serialization import snapshot_from_state
from riverwood.persistence.storage import SaveStorage
from riverwood.rendering.renderer import Renderer
from riverwood.simulation.state import GameState
from riverwood.simulation.tick import advance_tick

logger = logging.getLogger(__name__)


class Game:
    """Main game controller. Owns the game state, storage, and rendering."""

    def __init__(
        self,
        screen: pygame.Surface,
        storage: SaveStorage,
        state: GameState,
    ) -> None:
        self._screen = screen
        self._storage = storage
        self._state = state
        self._clock = pygame.time.Clock()
        self._renderer = Renderer(screen)
        self._input = InputHandler()

    @property
    def state(self) -> GameState:
        return self._state

    def run(self) -> None:
        """Main game loop. Returns when the player quits."""
        logger.info("Game started at tick %d", self._state.tick)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.WINDOWFOCUSLOST:
                    self._input.reset()

            if not running:
                break

            frame = self._input.poll(pygame.key.get_pressed())
            advance_tick(self._state, frame, self._storage)
            self._renderer.draw(self._state)
            self._clock.tick(TICK_RATE)

        self._save()

    def _save(self) -> None:
        self._storage.write_record(snapshot_from_state(self._state))
        logger.info("Saved at tick %d", self._state.tick)
