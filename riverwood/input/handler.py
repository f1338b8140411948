"""Input handler — converts PyGame key state to InputFrames.

Arrows / WASD: move and face.
Z or Space: chop adjacent trees.
X or B: build a bridge in the facing direction.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import pygame

from riverwood.simulation.commands import Button, InputFrame

KEY_BINDINGS: dict[Button, tuple[int, ...]] = {
    Button.UP: (pygame.K_UP, pygame.K_w),
    Button.DOWN: (pygame.K_DOWN, pygame.K_s),
    Button.LEFT: (pygame.K_LEFT, pygame.K_a),
    Button.RIGHT: (pygame.K_RIGHT, pygame.K_d),
    Button.HARVEST: (pygame.K_z, pygame.K_SPACE),
    Button.BUILD: (pygame.K_x, pygame.K_b),
}


class InputHandler:
    """Samples the keyboard once per tick and tracks press edges."""

    def __init__(self, bindings: dict[Button, tuple[int, ...]] | None = None) -> None:
        self._bindings = bindings if bindings is not None else KEY_BINDINGS
        self._previous: frozenset[Button] = frozenset()

    def poll(self, keys: Sequence[bool] | Mapping[int, bool]) -> InputFrame:
        """Build this tick's frame from a key-state lookup.

        Pass pygame.key.get_pressed(); any mapping indexed by key code works.
        """
        held = frozenset(
            button for button, codes in self._bindings.items()
            if any(keys[code] for code in codes)
        )
        just_pressed = held - self._previous
        self._previous = held
        return InputFrame(held=held, just_pressed=just_pressed)

    def reset(self) -> None:
        """Forget held buttons, e.g. after the window lost focus."""
        self._previous = frozenset()
