"""Per-tick input frames.

Input is the ONLY way the player affects the simulation. Once per tick the
input collaborator samples the six buttons and hands the simulation one
InputFrame: which buttons are held, and which of those went down on this
very tick. Debouncing happens before this point.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Button(IntEnum):
    """All buttons the simulation reads."""
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    HARVEST = 4  # chop adjacent trees
    BUILD = 5    # build a bridge in the facing direction


@dataclass(frozen=True, slots=True)
class InputFrame:
    """Button state for one tick.

    Frames are immutable and comparable, so tests can build them inline and
    a recorded session can be replayed frame by frame.

    Attributes:
        held: Buttons currently down.
        just_pressed: Buttons that went down this tick (subset of held).
    """
    held: frozenset[Button] = frozenset()
    just_pressed: frozenset[Button] = frozenset()

    @classmethod
    def press(cls, *buttons: Button) -> InputFrame:
        """Frame where `buttons` went down this tick."""
        pressed = frozenset(buttons)
        return cls(held=pressed, just_pressed=pressed)

    @classmethod
    def hold(cls, *buttons: Button) -> InputFrame:
        """Frame where `buttons` are still down from an earlier tick."""
        return cls(held=frozenset(buttons))

    def is_pressed(self, button: Button) -> bool:
        return button in self.held

    def is_just_pressed(self, button: Button) -> bool:
        return button in self.just_pressed


IDLE = InputFrame()
