"""Tick logic — advance the simulation by one step.

Called once per external tick signal (one display frame). Nothing in here
blocks or yields; the optional autosave write is synchronous and happens
at most once per tick, after the counter advanced, so the snapshot always
describes one consistent tick.

ALL MATH IS INTEGER. No floats anywhere in this module.
"""

from __future__ import annotations

import logging

from riverwood.config import AUTOSAVE_INTERVAL_TICKS
from riverwood.persistence.serialization import snapshot_from_state
from riverwood.persistence.storage import SaveStorage
from riverwood.simulation.building import build_bridge
from riverwood.simulation.commands import Button, InputFrame
from riverwood.simulation.harvest import harvest_adjacent_trees
from riverwood.simulation.player import update_player
from riverwood.simulation.state import GameState

logger = logging.getLogger(__name__)


def is_autosave_tick(tick: int) -> bool:
    """Autosave every AUTOSAVE_INTERVAL_TICKS ticks (never at tick 0)."""
    return tick > 0 and tick % AUTOSAVE_INTERVAL_TICKS == 0


def advance_tick(
    state: GameState,
    frame: InputFrame,
    storage: SaveStorage | None = None,
) -> bool:
    """Advance the simulation by one tick.

    Args:
        state: The current game state (mutated in place).
        frame: Button state sampled for this tick.
        storage: Where autosaves go. None disables autosave.

    Returns:
        True if an autosave was written this tick.
    """
    update_player(state.player, state.tilemap, frame)
    if frame.is_just_pressed(Button.HARVEST):
        harvest_adjacent_trees(state)
    if frame.is_just_pressed(Button.BUILD):
        build_bridge(state)
    state.tick += 1

    if storage is not None and is_autosave_tick(state.tick):
        storage.write_record(snapshot_from_state(state))
        logger.debug("Autosaved at tick %d", state.tick)
        return True
    return False
