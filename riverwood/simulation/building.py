"""Bridge building — spend wood to make a water tile walkable."""

from __future__ import annotations

from riverwood.config import BRIDGE_COST
from riverwood.simulation.inventory import ItemType
from riverwood.simulation.state import GameState


def build_bridge(state: GameState) -> bool:
    """Build a bridge on the tile the player faces.

    Silently does nothing unless the target is unbridged water and the
    player holds at least one plank. At the map edge the target saturates
    to the player's own tile, which is never unbridged water.

    Returns:
        True if a bridge was built.
    """
    tilemap = state.tilemap
    tx, ty = state.player.neighbor(state.player.direction)
    if not tilemap.get_terrain(tx, ty) or tilemap.get_bridge(tx, ty):
        return False
    if state.inventory.get(ItemType.WOOD_PLANK) <= 0:
        return False
    state.inventory.sub(ItemType.WOOD_PLANK, BRIDGE_COST)
    tilemap.set_bridge(tx, ty, True)
    return True
