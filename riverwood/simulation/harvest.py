"""Harvesting — the player chops trees into wood planks.

A chop affects every active tree orthogonally adjacent to the player (not
the player's own tile, not diagonals). Chopped trees stay in the table
with activity 0 and never grow back.
"""

from __future__ import annotations

from riverwood.config import WOOD_PER_TREE
from riverwood.simulation.inventory import ItemType
from riverwood.simulation.state import GameState
from riverwood.simulation.tilemap import Tree


def is_adjacent(tree: Tree, x: int, y: int) -> bool:
    """Manhattan distance exactly 1."""
    return abs(tree.x - x) + abs(tree.y - y) == 1


def harvest_adjacent_trees(state: GameState) -> int:
    """Chop all active trees next to the player.

    Returns:
        Planks awarded (before inventory saturation).
    """
    px, py = state.player.position
    found_wood = 0
    for tree in state.trees:
        if tree.is_active and is_adjacent(tree, px, py):
            tree.activity = 0
            found_wood += WOOD_PER_TREE
    if found_wood:
        state.inventory.add(ItemType.WOOD_PLANK, found_wood)
    return found_wood
