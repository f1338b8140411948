"""Game state — the single source of truth for a session.

GameState owns the terrain grid (with its tree table), the player, the
inventory and the tick counter. Nothing else holds references into it;
the renderer only reads.

DETERMINISM RULES:
- All values are integers (no floats).
- World generation draws only from its own RandomStream.
- The tick counter advances exactly once per simulation step.
"""

from __future__ import annotations

import hashlib

from riverwood.config import DEFAULT_SEED
from riverwood.simulation.inventory import Inventory
from riverwood.simulation.mapgen import generate_map
from riverwood.simulation.player import PlayerState
from riverwood.simulation.tilemap import TerrainGrid, Tree


class GameState:
    """Complete simulation state for a session.

    Attributes:
        tick: Simulation steps run so far (starts at 0).
        tilemap: Water/bridge bitplanes plus the tree table.
        player: Player position and facing.
        inventory: Resource counters.
        seed: Seed the world was generated from (0 if unknown, e.g. restored).
    """

    def __init__(
        self,
        seed: int = DEFAULT_SEED,
        tilemap: TerrainGrid | None = None,
    ) -> None:
        self.seed = seed
        self.tick: int = 0
        self.tilemap: TerrainGrid = tilemap if tilemap is not None else generate_map(seed)
        self.player = PlayerState()
        self.inventory = Inventory()

    @property
    def trees(self) -> list[Tree]:
        return self.tilemap.trees

    def compute_hash(self) -> bytes:
        """Compute a deterministic hash of the full game state.

        Two runs fed the same seed and the same input frames must agree on
        this at every tick.
        """
        h = hashlib.sha256()
        h.update(self.tick.to_bytes(8, "big"))
        for row in self.tilemap.terrain:
            h.update(row.to_bytes(4, "big"))
        for row in self.tilemap.bridge:
            h.update(row.to_bytes(4, "big"))
        h.update(len(self.trees).to_bytes(4, "big"))
        for tree in self.trees:
            h.update(tree.x.to_bytes(2, "big"))
            h.update(tree.y.to_bytes(2, "big"))
            h.update(tree.activity.to_bytes(1, "big", signed=True))
        h.update(bytes(self.inventory.counts()))
        h.update(self.player.x.to_bytes(1, "big"))
        h.update(self.player.y.to_bytes(1, "big"))
        h.update(self.player.direction.to_bytes(1, "big"))
        return h.digest()
