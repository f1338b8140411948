"""Terrain grid: two 32x32 bitplanes plus the tree table.

Deterministic, integer-only, no PyGame dependency.

Each plane is a list of MAP_SIZE row words. Row index = y, bit index = x,
so cell (x, y) is bit x of word y. The `terrain` plane marks water, the
`bridge` plane marks built crossings. The planes are independent.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from riverwood.config import MAP_SIZE


class OutOfBoundsError(IndexError):
    """A grid coordinate outside [0, MAP_SIZE) on either axis."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Out of bounds: ({x}, {y})")
        self.x = x
        self.y = y


class TileType(IntEnum):
    """Tile index handed to the renderer for each cell."""
    LAND = 0
    WATER = 1
    BRIDGE = 2


@dataclass(slots=True)
class Tree:
    """A tree on the map. activity > 0 means it can still be chopped."""
    x: int
    y: int
    activity: int = 1

    @property
    def is_active(self) -> bool:
        return self.activity > 0


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < MAP_SIZE and 0 <= y < MAP_SIZE


def _check_bounds(x: int, y: int) -> None:
    if not in_bounds(x, y):
        raise OutOfBoundsError(x, y)


class TerrainGrid:
    """Water/land and bridge bitplanes for the fixed-size map.

    Attributes:
        terrain: Row words; a set bit is water.
        bridge: Row words; a set bit is a built bridge.
        trees: The fixed tree table, filled in by generation.
        river_points: Control-point columns the river was carved from.
    """

    def __init__(self) -> None:
        self.width = MAP_SIZE
        self.height = MAP_SIZE
        self.terrain: list[int] = [0] * MAP_SIZE
        self.bridge: list[int] = [0] * MAP_SIZE
        self.trees: list[Tree] = []
        self.river_points: list[int] = []

    # --- Bitplane access ---

    def get_terrain(self, x: int, y: int) -> bool:
        """True if (x, y) is water. Raises OutOfBoundsError."""
        _check_bounds(x, y)
        return bool(self.terrain[y] & (1 << x))

    def get_bridge(self, x: int, y: int) -> bool:
        """True if a bridge stands at (x, y). Raises OutOfBoundsError."""
        _check_bounds(x, y)
        return bool(self.bridge[y] & (1 << x))

    def set_terrain(self, x: int, y: int, value: bool) -> None:
        _check_bounds(x, y)
        self.terrain[y] = _with_bit(self.terrain[y], x, value)

    def set_bridge(self, x: int, y: int, value: bool) -> None:
        _check_bounds(x, y)
        self.bridge[y] = _with_bit(self.bridge[y], x, value)

    # --- Queries ---

    def is_walkable(self, x: int, y: int) -> bool:
        """Land is always walkable; water only where a bridge was built."""
        return not (self.get_terrain(x, y) and not self.get_bridge(x, y))

    def has_active_tree(self, x: int, y: int) -> bool:
        """Check for a choppable tree at exactly (x, y)."""
        for tree in self.trees:
            if tree.is_active and tree.x == x and tree.y == y:
                return True
        return False

    def tile_id(self, x: int, y: int) -> TileType:
        """Tile to draw at (x, y). A bridge covers whatever is below it."""
        if self.get_bridge(x, y):
            return TileType.BRIDGE
        if self.get_terrain(x, y):
            return TileType.WATER
        return TileType.LAND

    def to_ascii(self) -> str:
        """Debug dump: '*' for water, '#' for land, one line per row."""
        lines = []
        for y in range(self.height):
            lines.append("".join(
                "*" if self.get_terrain(x, y) else "#" for x in range(self.width)
            ))
        return "\n".join(lines)


def _with_bit(word: int, bit: int, value: bool) -> int:
    if value:
        return word | (1 << bit)
    return word & ~(1 << bit)
