"""Binary save format for game snapshots.

All encoding uses struct for a compact, fixed-size record. Little-endian,
no padding, no version tag: any layout change breaks existing saves.

Record layout (289 bytes):
    [terrain:u32 * 32][bridge:u32 * 32]
    per tree (TREE_COUNT):
        [x:u16][y:u16][activity:i8]
    [counts:u8 * len(ItemType)]
    [player_x:u8][player_y:u8][direction:u8]
    [tick:u64]
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

from riverwood.config import MAP_SIZE, TREE_COUNT
from riverwood.simulation.inventory import Inventory, ItemType
from riverwood.simulation.player import Direction, PlayerState
from riverwood.simulation.state import GameState
from riverwood.simulation.tilemap import TerrainGrid, Tree, in_bounds


class SnapshotFormatError(ValueError):
    """Bytes that do not decode into a valid snapshot."""


@dataclass(frozen=True, slots=True)
class SnapshotRecord:
    """Value copy of a GameState at one tick, shaped like the save file.

    Attributes:
        terrain: MAP_SIZE row words of the water plane.
        bridge: MAP_SIZE row words of the bridge plane.
        trees: (x, y, activity) per tree slot.
        inventory: Counts in ItemType order.
        player_x: Player column.
        player_y: Player row.
        direction: Player facing.
        tick: Tick counter the snapshot was taken at.
    """
    terrain: tuple[int, ...]
    bridge: tuple[int, ...]
    trees: tuple[tuple[int, int, int], ...]
    inventory: tuple[int, ...]
    player_x: int
    player_y: int
    direction: Direction
    tick: int


SNAPSHOT_FMT = struct.Struct(
    f"<{MAP_SIZE}I{MAP_SIZE}I{'HHb' * TREE_COUNT}{len(ItemType)}BBBBQ"
)
SNAPSHOT_SIZE = SNAPSHOT_FMT.size

# Unused tree slots are stored as an inactive tree at the origin
EMPTY_TREE_SLOT = (0, 0, -1)


# --- State projection ---

def snapshot_from_state(state: GameState) -> SnapshotRecord:
    """Copy everything persistent out of `state`.

    A tree table shorter than TREE_COUNT is padded with EMPTY_TREE_SLOT.
    """
    if len(state.trees) > TREE_COUNT:
        raise ValueError(f"At most {TREE_COUNT} trees fit a snapshot")
    trees = [(t.x, t.y, t.activity) for t in state.trees]
    trees += [EMPTY_TREE_SLOT] * (TREE_COUNT - len(trees))
    return SnapshotRecord(
        terrain=tuple(state.tilemap.terrain),
        bridge=tuple(state.tilemap.bridge),
        trees=tuple(trees),
        inventory=state.inventory.counts(),
        player_x=state.player.x,
        player_y=state.player.y,
        direction=state.player.direction,
        tick=state.tick,
    )


def state_from_snapshot(record: SnapshotRecord) -> GameState:
    """Rebuild a GameState from a record, field for field.

    EMPTY_TREE_SLOT padding is dropped, so a short tree table comes back
    as short as it was saved.
    """
    tilemap = TerrainGrid()
    tilemap.terrain = list(record.terrain)
    tilemap.bridge = list(record.bridge)
    tilemap.trees = [
        Tree(x, y, activity) for x, y, activity in record.trees
        if (x, y, activity) != EMPTY_TREE_SLOT
    ]

    state = GameState(seed=0, tilemap=tilemap)
    state.player = PlayerState(record.player_x, record.player_y, record.direction)
    state.inventory = Inventory.from_counts(record.inventory)
    state.tick = record.tick
    return state


# --- Encoding ---

def encode_snapshot(record: SnapshotRecord) -> bytes:
    """Pack a record into its fixed-size binary form."""
    if len(record.trees) != TREE_COUNT:
        raise ValueError(f"Expected {TREE_COUNT} trees, got {len(record.trees)}")
    tree_fields = [field for tree in record.trees for field in tree]
    return SNAPSHOT_FMT.pack(
        *record.terrain,
        *record.bridge,
        *tree_fields,
        *record.inventory,
        record.player_x,
        record.player_y,
        record.direction,
        record.tick,
    )


def decode_snapshot(data: bytes) -> SnapshotRecord:
    """Unpack binary data into a SnapshotRecord.

    Raises SnapshotFormatError if the data has the wrong size or holds
    values no running game could have produced.
    """
    if len(data) != SNAPSHOT_SIZE:
        raise SnapshotFormatError(
            f"Snapshot is {len(data)} bytes, expected {SNAPSHOT_SIZE}"
        )
    values = SNAPSHOT_FMT.unpack(data)

    offset = 0
    terrain = values[offset:offset + MAP_SIZE]
    offset += MAP_SIZE
    bridge = values[offset:offset + MAP_SIZE]
    offset += MAP_SIZE
    trees = []
    for _ in range(TREE_COUNT):
        x, y, activity = values[offset:offset + 3]
        offset += 3
        if not in_bounds(x, y):
            raise SnapshotFormatError(f"Tree outside the map at ({x}, {y})")
        trees.append((x, y, activity))
    inventory = values[offset:offset + len(ItemType)]
    offset += len(ItemType)
    player_x, player_y, direction_code, tick = values[offset:offset + 4]

    if not in_bounds(player_x, player_y):
        raise SnapshotFormatError(
            f"Player outside the map at ({player_x}, {player_y})"
        )
    try:
        direction = Direction(direction_code)
    except ValueError:
        raise SnapshotFormatError(f"Unknown direction code {direction_code}") from None

    return SnapshotRecord(
        terrain=terrain,
        bridge=bridge,
        trees=tuple(trees),
        inventory=inventory,
        player_x=player_x,
        player_y=player_y,
        direction=direction,
        tick=tick,
    )
