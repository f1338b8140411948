"""Player position, facing and movement rules.

The player moves one tile per button press, never on hold-repeat, and
never off the map: each axis saturates at the grid edge.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from riverwood.config import MAP_SIZE, START_POSITION
from riverwood.simulation.commands import Button, InputFrame
from riverwood.simulation.tilemap import TerrainGrid


class Direction(IntEnum):
    """Facing direction. Values are the codes stored in save files."""
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @property
    def quarter_turns(self) -> int:
        """Counter-clockwise quarter turns of the player sprite."""
        return _QUARTER_TURNS[self]

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]


_QUARTER_TURNS = {
    Direction.UP: 0,
    Direction.LEFT: 1,
    Direction.DOWN: 2,
    Direction.RIGHT: 3,
}

_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

# Checked in this order; the first held one wins.
_DIRECTION_BUTTONS: tuple[tuple[Button, Direction], ...] = (
    (Button.UP, Direction.UP),
    (Button.DOWN, Direction.DOWN),
    (Button.LEFT, Direction.LEFT),
    (Button.RIGHT, Direction.RIGHT),
)


def _saturate(value: int) -> int:
    return max(0, min(value, MAP_SIZE - 1))


@dataclass(slots=True)
class PlayerState:
    """Player tile position and facing."""
    x: int = START_POSITION[0]
    y: int = START_POSITION[1]
    direction: Direction = Direction.UP

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def neighbor(self, direction: Direction) -> tuple[int, int]:
        """The tile one step away in `direction`, held inside the map."""
        dx, dy = direction.offset
        return (_saturate(self.x + dx), _saturate(self.y + dy))


def update_player(player: PlayerState, tilemap: TerrainGrid, frame: InputFrame) -> bool:
    """Apply one tick of directional input. Returns True if the player moved.

    The first held direction (UP, DOWN, LEFT, RIGHT priority) sets facing
    every tick it is held. A step is only attempted on the tick that same
    button went down; it commits if the target is walkable and free of
    active trees.
    """
    for button, direction in _DIRECTION_BUTTONS:
        if not frame.is_pressed(button):
            continue
        player.direction = direction
        if not frame.is_just_pressed(button):
            return False
        nx, ny = player.neighbor(direction)
        if tilemap.is_walkable(nx, ny) and not tilemap.has_active_tree(nx, ny):
            moved = (nx, ny) != player.position
            player.x, player.y = nx, ny
            return moved
        return False
    return False
