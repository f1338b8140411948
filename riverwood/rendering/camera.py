"""Vertical camera for Riverwood.

The map is as wide as the screen but taller than it, so the view only
scrolls vertically. It stays put until the player walks past
SCROLL_THRESHOLD_ROWS, then follows, stopping when the bottom row of the
map reaches the bottom of the screen. The camera is render-only state and
never touches the simulation.
"""

from __future__ import annotations

from riverwood.config import MAP_SIZE, SCROLL_THRESHOLD_ROWS, VIEW_ROWS


def vertical_scroll(
    player_y: int,
    threshold: int = SCROLL_THRESHOLD_ROWS,
    view_rows: int = VIEW_ROWS,
    map_rows: int = MAP_SIZE,
) -> int:
    """First map row shown on screen for a player standing on `player_y`."""
    return min(max(0, player_y - threshold), max(0, map_rows - view_rows))


def is_row_visible(row: int, scroll: int, view_rows: int = VIEW_ROWS) -> bool:
    return scroll <= row < scroll + view_rows


def world_to_screen(x: int, y: int, scroll: int, tile_size: int) -> tuple[int, int]:
    """Top-left pixel of tile (x, y) given the current scroll."""
    return (x * tile_size, (y - scroll) * tile_size)
