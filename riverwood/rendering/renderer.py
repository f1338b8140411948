"""Game renderer — draws tiles, trees, the player and the HUD.

Reads the game state, never writes it. Tiles are looked up per frame via
TerrainGrid.tile_id so newly built bridges show up immediately.
"""

from __future__ import annotations

import pygame

from riverwood.config import (
    COLOR_BG,
    COLOR_BRIDGE,
    COLOR_LAND,
    COLOR_PLAYER,
    COLOR_TREE,
    COLOR_WATER,
    TILE_RENDER_SIZE,
    VIEW_ROWS,
)
from riverwood.rendering.camera import is_row_visible, vertical_scroll, world_to_screen
from riverwood.rendering.hud import HUD
from riverwood.simulation.player import PlayerState
from riverwood.simulation.state import GameState
from riverwood.simulation.tilemap import TileType

TILE_COLORS = {
    TileType.LAND: COLOR_LAND,
    TileType.WATER: COLOR_WATER,
    TileType.BRIDGE: COLOR_BRIDGE,
}


class Renderer:
    """Draws the game state to the screen."""

    def __init__(self, screen: pygame.Surface) -> None:
        self._screen = screen
        self._tile_size = TILE_RENDER_SIZE
        self._hud = HUD(screen)

    def draw(self, state: GameState) -> None:
        """Draw one frame and flip the display."""
        self._screen.fill(COLOR_BG)
        scroll = vertical_scroll(state.player.y)
        self._draw_tiles(state, scroll)
        self._draw_trees(state, scroll)
        self._draw_player(state.player, scroll)
        self._hud.draw(state)
        pygame.display.flip()

    def _draw_tiles(self, state: GameState, scroll: int) -> None:
        ts = self._tile_size
        tilemap = state.tilemap
        for y in range(scroll, min(scroll + VIEW_ROWS, tilemap.height)):
            for x in range(tilemap.width):
                px, py = world_to_screen(x, y, scroll, ts)
                color = TILE_COLORS[tilemap.tile_id(x, y)]
                pygame.draw.rect(self._screen, color, (px, py, ts, ts))

    def _draw_trees(self, state: GameState, scroll: int) -> None:
        ts = self._tile_size
        for tree in state.trees:
            if not tree.is_active or not is_row_visible(tree.y, scroll):
                continue
            px, py = world_to_screen(tree.x, tree.y, scroll, ts)
            pygame.draw.circle(
                self._screen, COLOR_TREE, (px + ts // 2, py + ts // 2), ts // 2 - 1,
            )

    def _draw_player(self, player: PlayerState, scroll: int) -> None:
        """Triangle pointing in the facing direction."""
        ts = self._tile_size
        px, py = world_to_screen(player.x, player.y, scroll, ts)
        cx = px + ts / 2
        cy = py + ts / 2
        # Pointing up, then rotated by quarter turns (counter-clockwise)
        points = [(0.0, -0.4), (-0.35, 0.35), (0.35, 0.35)]
        turns = player.direction.quarter_turns
        for _ in range(turns):
            points = [(y, -x) for x, y in points]
        pygame.draw.polygon(
            self._screen, COLOR_PLAYER,
            [(cx + x * ts, cy + y * ts) for x, y in points],
        )
