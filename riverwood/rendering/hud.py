"""HUD rendering.

Draws a small panel in the bottom-right corner with the plank count and
the elapsed play time.
"""

from __future__ import annotations

import pygame

from riverwood.config import (
    COLOR_HUD_BG,
    COLOR_HUD_TEXT,
    COLOR_TREE,
    ITEM_MAX,
    TICK_RATE,
)
from riverwood.simulation.inventory import ItemType
from riverwood.simulation.state import GameState

_COUNTER_DIGITS = len(str(ITEM_MAX))
_PANEL_MARGIN = 8
_PANEL_PADDING = 6


def format_counter(value: int) -> str:
    """Zero-padded byte counter, e.g. 7 -> '007'."""
    return str(value).zfill(_COUNTER_DIGITS)


def format_elapsed(tick: int, tick_rate: int = TICK_RATE) -> str:
    """Play time as MM:SS (minutes keep counting past 99)."""
    seconds = tick // tick_rate
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


class HUD:
    """Draws the inventory / clock panel."""

    def __init__(self, screen: pygame.Surface) -> None:
        self._screen = screen
        self._font = pygame.font.SysFont("monospace", 16, bold=True)

    def draw(self, state: GameState) -> None:
        wood = format_counter(state.inventory.get(ItemType.WOOD_PLANK))
        lines = [
            self._font.render(wood, True, COLOR_HUD_TEXT),
            self._font.render(format_elapsed(state.tick), True, COLOR_HUD_TEXT),
        ]
        icon = lines[0].get_height()
        width = icon + _PANEL_PADDING + max(s.get_width() for s in lines)
        height = sum(s.get_height() for s in lines)

        sw = self._screen.get_width()
        sh = self._screen.get_height()
        panel = pygame.Rect(
            sw - width - 2 * _PANEL_PADDING - _PANEL_MARGIN,
            sh - height - 2 * _PANEL_PADDING - _PANEL_MARGIN,
            width + 2 * _PANEL_PADDING,
            height + 2 * _PANEL_PADDING,
        )
        pygame.draw.rect(self._screen, COLOR_HUD_BG, panel)
        pygame.draw.rect(self._screen, COLOR_HUD_TEXT, panel, 1)

        x = panel.x + _PANEL_PADDING
        y = panel.y + _PANEL_PADDING
        # Plank icon next to the counter
        pygame.draw.rect(self._screen, COLOR_TREE, (x, y + 2, icon - 4, icon - 4))
        for surf in lines:
            self._screen.blit(surf, (x + icon + _PANEL_PADDING, y))
            y += surf.get_height()
