"""Shared test fixtures for Riverwood."""

from __future__ import annotations

import pytest

from riverwood.persistence.storage import MemoryStorage
from riverwood.simulation.state import GameState
from riverwood.simulation.tilemap import TerrainGrid


@pytest.fixture
def game_state() -> GameState:
    """A fresh game state generated from seed 42."""
    return GameState(seed=42)


@pytest.fixture
def blank_state() -> GameState:
    """A game state on an all-land map without trees."""
    return GameState(tilemap=TerrainGrid())


@pytest.fixture
def memory_storage() -> MemoryStorage:
    """An empty in-memory save slot."""
    return MemoryStorage()
