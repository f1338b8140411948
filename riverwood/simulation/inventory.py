"""Player inventory — one saturating byte counter per item type.

Counters never wrap and never go negative: every write is clamped to
[0, ITEM_MAX].
"""

from __future__ import annotations

from enum import IntEnum

from riverwood.config import ITEM_MAX


class ItemType(IntEnum):
    """Resource kinds. Values are slot indices in the save file."""
    WOOD_PLANK = 0
    FISH = 1


def _clamp(value: int) -> int:
    return max(0, min(value, ITEM_MAX))


class Inventory:
    """Fixed set of counters, one per ItemType."""

    def __init__(self) -> None:
        self._counts: list[int] = [0] * len(ItemType)

    @classmethod
    def from_counts(cls, counts: tuple[int, ...] | list[int]) -> Inventory:
        """Rebuild an inventory from counts in ItemType order."""
        if len(counts) != len(ItemType):
            raise ValueError(
                f"Expected {len(ItemType)} counts, got {len(counts)}"
            )
        inventory = cls()
        inventory._counts = [_clamp(c) for c in counts]
        return inventory

    def get(self, kind: ItemType) -> int:
        return self._counts[kind]

    def add(self, kind: ItemType, amount: int) -> int:
        """Add `amount`, clamping at ITEM_MAX. Returns the new count."""
        self._counts[kind] = _clamp(self._counts[kind] + amount)
        return self._counts[kind]

    def sub(self, kind: ItemType, amount: int) -> int:
        """Remove `amount`, clamping at 0. Returns the new count."""
        self._counts[kind] = _clamp(self._counts[kind] - amount)
        return self._counts[kind]

    def counts(self) -> tuple[int, ...]:
        return tuple(self._counts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Inventory):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        items = ", ".join(
            f"{kind.name}={self._counts[kind]}" for kind in ItemType
        )
        return f"Inventory({items})"
