"""Deterministic random stream for world generation.

SplitMix64, integer-only. NOT Python's random module: the same seed must
produce the same world on every platform and every Python version.
"""

from __future__ import annotations

_MASK64 = 0xFFFFFFFFFFFFFFFF
_GOLDEN_GAMMA = 0x9E3779B97F4A7C15


class RandomStream:
    """Seeded 64-bit SplitMix64 generator.

    Every draw advances the state by one step, so callers must draw in the
    same order to reproduce a sequence.
    """

    def __init__(self, seed: int) -> None:
        self.state: int = seed & _MASK64

    def _advance(self) -> int:
        self.state = (self.state + _GOLDEN_GAMMA) & _MASK64
        return self.state

    def next_u64(self) -> int:
        z = self._advance()
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
        return z ^ (z >> 31)

    def next_u32(self) -> int:
        """32-bit draw using Stafford's Mix4 finalizer on the next state."""
        z = self._advance()
        z = ((z ^ (z >> 33)) * 0x62A9D9ED799705F5) & _MASK64
        z = ((z ^ (z >> 28)) * 0xCB24D0A5C88C35B3) & _MASK64
        return z >> 32

    def next_u16(self) -> int:
        return self.next_u32() & 0xFFFF

    def next_u8(self) -> int:
        return self.next_u32() & 0xFF
