
"""SplitMix64 generator shared by both peers of a match"""
import pygame
from typing import Optional

MASK64 = 0xFFFFFFFFFFFFFFFF
GOLDEN_GAMMA = 0x9E3779B97F4A7C15


class SplitMix64:
    """
    Fixed-increment splitting generator.

    Every draw adds GOLDEN_GAMMA to a 64-bit state and runs three
    xor-shift/multiply rounds over it. Only integer arithmetic is involved,
    so two instances built from the same seed yield the same sequence on
    any platform. The float returned by next() is the low 32 bits of the
    mixed word divided by 2**32, which is exact in a double.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = pygame.time.get_ticks()
        self._state = seed & MASK64

    @classmethod
    def from_state(cls, state: int) -> "SplitMix64":
        return cls(state)

    @property
    def state(self) -> int:
        return self._state

    def _next64(self) -> int:
        self._state = (self._state + GOLDEN_GAMMA) & MASK64
        z = self._state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
        return z ^ (z >> 31)

    def next(self) -> float:
        return (self._next64() & 0xFFFFFFFF) / 0x100000000

    def next_int(self, max_value: int) -> int:
        """Integer in [0, max_value)."""
        return int(self.next() * max_value)

    def next_bool(self, probability: float = 0.5) -> bool:
        return self.next() < probability

    def clone(self) -> "SplitMix64":
        return SplitMix64.from_state(self._state)

    def __eq__(self, other):
        if not isinstance(other, SplitMix64):
            return NotImplemented
        return self._state == other._state

    def __hash__(self):
        return hash(self._state)

    def __repr__(self):
        return f"SplitMix64(state=0x{self._state:016x})"
