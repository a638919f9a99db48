"""
Random number capability consumed by the map generators.

Generators only need two operations, so they accept anything that matches
the Rng protocol. Tests pass scripted implementations to pin room
placement exactly.
"""

import random
from typing import Optional, Protocol


class Rng(Protocol):
    """The two random operations used during generation."""

    def uniform_integer(self, low: int, high: int) -> int:
        """Return an integer in [low, high], both ends inclusive."""
        ...

    def dice(self, count: int, sides: int) -> int:
        """Roll `count` dice with `sides` faces each and return the sum."""
        ...


class RandomNumberGenerator:
    """Default Rng backed by random.Random, optionally seeded."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._random = random.Random(seed)

    def uniform_integer(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"empty range [{low}, {high}]")
        return self._random.randint(low, high)

    def dice(self, count: int, sides: int) -> int:
        if sides < 1:
            raise ValueError(f"a die needs at least one side, got {sides}")
        return sum(self._random.randint(1, sides) for _ in range(count))
