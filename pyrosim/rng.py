"""Seedable random number generators for reals and integers."""

from __future__ import annotations

import random
from typing import Optional


class RealNumberGenerator:
    """Uniformly distributed real numbers, seeded with 0 unless told otherwise."""

    def __init__(self, seed: int = 0) -> None:
        self._random = random.Random(seed)

    def set_seed(self, seed: int) -> None:
        """Restart the sequence from the given seed."""
        self._random.seed(seed)

    def get(self) -> float:
        """A number in the half-open range 0..1."""
        return self._random.random()

    def under(self, maximum: float) -> float:
        """A number in the range 0..maximum."""
        return self.get() * maximum

    def uint_under(self, maximum: int) -> int:
        """An integer in the inclusive range 0..maximum."""
        return min(int(self.under(float(maximum) + 1.0)), maximum)

    def get_range(self, low: float, high: Optional[float] = None) -> float:
        """A number between low and high.

        With a single argument, that argument is a width and the number lies
        in the range centred on zero.
        """
        if high is None:
            return self.get_range(-low * 0.5, low * 0.5)
        return low + self.get() * (high - low)

    def full_range(self, width: float) -> float:
        """A number in the range -width..width."""
        return self.get_range(2.0 * width)

    def proba(self, threshold: float) -> bool:
        """True with probability threshold."""
        return self.get() < threshold


class IntegerNumberGenerator:
    """Uniformly distributed integers over inclusive ranges, seeded with 0 by default."""

    def __init__(self, seed: int = 0) -> None:
        self._random = random.Random(seed)

    def set_seed(self, seed: int) -> None:
        """Restart the sequence from the given seed."""
        self._random.seed(seed)

    def under(self, maximum: int) -> int:
        """An integer in the inclusive range 0..maximum."""
        if maximum < 0:
            raise ValueError(f"maximum must be non-negative, got {maximum}")
        return self._random.randint(0, maximum)

    def get_range(self, low: int, high: int) -> int:
        """An integer in the inclusive range low..high."""
        if low > high:
            raise ValueError(f"empty range {low}..{high}")
        return self._random.randint(low, high)