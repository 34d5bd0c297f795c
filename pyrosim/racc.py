"""Rolling accumulators over a fixed-size window of recent values."""

from __future__ import annotations

import math
from typing import Iterator, List, Tuple


class RollingAccumulator:
    """Ring buffer keeping the last max_size values added."""

    def __init__(self, max_size: int = 8) -> None:
        if max_size <= 0:
            raise ValueError(f"window size must be positive, got {max_size}")
        self.max_values_count = max_size
        self.values: List[float] = [0.0] * max_size
        self.current_index = 0
        self.pop_value = 0.0

    def add_value(self, value: float) -> bool:
        """Store value; return True if it replaced an older one."""
        pop = self.current_index >= self.max_values_count
        i = self.current_index % self.max_values_count
        self.pop_value = self.values[i]
        self.values[i] = value
        self.current_index += 1
        return pop

    def clear(self) -> None:
        self.current_index = 0

    def count(self) -> int:
        """Number of values currently held in the window."""
        return min(self.current_index, self.max_values_count)

    def is_overflowing(self) -> bool:
        return self.current_index >= self.max_values_count

    def get(self) -> float:
        return self.values[self.index()]

    def index(self, offset: int = 0) -> int:
        count = self.count()
        if count:
            return (self.current_index + offset) % count
        return 0

    def value_at(self, offset: int) -> float:
        return self.values[self.index(offset)]

    def enumerate(self) -> Iterator[Tuple[int, float]]:
        """Yield (position, value) pairs for every value in the window."""
        for i in range(self.count()):
            yield i, self.values[self.index(i)]

    def set_max_values_count(self, max_count: int) -> None:
        if max_count <= 0:
            raise ValueError(f"window size must be positive, got {max_count}")
        self.max_values_count = max_count
        del self.values[max_count:]
        self.values.extend([0.0] * (max_count - len(self.values)))

    def __float__(self) -> float:
        return float(self.get())


class RollingSum(RollingAccumulator):
    """Sum of the values in the window."""

    def __init__(self, max_size: int = 8) -> None:
        super().__init__(max_size)
        self.sum = 0.0

    def add_value(self, value: float) -> None:
        self.sum += value
        if super().add_value(value):
            self.sum -= self.pop_value

    def get(self) -> float:
        return self.sum


class RollingMean(RollingSum):
    """Mean of the values in the window; NaN while it is empty."""

    def add_value(self, value: float) -> None:
        super().add_value(value)

    def get(self) -> float:
        count = self.count()
        if count == 0:
            return math.nan
        return self.sum / count


class RollingDiff(RollingAccumulator):
    """Difference between the newest and the oldest value in the window."""

    def add_value(self, value: float) -> None:
        super().add_value(value)

    def get(self) -> float:
        return self.values[self.index(-1)] - self.values[self.index()]