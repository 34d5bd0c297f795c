"""A fixed-size two-dimensional grid stored row by row."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass
class HitPoint(Generic[T]):
    """Result of casting a ray through a grid: the cell hit and the distance travelled."""

    cell: Optional[T] = None
    dist: float = 0.0


class Grid(Generic[T]):
    """Cells addressed by integer coordinates; data holds them row after row.

    Coordinates are given either as two numbers or as one object with x and y
    attributes; they are truncated to integers.
    """

    def __init__(self, width: int = 0, height: int = 0, factory: Optional[Callable[[], T]] = None) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"grid size must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        make: Callable[[], Any] = factory if factory is not None else (lambda: None)
        self.data: List[T] = [make() for _ in range(width * height)]

    def check_coords(self, x: Any, y: Optional[Any] = None) -> bool:
        """True if the coordinates lie strictly inside the grid's border."""
        cx, cy = self._coords(x, y)
        return 0 < cx < self.width - 1 and 0 < cy < self.height - 1

    def get(self, x: Any, y: Optional[Any] = None) -> T:
        return self.data[self._index(x, y)]

    def set(self, x: Any, y: Any, value: T) -> None:
        self.data[self._index(x, y)] = value

    @staticmethod
    def _coords(x: Any, y: Optional[Any]) -> Tuple[int, int]:
        if y is None:
            return int(x.x), int(x.y)
        return int(x), int(y)

    def _index(self, x: Any, y: Optional[Any]) -> int:
        cx, cy = self._coords(x, y)
        if not (0 <= cx < self.width and 0 <= cy < self.height):
            raise IndexError(f"cell ({cx}, {cy}) outside grid of size {self.width}x{self.height}")
        return cy * self.width + cx