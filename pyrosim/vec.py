"""Small value types: 2D and 4D vectors and RGBA colors."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Vec2:
    """Two-component vector with value semantics."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: Number) -> Vec2:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Number) -> Vec2:
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return Vec2(self.x / divisor, self.y / divisor)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Vec4:
    """Four-component vector with value semantics."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __add__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, factor: Number) -> Vec4:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Vec4(self.x * factor, self.y * factor, self.z * factor, self.w * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec4:
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA color; alpha defaults to opaque."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"color channel {name} must be an integer in 0..255, got {value!r}")

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a


def to_vec4(color: Color) -> Vec4:
    """Return the color's channels as floats in a Vec4."""
    return Vec4(float(color.r), float(color.g), float(color.b), float(color.a))


def _channel(value: float) -> int:
    return int(min(max(value, 0.0), 255.0))


def to_color(vec: Vec4) -> Color:
    """Clamp each component to 0..255 and truncate it into a Color."""
    return Color(_channel(vec.x), _channel(vec.y), _channel(vec.z), _channel(vec.w))


def set_alpha(color: Color, alpha: int) -> Color:
    """Return a copy of the color with a new alpha channel."""
    return replace(color, a=alpha)