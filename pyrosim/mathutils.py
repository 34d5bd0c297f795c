"""Vector math helpers and small formatting utilities."""

from __future__ import annotations

import math
from typing import Any, Callable, Optional, Protocol, Sequence

from pyrosim.vec import Vec2

PI = 3.14159265359
TWO_PI = 2.0 * PI
HALF_PI = PI * 0.5
GOLDEN_RATIO = 1.6180339887


class _XY(Protocol):
    x: float
    y: float


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180.0 / PI)


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (PI / 180.0)


def dot(a: _XY, b: _XY) -> float:
    return a.x * b.x + a.y * b.y


def cross(a: _XY, b: _XY) -> float:
    """Z component of the 3D cross product of two planar vectors."""
    return a.x * b.y - a.y * b.x


def length2(v: _XY) -> float:
    return v.x * v.x + v.y * v.y


def length(v: _XY) -> float:
    return math.sqrt(length2(v))


def normalize(v: _XY) -> Vec2:
    """Return a unit vector with the direction of v; raises on a zero vector."""
    inv_length = 1.0 / length(v)
    return Vec2(v.x * inv_length, v.y * inv_length)


def normal(v: _XY) -> Vec2:
    """Return v rotated by a quarter turn counter-clockwise."""
    return Vec2(-v.y, v.x)


def rotate(v: _XY, theta: float) -> Vec2:
    cs = math.cos(theta)
    sn = math.sin(theta)
    return Vec2(v.x * cs - v.y * sn, v.x * sn + v.y * cs)


def angle(a: _XY, b: Optional[_XY] = None) -> float:
    """Signed angle from a to b, or the angle of a from the x axis if b is omitted."""
    if b is None:
        return angle(Vec2(1.0, 0.0), a)
    return math.atan2(cross(a, b), dot(a, b))


def to_string(value: Any, decimals: int = 2) -> str:
    """Format floats with a fixed number of decimals; other values as-is."""
    if isinstance(value, float):
        return f"{value:.{decimals}f}"
    if isinstance(value, bool):
        return str(int(value))
    return str(value)


def zip_apply(first: Sequence[Any], second: Sequence[Any], callback: Callable[[Any, Any], Any]) -> None:
    """Call callback on paired elements of two sequences of equal length."""
    if len(first) != len(second):
        raise ValueError(f"sequences differ in length: {len(first)} != {len(second)}")
    for a, b in zip(first, second):
        callback(a, b)