"""Vertex geometry for lines and a background grid."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Any, Optional, Tuple

from pyrosim.render import PrimitiveType, RenderContext, RenderStates, Transform, VertexArray
from pyrosim.vec import Color, Vec2


def _vec(value: Any) -> Vec2:
    if hasattr(value, "x") and hasattr(value, "y"):
        return Vec2(float(value.x), float(value.y))
    x, y = value
    return Vec2(float(x), float(y))


def generate_line(
    vertex_array: VertexArray,
    index: int,
    point_1: Any,
    point_2: Any,
    width: float,
    color: Color,
    offset: float = 0.0,
) -> None:
    """Write a quad of the given width from point_1 to point_2 at index.

    Both ends are pulled in by offset * 0.5 along the line.
    """
    p1 = _vec(point_1)
    p2 = _vec(point_2)
    p1_p2 = p2 - p1
    line_length = math.hypot(p1_p2.x, p1_p2.y)
    if line_length == 0.0:
        raise ValueError("line end points coincide")
    v = p1_p2 / line_length
    n = Vec2(-v.y, v.x)

    offset_v = v * (offset * 0.5)
    normal_v = n * (0.5 * width)

    corners = (
        p1 + offset_v + normal_v,
        p2 - offset_v + normal_v,
        p2 - offset_v - normal_v,
        p1 + offset_v - normal_v,
    )
    for i, corner in enumerate(corners):
        vertex = vertex_array[index + i]
        vertex.position = corner
        vertex.color = color


class BackgroundGrid:
    """Thin lines every small tick and thick lines every large tick."""

    def __init__(self, size: Any, small_tick: int, large_tick: int) -> None:
        if small_tick <= 0 or large_tick <= 0:
            raise ValueError(f"ticks must be positive, got {small_tick} and {large_tick}")
        s = size if not (hasattr(size, "x") and hasattr(size, "y")) else (size.x, size.y)
        self.size: Tuple[int, int] = (int(s[0]), int(s[1]))
        self.ticks: Tuple[int, int] = (small_tick, large_tick)
        self.small_width = 1.0
        self.large_width = 2.0
        self.transform = Transform()
        self.va = VertexArray(PrimitiveType.QUADS)
        self.update_geometry()

    def set_thickness(self, small: float, large: float) -> None:
        self.small_width = small
        self.large_width = large
        self.update_geometry()

    def _quad(self, idx: int, corners: Tuple[Tuple[float, float], ...]) -> None:
        for i, (x, y) in enumerate(corners):
            self.va[idx + i].position = Vec2(x, y)

    def update_geometry(self) -> None:
        small_tick, large_tick = self.ticks
        width, height = self.size
        fw, fh = float(width), float(height)
        vertical_small = width // small_tick
        horizontal_small = height // small_tick
        vertical_large = width // large_tick
        horizontal_large = height // large_tick

        self.va.resize((vertical_small + horizontal_small + vertical_large + horizontal_large + 4) * 4)

        half_small = self.small_width * 0.5
        for i in range(1, vertical_small):
            x = float(i * small_tick)
            self._quad(i * 4, ((x - half_small, 0.0), (x + half_small, 0.0), (x + half_small, fh), (x - half_small, fh)))
        global_index = vertical_small

        for i in range(1, horizontal_small):
            y = float(i * small_tick)
            self._quad(
                (i + global_index) * 4,
                ((0.0, y - half_small), (0.0, y + half_small), (fw, y + half_small), (fw, y - half_small)),
            )
        global_index += horizontal_small

        half_large = self.large_width * 0.5
        for i in range(vertical_large + 1):
            x = float(i * large_tick)
            self._quad(
                (i + global_index) * 4,
                (
                    (x - half_large, -half_large),
                    (x + half_large, -half_large),
                    (x + half_large, fh + half_large),
                    (x - half_large, fh + half_large),
                ),
            )
        global_index += vertical_large + 1

        for i in range(horizontal_large + 1):
            y = float(i * large_tick)
            self._quad(
                (i + global_index) * 4,
                ((0.0, y - half_large), (0.0, y + half_large), (fw, y + half_large), (fw, y - half_large)),
            )

    def set_color(self, color: Color) -> None:
        for vertex in self.va:
            vertex.color = color

    def render(self, context: RenderContext) -> None:
        """Draw the grid on the world layer."""
        context.draw(self.va, None, context.world_layer_id)

    def draw(self, target: Any, states: Optional[RenderStates] = None) -> None:
        """Draw on target with the grid's own transform applied after states'."""
        states = states or RenderStates()
        target.draw(self.va, replace(states, transform=states.transform * self.transform))