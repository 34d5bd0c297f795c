"""Render layers, transforms and vertex data routed to a drawing target."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Any, Iterator, List, Optional, Protocol, Tuple, Union

from pyrosim.vec import Color, Vec2

VecLike = Union[Vec2, Tuple[float, float]]


def _as_vec(value: VecLike) -> Vec2:
    if isinstance(value, Vec2):
        return Vec2(float(value.x), float(value.y))
    x, y = value
    return Vec2(float(x), float(y))


class PrimitiveType(Enum):
    """How the vertices of a VertexArray are assembled."""

    POINTS = auto()
    LINES = auto()
    LINE_STRIP = auto()
    TRIANGLES = auto()
    TRIANGLE_STRIP = auto()
    TRIANGLE_FAN = auto()
    QUADS = auto()


class BlendMode(Enum):
    """How drawn pixels combine with what is already on the target."""

    ALPHA = auto()
    ADD = auto()
    MULTIPLY = auto()
    NONE = auto()


@dataclass
class Vertex:
    """A point with a color and texture coordinates."""

    position: Vec2 = Vec2()
    color: Color = Color(255, 255, 255)
    tex_coords: Vec2 = Vec2()


class VertexArray:
    """A resizable list of vertices with a primitive type."""

    def __init__(self, primitive_type: PrimitiveType = PrimitiveType.POINTS, count: int = 0) -> None:
        self.primitive_type = primitive_type
        self.vertices: List[Vertex] = []
        self.resize(count)

    def resize(self, count: int) -> None:
        """Grow with default vertices or shrink to count vertices."""
        if count < 0:
            raise ValueError(f"vertex count must be non-negative, got {count}")
        del self.vertices[count:]
        self.vertices.extend(Vertex() for _ in range(count - len(self.vertices)))

    def __getitem__(self, index: int) -> Vertex:
        return self.vertices[index]

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)


@dataclass
class Transform:
    """A 2D affine transform: x' = a*x + b*y + c, y' = d*x + e*y + f."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 1.0
    f: float = 0.0

    def combine(self, other: "Transform") -> "Transform":
        """Set self to self followed on the input side by other; return self."""
        a = self.a * other.a + self.b * other.d
        b = self.a * other.b + self.b * other.e
        c = self.a * other.c + self.b * other.f + self.c
        d = self.d * other.a + self.e * other.d
        e = self.d * other.b + self.e * other.e
        f = self.d * other.c + self.e * other.f + self.f
        self.a, self.b, self.c, self.d, self.e, self.f = a, b, c, d, e, f
        return self

    def translate(self, offset: VecLike) -> "Transform":
        o = _as_vec(offset)
        return self.combine(Transform(1.0, 0.0, o.x, 0.0, 1.0, o.y))

    def scale(self, factors: VecLike) -> "Transform":
        s = _as_vec(factors)
        return self.combine(Transform(s.x, 0.0, 0.0, 0.0, s.y, 0.0))

    def apply(self, point: VecLike) -> Vec2:
        p = _as_vec(point)
        return Vec2(self.a * p.x + self.b * p.y + self.c, self.d * p.x + self.e * p.y + self.f)

    def __mul__(self, other: "Transform") -> "Transform":
        if not isinstance(other, Transform):
            return NotImplemented
        return copy.copy(self).combine(other)


@dataclass
class RenderStates:
    """Transform, texture and blend mode used for one draw call."""

    transform: Transform = field(default_factory=Transform)
    texture: Any = None
    blend_mode: BlendMode = BlendMode.ALPHA


class RenderTarget(Protocol):
    def draw(self, drawable: Any, states: RenderStates) -> None: ...

    def clear(self, color: Color) -> None: ...

    def display(self) -> None: ...


class Layer:
    """A view onto a target with its own camera position and zoom."""

    def __init__(self, size: VecLike, target: RenderTarget) -> None:
        self.target = target
        self.center = _as_vec(size) * 0.5
        self._scale = 1.0
        self._offset = Vec2()
        self._transform = Transform()
        self._transform_changed = True

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def offset(self) -> Vec2:
        return self._offset

    def move_view(self, v: VecLike) -> None:
        """Shift the camera by a screen-space vector."""
        self._offset = self._offset + _as_vec(v) / self._scale
        self._transform_changed = True

    def zoom(self, factor: float) -> None:
        self._scale *= factor
        self._transform_changed = True

    def set_view_position(self, position: VecLike) -> None:
        self._offset = _as_vec(position)
        self._transform_changed = True

    def set_zoom(self, zoom: float) -> None:
        self._scale = zoom
        self._transform_changed = True

    def viewport(self, margin: float = 0.0) -> Tuple[Vec2, Vec2]:
        """The visible world rectangle as (top-left corner, size)."""
        size = self.center * (2.0 / self._scale) + Vec2(2.0 * margin, 2.0 * margin)
        return self._offset - size * 0.5, size

    def current_transform(self) -> Transform:
        """World-to-screen transform, rebuilt only after the view changed."""
        if self._transform_changed:
            self._transform_changed = False
            self._transform = (
                Transform().translate(self.center).scale(Vec2(self._scale, self._scale)).translate(-self._offset)
            )
        return copy.copy(self._transform)

    def draw(self, drawable: Any, states: Optional[RenderStates] = None) -> None:
        """Draw on the target with the layer transform applied first."""
        states = states or RenderStates()
        combined = self.current_transform() * states.transform
        self.target.draw(drawable, replace(states, transform=combined))


class RenderContext:
    """Holds the layers and routes draw calls to them or to the window."""

    def __init__(
        self,
        window: RenderTarget,
        size: VecLike,
        window_size: Optional[VecLike] = None,
        mouse_position: Optional[VecLike] = None,
    ) -> None:
        self.window = window
        self.size = _as_vec(size)
        self.window_size = _as_vec(window_size if window_size is not None else getattr(window, "size", size))
        self.mouse_position = _as_vec(
            mouse_position if mouse_position is not None else getattr(window, "mouse_position", Vec2())
        )
        self.scale_factor = Vec2(self.window_size.x / self.size.x, self.window_size.y / self.size.y)
        self._layers: List[Layer] = []
        self.world_layer_id = 0
        self.hud_layer_id = 0

    def register_layer(self) -> int:
        """Create a layer and return its identifier."""
        self._layers.append(Layer(self.size, self.window))
        return len(self._layers) - 1

    def draw(self, drawable: Any, states: Optional[RenderStates] = None, layer: Optional[int] = None) -> None:
        """Draw on the given layer, or straight on the window if none is given."""
        if layer is None:
            self.window.draw(drawable, states or RenderStates())
        else:
            self.layer(layer).draw(drawable, states)

    def create_default_layers(self, handler: Any = None) -> None:
        """Create the world layer and the HUD layer."""
        self.world_layer_id = self.register_layer()
        self.hud_layer_id = self.register_layer()

    def layer(self, layer_id: int) -> Layer:
        if not 0 <= layer_id < len(self._layers):
            raise IndexError(f"no layer with id {layer_id}")
        return self._layers[layer_id]

    def world_layer(self) -> Layer:
        return self.layer(self.world_layer_id)

    def hud_layer(self) -> Layer:
        return self.layer(self.hud_layer_id)

    def clear(self, color: Color = Color(0, 0, 0)) -> None:
        self.window.clear(color)

    def render_layers(self) -> None:
        self.window.display()

    @property
    def render_size(self) -> Vec2:
        return self.size

    def mouse_world_position(self) -> Vec2:
        """The mouse position converted to world coordinates of the world layer."""
        world = self.world_layer()
        return (self.mouse_position - self.window_size * 0.5) / world.scale + world.offset