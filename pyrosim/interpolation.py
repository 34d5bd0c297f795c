"""Easing functions used to interpolate values over time."""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Callable, Dict, TypeVar

T = TypeVar("T")


class InterpolationFunction(Enum):
    """The easing curve applied to a normalized time."""

    NONE = auto()
    LINEAR = auto()
    EASE_IN_OUT_EXPONENTIAL = auto()
    EASE_IN_OUT_CIRC = auto()
    EASE_IN_OUT_QUINT = auto()
    EASE_OUT_BACK = auto()
    EASE_IN_BACK = auto()
    SIGMOID = auto()


_BACK_C1 = 1.70158
_BACK_C3 = _BACK_C1 + 1.0


def flip(x: float) -> float:
    return 1.0 - x


def dumb_pow(x: float, p: int) -> float:
    """Raise x to a non-negative integer power."""
    if p < 0:
        raise ValueError(f"power must be non-negative, got {p}")
    return float(x) ** int(p)


def clamp_time(t: float) -> float:
    """Clamp t to the range 0..1."""
    return min(1.0, max(t, 0.0))


def mix(a: T, b: T, ratio: float) -> T:
    """Linear blend between a and b."""
    return (1.0 - ratio) * a + ratio * b


def smooth_stop(t: float, power: int) -> float:
    return flip(dumb_pow(flip(clamp_time(t)), power))


def smooth_start(t: float, power: int) -> float:
    return dumb_pow(clamp_time(t), power)


def smooth_step(t: float, power: int) -> float:
    return mix(smooth_start(t, power), smooth_stop(t, power), t)


def smooth_stop_f(t: float, power: float) -> float:
    """Smooth stop with a fractional power, blending the two nearest integer powers."""
    t_ = clamp_time(t)
    base_power = int(power)
    return mix(
        flip(dumb_pow(flip(t_), base_power)),
        flip(dumb_pow(flip(t_), base_power + 1)),
        power - base_power,
    )


def smooth_start_f(t: float, power: float) -> float:
    """Smooth start with a fractional power, blending the two nearest integer powers."""
    t_ = clamp_time(t)
    base_power = int(power)
    return mix(dumb_pow(t_, base_power), dumb_pow(t_, base_power + 1), power - base_power)


def smooth_step_f(t: float, power: float) -> float:
    t_ = clamp_time(t)
    return mix(smooth_start_f(t_, power), smooth_stop_f(t_, power), t_)


def sigmoid(t: float, speed: float = 1.0) -> float:
    s = 20.0 * speed
    try:
        return 1.0 / (1.0 + math.exp(-(t - 0.5) * s))
    except OverflowError:
        return 0.0


def linear(t: float, speed: float = 1.0) -> float:
    return speed * t


def ease_in_out(t: float) -> float:
    """Exponential ease in and out."""
    if t < 0.5:
        return 2.0 ** (20.0 * t - 10.0) * 0.5
    return (2.0 - 2.0 ** (-20.0 * t + 10.0)) * 0.5


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0.0 else math.nan


def ease_in_out_circ(t: float) -> float:
    if t < 0.5:
        return (1.0 - _sqrt(1.0 - (2.0 * t) ** 2)) * 0.5
    return (_sqrt(1.0 - (-2.0 * t + 2.0) ** 2) + 1.0) * 0.5


def ease_out_back(t: float) -> float:
    return 1.0 + _BACK_C3 * dumb_pow(t - 1.0, 3) + _BACK_C1 * dumb_pow(t - 1.0, 2)


def ease_in_out_quint(t: float) -> float:
    if t < 0.5:
        return 16.0 * dumb_pow(t, 5)
    return 1.0 - dumb_pow(-2.0 * t + 2.0, 5) * 0.5


def ease_in_back(t: float) -> float:
    return _BACK_C3 * t * t * t - _BACK_C1 * t * t


_FUNCTIONS: Dict[InterpolationFunction, Callable[[float], float]] = {
    InterpolationFunction.NONE: lambda t: 1.0,
    InterpolationFunction.LINEAR: lambda t: t,
    InterpolationFunction.EASE_IN_OUT_EXPONENTIAL: ease_in_out,
    InterpolationFunction.EASE_IN_OUT_CIRC: ease_in_out_circ,
    InterpolationFunction.EASE_IN_OUT_QUINT: ease_in_out_quint,
    InterpolationFunction.EASE_OUT_BACK: ease_out_back,
    InterpolationFunction.EASE_IN_BACK: ease_in_back,
    InterpolationFunction.SIGMOID: sigmoid,
}


def interpolation_value(t: float, function: InterpolationFunction) -> float:
    """Apply the easing curve selected by function to t."""
    curve = _FUNCTIONS.get(function)
    if curve is None:
        return t
    return curve(t)