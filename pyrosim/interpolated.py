"""Values that move smoothly towards a target over time."""

from __future__ import annotations

import time
from typing import Callable, Generic, Optional, TypeVar

from pyrosim.interpolation import InterpolationFunction, interpolation_value
from pyrosim.vec import Color, Vec4, to_color, to_vec4

T = TypeVar("T")

Clock = Callable[[], float]


class Interpolable:
    """Tracks an interpolation's start time, speed and easing curve."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock or time.monotonic
        self._start_time = 0.0
        self._speed = 1.0
        self._function = InterpolationFunction.EASE_IN_OUT_QUINT

    def is_done(self) -> bool:
        return self.time_ratio() >= 1.0

    def set_function(self, function: InterpolationFunction) -> None:
        self._function = function

    def set_speed(self, speed: float) -> None:
        self._speed = speed

    def time_ratio(self) -> float:
        """Elapsed time since the start, scaled by speed, never negative."""
        return max(0.0, (self.now() - self._start_time) * self._speed)

    def value_ratio(self) -> float:
        """The time ratio passed through the easing curve."""
        return interpolation_value(self.time_ratio(), self._function)

    def reset(self) -> None:
        """Restart the interpolation from now."""
        self._start_time = self.now()

    def set_done(self) -> None:
        """Move the start time back far enough that the interpolation is over."""
        self._start_time = self.now() - 2.0 / self._speed

    def now(self) -> float:
        return self._clock()


class InterpolatedData(Interpolable, Generic[T]):
    """A number or vector that eases from its current value to a target."""

    def __init__(
        self,
        value: T = 0.0,
        function: InterpolationFunction = InterpolationFunction.EASE_IN_OUT_QUINT,
        speed: float = 1.0,
        clock: Optional[Clock] = None,
    ) -> None:
        super().__init__(clock)
        self._start_value: T = value
        self._target_value: T = value
        self._delta: T = value - value
        self.set_value_direct(value)
        self.set_function(function)
        self.set_speed(speed)

    def set_value(self, value: T) -> None:
        """Start moving towards a new target from the current value."""
        self._start_value = self.current_value()
        self._target_value = value
        self._delta = self._target_value - self._start_value
        self.reset()

    def set_value_direct(self, value: T) -> None:
        """Jump to value at once."""
        self._start_value = value
        self._target_value = value
        self._delta = value - value
        self.set_done()

    def offset_value(self, offset: T) -> None:
        self.set_value(self.current_value() + offset)

    def offset_value_direct(self, offset: T) -> None:
        self.set_value_direct(self.current_value() + offset)

    def current_value(self) -> T:
        if not self.is_done():
            return self._start_value + self._delta * self.value_ratio()
        return self._target_value

    @property
    def target(self) -> T:
        return self._target_value

    def __iadd__(self, offset: T) -> "InterpolatedData[T]":
        self.offset_value(offset)
        return self


class InterpolatedColor(Interpolable):
    """A color that eases channel by channel towards a target color."""

    def __init__(self, color: Optional[Color] = None, clock: Optional[Clock] = None) -> None:
        super().__init__(clock)
        self._start_value = Vec4()
        self._target_value = Vec4()
        self._delta = Vec4()
        if color is not None:
            self.set_value_direct(color)

    def set_value(self, color: Color) -> None:
        self._start_value = self._vec4_current_value()
        self._target_value = to_vec4(color)
        self._delta = self._target_value - self._start_value
        self.reset()

    def set_value_direct(self, color: Color) -> None:
        self._start_value = to_vec4(color)
        self._target_value = self._start_value
        self._delta = Vec4()
        self.set_done()

    def current_value(self) -> Color:
        return to_color(self._vec4_current_value())

    def _vec4_current_value(self) -> Vec4:
        ratio = self.value_ratio()
        if ratio < 1.0:
            return self._start_value + self._delta * ratio
        return self._target_value


class InterpolatedValue(Generic[T]):
    """A value blended between a start and a target, driven by a clock."""

    TIME_MARGIN = 0.0

    def __init__(self, value: T = 0.0, speed: Optional[float] = None, *, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock or time.monotonic
        self.interpolation_function = InterpolationFunction.EASE_IN_OUT_EXPONENTIAL
        self.start_time = 0.0
        self.start_value: T = value
        if speed is None:
            self._speed = 1.0
            self.target_value: T = value
            self.set_value_instant(value)
        else:
            self._speed = speed
            self.target_value = value - value

    def set_speed(self, speed: float) -> None:
        self._speed = speed

    def get(self) -> T:
        return self.current_value()

    def set_value_instant(self, value: T) -> None:
        self.start_value = value
        self.target_value = value
        self.update_start_time(2.0 / self._speed)

    def elapsed_time(self) -> float:
        return (self._clock() - self.start_time) * self._speed

    def current_t(self) -> float:
        return interpolation_value(self.elapsed_time(), self.interpolation_function)

    def current_value(self) -> T:
        t = self.current_t()
        if self.elapsed_time() < 1.0:
            return self.start_value * (1.0 - t) + self.target_value * t
        return self.target_value

    def is_done(self) -> bool:
        return (
            self.elapsed_time() > 1.0 + self.TIME_MARGIN
            or self.interpolation_function is InterpolationFunction.NONE
            or self.start_value == self.target_value
            or self.current_value() == self.target_value
        )

    def update_start_time(self, offset: float = 0.0) -> None:
        self.start_time = self._clock() - offset

    def set_value(
        self,
        value: T,
        speed: Optional[float] = None,
        function: Optional[InterpolationFunction] = None,
    ) -> None:
        """Start moving towards value; speed and function replace the settings if given."""
        if speed is None and function is None:
            self.start_value = self.current_value()
            self.target_value = value
            self.update_start_time()
            return
        if speed is None:
            speed = self._speed
        if function is None:
            function = self.interpolation_function
        if function is InterpolationFunction.NONE:
            self.start_value = value
        else:
            self.start_value = self.current_value()
        self.target_value = value
        self.update_start_time()
        self._speed = speed
        self.interpolation_function = function

    def set_interpolation(self, function: InterpolationFunction) -> None:
        self.interpolation_function = function

    def __iadd__(self, value: T) -> "InterpolatedValue[T]":
        self.set_value(self.target_value + value)
        return self