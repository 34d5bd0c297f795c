import pytest

from pyrosim.interpolation import (
    InterpolationFunction,
    clamp_time,
    dumb_pow,
    ease_in_back,
    ease_in_out,
    ease_in_out_circ,
    ease_in_out_quint,
    ease_out_back,
    flip,
    interpolation_value,
    linear,
    mix,
    sigmoid,
    smooth_start,
    smooth_start_f,
    smooth_step,
    smooth_step_f,
    smooth_stop,
    smooth_stop_f,
)
from pyrosim.vec import Vec2

SAMPLES = [i / 20 for i in range(21)]


def test_flip_is_an_involution():
    for t in SAMPLES:
        assert flip(flip(t)) == pytest.approx(t)


def test_dumb_pow_matches_repeated_product():
    assert dumb_pow(2.0, 3) == 2.0 * 2.0 * 2.0
    assert dumb_pow(7.5, 0) == 1.0


def test_dumb_pow_rejects_negative_power():
    with pytest.raises(ValueError):
        dumb_pow(2.0, -1)


def test_clamp_time_bounds():
    assert clamp_time(-3.0) == 0.0
    assert clamp_time(4.0) == 1.0
    assert clamp_time(0.3) == 0.3


def test_mix_endpoints_for_floats_and_vectors():
    assert mix(2.0, 6.0, 0.0) == 2.0
    assert mix(2.0, 6.0, 1.0) == 6.0
    assert mix(Vec2(1.0, 2.0), Vec2(3.0, 4.0), 1.0) == Vec2(3.0, 4.0)


def test_smooth_start_clamps_time():
    assert smooth_start(2.0, 3) == smooth_start(1.0, 3)
    assert smooth_start(-2.0, 3) == smooth_start(0.0, 3)


@pytest.mark.parametrize("power", [1, 2, 3, 5])
def test_smooth_stop_mirrors_smooth_start(power):
    for t in SAMPLES:
        assert smooth_stop(t, power) == pytest.approx(flip(smooth_start(flip(t), power)))


@pytest.mark.parametrize("power", [1, 2, 4])
def test_fractional_variants_agree_on_integer_powers(power):
    for t in SAMPLES:
        assert smooth_start_f(t, float(power)) == pytest.approx(smooth_start(t, power))
        assert smooth_stop_f(t, float(power)) == pytest.approx(smooth_stop(t, power))
        assert smooth_step_f(t, float(power)) == pytest.approx(smooth_step(t, power))


def test_fractional_power_lies_between_neighbours():
    for t in SAMPLES:
        low = smooth_start(t, 2)
        high = smooth_start(t, 3)
        value = smooth_start_f(t, 2.5)
        assert min(low, high) - 1e-12 <= value <= max(low, high) + 1e-12


@pytest.mark.parametrize("curve", [ease_in_out, ease_in_out_circ, ease_in_out_quint, sigmoid])
def test_in_out_curves_are_point_symmetric(curve):
    for t in SAMPLES:
        assert curve(t) + curve(1.0 - t) == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize("curve", [ease_in_out, ease_in_out_circ, ease_in_out_quint, sigmoid])
def test_in_out_curves_are_monotonic(curve):
    values = [curve(t) for t in SAMPLES]
    assert values == sorted(values)


def test_sigmoid_midpoint():
    assert sigmoid(0.5) == 0.5


def test_sigmoid_saturates_without_overflow():
    assert sigmoid(-1e6) == 0.0


def test_back_curves_reach_their_end():
    assert ease_out_back(1.0) == pytest.approx(1.0)
    assert ease_out_back(0.0) == pytest.approx(0.0, abs=1e-9)
    assert ease_in_back(1.0) == pytest.approx(1.0)
    assert ease_in_back(0.0) == 0.0


def test_circ_beyond_range_is_nan_not_error():
    value = ease_in_out_circ(2.0)
    assert str(value) == "nan"


def test_linear_scales_by_speed():
    assert linear(0.25, 2.0) == 0.25 * 2.0


def test_none_always_returns_one():
    for t in SAMPLES:
        assert interpolation_value(t, InterpolationFunction.NONE) == 1.0


@pytest.mark.parametrize(
    "function, curve",
    [
        (InterpolationFunction.LINEAR, linear),
        (InterpolationFunction.EASE_IN_OUT_EXPONENTIAL, ease_in_out),
        (InterpolationFunction.EASE_IN_OUT_CIRC, ease_in_out_circ),
        (InterpolationFunction.EASE_IN_OUT_QUINT, ease_in_out_quint),
        (InterpolationFunction.EASE_OUT_BACK, ease_out_back),
        (InterpolationFunction.EASE_IN_BACK, ease_in_back),
        (InterpolationFunction.SIGMOID, sigmoid),
    ],
)
def test_interpolation_value_dispatches(function, curve):
    for t in SAMPLES:
        assert interpolation_value(t, function) == curve(t)