import pytest

from pyrosim.interpolated import InterpolatedColor, InterpolatedData, InterpolatedValue, Interpolable
from pyrosim.interpolation import InterpolationFunction
from pyrosim.vec import Color, Vec2


class FakeClock:
    def __init__(self, start=100.0):
        self.t = start

    def __call__(self):
        return self.t


@pytest.fixture
def clock():
    return FakeClock()


def test_interpolable_reset_and_set_done(clock):
    item = Interpolable(clock)
    item.reset()
    assert item.time_ratio() == 0.0
    assert not item.is_done()
    item.set_done()
    assert item.is_done()


def test_interpolable_time_ratio_never_negative(clock):
    item = Interpolable(clock)
    item.reset()
    clock.t -= 5.0
    assert item.time_ratio() == 0.0


def test_interpolable_speed_scales_time(clock):
    item = Interpolable(clock)
    item.set_speed(4.0)
    item.reset()
    clock.t += 0.25
    assert item.time_ratio() == pytest.approx(4.0 * 0.25)
    assert item.is_done()


def test_interpolable_value_ratio_uses_function(clock):
    item = Interpolable(clock)
    item.set_function(InterpolationFunction.NONE)
    item.reset()
    assert item.value_ratio() == 1.0


def test_data_starts_at_initial_value(clock):
    data = InterpolatedData(10.0, clock=clock)
    assert data.current_value() == 10.0
    assert data.is_done()


def test_data_moves_to_target(clock):
    data = InterpolatedData(10.0, clock=clock)
    data.set_value(20.0)
    assert data.current_value() == 10.0
    assert not data.is_done()
    clock.t += 0.5
    assert data.current_value() == pytest.approx((10.0 + 20.0) / 2)
    clock.t += 0.5
    assert data.current_value() == 20.0
    assert data.is_done()


def test_data_values_stay_between_start_and_target(clock):
    data = InterpolatedData(0.0, clock=clock)
    data.set_value(8.0)
    previous = data.current_value()
    for _ in range(10):
        clock.t += 0.1
        value = data.current_value()
        assert 0.0 <= value <= 8.0
        assert value >= previous
        previous = value


def test_data_offset_and_direct(clock):
    data = InterpolatedData(3.0, clock=clock)
    data.offset_value_direct(2.0)
    assert data.current_value() == 3.0 + 2.0
    data += 1.0
    assert data.target == 3.0 + 2.0 + 1.0
    clock.t += 1.0
    assert data.current_value() == data.target


def test_data_speed_shortens_transition(clock):
    data = InterpolatedData(1.0, speed=2.0, clock=clock)
    data.set_value(5.0)
    clock.t += 0.5
    assert data.is_done()
    assert data.current_value() == 5.0


def test_data_with_vectors(clock):
    data = InterpolatedData(Vec2(0.0, 0.0), clock=clock)
    data.set_value(Vec2(2.0, 4.0))
    clock.t += 1.0
    assert data.current_value() == Vec2(2.0, 4.0)


def test_color_transition(clock):
    color = InterpolatedColor(Color(0, 0, 0), clock=clock)
    assert color.current_value() == Color(0, 0, 0)
    color.set_value(Color(255, 0, 0))
    assert color.current_value() == Color(0, 0, 0)
    clock.t += 1.0
    assert color.current_value() == Color(255, 0, 0)


def test_color_channels_are_between_endpoints(clock):
    color = InterpolatedColor(Color(0, 0, 0, 0), clock=clock)
    color.set_value(Color(200, 100, 50, 255))
    clock.t += 0.3
    current = color.current_value()
    assert 0 <= current.r <= 200
    assert 0 <= current.g <= 100
    assert 0 <= current.b <= 50


def test_value_instant_then_transition(clock):
    value = InterpolatedValue(5.0, clock=clock)
    assert value.get() == 5.0
    value.set_value(9.0)
    assert value.get() == pytest.approx(5.0, abs=0.01)
    clock.t += 0.5
    assert value.get() == pytest.approx((5.0 + 9.0) / 2)
    clock.t += 0.5
    assert value.get() == 9.0
    assert value.is_done()


def test_value_with_speed_has_zero_target(clock):
    value = InterpolatedValue(4.0, 1.0, clock=clock)
    assert value.start_value == 4.0
    assert value.target_value == 0.0


def test_value_none_function_is_immediate(clock):
    value = InterpolatedValue(1.0, clock=clock)
    value.set_value(7.0, 1.0, InterpolationFunction.NONE)
    assert value.is_done()
    assert value.get() == 7.0
    assert value.start_value == 7.0


def test_value_set_interpolation_and_speed(clock):
    value = InterpolatedValue(0.0, clock=clock)
    value.set_interpolation(InterpolationFunction.LINEAR)
    value.set_speed(2.0)
    value.set_value(10.0)
    clock.t += 0.25
    assert value.elapsed_time() == pytest.approx(2.0 * 0.25)
    assert value.current_t() == pytest.approx(2.0 * 0.25)


def test_value_iadd_offsets_target(clock):
    value = InterpolatedValue(2.0, clock=clock)
    value += 3.0
    assert value.target_value == 2.0 + 3.0
    clock.t += 2.0
    assert value.get() == 2.0 + 3.0


def test_value_update_start_time_offset(clock):
    value = InterpolatedValue(0.0, clock=clock)
    value.update_start_time(1.5)
    assert value.start_time == clock.t - 1.5