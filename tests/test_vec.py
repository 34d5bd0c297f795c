import pytest

from pyrosim.vec import Color, Vec2, Vec4, set_alpha, to_color, to_vec4


def test_vec2_add_sub_round_trip():
    a = Vec2(3, -7)
    b = Vec2(10, 4)
    assert (a + b) - b == a


def test_vec2_scalar_multiplication_matches_addition():
    a = Vec2(1.5, -2.0)
    assert a * 2 == a + a
    assert 2 * a == a * 2


def test_vec2_division_undoes_multiplication():
    a = Vec2(5.0, -3.0)
    assert (a * 4) / 4 == a


def test_vec2_negation_cancels():
    a = Vec2(2, 9)
    assert -a + a == Vec2()


def test_vec2_unpacks_to_components():
    x, y = Vec2(1, 2)
    assert (x, y) == (1, 2)


def test_vec2_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1.0, 1.0) / 0


def test_vec2_rejects_non_vector_addition():
    with pytest.raises(TypeError):
        Vec2(1, 1) + 3


def test_vec4_add_sub_round_trip_and_scale():
    a = Vec4(1, 2, 3, 4)
    b = Vec4(-1, 0, 8, 2)
    assert (a + b) - b == a
    assert a * 2 == a + a
    assert -a + a == Vec4()


def test_color_default_alpha_is_opaque():
    assert Color(10, 20, 30).a == 255


@pytest.mark.parametrize("channels", [(-1, 0, 0), (0, 256, 0), (0, 0, 1.5)])
def test_color_rejects_out_of_range_channels(channels):
    with pytest.raises(ValueError):
        Color(*channels)


def test_color_vec4_round_trip():
    color = Color(12, 200, 0, 77)
    assert to_color(to_vec4(color)) == color
    assert tuple(to_vec4(color)) == (12.0, 200.0, 0.0, 77.0)


def test_to_color_clamps_components():
    color = to_color(Vec4(-5.0, 300.0, 12.7, 255.0))
    assert color == Color(0, 255, 12, 255)


def test_set_alpha_keeps_rgb():
    color = Color(1, 2, 3, 4)
    result = set_alpha(color, 10)
    assert result.a == 10
    assert (result.r, result.g, result.b) == (color.r, color.g, color.b)
    assert color.a == 4