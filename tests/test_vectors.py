import math

import pytest

from fzmeta.vectors import Vec2, Vec3, Vec4, lerp, normalize, remap, wrap


def test_lerp_endpoints():
    assert lerp(2.0, 8.0, 0.0) == 2.0
    assert lerp(2.0, 8.0, 1.0) == 8.0


@pytest.mark.parametrize("t", [0.0, 0.25, 0.5, 0.9])
def test_normalize_inverts_lerp(t):
    assert normalize(lerp(-3.0, 7.0, t), -3.0, 7.0) == pytest.approx(t)


def test_remap_endpoints():
    assert remap(10.0, 10.0, 20.0, -1.0, 1.0) == pytest.approx(-1.0)
    assert remap(20.0, 10.0, 20.0, -1.0, 1.0) == pytest.approx(1.0)


def test_remap_round_trip():
    forward = remap(13.0, 10.0, 20.0, 100.0, 300.0)
    assert remap(forward, 100.0, 300.0, 10.0, 20.0) == pytest.approx(13.0)


@pytest.mark.parametrize("value", [-7.5, -1.0, 0.3, 4.0, 11.2])
def test_wrap_stays_in_range_and_is_periodic(value):
    result = wrap(value, -1.0, 3.0)
    assert -1.0 <= result < 3.0
    assert wrap(value + 4.0, -1.0, 3.0) == pytest.approx(result)


def test_wrap_keeps_values_inside_range():
    assert wrap(2.5, -1.0, 3.0) == pytest.approx(2.5)


def test_vec2_add_sub_round_trip():
    a, b = Vec2(1.5, -2.0), Vec2(3.0, 4.25)
    assert (a + b) - b == a


def test_vec2_scale_multiplies_length():
    v = Vec2(3.0, -1.0)
    assert v.scale(3.0).length() == pytest.approx(3.0 * v.length())


def test_vec2_normalize():
    v = Vec2(2.0, 7.0)
    n = v.normalize()
    assert n.length() == pytest.approx(1.0)
    assert n.scale(v.length()).x == pytest.approx(v.x)
    assert Vec2(0.0, 0.0).normalize() == Vec2(0.0, 0.0)


def test_vec2_dot_with_self_is_length_squared():
    v = Vec2(-2.0, 5.0)
    assert v.dot(v) == pytest.approx(v.length() ** 2)


def test_vec2_distance_symmetric():
    a, b = Vec2(1.0, 2.0), Vec2(-4.0, 6.0)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(b) == pytest.approx((b - a).length())


def test_vec2_distance_signed_depends_on_side():
    a, b = Vec2(0.0, 0.0), Vec2(0.0, 2.0)
    one_side = a.distance_signed(b, Vec2(1.0, 1.0))
    other_side = a.distance_signed(b, Vec2(-1.0, 1.0))
    assert one_side == pytest.approx(-other_side)
    assert abs(one_side) == pytest.approx(a.distance(b))


def test_vec3_cross_of_axes():
    assert Vec3(1.0, 0.0, 0.0).cross(Vec3(0.0, 1.0, 0.0)) == Vec3(0.0, 0.0, 1.0)


def test_vec3_cross_is_perpendicular_and_anticommutative():
    a, b = Vec3(1.0, 2.0, 3.0), Vec3(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-12)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-12)
    assert b.cross(a) == c.scale(-1.0)


def test_vec3_mul_div_round_trip():
    a, b = Vec3(1.0, -2.0, 3.5), Vec3(2.0, 4.0, -0.5)
    result = (a * b) / b
    assert tuple(result) == pytest.approx(tuple(a))


def test_vec3_scale_xyz_matches_componentwise_mul():
    v = Vec3(1.0, 2.0, 3.0)
    assert v.scale_xyz(2.0, -1.0, 0.5) == v * Vec3(2.0, -1.0, 0.5)


def test_vec3_mul_rejects_scalar():
    with pytest.raises(TypeError):
        Vec3(1.0, 2.0, 3.0) * 2.0


def test_vec3_normalize():
    v = Vec3(2.0, -3.0, 6.0)
    assert v.normalize().length() == pytest.approx(1.0)
    zero = Vec3()
    assert zero.normalize() == zero


def test_vec3_rotate_preserves_length_and_inverts():
    v = Vec3(1.0, 2.0, -0.5)
    axis = Vec3(0.3, -1.0, 2.0)
    rotated = v.rotate_by_axis(axis, 0.7)
    assert rotated.length() == pytest.approx(v.length())
    back = rotated.rotate_by_axis(axis, -0.7)
    assert tuple(back) == pytest.approx(tuple(v))


def test_vec3_rotate_full_turn_is_identity():
    v = Vec3(4.0, -1.0, 2.0)
    result = v.rotate_by_axis(Vec3(1.0, 1.0, 0.0), 2.0 * math.pi)
    assert tuple(result) == pytest.approx(tuple(v))


def test_vec3_rotate_keeps_axis_component():
    axis = Vec3(0.0, 0.0, 3.0)
    v = Vec3(1.0, 1.0, 5.0)
    assert v.rotate_by_axis(axis, 1.2).z == pytest.approx(v.z)


def test_vec3_angle():
    assert Vec3(1.0, 0.0, 0.0).angle(Vec3(0.0, 1.0, 0.0)) == pytest.approx(math.pi / 2)
    a, b = Vec3(1.0, 2.0, 3.0), Vec3(-1.0, 0.5, 2.0)
    assert a.angle(b) == pytest.approx(b.angle(a))
    assert a.angle(a.scale(2.0)) == pytest.approx(0.0, abs=1e-12)


def test_vec3_lerp_endpoints():
    a, b = Vec3(1.0, 2.0, 3.0), Vec3(-4.0, 0.0, 9.0)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b


def test_vec3_distance_matches_difference_length():
    a, b = Vec3(1.0, 2.0, 3.0), Vec3(4.0, -2.0, 3.5)
    assert a.distance(b) == pytest.approx((a - b).length())
    assert a.dot(a) == pytest.approx(a.length() ** 2)


def test_vec3_vec4_round_trip():
    v = Vec3(1.0, -2.0, 3.0)
    extended = v.to_vec4()
    assert extended.to_vec3() == v
    assert extended == Vec4(v.x, v.y, v.z, 0.0)


def test_vec4_add_sub_mul_div():
    a, b = Vec4(1.0, 2.0, 3.0, 4.0), Vec4(0.5, -1.0, 2.0, 8.0)
    assert (a + b) - b == a
    assert tuple((a * b) / b) == pytest.approx(tuple(a))


def test_vec4_normalize():
    v = Vec4(1.0, -2.0, 2.0, 4.0)
    assert v.normalize().length() == pytest.approx(1.0)
    zero = Vec4()
    assert zero.normalize() == zero


def test_vec4_scale_and_dot():
    v = Vec4(1.0, -2.0, 2.0, 4.0)
    assert v.scale(2.0).length() == pytest.approx(2.0 * v.length())
    assert v.dot(v) == pytest.approx(v.length() ** 2)


def test_vec4_lerp_and_distance():
    a, b = Vec4(1.0, 2.0, 3.0, 4.0), Vec4(-1.0, 0.0, 5.0, 2.0)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b
    midpoint = a.lerp(b, 0.5)
    assert a.distance(midpoint) == pytest.approx(midpoint.distance(b))
    assert a.distance(b) == pytest.approx((b - a).length())


def test_vec4_sub_rejects_other_types():
    with pytest.raises(TypeError):
        Vec4(1.0, 2.0, 3.0, 4.0) - Vec3(1.0, 2.0, 3.0)