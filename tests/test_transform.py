import math

import pytest

from softraster.transform import Transform
from softraster.vector import Vector3D


def _length(v):
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


POINT = Vector3D(1.5, -2.0, 0.75)
EXPECTED_POINT = pytest.approx((1.5, -2.0, 0.75), abs=1e-9)


def test_defaults():
    t = Transform()
    assert t.position == Vector3D(0, 0, 0)
    assert t.rotation == Vector3D(0, 0, 0)
    assert t.scale == Vector3D(1, 1, 1)


def test_defaults_are_not_shared():
    a, b = Transform(), Transform()
    a.rotation = Vector3D(180.0, -45.0, 0.0)
    assert b.rotation == Vector3D()


def test_set_scale_changes_scale_only():
    t = Transform()
    t.scale = Vector3D(2, 2, 2)
    assert t.scale == Vector3D(2, 2, 2)
    assert t.rotation == Vector3D()


@pytest.mark.parametrize("method", ["rotate_x", "rotate_y", "rotate_z"])
def test_zero_angle_is_identity(method):
    result = getattr(Transform(), method)(POINT, 0.0)
    assert tuple(result) == EXPECTED_POINT


@pytest.mark.parametrize("method", ["rotate_x", "rotate_y", "rotate_z"])
@pytest.mark.parametrize("angle", [0.3, 1.0, -2.5, math.pi])
def test_rotation_preserves_length(method, angle):
    rotated = getattr(Transform(), method)(POINT, angle)
    assert math.isclose(_length(rotated), _length(POINT))


@pytest.mark.parametrize("method", ["rotate_x", "rotate_y", "rotate_z"])
def test_rotation_then_inverse_round_trip(method):
    rotate = getattr(Transform(), method)
    result = rotate(rotate(POINT, 0.7), -0.7)
    assert tuple(result) == EXPECTED_POINT


@pytest.mark.parametrize("method", ["rotate_x", "rotate_y", "rotate_z"])
def test_full_turn_returns_to_start(method):
    result = getattr(Transform(), method)(POINT, 2 * math.pi)
    assert tuple(result) == EXPECTED_POINT


def test_each_rotation_keeps_its_axis_component():
    t = Transform()
    assert t.rotate_x(POINT, 1.2).x == POINT.x
    assert t.rotate_y(POINT, 1.2).y == POINT.y
    assert t.rotate_z(POINT, 1.2).z == POINT.z


def test_quarter_turn_about_x_maps_y_to_z():
    rotated = Transform().rotate_x(Vector3D(0, 1, 0), math.pi / 2)
    assert tuple(rotated) == pytest.approx((0.0, 0.0, 1.0), abs=1e-9)