import pytest

from softraster.vector import Triangle, Vector2D, Vector3D


def test_vector3d_defaults_to_origin():
    assert tuple(Vector3D()) == (0.0, 0.0, 0.0)


def test_vector2d_defaults_to_origin():
    assert tuple(Vector2D()) == (0.0, 0.0)


def test_vector3d_unpacks_in_order():
    x, y, z = Vector3D(1.5, -2.0, 3.25)
    assert (x, y, z) == (1.5, -2.0, 3.25)


def test_vector3d_add_then_sub_round_trip():
    a = Vector3D(1.0, 2.0, 3.0)
    b = Vector3D(-4.5, 0.25, 7.0)
    assert (a + b) - b == a


def test_vector2d_add_then_sub_round_trip():
    a = Vector2D(3.0, -1.0)
    b = Vector2D(0.5, 8.0)
    assert (a - b) + b == a


def test_vector_sub_self_is_zero():
    v = Vector3D(2.0, -7.0, 9.5)
    assert v - v == Vector3D()


def test_vectors_are_immutable():
    v = Vector3D(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 5.0  # type: ignore[misc]
    assert tuple(v) == (1.0, 2.0, 3.0)


def test_vectors_are_hashable_and_equal_by_value():
    assert {Vector3D(1, 2, 3), Vector3D(1, 2, 3)} == {Vector3D(1, 2, 3)}


def test_triangle_iterates_indices():
    assert list(Triangle(3, 0, 1)) == [3, 0, 1]