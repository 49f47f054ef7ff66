from softraster.cube import Cube
from softraster.vector import Vector2D, Vector3D


def test_point_count_is_nine_cubed():
    assert len(Cube().points) == 9 * 9 * 9


def test_first_and_last_points_are_corners():
    points = Cube().points
    assert points[0] == Vector3D(-1, -1, -1)
    assert points[-1] == Vector3D(1, 1, 1)


def test_z_varies_fastest():
    points = Cube().points
    assert points[1] == Vector3D(-1, -1, -0.75)
    assert points[9].y == -0.75 and points[9].z == -1


def test_points_are_unique():
    points = Cube().points
    assert len(set(points)) == len(points)


def test_points_lie_on_quarter_grid_within_bounds():
    for p in Cube().points:
        for c in p:
            assert -1.0 <= c <= 1.0
            assert (c * 4) == int(c * 4)


def test_projected_points_match_point_count():
    cube = Cube()
    assert len(cube.projected_points) == len(cube.points)
    assert all(p == Vector2D() for p in cube.projected_points)


def test_cube_has_default_transform():
    cube = Cube()
    assert cube.position == Vector3D()
    assert cube.scale == Vector3D(1, 1, 1)