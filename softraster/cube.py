"""A cube sampled as a regular grid of points."""

from __future__ import annotations

from softraster.transform import Transform
from softraster.vector import Vector2D, Vector3D

POINTS_PER_AXIS = 9
_STEP = 0.25


class Cube(Transform):
    """A 9x9x9 point cloud filling the cube from -1 to 1 on each axis."""

    def __init__(self) -> None:
        super().__init__()
        coords = [-1.0 + _STEP * i for i in range(POINTS_PER_AXIS)]
        self.points: list[Vector3D] = [
            Vector3D(x, y, z) for x in coords for y in coords for z in coords
        ]
        self.projected_points: list[Vector2D] = [Vector2D() for _ in self.points]