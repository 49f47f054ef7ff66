"""Triangle mesh, defaulting to a unit box."""

from __future__ import annotations

from softraster.transform import Transform
from softraster.vector import Triangle, Vector2D, Vector3D

_BOX_VERTICES = [
    Vector3D(-1, 1, -1),
    Vector3D(1, 1, -1),
    Vector3D(1, -1, -1),
    Vector3D(-1, -1, -1),
    Vector3D(1, 1, 1),
    Vector3D(1, -1, 1),
    Vector3D(-1, 1, 1),
    Vector3D(-1, -1, 1),
]

# Vertex indices of each triangle, in clockwise order.
_BOX_TRIANGLES = [
    Triangle(3, 0, 1),
    Triangle(3, 1, 2),
    Triangle(2, 1, 4),
    Triangle(2, 4, 5),
    Triangle(7, 6, 0),
    Triangle(7, 0, 3),
    Triangle(0, 6, 4),
    Triangle(0, 4, 1),
    Triangle(7, 3, 2),
    Triangle(7, 2, 5),
    Triangle(2, 1, 6),
    Triangle(2, 6, 7),
]


class Mesh(Transform):
    """Vertices, triangles and their latest screen projections."""

    def __init__(self) -> None:
        super().__init__()
        self.vertices: list[Vector3D] = list(_BOX_VERTICES)
        self.indices: list[Triangle] = list(_BOX_TRIANGLES)
        self.projected_points: list[Vector2D] = []