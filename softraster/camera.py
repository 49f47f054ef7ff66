"""Pinhole camera doing a perspective projection."""

from __future__ import annotations

from dataclasses import dataclass, field

from softraster.vector import Vector2D, Vector3D


@dataclass
class Camera:
    """A camera with a field-of-view scale factor and a position."""

    fov: float = 500.0
    position: Vector3D = field(default_factory=lambda: Vector3D(0.0, -0.25, -50.0))

    def project(self, point: Vector3D) -> Vector2D:
        """Project a camera-space point onto the screen plane.

        Raises ZeroDivisionError for a point with ``z == 0``.
        """
        return Vector2D(self.fov * point.x / point.z, self.fov * point.y / point.z)