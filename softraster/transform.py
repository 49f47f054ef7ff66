"""Position, rotation and scale of an object, and rotations about the axes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from softraster.vector import Vector3D


@dataclass
class Transform:
    """Placement of an object in the scene."""

    position: Vector3D = field(default_factory=Vector3D)
    rotation: Vector3D = field(default_factory=Vector3D)
    scale: Vector3D = field(default_factory=lambda: Vector3D(1.0, 1.0, 1.0))

    def rotate_x(self, vec: Vector3D, angle: float) -> Vector3D:
        """Rotate ``vec`` about the X axis by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        return Vector3D(vec.x, vec.y * c - vec.z * s, vec.y * s + vec.z * c)

    def rotate_y(self, vec: Vector3D, angle: float) -> Vector3D:
        """Rotate ``vec`` about the Y axis by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        return Vector3D(vec.x * c - vec.z * s, vec.y, vec.x * s + vec.z * c)

    def rotate_z(self, vec: Vector3D, angle: float) -> Vector3D:
        """Rotate ``vec`` about the Z axis by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        return Vector3D(vec.x * c - vec.y * s, vec.x * s + vec.y * c, vec.z)