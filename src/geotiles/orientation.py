"""Local orientation frames for tiles."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .geometry import radial_direction
from .models import Point, Vector3


@dataclass(frozen=True)
class TileOrientation:
    """Orthonormal basis sitting on a tile.

    *up* is the outward radial direction through the tile centre, *right*
    points from the centre towards the first boundary point (in the
    tangent plane) and *forward* completes the frame.
    """

    right: Vector3
    up: Vector3
    forward: Vector3

    @classmethod
    def default(cls) -> "TileOrientation":
        """World-aligned frame: right = +X, up = +Z, forward = +Y."""
        return cls(
            right=Vector3(1.0, 0.0, 0.0),
            up=Vector3(0.0, 0.0, 1.0),
            forward=Vector3(0.0, 1.0, 0.0),
        )

    @classmethod
    def from_center_and_vertex(cls, center: Point, first_vertex: Point) -> "TileOrientation":
        up = radial_direction(center)
        right = Vector3.between(center, first_vertex).normalize()
        forward = right.cross(up).normalize()
        right = up.cross(forward).normalize()
        return cls(right=right, up=up, forward=forward)

    def to_rotation_matrix(self) -> np.ndarray:
        """3×3 matrix with columns *right*, *up*, *forward*."""
        return np.array(
            [self.right.as_tuple(), self.up.as_tuple(), self.forward.as_tuple()],
            dtype=float,
        ).T

    def to_transform_matrix(self, translation: Point) -> np.ndarray:
        """4×4 homogeneous transform: this rotation plus *translation*."""
        matrix = np.eye(4)
        matrix[:3, :3] = self.to_rotation_matrix()
        matrix[:3, 3] = (translation.x, translation.y, translation.z)
        return matrix
