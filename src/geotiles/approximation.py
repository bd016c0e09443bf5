"""Regular-hexagon approximation of (slightly irregular) hexagonal tiles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from .models import Point
from .orientation import TileOrientation


@dataclass(frozen=True)
class RegularHexagonParams:
    """An idealised hexagon standing in for one tile.

    *radius* is the tile's average centre-to-vertex distance; the
    hexagon lies in the orientation's right/forward plane.
    """

    center: Point
    radius: float
    orientation: TileOrientation

    def generate_vertices(self) -> List[Point]:
        """The six vertices, starting on the *right* axis, 60° apart."""
        right = self.orientation.right
        forward = self.orientation.forward
        vertices: List[Point] = []
        for i in range(6):
            angle = i * math.pi / 3.0
            local_x = self.radius * math.cos(angle)
            local_y = self.radius * math.sin(angle)
            vertices.append(Point(
                self.center.x + local_x * right.x + local_y * forward.x,
                self.center.y + local_x * right.y + local_y * forward.y,
                self.center.z + local_x * right.z + local_y * forward.z,
            ))
        return vertices
