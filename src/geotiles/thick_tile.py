"""Thick tiles: surface tiles extruded inward into solid prisms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .geometry import radial_direction
from .models import Point, Vector3
from .tile import Tile


def _offset(point: Point, direction: Vector3, distance: float) -> Point:
    return Point(
        point.x - direction.x * distance,
        point.y - direction.y * distance,
        point.z - direction.z * distance,
    )


@dataclass(frozen=True)
class ThickTileVertices:
    """Triangle mesh of one thick tile: points plus flat index triples."""

    vertices: List[Point]
    indices: List[int]

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """``(V, 3)`` float vertex array and ``(T, 3)`` int triangle array."""
        verts = np.array([(p.x, p.y, p.z) for p in self.vertices], dtype=float)
        tris = np.array(self.indices, dtype=np.int64).reshape(-1, 3)
        return verts, tris


@dataclass(frozen=True)
class ThickTile:
    """A tile with an outer (surface) and inner face.

    The inner boundary is the outer boundary moved by *thickness* against
    the tile's radial normal, so every point of a tile is offset along
    the same direction.
    """

    center: Point
    outer_boundary: Tuple[Point, ...]
    inner_boundary: Tuple[Point, ...]
    thickness: float
    is_hexagon: bool

    @classmethod
    def from_surface_tile(cls, tile: Tile, thickness: float) -> "ThickTile":
        if thickness < 0:
            raise ValueError(f"thickness must be >= 0, got {thickness!r}")
        normal = radial_direction(tile.center)
        return cls(
            center=tile.center,
            outer_boundary=tile.boundary,
            inner_boundary=tuple(_offset(p, normal, thickness) for p in tile.boundary),
            thickness=thickness,
            is_hexagon=tile.is_hexagon(),
        )

    @property
    def normal(self) -> Vector3:
        return radial_direction(self.center)

    @property
    def inner_center(self) -> Point:
        return _offset(self.center, self.normal, self.thickness)

    def generate_all_vertices(self) -> ThickTileVertices:
        """Closed triangle mesh: outer cap, inner cap and side walls.

        Vertex layout is ``[outer centre, outer boundary..., inner centre,
        inner boundary...]``.  The outer cap fans from its centre in
        boundary order, the inner cap fans with reversed winding, and each
        boundary edge contributes two side triangles.
        """
        n = len(self.outer_boundary)
        vertices: List[Point] = [self.center, *self.outer_boundary]
        outer_start = 1
        inner_center_idx = len(vertices)
        vertices.append(self.inner_center)
        inner_start = len(vertices)
        vertices.extend(self.inner_boundary)

        indices: List[int] = []
        for i in range(n):
            j = (i + 1) % n
            indices.extend((0, outer_start + i, outer_start + j))
        for i in range(n):
            j = (i + 1) % n
            indices.extend((inner_center_idx, inner_start + j, inner_start + i))
        for i in range(n):
            j = (i + 1) % n
            outer_curr, outer_next = outer_start + i, outer_start + j
            inner_curr, inner_next = inner_start + i, inner_start + j
            indices.extend((outer_curr, inner_curr, outer_next))
            indices.extend((outer_next, inner_curr, inner_next))

        return ThickTileVertices(vertices=vertices, indices=indices)

    def generate_side_vertices(self) -> List[Point]:
        """Outer and inner boundary points interleaved, for quad strips."""
        vertices: List[Point] = []
        for outer, inner in zip(self.outer_boundary, self.inner_boundary):
            vertices.append(outer)
            vertices.append(inner)
        return vertices
