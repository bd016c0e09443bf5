"""Tiles of the Goldberg polyhedron and the builder that makes them.

A tile is the dual of one vertex star: its boundary points are derived
from the centroids of the faces around the vertex, in cyclic order, and
its neighbours are the tiles centred on the other vertices of those
faces.  Neighbours are first recorded by identity (centre key) and only
turned into indices once every tile exists, see
:func:`~geotiles.hexasphere.resolve_neighbors`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .approximation import RegularHexagonParams
from .config import clamp_hex_size
from .geometry import fan_normal, triangle_area
from .models import Face, LatLon, Point, PointKey
from .orientation import TileOrientation


@dataclass(frozen=True)
class Tile:
    center: Point
    boundary: Tuple[Point, ...]
    neighbor_ids: Tuple[PointKey, ...] = ()
    neighbors: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        boundary = tuple(self.boundary)
        if len(boundary) not in (5, 6):
            raise ValueError(
                f"Tile at {self.center} must have 5 or 6 boundary points, got {len(boundary)}"
            )
        object.__setattr__(self, "boundary", boundary)
        object.__setattr__(self, "neighbor_ids", tuple(self.neighbor_ids))
        object.__setattr__(self, "neighbors", tuple(self.neighbors))

    def __str__(self) -> str:
        return str(self.center)

    @property
    def id(self) -> PointKey:
        """Canonical identity: the centre point's key."""
        return self.center.key

    @property
    def face_type(self) -> str:
        return "hex" if self.is_hexagon() else "pent"

    def is_hexagon(self) -> bool:
        return len(self.boundary) == 6

    def is_pentagon(self) -> bool:
        return len(self.boundary) == 5

    # ── Coordinates ─────────────────────────────────────────────────

    def lat_lon(self, radius: float) -> LatLon:
        return self.center.to_lat_lon(radius)

    def boundary_lat_lon(self, radius: float, index: int) -> Optional[LatLon]:
        """Lat/lon of boundary point *index*, or *None* if out of range."""
        if not 0 <= index < len(self.boundary):
            return None
        return self.boundary[index].to_lat_lon(radius)

    def scaled_boundary(self, scale: float) -> List[Point]:
        """Boundary with each point moved *scale* of the way to the centre.

        *scale* is clamped to [0, 1]; 0 returns the boundary unchanged and
        1 collapses every point onto the centre, so ``0.1`` leaves a 10%
        gap between neighbouring tiles.
        """
        scale = max(0.0, min(1.0, scale))
        return [self.center.segment(point, 1.0 - scale) for point in self.boundary]

    # ── Measurements ────────────────────────────────────────────────

    def average_radius(self) -> float:
        """Mean centre-to-boundary distance."""
        total = sum(self.center.distance_to(p) for p in self.boundary)
        return total / len(self.boundary)

    def average_edge_length(self) -> float:
        n = len(self.boundary)
        total = sum(self.boundary[i].distance_to(self.boundary[(i + 1) % n]) for i in range(n))
        return total / n

    def area(self) -> float:
        """Sum of the triangles fanned from the centre to each boundary edge."""
        n = len(self.boundary)
        return sum(
            triangle_area(self.center, self.boundary[i], self.boundary[(i + 1) % n])
            for i in range(n)
        )

    # ── Orientation / approximation ─────────────────────────────────

    def orientation(self) -> TileOrientation:
        """Local frame built from the centre and the first boundary point."""
        return TileOrientation.from_center_and_vertex(self.center, self.boundary[0])

    def regular_hexagon_params(self) -> Optional[RegularHexagonParams]:
        """Regular-hexagon stand-in for this tile; *None* for pentagons."""
        if not self.is_hexagon():
            return None
        return RegularHexagonParams(
            center=self.center,
            radius=self.average_radius(),
            orientation=self.orientation(),
        )


# ═══════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════

def fix_boundary_orientation(center: Point, boundary: Sequence[Point]) -> Tuple[Point, ...]:
    """Return *boundary*, reversed if it winds inward.

    Winding is judged by the fan normal of the whole boundary against
    the outward direction of *center*.  Boundary points are rounded to
    the point precision, so on small tiles the normal of any single
    triple can tilt across an axis the centre barely touches.
    """
    boundary = tuple(boundary)
    if len(boundary) < 3:
        return boundary
    if fan_normal(center, boundary).dot(center.as_vector()) < 0.0:
        return tuple(reversed(boundary))
    return boundary


def build_tile(center: Point, faces: Sequence[Face], hex_size: float = 1.0) -> Tile:
    """Build the tile dual to *center* from its cyclically sorted *faces*.

    Each face contributes one boundary point *hex_size* of the way from
    *center* to the face centroid (*hex_size* clamped to [0.01, 1]), and
    its two other vertices as neighbour identities.
    """
    hex_size = clamp_hex_size(hex_size)
    boundary: List[Point] = []
    neighbor_ids: List[PointKey] = []
    for face in faces:
        boundary.append(center.segment(face.centroid, hex_size))
        neighbor_ids.extend(p.key for p in face.other_points(center))

    return Tile(
        center=center,
        boundary=fix_boundary_orientation(center, boundary),
        neighbor_ids=tuple(dict.fromkeys(neighbor_ids)),
    )
