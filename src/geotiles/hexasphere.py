"""Hexasphere builder: icosahedron to a fully linked Goldberg tile graph.

Pipeline::

    icosahedron → subdivide → project → resolve correspondence
        → group vertex stars → sort around centre → build tiles
        → resolve neighbours → Hexasphere

Functions
---------
- :func:`build_hexasphere`: main entry point
- :func:`build_hexasphere_from_config`: same, from a :class:`HexasphereConfig`
- :func:`resolve_neighbors`: second pass turning centre keys into indices
- :class:`Hexasphere`: immutable result with read-only consumers
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from . import export
from .algorithms import ring_tiles, tile_adjacency
from .approximation import RegularHexagonParams
from .config import HexasphereConfig, clamp_hex_size, validate_build_arguments
from .correspondence import CorrespondenceResolver
from .diagnostics import validate_hexasphere
from .icosahedron import icosahedron_faces
from .models import Point, PointKey
from .orientation import TileOrientation
from .projection import project_points
from .stars import group_vertex_stars, sort_faces_around_point
from .statistics import HexagonStats, calculate_hexagon_stats
from .subdivision import FaceIdCounter, PointPool, frequency_for_depth, subdivide_faces
from .thick_tile import ThickTile
from .tile import Tile, build_tile

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
# Hexasphere
# ═══════════════════════════════════════════════════════════════════

class Hexasphere:
    """An immutable Goldberg polyhedron of pentagonal and hexagonal tiles.

    Tiles are held in a tuple; ``tile.neighbors`` are indices into it.
    """

    def __init__(
        self,
        radius: float,
        tiles: Iterable[Tile],
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._radius = float(radius)
        self._tiles: Tuple[Tile, ...] = tuple(tiles)
        self._metadata: Dict[str, Any] = dict(metadata or {})
        self._index_by_key = index_tiles(self._tiles)

    def __repr__(self) -> str:
        return f"Hexasphere(radius={self._radius}, tiles={len(self._tiles)})"

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __getitem__(self, index: int) -> Tile:
        return self._tiles[index]

    # ── Properties ──────────────────────────────────────────────────

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        return self._tiles

    @property
    def metadata(self) -> Dict[str, Any]:
        """A copy of the build metadata."""
        return dict(self._metadata)

    @property
    def subdivisions(self) -> Optional[int]:
        return self._metadata.get("subdivisions")

    @property
    def frequency(self) -> Optional[int]:
        return self._metadata.get("frequency")

    @property
    def pentagons(self) -> List[Tile]:
        return [t for t in self._tiles if t.is_pentagon()]

    @property
    def hexagons(self) -> List[Tile]:
        return [t for t in self._tiles if t.is_hexagon()]

    def index_of(self, key: PointKey) -> Optional[int]:
        """Index of the tile centred on *key*, or *None*."""
        return self._index_by_key.get(key)

    # ── Analysis ────────────────────────────────────────────────────

    def validate(self) -> List[str]:
        return validate_hexasphere(self)

    def hexagon_stats(self) -> HexagonStats:
        return calculate_hexagon_stats(self)

    def uniform_hexagon_radius(self) -> float:
        """Average hexagon radius, a size for uniform replacement hexagons."""
        return self.hexagon_stats().average_hexagon_radius

    def adjacency(self) -> Dict[int, List[int]]:
        return tile_adjacency(self)

    def rings_around(self, index: int, max_depth: int) -> Dict[int, List[int]]:
        """Tile indices by neighbour-step distance from tile *index*."""
        return ring_tiles(self, index, max_depth)

    # ── Orientation / approximation ─────────────────────────────────

    def tile_orientations(self) -> List[TileOrientation]:
        return [t.orientation() for t in self._tiles]

    def hexagon_orientations(self) -> List[TileOrientation]:
        return [t.orientation() for t in self._tiles if t.is_hexagon()]

    def regular_hexagon_approximations(self) -> List[RegularHexagonParams]:
        return [p for p in (t.regular_hexagon_params() for t in self._tiles) if p is not None]

    # ── Derived shells ──────────────────────────────────────────────

    def create_inner_sphere(self, inner_radius: float) -> "Hexasphere":
        """Copy of this sphere scaled to *inner_radius*.

        Every centre and boundary point is scaled by
        ``inner_radius / radius``; tile order and neighbour indices are
        kept, neighbour identities follow the scaled centres.
        """
        if not inner_radius > 0:
            raise ValueError(f"inner_radius must be positive, got {inner_radius!r}")
        ratio = inner_radius / self._radius

        def _scale(p: Point) -> Point:
            return Point(p.x * ratio, p.y * ratio, p.z * ratio)

        centers = [_scale(t.center) for t in self._tiles]
        tiles = [
            Tile(
                center=centers[index],
                boundary=tuple(_scale(p) for p in tile.boundary),
                neighbor_ids=tuple(centers[n].key for n in tile.neighbors),
                neighbors=tile.neighbors,
            )
            for index, tile in enumerate(self._tiles)
        ]
        metadata = dict(self._metadata)
        metadata["radius"] = inner_radius
        return Hexasphere(inner_radius, tiles, metadata)

    def create_thick_tiles(self, thickness: float) -> List[ThickTile]:
        return [ThickTile.from_surface_tile(t, thickness) for t in self._tiles]

    # ── Export ──────────────────────────────────────────────────────

    def to_obj(self) -> str:
        return export.to_obj(self)

    def to_dict(self) -> Dict[str, Any]:
        return export.to_dict(self)

    def to_json(self, *, indent: Optional[int] = None) -> str:
        return export.to_json(self, indent=indent)


# ═══════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════

def index_tiles(tiles: Sequence[Tile]) -> Dict[PointKey, int]:
    """Map each tile's centre key to its position in *tiles*."""
    return {tile.id: index for index, tile in enumerate(tiles)}


def resolve_neighbors(tiles: Sequence[Tile]) -> List[Tile]:
    """Return *tiles* with ``neighbors`` filled from ``neighbor_ids``.

    Identities with no tile are dropped and logged.
    """
    index_by_key = index_tiles(tiles)
    resolved: List[Tile] = []
    for tile in tiles:
        neighbors: List[int] = []
        for key in tile.neighbor_ids:
            index = index_by_key.get(key)
            if index is None:
                logger.warning("Dropping unknown neighbour %s of tile %s", key, tile)
                continue
            neighbors.append(index)
        resolved.append(replace(tile, neighbors=tuple(neighbors)))
    return resolved


def build_hexasphere(
    radius: float,
    subdivisions: int,
    hex_size: float = 1.0,
) -> Hexasphere:
    """Build a :class:`Hexasphere`.

    Parameters
    ----------
    radius : float
        Sphere radius (> 0).
    subdivisions : int
        Recursive subdivision depth (≥ 0).  Tile count is
        ``10 * 4**subdivisions + 2``.
    hex_size : float
        Boundary shrink factor, clamped to ``[0.01, 1.0]``.  At ``1.0``
        neighbouring tiles share boundary points exactly.

    Returns
    -------
    Hexasphere

    Raises
    ------
    ValueError
        For a non-positive radius or a negative / non-integer depth.
    CorrespondenceError
        If a subdivided vertex cannot be matched to a projected one.
    """
    validate_build_arguments(radius, subdivisions)
    clamped = clamp_hex_size(hex_size)
    if clamped != hex_size:
        logger.warning("hex_size %s clamped to %s", hex_size, clamped)

    corners, seed_faces = icosahedron_faces()
    pool = PointPool(corners)
    counter = FaceIdCounter(len(seed_faces))
    frequency = frequency_for_depth(subdivisions)

    faces = subdivide_faces(seed_faces, frequency, pool, counter)
    logger.debug("Subdivided %d seed faces into %d faces, %d vertices",
                 len(seed_faces), len(faces), len(pool))

    resolver = CorrespondenceResolver(project_points(pool, radius))
    stars = group_vertex_stars(faces, resolver)
    logger.debug("Grouped %d vertex stars", len(stars))

    tiles = [
        build_tile(star.center, sort_faces_around_point(star.faces, star.center), clamped)
        for star in stars
    ]
    tiles = resolve_neighbors(tiles)

    pentagon_count = sum(1 for t in tiles if t.is_pentagon())
    metadata = {
        "generator": "hexasphere",
        "subdivisions": subdivisions,
        "frequency": frequency,
        "radius": radius,
        "hex_size": clamped,
        "tile_count": len(tiles),
        "pentagon_count": pentagon_count,
        "hexagon_count": len(tiles) - pentagon_count,
    }
    logger.info("Built hexasphere: radius=%s subdivisions=%d tiles=%d",
                radius, subdivisions, len(tiles))

    return Hexasphere(radius, tiles, metadata)


def build_hexasphere_from_config(config: HexasphereConfig) -> Hexasphere:
    return build_hexasphere(config.radius, config.subdivisions, config.hex_size)
