"""In-memory exports of a hexasphere for renderers and downstream tools.

Nothing here touches the filesystem: every function returns a string,
a dict or numpy arrays.

Functions
---------
- :func:`to_obj`: Wavefront OBJ text, one polygon per tile
- :func:`to_mesh_arrays`: shared vertex array plus per-tile polygons
- :func:`to_triangle_arrays`: centre-fan triangulation
- :func:`to_dict` / :func:`to_json`: deterministic summary payload
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

import numpy as np

from .models import Point, PointKey

if TYPE_CHECKING:
    from .hexasphere import Hexasphere

_EXPORT_VERSION = "1.0"


@dataclass(frozen=True)
class PolygonMesh:
    """Tile polygons over a deduplicated vertex array.

    Attributes
    ----------
    vertices : ndarray
        ``(V, 3)`` boundary vertex positions, each distinct point once.
    polygons : list of tuple of int
        Per tile, 0-based indices into *vertices* in boundary order.
    tile_ids : list of PointKey
        Per tile, the centre key identifying it.
    """

    vertices: np.ndarray
    polygons: List[Tuple[int, ...]]
    tile_ids: List[PointKey]


def _index_boundaries(sphere: "Hexasphere") -> Tuple[List[Point], List[Tuple[int, ...]]]:
    index: Dict[PointKey, int] = {}
    points: List[Point] = []
    polygons: List[Tuple[int, ...]] = []
    for tile in sphere.tiles:
        polygon: List[int] = []
        for point in tile.boundary:
            idx = index.get(point.key)
            if idx is None:
                idx = index[point.key] = len(points)
                points.append(point)
            polygon.append(idx)
        polygons.append(tuple(polygon))
    return points, polygons


def to_obj(sphere: "Hexasphere") -> str:
    """Wavefront OBJ text with shared boundary vertices (1-based faces)."""
    points, polygons = _index_boundaries(sphere)
    lines = ["# vertices"]
    lines.extend(f"v {p.x} {p.y} {p.z}" for p in points)
    lines.append("")
    lines.append("# faces")
    lines.extend("f " + " ".join(str(i + 1) for i in polygon) for polygon in polygons)
    return "\n".join(lines) + "\n"


def to_mesh_arrays(sphere: "Hexasphere") -> PolygonMesh:
    points, polygons = _index_boundaries(sphere)
    vertices = np.array([(p.x, p.y, p.z) for p in points], dtype=float).reshape(-1, 3)
    return PolygonMesh(
        vertices=vertices,
        polygons=polygons,
        tile_ids=[tile.id for tile in sphere.tiles],
    )


def to_triangle_arrays(sphere: "Hexasphere") -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Triangulate every tile as a fan around its centre.

    Returns
    -------
    vertices : ndarray
        ``(V, 3)`` positions: per tile its centre followed by its boundary.
    triangles : ndarray
        ``(T, 3)`` int indices, outward winding.
    tile_index : ndarray
        ``(T,)`` index of the tile each triangle belongs to.
    """
    vertices: List[Tuple[float, float, float]] = []
    triangles: List[Tuple[int, int, int]] = []
    tile_index: List[int] = []
    for ti, tile in enumerate(sphere.tiles):
        base = len(vertices)
        vertices.append((tile.center.x, tile.center.y, tile.center.z))
        vertices.extend((p.x, p.y, p.z) for p in tile.boundary)
        n = len(tile.boundary)
        for i in range(n):
            triangles.append((base, base + 1 + i, base + 1 + (i + 1) % n))
            tile_index.append(ti)

    return (
        np.array(vertices, dtype=float).reshape(-1, 3),
        np.array(triangles, dtype=np.int64).reshape(-1, 3),
        np.array(tile_index, dtype=np.int64),
    )


def to_dict(sphere: "Hexasphere") -> Dict[str, Any]:
    """JSON-serialisable payload: ``version``, ``metadata`` and ``tiles``."""
    tiles: List[Dict[str, Any]] = []
    for index, tile in enumerate(sphere.tiles):
        tiles.append({
            "index": index,
            "face_type": tile.face_type,
            "center": [tile.center.x, tile.center.y, tile.center.z],
            "boundary": [[p.x, p.y, p.z] for p in tile.boundary],
            "neighbors": list(tile.neighbors),
        })
    return {
        "version": _EXPORT_VERSION,
        "metadata": dict(sphere.metadata),
        "tiles": tiles,
    }


def to_json(sphere: "Hexasphere", *, indent: Optional[int] = None) -> str:
    return json.dumps(to_dict(sphere), indent=indent, sort_keys=True)
