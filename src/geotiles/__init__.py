"""geotiles: Goldberg polyhedron (hexasphere) tile generator.

Public API is organised into layers:

- **Core**: points, faces, tiles, the hexasphere and its builder
- **Pipeline**: icosahedron, subdivision, projection, vertex stars
- **Consumers**: statistics, export, orientation, thick tiles
- **Diagnostics**: graph queries and topology validation
"""

# ── Core ────────────────────────────────────────────────────────────
from .config import HexasphereConfig, COARSE, MEDIUM, FINE
from .errors import GeoTilesError, DegenerateProjectionError, CorrespondenceError
from .models import Point, Vector3, Face, LatLon, PointKey
from .tile import Tile, build_tile, fix_boundary_orientation
from .hexasphere import (
    Hexasphere,
    build_hexasphere,
    build_hexasphere_from_config,
    index_tiles,
    resolve_neighbors,
)
from .logging_config import setup_logging

# ── Pipeline ────────────────────────────────────────────────────────
from .icosahedron import icosahedron_corners, icosahedron_faces
from .subdivision import (
    PointPool,
    FaceIdCounter,
    frequency_for_depth,
    subdivide_face,
    subdivide_faces,
)
from .projection import project_points
from .correspondence import CorrespondenceResolver
from .stars import VertexStar, group_vertex_stars, sort_faces_around_point

# ── Consumers ───────────────────────────────────────────────────────
from .statistics import HexagonStats, calculate_hexagon_stats
from .export import PolygonMesh, to_obj, to_mesh_arrays, to_triangle_arrays, to_dict, to_json
from .orientation import TileOrientation
from .approximation import RegularHexagonParams
from .thick_tile import ThickTile, ThickTileVertices

# ── Diagnostics ─────────────────────────────────────────────────────
from .algorithms import tile_adjacency, ring_tiles
from .diagnostics import validate_hexasphere

__all__ = [
    # Core
    "HexasphereConfig",
    "COARSE",
    "MEDIUM",
    "FINE",
    "GeoTilesError",
    "DegenerateProjectionError",
    "CorrespondenceError",
    "Point",
    "Vector3",
    "Face",
    "LatLon",
    "PointKey",
    "Tile",
    "build_tile",
    "fix_boundary_orientation",
    "Hexasphere",
    "build_hexasphere",
    "build_hexasphere_from_config",
    "index_tiles",
    "resolve_neighbors",
    "setup_logging",
    # Pipeline
    "icosahedron_corners",
    "icosahedron_faces",
    "PointPool",
    "FaceIdCounter",
    "frequency_for_depth",
    "subdivide_face",
    "subdivide_faces",
    "project_points",
    "CorrespondenceResolver",
    "VertexStar",
    "group_vertex_stars",
    "sort_faces_around_point",
    # Consumers
    "HexagonStats",
    "calculate_hexagon_stats",
    "PolygonMesh",
    "to_obj",
    "to_mesh_arrays",
    "to_triangle_arrays",
    "to_dict",
    "to_json",
    "TileOrientation",
    "RegularHexagonParams",
    "ThickTile",
    "ThickTileVertices",
    # Diagnostics
    "tile_adjacency",
    "ring_tiles",
    "validate_hexasphere",
]
