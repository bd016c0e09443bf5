"""Seed solid: the regular icosahedron the sphere is grown from.

The 12 corners sit on three mutually perpendicular golden rectangles
(``(±1, ±τ, 0)``, ``(0, ±1, ±τ)``, ``(±τ, 0, ±1)``) scaled by
:data:`~geotiles.config.SEED_SCALE`.  The 20 faces are wired from the
fixed table :data:`FACE_INDICES`.
"""

from __future__ import annotations

from typing import List, Tuple

from .config import GOLDEN_RATIO, SEED_SCALE
from .models import Face, Point

FACE_INDICES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 4),
    (1, 9, 4),
    (4, 9, 5),
    (5, 9, 3),
    (2, 3, 7),
    (3, 2, 5),
    (7, 10, 2),
    (0, 8, 10),
    (0, 4, 8),
    (8, 2, 10),
    (8, 4, 5),
    (8, 5, 2),
    (1, 0, 6),
    (11, 1, 6),
    (3, 9, 11),
    (6, 10, 7),
    (3, 11, 7),
    (11, 6, 7),
    (6, 0, 10),
    (9, 1, 11),
)


def icosahedron_corners(scale: float = SEED_SCALE) -> List[Point]:
    """The 12 icosahedron vertices at the given *scale*."""
    s = scale
    t = GOLDEN_RATIO * scale
    return [
        Point(s, t, 0.0),
        Point(-s, t, 0.0),
        Point(s, -t, 0.0),
        Point(-s, -t, 0.0),
        Point(0.0, s, t),
        Point(0.0, -s, t),
        Point(0.0, s, -t),
        Point(0.0, -s, -t),
        Point(t, 0.0, s),
        Point(-t, 0.0, s),
        Point(t, 0.0, -s),
        Point(-t, 0.0, -s),
    ]


def icosahedron_faces(scale: float = SEED_SCALE) -> Tuple[List[Point], List[Face]]:
    """Return ``(corners, faces)``; face ids are 0 … 19 in table order."""
    corners = icosahedron_corners(scale)
    faces = [
        Face(fid, (corners[i], corners[j], corners[k]))
        for fid, (i, j, k) in enumerate(FACE_INDICES)
    ]
    return corners, faces
