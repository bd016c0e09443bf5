"""Vertex stars: the faces around each projected vertex, in cyclic order.

A *vertex star* is the set of triangles that share one vertex of the
projected geodesic sphere.  Every star becomes one tile of the dual
Goldberg polyhedron: 5 faces around the 12 icosahedron corners,
6 everywhere else.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from .correspondence import CorrespondenceResolver
from .geometry import radial_direction
from .models import Face, Point, PointKey, Vector3


@dataclass
class VertexStar:
    center: Point
    faces: List[Face] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.faces)


def group_vertex_stars(
    faces: Iterable[Face],
    resolver: CorrespondenceResolver,
) -> List[VertexStar]:
    """Group subdivided *faces* by the projected vertices they touch.

    Each face is re-expressed in projected points (keeping its id) and
    appended to the star of each of its three vertices.  Stars come back
    in the order their centre vertex was first seen.
    """
    stars: Dict[PointKey, VertexStar] = {}
    for face in faces:
        projected = Face(face.id, tuple(resolver.resolve(p) for p in face.points))
        for point in projected.points:
            star = stars.get(point.key)
            if star is None:
                star = stars[point.key] = VertexStar(point)
            star.faces.append(projected)
    return list(stars.values())


def sort_faces_around_point(faces: Sequence[Face], center: Point) -> List[Face]:
    """Return *faces* ordered by angle around *center*.

    The local frame is: *up* along the centre's radial direction, *right*
    towards the first face's centroid (projected into the tangent plane),
    *forward* = up × right.  Faces are sorted by
    ``atan2(forward, right)`` of their centroid direction, which runs
    counter-clockwise when viewed from outside the sphere.  Ties fall back
    to the face id.
    """
    faces = list(faces)
    if len(faces) <= 2:
        return faces

    up = radial_direction(center)
    reference = Vector3.between(center, faces[0].centroid)
    right = (reference - up * reference.dot(up)).normalize()
    forward = up.cross(right)

    def _angle(face: Face) -> float:
        direction = Vector3.between(center, face.centroid).normalize()
        return math.atan2(direction.dot(forward), direction.dot(right))

    return sorted(faces, key=lambda f: (_angle(f), f.id))
