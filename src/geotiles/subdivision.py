"""Subdivider: split icosahedron faces into triangular grids.

Each face is split into ``divisions ** 2`` triangles.  The two edges
leaving corner 0 are cut into ``divisions + 1``-point chains; row *i* is
interpolated between the chains' *i*-th points, and consecutive rows are
stitched with alternating "down" and "up" triangles::

            p0               row 0
           /  \\
          a0--a1             row 1   (1 down)
         / \\  / \\
        b0--b1--b2           row 2   (2 down + 1 up)

Every point goes through a shared :class:`PointPool`, so a vertex on an
edge shared by two faces is one instance regardless of which face created
it.  Face ids come from one :class:`FaceIdCounter` for the whole build.

The public depth is recursive: ``frequency_for_depth(d) == 2 ** d``
divisions per edge, the same grid as *d* rounds of midpoint subdivision.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List

from .models import Face, Point, PointKey


class PointPool:
    """Insertion-ordered deduplication pool keyed by :attr:`Point.key`."""

    def __init__(self, points: Iterable[Point] = ()) -> None:
        self._points: Dict[PointKey, Point] = {}
        for point in points:
            self.get_or_insert(point)

    def get_or_insert(self, point: Point) -> Point:
        """Return the pooled instance equal to *point*, adding it if new."""
        existing = self._points.get(point.key)
        if existing is not None:
            return existing
        self._points[point.key] = point
        return point

    def __contains__(self, point: object) -> bool:
        return isinstance(point, Point) and point.key in self._points

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points.values())


class FaceIdCounter:
    """Monotonically increasing face id source."""

    def __init__(self, start: int = 0) -> None:
        self._next = start

    @property
    def value(self) -> int:
        """The id the next call to :meth:`next_id` will return."""
        return self._next

    def next_id(self) -> int:
        fid = self._next
        self._next += 1
        return fid


def frequency_for_depth(depth: int) -> int:
    """Edge divisions for a recursive subdivision *depth*."""
    if depth < 0:
        raise ValueError("depth must be >= 0")
    return 2 ** depth


def subdivide_edge(p1: Point, p2: Point, count: int, pool: PointPool) -> List[Point]:
    """Pooled points splitting *p1* → *p2* into *count* segments."""
    return [pool.get_or_insert(p) for p in p1.subdivide(p2, count)]


def subdivide_face(
    face: Face,
    divisions: int,
    pool: PointPool,
    counter: FaceIdCounter,
) -> List[Face]:
    """Split *face* into a grid of ``divisions ** 2`` triangles.

    ``divisions == 0`` returns the face unchanged (keeping its id).
    """
    if divisions < 0:
        raise ValueError("divisions must be >= 0")
    if divisions == 0:
        return [face]

    p0, p1, p2 = face.points
    left = subdivide_edge(p0, p1, divisions, pool)
    right = subdivide_edge(p0, p2, divisions, pool)

    new_faces: List[Face] = []
    prev_row = [pool.get_or_insert(p0)]
    for i in range(1, divisions + 1):
        row = subdivide_edge(left[i], right[i], i, pool)
        for j in range(i):
            # "Down" triangle: apex in the previous row
            new_faces.append(Face(counter.next_id(), (prev_row[j], row[j], row[j + 1])))
            # "Up" triangle filling the gap between two down triangles
            if j > 0:
                new_faces.append(Face(counter.next_id(), (prev_row[j - 1], prev_row[j], row[j])))
        prev_row = row

    return new_faces


def subdivide_faces(
    faces: Iterable[Face],
    divisions: int,
    pool: PointPool,
    counter: FaceIdCounter,
) -> List[Face]:
    """Subdivide every face in order, sharing *pool* and *counter*."""
    result: List[Face] = []
    for face in faces:
        result.extend(subdivide_face(face, divisions, pool, counter))
    return result
