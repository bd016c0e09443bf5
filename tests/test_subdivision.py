"""Tests for face subdivision and the shared point pool."""

import pytest

from geotiles.icosahedron import icosahedron_faces
from geotiles.models import Face, Point
from geotiles.subdivision import (
    FaceIdCounter,
    PointPool,
    frequency_for_depth,
    subdivide_edge,
    subdivide_face,
    subdivide_faces,
)


def _triangle() -> Face:
    return Face(7, (Point(0.0, 0.0, 0.0), Point(8.0, 0.0, 0.0), Point(0.0, 8.0, 0.0)))


class TestFrequency:
    @pytest.mark.parametrize("depth, expected", [(0, 1), (1, 2), (2, 4), (3, 8), (5, 32)])
    def test_frequency_doubles(self, depth, expected):
        assert frequency_for_depth(depth) == expected

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            frequency_for_depth(-1)


class TestPointPool:
    def test_get_or_insert_returns_existing_instance(self):
        pool = PointPool()
        first = pool.get_or_insert(Point(1.0, 2.0, 3.0))
        again = pool.get_or_insert(Point(1.0001, 2.0, 3.0))
        assert again is first
        assert len(pool) == 1

    def test_insertion_order(self):
        points = [Point(float(i), 0.0, 0.0) for i in (3, 1, 2)]
        pool = PointPool(points + [Point(1.0, 0.0, 0.0)])
        assert list(pool) == points

    def test_contains(self):
        pool = PointPool([Point(1.0, 0.0, 0.0)])
        assert Point(1.0, 0.0, 0.0) in pool
        assert Point(2.0, 0.0, 0.0) not in pool
        assert "not a point" not in pool


class TestFaceIdCounter:
    def test_counts_up_from_start(self):
        counter = FaceIdCounter(20)
        assert counter.value == 20
        assert [counter.next_id() for _ in range(3)] == [20, 21, 22]
        assert counter.value == 23


class TestSubdivideFace:
    def test_zero_divisions_returns_face(self):
        face = _triangle()
        assert subdivide_face(face, 0, PointPool(), FaceIdCounter()) == [face]

    def test_negative_divisions_raise(self):
        with pytest.raises(ValueError):
            subdivide_face(_triangle(), -1, PointPool(), FaceIdCounter())

    @pytest.mark.parametrize("divisions", [1, 2, 3, 4, 8])
    def test_face_count(self, divisions):
        faces = subdivide_face(_triangle(), divisions, PointPool(), FaceIdCounter())
        assert len(faces) == divisions ** 2

    @pytest.mark.parametrize("divisions", [1, 2, 3, 4])
    def test_vertex_count(self, divisions):
        pool = PointPool()
        subdivide_face(_triangle(), divisions, pool, FaceIdCounter())
        assert len(pool) == (divisions + 1) * (divisions + 2) // 2

    def test_ids_are_consecutive(self):
        counter = FaceIdCounter(20)
        faces = subdivide_face(_triangle(), 4, PointPool(), counter)
        assert [f.id for f in faces] == list(range(20, 36))
        assert counter.value == 36

    def test_subfaces_cover_parent_area(self):
        parent = _triangle()
        faces = subdivide_face(parent, 4, PointPool(), FaceIdCounter())

        def area(face):
            a, b, c = face.points
            return abs((b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)) / 2.0

        assert sum(area(f) for f in faces) == pytest.approx(area(parent))
        for face in faces:
            assert area(face) == pytest.approx(area(parent) / 16)

    def test_corners_are_kept(self):
        parent = _triangle()
        faces = subdivide_face(parent, 2, PointPool(), FaceIdCounter())
        points = {p for f in faces for p in f.points}
        assert set(parent.points) <= points


class TestSubdivideEdge:
    def test_edge_points_are_pooled(self):
        pool = PointPool()
        a, b = Point(0.0, 0.0, 0.0), Point(4.0, 0.0, 0.0)
        first = subdivide_edge(a, b, 4, pool)
        second = subdivide_edge(a, b, 4, pool)
        assert len(first) == 5
        assert all(p is q for p, q in zip(first, second))
        assert len(pool) == 5


class TestSubdivideIcosahedron:
    @pytest.mark.parametrize("divisions", [1, 2, 4, 8])
    def test_shared_vertices_deduplicated(self, divisions):
        corners, faces = icosahedron_faces()
        pool = PointPool(corners)
        result = subdivide_faces(faces, divisions, pool, FaceIdCounter(20))
        assert len(result) == 20 * divisions ** 2
        assert len(pool) == 10 * divisions ** 2 + 2

    def test_corners_come_first_in_pool(self):
        corners, faces = icosahedron_faces()
        pool = PointPool(corners)
        subdivide_faces(faces, 2, pool, FaceIdCounter(20))
        assert list(pool)[:12] == corners
