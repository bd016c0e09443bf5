"""Tests for vertex-star grouping and angular sorting."""

import pytest

from geotiles.correspondence import CorrespondenceResolver
from geotiles.icosahedron import icosahedron_faces
from geotiles.models import Face, Point, Vector3
from geotiles.projection import project_points
from geotiles.stars import VertexStar, group_vertex_stars, sort_faces_around_point
from geotiles.subdivision import FaceIdCounter, PointPool, frequency_for_depth, subdivide_faces


CENTER = Point(0.0, 0.0, 1.0)


def _compass_faces():
    """Four faces around (0, 0, 1) whose centroids point E, W, N, S."""
    east = Face(0, (CENTER, Point(3.0, 1.0, 1.0), Point(3.0, -1.0, 1.0)))
    west = Face(1, (CENTER, Point(-3.0, 1.0, 1.0), Point(-3.0, -1.0, 1.0)))
    north = Face(2, (CENTER, Point(1.0, 3.0, 1.0), Point(-1.0, 3.0, 1.0)))
    south = Face(3, (CENTER, Point(1.0, -3.0, 1.0), Point(-1.0, -3.0, 1.0)))
    return east, west, north, south


def _rotate_to(items, first):
    i = items.index(first)
    return items[i:] + items[:i]


def _stars(depth: int, radius: float = 1.0):
    corners, seed = icosahedron_faces()
    pool = PointPool(corners)
    faces = subdivide_faces(seed, frequency_for_depth(depth), pool, FaceIdCounter(20))
    resolver = CorrespondenceResolver(project_points(pool, radius))
    return faces, group_vertex_stars(faces, resolver)


class TestSortFacesAroundPoint:
    def test_compass_faces_in_cyclic_order(self):
        east, west, north, south = _compass_faces()
        ordered = sort_faces_around_point([east, west, north, south], CENTER)
        assert _rotate_to(ordered, east) == [east, north, west, south]

    def test_result_independent_of_input_permutation(self):
        east, west, north, south = _compass_faces()
        a = sort_faces_around_point([east, west, north, south], CENTER)
        b = sort_faces_around_point([north, south, west, east], CENTER)
        assert _rotate_to(a, east) == _rotate_to(b, east)

    def test_returns_new_list(self):
        faces = list(_compass_faces())
        snapshot = list(faces)
        sort_faces_around_point(faces, CENTER)
        assert faces == snapshot

    @pytest.mark.parametrize("count", [0, 1, 2])
    def test_short_input_unchanged(self, count):
        faces = list(_compass_faces())[:count]
        assert sort_faces_around_point(faces, CENTER) == faces

    def test_counter_clockwise_from_outside(self):
        east, west, north, south = _compass_faces()
        ordered = sort_faces_around_point([east, west, north, south], CENTER)
        up = CENTER.as_vector()
        for a, b in zip(ordered, ordered[1:] + ordered[:1]):
            da = Vector3.between(CENTER, a.centroid)
            db = Vector3.between(CENTER, b.centroid)
            assert da.cross(db).dot(up) > 0


class TestGroupVertexStars:
    def test_one_star_per_vertex(self):
        _, stars = _stars(0)
        assert len(stars) == 12
        assert all(isinstance(s, VertexStar) for s in stars)

    @pytest.mark.parametrize("depth", [0, 1, 2])
    def test_star_sizes(self, depth):
        _, stars = _stars(depth)
        sizes = [len(s) for s in stars]
        assert sizes.count(5) == 12
        assert all(size in (5, 6) for size in sizes)
        assert len(stars) == 10 * 4 ** depth + 2

    def test_centers_are_projected(self):
        _, stars = _stars(1, radius=5.0)
        for star in stars:
            assert star.center.magnitude() == pytest.approx(5.0, abs=1e-3)

    def test_faces_keep_ids_and_use_projected_points(self):
        faces, stars = _stars(1)
        ids = {f.id for f in faces}
        for star in stars:
            for face in star.faces:
                assert face.id in ids
                assert star.center in face.points
                for p in face.points:
                    assert p.magnitude() == pytest.approx(1.0, abs=1e-3)

    def test_every_face_in_three_stars(self):
        faces, stars = _stars(1)
        membership = {}
        for star in stars:
            for face in star.faces:
                membership[face.id] = membership.get(face.id, 0) + 1
        assert len(membership) == len(faces)
        assert set(membership.values()) == {3}

    def test_discovery_order_is_deterministic(self):
        _, first = _stars(2)
        _, second = _stars(2)
        assert [s.center for s in first] == [s.center for s in second]

    def test_sorted_stars_wind_consistently(self):
        _, stars = _stars(2)
        for star in stars:
            ordered = sort_faces_around_point(star.faces, star.center)
            up = star.center.as_vector()
            n = len(ordered)
            for i in range(n):
                da = Vector3.between(star.center, ordered[i].centroid)
                db = Vector3.between(star.center, ordered[(i + 1) % n].centroid)
                assert da.cross(db).dot(up) > 0
