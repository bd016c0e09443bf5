"""Tests for in-memory exports (OBJ text, numpy meshes, JSON payload)."""

import json

import numpy as np
import pytest

from geotiles.export import PolygonMesh, to_dict, to_json, to_mesh_arrays, to_obj, to_triangle_arrays
from geotiles.hexasphere import build_hexasphere


@pytest.fixture(scope="module")
def sphere():
    return build_hexasphere(1.0, 1)


class TestObj:
    def test_sections(self, sphere):
        text = to_obj(sphere)
        assert text.startswith("# vertices\n")
        assert "\n# faces\n" in text

    def test_shared_vertices_written_once(self, sphere):
        lines = to_obj(sphere).splitlines()
        vertex_lines = [ln for ln in lines if ln.startswith("v ")]
        face_lines = [ln for ln in lines if ln.startswith("f ")]
        assert len(vertex_lines) == 80
        assert len(face_lines) == 42

    def test_faces_are_one_based(self, sphere):
        lines = to_obj(sphere).splitlines()
        vertex_count = sum(1 for ln in lines if ln.startswith("v "))
        for line in lines:
            if not line.startswith("f "):
                continue
            indices = [int(tok) for tok in line.split()[1:]]
            assert len(indices) in (5, 6)
            assert all(1 <= i <= vertex_count for i in indices)

    def test_method_matches_function(self, sphere):
        assert sphere.to_obj() == to_obj(sphere)


class TestMeshArrays:
    def test_polygon_mesh(self, sphere):
        mesh = to_mesh_arrays(sphere)
        assert isinstance(mesh, PolygonMesh)
        assert mesh.vertices.shape == (80, 3)
        assert len(mesh.polygons) == 42
        assert mesh.tile_ids == [t.id for t in sphere.tiles]

    def test_polygons_reproduce_boundaries(self, sphere):
        mesh = to_mesh_arrays(sphere)
        for tile, polygon in zip(sphere.tiles, mesh.polygons):
            expected = [(p.x, p.y, p.z) for p in tile.boundary]
            np.testing.assert_allclose(mesh.vertices[list(polygon)], expected)

    def test_triangle_arrays(self, sphere):
        vertices, triangles, tile_index = to_triangle_arrays(sphere)
        sides = sum(len(t.boundary) for t in sphere.tiles)
        assert sides == 12 * 5 + 30 * 6
        assert vertices.shape == (len(sphere) + sides, 3)
        assert triangles.shape == (sides, 3)
        assert tile_index.shape == (sides,)
        assert triangles.max() < len(vertices)
        assert set(tile_index.tolist()) == set(range(len(sphere)))

    def test_triangles_wind_outward(self, sphere):
        vertices, triangles, _ = to_triangle_arrays(sphere)
        a, b, c = (vertices[triangles[:, k]] for k in range(3))
        normals = np.cross(b - a, c - a)
        centroids = (a + b + c) / 3.0
        assert np.all(np.einsum("ij,ij->i", normals, centroids) > 0)


class TestDictExport:
    def test_payload_shape(self, sphere):
        payload = to_dict(sphere)
        assert payload["version"] == "1.0"
        assert payload["metadata"]["tile_count"] == 42
        assert len(payload["tiles"]) == 42

    def test_tile_entries(self, sphere):
        payload = to_dict(sphere)
        for index, (entry, tile) in enumerate(zip(payload["tiles"], sphere.tiles)):
            assert entry["index"] == index
            assert entry["face_type"] == tile.face_type
            assert entry["center"] == [tile.center.x, tile.center.y, tile.center.z]
            assert len(entry["boundary"]) == len(tile.boundary)
            assert entry["neighbors"] == list(tile.neighbors)

    def test_json_round_trip(self, sphere):
        assert json.loads(to_json(sphere)) == to_dict(sphere)

    def test_json_is_deterministic(self, sphere):
        assert to_json(sphere) == build_hexasphere(1.0, 1).to_json()

    def test_json_indent(self, sphere):
        assert "\n" in sphere.to_json(indent=2)
        assert "\n" not in sphere.to_json()
