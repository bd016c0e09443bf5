"""Geometry helper functions used across the package."""

from __future__ import annotations

from typing import Sequence

from .models import Point, Vector3


def surface_normal(p1: Point, p2: Point, p3: Point) -> Vector3:
    """Unnormalised normal of triangle *p1*, *p2*, *p3*: ``(p2 - p1) × (p3 - p1)``."""
    u = Vector3.between(p1, p2)
    v = Vector3.between(p1, p3)
    return u.cross(v)


def pointing_away_from_origin(point: Point, vector: Vector3, tolerance: float = 0.0) -> bool:
    """True if *vector* agrees in sign with *point* on every axis.

    A zero component on either side counts as agreement, as does any
    component of *vector* no larger than ``tolerance * |vector|``.  On a
    sphere centred at the origin this is a cheap test for an outward
    normal; a tolerance absorbs the rounding noise of small tiles.
    """
    limit = tolerance * vector.magnitude()
    return all(
        p * v >= 0.0 or abs(v) <= limit
        for p, v in zip(point.as_vector().as_tuple(), vector.as_tuple())
    )


def triangle_area(p1: Point, p2: Point, p3: Point) -> float:
    return 0.5 * surface_normal(p1, p2, p3).magnitude()


def boundary_normal(boundary: Sequence[Point]) -> Vector3:
    """Normal of the triangle formed by boundary points 1, 2 and 0."""
    return surface_normal(boundary[1], boundary[2], boundary[0])


def radial_direction(point: Point) -> Vector3:
    """Unit vector from the origin through *point*."""
    return point.as_vector().normalize()


def fan_normal(center: Point, boundary: Sequence[Point]) -> Vector3:
    """Sum of the normals of the triangles fanned from *center* around *boundary*.

    Its length is roughly twice the fan area.  Averaging over every edge keeps
    the direction stable when single boundary points carry rounding
    error comparable to the tile size.
    """
    total = Vector3(0.0, 0.0, 0.0)
    n = len(boundary)
    for i in range(n):
        total = total + surface_normal(center, boundary[i], boundary[(i + 1) % n])
    return total
