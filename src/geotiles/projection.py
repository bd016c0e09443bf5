"""Projector: move every distinct subdivided vertex onto the sphere."""

from __future__ import annotations

from typing import Dict, Iterable

from .models import Point, PointKey


def project_points(points: Iterable[Point], radius: float) -> Dict[PointKey, Point]:
    """Map each pre-projection point's key to its copy at distance *radius*.

    The result keeps the input order.  Raises
    :class:`~geotiles.errors.DegenerateProjectionError` if a point sits at
    the origin.
    """
    return {point.key: point.project(radius) for point in points}
