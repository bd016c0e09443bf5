"""Size statistics over the hexagonal tiles of a hexasphere."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .hexasphere import Hexasphere


@dataclass(frozen=True)
class HexagonStats:
    total_hexagons: int
    total_pentagons: int
    average_hexagon_radius: float
    average_hexagon_edge_length: float
    average_hexagon_area: float
    min_hexagon_radius: float
    max_hexagon_radius: float
    radius_std_deviation: float


def calculate_hexagon_stats(sphere: "Hexasphere") -> HexagonStats:
    """Summarise hexagon radius, edge length and area.

    Pentagons are only counted.  With no hexagons (depth 0) every
    measurement is zero.  The standard deviation is the population one.
    """
    hexagons = [t for t in sphere.tiles if t.is_hexagon()]
    pentagon_count = sum(1 for t in sphere.tiles if t.is_pentagon())

    if not hexagons:
        return HexagonStats(
            total_hexagons=0,
            total_pentagons=pentagon_count,
            average_hexagon_radius=0.0,
            average_hexagon_edge_length=0.0,
            average_hexagon_area=0.0,
            min_hexagon_radius=0.0,
            max_hexagon_radius=0.0,
            radius_std_deviation=0.0,
        )

    radii = np.array([t.average_radius() for t in hexagons])
    edges = np.array([t.average_edge_length() for t in hexagons])
    areas = np.array([t.area() for t in hexagons])

    return HexagonStats(
        total_hexagons=len(hexagons),
        total_pentagons=pentagon_count,
        average_hexagon_radius=float(radii.mean()),
        average_hexagon_edge_length=float(edges.mean()),
        average_hexagon_area=float(areas.mean()),
        min_hexagon_radius=float(radii.min()),
        max_hexagon_radius=float(radii.max()),
        radius_std_deviation=float(radii.std()),
    )
