"""Topology checks for a built hexasphere."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .geometry import fan_normal

if TYPE_CHECKING:
    from .hexasphere import Hexasphere

PENTAGON_COUNT = 12


def validate_hexasphere(sphere: "Hexasphere") -> List[str]:
    """Return a list of human-readable problems; empty means valid.

    Checks the pentagon count, boundary sizes, neighbour counts and
    ranges, neighbour symmetry and that every boundary winds outward.
    """
    errors: List[str] = []
    tiles = sphere.tiles
    count = len(tiles)

    pentagons = sum(1 for t in tiles if t.is_pentagon())
    if pentagons != PENTAGON_COUNT:
        errors.append(f"Expected {PENTAGON_COUNT} pentagons, found {pentagons}")

    for index, tile in enumerate(tiles):
        sides = len(tile.boundary)
        if sides not in (5, 6):
            errors.append(f"Tile {index} has {sides} boundary points")
        if len(tile.neighbors) != sides:
            errors.append(
                f"Tile {index} has {len(tile.neighbors)} neighbours but {sides} sides"
            )
        for neighbor in tile.neighbors:
            if neighbor == index:
                errors.append(f"Tile {index} lists itself as a neighbour")
            elif not 0 <= neighbor < count:
                errors.append(f"Tile {index} references missing tile {neighbor}")
            elif index not in tiles[neighbor].neighbors:
                errors.append(f"Neighbour link {index} -> {neighbor} is not symmetric")
        if sides >= 3 and fan_normal(tile.center, tile.boundary).dot(tile.center.as_vector()) <= 0.0:
            errors.append(f"Tile {index} boundary winds inward")

    return errors
