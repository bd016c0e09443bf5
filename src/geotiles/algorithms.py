"""Graph queries over the tile adjacency of a built hexasphere."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Dict, List

if TYPE_CHECKING:
    from .hexasphere import Hexasphere


def tile_adjacency(sphere: "Hexasphere") -> Dict[int, List[int]]:
    """Return ``{tile index: sorted neighbour indices}`` for a built sphere."""
    return {index: sorted(tile.neighbors) for index, tile in enumerate(sphere.tiles)}


def ring_tiles(sphere: "Hexasphere", start: int, max_depth: int) -> Dict[int, List[int]]:
    """Tile indices grouped by neighbour-step distance from tile *start*.

    Ring 0 is ``[start]``; ring *k* holds, sorted, every tile exactly *k*
    steps away.  Rings stop at *max_depth* or once the sphere is covered.

    Raises
    ------
    ValueError
        If *max_depth* is negative.
    IndexError
        If *start* is not a tile index of *sphere*.
    """
    if max_depth < 0:
        raise ValueError("max_depth must be >= 0")
    if not 0 <= start < len(sphere):
        raise IndexError(f"No tile {start} in a sphere of {len(sphere)} tiles")

    distance: Dict[int, int] = {start: 0}
    queue = deque([start])
    while queue:
        index = queue.popleft()
        steps = distance[index]
        if steps == max_depth:
            continue
        for neighbor in sphere[index].neighbors:
            if neighbor not in distance:
                distance[neighbor] = steps + 1
                queue.append(neighbor)

    rings: Dict[int, List[int]] = {}
    for index, steps in distance.items():
        rings.setdefault(steps, []).append(index)
    return {steps: sorted(rings[steps]) for steps in sorted(rings)}
