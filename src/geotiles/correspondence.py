"""Correspondence resolver: pre-projection vertex → projected vertex.

Projection keeps a vertex's direction but not its coordinates, so the
pipeline carries the pre-projection :attr:`~geotiles.models.Point.key`
through :func:`~geotiles.projection.project_points` and resolves by
direct lookup.  Points that are not in that index (e.g. ones computed
outside the pipeline) fall back to matching unit directions within
:data:`~geotiles.config.DIRECTION_TOLERANCE`, using a KD-tree over the
projected directions.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional

import numpy as np
from scipy.spatial import cKDTree

from .config import DIRECTION_TOLERANCE
from .errors import CorrespondenceError
from .models import Point, PointKey

logger = logging.getLogger(__name__)


class CorrespondenceResolver:
    """Resolve subdivided vertices to their projected counterparts.

    Parameters
    ----------
    projected : mapping
        ``{pre_projection_key: projected_point}`` as returned by
        :func:`~geotiles.projection.project_points`.
    tolerance : float
        Maximum Euclidean distance between unit directions for the
        fallback match.
    """

    def __init__(
        self,
        projected: Mapping[PointKey, Point],
        tolerance: float = DIRECTION_TOLERANCE,
    ) -> None:
        self._projected = dict(projected)
        self._tolerance = tolerance
        self._tree: Optional[cKDTree] = None
        self._tree_points: List[Point] = []

    def __len__(self) -> int:
        return len(self._projected)

    def resolve(self, point: Point) -> Point:
        """Projected counterpart of *point*.

        Raises :class:`~geotiles.errors.CorrespondenceError` when neither
        the key index nor the direction match finds one.
        """
        projected = self._projected.get(point.key)
        if projected is not None:
            return projected

        match = self.match_direction(point)
        if match is None:
            raise CorrespondenceError(f"No projected vertex matches point {point}")
        logger.debug("Resolved %s by direction to %s", point, match)
        return match

    def match_direction(self, point: Point) -> Optional[Point]:
        """Projected point whose unit direction is within tolerance of *point*'s."""
        direction = point.as_vector().normalize()
        if direction.magnitude() == 0.0:
            return None
        tree = self._direction_tree()
        if tree is None:
            return None
        distance, index = tree.query(direction.as_tuple(), k=1)
        if not distance < self._tolerance:
            return None
        return self._tree_points[int(index)]

    def _direction_tree(self) -> Optional[cKDTree]:
        if self._tree is None and self._projected:
            self._tree_points = list(self._projected.values())
            directions = np.array(
                [p.as_vector().normalize().as_tuple() for p in self._tree_points],
                dtype=float,
            )
            self._tree = cKDTree(directions)
        return self._tree
