"""Exception types raised while building a hexasphere."""

from __future__ import annotations


class GeoTilesError(Exception):
    """Base class for geotiles errors."""


class DegenerateProjectionError(GeoTilesError, ValueError):
    """A point at the origin has no direction and cannot be projected."""


class CorrespondenceError(GeoTilesError, RuntimeError):
    """A subdivided vertex has no projected counterpart.

    Construction is aborted: dropping the vertex would corrupt the face
    star of every tile around it.
    """
