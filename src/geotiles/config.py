"""Construction constants and the :class:`HexasphereConfig` parameter set."""

from __future__ import annotations

import math
from dataclasses import dataclass


# ═══════════════════════════════════════════════════════════════════
# Constants
# ═══════════════════════════════════════════════════════════════════

#: Decimal places every :class:`~geotiles.models.Point` is rounded to.
PRECISION = 3

#: Integer multiplier matching :data:`PRECISION`.
QUANTUM = 10 ** PRECISION

#: Golden ratio used for the seed icosahedron.
GOLDEN_RATIO = (1.0 + math.sqrt(5.0)) / 2.0

#: The seed icosahedron is built at this scale so that quantization of the
#: subdivided (pre-projection) points stays far below the grid spacing.
SEED_SCALE = 1000.0

#: Maximum distance between two unit directions considered the same vertex.
DIRECTION_TOLERANCE = 1.0 / QUANTUM

MIN_HEX_SIZE = 0.01
MAX_HEX_SIZE = 1.0


# ═══════════════════════════════════════════════════════════════════
# Configuration
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class HexasphereConfig:
    """Parameters for one hexasphere build.

    Attributes
    ----------
    radius : float
        Sphere radius (> 0).
    subdivisions : int
        Recursive subdivision depth (>= 0).  Each level halves every
        icosahedron edge, so the tile count is ``10 * 4**subdivisions + 2``.
    hex_size : float
        Fraction of the way from the tile centre to each face centroid at
        which boundary points sit.  ``1.0`` makes neighbouring tiles share
        edges exactly; smaller values leave gaps.  Out-of-range values are
        clamped to ``[MIN_HEX_SIZE, MAX_HEX_SIZE]`` at build time.
    """

    radius: float = 1.0
    subdivisions: int = 2
    hex_size: float = 1.0

    def __post_init__(self) -> None:
        validate_build_arguments(self.radius, self.subdivisions)

    @property
    def frequency(self) -> int:
        """Number of segments each icosahedron edge is split into."""
        return 2 ** self.subdivisions


def validate_build_arguments(radius: float, subdivisions: int) -> None:
    """Raise ``ValueError`` for a non-positive radius or a bad depth."""
    if isinstance(subdivisions, bool) or not isinstance(subdivisions, int):
        raise ValueError(f"subdivisions must be an int, got {type(subdivisions).__name__}")
    if subdivisions < 0:
        raise ValueError("subdivisions must be >= 0")
    if not math.isfinite(radius) or radius <= 0:
        raise ValueError(f"radius must be a positive number, got {radius!r}")


def clamp_hex_size(hex_size: float) -> float:
    return max(MIN_HEX_SIZE, min(MAX_HEX_SIZE, hex_size))


# ═══════════════════════════════════════════════════════════════════
# Presets
# ═══════════════════════════════════════════════════════════════════

COARSE = HexasphereConfig(radius=1.0, subdivisions=1, hex_size=1.0)

MEDIUM = HexasphereConfig(radius=1.0, subdivisions=3, hex_size=1.0)

FINE = HexasphereConfig(radius=1.0, subdivisions=5, hex_size=1.0)
