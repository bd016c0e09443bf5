from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import cached_property
from typing import List, Optional, Tuple

from .config import QUANTUM
from .errors import DegenerateProjectionError

#: Integer-quantized coordinate triple used as a structural lookup key.
PointKey = Tuple[int, int, int]


def quantize(value: float) -> int:
    """Round *value* to the fixed precision, as an integer count of quanta."""
    return int(round(value * QUANTUM))


@dataclass(frozen=True)
class LatLon:
    """Latitude / longitude in degrees."""

    lat: float
    lon: float


@dataclass(frozen=True)
class Vector3:
    """A free direction.  Not quantized."""

    x: float
    y: float
    z: float

    @classmethod
    def between(cls, start: "Point", end: "Point") -> "Vector3":
        """Vector from *start* to *end*."""
        return cls(end.x - start.x, end.y - start.y, end.z - start.z)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> "Vector3":
        """Unit vector in the same direction; the zero vector stays zero."""
        mag = self.magnitude()
        if mag == 0.0:
            return Vector3(0.0, 0.0, 0.0)
        return Vector3(self.x / mag, self.y / mag, self.z / mag)

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)


@dataclass(frozen=True, eq=False)
class Point:
    """A position in space, rounded to a fixed decimal precision.

    Rounding happens at construction so that points reached along
    different computation paths compare and hash equal.  Equality and
    hashing use only :attr:`key`, the integer-quantized coordinates.
    """

    x: float
    y: float
    z: float
    key: PointKey = field(init=False, repr=False)

    def __post_init__(self) -> None:
        key = (quantize(self.x), quantize(self.y), quantize(self.z))
        object.__setattr__(self, "key", key)
        object.__setattr__(self, "x", key[0] / QUANTUM)
        object.__setattr__(self, "y", key[1] / QUANTUM)
        object.__setattr__(self, "z", key[2] / QUANTUM)

    @classmethod
    def from_key(cls, key: PointKey) -> "Point":
        return cls(key[0] / QUANTUM, key[1] / QUANTUM, key[2] / QUANTUM)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.z}"

    # ── Geometry ────────────────────────────────────────────────────

    def as_vector(self) -> Vector3:
        """Position vector from the origin."""
        return Vector3(self.x, self.y, self.z)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance_to(self, other: "Point") -> float:
        return math.dist((self.x, self.y, self.z), (other.x, other.y, other.z))

    def subdivide(self, other: "Point", count: int) -> List["Point"]:
        """*count* + 1 evenly spaced points from *self* to *other* inclusive."""
        if count == 0:
            return [self]
        points = [self]
        for i in range(1, count):
            t = i / count
            points.append(Point(
                self.x * (1.0 - t) + other.x * t,
                self.y * (1.0 - t) + other.y * t,
                self.z * (1.0 - t) + other.z * t,
            ))
        points.append(other)
        return points

    def segment(self, other: "Point", percent: float) -> "Point":
        """Point *percent* of the way from *self* to *other* (clamped to [0, 1])."""
        percent = max(0.0, min(1.0, percent))
        return Point(
            self.x * (1.0 - percent) + other.x * percent,
            self.y * (1.0 - percent) + other.y * percent,
            self.z * (1.0 - percent) + other.z * percent,
        )

    def project(self, radius: float, percent: float = 1.0) -> "Point":
        """Copy of this point moved along its direction to ``radius * percent``.

        Raises :class:`DegenerateProjectionError` for the origin.
        """
        percent = max(0.0, min(1.0, percent))
        mag = self.magnitude()
        if mag == 0.0:
            raise DegenerateProjectionError(
                "Cannot project a point at the origin onto a sphere"
            )
        ratio = radius / mag * percent
        return Point(self.x * ratio, self.y * ratio, self.z * ratio)

    def to_lat_lon(self, radius: float) -> LatLon:
        """Latitude from *y*, longitude in the x–z plane, both in degrees."""
        sin_lat = max(-1.0, min(1.0, self.y / radius))
        return LatLon(
            lat=math.degrees(math.asin(sin_lat)),
            lon=math.degrees(math.atan2(self.x, self.z)),
        )


@dataclass(frozen=True)
class Face:
    """A triangle of the subdivided icosahedron.

    The centroid is computed on first access and cached.
    """

    id: int
    points: Tuple[Point, Point, Point]

    def __post_init__(self) -> None:
        points = tuple(self.points)
        if len(points) != 3:
            raise ValueError(f"Face {self.id} must have exactly 3 points, got {len(points)}")
        object.__setattr__(self, "points", points)

    @cached_property
    def centroid(self) -> Point:
        p1, p2, p3 = self.points
        return Point(
            (p1.x + p2.x + p3.x) / 3.0,
            (p1.y + p2.y + p3.y) / 3.0,
            (p1.z + p2.z + p3.z) / 3.0,
        )

    def other_points(self, point: Point) -> List[Point]:
        """The face's points that are not *point*."""
        return [p for p in self.points if p != point]

    def find_third_point(self, p1: Point, p2: Point) -> Optional[Point]:
        for p in self.points:
            if p != p1 and p != p2:
                return p
        return None

    def is_adjacent_to(self, other: "Face") -> bool:
        """True if the two faces share exactly one edge (two points)."""
        shared = sum(1 for p in self.points for q in other.points if p == q)
        return shared == 2
