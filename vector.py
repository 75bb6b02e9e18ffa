"""Two-dimensional vector algebra."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geom import Point


def _divide(numerator: float, divisor: float) -> float:
    """Divide with IEEE-754 semantics instead of raising ZeroDivisionError."""

    try:
        return numerator / divisor
    except ZeroDivisionError:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, divisor)


@dataclass(frozen=True)
class Vector:
    """Represents a displacement in the plane."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_point(cls, point: Point) -> Vector:
        """Build a vector from a point's coordinates."""

        return cls(float(point.x), float(point.y))

    def to_point(self) -> Point:
        """Return the point this vector reaches from the origin."""

        from geom import Point

        return Point(self.x, self.y)

    def mag_sqr(self) -> float:
        """Return the squared length."""

        return self.x * self.x + self.y * self.y

    def dist_sqr(self, other: Vector) -> float:
        """Return the squared distance to another vector."""

        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def magnitude(self) -> float:
        """Return the length."""

        return math.sqrt(self.mag_sqr())

    def unit(self) -> Vector:
        """Return a vector of length 1 pointing the same way.

        The zero vector has no direction, so its unit vector is the zero
        vector rather than a pair of NaNs.
        """

        ms = self.mag_sqr()
        if ms > 0.0:
            mag = math.sqrt(ms)
            return Vector(self.x / mag, self.y / mag)
        return Vector(0.0, 0.0)

    def dot(self, other: Vector) -> float:
        """Return the dot product with another vector."""

        return self.x * other.x + self.y * other.y

    def normal(self) -> Vector:
        """Rotate by +90 degrees: (x, y) -> (-y, x)."""

        return Vector(-self.y, self.x)

    def angle(self) -> float:
        """Direction in radians, in the range (-pi, pi]."""

        return math.atan2(self.y, self.x)

    def __add__(self, other: Vector) -> Vector:
        """Add componentwise."""

        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        """Subtract componentwise."""

        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector:
        """Flip both components."""

        return Vector(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vector:
        """Scale both components by a number."""

        if isinstance(scalar, Vector):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        """Divide both components by a number; zero gives infinities."""

        if isinstance(scalar, Vector):
            return NotImplemented
        return Vector(_divide(self.x, scalar), _divide(self.y, scalar))
