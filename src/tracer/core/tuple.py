"""Homogeneous 4-component tuples for points and vectors.

A Tuple carries (x, y, z, w). The w component tells points from vectors:

    w == 1.0: a point (a location in space)
    w == 0.0: a vector (a direction and magnitude, no location)

Arithmetic keeps w meaningful: point - point is a vector, point + vector is a
point, vector + vector is a vector. Multiplying by a matrix translates points
but not vectors because the translation column is scaled by w.

Example:
    >>> from src.tracer.core.tuple import point, vector
    >>> p = point(3.0, -2.0, 5.0)
    >>> v = vector(-2.0, 3.0, 1.0)
    >>> p + v
    Tuple(x=1.0, y=1.0, z=6.0, w=1.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.tracer.core.epsilon import approx_eq

if TYPE_CHECKING:
    from src.tracer.core.matrix import Matrix

POINT_W = 1.0
VECTOR_W = 0.0


@dataclass(frozen=True, eq=False)
class Tuple:
    """A homogeneous coordinate (x, y, z, w).

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
        w: 1.0 for points, 0.0 for vectors.
    """

    x: float
    y: float
    z: float
    w: float

    @classmethod
    def point(cls, x: float, y: float, z: float) -> Tuple:
        """Create a point (w = 1)."""
        return cls(float(x), float(y), float(z), POINT_W)

    @classmethod
    def vector(cls, x: float, y: float, z: float) -> Tuple:
        """Create a vector (w = 0)."""
        return cls(float(x), float(y), float(z), VECTOR_W)

    @property
    def is_point(self) -> bool:
        return approx_eq(self.w, POINT_W)

    @property
    def is_vector(self) -> bool:
        return approx_eq(self.w, VECTOR_W)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            approx_eq(self.x, other.x)
            and approx_eq(self.y, other.y)
            and approx_eq(self.z, other.z)
            and approx_eq(self.w, other.w)
        )

    # Approximate equality cannot be made consistent with hashing
    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w)

    def __rmul__(self, scalar: float) -> Tuple:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def magnitude(self) -> float:
        """Euclidean length of the xyz part."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Tuple:
        """Return a unit-length copy.

        The zero vector normalizes to itself so that degenerate shading
        inputs (a light sitting exactly on the shaded point) stay finite.
        """
        mag = self.magnitude()
        if mag == 0.0:
            return self
        return self / mag

    def dot(self, other: Tuple) -> float:
        """Dot product of the xyz parts."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Tuple) -> Tuple:
        """Cross product of the xyz parts; w is taken from self."""
        return Tuple(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            self.w,
        )

    def reflect(self, normal: Tuple) -> Tuple:
        """Reflect this vector about a normal: v - 2(v.n)n."""
        return self - normal * (2.0 * self.dot(normal))

    def transformed(self, matrix: Matrix) -> Tuple:
        """Return matrix @ self."""
        return matrix @ self

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def __repr__(self) -> str:
        return f"Tuple(x={self.x}, y={self.y}, z={self.z}, w={self.w})"


def point(x: float, y: float, z: float) -> Tuple:
    """Shorthand for Tuple.point."""
    return Tuple.point(x, y, z)


def vector(x: float, y: float, z: float) -> Tuple:
    """Shorthand for Tuple.vector."""
    return Tuple.vector(x, y, z)


ORIGIN = Tuple.point(0.0, 0.0, 0.0)

__all__ = ["ORIGIN", "Tuple", "point", "vector"]
