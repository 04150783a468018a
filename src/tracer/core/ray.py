"""Ray data structure.

A ray is an origin point plus a direction vector. Rays are immutable values:
transforming a ray produces a new one. The direction is not normalized, since
object-space rays must keep the scale of their world-space parameter t.

Example:
    >>> from src.tracer.core.ray import Ray
    >>> from src.tracer.core.tuple import point, vector
    >>> ray = Ray(point(2, 3, 4), vector(1, 0, 0))
    >>> ray.position(2.5)
    Tuple(x=4.5, y=3.0, z=4.0, w=1.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.tracer.core.tuple import Tuple

if TYPE_CHECKING:
    from src.tracer.core.matrix import Matrix


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray (w = 1).
        direction: The direction vector of the ray (w = 0).
    """

    origin: Tuple
    direction: Tuple

    def position(self, t: float) -> Tuple:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Negative values lie behind the origin.

        Returns:
            The point origin + direction * t.
        """
        return self.origin + self.direction * t

    def transformed(self, matrix: Matrix) -> Ray:
        """Map origin and direction through matrix.

        The direction's w of 0 keeps it free of the matrix's translation.
        """
        return Ray(matrix @ self.origin, matrix @ self.direction)


__all__ = ["Ray"]
