"""Common object-space/world-space handling shared by every shape.

Each shape is defined once in its own object space (the unit sphere sits at
the origin with radius 1) and placed in the world by its transform, which maps
object space to world space. ShapeBase does the coordinate bookkeeping:

    intersect: world ray -> object ray via the inverse transform, then the
        variant's local_intersect.
    normal_at: world point -> object point via the inverse transform, the
        variant's local_normal_at, then back to world space with the transpose
        of the inverse (normals transform contravariantly), w forced to 0,
        renormalized.

A shape whose transform is singular cannot be placed in the world. It is never
hit, and its normal falls back to the identity mapping.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, TypeVar

from src.tracer.core.matrix import IDENTITY, Matrix
from src.tracer.core.tuple import Tuple
from src.tracer.materials.material import Material

if TYPE_CHECKING:
    from src.tracer.core.intersection import Intersection
    from src.tracer.core.ray import Ray

S = TypeVar("S", bound="ShapeBase")


@dataclass(frozen=True)
class ShapeBase:
    """Transform and material carried by every shape variant.

    Equality compares transform and material, never identity.

    Attributes:
        transform: Object-space to world-space matrix.
        material: Surface reflectance parameters.
    """

    transform: Matrix = field(default_factory=Matrix.identity)
    material: Material = field(default_factory=Material)

    # Matrix and Material compare approximately and cannot be hashed
    __hash__ = None  # type: ignore[assignment]

    def with_transform(self: S, transform: Matrix) -> S:
        """Return a copy with the transform replaced."""
        return replace(self, transform=transform)

    def with_material(self: S, material: Material) -> S:
        """Return a copy with the material replaced."""
        return replace(self, material=material)

    def transformed(self: S, matrix: Matrix) -> S:
        """Return a copy placed by matrix after the current transform."""
        return replace(self, transform=matrix @ self.transform)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with this shape.

        Returns:
            Unsorted intersections tagged with this shape; empty on a miss or
            when the transform has no inverse.
        """
        inverse = self.transform.inverse()
        if inverse is None:
            return []
        return self.local_intersect(ray.transformed(inverse))

    def normal_at(self, world_point: Tuple) -> Tuple:
        """World-space unit surface normal at world_point."""
        inverse = self.transform.inverse()
        if inverse is None:
            inverse = IDENTITY

        object_point = inverse @ world_point
        object_normal = self.local_normal_at(object_point)
        world_normal = inverse.transpose() @ object_normal
        # The transposed inverse can leak translation into w
        return Tuple.vector(world_normal.x, world_normal.y, world_normal.z).normalize()

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        raise NotImplementedError

    def local_normal_at(self, object_point: Tuple) -> Tuple:
        raise NotImplementedError


__all__ = ["ShapeBase"]
