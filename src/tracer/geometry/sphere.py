"""Unit sphere primitive.

Every sphere is the unit sphere (center at the origin, radius 1) in its own
object space; position, size and orientation come from its transform.

The ray-sphere intersection solves |O + tD|^2 = 1 for an object-space ray with
origin O and direction D:

    a = D . D
    b = 2 * D . (O - center)
    c = (O - center) . (O - center) - 1
    discriminant = b^2 - 4ac

A negative discriminant is a miss. Otherwise both roots are returned, even when
they coincide (a tangent ray) or lie behind the ray origin; hit selection is
left to Intersections.

Example:
    >>> from src.tracer.core.ray import Ray
    >>> from src.tracer.core.tuple import point, vector
    >>> from src.tracer.geometry.sphere import Sphere
    >>> xs = Sphere().intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
    >>> [x.t for x in xs]
    [4.0, 6.0]
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.tracer.core.intersection import Intersection
from src.tracer.core.ray import Ray
from src.tracer.core.tuple import ORIGIN, Tuple
from src.tracer.geometry.shape import ShapeBase

SPHERE_RADIUS = 1.0


@dataclass(frozen=True)
class Sphere(ShapeBase):
    """A sphere: the unit sphere placed in the world by its transform.

    Example:
        >>> from src.tracer.core.transformation import scaling, translation
        >>> s = Sphere().with_transform(translation(0, 1, 0) @ scaling(2, 2, 2))
    """

    __hash__ = None  # type: ignore[assignment]

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        sphere_to_ray = ray.origin - ORIGIN

        a = ray.direction.dot(ray.direction)
        if a == 0.0:
            # A zero direction never leaves its origin
            return []
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - SPHERE_RADIUS * SPHERE_RADIUS

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)
        return [Intersection(t1, self), Intersection(t2, self)]

    def local_normal_at(self, object_point: Tuple) -> Tuple:
        return object_point - ORIGIN


__all__ = ["SPHERE_RADIUS", "Sphere"]
