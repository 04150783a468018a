"""The closed set of shape variants and dispatch over it.

Shape is a closed union; today it has one member, Sphere. The dispatch
functions below match every variant explicitly and reject anything else, so
adding a variant means adding a case to each of them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

from src.tracer.geometry.sphere import Sphere

if TYPE_CHECKING:
    from src.tracer.core.intersection import Intersection
    from src.tracer.core.ray import Ray
    from src.tracer.core.tuple import Tuple
    from src.tracer.materials.material import Material

Shape: TypeAlias = Sphere

SHAPE_TYPES: tuple[type, ...] = (Sphere,)


def _unknown_shape(shape: object) -> TypeError:
    return TypeError(f"Unsupported shape type: {type(shape).__name__}")


def intersect_shape(shape: Shape, ray: Ray) -> list[Intersection]:
    """Intersect a world-space ray with any shape variant."""
    match shape:
        case Sphere():
            return shape.intersect(ray)
    raise _unknown_shape(shape)


def normal_at_shape(shape: Shape, world_point: Tuple) -> Tuple:
    """World-space normal of any shape variant."""
    match shape:
        case Sphere():
            return shape.normal_at(world_point)
    raise _unknown_shape(shape)


def material_of(shape: Shape) -> Material:
    """Material attached to any shape variant."""
    match shape:
        case Sphere():
            return shape.material
    raise _unknown_shape(shape)


def is_shape(value: object) -> bool:
    return isinstance(value, SHAPE_TYPES)


__all__ = [
    "SHAPE_TYPES",
    "Shape",
    "intersect_shape",
    "is_shape",
    "material_of",
    "normal_at_shape",
]
