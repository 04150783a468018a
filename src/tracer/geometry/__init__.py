"""Geometry module for shape primitives.

This module provides the shape variants and their intersection algorithms:

Components:
    shape: Object-space/world-space handling shared by all shapes
    sphere: Unit sphere primitive with ray-sphere intersection
    variants: The closed Shape union and dispatch over it

Ray-object intersection follows the pattern:
    intersections = intersect_shape(shape, world_ray)
"""

from .shape import ShapeBase
from .sphere import Sphere
from .variants import (
    SHAPE_TYPES,
    Shape,
    intersect_shape,
    is_shape,
    material_of,
    normal_at_shape,
)

__all__ = [
    "ShapeBase",
    "Sphere",
    "Shape",
    "SHAPE_TYPES",
    "intersect_shape",
    "normal_at_shape",
    "material_of",
    "is_shape",
]
