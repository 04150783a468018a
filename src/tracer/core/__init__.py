"""Core value types and algorithms.

This module contains the fundamental building blocks for ray tracing:

Components:
    epsilon: Tolerances for approximate float comparison
    tuple: Homogeneous points and vectors
    color: Linear RGB colors
    matrix: Square matrices with determinant and inverse
    transformation: Transformation matrices and the fluent builder
    ray: Ray data structure
    intersection: Intersection records, hit selection and shading inputs
    renderer: Pixel loop rendering a world through a camera

Every type here is an immutable value, so all operations are pure and may be
called concurrently without locking.
"""

from .color import Color
from .epsilon import COLOR_EPSILON, EPSILON, approx_eq
from .intersection import Computations, Intersection, Intersections
from .matrix import IDENTITY, Matrix
from .ray import Ray
from .transformation import (
    Transformable,
    Transformation,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .tuple import ORIGIN, Tuple, point, vector

# Note: renderer is NOT imported here to avoid circular imports.
# Import directly from src.tracer.core.renderer when needed.

__all__ = [
    "Color",
    "COLOR_EPSILON",
    "EPSILON",
    "approx_eq",
    "Tuple",
    "ORIGIN",
    "point",
    "vector",
    "Matrix",
    "IDENTITY",
    "Transformable",
    "Transformation",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    "Ray",
    "Intersection",
    "Intersections",
    "Computations",
]
