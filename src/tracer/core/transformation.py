"""Affine transformation matrices and a fluent composition builder.

Primitive constructors start from the 4x4 identity and overwrite specific
cells. Rotations use right-handed trigonometric entries with angles in radians.

Composition order matters. The Transformation builder applies operations in
the order they are appended: every new primitive pre-multiplies the
accumulated matrix, so appending A, then B, then C produces C @ B @ A, which
performs A first when applied to a tuple.

Example:
    >>> import math
    >>> from src.tracer.core.transformation import Transformation
    >>> from src.tracer.core.tuple import point
    >>> p = point(1, 0, 1)
    >>> (
    ...     Transformation()
    ...     .rotate_x(math.pi / 2)
    ...     .scale(5, 5, 5)
    ...     .translate(10, 5, 7)
    ...     .apply(p)
    ... )
    Tuple(x=15.0, y=0.0, z=7.0, w=1.0)
"""

from __future__ import annotations

import math
from typing import Protocol, TypeVar

import numpy as np

from src.tracer.core.matrix import Matrix
from src.tracer.core.tuple import Tuple


def translation(x: float, y: float, z: float) -> Matrix:
    """Move points by (x, y, z); vectors are unaffected."""
    m = np.identity(4)
    m[0, 3] = x
    m[1, 3] = y
    m[2, 3] = z
    return Matrix(m)


def scaling(x: float, y: float, z: float) -> Matrix:
    """Scale along each axis. A negative factor reflects across that axis."""
    m = np.identity(4)
    m[0, 0] = x
    m[1, 1] = y
    m[2, 2] = z
    return Matrix(m)


def rotation_x(radians: float) -> Matrix:
    m = np.identity(4)
    cos_r = math.cos(radians)
    sin_r = math.sin(radians)
    m[1, 1] = cos_r
    m[1, 2] = -sin_r
    m[2, 1] = sin_r
    m[2, 2] = cos_r
    return Matrix(m)


def rotation_y(radians: float) -> Matrix:
    m = np.identity(4)
    cos_r = math.cos(radians)
    sin_r = math.sin(radians)
    m[0, 0] = cos_r
    m[0, 2] = sin_r
    m[2, 0] = -sin_r
    m[2, 2] = cos_r
    return Matrix(m)


def rotation_z(radians: float) -> Matrix:
    m = np.identity(4)
    cos_r = math.cos(radians)
    sin_r = math.sin(radians)
    m[0, 0] = cos_r
    m[0, 1] = -sin_r
    m[1, 0] = sin_r
    m[1, 1] = cos_r
    return Matrix(m)


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each component in proportion to the other two.

    Args:
        xy: x moved in proportion to y.
        xz: x moved in proportion to z.
        yx: y moved in proportion to x.
        yz: y moved in proportion to z.
        zx: z moved in proportion to x.
        zy: z moved in proportion to y.
    """
    m = np.identity(4)
    m[0, 1] = xy
    m[0, 2] = xz
    m[1, 0] = yx
    m[1, 2] = yz
    m[2, 0] = zx
    m[2, 1] = zy
    return Matrix(m)


def view_transform(from_point: Tuple, to_point: Tuple, up: Tuple) -> Matrix:
    """Orient the world relative to an eye at from_point looking at to_point.

    Builds an orthonormal (left, true_up, -forward) basis, the same look-at
    construction a pinhole camera uses, and moves the eye to the origin.

    Args:
        from_point: Eye position.
        to_point: Point the eye looks at.
        up: Approximate up direction; need not be perpendicular to the view.
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)


T = TypeVar("T", bound="Transformable")


class Transformable(Protocol):
    """Anything that can be mapped through a 4x4 matrix into a new instance."""

    def transformed(self: T, matrix: Matrix) -> T: ...


class Transformation:
    """Immutable fluent builder accumulating a chain of transformations.

    Each method returns a new builder; the receiver is left unchanged, so a
    partially built chain can be reused as a prefix.

    Args:
        matrix: Starting matrix. Defaults to the identity.
    """

    def __init__(self, matrix: Matrix | None = None) -> None:
        self._matrix = matrix if matrix is not None else Matrix.identity(4)

    @property
    def matrix(self) -> Matrix:
        """The accumulated matrix (last appended operation leftmost)."""
        return self._matrix

    def then(self, primitive: Matrix) -> Transformation:
        """Append an arbitrary matrix to the chain."""
        return Transformation(primitive @ self._matrix)

    def translate(self, x: float, y: float, z: float) -> Transformation:
        return self.then(translation(x, y, z))

    def scale(self, x: float, y: float, z: float) -> Transformation:
        return self.then(scaling(x, y, z))

    def rotate_x(self, radians: float) -> Transformation:
        return self.then(rotation_x(radians))

    def rotate_y(self, radians: float) -> Transformation:
        return self.then(rotation_y(radians))

    def rotate_z(self, radians: float) -> Transformation:
        return self.then(rotation_z(radians))

    def shear(
        self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float
    ) -> Transformation:
        return self.then(shearing(xy, xz, yx, yz, zx, zy))

    def apply(self, target: T) -> T:
        """Map target through the accumulated matrix."""
        return target.transformed(self._matrix)

    def __repr__(self) -> str:
        return f"Transformation({self._matrix!r})"


__all__ = [
    "Transformable",
    "Transformation",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "scaling",
    "shearing",
    "translation",
    "view_transform",
]
