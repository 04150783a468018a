"""Pinhole camera mapping canvas pixels to world-space rays.

The camera sits at the origin of its own space looking toward -z, with the
canvas one unit in front of it. Its transform (usually built with
view_transform) orients the world relative to the camera, so rays are mapped
back into world space through the inverse of that transform.

The canvas spans 2 * tan(field_of_view / 2) units along its longer side:

    half_view = tan(field_of_view / 2)
    aspect = hsize / vsize
    aspect >= 1: half_width = half_view, half_height = half_view / aspect
    aspect <  1: half_width = half_view * aspect, half_height = half_view
    pixel_size = half_width * 2 / hsize

Example:
    >>> import math
    >>> from src.tracer.camera.camera import Camera
    >>> from src.tracer.core.transformation import view_transform
    >>> from src.tracer.core.tuple import point, vector
    >>> camera = Camera(
    ...     hsize=160,
    ...     vsize=120,
    ...     field_of_view=math.pi / 3,
    ...     transform=view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0)),
    ... )
    >>> ray = camera.ray_for_pixel(80, 60)  # Ray through the canvas center
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from src.tracer.core.matrix import Matrix
from src.tracer.core.ray import Ray
from src.tracer.core.tuple import ORIGIN, point


@dataclass(frozen=True)
class Camera:
    """Configuration for a pinhole camera.

    Attributes:
        hsize: Canvas width in pixels.
        vsize: Canvas height in pixels.
        field_of_view: Angle in radians covered by the longer canvas side.
        transform: World-to-camera orientation matrix.

    Raises:
        ValueError: If a size is not positive, the field of view is outside
            (0, pi), or the transform has no inverse.
    """

    hsize: int
    vsize: int
    field_of_view: float
    transform: Matrix = field(default_factory=Matrix.identity)

    def __post_init__(self) -> None:
        if self.hsize <= 0 or self.vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {self.hsize}x{self.vsize}")
        if not 0.0 < self.field_of_view < math.pi:
            raise ValueError(f"Field of view must be in (0, pi), got {self.field_of_view}")
        if self.transform.inverse() is None:
            raise ValueError("Camera transform must be invertible")

    @property
    def half_width(self) -> float:
        return self._half_extent()[0]

    @property
    def half_height(self) -> float:
        return self._half_extent()[1]

    @property
    def pixel_size(self) -> float:
        """World-space width of one pixel on the canvas plane."""
        return self.half_width * 2.0 / self.hsize

    def _half_extent(self) -> tuple[float, float]:
        half_view = math.tan(self.field_of_view / 2.0)
        aspect = self.hsize / self.vsize
        if aspect >= 1.0:
            return half_view, half_view / aspect
        return half_view * aspect, half_view

    def with_transform(self, transform: Matrix) -> Camera:
        return Camera(self.hsize, self.vsize, self.field_of_view, transform)

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Ray from the camera through the center of pixel (px, py).

        Args:
            px: Column, 0 at the left edge.
            py: Row, 0 at the top edge.

        Returns:
            A world-space ray with a normalized direction.
        """
        pixel_size = self.pixel_size
        x_offset = (px + 0.5) * pixel_size
        y_offset = (py + 0.5) * pixel_size

        # Camera looks toward -z, so +x is to the left
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        inverse = self.transform.inverse()
        pixel = inverse @ point(world_x, world_y, -1.0)
        origin = inverse @ ORIGIN
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)


__all__ = ["Camera"]
