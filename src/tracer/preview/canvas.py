"""Pixel buffer for rendered colors.

The Canvas stores linear RGB colors in a Taichi vector field indexed
[x, y], with (0, 0) at the top-left corner. Individual pixels are read and
written from Python scope; whole-buffer operations (fill, clamp) run as
Taichi kernels.

Taichi must be initialized with ti.init() before a Canvas is created.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.tracer.core.color import Color
    >>> from src.tracer.preview.canvas import Canvas
    >>> canvas = Canvas(10, 20)
    >>> canvas.write_pixel(2, 3, Color.red())
    >>> image = canvas.to_numpy()  # shape (20, 10, 3), values in [0, 1]
"""

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

from src.tracer.core.color import Color

# Type alias for 3D vectors using Taichi's math module
vec3 = tm.vec3


@ti.kernel
def _fill_pixels(pixels: ti.template(), r: ti.f32, g: ti.f32, b: ti.f32):
    for i, j in pixels:
        pixels[i, j] = vec3(r, g, b)


@ti.kernel
def _clamp_pixels(src: ti.template(), dst: ti.template()):
    for i, j in src:
        dst[i, j] = tm.clamp(src[i, j], 0.0, 1.0)


class Canvas:
    """A width x height grid of linear RGB colors.

    Writes outside the grid are ignored and reads outside it return black,
    so a renderer can write without bounds checks.

    Args:
        width: Width in pixels.
        height: Height in pixels.
        fill: Initial color of every pixel (default black).

    Raises:
        ValueError: If width or height is not positive.
    """

    def __init__(self, width: int, height: int, fill: Color | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")

        self._width = width
        self._height = height
        self._pixels = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))
        self._clamped = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))
        self.fill(fill if fill is not None else Color.black())

    @property
    def width(self) -> int:
        """Get the canvas width."""
        return self._width

    @property
    def height(self) -> int:
        """Get the canvas height."""
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def fill(self, color: Color) -> None:
        """Set every pixel to color."""
        _fill_pixels(self._pixels, color.r, color.g, color.b)

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Set pixel (x, y); out-of-range coordinates are ignored."""
        if self.in_bounds(x, y):
            self._pixels[x, y] = [color.r, color.g, color.b]

    def pixel_at(self, x: int, y: int) -> Color:
        """Color at (x, y); black for out-of-range coordinates."""
        if not self.in_bounds(x, y):
            return Color.black()
        value = self._pixels[x, y]
        return Color(float(value[0]), float(value[1]), float(value[2]))

    def to_numpy(self, clamp: bool = True) -> npt.NDArray[np.float32]:
        """Get the canvas as an image array.

        Args:
            clamp: Clamp channels to [0, 1]. Pass False for the raw linear
                values, which may exceed 1.0.

        Returns:
            NumPy array of shape (height, width, 3) with dtype float32,
            row 0 at the top.
        """
        if clamp:
            _clamp_pixels(self._pixels, self._clamped)
            data = self._clamped.to_numpy()
        else:
            data = self._pixels.to_numpy()

        # Transpose from (width, height, 3) to (height, width, 3)
        return np.transpose(data, (1, 0, 2)).astype(np.float32)

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"


__all__ = ["Canvas"]
