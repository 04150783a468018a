"""Render a world through a camera onto a canvas.

For every pixel the renderer casts camera.ray_for_pixel(x, y) and writes
world.color_at(ray) into a new Canvas, one row at a time. Each pixel is an
independent pure computation; the loop itself is sequential.

Example:
    >>> import math
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.tracer.camera.camera import Camera
    >>> from src.tracer.core.renderer import render
    >>> from src.tracer.scene.world import World
    >>>
    >>> def progress(rows_done, total_rows):
    ...     print(f"{rows_done}/{total_rows} rows")
    >>> canvas = render(Camera(11, 11, math.pi / 2), World.default(), callback=progress)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from src.tracer.preview.canvas import Canvas

if TYPE_CHECKING:
    from src.tracer.camera.camera import Camera
    from src.tracer.scene.world import World

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]


def render(
    camera: Camera,
    world: World,
    callback: ProgressCallback | None = None,
) -> Canvas:
    """Render world as seen by camera.

    Args:
        camera: Camera defining the canvas size and the view.
        world: Scene to render.
        callback: Optional callback called after each completed row.
            Receives (rows_done, total_rows).

    Returns:
        A Canvas of camera.hsize x camera.vsize pixels.
    """
    canvas = Canvas(camera.hsize, camera.vsize)
    total_rows = camera.vsize

    logger.info(
        "Rendering %dx%d with %d shapes and %d lights",
        camera.hsize,
        camera.vsize,
        len(world.shapes),
        len(world.lights),
    )
    start_time = time.perf_counter()

    for y in range(camera.vsize):
        for x in range(camera.hsize):
            ray = camera.ray_for_pixel(x, y)
            canvas.write_pixel(x, y, world.color_at(ray))

        if callback is not None:
            callback(y + 1, total_rows)

    elapsed = time.perf_counter() - start_time
    logger.info(
        "Rendered %d pixels in %.2fs",
        camera.hsize * camera.vsize,
        elapsed,
    )
    return canvas


__all__ = ["ProgressCallback", "render"]
