"""Preview module for pixel storage, output and visualization.

Components:
    canvas: Taichi-backed pixel buffer of linear colors
    export: PPM and PNG export
    display: Matplotlib-based preview with tone mapping and gamma

Example:
    >>> from src.tracer.preview import save_png, show_canvas
    >>> save_png(canvas, "output.png", gamma=2.2)
    >>> show_canvas(canvas, tone_map="reinhard")
"""

from src.tracer.preview.canvas import Canvas
from src.tracer.preview.display import (
    ToneMapMethod,
    apply_gamma,
    count_clipped,
    prepare_display_image,
    show_canvas,
    tone_map_reinhard,
)
from src.tracer.preview.export import (
    canvas_to_ppm,
    compute_rmse,
    image_to_uint8,
    save_png,
    save_ppm,
)

__all__ = [
    # Pixel buffer
    "Canvas",
    # Display functions
    "show_canvas",
    "tone_map_reinhard",
    "apply_gamma",
    "prepare_display_image",
    "count_clipped",
    "ToneMapMethod",
    # Export functions
    "canvas_to_ppm",
    "save_ppm",
    "save_png",
    "image_to_uint8",
    "compute_rmse",
]
