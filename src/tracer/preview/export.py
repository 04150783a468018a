"""Image export utilities for rendered canvases.

This module converts canvases to 8-bit images and writes them to files.

Supported formats:
    - PPM (plain "P3" text, written directly)
    - PNG (8-bit via Pillow)

Channel conversion clamps to [0, 1] and scales by 255, truncating toward
zero, so 1.0 maps to 255 and anything below 1/255 maps to 0.

Example:
    >>> from src.tracer.preview.export import save_png, save_ppm
    >>> save_ppm(canvas, "spheres.ppm")
    >>> save_png(canvas, "spheres.png", gamma=2.2)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from src.tracer.preview.display import apply_gamma

if TYPE_CHECKING:
    from src.tracer.preview.canvas import Canvas

logger = logging.getLogger(__name__)

PPM_MAGIC = "P3"
PPM_MAX_VALUE = 255
PPM_MAX_LINE_LENGTH = 70


def image_to_uint8(
    image: npt.NDArray[np.float32],
    *,
    gamma: float = 1.0,
) -> npt.NDArray[np.uint8]:
    """Convert a linear float image to uint8.

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Gamma correction value (default 1.0, no correction).

    Returns:
        8-bit image array of shape (H, W, 3) with dtype uint8.
    """
    processed = np.clip(apply_gamma(image, gamma), 0.0, 1.0)
    return (processed * PPM_MAX_VALUE).astype(np.uint8)


def canvas_to_ppm(canvas: Canvas) -> str:
    """Render a canvas as plain PPM text.

    Each pixel row starts on a new line and no line exceeds 70 characters.
    The text ends with a newline.

    Args:
        canvas: The canvas to convert.

    Returns:
        The PPM document as a string.
    """
    pixels = image_to_uint8(canvas.to_numpy())

    lines = [PPM_MAGIC, f"{canvas.width} {canvas.height}", str(PPM_MAX_VALUE)]
    for row in pixels:
        line = ""
        for value in row.reshape(-1):
            token = str(int(value))
            if not line:
                line = token
            elif len(line) + 1 + len(token) > PPM_MAX_LINE_LENGTH:
                lines.append(line)
                line = token
            else:
                line = f"{line} {token}"
        lines.append(line)

    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str | Path) -> Path:
    """Save a canvas as a plain PPM file.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .ppm).

    Returns:
        The path written.
    """
    path = Path(filepath)
    path.write_text(canvas_to_ppm(canvas), encoding="ascii")
    logger.info("Wrote %dx%d PPM to %s", canvas.width, canvas.height, path)
    return path


def save_png(canvas: Canvas, filepath: str | Path, *, gamma: float = 1.0) -> Path:
    """Save a canvas as an 8-bit PNG file.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .png).
        gamma: Gamma correction value (default 1.0; use 2.2 for sRGB).

    Returns:
        The path written.
    """
    path = Path(filepath)
    image_uint8 = image_to_uint8(canvas.to_numpy(), gamma=gamma)

    # Save using Pillow
    pil_image = PILImage.fromarray(image_uint8)
    pil_image.save(path)
    logger.info("Wrote %dx%d PNG to %s", canvas.width, canvas.height, path)
    return path


def compute_rmse(
    image_a: npt.NDArray[np.floating[npt.NBitBase]],
    image_b: npt.NDArray[np.floating[npt.NBitBase]],
) -> float:
    """Compute root mean squared error between two images.

    Args:
        image_a: First image array.
        image_b: Second image array (must have same shape as image_a).

    Returns:
        RMSE value (lower is more similar).

    Raises:
        ValueError: If image shapes don't match.
    """
    if image_a.shape != image_b.shape:
        raise ValueError(
            f"Image shapes must match: {image_a.shape} vs {image_b.shape}"
        )

    diff = image_a.astype(np.float64) - image_b.astype(np.float64)
    return float(np.sqrt(np.mean(diff**2)))


__all__ = [
    "canvas_to_ppm",
    "compute_rmse",
    "image_to_uint8",
    "save_png",
    "save_ppm",
]
