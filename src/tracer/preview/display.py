"""Matplotlib preview of rendered canvases.

Phong shading never clamps, so bright specular highlights leave channels
above 1.0 in the canvas. A preview either clips them ("clamp", the same
conversion the exporters use) or compresses them with Reinhard's operator so
highlight detail survives, then optionally gamma encodes.

Example:
    >>> from src.tracer.preview.display import show_canvas
    >>> show_canvas(canvas, tone_map="reinhard", gamma=2.2)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from src.tracer.preview.canvas import Canvas


ToneMapMethod = Literal["clamp", "reinhard"]


def tone_map_reinhard(
    image: npt.NDArray[np.float32],
) -> npt.NDArray[np.float32]:
    """Compress unbounded channels into [0, 1) with c / (1 + c).

    Negative channels are treated as 0.
    """
    positive = np.maximum(image, 0.0)
    return (positive / (1.0 + positive)).astype(np.float32)


def apply_gamma(
    image: npt.NDArray[np.float32],
    gamma: float = 2.2,
) -> npt.NDArray[np.float32]:
    """Gamma encode an image with c ** (1 / gamma).

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Display gamma; 2.2 approximates sRGB.

    Returns:
        The encoded image, clipped to [0, 1]. The input array itself is
        returned unchanged when gamma is 1.0.
    """
    if gamma == 1.0:
        return image
    return np.power(np.clip(image, 0.0, 1.0), 1.0 / gamma).astype(np.float32)


def count_clipped(image: npt.NDArray[np.float32]) -> int:
    """Number of pixels with at least one channel above 1.0."""
    return int(np.count_nonzero(np.any(image > 1.0, axis=-1)))


def prepare_display_image(
    image: npt.NDArray[np.float32],
    tone_map: ToneMapMethod = "clamp",
    gamma: float = 1.0,
) -> npt.NDArray[np.float32]:
    """Map a linear canvas image to displayable [0, 1] values.

    Args:
        image: Unclamped linear image array of shape (H, W, 3).
        tone_map: "clamp" clips highlights, "reinhard" compresses them.
        gamma: Display gamma applied after tone mapping.

    Returns:
        A float32 image in [0, 1].

    Raises:
        ValueError: If tone_map is not a known method.
    """
    if tone_map == "reinhard":
        mapped = tone_map_reinhard(image)
    elif tone_map == "clamp":
        mapped = np.clip(image, 0.0, 1.0)
    else:
        raise ValueError(f"Unknown tone mapping method: {tone_map}")

    return np.clip(apply_gamma(mapped, gamma), 0.0, 1.0).astype(np.float32)


def show_canvas(
    canvas: Canvas,
    *,
    tone_map: ToneMapMethod = "clamp",
    gamma: float = 1.0,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 8),
    block: bool = True,
) -> None:
    """Open a Matplotlib window showing the canvas.

    The default title gives the canvas size and, when highlights were
    clipped or compressed, how many pixels exceeded 1.0.

    Args:
        canvas: The canvas to display.
        tone_map: How to bring highlights into range ("clamp" or "reinhard").
        gamma: Display gamma (default 1.0, linear).
        title: Figure title; generated when None.
        figsize: Figure size in inches (width, height).
        block: Whether to block until the window is closed.
    """
    import matplotlib.pyplot as plt

    linear = canvas.to_numpy(clamp=False)
    display_image = prepare_display_image(linear, tone_map=tone_map, gamma=gamma)

    if title is None:
        title = f"{canvas.width}x{canvas.height}"
        clipped = count_clipped(linear)
        if clipped:
            title += f", {clipped} px over 1.0 ({tone_map})"

    _, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(display_image, interpolation="nearest")
    ax.set_title(title)
    ax.axis("off")

    plt.tight_layout()
    plt.show(block=block)


__all__ = [
    "ToneMapMethod",
    "apply_gamma",
    "count_clipped",
    "prepare_display_image",
    "show_canvas",
    "tone_map_reinhard",
]
