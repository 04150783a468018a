"""Camera module for view and ray generation.

Components:
    camera: Pinhole camera mapping canvas pixels to world-space rays

Ray generation uses pixel coordinates with (0, 0) at the top-left corner;
rays pass through pixel centers.
"""

from .camera import Camera

__all__ = ["Camera"]
