"""Scene module: the World container and per-ray shading."""

from .world import World

__all__ = ["World"]
