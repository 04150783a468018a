"""Point light source.

A point light has a position and an intensity (its color and brightness).
It has no size and no distance attenuation.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.tracer.core.color import Color
from src.tracer.core.tuple import ORIGIN, Tuple


@dataclass(frozen=True)
class PointLight:
    """A light emitting from a single point.

    Attributes:
        position: World-space position of the light (a point).
        intensity: Color and brightness of the emitted light.
    """

    position: Tuple = field(default_factory=lambda: ORIGIN)
    intensity: Color = field(default_factory=Color.white)

    def __post_init__(self) -> None:
        if not self.position.is_point:
            raise ValueError(f"Light position must be a point, got w={self.position.w}")


__all__ = ["PointLight"]
