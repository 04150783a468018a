"""RGB color values produced by shading.

Colors are linear, unclamped floating-point triples. Shading may produce
channels above 1.0; clamping belongs to the pixel conversion in
src.tracer.preview.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.tracer.core.epsilon import COLOR_EPSILON, approx_eq


@dataclass(frozen=True, eq=False)
class Color:
    """A linear RGB color.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
    """

    r: float
    g: float
    b: float

    @classmethod
    def black(cls) -> Color:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> Color:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def red(cls) -> Color:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def green(cls) -> Color:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def blue(cls) -> Color:
        return cls(0.0, 0.0, 1.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            approx_eq(self.r, other.r, COLOR_EPSILON)
            and approx_eq(self.g, other.g, COLOR_EPSILON)
            and approx_eq(self.b, other.b, COLOR_EPSILON)
        )

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Color | float) -> Color:
        """Scale by a number, or take the Hadamard product with a Color."""
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, (int, float)):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Color:
        return self.__mul__(other)

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def clamped(self) -> Color:
        """Return a copy with every channel clamped to [0, 1]."""
        return Color(*(min(max(c, 0.0), 1.0) for c in self))
