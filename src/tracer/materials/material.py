"""Surface material and the Phong local illumination model.

A Material holds a surface color and four reflectance weights. lighting()
combines them with a point light into the color seen from a given eye
direction:

    effective = material.color * light.intensity
    ambient   = effective * ambient
    diffuse   = effective * diffuse * (light_v . normal_v)
    specular  = light.intensity * specular * (reflect_v . eye_v) ^ shininess

The diffuse and specular terms drop to black when the light is behind the
surface (light_v . normal_v < 0); the specular term also drops to black when
the reflection points away from the eye (reflect_v . eye_v <= 0).

Results are not clamped. Channels above 1.0 are expected for bright
highlights and are clamped by the pixel conversion.

Example:
    >>> from src.tracer.core.color import Color
    >>> from src.tracer.core.tuple import point, vector
    >>> from src.tracer.materials.light import PointLight
    >>> from src.tracer.materials.material import Material
    >>> light = PointLight(point(0, 0, -10), Color.white())
    >>> Material().lighting(light, point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1))
    Color(r=1.9, g=1.9, b=1.9)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.tracer.core.color import Color
from src.tracer.core.tuple import Tuple
from src.tracer.materials.light import PointLight

DEFAULT_AMBIENT = 0.1
DEFAULT_DIFFUSE = 0.9
DEFAULT_SPECULAR = 0.9
DEFAULT_SHININESS = 200.0


@dataclass(frozen=True)
class Material:
    """Phong reflectance parameters of a surface.

    Attributes:
        color: Surface color.
        ambient: Fraction of light reflected regardless of orientation.
        diffuse: Weight of the matte, orientation-dependent reflection.
        specular: Weight of the highlight.
        shininess: Highlight exponent; larger values give smaller highlights.

    Raises:
        ValueError: If a weight is negative or shininess is not positive.
    """

    color: Color = field(default_factory=Color.white)
    ambient: float = DEFAULT_AMBIENT
    diffuse: float = DEFAULT_DIFFUSE
    specular: float = DEFAULT_SPECULAR
    shininess: float = DEFAULT_SHININESS

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"Material {name} must be non-negative, got {value}")
        if self.shininess <= 0.0:
            raise ValueError(f"Material shininess must be positive, got {self.shininess}")

    def lighting(
        self,
        light: PointLight,
        point: Tuple,
        eye_v: Tuple,
        normal_v: Tuple,
    ) -> Color:
        """Shade a surface point lit by one light, seen along eye_v.

        Args:
            light: The light illuminating the point.
            point: World-space point being shaded.
            eye_v: Unit vector from the point toward the eye.
            normal_v: Unit surface normal at the point.

        Returns:
            The sum of the ambient, diffuse and specular contributions.
        """
        effective_color = self.color * light.intensity
        light_v = (light.position - point).normalize()
        ambient = effective_color * self.ambient

        light_dot_normal = light_v.dot(normal_v)
        if light_dot_normal < 0.0:
            # Light is on the far side of the surface
            return ambient

        diffuse = effective_color * self.diffuse * light_dot_normal

        reflect_v = (-light_v).reflect(normal_v)
        reflect_dot_eye = reflect_v.dot(eye_v)
        if reflect_dot_eye <= 0.0:
            specular = Color.black()
        else:
            factor = reflect_dot_eye**self.shininess
            specular = light.intensity * self.specular * factor

        return ambient + diffuse + specular


def lighting(
    material: Material,
    light: PointLight,
    point: Tuple,
    eye_v: Tuple,
    normal_v: Tuple,
) -> Color:
    """Functional form of Material.lighting."""
    return material.lighting(light, point, eye_v, normal_v)


__all__ = [
    "DEFAULT_AMBIENT",
    "DEFAULT_DIFFUSE",
    "DEFAULT_SHININESS",
    "DEFAULT_SPECULAR",
    "Material",
    "lighting",
]
