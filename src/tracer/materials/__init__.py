"""Materials module for surface reflectance and lighting.

Components:
    material: Phong material parameters and the lighting function
    light: Point light source
"""

from .light import PointLight
from .material import Material, lighting

__all__ = [
    "Material",
    "PointLight",
    "lighting",
]
