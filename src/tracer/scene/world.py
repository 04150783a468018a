"""World: the shapes and lights that make up a scene.

World.intersect merges the intersections of every shape into one
Intersections collection, which keeps them ascending by t. Choosing which
intersection to shade is left to Intersections.hit().

shade_hit and color_at chain the per-pixel sequence

    intersect -> hit -> prepare_computations -> lighting

summing the contribution of every light. No shadow rays are cast.

Example:
    >>> from src.tracer.core.ray import Ray
    >>> from src.tracer.core.tuple import point, vector
    >>> from src.tracer.scene.world import World
    >>> world = World.default()
    >>> [x.t for x in world.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))]
    [4.0, 4.5, 5.5, 6.0]
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.tracer.core.color import Color
from src.tracer.core.intersection import Computations, Intersections
from src.tracer.core.ray import Ray
from src.tracer.core.transformation import scaling
from src.tracer.core.tuple import point
from src.tracer.geometry.sphere import Sphere
from src.tracer.geometry.variants import Shape, intersect_shape, is_shape, material_of
from src.tracer.materials.light import PointLight
from src.tracer.materials.material import Material, lighting


@dataclass
class World:
    """An ordered collection of shapes and lights.

    Attributes:
        shapes: Shapes in the scene, in insertion order.
        lights: Point lights in the scene, in insertion order.
    """

    shapes: list[Shape] = field(default_factory=list)
    lights: list[PointLight] = field(default_factory=list)

    @classmethod
    def default(cls) -> World:
        """The canonical two-sphere, one-light test scene.

        Returns:
            A world with a white light at (-10, 10, -10), a unit sphere with a
            green-yellow material, and a concentric sphere scaled by 0.5.
        """
        light = PointLight(point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0))
        outer = Sphere().with_material(
            Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)
        )
        inner = Sphere().with_transform(scaling(0.5, 0.5, 0.5))
        return cls(shapes=[outer, inner], lights=[light])

    def add_shape(self, shape: Shape) -> World:
        if not is_shape(shape):
            raise TypeError(f"Unsupported shape type: {type(shape).__name__}")
        self.shapes.append(shape)
        return self

    def add_light(self, light: PointLight) -> World:
        self.lights.append(light)
        return self

    def __contains__(self, item: object) -> bool:
        if isinstance(item, PointLight):
            return item in self.lights
        return item in self.shapes

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a ray with every shape, merged and sorted by t."""
        result = Intersections()
        for shape in self.shapes:
            result.extend(intersect_shape(shape, ray))
        return result

    def shade_hit(self, comps: Computations) -> Color:
        """Color at a prepared intersection, summed over all lights."""
        material = material_of(comps.object)
        color = Color.black()
        for light in self.lights:
            color = color + lighting(material, light, comps.point, comps.eye_v, comps.normal_v)
        return color

    def color_at(self, ray: Ray) -> Color:
        """Color seen along a ray; black when nothing is hit."""
        hit = self.intersect(ray).hit()
        if hit is None:
            return Color.black()
        return self.shade_hit(hit.prepare_computations(ray))


__all__ = ["World"]
