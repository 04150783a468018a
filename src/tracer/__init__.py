"""Phong ray tracer core.

This package traces rays through a scene of transformed spheres and shades
the nearest hit with the Phong illumination model:
- Homogeneous tuple algebra for points and vectors
- 4x4 matrices with cofactor-expansion inverse
- Composable affine transformations
- Ray-sphere intersection with object-space/world-space transforms
- Phong lighting from point lights

Subpackages:
    core: Tuples, colors, matrices, transformations, rays, intersections, renderer
    geometry: Shape variants and intersection algorithms
    materials: Surface materials, point lights and Phong lighting
    scene: World container and per-ray shading
    camera: Pinhole camera with view transform
    preview: Canvas pixel buffer, image export and preview display
"""

__version__ = "0.1.0"
