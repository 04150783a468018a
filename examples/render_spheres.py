#!/usr/bin/env python3
"""Render a small scene of Phong-shaded spheres.

This script demonstrates end-to-end rendering with the tracer core. It builds
a scene of transformed spheres, places a camera with a view transform, renders
every pixel, and exports the canvas.

Usage:
    python -m examples.render_spheres [options]

Options:
    --width WIDTH       Image width in pixels (default: 200)
    --height HEIGHT     Image height in pixels (default: 100)
    --fov DEGREES       Horizontal field of view in degrees (default: 60)
    --output OUTPUT     Output file path, .png or .ppm (default: spheres.png)
    --gamma GAMMA       Gamma correction for PNG output (default: 1.0)
    --quiet             Suppress progress output
    --verbose           Enable debug logging

Example:
    python -m examples.render_spheres --width 400 --height 200 --output spheres.ppm
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import taichi as ti

if TYPE_CHECKING:
    from src.tracer.scene.world import World


@dataclass
class RenderConfig:
    """Parameters for rendering the sphere scene.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        fov_degrees: Field of view of the longer image side, in degrees.
        output_path: Output file; the suffix selects PNG or PPM.
        gamma: Gamma correction applied to PNG output.
        quiet: Suppress progress output.
    """

    width: int = 200
    height: int = 100
    fov_degrees: float = 60.0
    output_path: str = "spheres.png"
    gamma: float = 1.0
    quiet: bool = False


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a scene of Phong-shaded spheres.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=200,
        help="Image width in pixels (default: 200)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=100,
        help="Image height in pixels (default: 100)",
    )
    parser.add_argument(
        "--fov",
        type=float,
        default=60.0,
        help="Field of view in degrees (default: 60)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="spheres.png",
        help="Output file path, .png or .ppm (default: spheres.png)",
    )
    parser.add_argument(
        "--gamma",
        type=float,
        default=1.0,
        help="Gamma correction for PNG output (default: 1.0)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def build_scene() -> World:
    """Create the demo world: a flattened-sphere floor and three spheres."""
    from src.tracer.core.color import Color
    from src.tracer.core.transformation import Transformation, scaling, translation
    from src.tracer.core.tuple import point
    from src.tracer.geometry.sphere import Sphere
    from src.tracer.materials.light import PointLight
    from src.tracer.materials.material import Material
    from src.tracer.scene.world import World

    floor = Sphere(
        transform=scaling(10.0, 0.01, 10.0),
        material=Material(color=Color(1.0, 0.9, 0.9), specular=0.0),
    )
    middle = Sphere(
        transform=translation(-0.5, 1.0, 0.5),
        material=Material(color=Color(0.1, 1.0, 0.5), diffuse=0.7, specular=0.3),
    )
    right = Sphere(
        transform=Transformation().scale(0.5, 0.5, 0.5).translate(1.5, 0.5, -0.5).matrix,
        material=Material(color=Color(0.5, 1.0, 0.1), diffuse=0.7, specular=0.3),
    )
    left = Sphere(
        transform=Transformation().scale(0.33, 0.33, 0.33).translate(-1.5, 0.33, -0.75).matrix,
        material=Material(color=Color(1.0, 0.8, 0.1), diffuse=0.7, specular=0.3),
    )
    light = PointLight(point(-10.0, 10.0, -10.0), Color.white())

    return World(shapes=[floor, middle, right, left], lights=[light])


def render_spheres(config: RenderConfig) -> Path:
    """Render the sphere scene and save to file.

    Args:
        config: Render parameters.

    Returns:
        Path to the saved image file.

    Raises:
        ValueError: If the output suffix is neither .png nor .ppm.
    """
    # Lazy imports to allow Taichi initialization first
    from src.tracer.camera.camera import Camera
    from src.tracer.core.renderer import render
    from src.tracer.core.transformation import view_transform
    from src.tracer.core.tuple import point, vector
    from src.tracer.preview.export import save_png, save_ppm

    output_file = Path(config.output_path)
    suffix = output_file.suffix.lower()
    if suffix not in (".png", ".ppm"):
        raise ValueError(f"Unsupported output format: {output_file.suffix}")

    if not config.quiet:
        print(f"Creating sphere scene ({config.width}x{config.height})...")

    world = build_scene()
    camera = Camera(
        hsize=config.width,
        vsize=config.height,
        field_of_view=math.radians(config.fov_degrees),
        transform=view_transform(point(0.0, 1.5, -5.0), point(0.0, 1.0, 0.0), vector(0.0, 1.0, 0.0)),
    )

    start_time = time.time()

    def progress_callback(current: int, target: int) -> None:
        if not config.quiet:
            progress_pct = (current / target) * 100 if target > 0 else 0
            print(
                f"\r  Progress: {current}/{target} rows ({progress_pct:.1f}%)",
                end="",
                flush=True,
            )

    canvas = render(camera, world, callback=progress_callback)

    if not config.quiet:
        print()  # Newline after progress

    if suffix == ".ppm":
        save_ppm(canvas, output_file)
    else:
        save_png(canvas, output_file, gamma=config.gamma)

    total_time = time.time() - start_time
    if not config.quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    # The tracer runs in Python scope; Taichi only backs the canvas
    ti.init(arch=ti.cpu)

    config = RenderConfig(
        width=args.width,
        height=args.height,
        fov_degrees=args.fov,
        output_path=args.output,
        gamma=args.gamma,
        quiet=args.quiet,
    )

    try:
        render_spheres(config)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
