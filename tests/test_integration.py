"""Integration tests for the end-to-end rendering pipeline.

These tests run scene creation, rendering and export together at very low
resolution, so they stay fast while still exercising every stage.

Note: Imports are done inside test methods to avoid Taichi initialization issues.
The conftest.py fixture initializes Taichi before tests run.
"""

from __future__ import annotations

import math

import numpy as np
import pytest


class TestSphereSceneIntegration:
    """Integration tests for the example sphere scene."""

    def test_render_png(self, tmp_path) -> None:
        """Test the example script renders and saves a PNG."""
        from PIL import Image

        from examples.render_spheres import RenderConfig, render_spheres

        config = RenderConfig(
            width=16,
            height=8,
            output_path=str(tmp_path / "spheres.png"),
            quiet=True,
        )
        path = render_spheres(config)

        assert path.exists()
        with Image.open(path) as img:
            assert img.size == (16, 8)
            pixels = np.asarray(img)
        # Something in the scene is lit
        assert pixels.max() > 0

    def test_render_ppm(self, tmp_path) -> None:
        """Test the example script writes a PPM when asked."""
        from examples.render_spheres import RenderConfig, render_spheres

        config = RenderConfig(
            width=6,
            height=4,
            output_path=str(tmp_path / "spheres.ppm"),
            quiet=True,
        )
        path = render_spheres(config)

        lines = path.read_text(encoding="ascii").splitlines()
        assert lines[:3] == ["P3", "6 4", "255"]

    def test_unsupported_output(self, tmp_path) -> None:
        """Test an unknown output suffix raises ValueError."""
        from examples.render_spheres import RenderConfig, render_spheres

        config = RenderConfig(width=2, height=2, output_path=str(tmp_path / "out.bmp"), quiet=True)
        with pytest.raises(ValueError):
            render_spheres(config)

    def test_scene_contents(self) -> None:
        """Test the example scene has a floor, three spheres and a light."""
        from examples.render_spheres import build_scene

        world = build_scene()
        assert len(world.shapes) == 4
        assert len(world.lights) == 1


class TestPipeline:
    """Tests chaining the library stages directly."""

    def test_render_then_export(self, default_world, tmp_path) -> None:
        """Test a render saved as PNG reads back to the canvas values."""
        from PIL import Image

        from src.tracer.camera.camera import Camera
        from src.tracer.core.renderer import render
        from src.tracer.core.transformation import view_transform
        from src.tracer.core.tuple import point, vector
        from src.tracer.preview.export import compute_rmse, image_to_uint8, save_png

        camera = Camera(
            9,
            9,
            math.pi / 2,
            view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0)),
        )
        canvas = render(camera, default_world)
        path = save_png(canvas, tmp_path / "world.png")

        with Image.open(path) as img:
            saved = np.asarray(img)
        expected = image_to_uint8(canvas.to_numpy())
        assert compute_rmse(saved.astype(np.float64), expected.astype(np.float64)) == 0.0

        # Corners miss both spheres
        assert saved[0, 0].tolist() == [0, 0, 0]
        # The center hits the outer sphere
        assert saved[4, 4].tolist() != [0, 0, 0]
