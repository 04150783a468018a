"""Unit tests for Ray data structure."""

import pytest


class TestRay:
    """Tests for the Ray class."""

    def test_ray_creation(self):
        """Test that a ray stores its origin and direction."""
        from src.tracer.core.ray import Ray
        from src.tracer.core.tuple import point, vector

        origin = point(1, 2, 3)
        direction = vector(4, 5, 6)
        ray = Ray(origin, direction)
        assert ray.origin == origin
        assert ray.direction == direction

    @pytest.mark.parametrize(
        "t, expected",
        [
            (0, (2, 3, 4)),
            (1, (3, 3, 4)),
            (-1, (1, 3, 4)),
            (2.5, (4.5, 3, 4)),
        ],
    )
    def test_position(self, t, expected):
        """Test computing a point along the ray."""
        from src.tracer.core.ray import Ray
        from src.tracer.core.tuple import point, vector

        ray = Ray(point(2, 3, 4), vector(1, 0, 0))
        assert ray.position(t) == point(*expected)

    def test_direction_is_not_normalized(self):
        """Test that the ray keeps its direction's length."""
        from src.tracer.core.ray import Ray
        from src.tracer.core.tuple import point, vector

        ray = Ray(point(0, 0, 0), vector(0, 0, 2))
        assert ray.position(1) == point(0, 0, 2)

    def test_ray_is_immutable(self):
        """Test that a ray cannot be modified."""
        from dataclasses import FrozenInstanceError

        from src.tracer.core.ray import Ray
        from src.tracer.core.tuple import point, vector

        ray = Ray(point(0, 0, 0), vector(1, 0, 0))
        with pytest.raises(FrozenInstanceError):
            ray.origin = point(1, 1, 1)


class TestRayTransform:
    """Tests for mapping rays through matrices."""

    def test_translate_ray(self):
        """Test that translation moves the origin only."""
        from src.tracer.core.ray import Ray
        from src.tracer.core.transformation import translation
        from src.tracer.core.tuple import point, vector

        r = Ray(point(1, 2, 3), vector(0, 1, 0))
        r2 = r.transformed(translation(3, 4, 5))
        assert r2.origin == point(4, 6, 8)
        assert r2.direction == vector(0, 1, 0)

    def test_scale_ray(self):
        """Test that scaling affects origin and direction."""
        from src.tracer.core.ray import Ray
        from src.tracer.core.transformation import scaling
        from src.tracer.core.tuple import point, vector

        r = Ray(point(1, 2, 3), vector(0, 1, 0))
        r2 = r.transformed(scaling(2, 3, 4))
        assert r2.origin == point(2, 6, 12)
        assert r2.direction == vector(0, 3, 0)

    def test_original_unchanged(self):
        """Test that transforming returns a new ray."""
        from src.tracer.core.ray import Ray
        from src.tracer.core.transformation import translation
        from src.tracer.core.tuple import point, vector

        r = Ray(point(1, 2, 3), vector(0, 1, 0))
        r.transformed(translation(3, 4, 5))
        assert r.origin == point(1, 2, 3)
