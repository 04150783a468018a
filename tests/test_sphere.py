"""Unit tests for sphere intersection and normals."""

import math

import pytest


class TestSphereIntersect:
    """Tests for ray-sphere intersection."""

    def test_two_points(self, axis_ray):
        """Test a ray through the center hits twice."""
        from src.tracer.geometry.sphere import Sphere

        s = Sphere()
        xs = s.intersect(axis_ray)
        assert [x.t for x in xs] == pytest.approx([4.0, 6.0])

    def test_tangent(self):
        """Test a tangent ray yields two equal intersections."""
        from src.tracer.core.ray import Ray
        from src.tracer.core.tuple import point, vector
        from src.tracer.geometry.sphere import Sphere

        xs = Sphere().intersect(Ray(point(0, 1, -5), vector(0, 0, 1)))
        assert [x.t for x in xs] == pytest.approx([5.0, 5.0])

    def test_miss(self):
        """Test a ray passing above the sphere."""
        from src.tracer.core.ray import Ray
        from src.tracer.core.tuple import point, vector
        from src.tracer.geometry.sphere import Sphere

        assert Sphere().intersect(Ray(point(0, 2, -5), vector(0, 0, 1))) == []

    def test_origin_inside(self):
        """Test a ray starting inside the sphere."""
        from src.tracer.core.ray import Ray
        from src.tracer.core.tuple import point, vector
        from src.tracer.geometry.sphere import Sphere

        xs = Sphere().intersect(Ray(point(0, 0, 0), vector(0, 0, 1)))
        assert [x.t for x in xs] == pytest.approx([-1.0, 1.0])

    def test_sphere_behind(self):
        """Test a sphere entirely behind the ray."""
        from src.tracer.core.ray import Ray
        from src.tracer.core.tuple import point, vector
        from src.tracer.geometry.sphere import Sphere

        xs = Sphere().intersect(Ray(point(0, 0, 5), vector(0, 0, 1)))
        assert [x.t for x in xs] == pytest.approx([-6.0, -4.0])

    def test_intersections_reference_the_sphere(self, axis_ray):
        """Test each intersection carries the shape that produced it."""
        from src.tracer.geometry.sphere import Sphere

        s = Sphere()
        xs = s.intersect(axis_ray)
        assert len(xs) == 2
        assert xs[0].object is s
        assert xs[1].object is s

    def test_scaled_sphere(self, axis_ray):
        """Test intersecting a scaled sphere."""
        from src.tracer.core.transformation import scaling
        from src.tracer.geometry.sphere import Sphere

        s = Sphere(transform=scaling(2, 2, 2))
        assert [x.t for x in s.intersect(axis_ray)] == pytest.approx([3.0, 7.0])

    def test_translated_sphere(self, axis_ray):
        """Test a sphere moved out of the ray's path."""
        from src.tracer.core.transformation import translation
        from src.tracer.geometry.sphere import Sphere

        s = Sphere(transform=translation(5, 0, 0))
        assert s.intersect(axis_ray) == []

    def test_singular_transform_never_hit(self, axis_ray):
        """Test that a sphere with a singular transform is never hit."""
        from src.tracer.core.transformation import scaling
        from src.tracer.geometry.sphere import Sphere

        s = Sphere(transform=scaling(0, 0, 0))
        assert s.intersect(axis_ray) == []

    def test_zero_direction_misses(self):
        """Test that a ray without direction hits nothing."""
        from src.tracer.core.ray import Ray
        from src.tracer.core.tuple import point, vector
        from src.tracer.geometry.sphere import Sphere

        assert Sphere().intersect(Ray(point(0, 0, -5), vector(0, 0, 0))) == []


class TestSphereNormal:
    """Tests for surface normals."""

    @pytest.mark.parametrize(
        "p, expected",
        [
            ((1, 0, 0), (1, 0, 0)),
            ((0, 1, 0), (0, 1, 0)),
            ((0, 0, 1), (0, 0, 1)),
        ],
    )
    def test_normal_on_axis(self, p, expected):
        """Test normals at points on the axes."""
        from src.tracer.core.tuple import point, vector
        from src.tracer.geometry.sphere import Sphere

        assert Sphere().normal_at(point(*p)) == vector(*expected)

    def test_normal_nonaxial(self):
        """Test the normal at a non-axial point is normalized."""
        from src.tracer.core.tuple import point, vector
        from src.tracer.geometry.sphere import Sphere

        k = math.sqrt(3) / 3
        n = Sphere().normal_at(point(k, k, k))
        assert n == vector(k, k, k)
        assert n == n.normalize()
        assert n.is_vector

    def test_normal_translated(self):
        """Test the normal on a translated sphere."""
        from src.tracer.core.transformation import translation
        from src.tracer.core.tuple import point, vector
        from src.tracer.geometry.sphere import Sphere

        s = Sphere(transform=translation(0, 1, 0))
        n = s.normal_at(point(0, 1.70711, -0.70711))
        assert n == vector(0, 0.70711, -0.70711)

    def test_normal_transformed(self):
        """Test the normal on a scaled and rotated sphere."""
        from src.tracer.core.transformation import rotation_z, scaling
        from src.tracer.core.tuple import point, vector
        from src.tracer.geometry.sphere import Sphere

        s = Sphere(transform=scaling(1, 0.5, 1) @ rotation_z(math.pi / 5))
        half_root = math.sqrt(2) / 2
        n = s.normal_at(point(0, half_root, -half_root))
        assert n == vector(0, 0.97014, -0.24254)

    def test_normal_singular_transform_falls_back_to_identity(self):
        """Test a degenerate transform yields the untransformed normal."""
        from src.tracer.core.transformation import scaling
        from src.tracer.core.tuple import point, vector
        from src.tracer.geometry.sphere import Sphere

        s = Sphere(transform=scaling(0, 0, 0))
        assert s.normal_at(point(1, 0, 0)) == vector(1, 0, 0)


class TestSphereValue:
    """Tests for the sphere's defaults and copy methods."""

    def test_defaults(self):
        """Test a new sphere has the identity transform and default material."""
        from src.tracer.core.matrix import IDENTITY
        from src.tracer.geometry.sphere import Sphere
        from src.tracer.materials.material import Material

        s = Sphere()
        assert s.transform == IDENTITY
        assert s.material == Material()

    def test_with_transform(self):
        """Test replacing the transform returns a new sphere."""
        from src.tracer.core.matrix import IDENTITY
        from src.tracer.core.transformation import translation
        from src.tracer.geometry.sphere import Sphere

        s = Sphere()
        moved = s.with_transform(translation(2, 3, 4))
        assert moved.transform == translation(2, 3, 4)
        assert s.transform == IDENTITY

    def test_with_material(self):
        """Test replacing the material."""
        from src.tracer.geometry.sphere import Sphere
        from src.tracer.materials.material import Material

        m = Material(ambient=1.0)
        s = Sphere().with_material(m)
        assert s.material == m
        assert s.material.ambient == 1.0

    def test_transformed_composes_after_current(self):
        """Test that transformed() places the new matrix after the existing one."""
        from src.tracer.core.transformation import scaling, translation
        from src.tracer.geometry.sphere import Sphere

        s = Sphere(transform=scaling(2, 2, 2)).transformed(translation(1, 0, 0))
        assert s.transform == translation(1, 0, 0) @ scaling(2, 2, 2)

    def test_unhashable(self):
        """Test spheres compare by value and cannot be hashed."""
        from src.tracer.geometry.shape import ShapeBase
        from src.tracer.geometry.sphere import Sphere

        assert ShapeBase.__hash__ is None
        assert Sphere.__hash__ is None
        with pytest.raises(TypeError, match="unhashable type: 'Sphere'"):
            hash(Sphere())


class TestShapeDispatch:
    """Tests for dispatch over the closed set of shape variants."""

    def test_dispatch_matches_sphere(self, axis_ray):
        """Test that dispatch functions forward to the sphere."""
        from src.tracer.core.tuple import point, vector
        from src.tracer.geometry.sphere import Sphere
        from src.tracer.geometry.variants import (
            intersect_shape,
            is_shape,
            material_of,
            normal_at_shape,
        )

        s = Sphere()
        assert is_shape(s)
        assert [x.t for x in intersect_shape(s, axis_ray)] == pytest.approx([4.0, 6.0])
        assert normal_at_shape(s, point(1, 0, 0)) == vector(1, 0, 0)
        assert material_of(s) is s.material

    def test_dispatch_rejects_unknown(self, axis_ray):
        """Test that non-shapes raise TypeError."""
        from src.tracer.geometry.variants import intersect_shape, is_shape, material_of

        assert not is_shape("sphere")
        with pytest.raises(TypeError):
            intersect_shape(object(), axis_ray)
        with pytest.raises(TypeError):
            material_of(42)
