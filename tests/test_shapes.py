"""Tests for geometric shapes."""

import pytest
from prismtrace.vec3 import Vec3, Point3, Color
from prismtrace.ray import Ray
from prismtrace.shapes import EPSILON, Sphere, Plane, Intersection
from prismtrace.materials import Material


class TestSphere:
    """Test Sphere intersection."""

    def test_creation(self):
        mat = Material(Color(1, 0, 0))
        sphere = Sphere(Point3(0, 0, 5), 1.0, mat)
        assert sphere.center == Point3(0, 0, 5)
        assert sphere.radius == 1.0
        assert sphere.material is mat

    def test_invalid_radius(self):
        with pytest.raises(ValueError):
            Sphere(Point3(0, 0, 0), 0.0)
        with pytest.raises(ValueError):
            Sphere(Point3(0, 0, 0), -1.0)

    def test_hit_through_center(self):
        mat = Material(Color(1, 0, 0))
        sphere = Sphere(Point3(0, 0, 5), 1.0, mat)
        hit = sphere.intersect(Ray(Point3(0, 0, 0), Vec3(0, 0, 1)))

        assert hit is not None
        assert hit.distance == pytest.approx(4.0)
        assert hit.point == Point3(0, 0, 4)
        assert hit.normal == Vec3(0, 0, -1)
        assert hit.material is mat

    def test_miss(self):
        sphere = Sphere(Point3(0, 0, 5), 1.0)
        ray = Ray(Point3(0, 5, 0), Vec3(0, 0, 1))  # Passes above the sphere
        assert sphere.intersect(ray) is None

    def test_pointing_away(self):
        sphere = Sphere(Point3(0, 0, 5), 1.0)
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, -1))
        assert sphere.intersect(ray) is None

    def test_hit_from_inside(self):
        """A ray starting inside returns the far root."""
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        hit = sphere.intersect(Ray(Point3(0, 0, 0), Vec3(0, 0, 1)))

        assert hit is not None
        assert hit.distance == pytest.approx(1.0)
        assert hit.normal == Vec3(0, 0, 1)

    def test_origin_on_surface_uses_far_root(self):
        """The near root at t=0 is below EPSILON and skipped."""
        sphere = Sphere(Point3(0, 0, 5), 1.0)
        hit = sphere.intersect(Ray(Point3(0, 0, 4), Vec3(0, 0, 1)))

        assert hit is not None
        assert hit.distance == pytest.approx(2.0)
        assert hit.point == Point3(0, 0, 6)

    def test_origin_on_surface_leaving(self):
        sphere = Sphere(Point3(0, 0, 5), 1.0)
        assert sphere.intersect(Ray(Point3(0, 0, 4), Vec3(0, 0, -1))) is None

    def test_normal_is_unit_length(self):
        sphere = Sphere(Point3(0, 0, 5), 2.0)
        hit = sphere.intersect(Ray(Point3(0.5, 0.3, 0), Vec3(0, 0, 1)))

        assert hit is not None
        assert hit.normal.length() == pytest.approx(1.0)
        assert hit.distance >= EPSILON


class TestPlane:
    """Test one-sided Plane intersection."""

    def test_normal_is_normalized(self):
        plane = Plane(Point3(0, 0, 0), Vec3(0, 3, 0))
        assert plane.normal == Vec3(0, 1, 0)

    def test_zero_normal(self):
        with pytest.raises(ValueError):
            Plane(Point3(0, 0, 0), Vec3(0, 0, 0))

    def test_hit_facing(self):
        mat = Material(Color(0, 1, 0))
        plane = Plane(Point3(0, 0, 6), Vec3(0, 0, -1), mat)
        hit = plane.intersect(Ray(Point3(0, 0, 0), Vec3(0, 0, 1)))

        assert hit is not None
        assert hit.distance == pytest.approx(6.0)
        assert hit.point == Point3(0, 0, 6)
        assert hit.normal == Vec3(0, 0, -1)
        assert hit.material is mat

    def test_hit_oblique(self):
        plane = Plane(Point3(0, -1, 0), Vec3(0, 1, 0))
        direction = Vec3(0, -1, 1).normalize()
        hit = plane.intersect(Ray(Point3(0, 0, 0), direction))

        assert hit is not None
        assert hit.point == Point3(0, -1, 1)

    def test_back_side_is_invisible(self):
        plane = Plane(Point3(0, 0, 6), Vec3(0, 0, 1))
        assert plane.intersect(Ray(Point3(0, 0, 0), Vec3(0, 0, 1))) is None

    def test_parallel_ray(self):
        plane = Plane(Point3(0, -1, 0), Vec3(0, 1, 0))
        assert plane.intersect(Ray(Point3(0, 0, 0), Vec3(1, 0, 0))) is None

    def test_plane_behind_ray(self):
        plane = Plane(Point3(0, 0, -6), Vec3(0, 0, -1))
        assert plane.intersect(Ray(Point3(0, 0, 0), Vec3(0, 0, 1))) is None


class TestIntersection:
    """Test the Intersection record."""

    def test_is_immutable(self):
        hit = Intersection(Point3(0, 0, 1), 1.0, Vec3(0, 0, -1))
        with pytest.raises(Exception):
            hit.distance = 2.0
