"""Tests for the Scene container."""

import pytest
from prismtrace.vec3 import Vec3, Point3, Color
from prismtrace.ray import Ray
from prismtrace.shapes import Sphere, Plane
from prismtrace.materials import Material
from prismtrace.lights import PointLight
from prismtrace.scene import Scene, compute_ray_intersection


class TestScene:
    """Test Scene bookkeeping."""

    def test_empty(self):
        scene = Scene()
        assert len(scene) == 0
        assert scene.lights == []

    def test_add_and_clear(self):
        scene = Scene()
        scene.add_object(Sphere(Point3(0, 0, 5), 1.0))
        scene.add_light(PointLight(Point3(0, 5, 0)))
        assert len(scene) == 1
        assert len(scene.lights) == 1

        scene.clear()
        assert len(scene) == 0
        assert len(scene.lights) == 0

    def test_iteration_order(self):
        a = Sphere(Point3(0, 0, 5), 1.0)
        b = Sphere(Point3(0, 0, 9), 1.0)
        scene = Scene([a, b])
        assert list(scene) == [a, b]


class TestNearestHit:
    """Test compute_ray_intersection."""

    def test_empty_scene(self):
        ray = Ray(Point3(0, 0, 0), Vec3(0, 0, 1))
        assert compute_ray_intersection(ray, Scene()) is None

    def test_nearest_wins(self):
        near = Material(Color(1, 0, 0))
        far = Material(Color(0, 0, 1))
        scene = Scene()
        scene.add_object(Sphere(Point3(0, 0, 10), 1.0, far))
        scene.add_object(Sphere(Point3(0, 0, 5), 1.0, near))

        hit = compute_ray_intersection(Ray(Point3(0, 0, 0), Vec3(0, 0, 1)), scene)
        assert hit is not None
        assert hit.distance == pytest.approx(4.0)
        assert hit.material is near

    def test_sphere_in_front_of_plane(self):
        sphere_mat = Material(Color(1, 0, 0))
        scene = Scene()
        scene.add_object(Plane(Point3(0, 0, 10), Vec3(0, 0, -1), Material(Color(0, 1, 0))))
        scene.add_object(Sphere(Point3(0, 0, 5), 1.0, sphere_mat))

        hit = compute_ray_intersection(Ray(Point3(0, 0, 0), Vec3(0, 0, 1)), scene)
        assert hit.material is sphere_mat

    def test_tie_keeps_first_object(self):
        first = Material(Color(1, 0, 0))
        second = Material(Color(0, 1, 0))
        scene = Scene()
        scene.add_object(Sphere(Point3(0, 0, 5), 1.0, first))
        scene.add_object(Sphere(Point3(0, 0, 5), 1.0, second))

        hit = compute_ray_intersection(Ray(Point3(0, 0, 0), Vec3(0, 0, 1)), scene)
        assert hit.material is first

    def test_miss_everything(self):
        scene = Scene([Sphere(Point3(0, 0, 5), 1.0)])
        assert compute_ray_intersection(Ray(Point3(0, 0, 0), Vec3(0, 1, 0)), scene) is None
