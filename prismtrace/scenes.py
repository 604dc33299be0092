"""
Built-in demo scenes.

- A default scene with three colored spheres over a floor
- A Cornell box with mirror, glass and matte spheres
"""

from __future__ import annotations

from .vec3 import Vec3, Point3, Color
from .camera import Camera
from .materials import Material
from .shapes import Sphere, Plane
from .lights import PointLight, DirectionalLight
from .scene import Scene
from .textures import CheckerTexture

# Edge length of the Cornell box
WALL_SIZE = 5.0


def create_default_scene() -> Scene:
    """Create a simple scene: red, blue and green spheres over a floor plane."""
    scene = Scene()

    scene.add_object(Sphere(Point3(0, 0, 5), 1.0, Material(Color(1, 0.1, 0.1))))
    scene.add_object(Sphere(Point3(-1.2, 0.5, 4), 0.7, Material(Color(0.1, 0.4, 1))))
    scene.add_object(Sphere(Point3(1.2, 0.3, 3.5), 0.5, Material(Color(0.1, 0.8, 0.1))))
    scene.add_object(Plane(Point3(0, -1, 0), Vec3(0, 1, 0), Material(Color(0.8, 0.8, 0.8))))

    scene.add_light(PointLight(Point3(2, 4, 1), Color(1, 1, 1), 1.0))

    return scene


def create_cornell_box() -> Scene:
    """Create a Cornell box scene.

    The box has a checkered, slightly reflective floor, a red left wall and
    a green right wall, and holds a mirror sphere, a glass sphere and a
    small matte sphere.
    """
    scene = Scene()
    half = WALL_SIZE / 2

    floor_texture = CheckerTexture(Color(0.9, 0.9, 0.9), Color(0.2, 0.2, 0.2), 5)
    wall = dict(diffuse=0.8, specular=0.2)

    # Floor
    scene.add_object(Plane(
        Point3(0, -half, 0), Vec3(0, 1, 0),
        Material(Color(0.9, 0.9, 0.9), diffuse=0.7, specular=0.3, reflection=0.2,
                 texture=floor_texture)
    ))
    # Ceiling
    scene.add_object(Plane(Point3(0, half, 0), Vec3(0, -1, 0),
                           Material(Color(0.9, 0.9, 0.9), **wall)))
    # Back wall
    scene.add_object(Plane(Point3(0, 0, half + 5), Vec3(0, 0, -1),
                           Material(Color(0.9, 0.9, 0.9), **wall)))
    # Left wall (red)
    scene.add_object(Plane(Point3(-half, 0, 0), Vec3(1, 0, 0),
                           Material(Color(0.9, 0.1, 0.1), **wall)))
    # Right wall (green)
    scene.add_object(Plane(Point3(half, 0, 0), Vec3(-1, 0, 0),
                           Material(Color(0.1, 0.9, 0.1), **wall)))

    # Mirror sphere
    scene.add_object(Sphere(
        Point3(-half * 0.5, -half + 1, half * 0.5 + 5), 1.0,
        Material(Color(0.9, 0.9, 0.9), diffuse=0.1, specular=0.9, shininess=64,
                 reflection=0.8)
    ))
    # Glass sphere
    scene.add_object(Sphere(
        Point3(half * 0.5, -half + 0.5, half * 0.8 + 5), 0.5,
        Material(Color(0.8, 0.8, 0.9), diffuse=0.1, specular=0.9, shininess=64,
                 reflection=0.1, transparency=0.9, refractive_index=1.5)
    ))
    # Matte sphere
    scene.add_object(Sphere(
        Point3(0, -half + 0.3, half * 1.2 + 5), 0.3,
        Material(Color(0.9, 0.2, 0.1), diffuse=0.9, specular=0.1)
    ))

    # Ceiling light, warm fill from the left and a faint directional fill
    scene.add_light(PointLight(Point3(0, half - 0.5, half * 0.5 + 5), Color(1, 1, 1), 1.0))
    scene.add_light(PointLight(Point3(-half + 1, 0, half * 0.5 + 4), Color(0.9, 0.8, 0.7), 0.5))
    scene.add_light(DirectionalLight(Vec3(0.5, -1, 0.5), Color(0.2, 0.2, 0.3), 0.2))

    return scene


def default_camera(aspect_ratio: float = 16.0 / 9.0) -> Camera:
    """Camera placed in front of the Cornell box, looking into it."""
    return Camera(
        position=Point3(0, 0, -10),
        look_at=Point3(0, 0, 5),
        up=Vec3(0, 1, 0),
        fov=60,
        aspect_ratio=aspect_ratio
    )
