"""
Scene container and nearest-hit query.

A scene is a flat, ordered collection of geometry and lights. The nearest
intersection is found with a linear scan over every object.
"""

from __future__ import annotations
from typing import Optional

from .ray import Ray
from .shapes import Geometry, Intersection
from .lights import Light


class Scene:
    """A collection of geometry and lights."""

    def __init__(
        self,
        objects: Optional[list[Geometry]] = None,
        lights: Optional[list[Light]] = None
    ):
        self.objects: list[Geometry] = objects if objects is not None else []
        self.lights: list[Light] = lights if lights is not None else []

    def add_object(self, obj: Geometry) -> None:
        """Add an object to the scene."""
        self.objects.append(obj)

    def add_light(self, light: Light) -> None:
        """Add a light to the scene."""
        self.lights.append(light)

    def clear(self) -> None:
        """Remove all objects and lights."""
        self.objects.clear()
        self.lights.clear()

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """Find the closest intersection among all objects.

        Ties keep the object that was added first.
        """
        nearest: Optional[Intersection] = None

        for obj in self.objects:
            hit = obj.intersect(ray)
            if hit is not None and (nearest is None or hit.distance < nearest.distance):
                nearest = hit

        return nearest

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def __repr__(self) -> str:
        return f"Scene(objects={len(self.objects)}, lights={len(self.lights)})"


def compute_ray_intersection(ray: Ray, scene: Scene) -> Optional[Intersection]:
    """Find the nearest intersection between a ray and the scene's objects.

    Args:
        ray: The ray to trace
        scene: The scene containing objects

    Returns:
        The nearest Intersection, or None when the ray hits nothing
    """
    return scene.intersect(ray)
