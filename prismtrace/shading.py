"""
Local illumination using the Phong reflection model.

For every light the surface receives a diffuse (Lambert) and a specular
(Phong) term unless a shadow ray toward the light is blocked. An ambient
term is always present.
"""

from __future__ import annotations
from typing import Optional

from .vec3 import Color
from .ray import Ray
from .shapes import Intersection
from .scene import Scene
from .settings import RenderSettings


def is_in_shadow(intersection: Intersection, light_dir, light_distance: float, scene: Scene) -> bool:
    """Check whether anything blocks the path from a surface point to a light.

    Args:
        intersection: The shaded surface point
        light_dir: Unit direction from the point toward the light
        light_distance: Distance to the light (inf for directional lights)
        scene: Scene geometry for the shadow ray

    Returns:
        True if an object lies between the point and the light
    """
    shadow_ray = Ray(intersection.point, light_dir)
    blocker = scene.intersect(shadow_ray)
    return blocker is not None and blocker.distance < light_distance


def calculate_lighting(
    intersection: Intersection,
    ray: Ray,
    scene: Scene,
    settings: Optional[RenderSettings] = None
) -> Color:
    """Calculate the lighting at a point using the Phong illumination model.

    Args:
        intersection: The intersection being shaded
        ray: The viewing ray that produced the intersection
        scene: The scene containing lights and occluders
        settings: Render configuration (defaults if None)

    Returns:
        RGB color with every channel clamped to [0, 1]
    """
    settings = settings if settings is not None else RenderSettings()
    point = intersection.point
    normal = intersection.normal
    material = intersection.material

    base = material.color_at(point, normal)
    view_dir = -ray.direction

    result = base * material.ambient

    for light in scene.lights:
        sample = light.sample(point)

        if settings.enable_shadows and is_in_shadow(
            intersection, sample.direction, sample.distance, scene
        ):
            continue

        lambertian = max(normal.dot(sample.direction), 0.0)

        specular = 0.0
        if lambertian > 0:
            reflect_dir = normal * (2 * normal.dot(sample.direction)) - sample.direction
            specular = max(reflect_dir.dot(view_dir), 0.0) ** material.shininess

        result = result + base * sample.intensity * (material.diffuse * lambertian)
        result = result + sample.intensity * (material.specular * specular)

    return result.clamp(0.0, 1.0)
