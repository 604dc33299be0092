"""
Recursive Whitted-style ray tracer.

Implements:
- Nearest-hit shading with Phong illumination and hard shadows
- Mirror reflection
- Refraction via Snell's law, weighted by the full Fresnel equations
- Bounded recursion depth
- Optional observers for hit/miss statistics
"""

from __future__ import annotations
import math
import threading
from typing import Optional

from .vec3 import Vec3, Color
from .ray import Ray
from .camera import Camera
from .scene import Scene
from .shapes import EPSILON
from .shading import calculate_lighting
from .settings import RenderSettings


class TraceObserver:
    """Receives notifications about primary rays.

    The base implementation ignores everything; subclass it to collect
    statistics.
    """

    def on_primary_hit(self) -> None:
        pass

    def on_primary_miss(self) -> None:
        pass


class TraceStats(TraceObserver):
    """Thread-safe counters of primary ray hits and misses."""

    def __init__(self):
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def on_primary_hit(self) -> None:
        with self._lock:
            self.hits += 1

    def on_primary_miss(self) -> None:
        with self._lock:
            self.misses += 1

    @property
    def rays(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        """Fraction of primary rays that hit something (0 when none traced)."""
        if self.rays == 0:
            return 0.0
        return self.hits / self.rays

    def __repr__(self) -> str:
        return f"TraceStats(rays={self.rays}, hits={self.hits}, misses={self.misses})"


def calculate_reflection(incident: Vec3, normal: Vec3) -> Vec3:
    """Mirror an incident direction about a surface normal."""
    return incident.reflect(normal)


def calculate_refraction(incident: Vec3, normal: Vec3, refractive_index: float) -> Optional[Vec3]:
    """Compute the refracted direction using Snell's law.

    Args:
        incident: Unit incident direction
        normal: Unit outward surface normal
        refractive_index: Index of refraction of the material (outside is 1.0)

    Returns:
        Unit refracted direction, or None on total internal reflection
    """
    cosi = incident.dot(normal)
    etai, etat = 1.0, refractive_index
    n = normal

    if cosi < 0:
        # Entering the surface
        cosi = -cosi
    else:
        # Leaving the surface
        etai, etat = etat, etai
        n = -normal

    eta = etai / etat
    k = 1 - eta * eta * (1 - cosi * cosi)
    if k <= 0:
        return None

    return (incident * eta + n * (eta * cosi - math.sqrt(k))).normalize()


def calculate_fresnel_reflection(incident: Vec3, normal: Vec3, refractive_index: float) -> float:
    """Fraction of light reflected at a dielectric boundary.

    Uses the full Fresnel equations averaged over both polarizations.

    Returns:
        Reflectance in [0, 1]; 1.0 on total internal reflection
    """
    cosi = incident.dot(normal)
    etai, etat = 1.0, refractive_index
    if cosi > 0:
        etai, etat = etat, etai

    sint = etai / etat * math.sqrt(max(0.0, 1 - cosi * cosi))
    if sint >= 1:
        return 1.0

    cost = math.sqrt(max(0.0, 1 - sint * sint))
    cosi = abs(cosi)

    rs = ((etat * cosi) - (etai * cost)) / ((etat * cosi) + (etai * cost))
    rp = ((etai * cosi) - (etat * cost)) / ((etai * cosi) + (etat * cost))

    return (rs * rs + rp * rp) / 2


def trace_ray(
    ray: Ray,
    scene: Scene,
    background_color: Color,
    depth: int = 0,
    settings: Optional[RenderSettings] = None,
    observer: Optional[TraceObserver] = None
) -> Color:
    """Trace a ray recursively through the scene.

    Args:
        ray: The ray to trace
        scene: The scene containing objects and lights
        background_color: Color returned when the ray escapes
        depth: Current recursion depth (0 for primary rays)
        settings: Render configuration (defaults if None)
        observer: Optional observer notified about primary rays

    Returns:
        RGB color for the ray, each channel in [0, 1]
    """
    settings = settings if settings is not None else RenderSettings()

    if depth > settings.effective_max_depth:
        return background_color

    intersection = scene.intersect(ray)

    if intersection is None:
        if depth == 0 and observer is not None:
            observer.on_primary_miss()
        return background_color

    if depth == 0 and observer is not None:
        observer.on_primary_hit()

    point = intersection.point
    normal = intersection.normal
    material = intersection.material

    color = calculate_lighting(intersection, ray, scene, settings)

    if material.reflection > 0:
        reflect_dir = calculate_reflection(ray.direction, normal)
        reflect_ray = Ray(point + normal * EPSILON, reflect_dir)
        reflect_color = trace_ray(reflect_ray, scene, background_color, depth + 1, settings)

        k = material.reflection
        color = color * (1 - k) + reflect_color * k

    if material.transparency > 0 and settings.enable_refraction:
        fresnel = calculate_fresnel_reflection(ray.direction, normal, material.refractive_index)
        refract_dir = calculate_refraction(ray.direction, normal, material.refractive_index)

        # Total internal reflection contributes nothing here
        if refract_dir is not None:
            # Start just past the surface on the side the refracted ray travels into
            if ray.direction.dot(normal) < 0:
                refract_origin = point - normal * EPSILON
            else:
                refract_origin = point + normal * EPSILON
            refract_ray = Ray(refract_origin, refract_dir)
            refract_color = trace_ray(refract_ray, scene, background_color, depth + 1, settings)

            k = material.transparency * (1 - fresnel)
            color = color * (1 - k) + refract_color * k

    return color.clamp(0.0, 1.0)


def default_view_ray(x: float, y: float, width: int, height: int) -> Ray:
    """Primary ray of the fixed default view: origin at zero, looking down +Z."""
    ndc_x = (x / width) * 2 - 1
    ndc_y = 1 - (y / height) * 2
    return Ray(Vec3(0, 0, 0), Vec3(ndc_x, ndc_y, 1).normalize())


def raytrace_pixel(
    x: int,
    y: int,
    width: int,
    height: int,
    scene: Scene,
    background_color: Color,
    camera: Optional[Camera] = None,
    settings: Optional[RenderSettings] = None,
    observer: Optional[TraceObserver] = None
) -> Color:
    """Raytrace a single pixel.

    Args:
        x: Pixel column
        y: Pixel row
        width: Image width
        height: Image height
        scene: Scene to render
        background_color: Color for rays that miss everything
        camera: Camera generating the primary ray (default view if None)
        settings: Render configuration
        observer: Optional statistics observer

    Returns:
        RGB color for the pixel
    """
    if camera is not None:
        ray = camera.generate_ray(x, y, width, height)
    else:
        ray = default_view_ray(x, y, width, height)

    return trace_ray(ray, scene, background_color, 0, settings, observer)
