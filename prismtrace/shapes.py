"""
Geometric shapes for the ray tracer.

Each shape implements the Geometry interface with a single `intersect`
method. Hits closer than EPSILON along the ray are ignored so that rays
spawned on a surface do not immediately re-hit it.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING
import math

from .vec3 import Vec3, Point3
from .ray import Ray

if TYPE_CHECKING:
    from .materials import Material


# Self-intersection guard
EPSILON = 0.001


@dataclass(frozen=True)
class Intersection:
    """Stores information about a ray-object intersection.

    Attributes:
        point: The intersection point in world space
        distance: The ray parameter at intersection (always > 0)
        normal: Unit surface normal pointing out of the surface
        material: The material of the object that was hit
    """
    point: Point3
    distance: float
    normal: Vec3
    material: Optional[Material] = None


class Geometry(ABC):
    """Abstract base class for all objects that can be hit by rays."""

    material: Optional[Material]

    @abstractmethod
    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """Test if ray intersects this object.

        Args:
            ray: The ray to test

        Returns:
            Intersection if a hit at distance >= EPSILON exists, None otherwise
        """
        pass


class Sphere(Geometry):
    """A sphere defined by center and radius."""

    def __init__(self, center: Point3, radius: float, material: Optional[Material] = None):
        """Create a sphere.

        Args:
            center: Center point of the sphere
            radius: Radius of the sphere, must be positive
            material: Material for shading

        Raises:
            ValueError: If the radius is not positive
        """
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = radius
        self.material = material

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """Test ray-sphere intersection using the quadratic formula.

        The equation (P-C)·(P-C) = r² where P = ray.at(t)
        expands to: t²(d·d) + 2t(d·(O-C)) + (O-C)·(O-C) - r² = 0
        which is the quadratic at² + bt + c = 0.
        """
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2.0 * oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius

        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)

        # Nearest root first; the far root covers rays starting on or inside the surface
        t = (-b - sqrtd) / (2.0 * a)
        if t < EPSILON:
            t = (-b + sqrtd) / (2.0 * a)
            if t < EPSILON:
                return None

        point = ray.at(t)
        normal = (point - self.center).normalize()

        return Intersection(point=point, distance=t, normal=normal, material=self.material)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center}, radius={self.radius})"


class Plane(Geometry):
    """An infinite one-sided plane defined by a point and normal.

    Only rays travelling against the normal hit the plane.
    """

    def __init__(self, point: Point3, normal: Vec3, material: Optional[Material] = None):
        """Create a plane.

        Args:
            point: Any point on the plane
            normal: The plane's normal vector (will be normalized)
            material: Material for shading

        Raises:
            ValueError: If the normal has zero length
        """
        if normal.length_squared() == 0:
            raise ValueError("Plane normal must be non-zero")
        self.point = point
        self.normal = normal.normalize()
        self.material = material

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """Test ray-plane intersection."""
        denom = ray.direction.dot(self.normal)

        # Parallel to the plane, or approaching from the back side
        if abs(denom) < EPSILON or denom > 0:
            return None

        t = (self.point - ray.origin).dot(self.normal) / denom
        if t < EPSILON:
            return None

        return Intersection(point=ray.at(t), distance=t, normal=self.normal, material=self.material)

    def __repr__(self) -> str:
        return f"Plane(point={self.point}, normal={self.normal})"
