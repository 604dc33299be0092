"""
Rays cast by the camera, by shadow tests and by reflection/refraction bounces.
"""

from __future__ import annotations
from .vec3 import Vec3, Point3


class Ray:
    """Half-line starting at ``origin`` and heading along ``direction``.

    Every ray the tracer builds carries a unit direction, so the parameter
    of ``at`` is a distance in world units. Nothing enforces this.
    """

    __slots__ = ('origin', 'direction')

    def __init__(self, origin: Point3, direction: Vec3):
        self.origin = origin
        self.direction = direction

    def at(self, t: float) -> Point3:
        """Point reached after travelling t along the ray."""
        return self.origin + self.direction * t

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin}, direction={self.direction})"
