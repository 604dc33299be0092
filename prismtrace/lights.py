"""
Light sources for the ray tracer.

Implements:
- Point lights (with damped inverse square falloff)
- Directional lights (sun)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .vec3 import Vec3, Point3, Color


# Damping constant of the point light falloff 1 / (1 + k * d^2)
POINT_FALLOFF = 0.01


@dataclass
class LightSample:
    """Result of sampling a light source from a surface point."""
    direction: Vec3       # Unit direction from hit point to light
    distance: float       # Distance to the light (inf for directional)
    intensity: Color      # Light color scaled by the attenuated intensity


class Light(ABC):
    """Abstract base class for light sources."""

    kind: str = ''

    def __init__(self, color: Color, intensity: float = 1.0):
        self.color = color
        self.intensity = intensity

    @abstractmethod
    def sample(self, hit_point: Point3) -> LightSample:
        """Sample the light from a given point.

        Args:
            hit_point: The point we're illuminating

        Returns:
            LightSample with direction, distance and intensity
        """
        pass


class PointLight(Light):
    """A point light source.

    Point lights emit light equally in all directions from a single point.
    They produce hard shadows.
    """

    kind = 'point'

    def __init__(self, position: Point3, color: Color = None, intensity: float = 1.0):
        """Create a point light.

        Args:
            position: Position of the light
            color: Color of the light (white if omitted)
            intensity: Brightness multiplier
        """
        super().__init__(color if color is not None else Color(1, 1, 1), intensity)
        self.position = position

    def sample(self, hit_point: Point3) -> LightSample:
        direction = self.position - hit_point
        distance = direction.length()
        direction = direction.normalize()

        attenuation = 1.0 / (1.0 + POINT_FALLOFF * distance * distance)

        return LightSample(
            direction=direction,
            distance=distance,
            intensity=self.color * (self.intensity * attenuation)
        )

    def __repr__(self) -> str:
        return f"PointLight(position={self.position}, intensity={self.intensity})"


class DirectionalLight(Light):
    """A directional light (like the sun).

    Directional lights have parallel rays and no falloff.
    """

    kind = 'directional'

    def __init__(self, direction: Vec3, color: Color = None, intensity: float = 1.0):
        """Create a directional light.

        Args:
            direction: Direction the light travels, from the source toward
                the scene (will be normalized)
            color: Color of the light (white if omitted)
            intensity: Brightness multiplier
        """
        super().__init__(color if color is not None else Color(1, 1, 1), intensity)
        self.direction = direction.normalize()

    def sample(self, hit_point: Point3) -> LightSample:
        return LightSample(
            direction=-self.direction,  # Direction TO the light
            distance=float('inf'),      # Infinitely far
            intensity=self.color * self.intensity
        )

    def __repr__(self) -> str:
        return f"DirectionalLight(direction={self.direction}, intensity={self.intensity})"
