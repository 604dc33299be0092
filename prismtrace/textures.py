"""
Texture system for the ray tracer.

Textures are looked up by (u, v) coordinates in [0, 1]; the material
derives those coordinates from the surface normal.

Implements:
- Solid color textures
- Checkerboard textures
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import math

from .vec3 import Color


class Texture(ABC):
    """Abstract base class for textures."""

    @abstractmethod
    def value(self, u: float, v: float) -> Color:
        """Get the texture color at the given UV coordinates.

        Args:
            u: Horizontal texture coordinate [0, 1]
            v: Vertical texture coordinate [0, 1]

        Returns:
            Color at this location
        """
        pass


class SolidColor(Texture):
    """A solid color texture."""

    def __init__(self, color: Color):
        self.color = color

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> 'SolidColor':
        return cls(Color(r, g, b))

    def value(self, u: float, v: float) -> Color:
        return self.color


class CheckerTexture(Texture):
    """Checkerboard pattern in UV space."""

    def __init__(self, color1: Color, color2: Color, scale: float = 10.0):
        """Create a checker texture.

        Args:
            color1: Color of the even squares
            color2: Color of the odd squares
            scale: Number of squares along each UV axis
        """
        self.color1 = color1
        self.color2 = color2
        self.scale = scale

    def value(self, u: float, v: float) -> Color:
        su = math.floor(u * self.scale)
        sv = math.floor(v * self.scale)
        if (su + sv) % 2 == 0:
            return self.color1
        return self.color2
