"""
Surface materials for the Phong shading model.

A material bundles the local illumination coefficients (ambient, diffuse,
specular, shininess) with the parameters that drive secondary rays
(reflection, transparency, refractive index) and an optional texture.
"""

from __future__ import annotations
from typing import Optional
import math

from .vec3 import Vec3, Color
from .textures import Texture


class Material:
    """Phong material with optional mirror reflection and refraction.

    Materials are read-only while a frame is being traced.
    """

    def __init__(
        self,
        color: Color,
        diffuse: float = 0.7,
        specular: float = 0.3,
        ambient: float = 0.1,
        shininess: float = 32.0,
        reflection: float = 0.0,
        transparency: float = 0.0,
        refractive_index: float = 1.5,
        texture: Optional[Texture] = None
    ):
        """Create a material.

        Args:
            color: Base RGB color, each component 0-1
            diffuse: Diffuse reflection coefficient (0-1)
            specular: Specular reflection coefficient (0-1)
            ambient: Ambient light coefficient (0-1)
            shininess: Exponent of the specular highlight
            reflection: Mirror reflection weight (0-1)
            transparency: Refraction weight (0-1)
            refractive_index: Index of refraction (1.0 air, ~1.5 glass)
            texture: Optional texture overriding the base color
        """
        self.color = color
        self.diffuse = diffuse
        self.specular = specular
        self.ambient = ambient
        self.shininess = shininess
        self.reflection = reflection
        self.transparency = transparency
        self.refractive_index = refractive_index
        self.texture = texture

    def color_at(self, point: Vec3, normal: Vec3) -> Color:
        """Get the surface color at a point.

        UV coordinates come from a spherical mapping of the unit normal,
        so the lookup works for any geometry type.
        """
        if self.texture is None:
            return self.color

        u = math.atan2(normal.z, normal.x) / (2 * math.pi) + 0.5
        v = math.asin(max(-1.0, min(1.0, normal.y))) / math.pi + 0.5
        return self.texture.value(u, v)

    def __repr__(self) -> str:
        return (
            f"Material(color={self.color}, reflection={self.reflection}, "
            f"transparency={self.transparency})"
        )
