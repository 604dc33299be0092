"""
Camera module for generating primary rays.

Supports:
- Perspective projection with a configurable vertical field of view
- Arbitrary positioning via look-at
- Interactive movement (translate along the basis, pan, tilt)

The camera keeps an orthonormal basis (right, up, direction); every
rotation re-derives it so repeated moves do not drift.
"""

from __future__ import annotations
import math
from typing import Optional

from .vec3 import Vec3, Point3
from .ray import Ray


class Camera:
    """A perspective camera with a mutable position and orientation."""

    def __init__(
        self,
        position: Optional[Point3] = None,
        look_at: Optional[Point3] = None,
        up: Optional[Vec3] = None,
        fov: float = 60.0,
        aspect_ratio: float = 1.0
    ):
        """Create a camera.

        Args:
            position: Camera position in world space (origin if omitted)
            look_at: Point the camera is looking at (0, 0, -1 if omitted)
            up: World up guide vector (usually (0, 1, 0))
            fov: Vertical field of view in degrees
            aspect_ratio: Width / Height ratio
        """
        self.position = position if position is not None else Point3(0, 0, 0)
        look_at = look_at if look_at is not None else Point3(0, 0, -1)
        up_guide = up if up is not None else Vec3(0, 1, 0)
        self.fov = fov
        self.aspect_ratio = aspect_ratio

        # Compute orthonormal camera basis
        self.direction = (look_at - self.position).normalize()
        self.right = self.direction.cross(up_guide).normalize()
        self.up = self.right.cross(self.direction).normalize()

    @property
    def fov_radians(self) -> float:
        return math.radians(self.fov)

    def move_forward(self, distance: float) -> None:
        """Move along the view direction (negative moves backward)."""
        self.position = self.position + self.direction * distance

    def move_right(self, distance: float) -> None:
        """Move along the right vector (negative moves left)."""
        self.position = self.position + self.right * distance

    def move_up(self, distance: float) -> None:
        """Move along the up vector (negative moves down)."""
        self.position = self.position + self.up * distance

    def pan(self, degrees: float) -> None:
        """Rotate the view horizontally about the world Y axis.

        Args:
            degrees: Rotation angle, positive pans right
        """
        theta = math.radians(-degrees)
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)

        d = self.direction
        self.direction = Vec3(
            d.x * cos_t - d.z * sin_t,
            d.y,
            d.x * sin_t + d.z * cos_t
        ).normalize()

        self.right = self.direction.cross(self.up).normalize()
        self.up = self.right.cross(self.direction).normalize()

    def tilt(self, degrees: float) -> None:
        """Rotate the view vertically about the camera's right axis.

        The right vector is held fixed. For a camera whose right vector is
        the world +X axis this is a plain rotation of the direction's
        (y, z) components.

        Args:
            degrees: Rotation angle, positive tilts up
        """
        theta = math.radians(degrees)
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)

        # Rodrigues' rotation of direction around right
        k = self.right
        d = self.direction
        rotated = d * cos_t + k.cross(d) * sin_t + k * (k.dot(d) * (1.0 - cos_t))

        self.direction = rotated.normalize()
        self.up = self.right.cross(self.direction).normalize()

    def generate_ray(self, x: float, y: float, width: int, height: int) -> Ray:
        """Generate a ray from the camera through a pixel.

        Args:
            x: Pixel column (0 = left edge)
            y: Pixel row (0 = top edge)
            width: Viewport width in pixels
            height: Viewport height in pixels

        Returns:
            A unit-direction ray starting at the camera position
        """
        ndc_x = (x / width) * 2 - 1
        ndc_y = 1 - (y / height) * 2  # Image row 0 is the top of the screen

        half_height = math.tan(self.fov_radians / 2)
        half_width = half_height * self.aspect_ratio

        direction = (
            self.right * (ndc_x * half_width)
            + self.up * (ndc_y * half_height)
            + self.direction
        )

        return Ray(self.position, direction.normalize())

    def __repr__(self) -> str:
        return f"Camera(position={self.position}, direction={self.direction}, fov={self.fov})"
