"""
Render configuration.

Settings are passed explicitly into the renderer and tracer entry points;
there is no process-wide mutable state.
"""

from __future__ import annotations
import os
from dataclasses import dataclass

from .vec3 import Color


# Hard ceiling on recursion depth regardless of configuration
MAX_DEPTH = 5


@dataclass
class RenderSettings:
    """Configuration for the renderer and tracer."""
    width: int = 800
    height: int = 600
    background_color: Color = None
    enable_shadows: bool = True
    max_reflection_depth: int = 3
    enable_refraction: bool = True
    samples_per_pixel: int = 1  # Reserved, every pixel is traced once
    tile_size: int = 32
    num_threads: int = 1  # 0 = auto-detect

    def __post_init__(self):
        if self.background_color is None:
            self.background_color = Color(0.1, 0.1, 0.2)
        if self.num_threads == 0:
            self.num_threads = os.cpu_count() or 4

    @property
    def effective_max_depth(self) -> int:
        """The recursion cap actually enforced by the tracer."""
        return max(0, min(self.max_reflection_depth, MAX_DEPTH))
