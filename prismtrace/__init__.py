"""
PrismTrace - A Python Whitted Ray Tracer

A recursive ray tracer with support for:
- Spheres and one-sided planes
- Phong shading with point and directional lights
- Hard shadows
- Mirror reflection
- Refraction with Fresnel weighting
- Multi-threaded tile rendering to an RGBA8 framebuffer
"""

__version__ = "0.1.0"
__author__ = "PrismTrace Team"

from .vec3 import Vec3, Point3, Color
from .ray import Ray
from .shapes import EPSILON, Geometry, Intersection, Sphere, Plane
from .materials import Material
from .textures import Texture, SolidColor, CheckerTexture
from .lights import Light, LightSample, PointLight, DirectionalLight
from .scene import Scene, compute_ray_intersection
from .camera import Camera
from .settings import RenderSettings, MAX_DEPTH
from .shading import calculate_lighting
from .tracer import (
    TraceObserver, TraceStats,
    calculate_reflection, calculate_refraction, calculate_fresnel_reflection,
    trace_ray, raytrace_pixel
)
from .renderer import Renderer
from .scene_parser import SceneParser, SceneParseError, load_scene, parse_scene
from .scenes import create_default_scene, create_cornell_box, default_camera
from .logging_config import setup_logging
