"""
Scene description language parser.

Supports a YAML (or JSON) scene description format with:
- Camera configuration
- Render settings
- Materials library
- Objects (spheres and planes with materials)
- Lights

Example scene file:
```yaml
camera:
  position: [0, 0, -10]
  look_at: [0, 0, 5]
  fov: 60
  aspect_ratio: 1.7778

render:
  width: 320
  height: 180
  background: [0.1, 0.1, 0.2]
  enable_shadows: true
  max_reflection_depth: 3
  enable_refraction: true

materials:
  floor:
    color: [0.9, 0.9, 0.9]
    reflection: 0.2
    texture:
      type: checker
      color1: [0.9, 0.9, 0.9]
      color2: [0.2, 0.2, 0.2]
      scale: 5

  glass:
    color: [0.8, 0.8, 0.9]
    transparency: 0.9
    refractive_index: 1.5

objects:
  - type: plane
    point: [0, -2.5, 0]
    normal: [0, 1, 0]
    material: floor

  - type: sphere
    center: [0, 0, 5]
    radius: 1
    material: glass

lights:
  - type: point
    position: [0, 2, 6]
    color: [1, 1, 1]
    intensity: 1
```
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Any, Optional, Tuple
import json
import logging

import yaml

from .vec3 import Vec3, Point3, Color
from .camera import Camera
from .shapes import Sphere, Plane
from .materials import Material
from .lights import PointLight, DirectionalLight
from .scene import Scene
from .settings import RenderSettings
from .textures import Texture, SolidColor, CheckerTexture

logger = logging.getLogger(__name__)

_MATERIAL_KEYS = (
    'diffuse', 'specular', 'ambient', 'shininess',
    'reflection', 'transparency', 'refractive_index'
)


class SceneParseError(Exception):
    """Error during scene parsing."""
    pass


class SceneParser:
    """Parser for scene description files."""

    def __init__(self):
        self.materials: Dict[str, Material] = {}
        self.scene: Scene = Scene()
        self.camera: Optional[Camera] = None
        self.settings: Optional[RenderSettings] = None

    def parse_file(self, filepath: str) -> Tuple[Scene, Camera, RenderSettings]:
        """Parse a scene file.

        Args:
            filepath: Path to the scene file (YAML or JSON)

        Returns:
            Tuple of (scene, camera, settings)
        """
        path = Path(filepath)
        if not path.exists():
            raise SceneParseError(f"Scene file not found: {filepath}")

        content = path.read_text()

        try:
            if path.suffix == '.json':
                data = json.loads(content)
            else:
                # YAML is a superset of JSON
                data = yaml.safe_load(content)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise SceneParseError(f"Cannot read scene file {filepath}: {e}") from e

        if not isinstance(data, dict):
            raise SceneParseError(f"Scene file must contain a mapping: {filepath}")

        logger.debug("Loaded scene description from %s", path)
        return self.parse_dict(data)

    def parse_dict(self, data: Dict[str, Any]) -> Tuple[Scene, Camera, RenderSettings]:
        """Parse a scene from a dictionary.

        Args:
            data: Scene description dictionary

        Returns:
            Tuple of (scene, camera, settings)
        """
        if not isinstance(data, dict):
            raise SceneParseError(f"Scene description must be a mapping, got {type(data).__name__}")

        # Parse render settings first (the camera defaults to their aspect ratio)
        if 'render' in data:
            self._parse_settings(data['render'])
        else:
            self.settings = RenderSettings()

        # Parse materials before objects (objects reference them)
        if 'materials' in data:
            self._parse_materials(data['materials'])

        if 'objects' in data:
            self._parse_objects(data['objects'])

        if 'lights' in data:
            self._parse_lights(data['lights'])

        if 'camera' in data:
            self._parse_camera(data['camera'])
        else:
            self.camera = Camera(
                position=Point3(0, 0, 0),
                look_at=Point3(0, 0, 1),
                fov=60,
                aspect_ratio=self.settings.width / self.settings.height
            )

        logger.debug(
            "Parsed scene: %d objects, %d lights, %d materials",
            len(self.scene.objects), len(self.scene.lights), len(self.materials)
        )
        return self.scene, self.camera, self.settings

    def _parse_triple(self, data: Any, keys: Tuple[str, str, str], kind: str) -> Vec3:
        """Read three floats from a [a, b, c] list or a mapping with the given keys."""
        if isinstance(data, (list, tuple)):
            if len(data) != 3:
                raise SceneParseError(f"{kind} needs 3 components, got {len(data)}")
            values = data
        elif isinstance(data, dict):
            values = [data.get(key, 0) for key in keys]
        else:
            raise SceneParseError(f"Cannot read {kind} from: {data!r}")

        try:
            return Vec3(*(float(v) for v in values))
        except (TypeError, ValueError) as e:
            raise SceneParseError(f"Cannot read {kind} from: {data!r}") from e

    def _expect(self, value: Any, kind: type, what: str) -> Any:
        """Return value unchanged if it has the expected container type."""
        if not isinstance(value, kind):
            expected = 'mapping' if kind is dict else 'list'
            raise SceneParseError(f"{what} must be a {expected}, got {type(value).__name__}")
        return value

    def _parse_float(self, value: Any, what: str) -> float:
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise SceneParseError(f"Invalid {what}: {value!r}") from e

    def _parse_vec3(self, data: Any) -> Vec3:
        return self._parse_triple(data, ('x', 'y', 'z'), "vector")

    def _parse_color(self, data: Any) -> Color:
        """Parse a color given as [r, g, b], {r, g, b} or '#rrggbb'."""
        if isinstance(data, str):
            if not (data.startswith('#') and len(data) == 7):
                raise SceneParseError(f"Bad hex color: {data}")
            try:
                return Color(*(int(data[i:i + 2], 16) / 255.0 for i in (1, 3, 5)))
            except ValueError as e:
                raise SceneParseError(f"Bad hex color: {data}") from e
        return self._parse_triple(data, ('r', 'g', 'b'), "color")

    def _parse_texture(self, tex_data: Dict[str, Any]) -> Texture:
        """Parse an inline texture definition."""
        self._expect(tex_data, dict, "Texture")
        tex_type = str(tex_data.get('type', 'solid')).lower()

        if tex_type == 'solid':
            return SolidColor(self._parse_color(tex_data.get('color', [1, 1, 1])))
        elif tex_type == 'checker':
            return CheckerTexture(
                self._parse_color(tex_data.get('color1', [1, 1, 1])),
                self._parse_color(tex_data.get('color2', [0, 0, 0])),
                self._parse_float(tex_data.get('scale', 10), "checker scale")
            )
        raise SceneParseError(f"Unknown texture type: {tex_type}")

    def _build_material(self, mat_data: Dict[str, Any]) -> Material:
        """Build a Phong material from its description."""
        if not isinstance(mat_data, dict):
            raise SceneParseError(f"Invalid material definition: {mat_data}")

        color = self._parse_color(mat_data.get('color', [1, 1, 1]))
        options = {}
        for key in _MATERIAL_KEYS:
            if key in mat_data:
                try:
                    options[key] = float(mat_data[key])
                except (TypeError, ValueError) as e:
                    raise SceneParseError(f"Invalid material {key}: {mat_data[key]}") from e

        if options.get('refractive_index', 1.5) <= 0:
            raise SceneParseError("Material refractive_index must be positive")

        texture = None
        if 'texture' in mat_data:
            texture = self._parse_texture(mat_data['texture'])

        return Material(color, texture=texture, **options)

    def _parse_materials(self, materials_data: Dict[str, Any]) -> None:
        """Parse materials section."""
        for name, mat_data in self._expect(materials_data, dict, "materials").items():
            self.materials[name] = self._build_material(mat_data)

    def _get_material(self, mat_ref: Any) -> Material:
        """Get a material by name or inline definition."""
        if mat_ref is None:
            return Material(Color(1, 1, 1))
        if isinstance(mat_ref, str):
            if mat_ref not in self.materials:
                raise SceneParseError(f"Unknown material: {mat_ref}")
            return self.materials[mat_ref]
        elif isinstance(mat_ref, dict):
            return self._build_material(mat_ref)
        else:
            raise SceneParseError(f"Invalid material reference: {mat_ref}")

    def _parse_objects(self, objects_data: list) -> None:
        """Parse objects section."""
        for obj_data in self._expect(objects_data, list, "objects"):
            self._expect(obj_data, dict, "Object entry")
            obj_type = str(obj_data.get('type', 'sphere')).lower()
            material = self._get_material(obj_data.get('material'))

            try:
                if obj_type == 'sphere':
                    center = self._parse_vec3(obj_data.get('center', [0, 0, 0]))
                    radius = float(obj_data.get('radius', 1.0))
                    self.scene.add_object(Sphere(center, radius, material))

                elif obj_type == 'plane':
                    point = self._parse_vec3(obj_data.get('point', [0, -1, 0]))
                    normal = self._parse_vec3(obj_data.get('normal', [0, 1, 0]))
                    self.scene.add_object(Plane(point, normal, material))

                else:
                    raise SceneParseError(f"Unknown object type: {obj_type}")
            except (TypeError, ValueError) as e:
                raise SceneParseError(f"Invalid {obj_type}: {e}") from e

    def _parse_lights(self, lights_data: list) -> None:
        """Parse lights section."""
        for light_data in self._expect(lights_data, list, "lights"):
            self._expect(light_data, dict, "Light entry")
            light_type = str(light_data.get('type', 'point')).lower()
            color = self._parse_color(light_data.get('color', [1, 1, 1]))
            intensity = self._parse_float(light_data.get('intensity', 1.0), "light intensity")

            if intensity < 0:
                raise SceneParseError(f"Light intensity must be non-negative, got {intensity}")

            if light_type == 'point':
                position = self._parse_vec3(light_data.get('position', [0, 5, 0]))
                self.scene.add_light(PointLight(position, color, intensity))

            elif light_type == 'directional':
                direction = self._parse_vec3(light_data.get('direction', [0, -1, 0]))
                if direction.length_squared() == 0:
                    raise SceneParseError("Directional light direction must be non-zero")
                self.scene.add_light(DirectionalLight(direction, color, intensity))

            else:
                raise SceneParseError(f"Unknown light type: {light_type}")

    def _parse_camera(self, camera_data: Dict[str, Any]) -> None:
        """Parse camera section."""
        self._expect(camera_data, dict, "camera")
        position = self._parse_vec3(camera_data.get('position', [0, 0, 0]))
        look_at = self._parse_vec3(camera_data.get('look_at', [0, 0, 1]))
        up = self._parse_vec3(camera_data.get('up', [0, 1, 0]))
        fov = self._parse_float(camera_data.get('fov', 60), "camera fov")
        aspect_ratio = self._parse_float(
            camera_data.get('aspect_ratio', self.settings.width / self.settings.height),
            "camera aspect_ratio"
        )

        if (look_at - position).length_squared() == 0:
            raise SceneParseError("Camera look_at must differ from its position")

        self.camera = Camera(
            position=position,
            look_at=look_at,
            up=up,
            fov=fov,
            aspect_ratio=aspect_ratio
        )

    def _parse_settings(self, settings_data: Dict[str, Any]) -> None:
        """Parse render settings section."""
        self._expect(settings_data, dict, "render")
        background = None
        if 'background' in settings_data:
            background = self._parse_color(settings_data['background'])

        try:
            self.settings = RenderSettings(
                width=int(settings_data.get('width', 800)),
                height=int(settings_data.get('height', 600)),
                background_color=background,
                enable_shadows=bool(settings_data.get('enable_shadows', True)),
                max_reflection_depth=int(settings_data.get('max_reflection_depth', 3)),
                enable_refraction=bool(settings_data.get('enable_refraction', True)),
                samples_per_pixel=int(settings_data.get('samples', 1)),
                tile_size=int(settings_data.get('tile_size', 32)),
                num_threads=int(settings_data.get('threads', 1))
            )
        except (TypeError, ValueError) as e:
            raise SceneParseError(f"Invalid render settings: {e}") from e

        if self.settings.width <= 0 or self.settings.height <= 0:
            raise SceneParseError(
                f"Image size must be positive, got {self.settings.width}x{self.settings.height}"
            )


def load_scene(filepath: str) -> Tuple[Scene, Camera, RenderSettings]:
    """Convenience function to load a scene file.

    Args:
        filepath: Path to the scene file

    Returns:
        Tuple of (scene, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_file(filepath)


def parse_scene(data: Dict[str, Any]) -> Tuple[Scene, Camera, RenderSettings]:
    """Convenience function to parse a scene from a dictionary.

    Args:
        data: Scene description dictionary

    Returns:
        Tuple of (scene, camera, settings)
    """
    parser = SceneParser()
    return parser.parse_dict(data)
