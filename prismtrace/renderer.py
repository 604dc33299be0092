"""
Renderer module - turns a scene and camera into a framebuffer.

Implements:
- One primary ray per pixel traced with the recursive tracer
- Tile-based rendering, optionally multi-threaded
- RGBA8 framebuffer output and PNG export
"""

from __future__ import annotations
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Callable, Tuple
import numpy as np

from .camera import Camera
from .scene import Scene
from .settings import RenderSettings
from .tracer import TraceObserver, raytrace_pixel

logger = logging.getLogger(__name__)


class Renderer:
    """Whitted ray tracing renderer with multi-threading support."""

    def __init__(self, settings: RenderSettings = None, observer: Optional[TraceObserver] = None):
        """Create a renderer with the given settings.

        Args:
            settings: Render configuration (uses defaults if None)
            observer: Optional observer notified about every primary ray
        """
        self.settings = settings if settings else RenderSettings()
        self.observer = observer
        self._progress_callback: Optional[Callable[[float], None]] = None

    def set_progress_callback(self, callback: Callable[[float], None]) -> None:
        """Set a callback function for progress updates.

        Args:
            callback: Function that takes progress as float (0.0 to 1.0)
        """
        self._progress_callback = callback

    def render(self, scene: Scene, camera: Camera) -> np.ndarray:
        """Render the scene and return the framebuffer.

        The scene must not be modified while the frame is being rendered.

        Args:
            scene: The scene to render
            camera: The camera to render from

        Returns:
            RGBA8 image as numpy array of shape (height, width, 4), alpha 255
        """
        settings = self.settings
        width = settings.width
        height = settings.height

        if settings.samples_per_pixel > 1:
            logger.warning(
                "samples_per_pixel=%d is not supported, tracing one ray per pixel",
                settings.samples_per_pixel
            )

        logger.info(
            "Rendering %dx%d frame (%d objects, %d lights, max depth %d, %d thread(s))",
            width, height, len(scene.objects), len(scene.lights),
            settings.effective_max_depth, settings.num_threads
        )
        start_time = time.perf_counter()

        image = np.zeros((height, width, 4), dtype=np.uint8)
        image[:, :, 3] = 255

        tiles = self._generate_tiles(width, height)
        total_tiles = len(tiles)
        completed_tiles = [0]
        progress_lock = threading.Lock()

        def render_tile(tile: Tuple[int, int, int, int]) -> Tuple[Tuple, np.ndarray]:
            """Render a single tile."""
            x0, y0, x1, y1 = tile
            tile_image = np.zeros((y1 - y0, x1 - x0, 3), dtype=np.float64)

            for j in range(y1 - y0):
                for i in range(x1 - x0):
                    color = raytrace_pixel(
                        x0 + i, y0 + j, width, height, scene,
                        settings.background_color, camera, settings, self.observer
                    )
                    tile_image[j, i] = color.to_array()

            # Workers finish out of order; count and report one tile at a time
            with progress_lock:
                completed_tiles[0] += 1
                if self._progress_callback:
                    self._progress_callback(completed_tiles[0] / total_tiles)

            return tile, tile_image

        if settings.num_threads > 1:
            with ThreadPoolExecutor(max_workers=settings.num_threads) as executor:
                results = list(executor.map(render_tile, tiles))
        else:
            results = [render_tile(tile) for tile in tiles]

        # Each tile lands at its own offset; assembly order does not matter
        for tile, tile_image in results:
            x0, y0, x1, y1 = tile
            image[y0:y1, x0:x1, :3] = self.to_rgb8(tile_image)

        elapsed = time.perf_counter() - start_time
        logger.info("Frame finished in %.2f seconds", elapsed)

        return image

    def _generate_tiles(self, width: int, height: int) -> list[Tuple[int, int, int, int]]:
        """Generate tiles in raster order.

        Args:
            width: Image width
            height: Image height

        Returns:
            List of tiles as (x0, y0, x1, y1) tuples
        """
        tile_size = max(1, self.settings.tile_size)
        tiles = []

        for y in range(0, height, tile_size):
            for x in range(0, width, tile_size):
                x1 = min(x + tile_size, width)
                y1 = min(y + tile_size, height)
                tiles.append((x, y, x1, y1))

        return tiles

    @staticmethod
    def to_rgb8(colors: np.ndarray) -> np.ndarray:
        """Convert [0, 1] float colors to 8-bit channels with floor(c * 255)."""
        return np.floor(np.clip(colors, 0.0, 1.0) * 255).astype(np.uint8)

    def save_image(self, image: np.ndarray, filename: str) -> None:
        """Save an RGBA8 framebuffer to an image file.

        Args:
            image: Framebuffer as returned by render()
            filename: Output filename (extension determines format)
        """
        from PIL import Image as PILImage

        pil_image = PILImage.fromarray(np.ascontiguousarray(image, dtype=np.uint8))
        if filename.lower().endswith(('.jpg', '.jpeg')):
            pil_image = pil_image.convert('RGB')
        pil_image.save(filename)
        logger.info("Saved %dx%d image to %s", image.shape[1], image.shape[0], filename)
