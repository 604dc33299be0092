#!/usr/bin/env python3
"""
PrismTrace - A Python Whitted Ray Tracer

Main entry point for rendering scenes.
"""

import argparse
import logging
import math
import os
import sys
import time
from pathlib import Path

from prismtrace.renderer import Renderer
from prismtrace.scene_parser import SceneParseError, load_scene
from prismtrace.scenes import create_default_scene, create_cornell_box, default_camera
from prismtrace.settings import RenderSettings
from prismtrace.tracer import TraceStats
from prismtrace.camera import Camera
from prismtrace.vec3 import Point3, Vec3
from prismtrace.logging_config import setup_logging

logger = logging.getLogger("prismtrace.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='PrismTrace - A Python Whitted Ray Tracer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --scene cornell --output cornell.png
  python main.py --width 640 --height 360 --depth 5 --threads 4
  python main.py --scene-file scenes/glass.yaml --no-shadows
        '''
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument('--scene', type=str, default='cornell', choices=['default', 'cornell'],
                        help='Built-in scene to render (default: cornell)')
    source.add_argument('--scene-file', type=str, help='YAML or JSON scene description')

    parser.add_argument('--width', type=int, help='Image width (default: 320)')
    parser.add_argument('--height', type=int, help='Image height (default: 180)')
    parser.add_argument('--depth', type=int, help='Max reflection depth (default: 3)')
    parser.add_argument('--threads', type=int, help='Number of threads (0=auto)')
    parser.add_argument('--no-shadows', action='store_true', help='Disable shadow rays')
    parser.add_argument('--no-refraction', action='store_true', help='Disable refraction')
    parser.add_argument('--output', type=str, default='output/render.png', help='Output filename')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (default: $PRISMTRACE_LOG_LEVEL or INFO)')
    return parser


def apply_overrides(settings: RenderSettings, args: argparse.Namespace) -> None:
    """Apply command line flags on top of the loaded settings."""
    if args.width is not None:
        settings.width = args.width
    if args.height is not None:
        settings.height = args.height
    if args.depth is not None:
        settings.max_reflection_depth = args.depth
    if args.threads is not None:
        settings.num_threads = args.threads or (os.cpu_count() or 4)
    if args.no_shadows:
        settings.enable_shadows = False
    if args.no_refraction:
        settings.enable_refraction = False


def build_job(args: argparse.Namespace):
    """Assemble the scene, camera and settings selected on the command line.

    Raises:
        SceneParseError: If the scene file cannot be loaded
        ValueError: If the final image size is not positive
    """
    if args.scene_file:
        scene, camera, settings = load_scene(args.scene_file)
    else:
        settings = RenderSettings(width=320, height=180)
        scene = create_default_scene() if args.scene == "default" else create_cornell_box()
        camera = None

    file_aspect = settings.width / settings.height
    apply_overrides(settings, args)
    if settings.width <= 0 or settings.height <= 0:
        raise ValueError(f"Image size must be positive, got {settings.width}x{settings.height}")

    aspect = settings.width / settings.height
    if camera is None:
        if args.scene == 'default':
            camera = Camera(Point3(0, 1, -3), Point3(0, 0, 5), Vec3(0, 1, 0), 60, aspect)
        else:
            camera = default_camera(aspect)
    elif math.isclose(camera.aspect_ratio, file_aspect):
        # The file camera followed the file's frame size; keep it matched after overrides
        camera.aspect_ratio = aspect

    return scene, camera, settings


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        scene, camera, settings = build_job(args)
    except SceneParseError as e:
        logger.error("Cannot load scene: %s", e)
        return 1
    except ValueError as e:
        logger.error("%s", e)
        return 1

    print("=" * 60)
    print("PrismTrace Ray Tracer")
    print("=" * 60)
    print(f"  Resolution: {settings.width}x{settings.height}")
    print(f"  Max Depth: {settings.effective_max_depth}")
    print(f"  Shadows: {'on' if settings.enable_shadows else 'off'}")
    print(f"  Refraction: {'on' if settings.enable_refraction else 'off'}")
    print(f"  Threads: {settings.num_threads}")
    print(f"  Objects in scene: {len(scene)}")

    stats = TraceStats()
    renderer = Renderer(settings, observer=stats)

    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '█' * filled + '░' * (bar_len - filled)
            print(f'\rRendering: [{bar}] {pct}%', end='', flush=True)

    renderer.set_progress_callback(progress_callback)

    start_time = time.time()
    image = renderer.render(scene, camera)
    elapsed = time.time() - start_time

    print(f"\nRender completed in {elapsed:.2f} seconds")
    print(f"  Primary rays: {stats.rays} ({stats.hit_rate * 100:.2f}% hit rate)")

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    renderer.save_image(image, str(output_path))
    print(f"Saved to: {output_path}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
