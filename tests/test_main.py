"""Tests for the command line entry point."""

import pytest
import os
from PIL import Image

from main import build_parser, apply_overrides, build_job, main
from prismtrace.settings import RenderSettings


class TestArguments:
    """Test argument handling."""

    def test_overrides(self):
        args = build_parser().parse_args([
            '--width', '40', '--height', '20', '--depth', '1',
            '--no-shadows', '--no-refraction'
        ])
        settings = RenderSettings()
        apply_overrides(settings, args)

        assert settings.width == 40
        assert settings.height == 20
        assert settings.max_reflection_depth == 1
        assert settings.enable_shadows is False
        assert settings.enable_refraction is False

    def test_auto_threads(self):
        args = build_parser().parse_args(['--threads', '0'])
        settings = RenderSettings()
        apply_overrides(settings, args)
        assert settings.num_threads == (os.cpu_count() or 4)

    def test_scene_and_file_are_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['--scene', 'default', '--scene-file', 'x.yaml'])


class TestMain:
    """Test end-to-end rendering from the command line."""

    @pytest.mark.parametrize("scene", ["default", "cornell"])
    def test_builtin_scene(self, tmp_path, scene):
        output = tmp_path / "out" / f"{scene}.png"
        code = main(['--scene', scene, '--width', '8', '--height', '6',
                     '--output', str(output), '--log-level', 'WARNING'])

        assert code == 0
        with Image.open(output) as img:
            assert img.size == (8, 6)

    def test_scene_file(self, tmp_path):
        scene_file = tmp_path / "scene.yaml"
        scene_file.write_text(
            "render: {width: 6, height: 4}\n"
            "objects:\n"
            "  - {type: sphere, center: [0, 0, 5], radius: 1}\n"
            "lights:\n"
            "  - {type: point, position: [0, 5, 0]}\n"
        )
        output = tmp_path / "file.png"
        code = main(['--scene-file', str(scene_file), '--output', str(output),
                     '--log-level', 'WARNING'])

        assert code == 0
        with Image.open(output) as img:
            assert img.size == (6, 4)

    def test_missing_scene_file(self, tmp_path):
        code = main(['--scene-file', str(tmp_path / "nope.yaml"),
                     '--output', str(tmp_path / "x.png"), '--log-level', 'WARNING'])
        assert code == 1

    def test_bad_size(self, tmp_path):
        output = tmp_path / "bad.png"
        code = main(['--width', '0', '--output', str(output), '--log-level', 'WARNING'])
        assert code == 1
        assert not output.exists()


class TestBuildJob:
    """Test assembling the render job from arguments."""

    def write_scene(self, tmp_path, camera):
        scene_file = tmp_path / "scene.yaml"
        scene_file.write_text(
            "render: {width: 800, height: 600}\n"
            f"camera: {camera}\n"
            "objects:\n"
            "  - {type: sphere, center: [0, 0, 5], radius: 1}\n"
        )
        return str(scene_file)

    def test_size_override_refits_file_camera(self, tmp_path):
        path = self.write_scene(tmp_path, "{position: [0, 0, 0], look_at: [0, 0, 1]}")
        args = build_parser().parse_args(['--scene-file', path, '--width', '320', '--height', '320'])

        _, camera, settings = build_job(args)

        assert settings.width == 320
        assert camera.aspect_ratio == pytest.approx(1.0)

    def test_explicit_aspect_is_kept(self, tmp_path):
        path = self.write_scene(
            tmp_path, "{position: [0, 0, 0], look_at: [0, 0, 1], aspect_ratio: 2.5}"
        )
        args = build_parser().parse_args(['--scene-file', path, '--width', '320', '--height', '320'])

        _, camera, _ = build_job(args)

        assert camera.aspect_ratio == pytest.approx(2.5)

    def test_builtin_scene_uses_final_size(self):
        args = build_parser().parse_args(['--scene', 'cornell', '--width', '100', '--height', '50'])
        _, camera, _ = build_job(args)
        assert camera.aspect_ratio == pytest.approx(2.0)

    def test_malformed_scene_file_returns_error(self, tmp_path):
        scene_file = tmp_path / "bad.yaml"
        scene_file.write_text("objects:\n  - sphere\n")
        code = main(['--scene-file', str(scene_file), '--output', str(tmp_path / "x.png"),
                     '--log-level', 'WARNING'])
        assert code == 1
