"""Tests for the command-line interface."""

import subprocess

from typer.testing import CliRunner

from slitwave import __version__
from slitwave.cli import app

runner = CliRunner()


class TestCli:
    """Tests for CLI commands."""

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_presets(self):
        result = runner.invoke(app, ["presets"])
        assert result.exit_code == 0
        assert "interference" in result.output
        assert "red-ramp" in result.output

    def test_render(self, tmp_path):
        render_dir = tmp_path / "frames"
        result = runner.invoke(
            app,
            ["render", "--frames", "4", "--width", "6", "--height", "40", "--render-dir", str(render_dir)],
        )
        assert result.exit_code == 0, result.output
        assert sorted(p.name for p in render_dir.glob("*.png")) == [
            "frame_001.png",
            "frame_002.png",
            "frame_003.png",
        ]

    def test_run(self, tmp_path, monkeypatch):
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append(cmd)
            return subprocess.CompletedProcess(cmd, 0)

        monkeypatch.setattr(subprocess, "run", fake_run)
        output = tmp_path / "out.mp4"
        result = runner.invoke(
            app,
            [
                "run",
                "--preset",
                "red-ramp",
                "--frames",
                "3",
                "--width",
                "4",
                "--height",
                "20",
                "--render-dir",
                str(tmp_path / "render"),
                "--output",
                str(output),
            ],
        )
        assert result.exit_code == 0, result.output
        assert len(calls) == 1
        assert calls[0][-1] == str(output)

    def test_run_encoder_failure(self, tmp_path, monkeypatch):
        def failing_run(cmd, **kwargs):
            raise subprocess.CalledProcessError(2, cmd)

        monkeypatch.setattr(subprocess, "run", failing_run)
        result = runner.invoke(
            app,
            ["run", "--frames", "2", "--width", "4", "--height", "20", "--render-dir", str(tmp_path / "r")],
        )
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_unknown_preset(self, tmp_path):
        result = runner.invoke(app, ["render", "--preset", "nope", "--render-dir", str(tmp_path)])
        assert result.exit_code == 1
        assert "Unknown preset" in result.output

    def test_assemble(self, tmp_path, monkeypatch):
        calls = []
        monkeypatch.setattr(subprocess, "run", lambda cmd, **kw: calls.append(cmd) or subprocess.CompletedProcess(cmd, 0))

        result = runner.invoke(
            app,
            ["assemble", "--render-dir", str(tmp_path), "--output", str(tmp_path / "v.mp4"), "--fps", "25"],
        )
        assert result.exit_code == 0, result.output
        cmd = calls[0]
        assert cmd[cmd.index("-framerate") + 1] == "25"
        assert cmd[cmd.index("-i") + 1] == str(tmp_path / "frame_%03d.png")

    def test_profile(self):
        result = runner.invoke(app, ["profile", "100", "--rows", "4"])
        assert result.exit_code == 0, result.output
        assert "Frame 100" in result.output

    def test_profile_bad_index(self):
        result = runner.invoke(app, ["profile", "0"])
        assert result.exit_code == 1

    def test_render_dir_is_a_file(self, tmp_path):
        """A render directory that cannot be created is reported, not raised."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        result = runner.invoke(
            app,
            ["render", "--frames", "2", "--width", "4", "--height", "20", "--render-dir", str(blocker)],
        )
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert not isinstance(result.exception, OSError)

    def test_assemble_bad_settings(self, monkeypatch):
        """Invalid environment settings give an error message, not a traceback."""
        monkeypatch.setenv("SLITWAVE_RENDER__PRESET", "bogus")

        result = runner.invoke(app, ["assemble"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Unknown preset" in result.output

    def test_negative_workers_rejected(self, tmp_path):
        result = runner.invoke(
            app,
            ["render", "--frames", "2", "--width", "4", "--height", "20", "--workers", "-3", "--render-dir", str(tmp_path)],
        )
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert list(tmp_path.glob("*.png")) == []

    def test_zero_workers_rejected(self, tmp_path):
        result = runner.invoke(
            app,
            ["render", "--frames", "2", "--width", "4", "--height", "20", "--workers", "0", "--render-dir", str(tmp_path)],
        )
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_bracketed_paths_printed_verbatim(self):
        """Square brackets in frame paths are not treated as markup."""
        result = runner.invoke(
            app,
            ["render", "--frames", "2", "--width", "4", "--height", "20", "--render-dir", "[bold]x"],
        )
        assert result.exit_code == 0, result.output
        assert "Image saved: [bold]x/frame_001.png" in result.output
