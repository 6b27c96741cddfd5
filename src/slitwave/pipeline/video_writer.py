"""Video assembly using ffmpeg.

Hands the numbered frame files to ffmpeg, which reads them in index order and
encodes a single constant-quality video. ffmpeg output streams are passed
through to ours.
"""

import logging
import subprocess
import sys
from pathlib import Path

from slitwave.core.errors import VideoAssemblyError
from slitwave.pipeline.data import VideoConfig

# Configure module logger
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


def build_ffmpeg_command(input_pattern: str, output_path: Path | str, config: VideoConfig) -> list[str]:
    """Build the ffmpeg argument list for a numbered image sequence."""
    return [
        config.ffmpeg_bin,
        "-y",
        "-framerate",
        str(config.framerate),
        "-i",
        input_pattern,
        "-c:v",
        config.codec,
        "-crf",
        str(config.crf),
        "-pix_fmt",
        config.pix_fmt,
        str(output_path),
    ]


class VideoWriter:
    """Encodes rendered frames on disk into a video file."""

    def __init__(self, config: VideoConfig | None = None, log_fn=None):
        self.config = config or VideoConfig()
        self.log = log_fn or logger.info

    def assemble(self, input_pattern: str, output_path: Path | str) -> Path:
        """Run ffmpeg over the frame sequence.

        Args:
            input_pattern: printf-style frame path pattern (e.g. render/frame_%03d.png)
            output_path: Destination video file, overwritten if present

        Returns:
            Path to the written video

        Raises:
            VideoAssemblyError: If ffmpeg cannot be launched or exits non-zero
        """
        output_path = Path(output_path)
        cmd = build_ffmpeg_command(input_pattern, output_path, self.config)
        self.log(f"Starting ffmpeg (output: {output_path})...")

        try:
            subprocess.run(cmd, check=True)
        except FileNotFoundError as e:
            raise VideoAssemblyError(f"error running FFmpeg command: {self.config.ffmpeg_bin} not found in PATH") from e
        except subprocess.CalledProcessError as e:
            raise VideoAssemblyError(
                f"error running FFmpeg command: exit status {e.returncode}",
                returncode=e.returncode,
            ) from e
        except OSError as e:
            raise VideoAssemblyError(f"error running FFmpeg command: {e}") from e

        self.log(f"Video saved to: {output_path}")
        return output_path
