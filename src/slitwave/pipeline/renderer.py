"""Frame synthesis and PNG output.

Each frame is independent: its pixels depend only on the configuration and the
frame index. Frames are dispatched onto a bounded thread pool and the renderer
blocks until every frame has been written.
"""

import logging
import os
import sys
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Iterable

import numpy as np
from PIL import Image

from slitwave.core.constants import FRAME_PATTERN
from slitwave.core.errors import FrameRenderError
from slitwave.models.interference import intensity_profile, intensity_to_channel
from slitwave.models.wavelength import frame_wavelengths
from slitwave.pipeline.data import Frame, RenderedFrame, SimulationConfig

# Configure module logger
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


def frame_path(output_dir: Path | str, pattern: str, index: int) -> Path:
    """Deterministic, zero-padded file path for a frame index."""
    return Path(output_dir) / (pattern % index)


def row_colors(config: SimulationConfig, wavelengths: tuple[float, float]) -> np.ndarray:
    """RGB colour of every long-axis row, shape (height, 3)."""
    profile = intensity_profile(config.height, config.slit1_y, config.slit2_y, wavelengths, config.distance)
    channel = intensity_to_channel(profile)
    return channel[:, np.newaxis] * config.color_mode.channel_mask[np.newaxis, :]


def orient_raster(logical: np.ndarray) -> np.ndarray:
    """Rotate a (height, width, ...) logical grid into the stored orientation.

    Swaps the axes and mirrors the short axis: raster[r, c] == logical[c, width - 1 - r].
    """
    return np.ascontiguousarray(logical.swapaxes(0, 1)[::-1])


def synthesize_frame(config: SimulationConfig, index: int) -> Frame:
    """Compute the full raster for one frame.

    The logical grid is (height, width): one intensity per long-axis row,
    broadcast across the short axis, then rotated by `orient_raster`.
    """
    wavelengths = frame_wavelengths(config.wavelength_rule, index, config.freq_multi, config.freq_div)
    colors = row_colors(config, wavelengths)

    logical = np.empty((config.height, config.width, 4), dtype=np.uint8)
    logical[:, :, :3] = colors[:, np.newaxis, :]
    logical[:, :, 3] = 255

    raster = orient_raster(logical)
    return Frame(index=index, wavelengths=wavelengths, pixels=raster)


def write_png(frame: Frame, path: Path) -> None:
    """Encode a frame as PNG. The file handle lives only for this call."""
    image = Image.fromarray(frame.pixels)
    with open(path, "wb") as fh:
        image.save(fh, format="PNG")


class FrameRenderer:
    """Renders frames to numbered PNG files.

    Uses a thread pool sized to the CPU count when the configuration is
    parallel, or renders frames one after another otherwise.
    """

    def __init__(
        self,
        config: SimulationConfig,
        output_dir: Path | str,
        filename_pattern: str = FRAME_PATTERN,
        num_workers: int | None = None,
        log_fn=None,
    ):
        self.config = config
        self.output_dir = Path(output_dir)
        self.filename_pattern = filename_pattern
        self.num_workers = num_workers or os.cpu_count() or 1
        self.log = log_fn or logger.info

    @property
    def input_pattern(self) -> str:
        """Numbered file pattern consumed by the video encoder."""
        return str(self.output_dir / self.filename_pattern)

    def render_frame(self, index: int) -> RenderedFrame:
        """Synthesize and write one frame.

        Raises:
            FrameRenderError: If the frame cannot be computed or written
        """
        path = frame_path(self.output_dir, self.filename_pattern, index)
        try:
            frame = synthesize_frame(self.config, index)
            write_png(frame, path)
        except (OSError, ValueError) as e:
            raise FrameRenderError(index, str(e)) from e

        self.log(f"Image saved: {path}")
        return RenderedFrame(index=index, path=path)

    def _render_sequential(self, indices: list[int]) -> list[RenderedFrame]:
        return [self.render_frame(i) for i in indices]

    def _render_parallel(self, indices: list[int]) -> list[RenderedFrame]:
        workers = max(1, min(self.num_workers, len(indices)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(self.render_frame, i) for i in indices]
            done, pending = wait(futures, return_when=FIRST_EXCEPTION)

            for future in done:
                if future.exception() is not None:
                    for p in pending:
                        p.cancel()
                    raise future.exception()

            return [f.result() for f in futures]

    def render_all(self, indices: Iterable[int] | None = None) -> list[RenderedFrame]:
        """Render every requested frame and wait for all of them.

        Args:
            indices: Frame indices to render (default: the full sweep)

        Returns:
            Rendered frames ordered by index

        Raises:
            FrameRenderError: On the first frame that fails; the run aborts
        """
        indices = list(self.config.frame_indices if indices is None else indices)
        if not indices:
            return []

        if self.config.parallel and self.num_workers > 1:
            rendered = self._render_parallel(indices)
        else:
            rendered = self._render_sequential(indices)

        return sorted(rendered, key=lambda r: r.index)
