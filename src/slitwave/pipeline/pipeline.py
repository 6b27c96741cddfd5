"""Pipeline orchestrator - renders every frame, then assembles the video."""

import sys
import time
from pathlib import Path

from slitwave.core import constants as C
from slitwave.pipeline.data import SimulationConfig, VideoConfig, get_preset
from slitwave.pipeline.renderer import FrameRenderer
from slitwave.pipeline.video_writer import VideoWriter


def _flushing_print(*args, **kwargs):
    """Print with immediate flush for real-time progress output."""
    print(*args, **kwargs)
    sys.stdout.flush()


class Pipeline:
    """Runs the frame renderer followed by the video writer.

    Frames are rendered in any order (possibly in parallel); the writer only
    starts once every frame file exists. Any failure aborts the run and
    already-written frames are left on disk.
    """

    def __init__(
        self,
        sim_config: SimulationConfig | None = None,
        video_config: VideoConfig | None = None,
        render_dir: Path | str = C.RENDER_DIR,
        output_path: Path | str = C.OUTPUT_VIDEO,
        filename_pattern: str = C.FRAME_PATTERN,
        num_workers: int | None = None,
        assemble: bool = True,
        log_fn=_flushing_print,
    ):
        self.sim_config = (sim_config or SimulationConfig()).validate()
        self.video_config = video_config or VideoConfig()
        self.render_dir = Path(render_dir)
        self.output_path = Path(output_path)
        self.assemble = assemble
        self.log = log_fn

        self.renderer = FrameRenderer(
            config=self.sim_config,
            output_dir=self.render_dir,
            filename_pattern=filename_pattern,
            num_workers=num_workers,
            log_fn=self.log,
        )
        self.writer = VideoWriter(config=self.video_config, log_fn=self.log)
        self.frames_rendered = 0

    def prepare(self):
        """Create the render directory and drop any previous video."""
        self.render_dir.mkdir(parents=True, exist_ok=True)
        self.output_path.unlink(missing_ok=True)

    def run(self) -> Path | None:
        """Run the full pipeline.

        Returns:
            Path to the video, or None when assembly is disabled
        """
        cfg = self.sim_config
        self.log("=" * 60)
        self.log("Double-Slit Interference Render")
        self.log("=" * 60)
        self.log(f"Screen: {cfg.width}x{cfg.height} | Slits: {cfg.slit1_y}, {cfg.slit2_y} | Distance: {cfg.distance}")
        self.log(f"Frames: {len(cfg.frame_indices)} | Rule: {cfg.wavelength_rule.value} | Color: {cfg.color_mode.value}")
        mode = f"parallel ({self.renderer.num_workers} workers)" if cfg.parallel else "sequential"
        self.log(f"Rendering: {mode}")

        start_time = time.time()
        self.prepare()

        self.log("\n--- Rendering Frames ---")
        rendered = self.renderer.render_all()
        self.frames_rendered = len(rendered)
        render_elapsed = time.time() - start_time

        result = None
        if self.assemble:
            self.log("\n--- Assembling Video ---")
            result = self.writer.assemble(self.renderer.input_pattern, self.output_path)

        elapsed = time.time() - start_time
        self.log("\n" + "=" * 60)
        self.log("Pipeline Complete")
        self.log("=" * 60)
        self.log(f"Total time: {elapsed:.1f}s")
        self.log(f"Frames rendered: {self.frames_rendered}")
        if self.frames_rendered > 0:
            self.log(f"Average: {render_elapsed / self.frames_rendered:.3f}s per frame")

        return result


def run_pipeline(
    preset: str = "interference",
    num_frames: int | None = None,
    num_workers: int | None = None,
    render_dir: Path | str = C.RENDER_DIR,
    output_path: Path | str = C.OUTPUT_VIDEO,
    framerate: int = C.FRAMERATE,
    crf: int = C.CRF,
) -> Path | None:
    """Convenience function to run the full pipeline.

    Args:
        preset: Named configuration preset
        num_frames: Override the preset's frame count
        num_workers: Number of render threads (None = CPU count)
        render_dir: Directory for frame PNGs
        output_path: Output video path
        framerate: Video frame rate
        crf: Constant rate factor (lower = better)

    Returns:
        Path to output video file
    """
    pipeline = Pipeline(
        sim_config=get_preset(preset, num_frames=num_frames),
        video_config=VideoConfig(framerate=framerate, crf=crf),
        render_dir=render_dir,
        output_path=output_path,
        num_workers=num_workers,
    )
    return pipeline.run()
