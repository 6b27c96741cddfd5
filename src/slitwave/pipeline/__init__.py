"""Frame rendering and video assembly pipeline.

Architecture:
┌─────────────────┐     ┌──────────────────┐     ┌─────────────────┐
│  Frame indices  │────▶│  Render Workers  │────▶│  render/*.png   │
│  1..N-1         │     │  (thread pool)   │     │  (zero-padded)  │
└─────────────────┘     └──────────────────┘     └─────────────────┘
                                                          │
                                                          ▼
                                                 ┌─────────────────┐
                                                 │  FFmpeg Writer  │
                                                 │  (index order)  │
                                                 └─────────────────┘

Frames share no state, so they can be rendered in any order; the numbered file
names carry the ordering to ffmpeg.
"""

from slitwave.pipeline.data import (
    PRESETS,
    ColorMode,
    Frame,
    RenderedFrame,
    SimulationConfig,
    VideoConfig,
    get_preset,
)
from slitwave.pipeline.renderer import FrameRenderer, synthesize_frame
from slitwave.pipeline.video_writer import VideoWriter
from slitwave.pipeline.pipeline import Pipeline, run_pipeline

__all__ = [
    "PRESETS",
    "ColorMode",
    "Frame",
    "RenderedFrame",
    "SimulationConfig",
    "VideoConfig",
    "get_preset",
    "FrameRenderer",
    "synthesize_frame",
    "VideoWriter",
    "Pipeline",
    "run_pipeline",
]
