"""Configuration and settings loaded from the environment.

Every field can be set with a `SLITWAVE_` prefixed environment variable or in
a `.env` file, e.g. `SLITWAVE_RENDER__NUM_FRAMES=600` or
`SLITWAVE_VIDEO__CRF=18`.
"""

from pathlib import Path
from typing import Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from slitwave.core import constants as C
from slitwave.pipeline.data import PRESETS, SimulationConfig, VideoConfig, get_preset


class RenderSettings(BaseSettings):
    """Frame rendering configuration."""

    model_config = SettingsConfigDict(env_prefix="SLITWAVE_RENDER_")

    # Named preset providing the wavelength rule, colour and parallelism
    preset: str = "interference"

    # Overrides applied on top of the preset (None = preset value)
    width: int | None = Field(default=None, gt=0)
    height: int | None = Field(default=None, gt=0)
    slit_offset: float | None = None
    distance: float | None = Field(default=None, gt=0)
    num_frames: int | None = Field(default=None, ge=2)

    # Render threads (None = CPU count)
    workers: int | None = Field(default=None, ge=1)

    # Output layout
    render_dir: Path = Path(C.RENDER_DIR)
    filename_pattern: str = C.FRAME_PATTERN

    @model_validator(mode="after")
    def check_preset(self) -> Self:
        """Reject unknown preset names early."""
        if self.preset not in PRESETS:
            known = ", ".join(sorted(PRESETS))
            raise ValueError(f"Unknown preset '{self.preset}' (known: {known})")
        return self


class VideoSettings(BaseSettings):
    """Video encoder configuration."""

    model_config = SettingsConfigDict(env_prefix="SLITWAVE_VIDEO_")

    framerate: int = Field(default=C.FRAMERATE, gt=0)
    crf: int = Field(default=C.CRF, ge=0, le=51)
    codec: str = C.VIDEO_CODEC
    pix_fmt: str = C.PIXEL_FORMAT
    ffmpeg_bin: str = "ffmpeg"
    output_path: Path = Path(C.OUTPUT_VIDEO)


class Settings(BaseSettings):
    """Master configuration aggregating all subsystems."""

    model_config = SettingsConfigDict(
        env_prefix="SLITWAVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    render: RenderSettings = Field(default_factory=RenderSettings)
    video: VideoSettings = Field(default_factory=VideoSettings)

    def simulation_config(self) -> SimulationConfig:
        """Build the immutable simulation config from the preset and overrides."""
        r = self.render
        overrides = {
            "width": r.width,
            "height": r.height,
            "distance": r.distance,
            "num_frames": r.num_frames,
            "slit_offset": r.slit_offset,
        }
        return get_preset(r.preset, **overrides)

    def video_config(self) -> VideoConfig:
        v = self.video
        return VideoConfig(
            framerate=v.framerate,
            crf=v.crf,
            codec=v.codec,
            pix_fmt=v.pix_fmt,
            ffmpeg_bin=v.ffmpeg_bin,
        )


def get_settings() -> Settings:
    """Load settings from environment and .env file."""
    return Settings()
