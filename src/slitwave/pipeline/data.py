"""Data classes for the render pipeline."""

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from slitwave.core import constants as C
from slitwave.core.errors import ConfigError
from slitwave.core.types import WavelengthPair
from slitwave.models.wavelength import WavelengthRule

if TYPE_CHECKING:
    from numpy.typing import NDArray


class ColorMode(str, Enum):
    """How a channel value is turned into an RGBA pixel."""

    GRAYSCALE = "grayscale"  # R = G = B
    RED = "red"  # R only, G = B = 0

    @property
    def channel_mask(self) -> "NDArray[np.uint8]":
        """RGB multipliers applied to the channel value."""
        if self is ColorMode.GRAYSCALE:
            return np.array([1, 1, 1], dtype=np.uint8)
        return np.array([1, 0, 0], dtype=np.uint8)


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable parameters for a render run."""

    # Screen dimensions (height is the long interference axis)
    width: int = C.SCREEN_WIDTH
    height: int = C.SCREEN_HEIGHT

    # Slit geometry
    slit_offset: float = C.SLIT_OFFSET
    distance: float = C.SOURCE_DISTANCE

    # Frame sweep
    num_frames: int = C.NUM_FRAMES
    freq_div: float = C.FREQ_DIV
    freq_multi: float = C.FREQ_MULTI
    wavelength_rule: WavelengthRule = WavelengthRule.INVERSE_SQRT

    # Output style
    color_mode: ColorMode = ColorMode.GRAYSCALE
    parallel: bool = True

    @property
    def center(self) -> int:
        return self.height // 2

    @property
    def slit1_y(self) -> float:
        return self.center + self.slit_offset

    @property
    def slit2_y(self) -> float:
        return self.center - self.slit_offset

    @property
    def frame_indices(self) -> range:
        """Frame indices rendered by a run, 1 through num_frames - 1."""
        return range(1, self.num_frames)

    def validate(self) -> "SimulationConfig":
        """Check parameter ranges.

        Raises:
            ConfigError: If any parameter is out of range
        """
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Screen dimensions must be positive, got {self.width}x{self.height}")
        if self.distance <= 0:
            raise ConfigError(f"Source distance must be positive, got {self.distance}")
        if self.freq_div == 0:
            raise ConfigError("freq_div must be non-zero")
        if self.wavelength_rule is WavelengthRule.INVERSE_SQRT and self.freq_multi == 0:
            raise ConfigError("freq_multi must be non-zero for the inverse_sqrt rule")
        if self.num_frames < 2:
            raise ConfigError(f"num_frames must be at least 2, got {self.num_frames}")
        return self


@dataclass(frozen=True)
class VideoConfig:
    """Parameters handed to the external video encoder."""

    framerate: int = C.FRAMERATE
    crf: int = C.CRF  # Quality (lower = better)
    codec: str = C.VIDEO_CODEC
    pix_fmt: str = C.PIXEL_FORMAT
    ffmpeg_bin: str = "ffmpeg"


PRESETS: dict[str, SimulationConfig] = {
    # Frame-parallel, shrinking wavelength, grayscale bands
    "interference": SimulationConfig(),
    # Sequential, linear wavelength ramp, red bands
    "red-ramp": SimulationConfig(
        wavelength_rule=WavelengthRule.LINEAR,
        color_mode=ColorMode.RED,
        parallel=False,
    ),
}

DEFAULT_PRESET = "interference"


def get_preset(name: str = DEFAULT_PRESET, **overrides) -> SimulationConfig:
    """Look up a named preset, optionally overriding fields.

    Raises:
        ConfigError: If the preset name is unknown
    """
    try:
        config = PRESETS[name]
    except KeyError:
        known = ", ".join(sorted(PRESETS))
        raise ConfigError(f"Unknown preset '{name}' (known: {known})") from None

    overrides = {k: v for k, v in overrides.items() if v is not None}
    # Slits stay at a tenth of the screen height unless placed explicitly
    if "height" in overrides and "slit_offset" not in overrides:
        overrides["slit_offset"] = overrides["height"] // 10
    if overrides:
        config = replace(config, **overrides)
    return config.validate()


@dataclass
class Frame:
    """A fully synthesized frame.

    `pixels` is the final raster with shape (width, height, 4): rows run along
    the short axis (mirrored) and columns along the long interference axis.
    """

    index: int
    wavelengths: WavelengthPair
    pixels: "NDArray[np.uint8]" = field(repr=False)

    @property
    def size(self) -> tuple[int, int]:
        """Image size as (columns, rows)."""
        rows, cols = self.pixels.shape[:2]
        return (cols, rows)


@dataclass
class RenderedFrame:
    """A frame written to disk, identified by index for ordering."""

    index: int
    path: Path
