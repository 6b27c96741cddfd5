"""Two-point-source interference intensity.

Each slit is treated as a point source offset along the long screen axis and
separated from the screen by a fixed distance. The path length from each slit
to a screen coordinate is turned into a phase, and the amplitude is the sum of
the sines of the two phases:

    d_k     = sqrt((slit_k - y)^2 + distance^2)
    phase_k = 2π · d_k / w_k
    A       = sin(phase_1) + sin(phase_2)
    I       = A^2

This is not the textbook cos² fringe formula. The banded output depends on this
exact shape, so it is kept as is. No normalization happens here; callers scale
for display with `intensity_to_channel`.
"""

import numpy as np

from slitwave.core.constants import CHANNEL_MAX, MAX_INTENSITY, TWO_PI
from slitwave.core.types import ArrayLike, FloatArray, Scalar


def interference_intensity(
    y: Scalar | ArrayLike,
    slit1_y: float,
    slit2_y: float,
    w1: float,
    w2: float,
    distance: float,
) -> Scalar | FloatArray:
    """Intensity at screen coordinate(s) `y` due to two coherent sources.

    Args:
        y: Position(s) along the long screen axis
        slit1_y: Position of the first slit along the same axis
        slit2_y: Position of the second slit along the same axis
        w1: Wavelength parameter for the first slit
        w2: Wavelength parameter for the second slit
        distance: Slit-to-screen separation

    Returns:
        Non-negative intensity, a float for scalar `y` or an array otherwise
    """
    y = np.asarray(y, dtype=np.float64)

    distance1 = np.sqrt((slit1_y - y) ** 2 + distance**2)
    distance2 = np.sqrt((slit2_y - y) ** 2 + distance**2)

    phase1 = TWO_PI * distance1 / w1
    phase2 = TWO_PI * distance2 / w2

    amplitude = np.sin(phase1) + np.sin(phase2)
    intensity = amplitude * amplitude

    if intensity.ndim == 0:
        return float(intensity)
    return intensity


def intensity_to_channel(intensity: Scalar | ArrayLike) -> int | np.ndarray:
    """Map raw intensity to a clamped 8-bit channel value.

    `clamp(intensity * 255 / 4, 0, 255)`, truncated toward zero. Values above the
    peak saturate at 255 instead of wrapping.
    """
    scaled = np.asarray(intensity, dtype=np.float64) * CHANNEL_MAX / MAX_INTENSITY
    channel = np.clip(scaled, 0, CHANNEL_MAX).astype(np.uint8)

    if channel.ndim == 0:
        return int(channel)
    return channel


def intensity_profile(
    height: int,
    slit1_y: float,
    slit2_y: float,
    wavelengths: tuple[float, float],
    distance: float,
) -> FloatArray:
    """Intensity for every long-axis coordinate in [0, height)."""
    y = np.arange(height, dtype=np.float64)
    w1, w2 = wavelengths
    return interference_intensity(y, slit1_y, slit2_y, w1, w2, distance)
