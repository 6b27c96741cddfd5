"""Per-frame wavelength rules."""

import math
from enum import Enum

from slitwave.core.types import WavelengthPair


class WavelengthRule(str, Enum):
    """How the wavelength parameter evolves with frame index."""

    INVERSE_SQRT = "inverse_sqrt"  # (1/sqrt(x)) * multi / div, shrinks over time
    LINEAR = "linear"  # x / div, linear ramp


def frame_wavelengths(
    rule: WavelengthRule,
    index: int,
    freq_multi: float,
    freq_div: float,
) -> WavelengthPair:
    """Wavelength pair for frame `index`.

    Both slits always receive the same wavelength, giving a single frequency
    per frame.

    Raises:
        ValueError: If the frame index is below 1
    """
    if index < 1:
        raise ValueError(f"Frame index must be >= 1, got {index}")

    rule = WavelengthRule(rule)
    if rule is WavelengthRule.INVERSE_SQRT:
        f = 1 / math.sqrt(index)
        w = (f * freq_multi) / freq_div
    else:
        w = index / freq_div

    return (w, w)
