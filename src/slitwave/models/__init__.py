"""Interference intensity and wavelength models."""

from slitwave.models.interference import (
    intensity_profile,
    intensity_to_channel,
    interference_intensity,
)
from slitwave.models.wavelength import WavelengthRule, frame_wavelengths

__all__ = [
    "WavelengthRule",
    "frame_wavelengths",
    "intensity_profile",
    "intensity_to_channel",
    "interference_intensity",
]
