"""Type definitions shared across the renderer."""

from typing import TypeAlias

import numpy as np

# Scalar types
Scalar: TypeAlias = float | np.floating

# Array types
FloatArray: TypeAlias = np.ndarray
ArrayLike: TypeAlias = FloatArray | list[float] | tuple[float, ...]

# Per-frame wavelength pair (one per slit)
WavelengthPair: TypeAlias = tuple[float, float]
