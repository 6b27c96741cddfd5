"""Core constants, types and errors."""

from slitwave.core.errors import (
    ConfigError,
    FrameRenderError,
    SlitwaveError,
    VideoAssemblyError,
)

__all__ = [
    "ConfigError",
    "FrameRenderError",
    "SlitwaveError",
    "VideoAssemblyError",
]
