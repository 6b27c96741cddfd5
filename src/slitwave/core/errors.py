"""Custom exception types for the renderer."""


class SlitwaveError(Exception):
    """Base exception for all slitwave errors."""

    pass


class ConfigError(SlitwaveError):
    """Configuration-related errors."""

    pass


class FrameRenderError(SlitwaveError):
    """A frame could not be synthesized or written to disk."""

    def __init__(self, index: int, message: str):
        super().__init__(f"Frame {index}: {message}")
        self.index = index


class VideoAssemblyError(SlitwaveError):
    """The external video encoder failed to launch or exited non-zero."""

    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode


__all__ = [
    "SlitwaveError",
    "ConfigError",
    "FrameRenderError",
    "VideoAssemblyError",
]
