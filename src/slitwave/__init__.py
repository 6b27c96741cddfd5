"""Double-slit interference video renderer.

Renders a banded double-slit interference pattern frame by frame, sweeping the
wavelength across frames, and assembles the frames into a video with ffmpeg.
"""

__version__ = "0.1.0"
