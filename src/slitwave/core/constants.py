"""Default simulation and encoding constants."""

import math

# Screen dimensions (narrow panel, long interference axis)
SCREEN_WIDTH = 384
SCREEN_HEIGHT = 3840

# Slits sit symmetrically about the screen centre
SLIT_OFFSET = SCREEN_HEIGHT // 10

# Distance from the slits to the screen (pixels)
SOURCE_DISTANCE = 300.0

# Frame sweep
NUM_FRAMES = 3000
FREQ_DIV = 10.0
FREQ_MULTI = 1000.0

# Intensity of two unit sines peaks at (1 + 1)^2
MAX_INTENSITY = 4.0
CHANNEL_MAX = 255

TWO_PI = 2 * math.pi

# Video encoding
FRAMERATE = 60
CRF = 12
VIDEO_CODEC = "libx264"
PIXEL_FORMAT = "yuv420p"

# Filesystem layout
RENDER_DIR = "render"
FRAME_PATTERN = "frame_%03d.png"
OUTPUT_VIDEO = "output.mp4"
