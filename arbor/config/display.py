"""Display and window configuration constants."""

import math

# Window dimensions in pixels
SCREEN_WIDTH = 1300
SCREEN_HEIGHT = 1000

# The frame rate for the render loop, in frames per second
FRAME_RATE = 60

WINDOW_CAPTION = "Genome Tree"
BACKGROUND_COLOR = (0, 0, 0)

# Trunk anchor in world coordinates (y up); lands at (650, 800) on screen
ROOT_ANCHOR = (650.0, 200.0)
ROOT_HEADING = math.pi / 2

# Highlight/shadow circles drawn around every segment
OVERLAY_OFFSET = 1.0
OVERLAY_ALPHA = 0.1

# Width of separator lines in console output
SEPARATOR_WIDTH = 60
