# Region Highlighter Configuration Constants

import os

# Screen dimensions
SCREEN_W = 800
SCREEN_H = 400
FPS = 60
CAPTION = "Region Highlighter"

# Canvas is cleared to this every frame before the regions are drawn.
BACKGROUND = (255, 255, 255)

# Fraction of the remaining color distance covered per frame.
ANIMATION_RATE = 0.08

# Region colors: (idle, active)
REGION_COLORS = {
    "upper_left": ((0, 0, 0), (255, 255, 255)),
    "upper_right": ((255, 255, 255), (0, 0, 0)),
    "lower_left": ((200, 0, 0), (0, 200, 0)),
    "lower_right": ((0, 200, 0), (200, 0, 0)),
}

# Logging
LOG_LEVEL = os.environ.get("REGION_HIGHLIGHTER_LOG", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
