"""Shared constants for color conversion and widget geometry."""

# Supported correlated color temperature domain (Kelvin)
KELVIN_MIN = 1000
KELVIN_MAX = 40000

# Bisection tolerance used when estimating temperature from RGB
KELVIN_EPSILON = 0.4

# Widget defaults (pixels unless noted)
DEFAULT_WIDTH = 300
DEFAULT_BORDER_WIDTH = 0
DEFAULT_PADDING = 6
DEFAULT_HANDLE_RADIUS = 8
DEFAULT_WHEEL_ANGLE = 0  # degrees

# Default range for kelvin sliders
DEFAULT_MIN_TEMPERATURE = 2200
DEFAULT_MAX_TEMPERATURE = 11000

# Number of gradient stops sampled across a kelvin slider
KELVIN_GRADIENT_STOPS = 8

# Hue slider spans 0-359 degrees so both track ends stay distinct
HUE_SLIDER_MAX = 359

# Hue ring is drawn as 360 one-degree arcs; each overlaps its neighbour
HUE_RING_STEPS = 360
HUE_RING_ARC_SPAN = 1.5

# Fixed rainbow stops for hue sliders: (offset %, color)
HUE_GRADIENT: tuple[tuple[float, str], ...] = (
    (0, "#f00"),
    (16.666, "#ff0"),
    (33.333, "#0f0"),
    (50, "#0ff"),
    (66.666, "#00f"),
    (83.333, "#f0f"),
    (100, "#f00"),
)

# Named colors accepted by Color.parse()
NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 128, 0),
    "lime": (0, 255, 0),
    "blue": (0, 0, 255),
    "magenta": (255, 0, 255),
    "cyan": (0, 255, 255),
    "yellow": (255, 255, 0),
    "gray": (128, 128, 128),
}
