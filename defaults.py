"""Centralized application default values for easier review and tweaks."""

from typing import Tuple

from color_spaces import LchColor

# Gamut search defaults
# Slack applied to linear channels. Tight enough that colors approaching
# L=0 or L=100 settle on exactly #000000 / #ffffff.
GAMUT_TOLERANCE = 1e-5
SEARCH_STEP_THRESHOLD = 0.1
MAX_SEARCH_ITERATIONS = 64

# Preview defaults
DEFAULT_COLOR_LCH: LchColor = (50.0, 60.0, 20.0)
LIGHTNESS_RANGE: Tuple[float, float] = (0.0, 100.0)
CHROMA_RANGE: Tuple[float, float] = (0.0, 150.0)
HUE_RANGE: Tuple[float, float] = (0.0, 359.0)
DEFAULT_HUE_RAMP_STEPS = 12
# Stored as the ColorFormat enum value name for cycle-free import.
DEFAULT_OUTPUT_FORMAT = "hex"
