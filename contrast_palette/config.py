"""Tuning constants for palette extraction.

These encode product-visible design decisions. The hue bias and the 0.6
dark threshold are tuning heuristics, not derived values.
"""

from types import MappingProxyType

# Sampling
SAMPLE_SIZE = 50  # Edge length of the resampling canvas
MIN_ALPHA = 128  # Samples below ~50% opacity are ignored
HTTP_TIMEOUT = 10  # Seconds, for http(s) image sources

# Quantization
DEFAULT_NUM_COLORS = 5
QUANTIZE_PRECISION = 24  # 256 / 24 ~ 11 buckets per channel
CANDIDATE_FACTOR = 2  # Over-fetch so the vibrancy step has more choice
FALLBACK_COLOR = "#4338ca"

# Vibrancy scoring
MIN_VIBRANT_SATURATION = 0.2
DARK_LIGHTNESS_LIMIT = 0.2
LIGHT_LIGHTNESS_LIMIT = 0.85
EXTREME_LIGHTNESS_PENALTY = 0.5
BLUE_HUE_RANGE = (200, 260)
NON_BLUE_BONUS = 1.2

# Readable color search
BG_DARK_LUMINANCE = 0.5
SEARCH_START_LIGHTNESS = 0.5
SEARCH_STEP = 0.05
SEARCH_MAX_STEPS = 20
MIN_SEARCH_LIGHTNESS = 0.02
MAX_SEARCH_LIGHTNESS = 0.98
GRAY_SATURATION = 0.1  # Sources below this stay gray
DARK_BG_MIN_SATURATION = 0.6
LIGHT_BG_MIN_SATURATION = 0.8
BEST_EFFORT_CONTRAST = 3.0

# Contrast requirements
MIN_TEXT_CONTRAST = 7.0  # WCAG AAA normal text
MIN_BUTTON_CONTRAST = 4.5  # WCAG AA normal text
MIN_ACCENT_CONTRAST = 3.0  # WCAG AA large text / non-text

# Palette assembly
PALETTE_DARK_LUMINANCE = 0.6  # Mid-tones read better with light text
DARK_CARD_BASE = "#1e1e2e"
LIGHT_CARD_BASE = "#ffffff"
DARK_CARD_TINT = MappingProxyType({"l": 0.1, "s": 0.2})
LIGHT_CARD_TINT = MappingProxyType({"l": 0.98, "s": 0.1})
DARK_CARD_GLASS = "rgba(20, 20, 30, 0.6)"
LIGHT_CARD_GLASS = "rgba(255, 255, 255, 0.85)"
SECONDARY_TEXT_ALPHA = 0.75
