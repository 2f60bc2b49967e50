"""
Hue-preserving search for text colors that meet a contrast target.
"""

from .color import contrast_ratio, hex_to_hsl, hsl_to_hex, relative_luminance
from .config import (
    BEST_EFFORT_CONTRAST,
    BG_DARK_LUMINANCE,
    DARK_BG_MIN_SATURATION,
    GRAY_SATURATION,
    LIGHT_BG_MIN_SATURATION,
    MAX_SEARCH_LIGHTNESS,
    MIN_SEARCH_LIGHTNESS,
    SEARCH_MAX_STEPS,
    SEARCH_START_LIGHTNESS,
    SEARCH_STEP,
)

NEUTRAL_HSL = (0.0, 0.0, 0.5)


def _floor_saturation(s, is_bg_dark):
    # Gray input stays gray
    if s < GRAY_SATURATION:
        return s
    min_sat = DARK_BG_MIN_SATURATION if is_bg_dark else LIGHT_BG_MIN_SATURATION
    return max(s, min_sat)


def get_vibrant_readable_color(source_color, bg_color, min_ratio):
    """Transform a source color into readable text for bg_color.

    Holds the source hue fixed and walks lightness away from the background
    in steps of SEARCH_STEP, with saturation raised to a floor so the result
    does not wash out. Returns the first candidate reaching min_ratio.
    Failing that, the best candidate is returned if it reaches
    BEST_EFFORT_CONTRAST; otherwise pure white (dark background) or pure
    black (light background).
    """
    is_bg_dark = relative_luminance(bg_color) < BG_DARK_LUMINANCE
    h, s, l = hex_to_hsl(source_color) or NEUTRAL_HSL

    # Dark background: go lighter. Light background: go darker.
    step = SEARCH_STEP if is_bg_dark else -SEARCH_STEP
    current_l = SEARCH_START_LIGHTNESS

    # Start from the source itself if it is already on the right side
    if is_bg_dark and l > SEARCH_START_LIGHTNESS:
        current_l = l
    if not is_bg_dark and l < SEARCH_START_LIGHTNESS:
        current_l = l

    adjusted_s = _floor_saturation(s, is_bg_dark)
    best_hex = None
    best_ratio = 0

    for _ in range(SEARCH_MAX_STEPS):
        candidate = hsl_to_hex(h, adjusted_s, current_l)
        ratio = contrast_ratio(candidate, bg_color)

        if ratio >= min_ratio:
            return candidate

        if ratio > best_ratio:
            best_ratio = ratio
            best_hex = candidate

        current_l += step
        if current_l > MAX_SEARCH_LIGHTNESS or current_l < MIN_SEARCH_LIGHTNESS:
            break

    if best_ratio < BEST_EFFORT_CONTRAST:
        return "#ffffff" if is_bg_dark else "#000000"

    return best_hex


def ensure_contrast(color, bg_color, min_ratio):
    """Keep a color visible against bg_color (non-text contrast)."""
    return get_vibrant_readable_color(color, bg_color, min_ratio)
