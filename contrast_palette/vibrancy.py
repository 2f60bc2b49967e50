from .color import hex_to_hsl
from .config import (
    BLUE_HUE_RANGE,
    DARK_LIGHTNESS_LIMIT,
    EXTREME_LIGHTNESS_PENALTY,
    LIGHT_LIGHTNESS_LIMIT,
    MIN_VIBRANT_SATURATION,
    NON_BLUE_BONUS,
)


def vibrancy_score(hex_color):
    """Score a color as a signature accent. 0 means unusable (gray or malformed)."""
    hsl = hex_to_hsl(hex_color)
    if hsl is None:
        return 0
    h, s, l = hsl

    # Nearly grayscale colors are never accents
    if s < MIN_VIBRANT_SATURATION:
        return 0

    score = s
    if l < DARK_LIGHTNESS_LIMIT or l > LIGHT_LIGHTNESS_LIMIT:
        score *= EXTREME_LIGHTNESS_PENALTY

    # Blue is the fallback hue, so favour anything else
    low, high = BLUE_HUE_RANGE
    if h < low or h > high:
        score *= NON_BLUE_BONUS

    return score


def find_vibrant_color(colors):
    """Return the most vibrant usable color, or None if every one was rejected."""
    max_score = 0
    best_color = None

    for color in colors:
        score = vibrancy_score(color)
        if score > max_score:
            max_score = score
            best_color = color

    return best_color
