from collections import namedtuple

from ..color import adjust_hsl, hex_to_rgb, relative_luminance, rgb_triplet, rgba
from ..config import (
    DARK_CARD_BASE,
    DARK_CARD_GLASS,
    DARK_CARD_TINT,
    FALLBACK_COLOR,
    LIGHT_CARD_BASE,
    LIGHT_CARD_GLASS,
    LIGHT_CARD_TINT,
    MIN_ACCENT_CONTRAST,
    MIN_BUTTON_CONTRAST,
    MIN_TEXT_CONTRAST,
    PALETTE_DARK_LUMINANCE,
    SECONDARY_TEXT_ALPHA,
)
from ..readable import ensure_contrast, get_vibrant_readable_color
from ..vibrancy import find_vibrant_color

ColorPalette = namedtuple(
    "ColorPalette",
    [
        "text_primary",
        "text_primary_rgb",
        "text_secondary",
        "card_background",
        "card_background_solid",
        "accent",
        "accent_rgb",
        "accent_text",
        "button_background",
        "button_text",
        "is_dark",
    ],
)

DEFAULT_PALETTE = ColorPalette(
    text_primary="#1e293b",
    text_primary_rgb="30, 41, 59",
    text_secondary="#64748b",
    card_background="rgba(255, 255, 255, 0.95)",
    card_background_solid="#ffffff",
    accent="#8b5cf6",
    accent_rgb="139, 92, 246",
    accent_text="#ffffff",
    button_background="#8b5cf6",
    button_text="#ffffff",
    is_dark=False,
)


def get_default_palette():
    return DEFAULT_PALETTE


def card_base_for(is_dark):
    return DARK_CARD_BASE if is_dark else LIGHT_CARD_BASE


def generate_contrast_palette(
    dominant_colors,
    text_ratio=MIN_TEXT_CONTRAST,
    button_ratio=MIN_BUTTON_CONTRAST,
    accent_ratio=MIN_ACCENT_CONTRAST,
):
    """Generate a complete contrast palette from dominant background colors.

    Args:
        dominant_colors: Hex colors ordered by frequency, most frequent first
        text_ratio: Minimum contrast of text_primary against the card base
        button_ratio: Minimum contrast of button_text against the accent
        accent_ratio: Minimum contrast of the accent against the card base

    Returns:
        ColorPalette
    """
    if not dominant_colors:
        return get_default_palette()

    primary_bg = dominant_colors[0]
    if hex_to_rgb(primary_bg) is None:
        primary_bg = FALLBACK_COLOR

    is_dark = relative_luminance(primary_bg) < PALETTE_DARK_LUMINANCE
    card_base = card_base_for(is_dark)

    # Accent: most vibrant candidate, kept visible on cards
    accent = find_vibrant_color(dominant_colors) or primary_bg
    accent = ensure_contrast(accent, card_base, accent_ratio)

    # Text takes its hue from the accent rather than flat black/white
    text_primary = get_vibrant_readable_color(accent, card_base, text_ratio)
    text_secondary = rgba(text_primary, SECONDARY_TEXT_ALPHA)

    # Button text sits on the accent fill
    button_text = get_vibrant_readable_color(primary_bg, accent, button_ratio)

    tint = DARK_CARD_TINT if is_dark else LIGHT_CARD_TINT
    card_solid = adjust_hsl(primary_bg, **tint)

    return ColorPalette(
        text_primary=text_primary,
        text_primary_rgb=rgb_triplet(text_primary),
        text_secondary=text_secondary,
        card_background=DARK_CARD_GLASS if is_dark else LIGHT_CARD_GLASS,
        card_background_solid=card_solid,
        accent=accent,
        accent_rgb=rgb_triplet(accent),
        accent_text=button_text,
        button_background=accent,
        button_text=button_text,
        is_dark=is_dark,
    )
