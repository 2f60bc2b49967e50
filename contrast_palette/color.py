import colorsys
import logging
import re

logger = logging.getLogger(__name__)

HEX_PATTERN = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE | re.ASCII)

NEUTRAL_LUMINANCE = 0.5


def _channel(value):
    # Clamp then round half up
    value = max(0, min(255, value))
    return int(value + 0.5)


def rgb_to_hex(r, g, b):
    return "#" + "".join(f"{_channel(c):02x}" for c in (r, g, b))


def hex_to_rgb(hex_color):
    """Parse '#rrggbb' (or 'rrggbb'). Returns None for anything else."""
    match = HEX_PATTERN.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        logger.debug("Malformed hex color: %r", hex_color)
        return None
    return tuple(int(group, 16) for group in match.groups())


def rgb_to_hsl(r, g, b):
    """Return (hue 0-360, saturation 0-1, lightness 0-1)."""
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return ((h * 360) % 360, s, l)


def hsl_to_rgb(h, s, l):
    if s == 0:
        # Achromatic
        r = g = b = l
    else:
        r, g, b = colorsys.hls_to_rgb((h / 360) % 1.0, l, s)
    return (r * 255, g * 255, b * 255)


def hsl_to_hex(h, s, l):
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def hex_to_hsl(hex_color):
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return None
    return rgb_to_hsl(*rgb)


def adjust_hsl(hex_color, h=None, s=None, l=None):
    """Override some HSL components of a color, keeping the others."""
    hsl = hex_to_hsl(hex_color)
    if hsl is None:
        return hex_color
    cur_h, cur_s, cur_l = hsl
    return hsl_to_hex(
        cur_h if h is None else h,
        cur_s if s is None else s,
        cur_l if l is None else l,
    )


def relative_luminance(hex_color):
    """Calculate relative luminance per WCAG 2.0"""
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return NEUTRAL_LUMINANCE

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = rgb
    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(color1, color2):
    """Calculate the WCAG contrast ratio between two hex colors"""
    lum1 = relative_luminance(color1)
    lum2 = relative_luminance(color2)
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def rgb_triplet(hex_color, default=(0, 0, 0)):
    """'r, g, b' string for CSS functions that take separate channels."""
    r, g, b = hex_to_rgb(hex_color) or default
    return f"{r}, {g}, {b}"


def rgba(hex_color, alpha, default=(0, 0, 0)):
    return f"rgba({rgb_triplet(hex_color, default)}, {alpha})"
