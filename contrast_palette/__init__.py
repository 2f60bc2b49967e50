"""
Adaptive color contrast engine.

Derives a readable, hue-coherent UI palette from a background image.
"""

from .color import contrast_ratio, hex_to_rgb, hsl_to_hex, relative_luminance, rgb_to_hex, rgb_to_hsl
from .errors import ImageLoadError, PaletteError
from .extract import (
    PaletteResult,
    analyze_image,
    extract_dominant_colors,
    extract_palette,
    preload_and_extract_colors,
)
from .palette import DEFAULT_PALETTE, ColorPalette, generate_contrast_palette, get_default_palette
from .quantize import quantize_colors
from .readable import ensure_contrast, get_vibrant_readable_color
from .sampler import sample_pixels
from .vibrancy import find_vibrant_color

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_PALETTE",
    "ColorPalette",
    "ImageLoadError",
    "PaletteError",
    "PaletteResult",
    "analyze_image",
    "contrast_ratio",
    "ensure_contrast",
    "extract_dominant_colors",
    "extract_palette",
    "find_vibrant_color",
    "generate_contrast_palette",
    "get_default_palette",
    "get_vibrant_readable_color",
    "hex_to_rgb",
    "hsl_to_hex",
    "preload_and_extract_colors",
    "quantize_colors",
    "relative_luminance",
    "rgb_to_hex",
    "rgb_to_hsl",
    "sample_pixels",
]
