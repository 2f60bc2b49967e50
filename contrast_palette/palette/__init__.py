from .generator import (
    DEFAULT_PALETTE,
    ColorPalette,
    generate_contrast_palette,
    get_default_palette,
)
from .loader import load_palette_from_json

__all__ = [
    "DEFAULT_PALETTE",
    "ColorPalette",
    "generate_contrast_palette",
    "get_default_palette",
    "load_palette_from_json",
]
