"""
Image to palette, end to end.

Failures never propagate: an image that cannot be loaded gives the fallback
color (extract_dominant_colors) or the default palette (extract_palette).
"""

import asyncio
import logging
from collections import namedtuple

from .config import (
    DEFAULT_NUM_COLORS,
    FALLBACK_COLOR,
    HTTP_TIMEOUT,
    MIN_ACCENT_CONTRAST,
    MIN_BUTTON_CONTRAST,
    MIN_TEXT_CONTRAST,
    SAMPLE_SIZE,
)
from .errors import ImageLoadError
from .palette import generate_contrast_palette, get_default_palette
from .quantize import quantize_colors
from .sampler import sample_pixels

logger = logging.getLogger(__name__)

PaletteResult = namedtuple("PaletteResult", ["palette", "ready", "from_image"])


def extract_dominant_colors(
    image,
    num_colors=DEFAULT_NUM_COLORS,
    method="bucket",
    sample_size=SAMPLE_SIZE,
    timeout=HTTP_TIMEOUT,
):
    """Return dominant hex colors of an image, most frequent first."""
    try:
        samples = sample_pixels(image, sample_size=sample_size, timeout=timeout)
    except ImageLoadError as exc:
        logger.warning("Color extraction failed, using fallback: %s", exc)
        return [FALLBACK_COLOR]
    return quantize_colors(samples, num_colors, method=method)


def analyze_image(
    image,
    num_colors=DEFAULT_NUM_COLORS,
    text_ratio=MIN_TEXT_CONTRAST,
    button_ratio=MIN_BUTTON_CONTRAST,
    accent_ratio=MIN_ACCENT_CONTRAST,
    method="bucket",
    sample_size=SAMPLE_SIZE,
    timeout=HTTP_TIMEOUT,
):
    """Build a ColorPalette for an image, keeping the dominant colors.

    Returns:
        tuple: (dominant hex colors, PaletteResult). The color list is empty
        when the image could not be loaded and the default palette was used.
    """
    try:
        samples = sample_pixels(image, sample_size=sample_size, timeout=timeout)
    except ImageLoadError as exc:
        logger.warning("Failed to load image for color extraction: %s", exc)
        return [], PaletteResult(get_default_palette(), ready=True, from_image=False)

    colors = quantize_colors(samples, num_colors, method=method)
    palette = generate_contrast_palette(
        colors,
        text_ratio=text_ratio,
        button_ratio=button_ratio,
        accent_ratio=accent_ratio,
    )
    return colors, PaletteResult(palette, ready=True, from_image=True)


def extract_palette(image, **kwargs):
    """Build a ColorPalette for an image.

    Accepts the keyword arguments of analyze_image.

    Returns:
        PaletteResult: ready is always True; from_image is False when the
        default palette was used because the image could not be loaded
    """
    _, result = analyze_image(image, **kwargs)
    return result


async def preload_and_extract_colors(image, **kwargs):
    """Async extract_palette. Loading and decoding run in a worker thread.

    There is no internal deadline; wrap the call in asyncio.wait_for if one
    is needed.
    """
    return await asyncio.to_thread(extract_palette, image, **kwargs)
