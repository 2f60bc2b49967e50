"""
Resample an image onto a small fixed canvas and collect its opaque pixels.
"""

import io
import logging
import os

import numpy as np
import requests
from PIL import Image, UnidentifiedImageError

from .config import HTTP_TIMEOUT, MIN_ALPHA, SAMPLE_SIZE
from .errors import ImageLoadError

logger = logging.getLogger(__name__)

LOAD_ERRORS = (OSError, UnidentifiedImageError, ValueError, Image.DecompressionBombError)


def _fetch_url(url, timeout):
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise ImageLoadError(f"Failed to download image: {url}") from exc
    return response.content


def _image_from_array(array):
    array = np.asarray(array)
    # 2-D buffers are grayscale
    if array.ndim not in (2, 3) or (array.ndim == 3 and array.shape[2] not in (3, 4)):
        raise ImageLoadError(
            f"Expected an HxW, HxWx3 or HxWx4 array, got shape {array.shape}"
        )
    if array.shape[0] == 0 or array.shape[1] == 0:
        raise ImageLoadError("Image array is empty")
    return Image.fromarray(np.clip(array, 0, 255).astype(np.uint8))


def load_image(source, timeout=HTTP_TIMEOUT):
    """Open an image from a path, URL, bytes, file object, PIL image or array.

    Images opened here are owned by the caller and should be closed.

    Raises:
        ImageLoadError: if the source cannot be read or decoded
    """
    if isinstance(source, Image.Image):
        return source
    if isinstance(source, np.ndarray):
        return _image_from_array(source)

    if isinstance(source, str) and source.startswith(("http://", "https://")):
        source = _fetch_url(source, timeout)
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    elif not isinstance(source, (str, os.PathLike)) and not hasattr(source, "read"):
        raise ImageLoadError(f"Unsupported image source: {type(source).__name__}")

    try:
        img = Image.open(source)
    except LOAD_ERRORS as exc:
        raise ImageLoadError(f"Failed to load image: {source!r}") from exc
    try:
        img.load()
    except LOAD_ERRORS as exc:
        img.close()
        raise ImageLoadError(f"Failed to decode image: {source!r}") from exc
    return img


def sample_pixels(source, sample_size=SAMPLE_SIZE, timeout=HTTP_TIMEOUT):
    """Sample an image on a sample_size x sample_size grid.

    The cost is bounded by the grid, not the source resolution. Samples with
    alpha below MIN_ALPHA are dropped so a transparent fringe cannot skew
    the dominant colors.

    Returns:
        np.ndarray: (n, 3) uint8 array of RGB samples, n <= sample_size**2
    """
    img = load_image(source, timeout=timeout)
    try:
        canvas = img.convert("RGBA").resize((sample_size, sample_size), Image.BILINEAR)
    except LOAD_ERRORS as exc:
        raise ImageLoadError("Failed to resample image") from exc
    finally:
        # Caller-supplied PIL images stay open
        if img is not source:
            img.close()

    pixels = np.array(canvas).reshape(-1, 4)
    opaque = pixels[pixels[:, 3] >= MIN_ALPHA]
    logger.debug("Sampled %d of %d pixels", len(opaque), len(pixels))
    return opaque[:, :3]
