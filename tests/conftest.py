import numpy as np
import pytest
from PIL import Image

NAVY = (10, 14, 39)


@pytest.fixture
def write_image(tmp_path):
    """Save an HxWx3/4 uint8 array as PNG and return its path."""

    def _write(array, name="image.png"):
        path = tmp_path / name
        Image.fromarray(np.asarray(array, dtype=np.uint8)).save(path)
        return path

    return _write


@pytest.fixture
def navy_pixels():
    # Near-solid dark navy with a little texture
    pixels = np.zeros((50, 50, 3), dtype=np.uint8)
    pixels[:, :] = NAVY
    pixels[::7, ::5] = (20, 26, 60)
    pixels[3::11, 2::9] = (12, 16, 41)
    return pixels


@pytest.fixture
def navy_image(write_image, navy_pixels):
    return write_image(navy_pixels, "navy.png")


@pytest.fixture
def beige_image(write_image):
    pixels = np.zeros((50, 50, 3), dtype=np.uint8)
    pixels[:, :] = (245, 240, 230)
    pixels[20:30, 10:40] = (224, 123, 57)
    return write_image(pixels, "beige.png")
