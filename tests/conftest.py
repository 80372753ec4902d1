import numpy as np
import pytest


def _solid_rgba(width, height, colour=(255, 255, 255), alpha=255):
    """Build a flat RGBA buffer of one colour."""
    pixel = bytes((*colour, alpha))
    return pixel * (width * height)


@pytest.fixture
def solid_rgba():
    return _solid_rgba


@pytest.fixture
def gradient_rgba():
    """Horizontal grey ramp from black on the left to white on the right."""

    def make(width, height):
        ramp = np.linspace(0, 255, width).round().astype(np.uint8)
        grey = np.broadcast_to(ramp, (height, width))
        rgba = np.stack([grey, grey, grey, np.full_like(grey, 255)], axis=-1)
        return rgba.tobytes()

    return make
