"""Binarization of a luminance field into ink (1) and background (0)."""

import numpy as np

from dotart.config import DEFAULT_THRESHOLD
from dotart.errors import InvalidBufferError


def _as_field(luminance, width: int, height: int) -> np.ndarray:
    field = np.asarray(luminance, dtype=np.float32)
    if field.size != width * height:
        raise InvalidBufferError(f"Expected {width * height} luminance values for {width}x{height}, got {field.size}")
    return field.reshape(height, width)


def threshold_to_binary(luminance, width: int, height: int, threshold: float = DEFAULT_THRESHOLD) -> np.ndarray:
    """Mark every pixel darker than the threshold as ink."""
    field = _as_field(luminance, width, height)
    return (field < threshold).astype(np.uint8)


def floyd_steinberg(luminance, width: int, height: int, threshold: float = DEFAULT_THRESHOLD) -> np.ndarray:
    """Binarize with Floyd-Steinberg error diffusion.

    Pixels are visited row by row, left to right. Each pixel is snapped to 0 or
    255 and the difference is pushed onto the neighbours not yet visited:

            *    7/16
      3/16  5/16 1/16

    The input is not modified; diffusion runs on a float32 working copy.

    Returns:
        uint8 array of shape (height, width), 1 where the quantized value is 0
    """
    buffer = _as_field(luminance, width, height).copy()
    output = np.zeros((height, width), dtype=np.uint8)

    for y in range(height):
        for x in range(width):
            old = float(buffer[y, x])
            new = 0 if old < threshold else 255
            output[y, x] = 1 if new == 0 else 0

            error = old - new

            if x + 1 < width:
                buffer[y, x + 1] = float(buffer[y, x + 1]) + error * 7 / 16

            if y + 1 < height:
                if x > 0:
                    buffer[y + 1, x - 1] = float(buffer[y + 1, x - 1]) + error * 3 / 16

                buffer[y + 1, x] = float(buffer[y + 1, x]) + error * 5 / 16

                if x + 1 < width:
                    buffer[y + 1, x + 1] = float(buffer[y + 1, x + 1]) + error / 16

    return output


def binarize(
    luminance,
    width: int,
    height: int,
    dithering: bool = False,
    threshold: float = DEFAULT_THRESHOLD,
) -> np.ndarray:
    if dithering:
        return floyd_steinberg(luminance, width, height, threshold)
    return threshold_to_binary(luminance, width, height, threshold)
