import numpy as np

from dotart.errors import InvalidBufferError

# ITU-R BT.709 relative luminance weights
LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])

# Contrast values at or past this pole make the remap divide by zero
_CONTRAST_POLE = 259.0


def as_pixel_array(buffer) -> np.ndarray:
    """View an RGBA buffer (bytes-like or array) as a flat uint8 array without copying."""
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        return np.frombuffer(buffer, dtype=np.uint8)
    return np.asarray(buffer, dtype=np.uint8).reshape(-1)


def contrast_factor(contrast: float) -> float:
    """Multiplier applied around mid-grey for a contrast setting in percent."""
    contrast_value = contrast * 2.55
    if contrast_value >= _CONTRAST_POLE:
        raise ValueError(f"Contrast {contrast} is outside the range the remap supports")
    return (259 * (contrast_value + 255)) / (255 * (259 - contrast_value))


def image_to_luminance(
    buffer,
    width: int,
    height: int,
    brightness: float = 0,
    contrast: float = 0,
) -> np.ndarray:
    """Convert an RGBA buffer to an adjusted luminance field.

    Args:
        buffer: width * height * 4 bytes, row-major, top-to-bottom. Alpha is ignored.
        brightness: offset in percent of full scale, normally -50..50
        contrast: contrast adjustment in percent, normally -50..50

    Returns:
        float32 array of shape (height, width), values clamped to 0-255
    """
    pixels = as_pixel_array(buffer)
    expected = width * height * 4
    if pixels.size != expected:
        raise InvalidBufferError(f"Expected {expected} bytes for a {width}x{height} RGBA buffer, got {pixels.size}")

    rgb = pixels.reshape(height, width, 4)[:, :, :3].astype(np.float64)
    luma = rgb @ LUMA_WEIGHTS

    value = contrast_factor(contrast) * (luma - 128) + 128 + brightness * 2.55
    return np.clip(value, 0, 255).astype(np.float32)
