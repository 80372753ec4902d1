import numpy as np
import pytest

from dotart.errors import InvalidBufferError
from dotart.luminance import contrast_factor, image_to_luminance


def test_white_is_full_scale(solid_rgba):
    result = image_to_luminance(solid_rgba(4, 3, (255, 255, 255)), 4, 3)
    assert result.shape == (3, 4)
    assert result.dtype == np.float32
    np.testing.assert_allclose(result, 255.0, atol=1e-3)


def test_black_is_zero(solid_rgba):
    result = image_to_luminance(solid_rgba(2, 2, (0, 0, 0)), 2, 2)
    np.testing.assert_array_equal(result, 0.0)


def test_bt709_weights(solid_rgba):
    red = image_to_luminance(solid_rgba(1, 1, (255, 0, 0)), 1, 1)
    green = image_to_luminance(solid_rgba(1, 1, (0, 255, 0)), 1, 1)
    blue = image_to_luminance(solid_rgba(1, 1, (0, 0, 255)), 1, 1)
    assert red[0, 0] == pytest.approx(0.2126 * 255, rel=1e-6)
    assert green[0, 0] == pytest.approx(0.7152 * 255, rel=1e-6)
    assert blue[0, 0] == pytest.approx(0.0722 * 255, rel=1e-6)


def test_alpha_is_ignored(solid_rgba):
    opaque = image_to_luminance(solid_rgba(2, 2, (10, 200, 30), alpha=255), 2, 2)
    clear = image_to_luminance(solid_rgba(2, 2, (10, 200, 30), alpha=0), 2, 2)
    np.testing.assert_array_equal(opaque, clear)


def test_brightness_offsets_value(solid_rgba):
    result = image_to_luminance(solid_rgba(1, 1, (100, 100, 100)), 1, 1, brightness=10)
    assert result[0, 0] == pytest.approx(100 + 25.5, rel=1e-5)


def test_result_is_clamped(solid_rgba):
    bright = image_to_luminance(solid_rgba(1, 1, (250, 250, 250)), 1, 1, brightness=50)
    dark = image_to_luminance(solid_rgba(1, 1, (5, 5, 5)), 1, 1, brightness=-50)
    assert bright[0, 0] == 255.0
    assert dark[0, 0] == 0.0


def test_zero_contrast_is_identity():
    assert contrast_factor(0) == pytest.approx(1.0)


def test_contrast_spreads_around_midpoint(solid_rgba):
    light = image_to_luminance(solid_rgba(1, 1, (160, 160, 160)), 1, 1, contrast=30)
    dark = image_to_luminance(solid_rgba(1, 1, (96, 96, 96)), 1, 1, contrast=30)
    assert light[0, 0] > 160
    assert dark[0, 0] < 96


def test_negative_contrast_flattens(solid_rgba):
    result = image_to_luminance(solid_rgba(1, 1, (255, 255, 255)), 1, 1, contrast=-50)
    expected = contrast_factor(-50) * (255 - 128) + 128
    assert result[0, 0] == pytest.approx(expected, rel=1e-5)
    assert result[0, 0] < 255


def test_contrast_pole_is_guarded():
    with pytest.raises(ValueError):
        contrast_factor(102)


def test_accepts_numpy_buffer():
    buffer = np.zeros((2, 3, 4), dtype=np.uint8)
    result = image_to_luminance(buffer, 3, 2)
    assert result.shape == (2, 3)


def test_input_not_modified(solid_rgba):
    buffer = bytearray(solid_rgba(2, 2, (50, 60, 70)))
    before = bytes(buffer)
    image_to_luminance(buffer, 2, 2, brightness=20, contrast=20)
    assert bytes(buffer) == before


def test_wrong_buffer_length_raises(solid_rgba):
    with pytest.raises(InvalidBufferError, match="Expected 64 bytes"):
        image_to_luminance(solid_rgba(3, 3), 4, 4)
