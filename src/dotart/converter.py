import logging

from dotart.dither import binarize
from dotart.errors import ConversionError
from dotart.formatters import DEFAULT_FORMATTER, TextFormatter
from dotart.luminance import image_to_luminance
from dotart.rasterizer import ImageSource, PillowRasterizer, Rasterizer
from dotart.settings import ConversionResult, Settings, safe_char_count

logger = logging.getLogger(__name__)


def buffer_to_braille(
    buffer,
    settings: Settings,
    formatter: TextFormatter = DEFAULT_FORMATTER,
) -> ConversionResult:
    """Convert an RGBA buffer that is already at the grid's pixel size.

    The buffer must be (cols * cell_width) x (rows * cell_height) pixels for
    the clamped settings.
    """
    settings = settings.clamped()
    rows, cols = settings.rows, settings.cols
    pixel_width = cols * formatter.cell_width
    pixel_height = rows * formatter.cell_height

    luminance = image_to_luminance(buffer, pixel_width, pixel_height, settings.brightness, settings.contrast)
    pixels = binarize(luminance, pixel_width, pixel_height, dithering=settings.dithering)
    text = formatter.format(pixels, cols, rows)

    return ConversionResult(
        text=text,
        rows=rows,
        cols=cols,
        char_count=len(text),
        safe_char_count=safe_char_count(rows, cols),
    )


def image_to_braille(
    source: ImageSource,
    settings: Settings | None = None,
    rasterizer: Rasterizer | None = None,
    formatter: TextFormatter = DEFAULT_FORMATTER,
) -> ConversionResult:
    if settings is None:
        settings = Settings()
    if rasterizer is None:
        rasterizer = PillowRasterizer()

    clamped = settings.clamped()
    if clamped != settings:
        logger.debug("Clamped settings %s to %s", settings, clamped)

    pixel_width = clamped.cols * formatter.cell_width
    pixel_height = clamped.rows * formatter.cell_height

    try:
        buffer = rasterizer.rasterize(source, pixel_width, pixel_height)
    except ConversionError:
        raise
    except Exception as err:
        raise ConversionError(f"conversion failed: {err}") from err
    logger.debug("Rasterized source to %dx%d pixels for %s cells", pixel_width, pixel_height, formatter.label)

    result = buffer_to_braille(buffer, clamped, formatter)
    logger.debug("Produced %d characters (%d safe)", result.char_count, result.safe_char_count)
    return result
