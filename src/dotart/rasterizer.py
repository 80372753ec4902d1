from __future__ import annotations

import io
from pathlib import Path
from typing import Protocol

from PIL import Image, UnidentifiedImageError

from dotart.config import MAX_FILE_SIZE_BYTES, MAX_FILE_SIZE_MB, SUPPORTED_FORMATS
from dotart.errors import UnsupportedSourceError

ImageSource = Image.Image | str | Path | bytes


class Rasterizer(Protocol):
    def rasterize(self, source, width: int, height: int) -> bytes:
        """Render the source into an RGBA buffer of exactly width x height pixels."""
        ...


def _check_size(size: int) -> None:
    if size > MAX_FILE_SIZE_BYTES:
        raise UnsupportedSourceError(f"Image is larger than {MAX_FILE_SIZE_MB}MB")


def load_image(source: ImageSource) -> Image.Image:
    """Open and decode a JPEG or PNG from a path or raw bytes.

    Already-open Pillow images are passed through unchecked.
    """
    if isinstance(source, Image.Image):
        return source

    if isinstance(source, bytes):
        _check_size(len(source))
        fp = io.BytesIO(source)
    else:
        path = Path(source)
        if not path.is_file():
            raise UnsupportedSourceError(f"File not found: {path}")
        _check_size(path.stat().st_size)
        fp = path

    try:
        image = Image.open(fp)
    except (UnidentifiedImageError, OSError) as err:
        raise UnsupportedSourceError(f"Could not decode image: {err}") from err

    if image.format not in SUPPORTED_FORMATS:
        image.close()
        raise UnsupportedSourceError(f"Unsupported image format: {image.format}")

    try:
        image.load()
    except OSError as err:
        image.close()
        raise UnsupportedSourceError(f"Could not decode image: {err}") from err
    return image


class PillowRasterizer:
    """Scales a source image onto an opaque canvas with Pillow.

    Transparent areas end up as the background colour.
    """

    def __init__(self, resample=Image.LANCZOS, background: tuple[int, int, int] = (255, 255, 255)):
        self.resample = resample
        self.background = background

    def render(self, source: ImageSource, width: int, height: int) -> Image.Image:
        if width <= 0 or height <= 0:
            raise ValueError(f"Raster size must be positive, got {width}x{height}")

        image = load_image(source).convert("RGBA")
        image = image.resize((width, height), self.resample)

        canvas = Image.new("RGBA", (width, height), (*self.background, 255))
        canvas.alpha_composite(image)
        return canvas

    def rasterize(self, source: ImageSource, width: int, height: int) -> bytes:
        return self.render(source, width, height).tobytes()
