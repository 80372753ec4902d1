class ConversionError(Exception):
    """Raised when an image cannot be turned into Braille text."""

    def __init__(self, message: str = "conversion failed"):
        super().__init__(message)


class InvalidBufferError(ConversionError, ValueError):
    """A pixel buffer or field does not match the dimensions it was given with."""


class UnsupportedSourceError(ConversionError):
    """The source image is missing, too large, or cannot be decoded."""
