from __future__ import annotations

from typing import Protocol

import numpy as np

from dotart.braille import CELL_HEIGHT, CELL_WIDTH, format_braille


class TextFormatter(Protocol):
    id: str
    label: str
    cell_width: int
    cell_height: int

    def format(self, pixels: np.ndarray, cols: int, rows: int) -> str:
        """Turn a (rows * cell_height, cols * cell_width) binary field into text."""
        ...


class BrailleFormatter:
    """Formatter that packs each 2x4 pixel block into one Braille pattern."""

    id = "braille"
    label = "Braille"
    cell_width = CELL_WIDTH
    cell_height = CELL_HEIGHT

    def format(self, pixels: np.ndarray, cols: int, rows: int) -> str:
        return format_braille(pixels, cols, rows)


DEFAULT_FORMATTER = BrailleFormatter()
