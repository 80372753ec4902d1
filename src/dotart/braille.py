import numpy as np

from dotart.charsets import BRAILLE_BASE
from dotart.errors import InvalidBufferError

CELL_WIDTH = 2
CELL_HEIGHT = 4

# (dx, dy) within a cell -> dot bit, standard 8-dot Braille numbering
DOT_MAP = [
    (0, 0, 0x01),
    (0, 1, 0x02),
    (0, 2, 0x04),
    (0, 3, 0x40),
    (1, 0, 0x08),
    (1, 1, 0x10),
    (1, 2, 0x20),
    (1, 3, 0x80),
]

# The same map as a (CELL_HEIGHT, CELL_WIDTH) array indexed [dy, dx]
DOT_WEIGHTS = np.array(
    [
        [0x01, 0x08],
        [0x02, 0x10],
        [0x04, 0x20],
        [0x40, 0x80],
    ],
    dtype=np.uint16,
)


def braille_char(mask: int) -> str:
    if not 0 <= mask <= 0xFF:
        raise ValueError(f"Braille mask out of range: {mask:#x}")
    return chr(BRAILLE_BASE + mask)


def cell_masks(pixels, cols: int, rows: int) -> np.ndarray:
    """Compute the dot mask of every cell at once. Returns array of shape (rows, cols)."""
    field = np.asarray(pixels)
    pixel_width = cols * CELL_WIDTH
    pixel_height = rows * CELL_HEIGHT
    if field.size != pixel_width * pixel_height:
        raise InvalidBufferError(
            f"Expected a {pixel_width}x{pixel_height} binary field for {cols}x{rows} cells, got {field.size} pixels"
        )

    # Only an exact 1 raises a dot
    dots = (field.reshape(pixel_height, pixel_width) == 1).astype(np.uint16)
    # (rows, cell_h, cols, cell_w) -> (rows, cols, cell_h, cell_w)
    cells = dots.reshape(rows, CELL_HEIGHT, cols, CELL_WIDTH).transpose(0, 2, 1, 3)
    # Bits are disjoint, so the sum is the bitwise OR
    return (cells * DOT_WEIGHTS).sum(axis=(2, 3))


def encode_cells(pixels, cols: int, rows: int) -> list[str]:
    """Encode a binary field into one string of Braille characters per row."""
    masks = cell_masks(pixels, cols, rows)
    return ["".join(braille_char(int(mask)) for mask in row) for row in masks]


def format_braille(pixels, cols: int, rows: int) -> str:
    return "\n".join(encode_cells(pixels, cols, rows))
