import argparse
import logging
import sys
from pathlib import Path

from dotart import config
from dotart.converter import image_to_braille
from dotart.errors import ConversionError
from dotart.settings import Settings


def main():
    parser = argparse.ArgumentParser(description="Render an image as Braille dot art")
    parser.add_argument("image", help="Path to input JPEG or PNG image")
    parser.add_argument(
        "-r",
        "--rows",
        type=int,
        default=config.DEFAULT_ROWS,
        help=f"Output height in characters, {config.MIN_ROWS}-{config.MAX_ROWS} (default: {config.DEFAULT_ROWS})",
    )
    parser.add_argument(
        "-c",
        "--cols",
        type=int,
        default=config.DEFAULT_COLUMNS,
        help=f"Output width in characters, {config.MIN_COLUMNS}-{config.MAX_COLUMNS} "
        f"(default: {config.DEFAULT_COLUMNS})",
    )
    parser.add_argument(
        "-b", "--brightness", type=int, default=config.DEFAULT_BRIGHTNESS, help="Brightness, -50 to 50 (default: 0)"
    )
    parser.add_argument(
        "-k", "--contrast", type=int, default=config.DEFAULT_CONTRAST, help="Contrast, -50 to 50 (default: 0)"
    )
    parser.add_argument(
        "--dither",
        action=argparse.BooleanOptionalAction,
        default=config.DEFAULT_DITHERING,
        help="Use Floyd-Steinberg dithering instead of a flat threshold",
    )
    parser.add_argument("--stats", action="store_true", default=False, help="Print output statistics to stderr")
    parser.add_argument(
        "--max-chars",
        type=int,
        default=None,
        help="Warn when the output could exceed this many characters",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        sys.exit(1)

    settings = Settings(
        rows=args.rows,
        cols=args.cols,
        brightness=args.brightness,
        contrast=args.contrast,
        dithering=args.dither,
    )
    try:
        result = image_to_braille(image_path, settings)
    except ConversionError as err:
        print(f"Conversion failed: {err}", file=sys.stderr)
        sys.exit(1)

    print(result.text)

    stats = result.stats
    if args.stats:
        print(
            f"rows={stats.rows} cols={stats.cols} chars={stats.char_count} safe={stats.safe_char_count}",
            file=sys.stderr,
        )
    if args.max_chars is not None and stats.safe_char_count > args.max_chars:
        print(
            f"Warning: output may need up to {stats.safe_char_count} characters, limit is {args.max_chars}",
            file=sys.stderr,
        )
