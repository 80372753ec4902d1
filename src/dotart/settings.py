from dataclasses import dataclass, replace

from dotart import config


def clamp_value(value: int, minimum: int, maximum: int) -> int:
    return min(maximum, max(minimum, value))


@dataclass(frozen=True)
class Settings:
    rows: int = config.DEFAULT_ROWS
    cols: int = config.DEFAULT_COLUMNS
    brightness: int = config.DEFAULT_BRIGHTNESS
    contrast: int = config.DEFAULT_CONTRAST
    dithering: bool = config.DEFAULT_DITHERING

    def clamped(self) -> "Settings":
        """Return a copy with every numeric field pulled into its configured range.

        Out-of-range requests are corrected, never rejected.
        """
        return replace(
            self,
            rows=clamp_value(int(self.rows), config.MIN_ROWS, config.MAX_ROWS),
            cols=clamp_value(int(self.cols), config.MIN_COLUMNS, config.MAX_COLUMNS),
            brightness=clamp_value(int(self.brightness), config.MIN_BRIGHTNESS, config.MAX_BRIGHTNESS),
            contrast=clamp_value(int(self.contrast), config.MIN_CONTRAST, config.MAX_CONTRAST),
        )

    def update(self, **changes) -> "Settings":
        """Merge a partial set of changes and clamp the result."""
        return replace(self, **changes).clamped()


@dataclass(frozen=True)
class OutputStats:
    rows: int
    cols: int
    char_count: int
    safe_char_count: int

    @classmethod
    def empty(cls, rows: int, cols: int) -> "OutputStats":
        """Stats for a grid with no text yet, e.g. before conversion or after a failure."""
        return cls(rows=rows, cols=cols, char_count=0, safe_char_count=safe_char_count(rows, cols))


@dataclass(frozen=True)
class ConversionResult:
    text: str
    rows: int
    cols: int
    char_count: int
    safe_char_count: int

    @property
    def stats(self) -> OutputStats:
        return OutputStats(
            rows=self.rows,
            cols=self.cols,
            char_count=self.char_count,
            safe_char_count=self.safe_char_count,
        )


def safe_char_count(rows: int, cols: int) -> int:
    """Upper bound on output length: every row plus one newline."""
    return rows * (cols + 1)
