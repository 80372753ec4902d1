# Output grid bounds, in characters
MIN_ROWS = 4
MAX_ROWS = 40
DEFAULT_ROWS = 12

MIN_COLUMNS = 8
MAX_COLUMNS = 60
DEFAULT_COLUMNS = 20

# Tone adjustment, in percent of the 0-255 range
MIN_BRIGHTNESS = -50
MAX_BRIGHTNESS = 50
DEFAULT_BRIGHTNESS = 0

MIN_CONTRAST = -50
MAX_CONTRAST = 50
DEFAULT_CONTRAST = 0

DEFAULT_DITHERING = True

# Luminance below this becomes ink
DEFAULT_THRESHOLD = 128

MAX_FILE_SIZE_MB = 8
MAX_FILE_SIZE_BYTES = MAX_FILE_SIZE_MB * 1024 * 1024
# Pillow reports some camera JPEGs as MPO
SUPPORTED_FORMATS = ("JPEG", "MPO", "PNG")
