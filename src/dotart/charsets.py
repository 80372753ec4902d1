# Braille patterns: U+2800 to U+28FF (256 characters, 2x4 dot grid)
BRAILLE_BASE = 0x2800
BRAILLE = "".join(chr(i) for i in range(BRAILLE_BASE, BRAILLE_BASE + 0x100))

# No dots raised. Visually blank but not whitespace.
BRAILLE_BLANK = BRAILLE[0]
# All eight dots raised
BRAILLE_FULL = BRAILLE[-1]
