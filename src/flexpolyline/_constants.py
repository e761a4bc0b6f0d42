"""Internal constants shared across the library."""

# Header version. A change in the version may affect the logic used to
# decode the rest of the header and the data.
FORMAT_VERSION = 1

# ------------------------------------------------------------------
# Alphabet  (URL-safe, custom order: A-Z a-z 0-9 - _)
# ------------------------------------------------------------------

ALPHABET_FIRST = ord("-")  # 45
ALPHABET_LAST = ord("z")  # 122
INVALID_CHAR = -1

# Indexed by ``ord(char) - ALPHABET_FIRST``.
DECODING_TABLE: tuple[int, ...] = (
    62, -1, -1, 52, 53, 54, 55, 56, 57, 58, 59, 60, 61, -1, -1, -1, -1, -1, -1, -1,
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, 16, 17, 18, 19,
    20, 21, 22, 23, 24, 25, -1, -1, -1, -1, 63, -1, 26, 27, 28, 29, 30, 31, 32, 33,
    34, 35, 36, 37, 38, 39, 40, 41, 42, 43, 44, 45, 46, 47, 48, 49, 50, 51,
)  # fmt: skip

# ------------------------------------------------------------------
# Varint groups
# ------------------------------------------------------------------

DATA_MASK = 0x1F
CONTINUATION_FLAG = 0x20
GROUP_BITS = 5
DEFAULT_MAX_VARINT_BITS = 64

# ------------------------------------------------------------------
# Header bitfield  (LSB first: precision | kind | third-dim precision)
# ------------------------------------------------------------------

PRECISION_MASK = 0xF
PRECISION_BITS = 4
THIRD_DIM_MASK = 0x7
THIRD_DIM_BITS = 3
MAX_PRECISION = 15
