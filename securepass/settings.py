# securepass/settings.py
from __future__ import annotations

# =========================
# Limits & defaults
# =========================
DEFAULT_LENGTH = 24
MAX_LENGTH = 1_000_000
MAX_BATCH = 1_000

# entropy is pulled from the OS in chunks of this many bytes
ENTROPY_CHUNK_SIZE = 128
# minimum width of a multi-byte draw (alphabets larger than 256)
WIDE_SAMPLE_BYTES = 4

# =========================
# Character tables
# =========================
LOWER_CHARS = "abcdefghijklmnopqrstuvwxyz"
UPPER_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBER_CHARS = "1234567890"
# safe inside a JSON string: no '"' and no '\'
SPECIAL_JSON_SAFE = "!@#$%^*()[]{},.:~_-="
ALPHANUMERIC_CHARS = LOWER_CHARS + UPPER_CHARS + NUMBER_CHARS

# Characters often confused visually
AMBIGUOUS_CHARACTERS = "Il1O0S5Z2B8G6gqC"
