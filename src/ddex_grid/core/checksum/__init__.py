"""
Checksum Engine для ddex-grid

ISO/IEC 7064 MOD 37-36: конверсия алфавита, P/S последовательности,
вычисление и проверка контрольного символа GRid.
"""

# Errors
from ddex_grid.core.checksum.errors import (
    ChecksumInvariantViolation,
    GridError,
    IndexOutOfRangeError,
    InvalidCharacterError,
    InvalidLengthError,
    OutOfRangeError,
)

# Alphabet
from ddex_grid.core.checksum.alphabet import (
    ALPHABET,
    ALPHABET_SIZE,
    MAX_DIGIT_VALUE,
    char_to_number,
    digit_to_char,
    is_valid_character,
)

# MOD 37-36
from ddex_grid.core.checksum.mod37_36 import (
    GRID_LENGTH,
    MOD_A,
    MOD_B,
    PAYLOAD_LENGTH,
    PSSequences,
    append_check_character,
    compute_check_character,
    compute_ps_sequences,
    p_value,
    s_value,
    verify_check_character,
)

__all__ = [
    # Errors
    "GridError",
    "InvalidLengthError",
    "IndexOutOfRangeError",
    "InvalidCharacterError",
    "OutOfRangeError",
    "ChecksumInvariantViolation",
    # Alphabet — Constants
    "ALPHABET",
    "ALPHABET_SIZE",
    "MAX_DIGIT_VALUE",
    # Alphabet — Functions
    "char_to_number",
    "digit_to_char",
    "is_valid_character",
    # MOD 37-36 — Constants
    "GRID_LENGTH",
    "MOD_A",
    "MOD_B",
    "PAYLOAD_LENGTH",
    # MOD 37-36 — Types
    "PSSequences",
    # MOD 37-36 — Functions
    "append_check_character",
    "compute_check_character",
    "compute_ps_sequences",
    "p_value",
    "s_value",
    "verify_check_character",
]
