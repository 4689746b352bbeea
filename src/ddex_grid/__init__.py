"""
ddex-grid — контрольный символ DDEX Global Release Identifier (GRid)

ISO/IEC 7064 MOD 37-36: вычисление и проверка контрольного символа,
конверсия алфавита, разбор и генерация идентификаторов.

Публичный контракт:
    check_character(payload)   → 1 символ
    to_number(char)            → int [0, 35]
    to_char(int)               → символ
    is_valid_char(value)       → bool (никогда не выбрасывает)
    parse_identifier(string)   → IdentifierFields (никогда не выбрасывает)
    generate(scheme, issuer)   → GRid из 18 символов
"""

# Checksum Engine
from ddex_grid.core.checksum import (
    ChecksumInvariantViolation,
    GridError,
    IndexOutOfRangeError,
    InvalidCharacterError,
    InvalidLengthError,
    OutOfRangeError,
    PSSequences,
    append_check_character,
    compute_ps_sequences,
    verify_check_character,
)
from ddex_grid.core.checksum import char_to_number as to_number
from ddex_grid.core.checksum import compute_check_character as check_character
from ddex_grid.core.checksum import digit_to_char as to_char
from ddex_grid.core.checksum import is_valid_character as is_valid_char

# Domain
from ddex_grid.core.domain import GridIdentifier, IdentifierFields

# Contracts
from ddex_grid.core.contracts import validate_grid_identifier

# Identifier Utilities
from ddex_grid.identifiers import (
    RandomNumberSource,
    parse_identifier,
    seeded_source,
)
from ddex_grid.identifiers import generate_random_identifier as generate

__version__ = "1.0.0"

__all__ = [
    # Checksum Engine — Errors
    "GridError",
    "InvalidLengthError",
    "IndexOutOfRangeError",
    "InvalidCharacterError",
    "OutOfRangeError",
    "ChecksumInvariantViolation",
    # Checksum Engine — Types
    "PSSequences",
    # Checksum Engine — Functions
    "check_character",
    "to_number",
    "to_char",
    "is_valid_char",
    "append_check_character",
    "compute_ps_sequences",
    "verify_check_character",
    # Domain
    "GridIdentifier",
    "IdentifierFields",
    # Contracts
    "validate_grid_identifier",
    # Identifier Utilities
    "RandomNumberSource",
    "generate",
    "parse_identifier",
    "seeded_source",
]
