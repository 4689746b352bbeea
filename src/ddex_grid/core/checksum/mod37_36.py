"""
MOD 37-36 — контрольный символ DDEX GRid

ISO/IEC 7064, гибридная система MOD 37-36 (M = 36, M + 1 = 37).

Контрольный символ вычисляется через две взаимно рекурсивные
последовательности, индексированные 1..18:

    P(1) = 36
    P(i) = ((S(i-1) mod 36) или 36, если остаток 0) × 2,   i > 1
    S(i) = (P(i) mod 37) + value(s[i-1])

Контрольный символ a1 выбирается так, чтобы S(18) mod 36 == 1:

    p_mod37 = P(18) mod 37
    s_value = 36 - p_mod37 + 1
    check   = char(s_value mod 36)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. P и S вычисляются одним проходом вперёд от индекса 1 (без рекурсии),
   результат побитово совпадает с рекурсивным определением
2. Для любого валидного payload: S(payload + check, 18) mod 36 == 1
3. Используются только первые 17 символов как payload
4. Все операции детерминированы и не зависят от регистра
"""

import logging
from typing import Final, NamedTuple, Optional

from ddex_grid.core.checksum.alphabet import (
    char_to_number,
    digit_to_char,
    is_valid_character,
)
from ddex_grid.core.checksum.errors import (
    ChecksumInvariantViolation,
    IndexOutOfRangeError,
    InvalidLengthError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ MOD 37-36
# =============================================================================

# Модуль M + 1 (взвешивание P)
MOD_A: Final[int] = 37

# Модуль M (размер алфавита)
MOD_B: Final[int] = 36

# Начальное значение P(1)
P_INITIAL: Final[int] = 36

# Длина payload без контрольного символа
PAYLOAD_LENGTH: Final[int] = 17

# Длина полного GRid с контрольным символом
GRID_LENGTH: Final[int] = 18

# Допустимый диапазон индексов P/S
MIN_INDEX: Final[int] = 1
MAX_INDEX: Final[int] = GRID_LENGTH

# Остаток S(18) mod 36 для корректного GRid
VALID_REMAINDER: Final[int] = 1


# =============================================================================
# TYPES
# =============================================================================


class PSSequences(NamedTuple):
    """
    Полные P/S последовательности одного GRid (для диагностики).

    p_sequence[k] == P(k + 1), s_sequence[k] == S(k + 1).
    """

    p_sequence: tuple[int, ...]  # P(1)..P(18), всегда 18 значений
    s_sequence: tuple[int, ...]  # S(1)..S(n), n = длина строки (17 или 18)


# =============================================================================
# ВНУТРЕННИЕ ПРОВЕРКИ
# =============================================================================


def _check_length(grid: str) -> None:
    if len(grid) != PAYLOAD_LENGTH and len(grid) != GRID_LENGTH:
        raise InvalidLengthError(
            f"Expected {PAYLOAD_LENGTH} or {GRID_LENGTH} length string, received {grid!r}."
        )


def _check_index(index: int) -> None:
    if index < MIN_INDEX or index > MAX_INDEX:
        raise IndexOutOfRangeError(f"Index {index} out of range.")


def _char_at(grid: str, index: int) -> Optional[str]:
    # 1-based; отсутствующий символ отдаём как None, его отвергнет char_to_number
    if index > len(grid):
        return None
    return grid[index - 1]


def _next_p(s: int) -> int:
    # x mod 36 == 0 по стандарту заменяется на 36
    return ((s % MOD_B) or MOD_B) * 2


def _s_from_p(p: int, char: Optional[str]) -> int:
    return (p % MOD_A) + char_to_number(char)


# =============================================================================
# P / S ПОСЛЕДОВАТЕЛЬНОСТИ
# =============================================================================


def p_value(grid: str, index: int) -> int:
    """
    Весовая функция P(grid, index).

    Args:
        grid: GRid длины 17 или 18
        index: Индекс в диапазоне [1, 18]

    Returns:
        P(index)

    Raises:
        InvalidLengthError: если длина grid не 17 и не 18
        IndexOutOfRangeError: если index вне [1, 18]
        InvalidCharacterError: если один из первых index - 1 символов невалиден

    Examples:
        >>> p_value("A12425GABC1234002", 1)
        36
        >>> p_value("A12425GABC1234002", 18)
        52
    """
    _check_length(grid)
    _check_index(index)

    p = P_INITIAL
    for position in range(MIN_INDEX, index):
        p = _next_p(_s_from_p(p, _char_at(grid, position)))

    return p


def s_value(grid: str, index: int) -> int:
    """
    Аккумулятор S(grid, index) = (P(index) mod 37) + value(grid[index - 1]).

    Args:
        grid: GRid длины 17 или 18
        index: Индекс в диапазоне [1, 18]

    Returns:
        S(index)

    Raises:
        InvalidLengthError: если длина grid не 17 и не 18
        IndexOutOfRangeError: если index вне [1, 18]
        InvalidCharacterError: если символ невалиден или отсутствует
            (S(18) для строки длины 17)

    Examples:
        >>> s_value("A12425GABC1234002M", 1)
        46
        >>> s_value("A12425GABC1234002M", 18) % 36
        1
    """
    return _s_from_p(p_value(grid, index), _char_at(grid, index))


def compute_ps_sequences(grid: str) -> PSSequences:
    """
    Вычисление обеих последовательностей одним проходом.

    P вычисляется до P(18) всегда (нужен только payload), S до длины строки.

    Args:
        grid: GRid длины 17 или 18

    Returns:
        PSSequences

    Raises:
        InvalidLengthError: если длина grid не 17 и не 18
        InvalidCharacterError: если grid содержит невалидный символ
    """
    _check_length(grid)

    p_sequence = [P_INITIAL]
    s_sequence: list[int] = []

    for position in range(MIN_INDEX, len(grid) + 1):
        s = _s_from_p(p_sequence[-1], _char_at(grid, position))
        s_sequence.append(s)
        if position < MAX_INDEX:
            p_sequence.append(_next_p(s))

    return PSSequences(p_sequence=tuple(p_sequence), s_sequence=tuple(s_sequence))


# =============================================================================
# КОНТРОЛЬНЫЙ СИМВОЛ
# =============================================================================


def compute_check_character(grid: str) -> str:
    """
    Вычисление контрольного символа GRid.

    Используются только первые 17 символов; 18-й (если есть) игнорируется.

    Args:
        grid: GRid длины 17 или 18 (регистр не важен)

    Returns:
        Контрольный символ ('0'..'9' или 'A'..'Z')

    Raises:
        InvalidLengthError: если длина grid не 17 и не 18
        InvalidCharacterError: если payload содержит невалидный символ
        ChecksumInvariantViolation: если нарушена самопроверка (дефект движка)

    Examples:
        >>> compute_check_character("A12425GABC1234002")
        'M'
        >>> compute_check_character("a12425gabc1234002")
        'M'
        >>> compute_check_character("A12425GABC1234001X")
        'O'
    """
    _check_length(grid)

    p_mod37 = p_value(grid, GRID_LENGTH) % MOD_A
    # Контрольный символ a1 выбирается так, чтобы S(18) mod 36 == 1
    s = MOD_B - p_mod37 + 1

    if (s + p_mod37) % MOD_B != VALID_REMAINDER:
        logger.critical(
            "MOD 37-36 self-check failed for %r: s_value=%d p_mod37=%d", grid, s, p_mod37
        )
        raise ChecksumInvariantViolation(
            f"Check character self-check failed for {grid!r}: "
            f"({s} + {p_mod37}) % {MOD_B} != {VALID_REMAINDER}."
        )

    return digit_to_char(s % MOD_B)


def append_check_character(payload: str) -> str:
    """
    Payload из 17 символов → полный GRid из 18 символов (верхний регистр).

    Raises:
        InvalidLengthError: если длина payload не 17
        InvalidCharacterError: если payload содержит невалидный символ

    Examples:
        >>> append_check_character("a12425gabc1234002")
        'A12425GABC1234002M'
    """
    if len(payload) != PAYLOAD_LENGTH:
        raise InvalidLengthError(
            f"Expected {PAYLOAD_LENGTH} length payload, received {payload!r}."
        )

    return payload.upper() + compute_check_character(payload)


def verify_check_character(grid: object) -> bool:
    """
    Проверка контрольного символа полного GRid.

    Никогда не выбрасывает исключение. True только если:
    - grid это str длины 18
    - все символы из алфавита {0-9, A-Z} (без учёта регистра)
    - S(grid, 18) mod 36 == 1

    Examples:
        >>> verify_check_character("A12425GABC1234002M")
        True
        >>> verify_check_character("a12425gabc1234002m")
        True
        >>> verify_check_character("A12425GABC1234002L")
        False
        >>> verify_check_character("A12425GABC1234002")
        False
    """
    if not isinstance(grid, str) or len(grid) != GRID_LENGTH:
        return False

    if not all(is_valid_character(ch) for ch in grid):
        return False

    return s_value(grid, GRID_LENGTH) % MOD_B == VALID_REMAINDER
