"""
GRid Alphabet — конверсия символов в числа и обратно

ISO/IEC 7064, MOD 37-36: алфавит из 36 символов.

    '0'..'9' → 0..9
    'A'..'Z' → 10..35

Единственный допустимый способ преобразования символа GRid в числовое
значение и обратно. Регистр на входе игнорируется, на выходе всегда
верхний регистр.
"""

import string
from typing import Any, Final

from ddex_grid.core.checksum.errors import InvalidCharacterError, OutOfRangeError


# =============================================================================
# ПАРАМЕТРЫ АЛФАВИТА
# =============================================================================

# Алфавит GRid в порядке числовых значений
ALPHABET: Final[str] = string.digits + string.ascii_uppercase

# Размер алфавита (36), он же модуль M в MOD 37-36
ALPHABET_SIZE: Final[int] = len(ALPHABET)

# Максимальное числовое значение символа
MAX_DIGIT_VALUE: Final[int] = ALPHABET_SIZE - 1

# Целые числа на входе допускаются только как десятичные цифры
MAX_NUMERIC_INPUT: Final[int] = 9

_DIGIT_VALUES: Final[dict[str, int]] = {ch: i for i, ch in enumerate(ALPHABET)}


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_character(value: Any) -> bool:
    """
    Проверка, что значение является допустимым символом GRid.

    Никогда не выбрасывает исключение.

    Args:
        value: Символ (str длины 1) или целое число

    Returns:
        True если:
        - value это str длины 1 из {0-9, A-Z, a-z}
        - value это int в диапазоне [0, 9]
        False для None, bool, строк другой длины и всего остального

    Examples:
        >>> is_valid_character("a")
        True
        >>> is_valid_character(7)
        True
        >>> is_valid_character(10)
        False
        >>> is_valid_character("-")
        False
        >>> is_valid_character(None)
        False
    """
    if value is None or isinstance(value, bool):
        return False

    if isinstance(value, int):
        return 0 <= value <= MAX_NUMERIC_INPUT

    if not isinstance(value, str) or len(value) != 1:
        return False

    # Только ASCII: str.upper() приводит "ı" и "ſ" к "I" и "S"
    return value in _DIGIT_VALUES or value in string.ascii_lowercase


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def char_to_number(value: Any) -> int:
    """
    Конверсия: символ GRid → числовое значение [0, 35].

    Args:
        value: Символ (str длины 1, любой регистр) или цифра 0-9 как int

    Returns:
        Числовое значение символа

    Raises:
        InvalidCharacterError: если value не проходит is_valid_character

    Examples:
        >>> char_to_number("7")
        7
        >>> char_to_number("A")
        10
        >>> char_to_number("z")
        35
        >>> char_to_number(4)
        4
    """
    if not is_valid_character(value):
        raise InvalidCharacterError(f"Invalid character {value!r}.")

    if isinstance(value, int):
        return value

    return _DIGIT_VALUES[value.upper()]


def digit_to_char(number: int) -> str:
    """
    Конверсия: числовое значение [0, 35] → символ GRid.

    Args:
        number: Целое число

    Returns:
        '0'..'9' для 0..9, 'A'..'Z' для 10..35

    Raises:
        OutOfRangeError: если number не int (bool тоже отвергается),
            number < 0 или number > 35

    Examples:
        >>> digit_to_char(0)
        '0'
        >>> digit_to_char(10)
        'A'
        >>> digit_to_char(35)
        'Z'
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise OutOfRangeError(f"Number {number!r} out of range.")

    if number < 0 or number > MAX_DIGIT_VALUE:
        raise OutOfRangeError(f"Number {number} out of range.")

    return ALPHABET[number]
