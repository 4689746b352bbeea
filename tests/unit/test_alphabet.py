"""
Тесты для GRid Alphabet — конверсия символов

Проверяемые инварианты:
1. Биекция: to_number(to_char(n)) == n для n в [0, 35]
2. Биекция: to_char(to_number(c)) == c.upper() для валидных c
3. is_valid_character никогда не выбрасывает исключение
4. Невалидные значения отвергаются InvalidCharacterError / OutOfRangeError
"""

import string

import pytest

from ddex_grid.core.checksum.alphabet import (
    ALPHABET,
    ALPHABET_SIZE,
    MAX_DIGIT_VALUE,
    char_to_number,
    digit_to_char,
    is_valid_character,
)
from ddex_grid.core.checksum.errors import (
    GridError,
    InvalidCharacterError,
    OutOfRangeError,
)


# =============================================================================
# ТЕСТЫ: Константы
# =============================================================================


class TestAlphabetConstants:
    """Алфавит MOD 37-36."""

    def test_alphabet_size(self) -> None:
        """36 символов, максимум 35."""
        assert ALPHABET_SIZE == 36
        assert MAX_DIGIT_VALUE == 35
        assert len(set(ALPHABET)) == 36

    def test_alphabet_order(self) -> None:
        """Сначала цифры, затем буквы."""
        assert ALPHABET == string.digits + string.ascii_uppercase


# =============================================================================
# ТЕСТЫ: is_valid_character
# =============================================================================


class TestIsValidCharacter:
    """Тесты предиката is_valid_character."""

    @pytest.mark.parametrize("value", list(string.digits + string.ascii_letters))
    def test_alphanumeric_accepted(self, value: str) -> None:
        """Все цифры и латинские буквы любого регистра допустимы."""
        assert is_valid_character(value) is True

    @pytest.mark.parametrize("value", [0, 5, 9])
    def test_small_integers_accepted(self, value: int) -> None:
        """Целые 0..9 допустимы."""
        assert is_valid_character(value) is True

    @pytest.mark.parametrize("value", [-1, 10, 35, 100])
    def test_integers_outside_digits_rejected(self, value: int) -> None:
        """Целые вне [0, 9] отвергаются, даже если < 36."""
        assert is_valid_character(value) is False

    @pytest.mark.parametrize(
        "value",
        [None, "", "AB", "-", " ", "é", "Я", "ı", "ſ", True, False, 1.0, ["A"], b"A"],
    )
    def test_invalid_values_rejected(self, value: object) -> None:
        """None, пустые/длинные строки, не-ASCII и чужие типы → False."""
        assert is_valid_character(value) is False


# =============================================================================
# ТЕСТЫ: char_to_number
# =============================================================================


class TestCharToNumber:
    """Тесты char_to_number."""

    def test_digits(self) -> None:
        """'0'..'9' → 0..9."""
        for i, ch in enumerate(string.digits):
            assert char_to_number(ch) == i

    def test_uppercase_letters(self) -> None:
        """'A'..'Z' → 10..35."""
        for i, ch in enumerate(string.ascii_uppercase):
            assert char_to_number(ch) == i + 10

    def test_lowercase_letters(self) -> None:
        """Регистр не важен."""
        assert char_to_number("a") == 10
        assert char_to_number("z") == 35
        assert char_to_number("m") == char_to_number("M")

    def test_integer_digit(self) -> None:
        """Целое 0..9 возвращается как есть."""
        assert char_to_number(0) == 0
        assert char_to_number(7) == 7

    @pytest.mark.parametrize("value", [None, "", "AB", "%", "ı", "ſ", 10, -1, True])
    def test_invalid_raises(self, value: object) -> None:
        """Невалидный символ → InvalidCharacterError."""
        with pytest.raises(InvalidCharacterError, match="Invalid character"):
            char_to_number(value)

    def test_error_is_value_error(self) -> None:
        """Ошибки ввода ловятся как ValueError."""
        with pytest.raises(ValueError):
            char_to_number("*")
        assert issubclass(InvalidCharacterError, GridError)


# =============================================================================
# ТЕСТЫ: digit_to_char
# =============================================================================


class TestDigitToChar:
    """Тесты digit_to_char."""

    def test_boundaries(self) -> None:
        """Граничные значения диапазона."""
        assert digit_to_char(0) == "0"
        assert digit_to_char(9) == "9"
        assert digit_to_char(10) == "A"
        assert digit_to_char(35) == "Z"

    @pytest.mark.parametrize("value", [-1, 36, 100])
    def test_out_of_range_raises(self, value: int) -> None:
        """Вне [0, 35] → OutOfRangeError."""
        with pytest.raises(OutOfRangeError, match="out of range"):
            digit_to_char(value)

    @pytest.mark.parametrize("value", [True, False, 3.0, "3", None])
    def test_non_integer_raises(self, value: object) -> None:
        """bool, float, строка и None → OutOfRangeError, а не TypeError."""
        with pytest.raises(OutOfRangeError, match="out of range"):
            digit_to_char(value)
        with pytest.raises(GridError):
            digit_to_char(value)


# =============================================================================
# ТЕСТЫ: Биекция
# =============================================================================


class TestBijection:
    """Инвариант: алфавит и [0, 35] взаимно однозначны."""

    def test_number_char_number(self) -> None:
        """n → char → n."""
        for n in range(ALPHABET_SIZE):
            assert char_to_number(digit_to_char(n)) == n

    def test_char_number_char(self) -> None:
        """c → number → c.upper()."""
        for ch in string.digits + string.ascii_letters:
            assert digit_to_char(char_to_number(ch)) == ch.upper()
