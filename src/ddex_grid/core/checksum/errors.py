"""
Checksum Errors — таксономия ошибок MOD 37-36

Все ошибки входных данных наследуются от GridError (подкласс ValueError),
поэтому вызывающий код может ловить их одним except ValueError.

ChecksumInvariantViolation намеренно НЕ является ValueError: это дефект
алгоритма, а не данных, и он не должен теряться среди ошибок ввода.
"""


class GridError(ValueError):
    """Базовая ошибка структуры GRid (невалидные входные данные)."""

    pass


class InvalidLengthError(GridError):
    """Длина строки не 17 и не 18 символов там, где это требуется."""

    pass


class IndexOutOfRangeError(GridError):
    """
    Индекс P/S последовательности вне диапазона [1, 18].

    Недостижимо из публичных операций; появление снаружи означает дефект.
    """

    pass


class InvalidCharacterError(GridError):
    """Символ вне алфавита {0-9, A-Z} (без учёта регистра)."""

    pass


class OutOfRangeError(GridError):
    """Число вне диапазона [0, 35] передано в digit_to_char."""

    pass


class ChecksumInvariantViolation(Exception):
    """
    Нарушение самопроверки: (s_value + p_mod37) % 36 != 1.

    По построению это условие выполняется для любого валидного payload.
    Если оно нарушено, дефект в арифметике движка: операция прерывается,
    повтор или восстановление не выполняются.
    """

    pass
