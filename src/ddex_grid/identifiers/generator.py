"""
Generator — генерация случайных GRid

Release Number (10 символов) набирается независимыми равномерными
выборками из алфавита {0-9, A-Z}; контрольный символ вычисляется
через MOD 37-36.

Источник случайности передаётся явно (rng: вызываемый объект без
аргументов, возвращающий int в [0, 35]). Без rng используется общий
для процесса генератор модуля random.
"""

import logging
import random
from typing import Callable, Optional

from ddex_grid.core.checksum import ALPHABET_SIZE, compute_check_character, digit_to_char
from ddex_grid.core.domain import GRID_LAYOUT

logger = logging.getLogger(__name__)

# Источник равномерных целых в [0, ALPHABET_SIZE - 1]
RandomNumberSource = Callable[[], int]


def _process_random_number() -> int:
    return random.randrange(ALPHABET_SIZE)


def seeded_source(seed: int) -> RandomNumberSource:
    """
    Детерминированный источник на собственном random.Random.

    Не разделяет состояние с модулем random; одинаковый seed даёт одинаковую
    последовательность.

    Examples:
        >>> a, b = seeded_source(7), seeded_source(7)
        >>> [a() for _ in range(5)] == [b() for _ in range(5)]
        True
    """
    rnd = random.Random(seed)
    return lambda: rnd.randrange(ALPHABET_SIZE)


def random_valid_number(rng: Optional[RandomNumberSource] = None) -> int:
    """Случайное числовое значение символа в [0, 35]."""
    return (rng or _process_random_number)()


def random_valid_char(rng: Optional[RandomNumberSource] = None) -> str:
    """
    Случайный символ GRid.

    Raises:
        OutOfRangeError: если rng вернул значение вне [0, 35]
    """
    return digit_to_char(random_valid_number(rng))


def generate_random_identifier(
    identifier_scheme: str,
    issuer_code: str,
    rng: Optional[RandomNumberSource] = None,
) -> str:
    """
    Генерация случайного GRid.

    identifier_scheme и issuer_code не проверяются: ответственность
    вызывающего кода (2 и 5 символов алфавита).

    Args:
        identifier_scheme: Identifier Scheme (2 символа)
        issuer_code: Issuer Code (5 символов)
        rng: Источник случайных чисел в [0, 35] (default: модуль random)

    Returns:
        GRid из 18 символов

    Examples:
        >>> grid = generate_random_identifier("A1", "2425G", rng=seeded_source(1))
        >>> len(grid), grid[:7]
        (18, 'A12425G')
    """
    release_number = "".join(
        random_valid_char(rng) for _ in range(GRID_LAYOUT.release_number_length)
    )
    payload = f"{identifier_scheme}{issuer_code}{release_number}"
    grid = payload + compute_check_character(payload)

    logger.debug("Generated GRid %s (scheme=%s, issuer=%s)", grid, identifier_scheme, issuer_code)
    return grid
