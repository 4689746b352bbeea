"""
GridLayout — позиционная структура GRid

DDEX GRid (18 символов):

    A1 - 2425G - ABC1234002 - M
    |    |       |            |
    |    |       |            └─ Check Character (1)
    |    |       └─ Release Number (10)
    |    └─ Issuer Code (5)
    └─ Identifier Scheme (2)

Единственное место, где описаны ширины полей. Парсер, модели и генератор
используют GRID_LAYOUT, а не собственные срезы.
"""

import re
from dataclasses import dataclass
from typing import Final, Optional


# Всё, что не ASCII буква или цифра, удаляется при нормализации
_NON_ALPHANUMERIC: Final[re.Pattern[str]] = re.compile(r"[^0-9A-Za-z]")

# Разделитель полей в печатной форме
FIELD_SEPARATOR: Final[str] = "-"


@dataclass(frozen=True)
class GridLayout:
    """Ширины полей GRid (фиксированные по стандарту DDEX)."""

    identifier_scheme_length: int = 2
    issuer_code_length: int = 5
    release_number_length: int = 10
    check_character_length: int = 1

    @property
    def payload_length(self) -> int:
        """Длина payload без контрольного символа (17)."""
        return (
            self.identifier_scheme_length
            + self.issuer_code_length
            + self.release_number_length
        )

    @property
    def total_length(self) -> int:
        """Полная длина GRid (18)."""
        return self.payload_length + self.check_character_length

    def slice_fields(self, value: str) -> tuple[str, str, str, str]:
        """
        Позиционная нарезка строки на четыре поля.

        Длина не проверяется: за концом строки поля получаются короче
        или пустыми, лишние символы отбрасываются.

        Returns:
            (identifier_scheme, issuer_code, release_number, check_character)

        Examples:
            >>> GRID_LAYOUT.slice_fields("A12425GABC1234002M")
            ('A1', '2425G', 'ABC1234002', 'M')
            >>> GRID_LAYOUT.slice_fields("A124")
            ('A1', '24', '', '')
        """
        issuer_start = self.identifier_scheme_length
        release_start = issuer_start + self.issuer_code_length
        check_start = release_start + self.release_number_length
        check_end = check_start + self.check_character_length

        return (
            value[:issuer_start],
            value[issuer_start:release_start],
            value[release_start:check_start],
            value[check_start:check_end],
        )


GRID_LAYOUT: Final[GridLayout] = GridLayout()


def normalize_identifier(value: Optional[str]) -> str:
    """
    Удаление всех символов кроме [0-9A-Za-z] и перевод в верхний регистр.

    None трактуется как пустая строка.

    Examples:
        >>> normalize_identifier("gb-a1b-0000000125-x")
        'GBA1B0000000125X'
        >>> normalize_identifier(None)
        ''
    """
    return _NON_ALPHANUMERIC.sub("", value or "").upper()
