"""
Parser — разбор строки в поля GRid

Best-effort позиционная декомпозиция, не валидатор: длина и контрольный
символ не проверяются, исключения не выбрасываются. Для строгой проверки
используйте GridIdentifier.parse.
"""

from typing import Optional

from ddex_grid.core.domain import GRID_LAYOUT, IdentifierFields, normalize_identifier


def parse_identifier(value: Optional[str]) -> IdentifierFields:
    """
    Разбор строки в поля 2 / 5 / 10 / 1.

    Все символы кроме [0-9A-Za-z] удаляются, результат переводится в верхний
    регистр и режется по фиксированным позициям.

    Args:
        value: Произвольная строка (None трактуется как пустая)

    Returns:
        IdentifierFields (поля могут быть короче ожидаемого или пустыми)

    Examples:
        >>> parse_identifier("A1-2425G-ABC1234002-M").to_dict()
        {'identifierScheme': 'A1', 'issuerCode': '2425G', 'releaseNumber': 'ABC1234002', 'checkCharacter': 'M'}
        >>> parse_identifier(None).payload
        ''
    """
    scheme, issuer, release, check = GRID_LAYOUT.slice_fields(normalize_identifier(value))

    return IdentifierFields(
        identifier_scheme=scheme,
        issuer_code=issuer,
        release_number=release,
        check_character=check,
    )
