"""
Identifier — модели полей GRid

IdentifierFields: результат позиционного разбора строки (best-effort,
без проверки длины и контрольного символа).

GridIdentifier: полностью валидный GRid из 18 символов. Immutable Pydantic
модель; ширины полей, алфавит и контрольный символ проверяются при создании.
Сериализуется с camelCase алиасами (identifierScheme, issuerCode, ...),
совместимыми с contracts/schema/grid_identifier.json.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from ddex_grid.core.checksum import InvalidLengthError, compute_check_character
from ddex_grid.core.domain.layout import FIELD_SEPARATOR, GRID_LAYOUT, normalize_identifier

_ALPHANUMERIC_PATTERN = "^[0-9A-Z]*$"


# =============================================================================
# PARSED FIELDS
# =============================================================================


class IdentifierFields(BaseModel):
    """
    Поля GRid после позиционного разбора.

    Ограничение только сверху: короткая строка даёт короткие или пустые поля.
    """

    identifier_scheme: str = Field(
        "",
        max_length=GRID_LAYOUT.identifier_scheme_length,
        pattern=_ALPHANUMERIC_PATTERN,
        alias="identifierScheme",
        description="Identifier Scheme (2 символа)",
    )
    issuer_code: str = Field(
        "",
        max_length=GRID_LAYOUT.issuer_code_length,
        pattern=_ALPHANUMERIC_PATTERN,
        alias="issuerCode",
        description="Issuer Code (5 символов)",
    )
    release_number: str = Field(
        "",
        max_length=GRID_LAYOUT.release_number_length,
        pattern=_ALPHANUMERIC_PATTERN,
        alias="releaseNumber",
        description="Release Number (10 символов)",
    )
    check_character: str = Field(
        "",
        max_length=GRID_LAYOUT.check_character_length,
        pattern=_ALPHANUMERIC_PATTERN,
        alias="checkCharacter",
        description="Check Character (1 символ)",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def payload(self) -> str:
        """Первые три поля без контрольного символа."""
        return self.identifier_scheme + self.issuer_code + self.release_number

    def to_dict(self) -> dict[str, str]:
        """camelCase словарь полей."""
        return self.model_dump(by_alias=True)


# =============================================================================
# VALIDATED GRID
# =============================================================================


class GridIdentifier(BaseModel):
    """
    Валидный DDEX GRid.

    Immutable модель (frozen=True). Проверяет только структуру и контрольный
    символ; семантика issuer/registrant не проверяется.
    """

    identifier_scheme: str = Field(
        ...,
        min_length=GRID_LAYOUT.identifier_scheme_length,
        max_length=GRID_LAYOUT.identifier_scheme_length,
        pattern=_ALPHANUMERIC_PATTERN,
        alias="identifierScheme",
    )
    issuer_code: str = Field(
        ...,
        min_length=GRID_LAYOUT.issuer_code_length,
        max_length=GRID_LAYOUT.issuer_code_length,
        pattern=_ALPHANUMERIC_PATTERN,
        alias="issuerCode",
    )
    release_number: str = Field(
        ...,
        min_length=GRID_LAYOUT.release_number_length,
        max_length=GRID_LAYOUT.release_number_length,
        pattern=_ALPHANUMERIC_PATTERN,
        alias="releaseNumber",
    )
    check_character: str = Field(
        ...,
        min_length=GRID_LAYOUT.check_character_length,
        max_length=GRID_LAYOUT.check_character_length,
        pattern=_ALPHANUMERIC_PATTERN,
        alias="checkCharacter",
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator(
        "identifier_scheme", "issuer_code", "release_number", "check_character", mode="before"
    )
    @classmethod
    def uppercase(cls, v: object) -> object:
        """Регистр на входе не важен (только ASCII, остальное отвергнет pattern)."""
        if isinstance(v, str) and v.isascii():
            return v.upper()
        return v

    @model_validator(mode="after")
    def validate_check_character(self) -> "GridIdentifier":
        """Контрольный символ должен совпадать с вычисленным по payload."""
        expected = compute_check_character(self.payload)
        if self.check_character != expected:
            raise ValueError(
                f"invalid check character for {self.payload}: "
                f"{self.check_character} (expected {expected})"
            )
        return self

    @classmethod
    def parse(cls, value: str) -> "GridIdentifier":
        """
        Строгий разбор строки в любой форме (компактной или с разделителями).

        Raises:
            InvalidLengthError: если после нормализации длина не 18
            ValidationError: если поля или контрольный символ невалидны

        Examples:
            >>> str(GridIdentifier.parse("a1-2425g-abc1234002-m"))
            'A12425GABC1234002M'
        """
        normalized = normalize_identifier(value)
        if len(normalized) != GRID_LAYOUT.total_length:
            raise InvalidLengthError(
                f"Expected {GRID_LAYOUT.total_length} alphanumeric characters, "
                f"received {value!r}."
            )

        scheme, issuer, release, check = GRID_LAYOUT.slice_fields(normalized)
        return cls(
            identifier_scheme=scheme,
            issuer_code=issuer,
            release_number=release,
            check_character=check,
        )

    @classmethod
    def from_payload(cls, payload: str) -> "GridIdentifier":
        """
        Построение GRid из 17 символов payload с вычислением контрольного символа.

        Raises:
            InvalidLengthError: если длина payload не 17
            InvalidCharacterError: если payload содержит невалидный символ
        """
        if len(payload) != GRID_LAYOUT.payload_length:
            raise InvalidLengthError(
                f"Expected {GRID_LAYOUT.payload_length} length payload, received {payload!r}."
            )

        scheme, issuer, release, _ = GRID_LAYOUT.slice_fields(payload)
        return cls(
            identifier_scheme=scheme,
            issuer_code=issuer,
            release_number=release,
            check_character=compute_check_character(payload),
        )

    @property
    def payload(self) -> str:
        """17 символов без контрольного."""
        return self.identifier_scheme + self.issuer_code + self.release_number

    def formatted(self) -> str:
        """Печатная форма: A1-2425G-ABC1234002-M."""
        return FIELD_SEPARATOR.join(
            (self.identifier_scheme, self.issuer_code, self.release_number, self.check_character)
        )

    def to_dict(self) -> dict[str, str]:
        """camelCase словарь полей."""
        return self.model_dump(by_alias=True)

    def __str__(self) -> str:
        return self.payload + self.check_character
