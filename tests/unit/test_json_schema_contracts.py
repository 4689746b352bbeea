"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора grid_identifier:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений pattern (ширина и алфавит)
- Проверка контрольного символа
- Интеграция с Pydantic моделями
"""

import pytest
from jsonschema import Draft202012Validator, ValidationError

from ddex_grid.core.contracts import (
    GridIdentifierValidator,
    SchemaLoader,
    validate_grid_identifier,
)
from ddex_grid.core.domain import GridIdentifier
from ddex_grid.identifiers import generate_random_identifier, parse_identifier, seeded_source


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_grid_identifier():
    """Валидный grid_identifier для тестирования."""
    return {
        "identifierScheme": "A1",
        "issuerCode": "2425G",
        "releaseNumber": "ABC1234002",
        "checkCharacter": "M",
    }


# =============================================================================
# SCHEMA LOADER TESTS
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    def test_load_schema(self):
        """Схема загружается и проходит meta-validation."""
        schema = SchemaLoader().load_schema("grid_identifier")
        Draft202012Validator.check_schema(schema)
        assert schema["title"] == "grid_identifier"

    def test_schema_cached(self):
        """Повторная загрузка возвращает тот же объект."""
        loader = SchemaLoader()
        assert loader.load_schema("grid_identifier") is loader.load_schema("grid_identifier")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")


# =============================================================================
# GRID IDENTIFIER VALIDATOR TESTS
# =============================================================================


class TestGridIdentifierValidator:
    """Тесты GridIdentifierValidator."""

    def test_valid_data(self, valid_grid_identifier):
        validate_grid_identifier(valid_grid_identifier)
        assert GridIdentifierValidator().is_valid(valid_grid_identifier)

    @pytest.mark.parametrize(
        "field", ["identifierScheme", "issuerCode", "releaseNumber", "checkCharacter"]
    )
    def test_missing_required_field(self, valid_grid_identifier, field):
        del valid_grid_identifier[field]
        with pytest.raises(ValidationError, match="required"):
            validate_grid_identifier(valid_grid_identifier)

    @pytest.mark.parametrize(
        "field, value",
        [
            ("identifierScheme", "A"),
            ("identifierScheme", "a1"),
            ("issuerCode", "2425"),
            ("releaseNumber", "ABC-234002"),
            ("checkCharacter", "MM"),
        ],
    )
    def test_pattern_violation(self, valid_grid_identifier, field, value):
        valid_grid_identifier[field] = value
        with pytest.raises(ValidationError):
            validate_grid_identifier(valid_grid_identifier)
        assert not GridIdentifierValidator().is_valid(valid_grid_identifier)

    def test_type_violation(self, valid_grid_identifier):
        valid_grid_identifier["issuerCode"] = 24250
        with pytest.raises(ValidationError):
            validate_grid_identifier(valid_grid_identifier)

    def test_additional_properties_rejected(self, valid_grid_identifier):
        valid_grid_identifier["registrant"] = "X"
        with pytest.raises(ValidationError):
            validate_grid_identifier(valid_grid_identifier)

    def test_wrong_check_character(self, valid_grid_identifier):
        """Схема формы проходит, но контрольный символ неверен."""
        valid_grid_identifier["checkCharacter"] = "L"
        with pytest.raises(ValidationError, match="invalid check character"):
            validate_grid_identifier(valid_grid_identifier)
        assert not GridIdentifierValidator().is_valid(valid_grid_identifier)

    def test_iter_errors_collects_all(self):
        errors = list(
            GridIdentifierValidator().iter_errors(
                {"identifierScheme": "A", "issuerCode": "2425"}
            )
        )
        # 2 pattern + 2 required
        assert len(errors) == 4

    def test_iter_errors_reports_check_character(self, valid_grid_identifier):
        """Неверный контрольный символ виден и через iter_errors."""
        valid_grid_identifier["checkCharacter"] = "L"
        errors = list(GridIdentifierValidator().iter_errors(valid_grid_identifier))
        assert len(errors) == 1
        assert list(errors[0].path) == ["checkCharacter"]
        assert "invalid check character" in errors[0].message

    def test_iter_errors_empty_for_valid(self, valid_grid_identifier):
        assert list(GridIdentifierValidator().iter_errors(valid_grid_identifier)) == []

    @pytest.mark.parametrize(
        "field, value",
        [
            ("checkCharacter", "L"),
            ("checkCharacter", "M"),
            ("releaseNumber", "ABC1234001"),
            ("issuerCode", "2425"),
        ],
    )
    def test_is_valid_agrees_with_iter_errors(self, valid_grid_identifier, field, value):
        """is_valid, validate и iter_errors согласованы."""
        validator = GridIdentifierValidator()
        valid_grid_identifier[field] = value
        errors = list(validator.iter_errors(valid_grid_identifier))

        assert validator.is_valid(valid_grid_identifier) is (not errors)
        if errors:
            with pytest.raises(ValidationError):
                validator.validate(valid_grid_identifier)
        else:
            validator.validate(valid_grid_identifier)


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


class TestPydanticIntegration:
    """Сериализованные модели соответствуют контракту."""

    def test_grid_identifier_model(self):
        grid = GridIdentifier.parse("A1-2425G-ABC1234002-M")
        validate_grid_identifier(grid.to_dict())

    def test_parsed_fields(self):
        validate_grid_identifier(parse_identifier("a1-2425g-abc1234002-m").to_dict())

    def test_generated_identifiers(self):
        source = seeded_source(99)
        for _ in range(25):
            grid = generate_random_identifier("A1", "2425G", rng=source)
            validate_grid_identifier(parse_identifier(grid).to_dict())

    def test_short_parsed_fields_rejected(self):
        with pytest.raises(ValidationError):
            validate_grid_identifier(parse_identifier("gb-a1b-0000000125-x").to_dict())
