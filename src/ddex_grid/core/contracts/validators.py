"""
JSON Schema Contract Validators

Модуль для валидации сериализованных GRid согласно формальным JSON Schema
контрактам. Использует библиотеку jsonschema для проверки структуры
(ширины полей и алфавит); контрольный символ проверяется отдельно через
MOD 37-36.

Схемы:
- grid_identifier.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from ddex_grid.core.checksum import compute_check_character


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в schema/ рядом с этим модулем (package data).
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'grid_identifier')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class GridIdentifierValidator(ContractValidator):
    """
    Валидатор для grid_identifier контракта.

    Помимо схемы проверяет контрольный символ: схема описывает только форму.
    """

    def __init__(self):
        super().__init__("grid_identifier")

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам: сначала схема, затем контрольный символ.

        Контрольный символ проверяется только если форма записи валидна.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        schema_errors = list(self.validator.iter_errors(data))
        yield from schema_errors
        if schema_errors:
            return

        payload = data["identifierScheme"] + data["issuerCode"] + data["releaseNumber"]
        expected = compute_check_character(payload)
        if data["checkCharacter"] != expected:
            yield ValidationError(
                f"invalid check character for {payload}: "
                f"{data['checkCharacter']!r} (expected {expected!r})",
                path=["checkCharacter"],
                instance=data["checkCharacter"],
            )

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первая ошибка из iter_errors
        """
        error = next(self.iter_errors(data), None)
        if error is not None:
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return next(self.iter_errors(data), None) is None


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_grid_identifier(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного GRid.

    Args:
        data: Данные для валидации (camelCase ключи)

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    GridIdentifierValidator().validate(data)
