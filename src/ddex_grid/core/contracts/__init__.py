"""
Contract Validation Module

Модуль для валидации JSON контрактов ddex-grid.
"""

from .validators import (
    ContractValidator,
    GridIdentifierValidator,
    SchemaLoader,
    validate_grid_identifier,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "GridIdentifierValidator",
    # Functions
    "validate_grid_identifier",
]
