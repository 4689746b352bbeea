"""
Domain models and value objects.

Contains the GRid field layout, parsed identifier fields and the validated
GridIdentifier model.
"""

from ddex_grid.core.domain.identifier import GridIdentifier, IdentifierFields
from ddex_grid.core.domain.layout import (
    FIELD_SEPARATOR,
    GRID_LAYOUT,
    GridLayout,
    normalize_identifier,
)

__all__ = [
    # Layout
    "FIELD_SEPARATOR",
    "GRID_LAYOUT",
    "GridLayout",
    "normalize_identifier",
    # Models
    "IdentifierFields",
    "GridIdentifier",
]
