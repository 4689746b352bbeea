"""
Identifier Utilities — разбор и генерация GRid поверх Checksum Engine.
"""

from .generator import (
    RandomNumberSource,
    generate_random_identifier,
    random_valid_char,
    random_valid_number,
    seeded_source,
)
from .parser import parse_identifier

__all__ = [
    # Types
    "RandomNumberSource",
    # Generator
    "generate_random_identifier",
    "random_valid_char",
    "random_valid_number",
    "seeded_source",
    # Parser
    "parse_identifier",
]
