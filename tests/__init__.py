"""
Test suite for ddex-grid

Contains:
- tests/unit/          : Unit tests for individual modules
"""
