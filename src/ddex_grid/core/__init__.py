"""
Core checksum engine, domain models and contracts.

This package contains the MOD 37-36 building blocks and has no I/O,
network or persistence dependencies.
"""
