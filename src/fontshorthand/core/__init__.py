"""Core utilities shared by the syntax and parsing layers.

This package provides foundational utilities that both the parser and the
serializer depend on. By isolating them here, we maintain a clean
dependency graph:

    core <- syntax <- parsing

Exports:
    is_identifier: Single-part CSS identifier check
    normalize_family_identifier: Unquoted family name normalization

Python 3.13+.
"""

from .identifier_validation import is_identifier, normalize_family_identifier

__all__ = ["is_identifier", "normalize_family_identifier"]
