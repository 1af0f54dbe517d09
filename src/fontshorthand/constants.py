"""Shared constants for fontshorthand.

This module provides centralized configuration constants used across
the syntax and parsing packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: DoS prevention via size constraints
- Keyword tables: CSS Fonts keywords recognized by the shorthand grammar
- Units: Length and angle units accepted in dimensioned tokens

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_SOURCE_SIZE",
    # Keyword tables
    "ABSOLUTE_SIZE_KEYWORDS",
    "RELATIVE_SIZE_KEYWORDS",
    "STYLE_ITALIC",
    "STYLE_OBLIQUE",
    "VARIANT_SMALL_CAPS",
    "WEIGHT_KEYWORDS",
    "STRETCH_KEYWORDS",
    "MIN_NUMERIC_WEIGHT",
    "MAX_NUMERIC_WEIGHT",
    # Units
    "LENGTH_UNITS",
    "ANGLE_UNITS",
    # Characters
    "QUOTE_CHARS",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum shorthand length in characters (64 KiB).
# A font declaration is a single CSS value; anything near this size is
# generated or adversarial input.
MAX_SOURCE_SIZE: int = 64 * 1024

# ============================================================================
# KEYWORD TABLES
# ============================================================================

# <absolute-size>. "s-small" is accepted for compatibility with existing
# stylesheets that were validated against the same grammar.
ABSOLUTE_SIZE_KEYWORDS: tuple[str, ...] = (
    "xx-small",
    "s-small",
    "small",
    "medium",
    "large",
    "x-large",
    "xx-large",
)

# <relative-size>
RELATIVE_SIZE_KEYWORDS: tuple[str, ...] = ("larger", "smaller")

STYLE_ITALIC: str = "italic"
STYLE_OBLIQUE: str = "oblique"
VARIANT_SMALL_CAPS: str = "small-caps"

WEIGHT_KEYWORDS: tuple[str, ...] = ("bold", "bolder", "lighter")

# Numeric <font-weight> range (inclusive)
MIN_NUMERIC_WEIGHT: float = 1.0
MAX_NUMERIC_WEIGHT: float = 1000.0

STRETCH_KEYWORDS: tuple[str, ...] = (
    "ultra-condensed",
    "extra-condensed",
    "condensed",
    "semi-condensed",
    "semi-expanded",
    "expanded",
    "extra-expanded",
    "ultra-expanded",
)

# ============================================================================
# UNITS
# ============================================================================

LENGTH_UNITS: tuple[str, ...] = (
    "em", "ex", "ch", "rem", "vh", "vw", "vmin", "vmax",
    "px", "mm", "cm", "in", "pt", "pc", "%",
)

ANGLE_UNITS: tuple[str, ...] = ("deg", "grad", "rad", "turn")

# ============================================================================
# CHARACTERS
# ============================================================================

QUOTE_CHARS: frozenset[str] = frozenset({'"', "'"})
