"""Hypothesis strategies for fontshorthand property-based testing.

Strategies are organized by domain:

- font: Shorthand tokens, family names and complete shorthand values

Usage:
    from tests.strategies import font_sizes, family_identifiers
    from tests.strategies.font import font_shorthands

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - font_sizes, family_entries, font_shorthands
"""

from .font import (
    ANGLE_UNITS,
    LENGTH_UNITS,
    angles,
    family_entries,
    family_identifiers,
    font_shorthands,
    font_sizes,
    out_of_range_weights,
    plain_words,
    quoted_families,
    shorthand_chaos,
    variation_tokens,
)

__all__ = [
    "ANGLE_UNITS",
    "LENGTH_UNITS",
    "angles",
    "family_entries",
    "family_identifiers",
    "font_shorthands",
    "font_sizes",
    "out_of_range_weights",
    "plain_words",
    "quoted_families",
    "shorthand_chaos",
    "variation_tokens",
]
