"""Token classification for the font shorthand grammar.

The tokens before the font size (style, variant, weight, stretch) may appear
in any order. Each token is classified against an ordered table of rules;
the first matching rule wins, which fixes the tie-break policy (a "small"
token is a size keyword, never anything else).

Patterns are compiled once at module load from the keyword tables in
fontshorthand.constants. Digits are matched as ASCII [0-9] explicitly since
Python's \\d also matches non-ASCII decimal digits.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from fontshorthand.constants import (
    ABSOLUTE_SIZE_KEYWORDS,
    ANGLE_UNITS,
    LENGTH_UNITS,
    MAX_NUMERIC_WEIGHT,
    MIN_NUMERIC_WEIGHT,
    RELATIVE_SIZE_KEYWORDS,
    STRETCH_KEYWORDS,
    STYLE_ITALIC,
    STYLE_OBLIQUE,
    VARIANT_SMALL_CAPS,
    WEIGHT_KEYWORDS,
)
from fontshorthand.enums import FontProperty, ParseState

__all__ = [
    "VARIATION_RULES",
    "TokenRule",
    "classify_variation",
    "is_angle",
    "is_font_size",
    "is_line_height",
    "is_numeric_weight",
]


def _alternation(words: tuple[str, ...]) -> str:
    # Longest first so "vmin" is not shadowed by a shorter prefix.
    return "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))


_NUMBER = r"[+-]?(?:[0-9]*\.)?[0-9]+"
_UNITS = _alternation(LENGTH_UNITS)

_FONT_SIZE_PATTERN: re.Pattern[str] = re.compile(
    rf"{_alternation(ABSOLUTE_SIZE_KEYWORDS + RELATIVE_SIZE_KEYWORDS)}|{_NUMBER}(?:{_UNITS})"
)
_NUMERIC_WEIGHT_PATTERN: re.Pattern[str] = re.compile(rf"{_NUMBER}(?:e[+-]?(?:0|[1-9][0-9]*))?")
_WEIGHT_KEYWORD_PATTERN: re.Pattern[str] = re.compile(_alternation(WEIGHT_KEYWORDS))
_STRETCH_PATTERN: re.Pattern[str] = re.compile(_alternation(STRETCH_KEYWORDS))
_ANGLE_PATTERN: re.Pattern[str] = re.compile(rf"{_NUMBER}(?:{_alternation(ANGLE_UNITS)})")
_LINE_HEIGHT_PATTERN: re.Pattern[str] = re.compile(rf"{_NUMBER}(?:{_UNITS})?")


def is_font_size(token: str) -> bool:
    """Check for a size keyword, compare keyword or dimensioned number.

    Example:
        >>> is_font_size("12px"), is_font_size("larger"), is_font_size("12")
        (True, True, False)
    """
    return _FONT_SIZE_PATTERN.fullmatch(token) is not None


def is_numeric_weight(token: str) -> bool:
    """Check for a bare number within the numeric font-weight range.

    The range check uses the float value; the token itself is what gets
    stored, so "1e3" stays "1e3".

    Example:
        >>> is_numeric_weight("700"), is_numeric_weight("1e3"), is_numeric_weight("1001")
        (True, True, False)
    """
    if _NUMERIC_WEIGHT_PATTERN.fullmatch(token) is None:
        return False
    return MIN_NUMERIC_WEIGHT <= float(token) <= MAX_NUMERIC_WEIGHT


def is_angle(token: str) -> bool:
    """Check for an oblique angle such as 20deg or .04rad."""
    return _ANGLE_PATTERN.fullmatch(token) is not None


def is_line_height(token: str) -> bool:
    """Check for a number with an optional length unit.

    Keywords such as "normal" do not match.
    """
    return _LINE_HEIGHT_PATTERN.fullmatch(token) is not None


@dataclass(frozen=True, slots=True)
class TokenRule:
    """One row of the variation classification table.

    Attributes:
        name: Rule name (for debugging and tests)
        prop: Longhand property the token is stored in
        matches: Predicate over the raw token
        next_state: State after a space separator (None keeps the current state)
        slash_state: State after a "/" separator (None falls back to next_state)
    """

    name: str
    prop: FontProperty
    matches: Callable[[str], bool]
    next_state: ParseState | None = None
    slash_state: ParseState | None = None

    def transition(self, separator: str) -> ParseState | None:
        """Resolve the state to enter after this rule matched."""
        if separator == "/" and self.slash_state is not None:
            return self.slash_state
        return self.next_state


# Priority order matters: first match wins.
VARIATION_RULES: tuple[TokenRule, ...] = (
    TokenRule(
        "size",
        FontProperty.SIZE,
        is_font_size,
        next_state=ParseState.BEFORE_FONT_FAMILY,
        slash_state=ParseState.LINE_HEIGHT,
    ),
    TokenRule("italic", FontProperty.STYLE, lambda token: token == STYLE_ITALIC),
    TokenRule(
        "oblique",
        FontProperty.STYLE,
        lambda token: token == STYLE_OBLIQUE,
        next_state=ParseState.AFTER_OBLIQUE,
    ),
    TokenRule("small-caps", FontProperty.VARIANT, lambda token: token == VARIANT_SMALL_CAPS),
    TokenRule(
        "weight-keyword",
        FontProperty.WEIGHT,
        lambda token: _WEIGHT_KEYWORD_PATTERN.fullmatch(token) is not None,
    ),
    TokenRule("weight-number", FontProperty.WEIGHT, is_numeric_weight),
    TokenRule(
        "stretch",
        FontProperty.STRETCH,
        lambda token: _STRETCH_PATTERN.fullmatch(token) is not None,
    ),
)


def classify_variation(token: str) -> TokenRule | None:
    """Return the first rule matching token, or None if nothing matches.

    Example:
        >>> classify_variation("bold").prop
        <FontProperty.WEIGHT: 'font-weight'>
        >>> classify_variation("0") is None
        True
    """
    for rule in VARIATION_RULES:
        if rule.matches(token):
            return rule
    return None
