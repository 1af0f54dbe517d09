"""Enumerations for fontshorthand type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ParseState(StrEnum):
    """State of the shorthand tokenizer.

    StrEnum provides automatic string conversion: str(ParseState.VARIATION) == "variation"
    """

    VARIATION = "variation"
    """Leading style/variant/weight/stretch tokens, up to and including the size"""

    LINE_HEIGHT = "line-height"
    """Token following the "/" after the size"""

    FONT_FAMILY = "font-family"
    """After a quoted family name, expecting a comma"""

    BEFORE_FONT_FAMILY = "before-font-family"
    """Scanning the comma-separated family list"""

    AFTER_OBLIQUE = "after-oblique"
    """Token following "oblique", possibly an angle"""


class FontProperty(StrEnum):
    """Longhand property names produced by the shorthand.

    StrEnum provides automatic string conversion: str(FontProperty.SIZE) == "font-size"
    """

    FAMILY = "font-family"
    SIZE = "font-size"
    STYLE = "font-style"
    VARIANT = "font-variant"
    WEIGHT = "font-weight"
    STRETCH = "font-stretch"
    LINE_HEIGHT = "line-height"


class ErrorKind(StrEnum):
    """Kind of shorthand parse failure.

    StrEnum provides automatic string conversion: str(ErrorKind.UNCLOSED_QUOTE) == "unclosed-quote"
    """

    UNCLOSED_QUOTE = "unclosed-quote"
    """A quoted family name was opened but never closed"""

    INVALID_SHORTHAND = "invalid-shorthand"
    """Any other grammar violation"""


__all__ = [
    "ErrorKind",
    "FontProperty",
    "ParseState",
]
