"""Identifier validation for unquoted font family names.

An unquoted family name is a sequence of CSS identifiers separated by
whitespace. This module provides the single source of truth for those rules,
shared by the parser and the serializer.

CSS Identifier Grammar (as applied to family names):
    - Start: not a digit, not a hyphen followed by a digit, not "--"
    - Continue: ASCII letter, ASCII digit, hyphen, underscore,
      any code point above U+009F, or a backslash escape
    - Escape: backslash + 1-6 lowercase hex digits with an optional
      whitespace terminator, or backslash + any character that is not a
      newline or a lowercase hex digit

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

import re

__all__ = [
    "is_identifier",
    "normalize_family_identifier",
]

# Parts that may not start an identifier: digit, hyphen-digit, double hyphen.
_INVALID_START_PATTERN: re.Pattern[str] = re.compile(r"-?[0-9]|--")

# Whole-part character validation. Compiled once at module load.
_IDENTIFIER_PATTERN: re.Pattern[str] = re.compile(
    r"(?:[_a-zA-Z0-9-]"
    r"|[^\x00-\x9f]"
    r"|\\[0-9a-f]{1,6}(?:\r\n|[ \n\r\t\f])?"
    r"|\\[^\n\r\f0-9a-f])+"
)

# ASCII whitespace runs collapse to a single space.
_WHITESPACE_RUN_PATTERN: re.Pattern[str] = re.compile(r"[ \t\n\r\f]+")

# Characters with the Unicode White_Space property, trimmed from both ends.
# str.strip() with no argument also removes U+001C-U+001F, which are not
# whitespace here and make a family name invalid.
_TRIM_CHARS: str = (
    " \t\n\v\f\r\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def is_identifier(part: str) -> bool:
    """Check a single whitespace-free part against the identifier grammar.

    Args:
        part: Candidate identifier (no surrounding whitespace)

    Returns:
        True if part is a valid CSS identifier, False otherwise

    Example:
        >>> is_identifier("Georgia")
        True
        >>> is_identifier("5-0")
        False
        >>> is_identifier("Ahem!")
        False
        >>> is_identifier("Ahem\\\\!")
        True
        >>> is_identifier("")
        False
    """
    if _INVALID_START_PATTERN.match(part):
        return False
    return _IDENTIFIER_PATTERN.fullmatch(part) is not None


def normalize_family_identifier(text: str) -> str:
    """Validate and normalize an unquoted family name.

    Trims Unicode whitespace from both ends, collapses internal whitespace
    runs to single spaces and checks every resulting part with is_identifier().

    Args:
        text: Raw text accumulated between family separators

    Returns:
        Normalized family name, or "" if any part is not an identifier
        (including when text is empty or whitespace only)

    Example:
        >>> normalize_family_identifier("  Lucida    Grande ")
        'Lucida Grande'
        >>> normalize_family_identifier("Hawaii 5-0")
        ''
    """
    parts = _WHITESPACE_RUN_PATTERN.sub(" ", text.strip(_TRIM_CHARS)).split(" ")
    if not all(is_identifier(part) for part in parts):
        return ""
    return " ".join(parts)
