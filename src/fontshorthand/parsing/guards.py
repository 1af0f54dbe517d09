"""Type guard functions for parsing result type narrowing.

parse_font() returns tuple[FontShorthand | None, tuple[FontShorthandError, ...]].
The guard checks the result component to narrow types for mypy.

Python 3.13+ with TypeIs support (PEP 742).

Note: The guard accepts None and returns False. This simplifies the pattern from
`if not errors and font is not None` to just `if is_valid_font(font)`.

Example:
    >>> from fontshorthand.parsing import parse_font, is_valid_font
    >>> font, errors = parse_font("bold 12px serif")
    >>> if is_valid_font(font):
    ...     # mypy knows font is FontShorthand
    ...     families = font.family
"""

from typing import TypeIs

from fontshorthand.syntax.model import FontShorthand

__all__ = ["is_valid_font"]


def is_valid_font(value: FontShorthand | None) -> TypeIs[FontShorthand]:
    """Type guard: Check if a parse result is a usable FontShorthand.

    Safe to call directly on parse_font() result without checking errors first.

    Args:
        value: FontShorthand from parse_font() result tuple (may be None on error)

    Returns:
        True if value is a FontShorthand, False otherwise
    """
    return isinstance(value, FontShorthand)
