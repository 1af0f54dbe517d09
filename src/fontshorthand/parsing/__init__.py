"""Font shorthand parsing: CSS font value -> longhand values.

- Functions NEVER raise exceptions - errors are returned in tuple
- Consistent "errors are values" philosophy across the package

Public API:
    Parsing Functions:
        parse_font - Returns tuple[FontShorthand | None, tuple[FontShorthandError, ...]]

    Type Guards:
        is_valid_font - TypeIs guard for FontShorthand (not None)

Example:
    >>> from fontshorthand.parsing import parse_font, is_valid_font
    >>> font, errors = parse_font("italic small-caps bold 12px/30px Georgia, serif")
    >>> if is_valid_font(font):
    ...     print(font.weight, font.line_height)
    bold 30px

Python 3.13+. Zero external dependencies.
"""

from .font import parse_font
from .guards import is_valid_font

__all__ = [
    # Type guards
    "is_valid_font",
    # Parsing functions
    "parse_font",
]
