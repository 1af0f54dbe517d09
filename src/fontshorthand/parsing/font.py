"""Font shorthand parsing gateway.

- parse_font() returns tuple[FontShorthand | None, tuple[FontShorthandError, ...]]
- Parse errors returned in tuple, never raised
- Outcome logged at DEBUG level on the "fontshorthand.parsing.font" logger

Thread-safe. The shared parser holds configuration only.

Python 3.13+.
"""

import logging

from fontshorthand.diagnostics import FontShorthandError
from fontshorthand.syntax import FontShorthand, ShorthandParser

__all__ = ["parse_font"]

logger = logging.getLogger(__name__)

# Maximum characters of the input value included in log records
_LOG_TRUNCATE: int = 80

_DEFAULT_PARSER = ShorthandParser()


def parse_font(
    value: str,
    *,
    parser: ShorthandParser | None = None,
) -> tuple[FontShorthand | None, tuple[FontShorthandError, ...]]:
    """Parse a CSS font shorthand value into its longhand values.

    Args:
        value: Shorthand value (e.g., "italic small-caps bold 12px/30px Georgia, serif")
        parser: Parser to use instead of the shared default (e.g., one with a
            different max_source_size)

    Returns:
        Tuple of (result, errors):
        - result: Parsed FontShorthand, or None if parsing failed
        - errors: Tuple of FontShorthandError (empty tuple on success)

    Examples:
        >>> font, errors = parse_font("12px serif")
        >>> font.to_dict()
        {'font-family': ['serif'], 'font-size': '12px'}
        >>> errors
        ()

        >>> font, errors = parse_font('12px "Lucida" Grande')
        >>> font
        None
        >>> errors[0].diagnostic.code.name
        'TRAILING_FAMILY_TEXT'
    """
    active = parser if parser is not None else _DEFAULT_PARSER
    font, errors = active.parse(value)

    if errors:
        logger.debug(
            "Font shorthand %s rejected: %s",
            repr(value[:_LOG_TRUNCATE]),
            errors[0],
        )
    else:
        logger.debug("Font shorthand %s parsed: %s", repr(value[:_LOG_TRUNCATE]), font)
    return (font, errors)
