"""Font shorthand exception hierarchy with structured diagnostics.

Errors are returned as values by the parser, not raised. They are still
Exception subclasses so callers that prefer exceptions can simply
``raise errors[0]``.

Python 3.13+. Zero external dependencies.
"""

from fontshorthand.enums import ErrorKind

from .codes import Diagnostic

__all__ = [
    "FontShorthandError",
    "InvalidShorthandError",
    "UnclosedQuoteError",
]


class FontShorthandError(Exception):
    """Base exception for all font shorthand errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        input_value: The shorthand value that failed to parse
    """

    kind: ErrorKind = ErrorKind.INVALID_SHORTHAND

    def __init__(self, message: str | Diagnostic, *, input_value: str = "") -> None:
        """Initialize FontShorthandError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The shorthand value that failed to parse
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)
        self.input_value = input_value


class UnclosedQuoteError(FontShorthandError):
    """A quoted family name has no matching unescaped closing quote.

    Fatal for the whole value: no partial result is produced.
    """

    kind = ErrorKind.UNCLOSED_QUOTE


class InvalidShorthandError(FontShorthandError):
    """Any other violation of the shorthand grammar.

    Examples:
    - Missing font size or font family
    - Text glued to a quoted family without a separating comma
    - Value exceeding the configured size limit
    """

    kind = ErrorKind.INVALID_SHORTHAND
