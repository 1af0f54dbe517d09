"""Font shorthand parser.

This module provides ShorthandParser, a single-pass tokenizing state machine
that decomposes a CSS ``font`` shorthand value into its longhand values
(see :class:`~fontshorthand.syntax.model.FontShorthand`).

Architecture:
    The parser walks the value with an immutable
    :class:`~fontshorthand.syntax.cursor.Cursor`. Each state handler receives
    the cursor on the current character and returns the cursor to resume
    from:

    - ``cursor.advance()`` after consuming the character (the usual case)
    - a cursor past the closing quote after a quoted family name
    - the *same* cursor to re-read the character in the new state
      (the one-character backtrack after ``oblique``)

    States (:class:`~fontshorthand.enums.ParseState`):

    - VARIATION: style/variant/weight/stretch tokens until the size
    - AFTER_OBLIQUE: optional angle following ``oblique``
    - LINE_HEIGHT: token following ``size/``
    - BEFORE_FONT_FAMILY: comma-separated family list
    - FONT_FAMILY: after a quoted family name, expecting a comma

Leniency:
    Unrecognized tokens before the size are dropped, as are line-height
    tokens that are not numeric (``normal``). Only the presence of a size
    and at least one family decides success, plus the two hard errors
    (unclosed quote, text glued to a quoted family).

Thread Safety:
    ShorthandParser holds configuration only. Scratch state is allocated per
    parse() call, so one instance may be shared across threads.

Python 3.13+.
"""

import re

from fontshorthand.constants import MAX_SOURCE_SIZE, QUOTE_CHARS
from fontshorthand.core import normalize_family_identifier
from fontshorthand.diagnostics import (
    ErrorTemplate,
    FontShorthandError,
    InvalidShorthandError,
    UnclosedQuoteError,
)
from fontshorthand.enums import FontProperty, ParseState
from fontshorthand.syntax.cursor import Cursor
from fontshorthand.syntax.model import FontShorthand
from fontshorthand.syntax.patterns import classify_variation, is_angle, is_line_height

__all__ = ["ShorthandParser"]

type ParseOutcome = tuple[FontShorthand | None, tuple[FontShorthandError, ...]]

_BLANK_PATTERN: re.Pattern[str] = re.compile(r"[ \t\n\r\f]*")


class _Scan:
    """Mutable scratch state for a single parse() call."""

    __slots__ = ("buffer", "buffer_start", "family", "fields", "source", "state")

    def __init__(self, source: str) -> None:
        self.source = source
        self.state = ParseState.VARIATION
        self.buffer = ""
        self.buffer_start = 0
        self.family: list[str] = []
        self.fields: dict[FontProperty, str] = {}

    def accumulate(self, cursor: Cursor) -> Cursor:
        if not self.buffer:
            self.buffer_start = cursor.pos
        self.buffer += cursor.current
        return cursor.advance()

    def clear(self) -> None:
        self.buffer = ""

    def emit_identifier(self) -> None:
        identifier = normalize_family_identifier(self.buffer)
        if identifier:
            self.family.append(identifier)

    def variation(self, cursor: Cursor) -> Cursor:
        separator = cursor.current
        if separator not in (" ", "/"):
            return self.accumulate(cursor)

        rule = classify_variation(self.buffer)
        if rule is not None:
            self.fields[rule.prop] = self.buffer
            next_state = rule.transition(separator)
            if next_state is not None:
                self.state = next_state
        self.clear()
        return cursor.advance()

    def after_oblique(self, cursor: Cursor) -> Cursor:
        if cursor.current != " ":
            return self.accumulate(cursor)

        self.state = ParseState.VARIATION
        if is_angle(self.buffer):
            self.fields[FontProperty.STYLE] = f"{self.fields[FontProperty.STYLE]} {self.buffer}"
            self.clear()
            return cursor.advance()
        # Not an angle: re-read this space as a VARIATION separator so the
        # buffered token is classified normally. A "/" is part of the token.
        return cursor

    def line_height(self, cursor: Cursor) -> Cursor:
        if cursor.current != " ":
            return self.accumulate(cursor)

        if is_line_height(self.buffer):
            self.fields[FontProperty.LINE_HEIGHT] = self.buffer
        self.state = ParseState.BEFORE_FONT_FAMILY
        self.clear()
        return cursor.advance()

    def before_font_family(self, cursor: Cursor) -> Cursor | None:
        """Scan the family list; None signals an unclosed quote."""
        char = cursor.current
        if char in QUOTE_CHARS:
            closing = cursor.find(char)
            # A quote preceded by a backslash is escaped; keep looking.
            while closing is not None and closing.peek(-1) == "\\":
                closing = closing.find(char)
            if closing is None:
                return None
            self.family.append(cursor.slice_to(closing.pos + 1))
            self.state = ParseState.FONT_FAMILY
            self.clear()
            return closing.advance()
        if char == ",":
            self.emit_identifier()
            self.clear()
            return cursor.advance()
        return self.accumulate(cursor)

    def font_family(self, cursor: Cursor) -> Cursor:
        if cursor.current != ",":
            return self.accumulate(cursor)

        self.state = ParseState.BEFORE_FONT_FAMILY
        self.clear()
        return cursor.advance()

    def finish(self) -> ParseOutcome:
        """Apply the end-of-input rules and build the result."""
        if self.state == ParseState.FONT_FAMILY and not _BLANK_PATTERN.fullmatch(self.buffer):
            start = Cursor(self.source, self.buffer_start)
            diagnostic = ErrorTemplate.trailing_family_text(
                self.buffer, start.span_to(len(self.source))
            )
            return (None, (InvalidShorthandError(diagnostic, input_value=self.source),))

        if self.state == ParseState.BEFORE_FONT_FAMILY:
            self.emit_identifier()

        size = self.fields.get(FontProperty.SIZE)
        if size is None or not self.family:
            diagnostic = ErrorTemplate.invalid_shorthand(
                self.source, has_size=size is not None, has_family=bool(self.family)
            )
            return (None, (InvalidShorthandError(diagnostic, input_value=self.source),))

        font = FontShorthand(
            family=tuple(self.family),
            size=size,
            style=self.fields.get(FontProperty.STYLE),
            variant=self.fields.get(FontProperty.VARIANT),
            weight=self.fields.get(FontProperty.WEIGHT),
            stretch=self.fields.get(FontProperty.STRETCH),
            line_height=self.fields.get(FontProperty.LINE_HEIGHT),
        )
        return (font, ())


class ShorthandParser:
    """CSS font shorthand parser using the immutable cursor pattern.

    Security:
    - Configurable max_source_size prevents DoS via large inputs
    - Default limit: 64 KiB (far beyond any hand-written declaration)

    Attributes:
        max_source_size: Maximum allowed value length in characters

    Example:
        >>> parser = ShorthandParser()
        >>> font, errors = parser.parse("italic bold 12px/30px Georgia, serif")
        >>> font.family, font.size, font.line_height
        (('Georgia', 'serif'), '12px', '30px')
        >>> font, errors = parser.parse("12px")
        >>> font is None, errors[0].kind
        (True, <ErrorKind.INVALID_SHORTHAND: 'invalid-shorthand'>)
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize parser with an optional size limit.

        Args:
            max_source_size: Maximum value length in characters (default: 64 KiB).
                            Set to 0 to disable the size limit (not recommended).
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed value length in characters."""
        return self._max_source_size

    def parse(self, source: str) -> ParseOutcome:
        """Parse a font shorthand value.

        Args:
            source: The shorthand value (e.g. ``"bold 12px/1.5 Georgia, serif"``)

        Returns:
            Tuple of (result, errors):
            - result: FontShorthand, or None if parsing failed
            - errors: Empty tuple on success, exactly one error otherwise

        Errors:
            UnclosedQuoteError: A quoted family name is never closed
            InvalidShorthandError: Text glued to a quoted family name, missing
                size or family, or value longer than max_source_size
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            diagnostic = ErrorTemplate.source_too_large(len(source), self._max_source_size)
            return (None, (InvalidShorthandError(diagnostic, input_value=source),))

        scan = _Scan(source)
        cursor = Cursor(source, 0)

        while not cursor.is_eof:
            match scan.state:
                case ParseState.VARIATION:
                    cursor = scan.variation(cursor)
                case ParseState.AFTER_OBLIQUE:
                    cursor = scan.after_oblique(cursor)
                case ParseState.LINE_HEIGHT:
                    cursor = scan.line_height(cursor)
                case ParseState.FONT_FAMILY:
                    cursor = scan.font_family(cursor)
                case ParseState.BEFORE_FONT_FAMILY:
                    resumed = scan.before_font_family(cursor)
                    if resumed is None:
                        diagnostic = ErrorTemplate.unclosed_quote(
                            cursor.current, cursor.span_to(len(source))
                        )
                        return (None, (UnclosedQuoteError(diagnostic, input_value=source),))
                    cursor = resumed

        return scan.finish()
