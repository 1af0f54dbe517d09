"""Position tracking for the shorthand tokenizer.

A Cursor is an immutable (source, pos) pair. Moving creates a new cursor,
so a state handler backtracks simply by handing back the cursor it was
given, and a failed lookahead never disturbs the caller's position.

Positions index the Python string, i.e. Unicode code points. Line and
column are derived lazily since only diagnostics need them.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from fontshorthand.diagnostics import SourceSpan

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Read position within a shorthand value.

    Example:
        >>> start = Cursor("12px serif", 0)
        >>> start.current
        '1'
        >>> start.advance(4).current
        ' '
        >>> start.pos
        0
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True once every character has been consumed."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character under the cursor.

        Raises:
            EOFError: When called at end of input; check is_eof first
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character at pos + offset, or None outside the value.

        Negative offsets look behind, e.g. ``peek(-1)`` for an escaping
        backslash in front of a quote.
        """
        index = self.pos + offset
        if not 0 <= index < len(self.source):
            return None
        return self.source[index]

    def advance(self, count: int = 1) -> "Cursor":
        """Move forward by count characters, stopping at end of input.

        Example:
            >>> Cursor("serif", 0).advance().pos
            1
            >>> Cursor("serif", 0).advance(99).pos
            5
        """
        return Cursor(self.source, min(self.pos + count, len(self.source)))

    def find(self, char: str) -> "Cursor | None":
        """Cursor on the next occurrence of char after this position.

        The character under the cursor itself is never matched, so calling
        find() on an opening quote locates its closing counterpart.

        Example:
            >>> opening = Cursor('"Times" serif', 0)
            >>> opening.find('"').pos
            6
            >>> opening.find("'") is None
            True
        """
        index = self.source.find(char, self.pos + 1)
        return None if index == -1 else Cursor(self.source, index)

    def slice_to(self, end_pos: int) -> str:
        """Text from this position up to (not including) end_pos."""
        return self.source[self.pos : end_pos]

    def compute_line_col(self) -> tuple[int, int]:
        """1-based (line, column) of this position.

        Example:
            >>> Cursor("12px serif", 5).compute_line_col()
            (1, 6)
            >>> Cursor("12px\\nserif", 6).compute_line_col()
            (2, 2)
        """
        line_start = self.source.rfind("\n", 0, self.pos) + 1
        line = self.source.count("\n", 0, line_start) + 1
        return (line, self.pos - line_start + 1)

    def span_to(self, end_pos: int) -> SourceSpan:
        """SourceSpan from this position to end_pos (never shorter than empty)."""
        line, column = self.compute_line_col()
        return SourceSpan(start=self.pos, end=max(end_pos, self.pos), line=line, column=column)
