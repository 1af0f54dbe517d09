"""Diagnostic codes, locations and the Diagnostic record.

Every rejected font shorthand is described by one Diagnostic. The code is
stable and machine-readable; the message, hint and help URL are for people.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Stable numeric identifiers for shorthand diagnostics.

    Ranges:
        1000-1999: Quoting (family names opened with a quote)
        2000-2999: Shorthand structure and input limits
    """

    UNCLOSED_QUOTE = 1001

    INVALID_SHORTHAND = 2001
    TRAILING_FAMILY_TEXT = 2002
    SOURCE_TOO_LARGE = 2003


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Region of the shorthand value a diagnostic refers to.

    Offsets index the Python string (code points). A shorthand value is
    usually a single line, but values copied out of stylesheets can contain
    newlines, so line and column are tracked as well.

    Attributes:
        start: First character offset, 0-based
        end: Offset one past the last character
        line: 1-based line of start
        column: 1-based column of start
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Reject spans that cannot point into a string.

        Raises:
            ValueError: On a negative start, an end before start, or a
                line/column below 1
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        for name, value in (("line", self.line), ("column", self.column)):
            if value < 1:
                msg = f"SourceSpan.{name} must be >= 1 (1-indexed), got {value}"
                raise ValueError(msg)

    @property
    def length(self) -> int:
        """Number of characters covered (0 for a point)."""
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One problem found in a shorthand value.

    Attributes:
        code: DiagnosticCode identifying the problem
        message: One-sentence description
        span: Offending region, or None when the whole value is at fault
        hint: How to fix it
        help_url: MDN page for the property involved
        severity: "error" for rejections; "warning" is reserved for callers
            that build their own diagnostics
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        return self.message

    def format_error(self, source: str | None = None) -> str:
        """Render with the default (rust style) DiagnosticFormatter.

        Args:
            source: The shorthand value, to include a source excerpt

        Example output:
            error[UNCLOSED_QUOTE]: Unclosed quote " in font family starting at column 6
              --> line 1, column 6
               |
             1 | 12px "Comic
               |      ^^^^^^
              = help: Close the family name with a matching " (escape inner quotes as \\")
              = note: see https://developer.mozilla.org/en-US/docs/Web/CSS/font-family
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self, source=source)
