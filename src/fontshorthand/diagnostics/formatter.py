"""Render diagnostics for terminals, logs and tools.

Three renderings are supported:

- rust: multi-line, compiler style, optionally with a source excerpt
- simple: ``CODE: message`` on one line, for logs
- json: one JSON object per diagnostic, for editors and CI annotations

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic, SourceSpan

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_ANSI_RESET = "\033[0m"
_ANSI_SEVERITY = {
    "error": "\033[1;31m",  # bold red
    "warning": "\033[1;33m",  # bold yellow
}


class OutputFormat(StrEnum):
    """Available diagnostic renderings."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns Diagnostic records into text.

    Attributes:
        output_format: Rendering to produce
        sanitize: Cut message and hint text at max_content_length
        color: Colour the severity label with ANSI codes (rust format only)
        max_content_length: Cut-off used when sanitize is set

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> diagnostic = ErrorTemplate.source_too_large(70000, 65536)
        >>> print(formatter.format(diagnostic))
        SOURCE_TOO_LARGE: Font shorthand size (70,000 characters) exceeds maximum (65,536 characters)
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic, *, source: str | None = None) -> str:
        """Render one diagnostic.

        Args:
            diagnostic: Diagnostic to render
            source: The value the diagnostic was produced for. Only the rust
                format uses it, to print the offending line with a marker.
        """
        match self.output_format:
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return json.dumps(self._as_json_object(diagnostic), ensure_ascii=False)
            case _:
                return "\n".join(self._rust_lines(diagnostic, source))

    def format_all(
        self, diagnostics: Iterable[Diagnostic], *, source: str | None = None
    ) -> str:
        """Render several diagnostics separated by blank lines.

        Args:
            diagnostics: Diagnostics reported against the same value
            source: That value, for the rust format's line excerpt
        """
        return "\n\n".join(self.format(d, source=source) for d in diagnostics)

    def _rust_lines(self, diagnostic: Diagnostic, source: str | None) -> list[str]:
        label = diagnostic.severity
        if self.color:
            label = f"{_ANSI_SEVERITY[label]}{label}{_ANSI_RESET}"
        lines = [f"{label}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"]

        span = diagnostic.span
        if span is not None:
            lines.append(f"  --> line {span.line}, column {span.column}")
            if source is not None:
                lines.extend(_excerpt(source, span))
        if diagnostic.hint:
            lines.append(f"  = help: {self._clip(diagnostic.hint)}")
        if diagnostic.help_url:
            lines.append(f"  = note: see {diagnostic.help_url}")
        return lines

    def _as_json_object(self, diagnostic: Diagnostic) -> dict[str, str | int]:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        if diagnostic.span is not None:
            span = diagnostic.span
            data.update(line=span.line, column=span.column, start=span.start, end=span.end)
        if diagnostic.hint:
            data["hint"] = self._clip(diagnostic.hint)
        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url
        return data

    def _clip(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text


def _excerpt(source: str, span: SourceSpan) -> list[str]:
    """Gutter lines showing the span's line with a caret underline."""
    source_lines = source.split("\n")
    if span.line > len(source_lines):
        return []
    text = source_lines[span.line - 1]
    width = len(str(span.line))
    available = max(len(text) - span.column + 1, 1)
    carets = "^" * max(1, min(span.length, available))
    gutter = " " * (width + 1)
    return [
        f" {gutter}|",
        f" {span.line:>{width}} | {text}",
        f" {gutter}| {' ' * (span.column - 1)}{carets}",
    ]
