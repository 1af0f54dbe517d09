"""Diagnostic system for font shorthand errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import FontShorthandError, InvalidShorthandError, UnclosedQuoteError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FontShorthandError",
    "InvalidShorthandError",
    "OutputFormat",
    "SourceSpan",
    "UnclosedQuoteError",
]
