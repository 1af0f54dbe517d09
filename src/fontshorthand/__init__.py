"""fontshorthand - CSS font shorthand parser.

Decomposes a CSS ``font`` shorthand value into its longhand values
(family list, size, style, variant, weight, stretch, line-height) in a
single pass, following the CSS Fonts grammar.

Public API:
    parse_font - Parse a shorthand value; returns (FontShorthand | None, errors)
    serialize_font - Serialize a FontShorthand back to shorthand text
    FontShorthand - Parsed longhand values
    ShorthandParser - Configurable parser (input size limit)
    is_valid_font - TypeIs guard for parse_font() results

Exceptions (returned as values, never raised by the parser):
    FontShorthandError - Base exception class
    UnclosedQuoteError - Quoted family name never closed
    InvalidShorthandError - Any other grammar violation

Submodules:
    fontshorthand.syntax - Cursor, tokenizer, result record, serializer
    fontshorthand.parsing - Never-raise parsing gateway and type guards
    fontshorthand.diagnostics - Error codes, templates and formatting
    fontshorthand.cli - Command line interface
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import FontShorthandError, InvalidShorthandError, UnclosedQuoteError
from .parsing import is_valid_font, parse_font
from .syntax import FontShorthand, ShorthandParser
from .syntax import serialize as serialize_font

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("fontshorthand")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FontShorthand",
    "FontShorthandError",
    "InvalidShorthandError",
    "ShorthandParser",
    "UnclosedQuoteError",
    "__version__",
    "is_valid_font",
    "parse_font",
    "serialize_font",
]
