"""Font shorthand syntax package.

Provides the tokenizer, the result record and serialization.
Separate from the parsing gateway to enable tooling (linters, formatters).

Python 3.13+.
"""

from .cursor import Cursor
from .model import FontShorthand
from .parser import ShorthandParser
from .serializer import SerializationValidationError, serialize

__all__ = [
    "Cursor",
    "FontShorthand",
    "SerializationValidationError",
    "ShorthandParser",
    "serialize",
]
