"""Serialize a FontShorthand back to shorthand syntax.

Useful for:
- Normalizing hand-written declarations
- Code generators
- Property-based testing (roundtrip: parse -> serialize -> parse)

Python 3.13+.
"""

from fontshorthand.constants import STYLE_OBLIQUE
from fontshorthand.core import normalize_family_identifier

from .model import FontShorthand

__all__ = ["SerializationValidationError", "serialize"]


class SerializationValidationError(ValueError):
    """Raised when a FontShorthand cannot be written as valid shorthand.

    Records built by the parser always serialize. This error only concerns
    programmatically constructed records, for example an unquoted family
    name that is not a valid identifier.
    """


def _serialize_family(name: str) -> str:
    """Validate one family entry and return it as written in the shorthand."""
    if name[:1] in ('"', "'"):
        if len(name) < 2 or name[-1] != name[0]:
            msg = f"Quoted family name {name!r} is not closed by a matching quote"
            raise SerializationValidationError(msg)
        return name
    identifier = normalize_family_identifier(name)
    if not identifier:
        msg = f"Family name {name!r} is not a valid identifier; quote it"
        raise SerializationValidationError(msg)
    return identifier


def serialize(font: FontShorthand) -> str:
    """Serialize FontShorthand to shorthand text.

    Output order is style, variant, weight, stretch, size[/line-height],
    family list. Values are written verbatim, except that a bare "oblique"
    followed by a line-height is written with two spaces after it.

    Args:
        font: Record to serialize

    Returns:
        Shorthand string

    Raises:
        SerializationValidationError: If a family entry cannot be written

    Example:
        >>> serialize(FontShorthand(family=("Georgia", "serif"), size="12px", weight="bold"))
        'bold 12px Georgia, serif'
    """
    style = font.style
    if style == STYLE_OBLIQUE and font.line_height is not None:
        # The token after a bare "oblique" runs to the next space, so
        # "oblique 12px/1.5" would swallow the size. An empty token is not
        # an angle and leaves "12px/1.5" to be read on its own.
        style = f"{STYLE_OBLIQUE} "
    parts = [
        value
        for value in (style, font.variant, font.weight, font.stretch)
        if value is not None
    ]
    size = font.size if font.line_height is None else f"{font.size}/{font.line_height}"
    parts.append(size)
    families = ", ".join(_serialize_family(name) for name in font.family)
    parts.append(families)
    return " ".join(parts)
