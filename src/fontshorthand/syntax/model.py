"""Result record for a parsed font shorthand.

FontShorthand is the typed result of the parser. The generic mapping and
JSON views are projections of the same record; there is exactly one grammar
implementation behind both.

Python 3.13+.
"""

import json
from dataclasses import dataclass

from fontshorthand.enums import FontProperty

__all__ = ["FontShorthand"]

type FontMapping = dict[str, str | list[str]]


@dataclass(frozen=True, slots=True)
class FontShorthand:
    """Longhand values decomposed from a font shorthand.

    A FontShorthand only exists for a successful parse, so family is never
    empty and size is always set. Every other field is None when the
    shorthand did not specify it.

    Attributes:
        family: Family names in source order. Quoted names keep their quotes
            and escapes verbatim; unquoted names are whitespace-normalized.
        size: Size token exactly as written (e.g. "12px", "larger")
        style: "italic", "oblique" or "oblique <angle>"
        variant: "small-caps"
        weight: Weight keyword or numeric token exactly as written
        stretch: Stretch keyword
        line_height: Line-height token exactly as written

    Example:
        >>> font = FontShorthand(family=("serif",), size="12px", weight="bold")
        >>> font.to_dict()
        {'font-family': ['serif'], 'font-size': '12px', 'font-weight': 'bold'}
    """

    family: tuple[str, ...]
    size: str
    style: str | None = None
    variant: str | None = None
    weight: str | None = None
    stretch: str | None = None
    line_height: str | None = None

    def __post_init__(self) -> None:
        """Validate FontShorthand invariants.

        Raises:
            ValueError: If family is empty or size is empty
        """
        if not self.family:
            msg = "FontShorthand.family must contain at least one family name"
            raise ValueError(msg)
        if not self.size:
            msg = "FontShorthand.size must not be empty"
            raise ValueError(msg)

    def get(self, prop: FontProperty) -> str | tuple[str, ...] | None:
        """Return the value stored for a longhand property."""
        match prop:
            case FontProperty.FAMILY:
                return self.family
            case FontProperty.SIZE:
                return self.size
            case FontProperty.STYLE:
                return self.style
            case FontProperty.VARIANT:
                return self.variant
            case FontProperty.WEIGHT:
                return self.weight
            case FontProperty.STRETCH:
                return self.stretch
            case FontProperty.LINE_HEIGHT:
                return self.line_height

    def to_dict(self) -> FontMapping:
        """Project to a mapping keyed by CSS longhand property name.

        font-family and font-size are always present; the other keys only
        when the corresponding value was specified.
        """
        result: FontMapping = {
            FontProperty.FAMILY.value: list(self.family),
            FontProperty.SIZE.value: self.size,
        }
        for prop in (
            FontProperty.STYLE,
            FontProperty.VARIANT,
            FontProperty.WEIGHT,
            FontProperty.STRETCH,
            FontProperty.LINE_HEIGHT,
        ):
            value = self.get(prop)
            if isinstance(value, str):
                result[prop.value] = value
        return result

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialize the mapping projection as JSON."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)
