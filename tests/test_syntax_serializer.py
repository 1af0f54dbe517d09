"""Tests for syntax.serializer: FontShorthand -> shorthand text."""

from __future__ import annotations

import pytest
from hypothesis import event, given

from fontshorthand.syntax import (
    FontShorthand,
    SerializationValidationError,
    ShorthandParser,
    serialize,
)
from tests.strategies import font_shorthands


class TestSerialize:
    """Output layout and family validation."""

    def test_minimal(self) -> None:
        assert serialize(FontShorthand(family=("serif",), size="12px")) == "12px serif"

    def test_full_order(self) -> None:
        font = FontShorthand(
            family=("Georgia", "serif"),
            size="12px",
            style="italic",
            variant="small-caps",
            weight="bold",
            stretch="condensed",
            line_height="30px",
        )

        assert serialize(font) == "italic small-caps bold condensed 12px/30px Georgia, serif"

    def test_quoted_family_written_verbatim(self) -> None:
        font = FontShorthand(family=('"Times\\" New Roman"',), size="1em")

        assert serialize(font) == '1em "Times\\" New Roman"'

    def test_bare_oblique_before_line_height_gets_empty_token(self) -> None:
        font = FontShorthand(family=("serif",), size="12px", style="oblique", line_height="1.5")

        text = serialize(font)

        assert text == "oblique  12px/1.5 serif"
        assert ShorthandParser().parse(text) == (font, ())

    @pytest.mark.parametrize(
        ("font", "expected"),
        [
            (FontShorthand(family=("serif",), size="12px", style="oblique"), "oblique 12px serif"),
            (
                FontShorthand(
                    family=("serif",), size="12px", style="oblique 10deg", line_height="2"
                ),
                "oblique 10deg 12px/2 serif",
            ),
        ],
    )
    def test_oblique_written_verbatim_otherwise(self, font: FontShorthand, expected: str) -> None:
        assert serialize(font) == expected

    def test_unquoted_family_is_normalized(self) -> None:
        font = FontShorthand(family=("Lucida   Grande",), size="1em")

        assert serialize(font) == "1em Lucida Grande"

    @pytest.mark.parametrize("name", ["Hawaii 5-0", "Ahem!", "", "   "])
    def test_invalid_identifier_rejected(self, name: str) -> None:
        font = FontShorthand(family=(name,), size="12px")

        with pytest.raises(SerializationValidationError, match="not a valid identifier"):
            serialize(font)

    @pytest.mark.parametrize("name", ['"Comic', "'Comic\"", '"'])
    def test_unbalanced_quotes_rejected(self, name: str) -> None:
        font = FontShorthand(family=(name,), size="12px")

        with pytest.raises(SerializationValidationError, match="matching quote"):
            serialize(font)

    def test_error_is_value_error(self) -> None:
        assert issubclass(SerializationValidationError, ValueError)


class TestSerializeRoundtrip:
    """parse(serialize(parse(x))) == parse(x)."""

    @pytest.mark.parametrize(
        "source",
        [
            "italic small-caps bold 12px/30px Georgia, serif",
            "oblique 20deg 700 condensed larger 'Comic Sans', cursive",
            'fancy 12px  Lucida    Grande , "A\\"B"',
            "12px/normal serif",
            "oblique fancy 12px/2 serif",
        ],
    )
    def test_examples(self, source: str) -> None:
        parser = ShorthandParser()
        font, _ = parser.parse(source)
        assert font is not None

        reparsed, errors = parser.parse(serialize(font))

        assert errors == ()
        assert reparsed == font

    @given(source=font_shorthands())
    def test_generated(self, source: str) -> None:
        parser = ShorthandParser()
        font, errors = parser.parse(source)
        assert errors == ()
        assert font is not None
        event(f"families={len(font.family)}")

        text = serialize(font)
        reparsed, _ = parser.parse(text)

        assert reparsed == font
        assert serialize(reparsed) == text
