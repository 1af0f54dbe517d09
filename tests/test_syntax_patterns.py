"""Tests for syntax.patterns: token predicates and the variation rule table."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fontshorthand.enums import FontProperty, ParseState
from fontshorthand.syntax.patterns import (
    VARIATION_RULES,
    classify_variation,
    is_angle,
    is_font_size,
    is_line_height,
    is_numeric_weight,
)
from tests.strategies import angles, font_sizes, out_of_range_weights


class TestIsFontSize:
    @pytest.mark.parametrize(
        "token",
        ["small", "s-small", "xx-large", "larger", "smaller", "12px", "1.5em", ".1px",
         "+.1px", "-1.1px", "100%", "1vmin", "1vmax", "3rem"],
    )
    def test_accepted(self, token: str) -> None:
        assert is_font_size(token)

    @pytest.mark.parametrize(
        "token",
        ["", "12", "xxx-small", "1bs", "12.px", "10e3px", "12.1.1px", "+---12.2px",
         "12PX", "١٢px", "12px ", "smallish"],
    )
    def test_rejected(self, token: str) -> None:
        assert not is_font_size(token)

    @given(token=font_sizes())
    def test_generated_sizes(self, token: str) -> None:
        assert is_font_size(token)


class TestIsNumericWeight:
    @pytest.mark.parametrize(
        "token", ["1", "400", "1000", "1000.00", "1e3", "1e+1", "200e-2", "+123", "123.456"]
    )
    def test_in_range(self, token: str) -> None:
        assert is_numeric_weight(token)

    @pytest.mark.parametrize(
        "token", ["0", "-1", "1000.", "1000.1", "1001", "1.1e3", "1e-2", "1e03", "bold", ""]
    )
    def test_rejected(self, token: str) -> None:
        assert not is_numeric_weight(token)

    @given(weight=out_of_range_weights())
    def test_out_of_range_integers(self, weight: int) -> None:
        assert not is_numeric_weight(str(weight))

    @given(weight=st.integers(min_value=1, max_value=1000))
    def test_in_range_integers(self, weight: int) -> None:
        assert is_numeric_weight(str(weight))


class TestAngleAndLineHeight:
    @given(token=angles())
    def test_generated_angles(self, token: str) -> None:
        assert is_angle(token)

    @pytest.mark.parametrize("token", ["20", "20px", "deg", "20DEG", ""])
    def test_not_angles(self, token: str) -> None:
        assert not is_angle(token)

    @pytest.mark.parametrize("token", ["1.5", "16px", "105%", "-2", ".5em"])
    def test_line_heights(self, token: str) -> None:
        assert is_line_height(token)

    @pytest.mark.parametrize("token", ["normal", "", "1.5.5", "px"])
    def test_not_line_heights(self, token: str) -> None:
        assert not is_line_height(token)


class TestClassifyVariation:
    """The ordered rule table decides each token's property."""

    @pytest.mark.parametrize(
        ("token", "prop"),
        [
            ("12px", FontProperty.SIZE),
            ("small", FontProperty.SIZE),
            ("italic", FontProperty.STYLE),
            ("oblique", FontProperty.STYLE),
            ("small-caps", FontProperty.VARIANT),
            ("bold", FontProperty.WEIGHT),
            ("700", FontProperty.WEIGHT),
            ("condensed", FontProperty.STRETCH),
        ],
    )
    def test_property(self, token: str, prop: FontProperty) -> None:
        rule = classify_variation(token)

        assert rule is not None
        assert rule.prop == prop

    @pytest.mark.parametrize("token", ["", "normal", "0", "20deg", "Bold", "serif"])
    def test_unrecognized(self, token: str) -> None:
        assert classify_variation(token) is None

    def test_size_rule_is_first(self) -> None:
        assert VARIATION_RULES[0].name == "size"

    def test_size_transitions(self) -> None:
        rule = classify_variation("12px")

        assert rule is not None
        assert rule.transition(" ") == ParseState.BEFORE_FONT_FAMILY
        assert rule.transition("/") == ParseState.LINE_HEIGHT

    def test_oblique_transition(self) -> None:
        rule = classify_variation("oblique")

        assert rule is not None
        assert rule.transition(" ") == ParseState.AFTER_OBLIQUE
        assert rule.transition("/") == ParseState.AFTER_OBLIQUE

    def test_other_rules_keep_state(self) -> None:
        rule = classify_variation("bold")

        assert rule is not None
        assert rule.transition(" ") is None
        assert rule.transition("/") is None

    def test_rule_names_are_unique(self) -> None:
        names = [rule.name for rule in VARIATION_RULES]
        assert len(names) == len(set(names))
