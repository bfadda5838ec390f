"""
Tests for the predefined validation criteria catalog.

Tests cover:
- Canonical patterns for every kind
- Lookup by attribute value and by name
- Criterion construction rules
"""

import re

import pytest

from textvalidation.core.criteria import (
    DEFAULT_CRITERION,
    Criterion,
    ValidationKind,
    kind_from_name,
    kind_from_value,
    pattern_for,
)


def full_match(kind: ValidationKind, text: str) -> bool:
    return re.fullmatch(pattern_for(kind), text) is not None


class TestPatternFor:
    """Test the kind to pattern mapping."""

    def test_every_kind_has_a_pattern(self):
        """Test that every kind maps to a non-empty, stable pattern."""
        for kind in ValidationKind:
            pattern = pattern_for(kind)
            assert pattern, f"{kind.name} should have a pattern"
            assert pattern_for(kind) == pattern

    def test_patterns_compile(self):
        """Test that every canonical pattern is a valid regular expression."""
        for kind in ValidationKind:
            re.compile(pattern_for(kind))

    def test_non_empty(self):
        assert full_match(ValidationKind.NON_EMPTY, "x")
        assert full_match(ValidationKind.NON_EMPTY, "line one\nline two")
        assert not full_match(ValidationKind.NON_EMPTY, "")

    def test_url(self):
        valid = ["http://example.com", "https://example.com/path?q=1", "ftp://x.com"]
        invalid = [
            "www.x.com",
            "mailto:a@b.com",
            "http://localhost",
            "https://",
            "http://..x",
            "http://a b.c",
            "http://example.",
        ]

        for text in valid:
            assert full_match(ValidationKind.URL, text), f"'{text}' should be valid"
        for text in invalid:
            assert not full_match(ValidationKind.URL, text), f"'{text}' should be invalid"

    def test_hex_color(self):
        valid = ["#FFF", "#fff", "#a1B2c3", "#000000"]
        invalid = ["#GGG", "#FFFF", "FFF", "#FF", "#1234567", "#FFF "]

        for text in valid:
            assert full_match(ValidationKind.HEX_COLOR, text), f"'{text}' should be valid"
        for text in invalid:
            assert not full_match(ValidationKind.HEX_COLOR, text), f"'{text}' should be invalid"

    def test_alphanumeric(self):
        assert full_match(ValidationKind.ALPHANUMERIC, "abc123")
        assert not full_match(ValidationKind.ALPHANUMERIC, "abc123!")
        assert not full_match(ValidationKind.ALPHANUMERIC, "")
        assert not full_match(ValidationKind.ALPHANUMERIC, "café")

    def test_alphabetic(self):
        assert full_match(ValidationKind.ALPHABETIC, "Hello")
        assert not full_match(ValidationKind.ALPHABETIC, "Hello1")
        assert not full_match(ValidationKind.ALPHABETIC, "")

    def test_numeric(self):
        assert full_match(ValidationKind.NUMERIC, "0042")
        assert not full_match(ValidationKind.NUMERIC, "42a")
        assert not full_match(ValidationKind.NUMERIC, "-42")
        assert not full_match(ValidationKind.NUMERIC, "")

    def test_email(self):
        valid = ["a@b.com", "first.last+tag@mail.example.org", "x_y%z@host-name.io"]
        invalid = ["a@b", "@b.com", "a@.com", "a b@c.com", "a@@b.com", "a@b.com."]

        for text in valid:
            assert full_match(ValidationKind.EMAIL, text), f"'{text}' should be valid"
        for text in invalid:
            assert not full_match(ValidationKind.EMAIL, text), f"'{text}' should be invalid"


class TestKindLookup:
    """Test looking up kinds by value and by name."""

    def test_kind_from_value(self):
        """Test that attribute values identify each kind."""
        assert kind_from_value(0) is ValidationKind.NON_EMPTY
        assert kind_from_value(6) is ValidationKind.EMAIL
        for kind in ValidationKind:
            assert kind_from_value(kind.number) is kind

    def test_kind_from_value_unknown(self):
        with pytest.raises(ValueError, match="7 is not a valid validation kind"):
            kind_from_value(7)

    def test_kind_from_name(self):
        assert kind_from_name("email") is ValidationKind.EMAIL
        assert kind_from_name("HEX_COLOR") is ValidationKind.HEX_COLOR
        assert kind_from_name("hex-color") is ValidationKind.HEX_COLOR
        assert kind_from_name(" Numeric ") is ValidationKind.NUMERIC

    def test_kind_from_name_aliases(self):
        assert kind_from_name("hex") is ValidationKind.HEX_COLOR
        assert kind_from_name("alpha") is ValidationKind.ALPHABETIC
        assert kind_from_name("number") is ValidationKind.NUMERIC

    def test_kind_from_name_unknown(self):
        with pytest.raises(ValueError, match="not a valid validation kind"):
            kind_from_name("phone")


class TestCriterion:
    """Test Criterion construction."""

    def test_of_kind(self):
        criterion = Criterion.of_kind(ValidationKind.EMAIL)
        assert criterion.kind is ValidationKind.EMAIL
        assert not criterion.is_custom
        assert criterion.pattern == pattern_for(ValidationKind.EMAIL)

    def test_custom(self):
        criterion = Criterion.custom("[0-9]+")
        assert criterion.kind is None
        assert criterion.is_custom
        assert criterion.pattern == "[0-9]+"

    def test_exactly_one_rule(self):
        """Test that a criterion needs exactly one of kind or pattern."""
        with pytest.raises(ValueError):
            Criterion()
        with pytest.raises(ValueError):
            Criterion(kind=ValidationKind.NUMERIC, custom_pattern="[0-9]+")

    def test_default_is_non_empty(self):
        assert DEFAULT_CRITERION == Criterion.of_kind(ValidationKind.NON_EMPTY)

    def test_describe(self):
        assert Criterion.of_kind(ValidationKind.URL).describe() == "kind URL"
        assert Criterion.custom("a+").describe() == "custom pattern 'a+'"
