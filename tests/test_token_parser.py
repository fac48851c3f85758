"""
Tests for the token parser.
"""
import pytest
from classgroups.models import Token
from classgroups.services.token_parser import (
    extract_modifier,
    modifier_segments,
    parse_token,
    parse_tokens,
    token_strings,
)


class TestParseToken:
    """Test splitting a single class name."""

    def test_base_class(self):
        assert parse_token("bg-red") == Token(full="bg-red", modifier=None, base="bg-red")

    def test_single_modifier(self):
        assert parse_token("hover:bg-red") == Token(
            full="hover:bg-red", modifier="hover:", base="bg-red"
        )

    def test_rightmost_separator(self):
        """Chained modifiers stay together in the modifier."""
        assert parse_token("a:b:c") == Token(full="a:b:c", modifier="a:b:", base="c")

    def test_chained_responsive_pseudo(self):
        token = parse_token("md:hover:text-white")
        assert token.modifier == "md:hover:"
        assert token.base == "text-white"

    def test_empty_string(self):
        assert parse_token("") == Token(full="", modifier=None, base="")

    def test_trailing_separator(self):
        token = parse_token("hover:")
        assert token.modifier == "hover:"
        assert token.base == ""

    def test_arbitrary_variant_with_inner_separator(self):
        token = parse_token("[&:hover]:underline")
        assert token.modifier == "[&:hover]:"
        assert token.base == "underline"

    @pytest.mark.parametrize("raw", [
        "bg-red", "hover:bg-red", "md:hover:p-4", "a:b:c", ":x", "x:", "[&_svg]:w-4",
    ])
    def test_full_is_modifier_plus_base(self, raw):
        token = parse_token(raw)
        assert token.full == raw
        assert (token.modifier or "") + token.base == raw
        if token.modifier is None:
            assert token.base == token.full

    def test_token_is_immutable(self):
        token = parse_token("hover:bg-red")
        with pytest.raises(AttributeError):
            token.base = "bg-blue"


class TestParseTokens:
    """Test splitting class strings."""

    def test_two_tokens_same_modifier(self):
        tokens = parse_tokens("hover:bg-red hover:text-white")
        assert len(tokens) == 2
        assert all(token.modifier == "hover:" for token in tokens)

    def test_whitespace_is_insignificant(self):
        tokens = parse_tokens("  bg-red \t\n hover:bg-blue   ")
        assert [t.full for t in tokens] == ["bg-red", "hover:bg-blue"]

    def test_empty_string(self):
        assert parse_tokens("") == []

    def test_whitespace_only(self):
        assert parse_tokens("   \t ") == []

    def test_duplicates_are_kept(self):
        assert token_strings("p-2 p-2") == ["p-2", "p-2"]

    def test_extract_modifier(self):
        assert extract_modifier("focus:ring-2") == "focus:"
        assert extract_modifier("ring-2") is None


class TestModifierSegments:
    """Test the bracket-aware segment grammar."""

    def test_single_segment(self):
        assert modifier_segments("hover:") == ["hover"]

    def test_chained_segments(self):
        assert modifier_segments("md:hover:") == ["md", "hover"]

    def test_none_and_empty(self):
        assert modifier_segments(None) == []
        assert modifier_segments("") == []

    def test_separator_only(self):
        assert modifier_segments(":") == []

    def test_empty_segments_dropped(self):
        assert modifier_segments("a::b:") == ["a", "b"]

    def test_bracket_keeps_inner_separator(self):
        assert modifier_segments("md:[&:hover]:") == ["md", "[&:hover]"]

    def test_bracket_inside_segment(self):
        assert modifier_segments("data-[state=open]:") == ["data-[state=open]"]

    def test_unclosed_bracket_is_plain_text(self):
        assert modifier_segments("[oops:") == ["[oops"]
