"""
Tests for tokenizing, path expression parsing and name rules.
"""

import pytest

from shelltree.core.path_utils import (
    PathExpression,
    format_path,
    has_invalid_chars,
    normalize_name,
    split_tokens,
)
from shelltree.exceptions import TokenizeError


class TestSplitTokens:
    """Test POSIX style word splitting."""

    def test_first_token_lowercased_only(self):
        assert split_tokens("ECHO Hello World") == ["echo", "Hello", "World"]

    def test_quotes_group_words(self):
        assert split_tokens("echo 'hi there' \"a b\"") == ["echo", "hi there", "a b"]

    def test_escaped_space(self):
        assert split_tokens(r"echo a\ b") == ["echo", "a b"]

    def test_blank_line(self):
        assert split_tokens("   ") == []

    def test_unterminated_quote(self):
        with pytest.raises(TokenizeError) as exc_info:
            split_tokens("echo 'oops")
        assert exc_info.value.line == "echo 'oops"


class TestPathExpression:
    """Test splitting of the first token into path segments."""

    def test_single_segment(self):
        expression = PathExpression.parse("fruit")
        assert expression.segments == ("fruit",)
        assert not expression.absolute
        assert expression.last == "fruit"
        assert expression.parents == ()

    def test_absolute(self):
        expression = PathExpression.parse("/vegetable/tasty/potato")
        assert expression.absolute
        assert expression.segments == ("vegetable", "tasty", "potato")
        assert expression.parents == ("vegetable", "tasty")

    def test_collapsed_slashes_keep_inner_empty_segment(self):
        expression = PathExpression.parse("a//b")
        assert expression.segments == ("a", "", "b")

    def test_trailing_slash_dropped(self):
        assert PathExpression.parse("fruit/").segments == ("fruit",)

    def test_parent_segments(self):
        expression = PathExpression.parse("a/b/..")
        assert expression.last == ".."
        assert expression.parents == ("a", "b")

    @pytest.mark.parametrize("text", ["/", "//", ""])
    def test_root_expressions(self, text):
        expression = PathExpression.parse(text)
        assert expression.is_root
        assert expression.last is None

    def test_keeps_original(self):
        assert PathExpression.parse("/x/y").original == "/x/y"


class TestNames:
    """Test name validation helpers."""

    @pytest.mark.parametrize("name", ["a/b", "a.b", "a b", "a\tb", "/foo", ".."])
    def test_invalid(self, name):
        assert has_invalid_chars(name)

    @pytest.mark.parametrize("name", ["fruit", "my-cmd", "under_score", "?"])
    def test_valid(self, name):
        assert not has_invalid_chars(name)

    def test_normalize(self):
        assert normalize_name("FrUiT") == "fruit"


class TestFormatPath:
    def test_root(self):
        assert format_path([]) == "/"

    def test_nested(self):
        assert format_path(["vegetable", "tasty"]) == "/vegetable/tasty"
