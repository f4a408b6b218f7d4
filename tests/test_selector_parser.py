"""Unit tests for selector parsing."""

import pytest

from jt.errors import SelectorSyntaxError
from jt.selector import Index, Key, SelectorPath, looks_like_selector, parse_selector


class TestBasicParsing:
    """Test parsing of well-formed selectors."""

    def test_identity(self):
        path = parse_selector(".")
        assert path == SelectorPath(())
        assert path.is_identity

    def test_single_key(self):
        assert parse_selector(".users").steps == (Key("users"),)

    def test_chained_keys(self):
        assert parse_selector(".a.b.c").steps == (Key("a"), Key("b"), Key("c"))

    def test_key_then_index(self):
        path = parse_selector(".a.b[2]")
        assert path.steps == (Key("a"), Key("b"), Index(2))

    def test_leading_index(self):
        path = parse_selector(".[0].name")
        assert path.steps == (Index(0), Key("name"))
        assert path.starts_with_index

    def test_consecutive_indices(self):
        assert parse_selector(".grid[1][2]").steps == (Key("grid"), Index(1), Index(2))

    def test_keys_with_punctuation(self):
        """XML attribute and text keys are plain identifiers."""
        path = parse_selector(".book.@id")
        assert path.steps == (Key("book"), Key("@id"))
        assert parse_selector(".#text").steps == (Key("#text"),)

    def test_empty_segments_are_skipped(self):
        assert parse_selector(".a..b").steps == (Key("a"), Key("b"))
        assert parse_selector(".a.").steps == (Key("a"),)

    def test_surrounding_whitespace(self):
        assert parse_selector("  .a  ").steps == (Key("a"),)


class TestCanonicalForm:
    """Test the string form used in error messages."""

    def test_identity(self):
        assert str(parse_selector(".")) == "."

    def test_keys_and_indices(self):
        assert str(parse_selector(".a.b[2]")) == ".a.b[2]"

    def test_leading_index(self):
        assert str(parse_selector(".[3].x")) == ".[3].x"

    def test_prefix(self):
        path = parse_selector(".a.b[2]")
        assert str(path.prefix(2)) == ".a.b"


class TestSyntaxErrors:
    """Test rejection of malformed selectors."""

    def test_missing_leading_dot(self):
        with pytest.raises(SelectorSyntaxError, match="must start with"):
            parse_selector("users")

    def test_empty(self):
        with pytest.raises(SelectorSyntaxError):
            parse_selector("")

    def test_negative_index(self):
        with pytest.raises(SelectorSyntaxError) as exc:
            parse_selector(".items[-1]")
        assert exc.value.segment == "[-1]"
        assert "'-1'" in str(exc.value)
        assert exc.value.path == ".items[-1]"

    def test_non_numeric_index(self):
        with pytest.raises(SelectorSyntaxError, match="invalid array index 'x'"):
            parse_selector(".items[x]")

    def test_empty_brackets(self):
        with pytest.raises(SelectorSyntaxError):
            parse_selector(".items[]")

    def test_unclosed_bracket(self):
        with pytest.raises(SelectorSyntaxError):
            parse_selector(".items[1")

    def test_stray_closing_bracket(self):
        with pytest.raises(SelectorSyntaxError, match="a]b"):
            parse_selector(".a]b")


class TestLooksLikeSelector:
    @pytest.mark.parametrize("arg", [".", ".a", ".Users", ".[0]", ".a.b[1]"])
    def test_selectors(self, arg):
        assert looks_like_selector(arg)

    @pytest.mark.parametrize("arg", ["data.json", "./data.json", "..", ".1", "", "a"])
    def test_not_selectors(self, arg):
        assert not looks_like_selector(arg)
