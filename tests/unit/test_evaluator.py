"""Tests for selector evaluation and multi-document fan-out."""

import pytest

from jt.errors import (
    IndexOutOfBounds,
    KeyNotFound,
    NotAnArray,
    NotAnObject,
    SelectorTraversalError,
)
from jt.selector import evaluate, parse_selector, select
from jt.values import ParsedInput


@pytest.fixture
def tree():
    return {"a": {"b": [10, 20, {"c": "deep"}], "flag": True}, "list": []}


def test_identity_returns_root(tree):
    assert evaluate(tree, parse_selector(".")) is tree


def test_key_and_index(tree):
    assert evaluate(tree, parse_selector(".a.b[2]")) == {"c": "deep"}
    assert evaluate(tree, parse_selector(".a.b[2].c")) == "deep"
    assert evaluate(tree, parse_selector(".a.b[0]")) == 10


def test_falsy_values_are_found(tree):
    assert evaluate({"zero": 0}, parse_selector(".zero")) == 0
    assert evaluate(tree, parse_selector(".list")) == []


def test_missing_key_reports_prefix():
    with pytest.raises(KeyNotFound) as exc:
        evaluate({"a": {"x": 1}}, parse_selector(".a.b[2]"))
    assert exc.value.path == ".a.b"
    assert exc.value.key == "b"
    assert "'.a.b'" in str(exc.value)


def test_key_on_non_object(tree):
    with pytest.raises(NotAnObject) as exc:
        evaluate(tree, parse_selector(".a.flag.x"))
    assert exc.value.path == ".a.flag.x"


def test_index_on_non_array(tree):
    with pytest.raises(NotAnArray) as exc:
        evaluate(tree, parse_selector(".a[0]"))
    assert exc.value.path == ".a[0]"


def test_index_out_of_bounds(tree):
    with pytest.raises(IndexOutOfBounds) as exc:
        evaluate(tree, parse_selector(".a.b[3]"))
    assert exc.value.path == ".a.b[3]"
    assert exc.value.index == 3
    assert exc.value.length == 3


def test_traversal_errors_share_base(tree):
    with pytest.raises(SelectorTraversalError):
        evaluate(tree, parse_selector(".list[0]"))


class TestSelect:
    def test_identity_keeps_input(self):
        parsed = ParsedInput([{"x": 1}, {"x": 2}], multi_document=True)
        assert select(parsed, ".") is parsed

    def test_single_document(self):
        result = select(ParsedInput({"x": {"y": 1}}), ".x")
        assert result == ParsedInput({"y": 1})
        assert not result.multi_document

    def test_fan_out_over_documents(self):
        parsed = ParsedInput([{"x": 1}, {"x": 2}], multi_document=True)
        result = select(parsed, ".x")
        assert result.value == [1, 2]
        assert result.multi_document

    def test_fan_out_preserves_order(self):
        parsed = ParsedInput(
            [{"x": {"n": "first"}}, {"x": {"n": "second"}}], multi_document=True
        )
        assert select(parsed, ".x.n").value == ["first", "second"]

    def test_leading_index_picks_document(self):
        parsed = ParsedInput([{"x": 1}, {"x": 2}], multi_document=True)
        result = select(parsed, ".[1].x")
        assert result.value == 2
        assert not result.multi_document

    def test_ordinary_list_is_not_fanned_out(self):
        with pytest.raises(NotAnObject):
            select(ParsedInput([{"x": 1}, {"x": 2}]), ".x")

    def test_fan_out_error_is_fatal(self):
        parsed = ParsedInput([{"x": 1}, {"y": 2}], multi_document=True)
        with pytest.raises(KeyNotFound):
            select(parsed, ".x")
