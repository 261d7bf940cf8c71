"""Tests for string folding and segment helpers."""

import pytest

from patternsieve.engine.models import MatchOptions
from patternsieve.engine.normalize import (
    base_pattern,
    escape_literal,
    is_negated,
    normalize_string,
    split_segments,
    strip_wildcards,
)

OPTION_SETS = [
    MatchOptions(),
    MatchOptions(case_sensitive=True),
    MatchOptions(accent_insensitive=True),
    MatchOptions(case_sensitive=True, accent_insensitive=True),
]


def test_case_folding() -> None:
    assert normalize_string("HeLLo", MatchOptions()) == "hello"
    assert normalize_string("HeLLo", MatchOptions(case_sensitive=True)) == "HeLLo"


def test_accent_stripping() -> None:
    assert normalize_string("Café", MatchOptions()) == "café"
    assert normalize_string("Café", MatchOptions(accent_insensitive=True)) == "cafe"
    assert normalize_string("Crème Brûlée", MatchOptions(case_sensitive=True, accent_insensitive=True)) == "Creme Brulee"


@pytest.mark.parametrize("options", OPTION_SETS)
@pytest.mark.parametrize("text", ["", "plain", "MiXeD", "naïve Ünïcödé", "é", "*.JS"])
def test_normalization_is_idempotent(text: str, options: MatchOptions) -> None:
    once = normalize_string(text, options)
    assert normalize_string(once, options) == once


def test_escape_literal_leaves_wildcards() -> None:
    assert escape_literal("a.b+c") == r"a\.b\+c"
    assert escape_literal("(x)|[y]") == r"\(x\)\|\[y\]"
    assert escape_literal("te*t?") == "te*t?"
    assert escape_literal("a\\b") == "a\\\\b"


def test_wildcard_and_negation_helpers() -> None:
    assert strip_wildcards("!a*b?") == "!ab"
    assert strip_wildcards("!a*b?", negation=True) == "ab"
    assert is_negated("!foo")
    assert not is_negated("foo!")
    assert base_pattern("!foo") == "foo"
    assert base_pattern("!!foo") == "!foo"
    assert base_pattern("foo") == "foo"


def test_split_segments() -> None:
    assert split_segments("a//b/", "/") == ["a", "b"]
    assert split_segments("a::b", "::") == ["a", "b"]
    assert split_segments("a//b/", None) == ["a//b/"]
    assert split_segments("", "/") == []
