"""Tests for edit distance, similarity and fuzzy decisions."""

import pytest

from patternsieve.engine.distance import fuzzy_match, levenshtein_distance, similarity

WORDS = ["", "a", "kitten", "sitting", "flaw", "lawn", "hello", "helo", "ab", "ba"]


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("", "abc", 3),
        ("abc", "", 3),
        ("", "", 0),
        ("same", "same", 0),
        ("ab", "ba", 2),
    ],
)
def test_levenshtein_distance(a: str, b: str, expected: int) -> None:
    assert levenshtein_distance(a, b) == expected


@pytest.mark.parametrize("a", WORDS)
@pytest.mark.parametrize("b", WORDS)
def test_distance_symmetry_and_similarity_bounds(a: str, b: str) -> None:
    assert levenshtein_distance(a, b) == levenshtein_distance(b, a)
    assert levenshtein_distance(a, a) == 0
    assert 0.0 <= similarity(a, b) <= 1.0
    assert similarity(a, a) == 1.0


def test_similarity_edges() -> None:
    assert similarity("", "") == 1.0
    assert similarity("abc", "") == 0.0
    assert similarity("", "abc") == 0.0
    assert similarity("hello", "helo") == pytest.approx(0.8)
    assert similarity("abc", "xyz") == 0.0


def test_fuzzy_match_threshold() -> None:
    result = fuzzy_match("hello", "helo", 0.8)
    assert result.matched
    assert result.score == pytest.approx(0.8)
    assert not fuzzy_match("hello", "helo", 0.81).matched


def test_fuzzy_match_substring_short_circuit() -> None:
    result = fuzzy_match("hello world", "world", 0.99)
    assert result.matched
    assert result.score == 0.9


def test_fuzzy_match_strips_glyphs() -> None:
    assert fuzzy_match("anything", "*?!").score == 1.0
    assert fuzzy_match("hello", "!hel*").score == 0.9
    miss = fuzzy_match("abc", "xyz", 0.2)
    assert not miss.matched
    assert miss.score == 0.0


def test_fuzzy_match_does_not_fold_case() -> None:
    assert fuzzy_match("Hello", "hello", 0.9).score == pytest.approx(0.8)
