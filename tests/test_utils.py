"""Tests for argument resolution helpers."""

from patternsieve.engine.models import MatchOptions
from patternsieve.engine.utils import as_list, resolve_options


def test_as_list() -> None:
    assert as_list("foo") == ["foo"]
    assert as_list(["foo", "bar"]) == ["foo", "bar"]
    assert as_list(item for item in ("a", "b")) == ["a", "b"]
    assert as_list([]) == []
    assert as_list(5) == [5]


def test_resolve_options() -> None:
    assert resolve_options() == MatchOptions()
    snapshot = MatchOptions(case_sensitive=True)
    assert resolve_options(snapshot) is snapshot
    assert resolve_options({"wordBoundary": True}).word_boundary
    forced = resolve_options({"fuzzy_match": False}, fuzzy_match=True, fuzzy_threshold=0.5)
    assert forced.fuzzy_match
    assert forced.fuzzy_threshold == 0.5
