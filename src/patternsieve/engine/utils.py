"""Utility functions for resolving call arguments into engine inputs."""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TypeVar

from .models import MatchOptions

T = TypeVar("T")


def as_list(value: T | Iterable[T]) -> list[T]:
    """Turn a single value or an iterable of values into a list.

    Strings count as single values, as does anything that is not iterable,
    so a stray non-string pattern still reaches validation.

    Examples:
        >>> as_list("foo")
        ['foo']
        >>> as_list(("foo", "bar"))
        ['foo', 'bar']
        >>> as_list([])
        []
    """
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return [value]  # type: ignore[list-item]
    return list(value)


def resolve_options(
    options: MatchOptions | Mapping[str, object] | None = None, **overrides: object
) -> MatchOptions:
    """Resolve options from a snapshot, a mapping or nothing, plus overrides.

    Args:
        options: Existing snapshot, mapping with snake_case or camelCase keys, or None
        overrides: Field values forced on top of ``options``

    Returns:
        A fully populated, immutable :class:`MatchOptions`

    Examples:
        >>> resolve_options(None).fuzzy_threshold
        0.2
        >>> resolve_options({"caseSensitive": True}).case_sensitive
        True
        >>> resolve_options({"fuzzy_match": False}, fuzzy_match=True).fuzzy_match
        True
    """
    if options is None:
        resolved = MatchOptions()
    elif isinstance(options, MatchOptions):
        resolved = options
    else:
        resolved = MatchOptions.from_mapping(options)
    if overrides:
        resolved = resolved.merged(overrides)
    return resolved
