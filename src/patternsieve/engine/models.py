"""Data models shared across the patternsieve engine."""
from __future__ import annotations

import dataclasses
import json
import re
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields

# camelCase option names accepted alongside the snake_case field names.
_CAMEL_ALIASES = {
    "caseSensitive": "case_sensitive",
    "allPatterns": "all_patterns",
    "fuzzyMatch": "fuzzy_match",
    "fuzzyThreshold": "fuzzy_threshold",
    "partialMatch": "partial_match",
    "separator": "separator",
    "wordBoundary": "word_boundary",
    "accentInsensitive": "accent_insensitive",
    "maxDepth": "max_depth",
}
_SNAKE_TO_CAMEL = {snake: camel for camel, snake in _CAMEL_ALIASES.items()}


@dataclass(frozen=True)
class MatchOptions:
    """Fully resolved matching configuration.

    case_sensitive: Keep case when comparing (default folds to lower case).
    all_patterns: Every positive pattern must match instead of any one of them.
    fuzzy_match: Decide by edit-distance similarity instead of wildcards.
    fuzzy_threshold: Minimum similarity in [0, 1] that counts as a fuzzy match.
    partial_match: Also accept inputs that merely contain the pattern text.
    separator: Split inputs and patterns into segments compared by position.
    word_boundary: Anchor compiled patterns at word boundaries.
    accent_insensitive: Strip combining diacritical marks before comparing.
    max_depth: Deepest ``depth`` a caller may pass to ``match_single``.
    """
    case_sensitive: bool = False
    all_patterns: bool = False
    fuzzy_match: bool = False
    fuzzy_threshold: float = 0.2
    partial_match: bool = False
    separator: str | None = None
    word_boundary: bool = False
    accent_insensitive: bool = False
    max_depth: int = 10

    def __post_init__(self) -> None:
        if not 0.0 <= self.fuzzy_threshold <= 1.0:
            raise ValueError(f"fuzzy_threshold must be within [0, 1], got {self.fuzzy_threshold!r}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth!r}")
        if self.separator is not None and not isinstance(self.separator, str):
            raise ValueError(f"separator must be a string, got {type(self.separator).__name__}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> MatchOptions:
        """Build options from snake_case or camelCase keys."""
        return cls().merged(mapping)

    def merged(self, changes: Mapping[str, object]) -> MatchOptions:
        resolved: dict[str, object] = {}
        known = {item.name for item in fields(self)}
        for key, value in changes.items():
            name = _CAMEL_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"unknown match option: {key}")
            resolved[name] = value
        return dataclasses.replace(self, **resolved)

    def replace(self, **changes: object) -> MatchOptions:
        return self.merged(changes)

    def cache_key(self) -> str:
        return json.dumps(asdict(self), sort_keys=True)

    def to_dict(self) -> dict[str, object]:
        return {_SNAKE_TO_CAMEL[name]: value for name, value in asdict(self).items()}


@dataclass(frozen=True)
class CompiledPattern:
    regex: re.Pattern[str]
    negated: bool
    original: str
    compiled_at: float

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None


@dataclass(frozen=True)
class FuzzyScore:
    matched: bool
    score: float


@dataclass(frozen=True)
class PatternValidation:
    valid: bool
    error: str | None = None

    def __bool__(self) -> bool:
        return self.valid


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one input against one pattern or a pattern set."""
    matched: bool
    input: str
    pattern: str | None = None
    score: float = 0.0
    segments: tuple[str, ...] | None = None
    metadata: Mapping[str, object] | None = None

    def to_json(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "matched": self.matched,
            "input": self.input,
            "pattern": self.pattern,
            "score": self.score,
        }
        if self.segments is not None:
            payload["segments"] = list(self.segments)
        if self.metadata is not None:
            payload["metadata"] = dict(self.metadata)
        return payload


@dataclass(frozen=True)
class MatchStats:
    total_inputs: int
    total_patterns: int
    match_count: int
    processing_time_ms: float
    average_score: float | None = None

    def to_json(self) -> dict[str, object]:
        return asdict(self)
