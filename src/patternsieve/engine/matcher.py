"""Pattern matching engine: single decisions and pattern-set combination."""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from .compiler import PatternCache, check_pattern, compile_pattern, get_pattern_cache
from .distance import fuzzy_match
from .errors import RecursionLimitExceededError
from .models import MatchOptions, MatchResult
from .normalize import (
    NEGATION,
    base_pattern,
    is_negated,
    normalize_string,
    split_segments,
    strip_wildcards,
)

logger = logging.getLogger(__name__)


class MatchingEngine:
    """Match inputs against wildcard patterns under one options snapshot.

    Exactly one mode decides each single match: fuzzy when ``fuzzy_match`` is
    set, otherwise segment-wise when a ``separator`` is set, otherwise an
    anchored regular expression compiled from the wildcard pattern.
    """

    def __init__(
        self,
        options: MatchOptions | Mapping[str, object] | None = None,
        *,
        cache: PatternCache | None = None,
    ) -> None:
        if options is None:
            options = MatchOptions()
        elif not isinstance(options, MatchOptions):
            options = MatchOptions.from_mapping(options)
        self._options = options
        self._cache = cache if cache is not None else get_pattern_cache()

    @property
    def options(self) -> MatchOptions:
        return self._options

    @property
    def cache(self) -> PatternCache:
        return self._cache

    def set_options(self, **changes: object) -> None:
        self._options = self._options.merged(changes)

    def get_options(self) -> dict[str, object]:
        return self._options.to_dict()

    def match_single(self, text: str, pattern: str, depth: int = 0) -> MatchResult:
        options = self._options
        if depth > options.max_depth:
            raise RecursionLimitExceededError(depth, options.max_depth)
        check_pattern(pattern)

        normalized_input = normalize_string(text, options)
        normalized_pattern = normalize_string(pattern, options)

        if normalized_pattern in ("", NEGATION):
            empty = normalized_input == ""
            return MatchResult(matched=empty, input=text, pattern=pattern, score=1.0 if empty else 0.0)

        if options.fuzzy_match:
            return self._match_fuzzy(normalized_input, normalized_pattern, text, pattern)
        if options.separator:
            return self._match_segments(normalized_input, normalized_pattern, text, pattern)
        return self._match_regex(normalized_input, normalized_pattern, text, pattern)

    def _match_fuzzy(
        self, normalized_input: str, normalized_pattern: str, text: str, pattern: str
    ) -> MatchResult:
        result = fuzzy_match(
            normalized_input, base_pattern(normalized_pattern), self._options.fuzzy_threshold
        )
        matched = result.matched != is_negated(normalized_pattern)
        return MatchResult(matched=matched, input=text, pattern=pattern, score=result.score)

    def _match_segments(
        self, normalized_input: str, normalized_pattern: str, text: str, pattern: str
    ) -> MatchResult:
        separator = self._options.separator
        input_segments = split_segments(normalized_input, separator)
        pattern_segments = split_segments(base_pattern(normalized_pattern), separator)

        matched = True
        segments: list[str] = []
        for index, pattern_segment in enumerate(pattern_segments):
            if index >= len(input_segments):
                matched = False
                break
            compiled = compile_pattern(pattern_segment, self._options, self._cache)
            if not compiled.matches(input_segments[index]):
                matched = False
                break
            segments.append(input_segments[index])

        if is_negated(normalized_pattern):
            matched = not matched
        return MatchResult(
            matched=matched,
            input=text,
            pattern=pattern,
            score=1.0 if matched else 0.0,
            segments=tuple(segments),
        )

    def _match_regex(
        self, normalized_input: str, normalized_pattern: str, text: str, pattern: str
    ) -> MatchResult:
        compiled = compile_pattern(normalized_pattern, self._options, self._cache)
        matched = compiled.matches(normalized_input)
        if self._options.partial_match and not compiled.negated and not matched:
            matched = strip_wildcards(normalized_pattern) in normalized_input
        if compiled.negated:
            matched = not matched
        return MatchResult(matched=matched, input=text, pattern=pattern, score=1.0 if matched else 0.0)

    def match_multiple(self, text: str, patterns: Sequence[str]) -> MatchResult:
        """Combine the per-pattern results for ``text``.

        Patterns starting with ``!`` are negative: their own ``matched`` flag is
        already inverted, so ``True`` means the excluded form was absent. With
        ``all_patterns`` every result must be ``True``; otherwise at least one
        positive must match (trivially so when there are none) and no negative
        may have triggered.
        """
        if not patterns:
            return MatchResult(matched=False, input=text)

        results = [self.match_single(text, pattern) for pattern in patterns]
        positive = [result for result in results if not is_negated(result.pattern or "")]
        negative = [result for result in results if is_negated(result.pattern or "")]

        representative: MatchResult | None = None
        if self._options.all_patterns:
            matched = all(result.matched for result in positive) and all(
                result.matched for result in negative
            )
            if matched and positive:
                representative = positive[0]
                for result in positive[1:]:
                    if result.score > representative.score:
                        representative = result
        else:
            has_positive = not positive or any(result.matched for result in positive)
            excluded = any(not result.matched for result in negative)
            matched = has_positive and not excluded
            if matched:
                representative = next((result for result in positive if result.matched), None)

        logger.debug(
            "%r against %d pattern(s): matched=%s (%d positive, %d negative)",
            text,
            len(patterns),
            matched,
            len(positive),
            len(negative),
        )
        if representative is None:
            return MatchResult(matched=matched, input=text)
        return MatchResult(
            matched=matched,
            input=text,
            pattern=representative.pattern,
            score=representative.score,
        )
