"""Convenience functions built on :class:`~patternsieve.engine.matcher.MatchingEngine`."""
from __future__ import annotations

import dataclasses
import logging
import time
from collections.abc import Iterable, Mapping

from .engine.compiler import get_pattern_cache, validate_pattern
from .engine.matcher import MatchingEngine
from .engine.models import MatchOptions, MatchResult, MatchStats, PatternValidation
from .engine.utils import as_list, resolve_options

logger = logging.getLogger(__name__)

Inputs = str | Iterable[str]
Options = MatchOptions | Mapping[str, object] | None


class PerformanceMonitor:
    """Wall-clock timer accumulating per-call matching counts."""

    def __init__(self) -> None:
        self._started = 0.0
        self.processing_time_ms = 0.0
        self.total_inputs = 0
        self.total_patterns = 0
        self.match_count = 0

    def start(self) -> None:
        self._started = time.perf_counter()

    def end(self) -> float:
        self.processing_time_ms = (time.perf_counter() - self._started) * 1000.0
        return self.processing_time_ms

    def update(self, inputs: int, patterns: int, matches: int) -> None:
        self.total_inputs += inputs
        self.total_patterns += patterns
        self.match_count += matches

    def stats(self, average_score: float | None = None) -> MatchStats:
        return MatchStats(
            total_inputs=self.total_inputs,
            total_patterns=self.total_patterns,
            match_count=self.match_count,
            processing_time_ms=self.processing_time_ms,
            average_score=average_score,
        )


def _prepare(
    inputs: Inputs, patterns: Inputs, options: Options, overrides: dict[str, object]
) -> tuple[MatchingEngine, list[str], list[str]]:
    return (
        MatchingEngine(resolve_options(options, **overrides)),
        as_list(inputs),
        as_list(patterns),
    )


def filter_matching(
    inputs: Inputs, patterns: Inputs, options: Options = None, **overrides: object
) -> list[str]:
    """Return the inputs matching ``patterns``, in order, duplicates kept.

    >>> filter_matching(["foo", "bar", "baz"], ["*", "!foo"])
    ['bar', 'baz']
    """
    monitor = PerformanceMonitor()
    monitor.start()
    engine, items, pattern_list = _prepare(inputs, patterns, options, overrides)
    if not items or not pattern_list:
        monitor.end()
        return []

    matches = [item for item in items if engine.match_multiple(item, pattern_list).matched]
    monitor.update(len(items), len(pattern_list), len(matches))
    monitor.end()
    logger.debug("filter_matching: %s", monitor.stats())
    return matches


def any_matches(
    inputs: Inputs, patterns: Inputs, options: Options = None, **overrides: object
) -> bool:
    """True when at least one input satisfies the pattern set."""
    engine, items, pattern_list = _prepare(inputs, patterns, options, overrides)
    if not items or not pattern_list:
        return False
    return any(engine.match_multiple(item, pattern_list).matched for item in items)


def match_detailed(
    inputs: Inputs, patterns: Inputs, options: Options = None, **overrides: object
) -> list[MatchResult]:
    """Return one annotated :class:`MatchResult` per matching input.

    Each result carries ``metadata`` with the time spent evaluating that input
    (``processing_time_ms``) and the resolved options (``options``).
    """
    engine, items, pattern_list = _prepare(inputs, patterns, options, overrides)
    if not items or not pattern_list:
        return []

    resolved = engine.get_options()
    monitor = PerformanceMonitor()
    results: list[MatchResult] = []
    for item in items:
        monitor.start()
        result = engine.match_multiple(item, pattern_list)
        elapsed = monitor.end()
        if result.matched:
            results.append(
                dataclasses.replace(
                    result, metadata={"processing_time_ms": elapsed, "options": dict(resolved)}
                )
            )
    return results


def match_stats(
    inputs: Inputs, patterns: Inputs, options: Options = None, **overrides: object
) -> MatchStats:
    """Evaluate every input and summarize counts, mean score and elapsed time."""
    monitor = PerformanceMonitor()
    monitor.start()
    engine, items, pattern_list = _prepare(inputs, patterns, options, overrides)
    scores: list[float] = []
    if items and pattern_list:
        for item in items:
            result = engine.match_multiple(item, pattern_list)
            if result.matched:
                scores.append(result.score)
    monitor.update(len(items), len(pattern_list), len(scores))
    monitor.end()
    return monitor.stats(sum(scores) / len(scores) if scores else None)


def fuzzy_filter(
    inputs: Inputs,
    patterns: Inputs,
    threshold: float = 0.2,
    options: Options = None,
    **overrides: object,
) -> list[MatchResult]:
    overrides.update(fuzzy_match=True, fuzzy_threshold=threshold)
    return match_detailed(inputs, patterns, options, **overrides)


def case_insensitive_filter(
    inputs: Inputs, patterns: Inputs, options: Options = None, **overrides: object
) -> list[str]:
    overrides["case_sensitive"] = False
    return filter_matching(inputs, patterns, options, **overrides)


def substring_filter(
    inputs: Inputs, patterns: Inputs, options: Options = None, **overrides: object
) -> list[str]:
    overrides["partial_match"] = True
    return filter_matching(inputs, patterns, options, **overrides)


def segment_filter(
    inputs: Inputs,
    patterns: Inputs,
    separator: str,
    options: Options = None,
    **overrides: object,
) -> list[str]:
    overrides["separator"] = separator
    return filter_matching(inputs, patterns, options, **overrides)


def clear_cache() -> None:
    get_pattern_cache().clear()


def cache_stats() -> dict[str, int]:
    return get_pattern_cache().stats()


def validate(pattern: object) -> PatternValidation:
    return validate_pattern(pattern)
