"""patternsieve wildcard matching toolkit."""

from collections.abc import Sequence

from .api import (
    any_matches,
    cache_stats,
    case_insensitive_filter,
    clear_cache,
    filter_matching,
    fuzzy_filter,
    match_detailed,
    match_stats,
    segment_filter,
    substring_filter,
    validate,
)
from .engine.errors import (
    InvalidPatternTypeError,
    PatternError,
    RecursionLimitExceededError,
    UnsupportedPatternSyntaxError,
)
from .engine.matcher import MatchingEngine
from .engine.models import MatchOptions, MatchResult, MatchStats


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`patternsieve.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = [
    "main",
    "MatchingEngine",
    "MatchOptions",
    "MatchResult",
    "MatchStats",
    "PatternError",
    "InvalidPatternTypeError",
    "UnsupportedPatternSyntaxError",
    "RecursionLimitExceededError",
    "filter_matching",
    "any_matches",
    "match_detailed",
    "match_stats",
    "fuzzy_filter",
    "case_insensitive_filter",
    "substring_filter",
    "segment_filter",
    "clear_cache",
    "cache_stats",
    "validate",
]
