"""Exceptions raised by the patternsieve matching engine."""
from __future__ import annotations


class PatternError(Exception):
    """Base class for every error raised while matching patterns."""


class InvalidPatternTypeError(PatternError, TypeError):
    """A pattern value was not a string."""


class UnsupportedPatternSyntaxError(PatternError, ValueError):
    """A pattern used a regex metacharacter without escaping it."""


class RecursionLimitExceededError(PatternError, RecursionError):
    """A caller went deeper than ``MatchOptions.max_depth`` allows."""

    def __init__(self, depth: int, max_depth: int) -> None:
        super().__init__(f"Maximum recursion depth ({max_depth}) exceeded at depth {depth}")
        self.depth = depth
        self.max_depth = max_depth
