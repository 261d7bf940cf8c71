"""Edit-distance scoring behind fuzzy matching."""
from __future__ import annotations

from rapidfuzz.distance import Levenshtein

from .models import FuzzyScore
from .normalize import strip_wildcards

SUBSTRING_SCORE = 0.9


def levenshtein_distance(a: str, b: str) -> int:
    """Unit-cost insert/delete/substitute distance between ``a`` and ``b``."""
    if not a:
        return len(b)
    if not b:
        return len(a)
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """Return ``1 - distance / longest length``, bounded to [0, 1].

    Equal strings (including two empty ones) score 1; a single empty side
    scores 0.
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    return 1.0 - levenshtein_distance(a, b) / max(len(a), len(b))


def fuzzy_match(text: str, pattern: str, threshold: float = 0.2) -> FuzzyScore:
    """Score ``text`` against ``pattern`` with its ``*``, ``?`` and ``!`` glyphs removed.

    Both sides are compared as given: case folding is left to
    :func:`~patternsieve.engine.normalize.normalize_string`, so a
    case-sensitive engine scores "Hello" against "hello" by edit distance.
    """
    cleaned = strip_wildcards(pattern, negation=True)
    if not cleaned:
        return FuzzyScore(matched=True, score=1.0)
    # A literal occurrence wins outright, whatever the threshold.
    if cleaned in text:
        return FuzzyScore(matched=True, score=SUBSTRING_SCORE)
    score = similarity(text, cleaned)
    return FuzzyScore(matched=score >= threshold, score=score)
