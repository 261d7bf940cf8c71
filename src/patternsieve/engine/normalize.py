"""String helpers the matcher relies on: folding, escaping and segmenting."""
from __future__ import annotations

import re
import unicodedata

from .models import MatchOptions

REGEX_METACHARS = frozenset(".+^${}()|[]\\")
WILDCARDS = "*?"
NEGATION = "!"

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def normalize_string(text: str, options: MatchOptions) -> str:
    """Fold ``text`` according to ``options``.

    Case is folded to lower case unless ``case_sensitive`` is set. With
    ``accent_insensitive`` the string is NFD-decomposed and the combining
    diacritical marks (U+0300..U+036F) are removed.
    """
    normalized = text
    if not options.case_sensitive:
        normalized = normalized.lower()
    if options.accent_insensitive:
        normalized = _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", normalized))
    return normalized


def escape_literal(text: str) -> str:
    return "".join("\\" + char if char in REGEX_METACHARS else char for char in text)


def strip_wildcards(pattern: str, negation: bool = False) -> str:
    glyphs = WILDCARDS + NEGATION if negation else WILDCARDS
    return "".join(char for char in pattern if char not in glyphs)


def is_negated(pattern: str) -> bool:
    return pattern.startswith(NEGATION)


def base_pattern(pattern: str) -> str:
    return pattern[1:] if is_negated(pattern) else pattern


def split_segments(text: str, separator: str | None) -> list[str]:
    if not separator:
        return [text]
    return [segment for segment in text.split(separator) if segment]
