"""Wildcard to regular-expression compilation with a bounded cache."""
from __future__ import annotations

import logging
import re
import threading
import time
from collections import OrderedDict

from .errors import InvalidPatternTypeError, UnsupportedPatternSyntaxError
from .models import CompiledPattern, MatchOptions, PatternValidation
from .normalize import REGEX_METACHARS, base_pattern, escape_literal, is_negated

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 1000

# "." is escaped during compilation but never rejected by validation.
_UNSUPPORTED = REGEX_METACHARS - {"."}


class PatternCache:
    """Insertion-ordered cache of compiled patterns.

    Once ``max_size`` entries are stored the oldest insertion is evicted
    before a new one is added. Lookups do not refresh an entry's position.
    """

    def __init__(self, max_size: int = DEFAULT_CACHE_SIZE) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size!r}")
        self.max_size = max_size
        self._entries: OrderedDict[tuple[str, str], CompiledPattern] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: tuple[str, str]) -> CompiledPattern | None:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: tuple[str, str], entry: CompiledPattern) -> CompiledPattern:
        """Store ``entry`` unless another thread already did; return the stored one."""
        with self._lock:
            existing = self._entries.get(key)
            if existing is not None:
                return existing
            if len(self._entries) >= self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("pattern cache full, evicted %r", evicted[0])
            self._entries[key] = entry
            return entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def stats(self) -> dict[str, int]:
        return {"size": len(self._entries), "max_size": self.max_size}


_default_cache = PatternCache()


def get_pattern_cache() -> PatternCache:
    """Return the process-wide cache engines share unless given their own."""
    return _default_cache


def _unescaped_metachars(pattern: str) -> list[str]:
    """Metacharacters not directly preceded by a backslash, in order.

    The backslash is itself a metacharacter, so any escape sequence still
    reports its leading backslash.
    """
    return [
        char
        for index, char in enumerate(pattern)
        if char in _UNSUPPORTED and (index == 0 or pattern[index - 1] != "\\")
    ]


def validate_pattern(pattern: object) -> PatternValidation:
    if not isinstance(pattern, str):
        return PatternValidation(valid=False, error="Pattern must be a string")
    unsupported = _unescaped_metachars(pattern)
    if unsupported:
        return PatternValidation(
            valid=False,
            error=f"Unsupported characters found: {', '.join(unsupported)}. Use \\ to escape them.",
        )
    return PatternValidation(valid=True)


def check_pattern(pattern: object) -> str:
    """Return ``pattern`` unchanged or raise the matching :class:`PatternError`."""
    validation = validate_pattern(pattern)
    if validation.valid:
        return pattern  # type: ignore[return-value]
    if not isinstance(pattern, str):
        raise InvalidPatternTypeError(f"Invalid pattern {pattern!r}: {validation.error}")
    raise UnsupportedPatternSyntaxError(f"Invalid pattern {pattern!r}: {validation.error}")


def translate(pattern: str, options: MatchOptions) -> str:
    """Translate a wildcard pattern (negation already removed) to regex source.

    ``?`` becomes a single-character match and ``*`` a run of any length;
    every other metacharacter is matched literally. A configured separator
    is additionally widened to a lazy gap.
    """
    expression = escape_literal(pattern).replace("?", ".").replace("*", ".*")
    if options.word_boundary:
        expression = rf"\b{expression}\b"
    if options.separator:
        expression = expression.replace(escape_literal(options.separator), ".*?")
    return rf"\A{expression}\Z"


def compile_pattern(
    pattern: str, options: MatchOptions | None = None, cache: PatternCache | None = None
) -> CompiledPattern:
    options = options or MatchOptions()
    cache = cache if cache is not None else _default_cache
    key = (pattern, options.cache_key())
    cached = cache.get(key)
    if cached is not None:
        return cached

    flags = 0 if options.case_sensitive else re.IGNORECASE
    source = translate(base_pattern(pattern), options)
    logger.debug("compiled %r to %r", pattern, source)
    entry = CompiledPattern(
        regex=re.compile(source, flags),
        negated=is_negated(pattern),
        original=pattern,
        compiled_at=time.time(),
    )
    return cache.put(key, entry)
