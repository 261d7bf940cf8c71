"""Micro-benchmarks for the public matching functions."""
from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from .api import any_matches, filter_matching, fuzzy_filter, match_detailed

SAMPLE_INPUTS = [
    "test.js",
    "test.ts",
    "index.html",
    "style.css",
    "script.min.js",
    "component.vue",
    "config.json",
    "readme.md",
    "package.json",
    "main.go",
]
SAMPLE_PATTERNS = ["*.js", "*.ts", "test*", "!*.min.*"]
WARMUP_ITERATIONS = 100


@dataclass(frozen=True)
class BenchmarkResult:
    name: str
    iterations: int
    total_time_ms: float
    average_time_ms: float
    operations_per_second: float

    def to_json(self) -> dict[str, object]:
        return self.__dict__.copy()


def benchmark(name: str, fn: Callable[[], object], iterations: int) -> BenchmarkResult:
    for _ in range(min(WARMUP_ITERATIONS, iterations)):
        fn()
    started = time.perf_counter()
    for _ in range(iterations):
        fn()
    total = time.perf_counter() - started
    return BenchmarkResult(
        name=name,
        iterations=iterations,
        total_time_ms=total * 1000.0,
        average_time_ms=total * 1000.0 / iterations,
        operations_per_second=iterations / total if total > 0 else float("inf"),
    )


def _suite() -> list[tuple[str, Callable[[], object], int]]:
    upper_inputs = [item.upper() for item in SAMPLE_INPUTS]
    large_inputs = [f"file-{index}.js" for index in range(10000)]
    return [
        ("Basic filter", lambda: filter_matching(SAMPLE_INPUTS, SAMPLE_PATTERNS), 50000),
        ("Single any-match", lambda: any_matches(SAMPLE_INPUTS[0], SAMPLE_PATTERNS[0]), 100000),
        (
            "Wildcard patterns",
            lambda: filter_matching(SAMPLE_INPUTS, ["*test*", "*script*", "!*.min.*"]),
            30000,
        ),
        (
            "Case insensitive matching",
            lambda: filter_matching(upper_inputs, SAMPLE_PATTERNS, case_sensitive=False),
            30000,
        ),
        ("Fuzzy matching", lambda: fuzzy_filter(SAMPLE_INPUTS, "test", 0.6), 10000),
        ("Detailed matching", lambda: match_detailed(SAMPLE_INPUTS, SAMPLE_PATTERNS), 20000),
        ("Large dataset", lambda: filter_matching(large_inputs, ["*.js", "!*test*", "*-*"]), 100),
    ]


def run_benchmarks(scale: float = 1.0) -> list[BenchmarkResult]:
    """Run the standard suite; ``scale`` multiplies every iteration count."""
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale!r}")
    return [
        benchmark(name, fn, max(1, int(iterations * scale))) for name, fn, iterations in _suite()
    ]


def format_results(results: list[BenchmarkResult]) -> str:
    lines: list[str] = []
    for result in results:
        lines.append(f"{result.name}:")
        lines.append(f"  Iterations: {result.iterations:,}")
        lines.append(f"  Total time: {result.total_time_ms:.2f}ms")
        lines.append(f"  Average time: {result.average_time_ms:.4f}ms")
        lines.append(f"  Operations/sec: {result.operations_per_second:,.0f}")
    return "\n".join(lines)
