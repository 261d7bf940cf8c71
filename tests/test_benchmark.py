"""Tests for the benchmark harness."""

import pytest

from patternsieve.benchmark import benchmark, format_results, run_benchmarks


def test_benchmark_counts_calls() -> None:
    calls: list[int] = []
    result = benchmark("noop", lambda: calls.append(1), 5)
    assert result.iterations == 5
    assert len(calls) == 10  # warm-up plus timed runs
    assert result.total_time_ms >= 0


def test_run_benchmarks_and_format() -> None:
    results = run_benchmarks(scale=0.0001)
    assert [result.name for result in results][:2] == ["Basic filter", "Single any-match"]
    text = format_results(results)
    assert "Operations/sec" in text
    assert "Large dataset:" in text
    with pytest.raises(ValueError):
        run_benchmarks(scale=0)
