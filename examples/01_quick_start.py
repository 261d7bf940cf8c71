#!/usr/bin/env python3
"""
Quick Start Examples: Simplest possible usage of patternsieve

This file walks through the public helpers: plain filtering, negation,
any-match checks, fuzzy scoring, detailed results and segment matching.
"""
import sys
sys.path.insert(0, "../src")

from patternsieve import (
    any_matches,
    filter_matching,
    fuzzy_filter,
    match_detailed,
    segment_filter,
    substring_filter,
)

print("=" * 80)
print("QUICK START EXAMPLES")
print("=" * 80)

files = [
    "test.js",
    "test.ts",
    "README.md",
    "package.json",
    "script.min.js",
]

# ============================================================================
# EXAMPLE 1: Filtering with wildcards and negation
# ============================================================================
print("\n" + "=" * 80)
print("EXAMPLE 1: Filtering with wildcards and negation")
print("=" * 80)

print("Files:")
for path in files:
    print(f"  {path}")

print(f"\n  ['*.js', '*.ts']    -> {filter_matching(files, ['*.js', '*.ts'])}")
print(f"  ['*', '!*.min.*']   -> {filter_matching(files, ['*', '!*.min.*'])}")

# ============================================================================
# EXAMPLE 2: Boolean checks
# ============================================================================
print("\n" + "=" * 80)
print("EXAMPLE 2: Boolean checks")
print("=" * 80)

print(f"  any_matches('unicorn', 'uni*')      -> {any_matches('unicorn', 'uni*')}")
print(f"  any_matches('rainbow', '!unicorn')  -> {any_matches('rainbow', '!unicorn')}")
print(f"  any_matches(['foo', 'bar'], 'f*')   -> {any_matches(['foo', 'bar'], 'f*')}")

# ============================================================================
# EXAMPLE 3: Fuzzy matching
# ============================================================================
print("\n" + "=" * 80)
print("EXAMPLE 3: Fuzzy matching (threshold 0.7)")
print("=" * 80)

for result in fuzzy_filter(["hello", "world", "help", "held"], "helo", 0.7):
    print(f"  {result.input:10s} score={result.score:.2f}")

# ============================================================================
# EXAMPLE 4: Detailed results, substrings and segments
# ============================================================================
print("\n" + "=" * 80)
print("EXAMPLE 4: Detailed results, substrings and segments")
print("=" * 80)

detailed = match_detailed(["test.js", "app.tsx"], "*.js")
if detailed:
    first = detailed[0]
    print(f"  {first.input}: score={first.score} time={first.metadata['processing_time_ms']:.3f}ms")

print(f"  substring 'wor'       -> {substring_filter(['hello world', 'foo bar'], 'wor')}")
routes = ["api/v1/users/123", "api/v2/posts/456"]
print(f"  segments 'api/*/users/*' -> {segment_filter(routes, 'api/*/users/*', '/')}")
