"""Command line interface for the patternsieve matcher."""
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from . import io
from .api import any_matches, filter_matching, fuzzy_filter, match_detailed, match_stats, validate
from .benchmark import format_results, run_benchmarks
from .engine.errors import PatternError
from .engine.models import MatchOptions

# Flag destinations that map directly onto MatchOptions fields.
_OPTION_FLAGS = (
    "case_sensitive",
    "all_patterns",
    "fuzzy_match",
    "fuzzy_threshold",
    "partial_match",
    "separator",
    "word_boundary",
    "accent_insensitive",
    "max_depth",
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="patternsieve", description="Wildcard pattern matching CLI")
    parser.add_argument("-V", "--version", action="version", version="patternsieve 0.1")
    parser.add_argument("-v", "--verbose", action="store_true", default=False)
    sub = parser.add_subparsers(dest="command", required=True)

    def add_match_options(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument("items", nargs="*", help="inputs to match (or use --input)")
        cmd.add_argument("-p", "--pattern", dest="pattern_args", action="append", default=[])
        cmd.add_argument("--patterns", dest="patterns_file", help="file with one pattern per line")
        cmd.add_argument("--input", help="file of inputs; '-' reads stdin")
        cmd.add_argument("--options", dest="options_file", help="JSON file of match options")
        # None defaults so that only explicit flags override --options.
        cmd.add_argument("--case-sensitive", action="store_true", default=None)
        cmd.add_argument("--all-patterns", action="store_true", default=None)
        cmd.add_argument("--fuzzy", dest="fuzzy_match", action="store_true", default=None)
        cmd.add_argument("--fuzzy-threshold", type=float)
        cmd.add_argument("--partial", dest="partial_match", action="store_true", default=None)
        cmd.add_argument("--separator")
        cmd.add_argument("--word-boundary", action="store_true", default=None)
        cmd.add_argument("--accent-insensitive", action="store_true", default=None)
        cmd.add_argument("--max-depth", type=int)

    filt = sub.add_parser("filter", help="print the inputs that match")
    add_match_options(filt)
    filt.add_argument("--format", choices=["text", "json"], default="text")
    filt.add_argument("--out", default="-")

    check = sub.add_parser("check", help="exit 0 when any input matches, 1 otherwise")
    add_match_options(check)

    detail = sub.add_parser("detail", help="detailed results for matching inputs")
    add_match_options(detail)
    detail.add_argument("--out", default="-")

    fuzzy = sub.add_parser("fuzzy", help="detailed fuzzy matching results")
    add_match_options(fuzzy)
    fuzzy.add_argument("--threshold", type=float, default=0.2)
    fuzzy.add_argument("--out", default="-")

    stats = sub.add_parser("stats", help="summary statistics for a matching run")
    add_match_options(stats)
    stats.add_argument("--out", default="-")

    valid = sub.add_parser("validate", help="check pattern syntax")
    valid.add_argument("patterns", nargs="+")

    bench = sub.add_parser("bench", help="run the benchmark suite")
    bench.add_argument("--scale", type=float, default=1.0)
    bench.add_argument("--format", choices=["text", "json"], default="text")
    return parser


def _build_options(args: argparse.Namespace) -> MatchOptions:
    """Merge ``--options FILE`` with any explicitly given flags."""
    payload = io.load_options(args.options_file) if args.options_file else {}
    options = MatchOptions.from_mapping(payload)
    overrides = {
        name: getattr(args, name) for name in _OPTION_FLAGS if getattr(args, name) is not None
    }
    return options.merged(overrides)


def _collect(args: argparse.Namespace) -> tuple[list[str], list[str]]:
    items = list(args.items)
    if args.input:
        items.extend(io.read_items(args.input))
    patterns = list(args.pattern_args)
    if args.patterns_file:
        patterns.extend(io.read_items(args.patterns_file))
    return items, patterns


def _command_filter(args: argparse.Namespace) -> int:
    items, patterns = _collect(args)
    matches = filter_matching(items, patterns, _build_options(args))
    if args.format == "json":
        io.write_json(matches, args.out)
    else:
        io.write_text("\n".join(matches), args.out)
    return 0


def _command_check(args: argparse.Namespace) -> int:
    items, patterns = _collect(args)
    matched = any_matches(items, patterns, _build_options(args))
    io.write_text("true" if matched else "false", "-")
    return 0 if matched else 1


def _command_detail(args: argparse.Namespace) -> int:
    items, patterns = _collect(args)
    results = match_detailed(items, patterns, _build_options(args))
    io.write_json([result.to_json() for result in results], args.out)
    return 0


def _command_fuzzy(args: argparse.Namespace) -> int:
    items, patterns = _collect(args)
    results = fuzzy_filter(items, patterns, args.threshold, _build_options(args))
    io.write_json([result.to_json() for result in results], args.out)
    return 0


def _command_stats(args: argparse.Namespace) -> int:
    items, patterns = _collect(args)
    io.write_json(match_stats(items, patterns, _build_options(args)).to_json(), args.out)
    return 0


def _command_validate(args: argparse.Namespace) -> int:
    status = 0
    lines = []
    for pattern in args.patterns:
        result = validate(pattern)
        if result.valid:
            lines.append(f"OK\t{pattern}")
        else:
            lines.append(f"INVALID\t{pattern}\t{result.error}")
            status = 1
    io.write_text("\n".join(lines), "-")
    return status


def _command_bench(args: argparse.Namespace) -> int:
    results = run_benchmarks(args.scale)
    if args.format == "json":
        io.write_json([result.to_json() for result in results], "-")
    else:
        io.write_text(format_results(results), "-")
    return 0


_COMMANDS = {
    "filter": _command_filter,
    "check": _command_check,
    "detail": _command_detail,
    "fuzzy": _command_fuzzy,
    "stats": _command_stats,
    "validate": _command_validate,
    "bench": _command_bench,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    try:
        return _COMMANDS[args.command](args)
    except (PatternError, ValueError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
