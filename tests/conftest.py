"""Test configuration ensuring local packages are importable."""

from __future__ import annotations

import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

for path in (SRC, ROOT):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)


@pytest.fixture(autouse=True)
def _empty_pattern_cache() -> None:
    from patternsieve.engine.compiler import get_pattern_cache

    get_pattern_cache().clear()
