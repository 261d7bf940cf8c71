"""Tests for IO helpers."""

import io as stdio
import json
from pathlib import Path

import pytest

from patternsieve import io


def test_read_text_and_jsonl(tmp_path: Path) -> None:
    text_path = tmp_path / "items.txt"
    text_path.write_text("alpha\n\nbeta\n")
    assert io.read_items(str(text_path)) == ["alpha", "beta"]

    jsonl_path = tmp_path / "items.jsonl"
    jsonl_path.write_text('{"item":"gamma"}\n"delta"\n')
    assert io.read_items(str(jsonl_path)) == ["gamma", "delta"]


def test_read_csv(tmp_path: Path) -> None:
    csv_path = tmp_path / "items.csv"
    csv_path.write_text("item,size\nalpha,1\nbeta,2\n")
    assert io.read_items(str(csv_path)) == ["alpha", "beta"]

    bad = tmp_path / "bad.csv"
    bad.write_text("name\nalpha\n")
    with pytest.raises(ValueError):
        io.read_items(str(bad))


def test_read_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", stdio.StringIO("one\ntwo\n"))
    assert io.read_items("-") == ["one", "two"]


def test_load_options(tmp_path: Path) -> None:
    path = tmp_path / "options.json"
    path.write_text('{"caseSensitive": true}')
    assert io.load_options(str(path)) == {"caseSensitive": True}
    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        io.load_options(str(path))


def test_write_helpers(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = tmp_path / "out.json"
    io.write_json(["a"], str(target))
    assert json.loads(target.read_text()) == ["a"]
    io.write_text("hello", "-")
    assert capsys.readouterr().out == "hello\n"
