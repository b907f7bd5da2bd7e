from __future__ import annotations

import json
from pathlib import Path

import pytest

from islamic_data.store import DEFAULT_OUTPUT_DIR, default_output_dir
from islamic_data.store.json_store import JsonCacheStore, dump_json


def test_dump_json_uses_two_space_indent_and_keeps_unicode() -> None:
    assert dump_json({"a": [1], "name": "حصن"}) == '{\n  "a": [\n    1\n  ],\n  "name": "حصن"\n}'


def test_write_then_read(tmp_path: Path) -> None:
    store = JsonCacheStore(tmp_path)

    result = store.write("hadith-info.json", {"sections": {"1": "Revelation"}})

    assert result.path == tmp_path / "hadith-info.json"
    assert result.size_bytes == len(result.path.read_bytes())
    assert result.size_mb == pytest.approx(result.size_bytes / 1024 / 1024)
    assert store.read("hadith-info.json") == {"sections": {"1": "Revelation"}}
    assert store.exists("hadith-info.json")
    assert not store.exists("missing.json")


def test_absolute_destinations_are_used_as_is(tmp_path: Path) -> None:
    store = JsonCacheStore(tmp_path / "root")
    store.ensure_directory()

    result = store.write(tmp_path / "root" / "file.json", [1])

    assert result.path == tmp_path / "root" / "file.json"
    assert json.loads(result.path.read_text(encoding="utf-8")) == [1]


def test_existing_files_are_overwritten(tmp_path: Path) -> None:
    store = JsonCacheStore(tmp_path)
    store.write("x.json", {"version": 1})
    store.write("x.json", {"version": 2})

    assert store.read("x.json") == {"version": 2}


def test_ensure_directory_creates_nested_subdir(tmp_path: Path) -> None:
    store = JsonCacheStore(tmp_path / "a" / "b")

    created = store.ensure_directory("hadithmv")

    assert created == tmp_path / "a" / "b" / "hadithmv"
    assert created.is_dir()


def test_list_files_is_sorted_and_relative(tmp_path: Path) -> None:
    store = JsonCacheStore(tmp_path)
    assert JsonCacheStore(tmp_path / "missing").list_files() == []

    store.ensure_directory("hadithmv")
    store.write("quran-info.json", {})
    store.write("hadithmv/metadata.json", {})
    store.write("dua-categories.json", {})
    (tmp_path / "notes.txt").write_text("ignored")

    assert store.list_files() == [
        Path("dua-categories.json"),
        Path("hadithmv/metadata.json"),
        Path("quran-info.json"),
    ]


def test_default_output_dir_is_relative_to_working_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.chdir(tmp_path)

    assert DEFAULT_OUTPUT_DIR == Path("data") / "islamic"
    assert default_output_dir() == tmp_path.resolve() / "data" / "islamic"
    assert JsonCacheStore().root == tmp_path.resolve() / "data" / "islamic"
