from __future__ import annotations

import importlib
from pathlib import Path

import pytest

import islamic_data
from conftest import FakeFetcher
from islamic_data import IngestionSettings, IslamicData
from islamic_data.ingestion.hadithmv import HADITHMV_BASE_URL, HADITHMV_SOURCE


def test_version_is_exposed() -> None:
    assert isinstance(islamic_data.__version__, str)
    assert IslamicData.__version__ == islamic_data.__version__


def test_output_dir_argument_wins_over_settings(tmp_path: Path) -> None:
    data = IslamicData(tmp_path / "cache", settings=IngestionSettings(output_dir=tmp_path / "other"))

    assert data.output_dir == (tmp_path / "cache").resolve()
    assert data.settings.output_dir == tmp_path / "cache"


def test_facade_reads_environment_when_no_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("ISLAMIC_DATA_DIR", str(tmp_path / "env"))
    monkeypatch.setenv("ISLAMIC_DATA_CONCURRENCY", "3")

    data = IslamicData()

    assert data.output_dir == (tmp_path / "env").resolve()
    assert data.settings.max_concurrency == 3


def test_seed_load_available_and_manifest(tmp_path: Path) -> None:
    fetcher = FakeFetcher({f"{HADITHMV_BASE_URL}hisnulMuslim.json": [["دعاء"]]})
    data = IslamicData(tmp_path, client=fetcher)

    results = data.seed(["hadithmv"])

    assert results["hadithmv"].succeeded == 1
    assert data.load("hadithmv/hisnulMuslim.json") == [["دعاء"]]
    assert "hadithmv/metadata.json" in data.available()
    assert data.manifest()["books"][0]["id"] == "hisnulMuslim"
    assert data.manifest() == data.load(f"{HADITHMV_SOURCE.subdir}/{HADITHMV_SOURCE.manifest_filename}")


def test_load_missing_file_raises(tmp_path: Path) -> None:
    data = IslamicData(tmp_path)

    assert data.available() == []
    with pytest.raises(FileNotFoundError):
        data.load("quran-info.json")


def test_seed_dry_run_creates_nothing(tmp_path: Path) -> None:
    data = IslamicData(tmp_path / "cache", client=FakeFetcher())

    results = data.seed(dry_run=True)

    assert set(results) == {"quran", "hadith", "tafsir", "duas", "hadithmv"}
    assert not (tmp_path / "cache").exists()


def test_package_seed_wrappers_delegate(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[str] = []

    def _fake(name: str):
        def _inner(*_args, **_kwargs):
            calls.append(name)
            return name

        return _inner

    module = importlib.import_module("islamic_data.seeds.populate_tafsir")
    monkeypatch.setattr(module, "seed_tafsir", _fake("tafsir"))
    duas = importlib.import_module("islamic_data.seeds.populate_duas")
    monkeypatch.setattr(duas, "seed_dua_dhikr", _fake("duas"))

    assert islamic_data.seed_tafsir() == "tafsir"
    assert islamic_data.seed_dua_dhikr() == "duas"
    assert calls == ["tafsir", "duas"]
