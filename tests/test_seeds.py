"""Tests covering the per-family seeding helpers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import islamic_data.seeds as seeds
from conftest import FakeFetcher
from islamic_data.config import IngestionSettings
from islamic_data.ingestion.dua_dhikr import DUA_DHIKR_BASE_URL, category_url
from islamic_data.ingestion.hadith_api import HADITH_API_BASE_URL
from islamic_data.ingestion.hadithmv import HADITHMV_BASE_URL
from islamic_data.ingestion.quran_api import QURAN_API_BASE_URL, QURAN_API_RAW_URL
from islamic_data.ingestion.tafsir_api import TAFSIR_BASE_URL, surah_url
from islamic_data.seeds.populate_all import FAMILIES, seed_islamic_data
from islamic_data.seeds.populate_duas import seed_dua_dhikr
from islamic_data.seeds.populate_hadith import seed_hadith_collections, seed_hadith_reference
from islamic_data.seeds.populate_hadithmv import seed_hadithmv
from islamic_data.seeds.populate_quran import seed_quran_reference, seed_quran_translations
from islamic_data.seeds.populate_tafsir import seed_tafsir, seed_tafsir_editions


def _read(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def settings(tmp_path: Path) -> IngestionSettings:
    return IngestionSettings(output_dir=tmp_path / "islamic")


def test_seed_hadith_collections_only_selected(settings: IngestionSettings) -> None:
    fetcher = FakeFetcher({f"{HADITH_API_BASE_URL}/editions/eng-nawawi40.json": {"hadiths": [{"n": 1}]}})

    summary = seed_hadith_collections(settings=settings, fetcher=fetcher, only=["nawawi40"])

    assert fetcher.urls == [f"{HADITH_API_BASE_URL}/editions/eng-nawawi40.json"]
    assert summary.succeeded == 1
    assert _read(settings.output_dir / "hadith-nawawi40-english.json") == {"hadiths": [{"n": 1}]}


def test_seed_hadith_reference(settings: IngestionSettings) -> None:
    fetcher = FakeFetcher(
        {
            f"{HADITH_API_BASE_URL}/editions.json": {"bukhari": {}},
            f"{HADITH_API_BASE_URL}/info.json": {"bukhari": {"metadata": {}}},
        }
    )

    summary = seed_hadith_reference(settings=settings, fetcher=fetcher)

    assert summary.succeeded == 2
    assert (settings.output_dir / "hadith-editions.json").exists()
    assert (settings.output_dir / "hadith-info.json").exists()


def test_seed_quran_translations_and_reference(settings: IngestionSettings) -> None:
    fetcher = FakeFetcher(
        {
            f"{QURAN_API_BASE_URL}/editions/eng-abdelhaleem.json": {"quran": [{"text": "Praise"}]},
            f"{QURAN_API_RAW_URL}/editions/ara-quranindopak.json": {"quran": [{"text": "الحمد"}]},
        }
    )

    translations = seed_quran_translations(settings=settings, fetcher=fetcher, only=["haleem"])
    reference = seed_quran_reference(settings=settings, fetcher=fetcher)

    assert translations.succeeded == 1
    assert _read(settings.output_dir / "quran-translation-haleem.json") == {"quran": [{"text": "Praise"}]}
    assert [outcome.item.collection.slug for outcome in reference.successes] == ["arabic"]
    assert reference.failed == 3


def test_seed_hadithmv_writes_books_and_metadata(settings: IngestionSettings) -> None:
    fetcher = FakeFetcher({f"{HADITHMV_BASE_URL}arbaoonNawawi.json": [["حديث", "ހަދީޘް"]]})

    summary = seed_hadithmv(settings=settings, fetcher=fetcher, only=["arbaoonNawawi"])

    assert summary.succeeded == 1
    assert _read(settings.output_dir / "hadithmv" / "arbaoonNawawi.json") == [["حديث", "ހަދީޘް"]]
    metadata = _read(settings.output_dir / "hadithmv" / "metadata.json")
    assert metadata["totalBooks"] == 1
    assert metadata["books"][0]["filename"] == "arbaoonNawawi.json"
    assert metadata["books"][0]["arabicName"] == "الأربعون النووية"
    assert metadata["books"][0]["totalHadiths"] == 1


def test_seed_hadithmv_without_manifest(settings: IngestionSettings) -> None:
    seed_hadithmv(settings=settings, fetcher=FakeFetcher(), only=["hisnulMuslim"], write_manifest=False)

    assert not (settings.output_dir / "hadithmv" / "metadata.json").exists()


def test_seed_tafsir_writes_aggregate(settings: IngestionSettings) -> None:
    fetcher = FakeFetcher(
        {
            surah_url(112): {"ayahs": [{"surah": 112, "ayah": 1, "text": "Say, He is Allah"}]},
            f"{TAFSIR_BASE_URL}/editions.json": [{"slug": "en-tafisr-ibn-kathir"}],
        }
    )

    editions = seed_tafsir_editions(settings=settings, fetcher=fetcher)
    result = seed_tafsir(settings=settings, fetcher=fetcher, surahs=[112, 113], delay_seconds=0)

    assert editions.succeeded == 1
    assert result.path == settings.output_dir.resolve() / "tafsir-ibn-kathir-english.json"
    document = _read(result.path)
    assert document["tafsirs"] == [{"chapter": 112, "verse": 1, "text": "Say, He is Allah"}]
    assert result.fetch is not None
    assert result.fetch.failed_surahs == [113]


def test_seed_dua_dhikr_aggregates_categories(settings: IngestionSettings) -> None:
    categories = {"data": [{"name": "Morning Dhikr", "slug": "morning-dhikr"}]}
    fetcher = FakeFetcher(
        {
            f"{DUA_DHIKR_BASE_URL}/categories": categories,
            category_url("morning-dhikr"): {"data": [{"title": "Sayyidul Istighfar"}]},
        }
    )

    result = seed_dua_dhikr(settings=settings, fetcher=fetcher)

    assert _read(settings.output_dir / "dua-categories.json") == categories
    assert _read(settings.output_dir / "duas-dhikr-complete.json") == [
        {"category": "Morning Dhikr", "slug": "morning-dhikr", "duas": [{"title": "Sayyidul Istighfar"}]}
    ]
    assert result.fetch is not None and result.fetch.total_duas == 1
    assert all(headers == {"Accept-Language": "en"} for _, headers in fetcher.calls)


def test_seed_dua_dhikr_skips_aggregate_without_categories(settings: IngestionSettings) -> None:
    fetcher = FakeFetcher({f"{DUA_DHIKR_BASE_URL}/categories": {"message": "maintenance"}})

    result = seed_dua_dhikr(settings=settings, fetcher=fetcher)

    assert result.path is None
    assert (settings.output_dir / "dua-categories.json").exists()
    assert not (settings.output_dir / "duas-dhikr-complete.json").exists()


def test_seed_dua_dhikr_skips_aggregate_when_categories_fail(settings: IngestionSettings) -> None:
    result = seed_dua_dhikr(settings=settings, fetcher=FakeFetcher())

    assert result.categories.failed == 1
    assert result.path is None


def test_seed_islamic_data_runs_families_in_canonical_order(settings: IngestionSettings) -> None:
    fetcher = FakeFetcher()

    results = seed_islamic_data(settings=settings, fetcher=fetcher, families=["hadithmv", "quran", "duas"])

    assert list(results) == ["quran", "duas", "hadithmv"]
    assert set(results["quran"]) == {"reference", "translations"}
    assert fetcher.urls[0] == f"{QURAN_API_BASE_URL}/editions.json"
    assert fetcher.urls[-1].startswith(HADITHMV_BASE_URL)
    assert f"{DUA_DHIKR_BASE_URL}/categories" in fetcher.urls


def test_seed_islamic_data_rejects_unknown_family(settings: IngestionSettings) -> None:
    with pytest.raises(ValueError, match="Unknown dataset families"):
        seed_islamic_data(settings=settings, fetcher=FakeFetcher(), families=["quran", "fiqh"])


def test_seed_islamic_data_continues_past_malformed_dua_categories(settings: IngestionSettings) -> None:
    fetcher = FakeFetcher(
        {
            f"{DUA_DHIKR_BASE_URL}/categories": {"data": ["morning"]},
            f"{HADITHMV_BASE_URL}hisnulMuslim.json": [["دعاء"]],
        }
    )

    results = seed_islamic_data(settings=settings, fetcher=fetcher, families=["duas", "hadithmv"])

    assert results["duas"].fetch is not None
    assert results["duas"].fetch.failed == ["morning"]
    assert results["hadithmv"].succeeded == 1
    assert f"{DUA_DHIKR_BASE_URL}/categories/None" not in fetcher.urls


def test_seed_islamic_data_dry_run_touches_nothing(settings: IngestionSettings) -> None:
    fetcher = FakeFetcher()

    results = seed_islamic_data(settings=settings, fetcher=fetcher, dry_run=True)

    assert list(results) == list(FAMILIES)
    assert results["hadithmv"].total == 0
    assert results["tafsir"]["surahs"].path is None
    assert fetcher.calls == []
    assert not settings.output_dir.exists()


def test_seeds_module_lazy_getattr_exports() -> None:
    assert seeds.seed_islamic_data is seed_islamic_data
    assert callable(getattr(seeds, "seed_dua_dhikr"))
    assert callable(getattr(seeds, "seed_tafsir_editions"))


def test_seeds_module_invalid_attribute() -> None:
    with pytest.raises(AttributeError):
        getattr(seeds, "unknown_seed")
