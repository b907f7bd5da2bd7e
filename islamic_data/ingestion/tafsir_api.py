"""Tafsir Ibn Kathir (English) from the spa5k/tafsir_api dataset."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from islamic_data.ingestion.http_client import FetchError
from islamic_data.ingestion.models import CollectionDescriptor, DatasetSource
from islamic_data.ingestion.strategy import JsonFetcher
from islamic_data.utils.logger import get_logger

LOGGER = get_logger(__name__)

TAFSIR_BASE_URL = "https://cdn.jsdelivr.net/gh/spa5k/tafsir_api@main/tafsir"
# Upstream slug, typo included.
IBN_KATHIR_SLUG = "en-tafisr-ibn-kathir"
TAFSIR_FILENAME = "tafsir-ibn-kathir-english.json"
REQUEST_DELAY_SECONDS = 0.05

POPULAR_SURAHS: tuple[int, ...] = (1, 2, 18, 36, 55, 67, 112, 113, 114)

SURAH_VERSE_COUNTS: tuple[int, ...] = (
    7, 286, 200, 176, 120, 165, 206, 75, 129, 109, 123, 111, 43, 52, 99, 128, 111, 110, 98, 135,
    112, 78, 118, 64, 77, 227, 93, 88, 69, 60, 34, 30, 73, 54, 45, 83, 182, 88, 75, 85, 54, 53, 89,
    59, 37, 35, 38, 29, 18, 45, 60, 49, 62, 55, 78, 96, 29, 22, 24, 13, 14, 11, 11, 18, 12, 12,
    30, 52, 52, 44, 28, 28, 20, 56, 40, 31, 50, 40, 46, 42, 29, 19, 36, 25, 22, 17, 19, 26, 30,
    20, 15, 21, 11, 8, 8, 19, 5, 8, 8, 11, 11, 8, 3, 9, 5, 4, 7, 3, 6, 3, 5, 4, 5, 6,
)

TAFSIR_EDITIONS_SOURCE = DatasetSource(
    name="tafsir-editions",
    url_template=f"{TAFSIR_BASE_URL}/{{slug}}.json",
    filename_template="tafsir-{slug}.json",
    collections=(CollectionDescriptor("Tafsir editions", "editions"),),
    title="Tafsir API",
    homepage="https://github.com/spa5k/tafsir_api",
)

TAFSIR_METADATA: dict[str, str] = {
    "name": "Tafsir Ibn Kathir",
    "author": "Hafiz Ibn Kathir",
    "language": "English",
    "description": "Abridged English translation of Tafsir Ibn Kathir",
    "source": "spa5k/tafsir_api",
    "slug": IBN_KATHIR_SLUG,
    "note": "Contains tafsir for popular surahs. More can be added on demand.",
}


@dataclass(slots=True)
class TafsirFetchResult:
    """Aggregated tafsir document plus per-surah bookkeeping."""

    document: dict[str, Any]
    fetched_surahs: list[int] = field(default_factory=list)
    failed_surahs: list[int] = field(default_factory=list)

    @property
    def verses(self) -> int:
        return len(self.document["tafsirs"])


def verse_count(surah: int) -> int:
    """Return the number of verses in ``surah`` (1-based)."""

    if not 1 <= surah <= len(SURAH_VERSE_COUNTS):
        raise ValueError(f"Surah number must be between 1 and 114, got {surah}")
    return SURAH_VERSE_COUNTS[surah - 1]


def surah_url(surah: int, *, edition: str = IBN_KATHIR_SLUG) -> str:
    verse_count(surah)
    return f"{TAFSIR_BASE_URL}/{edition}/{surah}.json"


def extract_tafsirs(payload: Any) -> list[dict[str, Any]] | None:
    """Flatten a per-surah response into ``{chapter, verse, text}`` rows.

    Returns ``None`` when the payload has no ``ayahs`` list; verses with empty
    text are dropped.
    """

    if not isinstance(payload, dict) or not isinstance(payload.get("ayahs"), list):
        return None
    rows: list[dict[str, Any]] = []
    for ayah in payload["ayahs"]:
        text = ayah.get("text") if isinstance(ayah, dict) else None
        if isinstance(text, str) and text.strip():
            rows.append({"chapter": ayah.get("surah"), "verse": ayah.get("ayah"), "text": text})
    return rows


def fetch_tafsir(
    fetcher: JsonFetcher,
    surahs: Iterable[int] = POPULAR_SURAHS,
    *,
    edition: str = IBN_KATHIR_SLUG,
    delay_seconds: float = REQUEST_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> TafsirFetchResult:
    """Download tafsir for ``surahs`` one request at a time and aggregate it."""

    chapters = list(surahs)
    urls = {surah: surah_url(surah, edition=edition) for surah in chapters}
    result = TafsirFetchResult(document={"metadata": {**TAFSIR_METADATA, "slug": edition}, "tafsirs": []})
    for surah in chapters:
        LOGGER.info("Fetching tafsir for surah %s", surah)
        try:
            payload = fetcher.fetch_json(urls[surah])
        except FetchError as exc:
            LOGGER.error("Failed to fetch surah %s: %s", surah, exc)
            result.failed_surahs.append(surah)
            continue
        rows = extract_tafsirs(payload)
        if rows is None:
            LOGGER.warning("No tafsir found for surah %s", surah)
            result.failed_surahs.append(surah)
            continue
        result.document["tafsirs"].extend(rows)
        result.fetched_surahs.append(surah)
        LOGGER.info("Completed surah %s (%s of %s verses)", surah, len(rows), verse_count(surah))
        if delay_seconds:
            sleep(delay_seconds)
    return result


__all__ = [
    "IBN_KATHIR_SLUG",
    "POPULAR_SURAHS",
    "SURAH_VERSE_COUNTS",
    "TAFSIR_BASE_URL",
    "TAFSIR_EDITIONS_SOURCE",
    "TAFSIR_FILENAME",
    "TafsirFetchResult",
    "extract_tafsirs",
    "fetch_tafsir",
    "surah_url",
    "verse_count",
]
