"""Catalog of Quran editions and translations from fawazahmed0/quran-api."""

from __future__ import annotations

from islamic_data.ingestion.models import CollectionDescriptor, DatasetSource, Edition

QURAN_API_BASE_URL = "https://cdn.jsdelivr.net/gh/fawazahmed0/quran-api@1"
QURAN_API_RAW_URL = "https://raw.githubusercontent.com/fawazahmed0/quran-api/1"

# 114 surahs, 6236 verses.
QURAN_VERSE_TOTAL = 6236

QURAN_TRANSLATIONS: tuple[CollectionDescriptor, ...] = (
    CollectionDescriptor(
        "Clear Quran by Dr. Mustafa Khattab",
        "clear",
        (Edition("eng-mustafakhattaba", "english"),),
        expected_items=QURAN_VERSE_TOTAL,
    ),
    CollectionDescriptor(
        "Sahih International",
        "sahih",
        (Edition("eng-ummmuhammad", "english"),),
        expected_items=QURAN_VERSE_TOTAL,
    ),
    CollectionDescriptor(
        "Abdel Haleem",
        "haleem",
        (Edition("eng-abdelhaleem", "english"),),
        expected_items=QURAN_VERSE_TOTAL,
    ),
)

QURAN_TRANSLATIONS_SOURCE = DatasetSource(
    name="quran-translations",
    url_template=f"{QURAN_API_BASE_URL}/editions/{{edition}}.json",
    filename_template="quran-translation-{slug}.json",
    collections=QURAN_TRANSLATIONS,
    title="Quran API",
    description="English translations of the Quran",
    homepage="https://github.com/fawazahmed0/quran-api",
)

QURAN_REFERENCE_SOURCE = DatasetSource(
    name="quran-reference",
    url_template=f"{QURAN_API_BASE_URL}/{{slug}}.json",
    filename_template="quran-{slug}.json",
    collections=(
        CollectionDescriptor("Quran editions", "editions"),
        CollectionDescriptor("Quran info", "info"),
        CollectionDescriptor(
            "Arabic Quran (Indo-Pak script)",
            "arabic",
            (Edition("ara-quranindopak", "arabic"),),
            expected_items=QURAN_VERSE_TOTAL,
            url_template=f"{QURAN_API_RAW_URL}/editions/{{edition}}.json",
        ),
        CollectionDescriptor(
            "Sahih International",
            "english",
            (Edition("eng-sahih", "english"),),
            expected_items=QURAN_VERSE_TOTAL,
            url_template=f"{QURAN_API_RAW_URL}/editions/{{edition}}.json",
        ),
    ),
    title="Quran API",
    homepage="https://github.com/fawazahmed0/quran-api",
)

__all__ = [
    "QURAN_API_BASE_URL",
    "QURAN_API_RAW_URL",
    "QURAN_REFERENCE_SOURCE",
    "QURAN_TRANSLATIONS",
    "QURAN_TRANSLATIONS_SOURCE",
    "QURAN_VERSE_TOTAL",
]
