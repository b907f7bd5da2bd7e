"""Catalog of the fawazahmed0/hadith-api collections served through jsDelivr."""

from __future__ import annotations

from islamic_data.ingestion.models import CollectionDescriptor, DatasetSource

HADITH_API_BASE_URL = "https://cdn.jsdelivr.net/gh/fawazahmed0/hadith-api@1"

HADITH_COLLECTIONS: tuple[CollectionDescriptor, ...] = (
    CollectionDescriptor("Sahih Bukhari", "bukhari", native_name="صحيح البخاري", expected_items=7008),
    CollectionDescriptor("Sahih Muslim", "muslim", native_name="صحيح مسلم", expected_items=7190),
    CollectionDescriptor("Sunan Abu Dawud", "abudawud", native_name="سنن أبي داود", expected_items=5274),
    CollectionDescriptor("Jami' at-Tirmidhi", "tirmidhi", native_name="جامع الترمذي", expected_items=3956),
    CollectionDescriptor("Sunan an-Nasa'i", "nasai", native_name="سنن النسائي", expected_items=5758),
    CollectionDescriptor("Sunan Ibn Majah", "ibnmajah", native_name="سنن ابن ماجه", expected_items=4341),
    CollectionDescriptor("Muwatta Malik", "malik", native_name="موطأ مالك", expected_items=1594),
    CollectionDescriptor("Musnad Ahmad", "ahmad", native_name="مسند أحمد", expected_items=26363),
    CollectionDescriptor("Sunan ad-Darimi", "darimi", native_name="سنن الدارمي", expected_items=3367),
    CollectionDescriptor("An-Nawawi's 40 Hadith", "nawawi40", native_name="الأربعون النووية", expected_items=42),
    CollectionDescriptor("Riyad as-Salihin", "riyadussalihin", native_name="رياض الصالحين", expected_items=1896),
    CollectionDescriptor("Al-Adab Al-Mufrad", "adab", native_name="الأدب المفرد", expected_items=1322),
    CollectionDescriptor(
        "Ash-Shama'il Al-Muhammadiyah", "shamail", native_name="الشمائل المحمدية", expected_items=397
    ),
    CollectionDescriptor("Mishkat al-Masabih", "mishkat", native_name="مشكاة المصابيح", expected_items=5945),
    CollectionDescriptor("Bulugh al-Maram", "bulugh", native_name="بلوغ المرام", expected_items=1358),
    CollectionDescriptor("Hisn al-Muslim", "hisnulmuslim", native_name="حصن المسلم", expected_items=133),
)

HADITH_COLLECTIONS_SOURCE = DatasetSource(
    name="hadith-api",
    url_template=f"{HADITH_API_BASE_URL}/editions/{{edition}}-{{slug}}.json",
    filename_template="hadith-{slug}-{label}.json",
    collections=HADITH_COLLECTIONS,
    title="Hadith API",
    description="Hadith collections with English translations",
    homepage="https://github.com/fawazahmed0/hadith-api",
)

# Edition index and per-book section metadata.
HADITH_REFERENCE_SOURCE = DatasetSource(
    name="hadith-reference",
    url_template=f"{HADITH_API_BASE_URL}/{{slug}}.json",
    filename_template="hadith-{slug}.json",
    collections=(
        CollectionDescriptor("Hadith editions", "editions"),
        CollectionDescriptor("Hadith info", "info"),
    ),
    title="Hadith API",
    homepage="https://github.com/fawazahmed0/hadith-api",
)

__all__ = [
    "HADITH_API_BASE_URL",
    "HADITH_COLLECTIONS",
    "HADITH_COLLECTIONS_SOURCE",
    "HADITH_REFERENCE_SOURCE",
]
