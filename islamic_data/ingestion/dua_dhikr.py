"""Dua & Dhikr categories from the fitrahive/dua-dhikr API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from islamic_data.ingestion.http_client import FetchError
from islamic_data.ingestion.models import CollectionDescriptor, DatasetSource
from islamic_data.ingestion.strategy import JsonFetcher
from islamic_data.utils.logger import get_logger

LOGGER = get_logger(__name__)

DUA_DHIKR_BASE_URL = "https://dua-dhikr.vercel.app"
DUA_DHIKR_HEADERS: Mapping[str, str] = {"Accept-Language": "en"}
DUA_COLLECTION_FILENAME = "duas-dhikr-complete.json"

DUA_CATEGORIES_SOURCE = DatasetSource(
    name="dua-dhikr",
    url_template=f"{DUA_DHIKR_BASE_URL}/{{slug}}",
    filename_template="dua-{slug}.json",
    collections=(CollectionDescriptor("Dua & Dhikr categories", "categories"),),
    headers=DUA_DHIKR_HEADERS,
    title="Dua & Dhikr API",
    homepage="https://github.com/fitrahive/dua-dhikr",
)


@dataclass(slots=True)
class DuaFetchResult:
    collection: list[dict[str, Any]] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def total_duas(self) -> int:
        return sum(len(entry["duas"]) for entry in self.collection)


def category_url(slug: str) -> str:
    return f"{DUA_DHIKR_BASE_URL}/categories/{slug}"


def fetch_dua_collection(fetcher: JsonFetcher, categories: Any) -> DuaFetchResult:
    """Fetch the duas of every category listed in a ``/categories`` payload.

    Entries that are not objects with a ``slug``, categories whose request
    fails, and categories whose response has no ``data`` are skipped and
    listed in ``failed``. Raises ``ValueError`` when ``categories`` has no ``data`` list.
    """

    entries = categories.get("data") if isinstance(categories, dict) else None
    if not isinstance(entries, list):
        raise ValueError("No categories found in response")

    result = DuaFetchResult()
    for category in entries:
        slug = category.get("slug") if isinstance(category, dict) else None
        if not isinstance(slug, str) or not slug:
            LOGGER.warning("Skipping category without a slug: %r", category)
            result.failed.append(str(category))
            continue
        name = category.get("name") or slug
        LOGGER.info("Fetching duas from category: %s", name)
        try:
            payload = fetcher.fetch_json(category_url(slug), headers=DUA_DHIKR_HEADERS)
        except FetchError as exc:
            LOGGER.error("Failed to fetch %s: %s", name, exc)
            result.failed.append(slug)
            continue
        duas = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(duas, list):
            LOGGER.warning("Category %s returned no duas", name)
            result.failed.append(slug)
            continue
        result.collection.append({"category": name, "slug": slug, "duas": duas})
        LOGGER.info("%s duas fetched for %s", len(duas), name)
    return result


__all__ = [
    "DUA_CATEGORIES_SOURCE",
    "DUA_COLLECTION_FILENAME",
    "DUA_DHIKR_BASE_URL",
    "DUA_DHIKR_HEADERS",
    "DuaFetchResult",
    "category_url",
    "fetch_dua_collection",
]
