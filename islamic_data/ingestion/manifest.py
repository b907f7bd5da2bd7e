"""Metadata manifest summarising an ingestion run."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from islamic_data.ingestion.models import DatasetSource, IngestionSummary
from islamic_data.store.json_store import JsonCacheStore
from islamic_data.utils.logger import get_logger

LOGGER = get_logger(__name__)


def _isoformat(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_manifest(source: DatasetSource, summary: IngestionSummary) -> dict[str, Any]:
    """Describe which books were materialised, with their record counts.

    The keys are the ones the web application reads from
    ``hadithmv/metadata.json``. Only successful items are listed under
    ``books``; failures are kept separately so a consumer can tell a stale
    file from a fresh one.
    """

    output_dir = source.output_dir(summary.output_dir)
    books = []
    for outcome in summary.successes:
        item = outcome.item
        books.append(
            {
                "id": item.collection.slug,
                "name": item.collection.name,
                "arabicName": item.collection.native_name,
                "filename": item.destination.relative_to(output_dir).as_posix(),
                "totalHadiths": outcome.item_count or 0,
            }
        )
    failed = [
        {"id": outcome.item.collection.slug, "edition": outcome.item.edition.label, "error": outcome.error}
        for outcome in summary.failures
    ]
    finished = summary.finished_at or datetime.now(timezone.utc)
    return {
        "source": source.title or source.name,
        "sourceUrl": source.homepage,
        "githubUrl": source.repository,
        "description": source.description,
        "totalBooks": len(books),
        "books": books,
        "failed": failed,
        "lastUpdated": _isoformat(finished),
    }


def write_manifest(store: JsonCacheStore, source: DatasetSource, summary: IngestionSummary) -> Path:
    manifest = build_manifest(source, summary)
    relative = Path(source.subdir, source.manifest_filename) if source.subdir else Path(source.manifest_filename)
    result = store.write(relative, manifest)
    LOGGER.info("Wrote manifest for %s books to %s", manifest["totalBooks"], result.path)
    return result.path


__all__ = ["build_manifest", "write_manifest"]
