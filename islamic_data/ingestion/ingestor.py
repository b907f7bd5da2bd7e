"""Fetch every item of a dataset source and materialise it as local JSON."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

from islamic_data.config import IngestionSettings
from islamic_data.ingestion.http_client import FetchError
from islamic_data.ingestion.manifest import write_manifest
from islamic_data.ingestion.models import (
    DatasetSource,
    IngestionItem,
    IngestionSummary,
    ItemOutcome,
    count_items,
)
from islamic_data.ingestion.strategy import JsonFetcher
from islamic_data.store.json_store import JsonCacheStore
from islamic_data.utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class IngestorConfig:
    """Explicit inputs of an ingestion run."""

    output_dir: Path
    source: DatasetSource
    fetcher: JsonFetcher
    max_concurrency: int = 1
    write_manifest: bool | None = None

    def __post_init__(self) -> None:
        self.output_dir = Path(self.output_dir)
        if self.max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")

    @property
    def manifest_enabled(self) -> bool:
        if self.write_manifest is None:
            return self.source.write_manifest
        return self.write_manifest


class DatasetIngestor:
    """Download a :class:`DatasetSource` into a :class:`JsonCacheStore`.

    Items are processed in declaration order. With ``max_concurrency == 1``
    exactly one request is in flight at a time, which keeps the load on the
    upstream APIs low. A fetch failure is recorded against its item and the
    run moves on; a failure to write a file aborts the run.
    """

    def __init__(self, config: IngestorConfig) -> None:
        self.config = config
        self.store = JsonCacheStore(config.output_dir)

    def plan(self) -> list[IngestionItem]:
        return self.config.source.plan(self.store.root)

    def run(self) -> IngestionSummary:
        source = self.config.source
        items = self.plan()
        summary = IngestionSummary(
            source=source.name,
            output_dir=self.store.root,
            started_at=datetime.now(timezone.utc),
            expected_items=sum(c.expected_items or 0 for c in source.collections),
        )
        self.store.ensure_directory(source.subdir)
        LOGGER.info("Downloading %s %s item(s) into %s", len(items), source.name, self.store.root)

        if self.config.max_concurrency == 1 or len(items) <= 1:
            for item in items:
                summary.outcomes.append(self.ingest_item(item))
        else:
            workers = min(self.config.max_concurrency, len(items))
            with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="ingest") as pool:
                # ``map`` yields in submission order and re-raises worker errors.
                summary.outcomes.extend(pool.map(self.ingest_item, items))

        summary.finished_at = datetime.now(timezone.utc)
        self._log_summary(summary)
        if self.config.manifest_enabled:
            write_manifest(self.store, source, summary)
        return summary

    def ingest_item(self, item: IngestionItem) -> ItemOutcome:
        """Fetch, validate and write one item."""

        collection = item.collection
        if collection.native_name:
            LOGGER.info(
                "Downloading %s (%s) [%s]", collection.name, collection.native_name, item.edition.label
            )
        else:
            LOGGER.info("Downloading %s [%s]", collection.name, item.edition.label)
        try:
            payload = self.config.fetcher.fetch_json(item.url, headers=self.config.source.headers)
        except FetchError as exc:
            LOGGER.error("Failed to download %s from %s: %s", item.key, item.url, exc)
            return ItemOutcome(item=item, succeeded=False, error=str(exc), error_kind=exc.kind)

        result = self.store.write(item.destination, payload)
        item_count = count_items(payload)
        LOGGER.info(
            "Saved %s (%.2f MB, %s records)",
            result.path.name,
            result.size_mb,
            "unknown" if item_count is None else item_count,
        )
        return ItemOutcome(
            item=item,
            succeeded=True,
            path=result.path,
            size_bytes=result.size_bytes,
            item_count=item_count,
        )

    def _log_summary(self, summary: IngestionSummary) -> None:
        LOGGER.info("%s: %s succeeded, %s failed", summary.source, summary.succeeded, summary.failed)
        if summary.expected_items:
            LOGGER.info("%s: %s records expected in total", summary.source, f"{summary.expected_items:,}")
        LOGGER.info(
            "%s: %s records fetched, saved to %s",
            summary.source,
            f"{summary.fetched_items:,}",
            self.store.root,
        )


@contextmanager
def fetcher_scope(settings: IngestionSettings, fetcher: JsonFetcher | None = None) -> Iterator[JsonFetcher]:
    """Yield ``fetcher``, or a client built from ``settings`` that is closed on exit."""

    if fetcher is not None:
        yield fetcher
        return
    client = settings.build_client()
    try:
        yield client
    finally:
        client.close()


def ingest_source(
    source: DatasetSource,
    *,
    settings: IngestionSettings | None = None,
    fetcher: JsonFetcher | None = None,
    write_manifest: bool | None = None,
    dry_run: bool = False,
) -> IngestionSummary:
    """Run a :class:`DatasetIngestor` for ``source`` with ``settings``.

    A fetcher built from ``settings`` is closed afterwards; an injected one is
    left to the caller.
    """

    settings = settings or IngestionSettings()
    if dry_run:
        LOGGER.info("Dry-run enabled; skipping %s ingestion", source.name)
        return IngestionSummary(source=source.name, output_dir=settings.output_dir)

    with fetcher_scope(settings, fetcher) as client:
        ingestor = DatasetIngestor(
            IngestorConfig(
                output_dir=settings.output_dir,
                source=source,
                fetcher=client,
                max_concurrency=settings.max_concurrency,
                write_manifest=write_manifest,
            )
        )
        return ingestor.run()


__all__ = ["DatasetIngestor", "IngestorConfig", "fetcher_scope", "ingest_source"]
