"""Download Dua & Dhikr categories and every category's duas."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Sequence

from islamic_data.config import IngestionSettings
from islamic_data.ingestion.dua_dhikr import (
    DUA_CATEGORIES_SOURCE,
    DUA_COLLECTION_FILENAME,
    DuaFetchResult,
    fetch_dua_collection,
)
from islamic_data.ingestion.ingestor import fetcher_scope, ingest_source
from islamic_data.ingestion.models import IngestionSummary
from islamic_data.ingestion.strategy import JsonFetcher
from islamic_data.store.json_store import JsonCacheStore
from islamic_data.utils.cli import build_parser, run_cli, settings_from_args
from islamic_data.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["DuaSeedResult", "seed_dua_dhikr", "parse_args", "main"]


@dataclass(slots=True)
class DuaSeedResult:
    categories: IngestionSummary
    path: Path | None = None
    fetch: DuaFetchResult | None = None


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser(__doc__).parse_args(argv)


def seed_dua_dhikr(
    *,
    settings: IngestionSettings | None = None,
    fetcher: JsonFetcher | None = None,
    dry_run: bool = False,
) -> DuaSeedResult:
    """Save ``dua-categories.json`` then aggregate all categories into ``duas-dhikr-complete.json``.

    The aggregate is skipped when the category list could not be downloaded or
    does not contain a ``data`` list.
    """

    settings = settings or IngestionSettings()
    if dry_run:
        LOGGER.info("Dry-run enabled; skipping Dua & Dhikr ingestion")
        empty = IngestionSummary(source=DUA_CATEGORIES_SOURCE.name, output_dir=settings.output_dir)
        return DuaSeedResult(categories=empty)

    with fetcher_scope(settings, fetcher) as client:
        summary = ingest_source(DUA_CATEGORIES_SOURCE, settings=settings, fetcher=client)
        if not summary.successes:
            LOGGER.warning("Dua categories unavailable; skipping %s", DUA_COLLECTION_FILENAME)
            return DuaSeedResult(categories=summary)
        store = JsonCacheStore(settings.output_dir)
        categories = store.read(summary.successes[0].path)
        try:
            result = fetch_dua_collection(client, categories)
        except ValueError as exc:
            LOGGER.warning("%s; skipping %s", exc, DUA_COLLECTION_FILENAME)
            return DuaSeedResult(categories=summary)

    written = store.write(DUA_COLLECTION_FILENAME, result.collection)
    LOGGER.info(
        "Dua & Dhikr: %s duas in %s categories, %s failed, saved to %s",
        result.total_duas,
        len(result.collection),
        len(result.failed),
        written.path,
    )
    return DuaSeedResult(categories=summary, path=written.path, fetch=result)


def _run(args: argparse.Namespace) -> None:
    seed_dua_dhikr(settings=settings_from_args(args), dry_run=args.dry_run)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    run_cli(partial(_run, args), verbose=args.verbose)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
