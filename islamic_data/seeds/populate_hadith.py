"""Download the fawazahmed0/hadith-api collections into the local cache."""

from __future__ import annotations

import argparse
from functools import partial
from typing import Iterable, Sequence

from islamic_data.config import IngestionSettings
from islamic_data.ingestion.hadith_api import HADITH_COLLECTIONS_SOURCE, HADITH_REFERENCE_SOURCE
from islamic_data.ingestion.ingestor import ingest_source
from islamic_data.ingestion.models import IngestionSummary
from islamic_data.ingestion.strategy import JsonFetcher
from islamic_data.utils.cli import build_parser, run_cli, settings_from_args

__all__ = ["seed_hadith_collections", "seed_hadith_reference", "parse_args", "main"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = build_parser(__doc__, slugs=HADITH_COLLECTIONS_SOURCE.slugs)
    parser.add_argument(
        "--with-reference",
        dest="with_reference",
        action="store_true",
        default=False,
        help="Also download the edition index and book info files",
    )
    return parser.parse_args(argv)


def seed_hadith_collections(
    *,
    settings: IngestionSettings | None = None,
    fetcher: JsonFetcher | None = None,
    only: Iterable[str] | None = None,
    dry_run: bool = False,
) -> IngestionSummary:
    """Download the English edition of every configured hadith collection."""

    source = HADITH_COLLECTIONS_SOURCE.select(only)
    return ingest_source(source, settings=settings, fetcher=fetcher, dry_run=dry_run)


def seed_hadith_reference(
    *,
    settings: IngestionSettings | None = None,
    fetcher: JsonFetcher | None = None,
    dry_run: bool = False,
) -> IngestionSummary:
    """Download ``hadith-editions.json`` and ``hadith-info.json``."""

    return ingest_source(HADITH_REFERENCE_SOURCE, settings=settings, fetcher=fetcher, dry_run=dry_run)


def _run(args: argparse.Namespace) -> None:
    settings = settings_from_args(args)
    if args.with_reference:
        seed_hadith_reference(settings=settings, dry_run=args.dry_run)
    seed_hadith_collections(settings=settings, only=args.only, dry_run=args.dry_run)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    run_cli(partial(_run, args), verbose=args.verbose)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
