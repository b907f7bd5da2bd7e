"""Download Quran translations (and optionally edition metadata) into the local cache."""

from __future__ import annotations

import argparse
from functools import partial
from typing import Iterable, Sequence

from islamic_data.config import IngestionSettings
from islamic_data.ingestion.ingestor import ingest_source
from islamic_data.ingestion.models import IngestionSummary
from islamic_data.ingestion.quran_api import QURAN_REFERENCE_SOURCE, QURAN_TRANSLATIONS_SOURCE
from islamic_data.ingestion.strategy import JsonFetcher
from islamic_data.utils.cli import build_parser, run_cli, settings_from_args

__all__ = ["seed_quran_translations", "seed_quran_reference", "parse_args", "main"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = build_parser(__doc__, slugs=QURAN_TRANSLATIONS_SOURCE.slugs)
    parser.add_argument(
        "--with-reference",
        dest="with_reference",
        action="store_true",
        default=False,
        help="Also download editions, info, Arabic text and the Sahih translation",
    )
    return parser.parse_args(argv)


def seed_quran_translations(
    *,
    settings: IngestionSettings | None = None,
    fetcher: JsonFetcher | None = None,
    only: Iterable[str] | None = None,
    dry_run: bool = False,
) -> IngestionSummary:
    source = QURAN_TRANSLATIONS_SOURCE.select(only)
    return ingest_source(source, settings=settings, fetcher=fetcher, dry_run=dry_run)


def seed_quran_reference(
    *,
    settings: IngestionSettings | None = None,
    fetcher: JsonFetcher | None = None,
    dry_run: bool = False,
) -> IngestionSummary:
    """Download the edition index, surah info, Arabic text and Sahih translation."""

    return ingest_source(QURAN_REFERENCE_SOURCE, settings=settings, fetcher=fetcher, dry_run=dry_run)


def _run(args: argparse.Namespace) -> None:
    settings = settings_from_args(args)
    if args.with_reference:
        seed_quran_reference(settings=settings, dry_run=args.dry_run)
    seed_quran_translations(settings=settings, only=args.only, dry_run=args.dry_run)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    run_cli(partial(_run, args), verbose=args.verbose)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
