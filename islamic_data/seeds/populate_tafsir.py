"""Download Tafsir Ibn Kathir (English) for selected surahs into one JSON file."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Iterable, Sequence

from islamic_data.config import IngestionSettings
from islamic_data.ingestion.ingestor import fetcher_scope, ingest_source
from islamic_data.ingestion.models import IngestionSummary
from islamic_data.ingestion.strategy import JsonFetcher
from islamic_data.ingestion.tafsir_api import (
    POPULAR_SURAHS,
    REQUEST_DELAY_SECONDS,
    SURAH_VERSE_COUNTS,
    TAFSIR_EDITIONS_SOURCE,
    TAFSIR_FILENAME,
    TafsirFetchResult,
    fetch_tafsir,
)
from islamic_data.store.json_store import JsonCacheStore
from islamic_data.utils.cli import build_parser, run_cli, settings_from_args
from islamic_data.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["TafsirSeedResult", "seed_tafsir", "seed_tafsir_editions", "parse_args", "main"]


@dataclass(slots=True)
class TafsirSeedResult:
    path: Path | None
    fetch: TafsirFetchResult | None = None


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = build_parser(__doc__)
    selection = parser.add_mutually_exclusive_group()
    selection.add_argument(
        "--surahs",
        nargs="+",
        type=int,
        metavar="N",
        help=f"Surah numbers to fetch (default: {' '.join(map(str, POPULAR_SURAHS))})",
    )
    selection.add_argument(
        "--all",
        dest="all_surahs",
        action="store_true",
        default=False,
        help="Fetch all 114 surahs",
    )
    parser.add_argument(
        "--with-editions",
        dest="with_editions",
        action="store_true",
        default=False,
        help="Also download tafsir-editions.json",
    )
    return parser.parse_args(argv)


def seed_tafsir_editions(
    *,
    settings: IngestionSettings | None = None,
    fetcher: JsonFetcher | None = None,
    dry_run: bool = False,
) -> IngestionSummary:
    return ingest_source(TAFSIR_EDITIONS_SOURCE, settings=settings, fetcher=fetcher, dry_run=dry_run)


def seed_tafsir(
    *,
    settings: IngestionSettings | None = None,
    fetcher: JsonFetcher | None = None,
    surahs: Iterable[int] = POPULAR_SURAHS,
    delay_seconds: float = REQUEST_DELAY_SECONDS,
    dry_run: bool = False,
) -> TafsirSeedResult:
    """Fetch tafsir surah by surah and write the aggregate to ``tafsir-ibn-kathir-english.json``.

    Surahs that fail are logged and left out; the file is written even when
    every surah failed so the application always finds a well-formed document.
    """

    settings = settings or IngestionSettings()
    chapters = list(surahs)
    if dry_run:
        LOGGER.info("Dry-run enabled; skipping tafsir ingestion for surahs %s", chapters)
        return TafsirSeedResult(path=None)

    with fetcher_scope(settings, fetcher) as client:
        result = fetch_tafsir(client, chapters, delay_seconds=delay_seconds)
    store = JsonCacheStore(settings.output_dir)
    store.ensure_directory()
    written = store.write(TAFSIR_FILENAME, result.document)
    LOGGER.info(
        "Tafsir: %s verses from %s surah(s), %s surah(s) failed, saved to %s",
        result.verses,
        len(result.fetched_surahs),
        len(result.failed_surahs),
        written.path,
    )
    return TafsirSeedResult(path=written.path, fetch=result)


def _run(args: argparse.Namespace) -> None:
    settings = settings_from_args(args)
    if args.with_editions:
        seed_tafsir_editions(settings=settings, dry_run=args.dry_run)
    if args.all_surahs:
        surahs: Iterable[int] = range(1, len(SURAH_VERSE_COUNTS) + 1)
    else:
        surahs = args.surahs or POPULAR_SURAHS
    seed_tafsir(settings=settings, surahs=surahs, dry_run=args.dry_run)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    run_cli(partial(_run, args), verbose=args.verbose)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
