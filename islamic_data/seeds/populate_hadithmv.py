"""Download HadithMV books (Arabic + Dhivehi) and write their metadata manifest."""

from __future__ import annotations

import argparse
from functools import partial
from typing import Iterable, Sequence

from islamic_data.config import IngestionSettings
from islamic_data.ingestion.hadithmv import HADITHMV_SOURCE
from islamic_data.ingestion.ingestor import ingest_source
from islamic_data.ingestion.models import IngestionSummary
from islamic_data.ingestion.strategy import JsonFetcher
from islamic_data.utils.cli import build_parser, run_cli, settings_from_args

__all__ = ["seed_hadithmv", "parse_args", "main"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = build_parser(__doc__, slugs=HADITHMV_SOURCE.slugs)
    parser.add_argument(
        "--no-manifest",
        dest="write_manifest",
        action="store_false",
        default=True,
        help="Skip writing hadithmv/metadata.json",
    )
    return parser.parse_args(argv)


def seed_hadithmv(
    *,
    settings: IngestionSettings | None = None,
    fetcher: JsonFetcher | None = None,
    only: Iterable[str] | None = None,
    write_manifest: bool = True,
    dry_run: bool = False,
) -> IngestionSummary:
    """Download every HadithMV book into ``<output>/hadithmv``.

    The manifest is written after all downloads were attempted and lists only
    the books that succeeded.
    """

    source = HADITHMV_SOURCE.select(only)
    return ingest_source(
        source,
        settings=settings,
        fetcher=fetcher,
        write_manifest=write_manifest,
        dry_run=dry_run,
    )


def _run(args: argparse.Namespace) -> None:
    seed_hadithmv(
        settings=settings_from_args(args),
        only=args.only,
        write_manifest=args.write_manifest,
        dry_run=args.dry_run,
    )


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    run_cli(partial(_run, args), verbose=args.verbose)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
