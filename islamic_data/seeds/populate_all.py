"""Download every Islamic dataset family in one run."""

from __future__ import annotations

import argparse
from functools import partial
from typing import Any, Callable, Iterable, Sequence

from islamic_data.config import IngestionSettings
from islamic_data.ingestion.ingestor import fetcher_scope
from islamic_data.ingestion.strategy import JsonFetcher
from islamic_data.seeds.populate_duas import seed_dua_dhikr
from islamic_data.seeds.populate_hadith import seed_hadith_collections, seed_hadith_reference
from islamic_data.seeds.populate_hadithmv import seed_hadithmv
from islamic_data.seeds.populate_quran import seed_quran_reference, seed_quran_translations
from islamic_data.seeds.populate_tafsir import seed_tafsir, seed_tafsir_editions
from islamic_data.utils.cli import build_parser, run_cli, settings_from_args
from islamic_data.utils.logger import get_logger

LOGGER = get_logger(__name__)

FAMILIES: tuple[str, ...] = ("quran", "hadith", "tafsir", "duas", "hadithmv")

__all__ = ["FAMILIES", "seed_islamic_data", "parse_args", "main"]


def _seed_quran(**kwargs: Any) -> dict[str, Any]:
    return {
        "reference": seed_quran_reference(**kwargs),
        "translations": seed_quran_translations(**kwargs),
    }


def _seed_hadith(**kwargs: Any) -> dict[str, Any]:
    return {
        "reference": seed_hadith_reference(**kwargs),
        "collections": seed_hadith_collections(**kwargs),
    }


def _seed_tafsir(**kwargs: Any) -> dict[str, Any]:
    return {
        "editions": seed_tafsir_editions(**kwargs),
        "surahs": seed_tafsir(**kwargs),
    }


_SEEDERS: dict[str, Callable[..., Any]] = {
    "quran": _seed_quran,
    "hadith": _seed_hadith,
    "tafsir": _seed_tafsir,
    "duas": seed_dua_dhikr,
    "hadithmv": seed_hadithmv,
}


def _resolve_families(families: Iterable[str] | None) -> list[str]:
    if families is None:
        return list(FAMILIES)
    requested = set(families)
    unknown = sorted(requested.difference(FAMILIES))
    if unknown:
        raise ValueError(f"Unknown dataset families {unknown}; available: {', '.join(FAMILIES)}")
    # Always run in the canonical order, whatever order the caller used.
    return [family for family in FAMILIES if family in requested]


def seed_islamic_data(
    *,
    settings: IngestionSettings | None = None,
    fetcher: JsonFetcher | None = None,
    families: Iterable[str] | None = None,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Run the selected seed families and return their results keyed by family.

    Families run in the order Quran, Hadith, Tafsir, Dua & Dhikr, HadithMV and
    share one HTTP client. Per-item download failures are recorded in the
    returned summaries; anything else stops the run.
    """

    settings = settings or IngestionSettings()
    selected = _resolve_families(families)
    results: dict[str, Any] = {}
    if dry_run:
        for family in selected:
            results[family] = _SEEDERS[family](settings=settings, dry_run=True)
        return results

    with fetcher_scope(settings, fetcher) as client:
        for family in selected:
            LOGGER.info("Seeding %s datasets", family)
            results[family] = _SEEDERS[family](settings=settings, fetcher=client)
    LOGGER.info("Finished seeding %s", ", ".join(selected))
    return results


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = build_parser(__doc__)
    parser.add_argument(
        "--families",
        nargs="+",
        choices=list(FAMILIES),
        metavar="FAMILY",
        help=f"Dataset families to download (default: all of {', '.join(FAMILIES)})",
    )
    return parser.parse_args(argv)


def _run(args: argparse.Namespace) -> None:
    seed_islamic_data(settings=settings_from_args(args), families=args.families, dry_run=args.dry_run)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    run_cli(partial(_run, args), verbose=args.verbose)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
