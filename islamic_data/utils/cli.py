"""Command-line plumbing shared by the seed entry points."""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Callable, Sequence

from islamic_data.config import IngestionSettings
from islamic_data.utils.logger import get_logger, set_level

LOGGER = get_logger(__name__)


def build_parser(description: str | None, *, slugs: Sequence[str] | None = None) -> argparse.ArgumentParser:
    """Return a parser with the flags every seed script understands.

    ``slugs`` enables ``--only`` restricted to those collection identifiers.
    """

    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--output", dest="output_dir", help="Directory the JSON files are written to")
    parser.add_argument(
        "--concurrency",
        dest="max_concurrency",
        type=int,
        help="Maximum parallel downloads (default: 1, strictly sequential)",
    )
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    parser.add_argument("--max-redirects", dest="max_redirects", type=int, help="Redirect hops to follow")
    parser.add_argument(
        "--retries",
        dest="max_attempts",
        type=int,
        help="Total attempts per request on network errors (default: 1, no retry)",
    )
    parser.add_argument(
        "--dry-run",
        dest="dry_run",
        action="store_true",
        default=False,
        help="Log what would be downloaded without touching the network",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Also log followed redirects")
    if slugs:
        parser.add_argument(
            "--only",
            nargs="+",
            choices=list(slugs),
            metavar="SLUG",
            help=f"Restrict the run to these collections: {', '.join(slugs)}",
        )
    return parser


def settings_from_args(args: argparse.Namespace, base: IngestionSettings | None = None) -> IngestionSettings:
    """Overlay explicit CLI flags on ``base`` (environment defaults when omitted)."""

    settings = base or IngestionSettings.from_env()
    overrides: dict[str, object] = {}
    if getattr(args, "output_dir", None):
        overrides["output_dir"] = Path(args.output_dir)
    for name in ("max_concurrency", "timeout", "max_redirects", "max_attempts"):
        value = getattr(args, name, None)
        if value is not None:
            overrides[name] = value
    return replace(settings, **overrides) if overrides else settings


def run_cli(entry: Callable[[], object], *, verbose: bool = False) -> None:
    """Run ``entry`` and turn any uncaught exception into exit status 1."""

    set_level(verbose)
    try:
        entry()
    except Exception:
        LOGGER.exception("Fatal error")
        raise SystemExit(1)


__all__ = ["build_parser", "run_cli", "settings_from_args"]
