"""Helpers for locating the local dataset cache."""

from __future__ import annotations

from pathlib import Path
from typing import Final

__all__ = ["DEFAULT_OUTPUT_DIR", "default_output_dir"]

# Resolved against the working directory; the web application bundles
# ``data/islamic`` from the project root.
DEFAULT_OUTPUT_DIR: Final[Path] = Path("data") / "islamic"


def default_output_dir() -> Path:
    """Return the absolute path of the default cache directory."""

    return DEFAULT_OUTPUT_DIR.resolve()
