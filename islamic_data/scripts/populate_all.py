"""CLI entry point for downloading all Islamic datasets."""

from __future__ import annotations

from islamic_data.seeds.populate_all import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    main()
