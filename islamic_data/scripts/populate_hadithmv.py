"""CLI entry point for downloading HadithMV books."""

from __future__ import annotations

from islamic_data.seeds.populate_hadithmv import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    main()
