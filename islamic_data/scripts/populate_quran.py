"""CLI entry point for downloading Quran translations."""

from __future__ import annotations

from islamic_data.seeds.populate_quran import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    main()
