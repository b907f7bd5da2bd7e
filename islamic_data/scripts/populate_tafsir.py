"""CLI entry point for downloading Tafsir Ibn Kathir."""

from __future__ import annotations

from islamic_data.seeds.populate_tafsir import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    main()
