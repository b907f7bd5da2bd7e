"""CLI entry point for downloading Dua & Dhikr collections."""

from __future__ import annotations

from islamic_data.seeds.populate_duas import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    main()
