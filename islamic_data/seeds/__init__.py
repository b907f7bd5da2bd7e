"""Dataset seeding entry points for :mod:`islamic_data`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
    "seed_islamic_data",
    "seed_quran_translations",
    "seed_quran_reference",
    "seed_hadith_collections",
    "seed_hadith_reference",
    "seed_hadithmv",
    "seed_tafsir",
    "seed_tafsir_editions",
    "seed_dua_dhikr",
]

if TYPE_CHECKING:  # pragma: no cover - import only for static analyzers
    from islamic_data.seeds.populate_all import seed_islamic_data as seed_islamic_data

_MODULES = {
    "seed_islamic_data": "populate_all",
    "seed_quran_translations": "populate_quran",
    "seed_quran_reference": "populate_quran",
    "seed_hadith_collections": "populate_hadith",
    "seed_hadith_reference": "populate_hadith",
    "seed_hadithmv": "populate_hadithmv",
    "seed_tafsir": "populate_tafsir",
    "seed_tafsir_editions": "populate_tafsir",
    "seed_dua_dhikr": "populate_duas",
}


def __getattr__(name: str) -> Any:
    """Lazily expose seed helpers so importing the package stays cheap."""

    module_name = _MODULES.get(name)
    if module_name is None:
        raise AttributeError(f"module 'islamic_data.seeds' has no attribute {name}")
    from importlib import import_module

    return getattr(import_module(f"islamic_data.seeds.{module_name}"), name)
