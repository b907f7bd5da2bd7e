"""Public interface for the islamic_data package."""

from __future__ import annotations

from dataclasses import replace
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Any, Iterable

from islamic_data.config import IngestionSettings
from islamic_data.ingestion.hadithmv import HADITHMV_SOURCE
from islamic_data.ingestion.http_client import (
    FetchError,
    HTTPStatusError,
    PayloadDecodeError,
    RequestsJsonClient,
    TooManyRedirectsError,
    TransportError,
)
from islamic_data.ingestion.strategy import JsonFetcher
from islamic_data.store.json_store import JsonCacheStore

__all__ = [
    "__version__",
    "FetchError",
    "HTTPStatusError",
    "IngestionSettings",
    "IslamicData",
    "JsonCacheStore",
    "PayloadDecodeError",
    "RequestsJsonClient",
    "TooManyRedirectsError",
    "TransportError",
    "seed_islamic_data",
    "seed_quran_translations",
    "seed_hadith_collections",
    "seed_hadithmv",
    "seed_tafsir",
    "seed_dua_dhikr",
]

try:
    __version__ = importlib_metadata.version("islamic-data")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


def seed_islamic_data(*args, **kwargs):
    from islamic_data.seeds.populate_all import seed_islamic_data as _seed_islamic_data

    return _seed_islamic_data(*args, **kwargs)


def seed_quran_translations(*args, **kwargs):
    from islamic_data.seeds.populate_quran import seed_quran_translations as _seed_quran_translations

    return _seed_quran_translations(*args, **kwargs)


def seed_hadith_collections(*args, **kwargs):
    from islamic_data.seeds.populate_hadith import seed_hadith_collections as _seed_hadith_collections

    return _seed_hadith_collections(*args, **kwargs)


def seed_hadithmv(*args, **kwargs):
    from islamic_data.seeds.populate_hadithmv import seed_hadithmv as _seed_hadithmv

    return _seed_hadithmv(*args, **kwargs)


def seed_tafsir(*args, **kwargs):
    from islamic_data.seeds.populate_tafsir import seed_tafsir as _seed_tafsir

    return _seed_tafsir(*args, **kwargs)


def seed_dua_dhikr(*args, **kwargs):
    from islamic_data.seeds.populate_duas import seed_dua_dhikr as _seed_dua_dhikr

    return _seed_dua_dhikr(*args, **kwargs)


class IslamicData:
    """Package facade around the local dataset cache."""

    __slots__ = ("settings", "store", "client")

    # Provide direct access to the package version as a class attribute.
    __version__ = __version__

    def __init__(
        self,
        output_dir: str | Path | None = None,
        *,
        settings: IngestionSettings | None = None,
        client: JsonFetcher | None = None,
    ) -> None:
        """Configure where datasets are cached and how they are fetched.

        ``settings`` defaults to :meth:`IngestionSettings.from_env`. An explicit
        ``output_dir`` wins over both the settings and the environment. When
        ``client`` is omitted every :meth:`seed` call builds (and closes) its
        own HTTP client from the settings.
        """

        resolved = settings or IngestionSettings.from_env()
        if output_dir is not None:
            resolved = replace(resolved, output_dir=Path(output_dir))
        self.settings = resolved
        self.store = JsonCacheStore(resolved.output_dir)
        self.client = client

    @property
    def output_dir(self) -> Path:
        return self.store.root

    def seed(self, families: Iterable[str] | None = None, *, dry_run: bool = False) -> dict[str, Any]:
        """Download the selected dataset families (all of them by default)."""

        return seed_islamic_data(
            settings=self.settings,
            fetcher=self.client,
            families=families,
            dry_run=dry_run,
        )

    def load(self, filename: str | Path) -> Any:
        """Return the parsed content of a cached file, e.g. ``hadith-bukhari-english.json``."""

        if not self.store.exists(filename):
            raise FileNotFoundError(f"{filename} has not been downloaded into {self.store.root}")
        return self.store.read(filename)

    def available(self) -> list[str]:
        return [path.as_posix() for path in self.store.list_files()]

    def manifest(self, subdir: str | None = None) -> dict[str, Any]:
        """Read the metadata manifest of a source directory (HadithMV by default)."""

        return self.load(Path(subdir or HADITHMV_SOURCE.subdir) / HADITHMV_SOURCE.manifest_filename)
