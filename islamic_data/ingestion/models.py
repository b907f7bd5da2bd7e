"""Data models shared across ingestion modules."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Literal, Mapping

ErrorKind = Literal["transport", "http_status", "decode"]

# Keys under which the upstream APIs nest their record lists.
ITEM_LIST_KEYS: tuple[str, ...] = ("hadiths", "quran", "ayahs", "data")


@dataclass(frozen=True, slots=True)
class Edition:
    """A language or source variant of a collection.

    ``code`` is the fragment the remote API uses (``eng``), ``label`` the
    fragment used in local filenames (``english``).
    """

    code: str
    label: str


ENGLISH = Edition(code="eng", label="english")


@dataclass(frozen=True, slots=True)
class CollectionDescriptor:
    """Static description of one external dataset."""

    name: str
    slug: str
    editions: tuple[Edition, ...] = (ENGLISH,)
    native_name: str | None = None
    expected_items: int | None = None
    url_template: str | None = None
    filename_template: str | None = None

    def __post_init__(self) -> None:
        if not self.slug:
            raise ValueError(f"Collection {self.name!r} needs a slug")
        if not self.editions:
            raise ValueError(f"Collection {self.slug!r} needs at least one edition")


@dataclass(frozen=True, slots=True)
class IngestionItem:
    """One (collection, edition) pair resolved to a URL and a local path."""

    collection: CollectionDescriptor
    edition: Edition
    url: str
    destination: Path

    @property
    def key(self) -> str:
        return f"{self.collection.slug}:{self.edition.label}"


@dataclass(frozen=True, slots=True)
class DatasetSource:
    """A family of collections served by the same upstream API.

    Templates are formatted with ``slug``, ``edition`` (the edition code) and
    ``label`` (the edition label). A collection may override either template.
    """

    name: str
    url_template: str
    filename_template: str
    collections: tuple[CollectionDescriptor, ...]
    subdir: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    title: str | None = None
    description: str | None = None
    homepage: str | None = None
    repository: str | None = None
    write_manifest: bool = False
    manifest_filename: str = "metadata.json"

    @property
    def slugs(self) -> list[str]:
        return [collection.slug for collection in self.collections]

    def output_dir(self, root: Path) -> Path:
        return root / self.subdir if self.subdir else root

    def plan(self, root: str | Path) -> list[IngestionItem]:
        """Expand collections × editions into items, preserving declaration order."""

        base = self.output_dir(Path(root))
        items: list[IngestionItem] = []
        for collection in self.collections:
            url_template = collection.url_template or self.url_template
            filename_template = collection.filename_template or self.filename_template
            for edition in collection.editions:
                fields = {"slug": collection.slug, "edition": edition.code, "label": edition.label}
                items.append(
                    IngestionItem(
                        collection=collection,
                        edition=edition,
                        url=url_template.format(**fields),
                        destination=base / filename_template.format(**fields),
                    )
                )
        return items

    def select(self, slugs: Iterable[str] | None) -> "DatasetSource":
        """Return a copy restricted to ``slugs`` (kept in declaration order)."""

        if slugs is None:
            return self
        wanted = list(dict.fromkeys(slugs))
        unknown = sorted(set(wanted) - set(self.slugs))
        if unknown:
            raise ValueError(
                f"Unknown {self.name} collection(s): {', '.join(unknown)}. "
                f"Available: {', '.join(self.slugs)}"
            )
        chosen = tuple(c for c in self.collections if c.slug in wanted)
        return replace(self, collections=chosen)


def count_items(payload: Any) -> int | None:
    """Best-effort number of records in an upstream payload."""

    if isinstance(payload, list):
        return len(payload)
    if isinstance(payload, dict):
        for key in ITEM_LIST_KEYS:
            value = payload.get(key)
            if isinstance(value, list):
                return len(value)
    return None


@dataclass(slots=True)
class ItemOutcome:
    """Result of ingesting a single item."""

    item: IngestionItem
    succeeded: bool
    path: Path | None = None
    size_bytes: int = 0
    item_count: int | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None


@dataclass(slots=True)
class IngestionSummary:
    """Outcome of a full ingestion run over one source."""

    source: str
    output_dir: Path
    outcomes: list[ItemOutcome] = field(default_factory=list)
    started_at: datetime | None = None
    finished_at: datetime | None = None
    expected_items: int = 0

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failed(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.succeeded)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def fetched_items(self) -> int:
        return sum(o.item_count or 0 for o in self.outcomes if o.succeeded)

    @property
    def successes(self) -> list[ItemOutcome]:
        return [outcome for outcome in self.outcomes if outcome.succeeded]

    @property
    def failures(self) -> list[ItemOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.succeeded]


__all__ = [
    "CollectionDescriptor",
    "DatasetSource",
    "Edition",
    "ENGLISH",
    "ErrorKind",
    "IngestionItem",
    "IngestionSummary",
    "ItemOutcome",
    "count_items",
]
