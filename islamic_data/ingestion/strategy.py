"""Abstractions for pluggable JSON fetchers."""

from __future__ import annotations

from typing import Any, Mapping, Protocol


class JsonFetcher(Protocol):
    """Contract for retrieving one JSON document.

    Implementations return the parsed payload or raise a subclass of
    :class:`islamic_data.ingestion.http_client.FetchError`. Tests substitute a
    fake transport through this protocol.
    """

    def fetch_json(self, url: str, *, headers: Mapping[str, str] | None = None) -> Any:
        ...  # pragma: no cover - protocol definition


__all__ = ["JsonFetcher"]
