"""Shared fakes for exercising ingestion without network access."""

from __future__ import annotations

import json
import threading
from typing import Any, Mapping

import pytest

from islamic_data.ingestion.http_client import HTTPStatusError, PayloadDecodeError, TransportError


class FakeResponse:
    def __init__(self, status_code: int = 200, *, body: Any = None, content: bytes | None = None, headers=None):
        self.status_code = status_code
        self.headers = dict(headers or {})
        if content is None:
            content = json.dumps(body).encode("utf-8")
        self.content = content


class FakeSession:
    """Minimal stand-in for ``requests.Session`` driven by a URL → response map."""

    def __init__(self, responses: Mapping[str, Any] | None = None) -> None:
        self.headers: dict[str, str] = {}
        self.responses = dict(responses or {})
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def get(self, url, headers=None, timeout=None, allow_redirects=True):  # type: ignore[no-untyped-def]
        self.calls.append(
            {"url": url, "headers": dict(headers or {}), "timeout": timeout, "allow_redirects": allow_redirects}
        )
        response = self.responses[url]
        if isinstance(response, list):
            response = response.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True


class FakeFetcher:
    """In-memory :class:`JsonFetcher`; values that are exceptions are raised."""

    def __init__(self, payloads: Mapping[str, Any] | None = None) -> None:
        self.payloads = dict(payloads or {})
        self.calls: list[tuple[str, dict[str, str]]] = []
        self._lock = threading.Lock()

    def fetch_json(self, url: str, *, headers: Mapping[str, str] | None = None) -> Any:
        with self._lock:
            self.calls.append((url, dict(headers or {})))
        if url not in self.payloads:
            raise HTTPStatusError(f"HTTP 404 for {url}.", url=url, status_code=404)
        payload = self.payloads[url]
        if isinstance(payload, Exception):
            raise payload
        return payload

    @property
    def urls(self) -> list[str]:
        return [url for url, _ in self.calls]


def not_found(url: str) -> HTTPStatusError:
    return HTTPStatusError(f"HTTP 404 for {url}.", url=url, status_code=404)


def malformed(url: str) -> PayloadDecodeError:
    return PayloadDecodeError(f"Response from {url} is not valid JSON", url=url)


def unreachable(url: str) -> TransportError:
    return TransportError(f"Network error fetching {url}", url=url)


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher()
