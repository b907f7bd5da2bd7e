"""requests-based JSON fetcher with bounded redirects, timeouts and optional retries."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional
from urllib.parse import urljoin

import requests
from tenacity import Retrying, before_sleep_log, retry_if_exception_type, stop_after_attempt, wait_exponential

from islamic_data.utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_USER_AGENT = "islamic-data-ingestor/1.0"
DEFAULT_TIMEOUT = 30.0
REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})


class FetchError(RuntimeError):
    """Base class for failures that affect a single remote document."""

    kind = "transport"

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class TransportError(FetchError):
    """Connection failure, DNS error or timeout."""

    kind = "transport"


class HTTPStatusError(FetchError):
    """The server answered with a non-2xx status."""

    kind = "http_status"

    def __init__(self, message: str, *, url: str, status_code: int) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code


class TooManyRedirectsError(HTTPStatusError):
    """The redirect chain was longer than the configured bound."""


class PayloadDecodeError(FetchError):
    """The response body could not be parsed as JSON."""

    kind = "decode"


class RequestsJsonClient:
    """Fetch JSON documents over HTTPS using a shared ``requests.Session``."""

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_redirects: int = 1,
        max_attempts: int = 1,
        backoff_seconds: float = 1.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        if max_redirects < 0:
            raise ValueError("max_redirects must not be negative")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._owns_session = session is None
        self.session = session or requests.Session()
        if self._owns_session:
            self.session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})
        self.timeout = timeout
        self.max_redirects = max_redirects
        self.max_attempts = max_attempts
        self.backoff_seconds = backoff_seconds

    def fetch_json(self, url: str, *, headers: Mapping[str, str] | None = None) -> Any:
        """Return the parsed JSON body served at ``url``.

        Only :class:`TransportError` is retried, and only when ``max_attempts``
        is greater than one.
        """

        retryer = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.backoff_seconds),
            retry=retry_if_exception_type(TransportError),
            before_sleep=before_sleep_log(LOGGER, logging.WARNING),
            reraise=True,
        )
        return retryer(self._fetch_once, url, dict(headers or {}))

    def _fetch_once(self, url: str, headers: dict[str, str]) -> Any:
        current = url
        hops = 0
        while True:
            response = self._get(current, headers)
            location = response.headers.get("Location")
            if response.status_code not in REDIRECT_STATUSES or not location:
                break
            if hops >= self.max_redirects:
                raise TooManyRedirectsError(
                    f"Gave up on {url} after {hops} redirect(s)",
                    url=url,
                    status_code=response.status_code,
                )
            hops += 1
            current = urljoin(current, location)
            LOGGER.debug("Following HTTP %s redirect to %s", response.status_code, current)

        self._raise_for_status(response, current)
        try:
            return json.loads(response.content)
        except ValueError as exc:
            raise PayloadDecodeError(f"Response from {current} is not valid JSON: {exc}", url=current) from exc

    def _get(self, url: str, headers: dict[str, str]) -> requests.Response:
        try:
            return self.session.get(url, headers=headers, timeout=self.timeout, allow_redirects=False)
        except requests.RequestException as exc:
            raise TransportError(f"Network error fetching {url}: {exc}", url=url) from exc

    @staticmethod
    def _raise_for_status(response: requests.Response, url: str) -> None:
        status = response.status_code
        if 200 <= status < 300:
            return
        hint = ""
        if status in {403, 429}:
            hint = " The upstream API may be rate limiting; try again later or lower --concurrency."
        raise HTTPStatusError(f"HTTP {status} for {url}.{hint}", url=url, status_code=status)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "RequestsJsonClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = [
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "FetchError",
    "HTTPStatusError",
    "PayloadDecodeError",
    "RequestsJsonClient",
    "TooManyRedirectsError",
    "TransportError",
]
