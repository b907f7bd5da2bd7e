"""Runtime configuration for ingestion runs."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from islamic_data.ingestion.http_client import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, RequestsJsonClient
from islamic_data.store import DEFAULT_OUTPUT_DIR

ENV_PREFIX = "ISLAMIC_DATA_"


@dataclass(slots=True)
class IngestionSettings:
    """Everything an ingestion run needs besides the dataset catalog.

    The defaults keep the load on upstream APIs low:
    sequential requests, a single redirect hop and no retries.
    """

    output_dir: Path = field(default_factory=lambda: DEFAULT_OUTPUT_DIR)
    timeout: float = DEFAULT_TIMEOUT
    max_redirects: int = 1
    max_attempts: int = 1
    backoff_seconds: float = 1.0
    max_concurrency: int = 1
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        self.output_dir = Path(self.output_dir)
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_redirects < 0:
            raise ValueError("max_redirects must not be negative")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.backoff_seconds < 0:
            raise ValueError("backoff_seconds must not be negative")
        if self.max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "IngestionSettings":
        """Build settings from ``ISLAMIC_DATA_*`` variables, falling back to defaults."""

        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}
        if env.get(f"{ENV_PREFIX}DIR"):
            kwargs["output_dir"] = Path(env[f"{ENV_PREFIX}DIR"])
        if env.get(f"{ENV_PREFIX}TIMEOUT"):
            kwargs["timeout"] = _parse_number(env, "TIMEOUT", float)
        for name, attr in (
            ("MAX_REDIRECTS", "max_redirects"),
            ("MAX_ATTEMPTS", "max_attempts"),
            ("CONCURRENCY", "max_concurrency"),
        ):
            if env.get(f"{ENV_PREFIX}{name}"):
                kwargs[attr] = _parse_number(env, name, int)
        return cls(**kwargs)  # type: ignore[arg-type]

    def build_client(self) -> RequestsJsonClient:
        return RequestsJsonClient(
            timeout=self.timeout,
            max_redirects=self.max_redirects,
            max_attempts=self.max_attempts,
            backoff_seconds=self.backoff_seconds,
            user_agent=self.user_agent,
        )


def _parse_number(env: Mapping[str, str], name: str, kind: type) -> float | int:
    raw = env[f"{ENV_PREFIX}{name}"]
    try:
        return kind(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from exc


__all__ = ["ENV_PREFIX", "IngestionSettings"]
