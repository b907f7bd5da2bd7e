"""Filesystem persistence for fetched JSON artifacts."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from islamic_data.store import DEFAULT_OUTPUT_DIR
from islamic_data.utils.logger import get_logger

LOGGER = get_logger(__name__)

JSON_INDENT = 2


def dump_json(payload: Any) -> str:
    """Serialise ``payload`` the way every cache file is written.

    Two-space indentation, insertion-ordered keys and non-ASCII text kept
    verbatim so Arabic and Dhivehi strings stay readable in the cache.
    """

    return json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False)


@dataclass(slots=True)
class WriteResult:
    """Location and size of a cache file that was just written."""

    path: Path
    size_bytes: int

    @property
    def size_mb(self) -> float:
        return self.size_bytes / 1024 / 1024


class JsonCacheStore:
    """Read and write pretty-printed JSON files below a single root directory."""

    def __init__(self, root: str | Path = DEFAULT_OUTPUT_DIR) -> None:
        self.root = Path(root).expanduser().resolve()

    def ensure_directory(self, subdir: str | Path | None = None) -> Path:
        """Create ``root`` (or ``root/subdir``) if it does not exist yet."""

        target = self.root / subdir if subdir else self.root
        if not target.exists():
            LOGGER.debug("Creating cache directory %s", target)
        target.mkdir(parents=True, exist_ok=True)
        return target

    def path_for(self, relative: str | Path) -> Path:
        """Resolve ``relative`` against ``root``; absolute paths are returned unchanged."""

        path = Path(relative)
        return path if path.is_absolute() else self.root / path

    def write(self, destination: str | Path, payload: Any) -> WriteResult:
        """Write ``payload`` to ``destination`` (absolute, or relative to ``root``).

        Existing files are overwritten. Errors raised by the filesystem are not
        handled here.
        """

        path = self.path_for(destination)
        data = dump_json(payload).encode("utf-8")
        path.write_bytes(data)
        return WriteResult(path=path, size_bytes=len(data))

    def read(self, relative: str | Path) -> Any:
        path = self.path_for(relative)
        with open(path, encoding="utf-8") as handle:
            return json.load(handle)

    def exists(self, relative: str | Path) -> bool:
        return self.path_for(relative).is_file()

    def list_files(self) -> list[Path]:
        """Return cached JSON files relative to ``root``, sorted."""

        if not self.root.exists():
            return []
        return sorted(path.relative_to(self.root) for path in self.root.rglob("*.json"))


__all__ = ["JsonCacheStore", "WriteResult", "dump_json", "JSON_INDENT"]
