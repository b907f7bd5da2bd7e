"""Logging setup shared by the ingestion modules and seed scripts."""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
PACKAGE_LOGGER = "islamic_data"

_ROOT: Optional[logging.Logger] = None


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Return ``name``'s logger, installing the console handler on first use."""
    global _ROOT
    if _ROOT is None:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        _ROOT = logging.getLogger(PACKAGE_LOGGER)
    return logging.getLogger(name)


def set_level(verbose: bool) -> None:
    """Switch every ``islamic_data`` logger between INFO and DEBUG."""

    get_logger().setLevel(logging.DEBUG if verbose else logging.INFO)


__all__ = ["LOG_FORMAT", "get_logger", "set_level"]
