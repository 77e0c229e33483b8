"""Logging setup shared by the server and the client."""

from __future__ import annotations

import logging

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Install the root handler once; later calls only adjust the level."""

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


__all__ = ["LOG_FORMAT", "configure_logging"]
