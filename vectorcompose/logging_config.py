"""Logging setup. The library never calls this on import; applications do."""

from __future__ import annotations

import logging

from vectorcompose.config import settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    name = (level or settings.vectorcompose_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format=LOG_FORMAT,
    )
