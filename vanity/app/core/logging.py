"""Loguru sink setup.

Events are logged as `logger.bind(service_name=..., event=..., **fields)`; the
sink format prints the bound event and the remaining extra fields so that an
empty message still produces a useful line.
"""
from __future__ import annotations

import sys

from loguru import logger

from vanity.app.core import SERVICE_NAME

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "{extra[service_name]} | {extra[event]} | {message} | {extra}"
)


def configure_logging(level: str = "INFO") -> None:
    logger.configure(
        handlers=[{"sink": sys.stderr, "level": level.upper(), "format": LOG_FORMAT}],
        extra={"service_name": SERVICE_NAME, "event": ""},
    )
