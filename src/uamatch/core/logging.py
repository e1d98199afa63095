"""Logging setup driven by AppSettings."""

from __future__ import annotations

import logging

from uamatch.core.config import AppSettings
from uamatch.core.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configure the root logger from ``settings.log_level``."""
    if settings is None:
        settings = AppSettings()

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level {settings.log_level!r}")

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("uamatch").setLevel(level)
