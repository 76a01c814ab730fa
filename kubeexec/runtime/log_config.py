"""Loguru sink setup for the CLI."""

from __future__ import annotations

import os
import sys

from loguru import logger

LOG_LEVEL_ENV_VAR = "KUBEEXEC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_FORMAT = "<dim>{time:HH:mm:ss.SSS}</dim> <level>{level: <7}</level> {name}: {message}"


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default sink with one stderr sink.

    Args:
        level: Minimum level; defaults to KUBEEXEC_LOG_LEVEL, then WARNING
    """
    requested = (level or os.getenv(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper()
    logger.remove()
    try:
        logger.add(sys.stderr, level=requested, format=_LOG_FORMAT)
    except ValueError:
        logger.add(sys.stderr, level=DEFAULT_LOG_LEVEL, format=_LOG_FORMAT)
        logger.warning(f"Unknown {LOG_LEVEL_ENV_VAR} {requested!r}; using {DEFAULT_LOG_LEVEL}")
