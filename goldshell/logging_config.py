"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging
import os

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"
LEVEL_ENV_VAR = "GOLDSHELL_LOG_LEVEL"


def configure_logging(
    *,
    level: str | None = None,
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
) -> logging.Logger:
    """Configure the ``goldshell`` logger hierarchy.

    Args:
        level: Optional explicit log level. Falls back to ``GOLDSHELL_LOG_LEVEL``
            env var or WARNING when not provided, so progress notices and
            reports stay the only console output by default.
        format: Log format string.
        datefmt: Date format string.

    Returns:
        The package logger (``goldshell``).
    """

    raw_level = level if level is not None else os.getenv(LEVEL_ENV_VAR)
    resolved_level = (raw_level or "WARNING").upper()
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    app_logger = logging.getLogger("goldshell")
    app_logger.setLevel(resolved_level)
    app_logger.debug("Logging configured at %s", resolved_level)
    return app_logger
