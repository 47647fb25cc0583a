"""Logging configuration for the bulk server process."""

import logging
import sys
from typing import Optional

# Log format constants
SIMPLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
)

DEFAULT_LOG_LEVEL = "WARNING"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure logging for the entire application.

    Records go to stderr; stdout carries nothing but bulk lines.

    Args:
        level: Log level name. Defaults to WARNING, which keeps a healthy
            server silent.
    """
    level_name = (level or DEFAULT_LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.WARNING)

    # Use simple format for INFO+, detailed format with line numbers for DEBUG
    fmt = DETAILED_FORMAT if log_level == logging.DEBUG else SIMPLE_FORMAT

    logging.basicConfig(
        level=log_level,
        format=fmt,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )

    # asyncio reports dropped client sockets at DEBUG/ERROR; keep it below ours
    logging.getLogger("asyncio").setLevel(max(log_level, logging.WARNING))
