"""Logging configuration for the blog client.

Module loggers are created with ``logging.getLogger(__name__)``; this module
only installs the process-wide format. Never log access tokens or passwords.
"""

import logging
import sys

from blog_client.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | None = None) -> None:
    """Configure logging for applications embedding the client.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
               Defaults to settings.log_level.
    """
    level = level or settings.log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
