"""
Lightweight logging utilities for the storage proof toolkit.

Provides a consistent logger with a simple stderr handler and optional
log-level override via the SPP_LOG_LEVEL environment variable. Parameter
output goes to stdout, so log lines never mix with it.
"""

import logging
import os
import sys
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a configured logger with a stream handler.

    The first time a logger is created, a stderr StreamHandler is attached
    with a plain-text formatter. Subsequent calls reuse the existing
    configuration.

    Log level can be overridden with the SPP_LOG_LEVEL environment variable.
    """
    logger = logging.getLogger(name if name else __name__)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        logger.addHandler(handler)

        level_str = os.getenv("SPP_LOG_LEVEL", "INFO").upper()
        level = getattr(logging, level_str, logging.INFO)
        logger.setLevel(level)

    return logger
