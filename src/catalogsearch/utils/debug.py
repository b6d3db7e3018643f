"""Logging helpers for catalogsearch.

Provides debug() for consistent logging on the ``catalogsearch`` logger, plus a
printf-style ``logf`` suitable as the SearchClient log hook. Debug output is
controlled by the CATALOGSEARCH_DEBUG environment variable.
"""

import logging
import os
from typing import Any, Optional

DEBUG_ON = os.getenv("CATALOGSEARCH_DEBUG", "0") == "1"

_logger: Optional[logging.Logger] = None


def setup_logger() -> logging.Logger:
    global _logger
    if _logger is not None:
        return _logger
    logger = logging.getLogger("catalogsearch")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("[%(levelname)s] %(asctime)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if DEBUG_ON else logging.INFO)
    _logger = logger
    return logger


def debug(msg: str) -> None:
    """Log a debug message if debugging is enabled."""
    if DEBUG_ON:
        setup_logger().debug(msg)


def logf(fmt: str, *args: Any) -> None:  # noqa: ANN401
    """Printf-style debug hook, e.g. ``logf("GET %s", url)``."""
    debug(fmt % args if args else fmt)
