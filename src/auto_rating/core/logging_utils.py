"""Central logging utilities for the Auto Rating Engine.

This module enforces a consistent logging configuration across the entire
code-base and provides a convenience helper for retrieving module-scoped
loggers.

Key Features
------------
1. configure_logging(): initializes the root logger once; an explicit level
   is always applied, so settings loaded after import still take effect.
2. get_logger(name): typed helper that always returns a configured logger.
"""

from __future__ import annotations

import logging
from typing import Final

from beartype import beartype

__all__: Final = [
    "configure_logging",
    "get_logger",
]

_DEFAULT_LOG_FORMAT: Final = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_ROOT_LOGGER_NAME: Final = "auto_rating"
_is_configured: bool = False


@beartype
def configure_logging(
    *, level: int | str | None = None, fmt: str = _DEFAULT_LOG_FORMAT
) -> None:
    """Configure the root logger.

    Handlers and format are installed on the first invocation only. A
    ``level`` passed on a later call replaces the root level.
    """
    global _is_configured
    if _is_configured:
        if level is not None:
            logging.getLogger().setLevel(level)
        return

    logging.basicConfig(level=level if level is not None else logging.INFO, format=fmt)
    _is_configured = True


@beartype
def get_logger(name: str | None = None, *, level: int | None = None) -> logging.Logger:
    """Return a module-scoped logger that is guaranteed to be configured."""
    configure_logging()
    logger = logging.getLogger(name or _ROOT_LOGGER_NAME)
    if level is not None:
        logger.setLevel(level)
    return logger
