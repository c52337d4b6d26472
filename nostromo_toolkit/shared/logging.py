"""
Logging helpers for the Nostromo toolkit.

Every module logger lives under the ``nostromo_toolkit`` namespace. A single
console handler is attached to that namespace root the first time any logger
is requested; module loggers propagate to it, so a message is never printed
twice and the level is controlled in one place.

The level defaults to INFO and can be overridden with the NOSTROMO_LOG_LEVEL
environment variable (e.g. ``NOSTROMO_LOG_LEVEL=debug`` to see index cache
hits and expiries).
"""

import logging
import os
from typing import Optional, Union

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

LOG_LEVEL_ENV = "NOSTROMO_LOG_LEVEL"
ROOT_LOGGER_NAME = "nostromo_toolkit"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        root.addHandler(handler)
        set_level(os.getenv(LOG_LEVEL_ENV, "INFO"))
    return root


def set_level(level: Union[str, int]) -> None:
    """
    Set the level of every toolkit logger.

    Args:
        level: Level name ("debug", "INFO", ...) or number; unknown names
            fall back to INFO
    """
    if isinstance(level, str):
        level = getattr(logging, level.strip().upper(), logging.INFO)
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a toolkit logger.

    Names outside the ``nostromo_toolkit`` namespace are nested under it so
    they share the toolkit handler and level.
    """
    root = _configure_root()
    if not name or name == ROOT_LOGGER_NAME:
        return root
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
