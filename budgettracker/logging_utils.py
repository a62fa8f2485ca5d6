"""Mini README: Application-wide logging helpers for Budget Tracker.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - helper to install the handler and adjust the level.

Usage:
    Modules import ``get_logger`` to create contextual loggers that include
    module names and debugging friendly formatting. The handler is installed
    exactly once; later calls only change the level, which lets the CLI raise
    verbosity after modules have already been imported.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

DEFAULT_LEVEL = logging.WARNING

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str, None] = None) -> None:
    """Configure the root logger with a debugging friendly formatter."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        if level is not None:
            root_logger.setLevel(_normalise_level(level))
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(_normalise_level(DEFAULT_LEVEL if level is None else level))
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def _normalise_level(level: Union[int, str]) -> int:
    """Translate level names such as ``"debug"`` into logging constants."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level}")
    return resolved


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
