"""Logging helpers.

Library modules only emit DEBUG records through :func:`get_logger` and never
attach handlers themselves; applications call :func:`setup_logging` if they
want the construction trace printed.
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any

_ROOT_LOGGER = "relexer"
_VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def setup_logging(level: str = "INFO", *, detailed: bool = False) -> None:
    """Attach a console handler to the ``relexer`` logger.

    Args:
        level: Logging level name.
        detailed: Include timestamps and source locations in each record.

    Raises:
        ValueError: If ``level`` is not a standard level name.
    """
    level = level.upper()
    if level not in _VALID_LEVELS:
        raise ValueError(f"Unsupported log level: {level!r}. Choose from {sorted(_VALID_LEVELS)}")

    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {"format": "%(levelname)s - %(name)s - %(message)s"},
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - "
                "%(filename)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "detailed" if detailed else "simple",
                "stream": "ext://sys.stderr",
            }
        },
        "loggers": {
            _ROOT_LOGGER: {"level": level, "handlers": ["console"], "propagate": False},
        },
    }
    logging.config.dictConfig(config)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``relexer`` namespace.

    Args:
        name: Module name, typically ``__name__``.
    """
    if name == _ROOT_LOGGER or name.startswith(_ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
