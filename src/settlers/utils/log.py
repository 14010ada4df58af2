from __future__ import annotations

import logging.config
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "SETTLERS_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_level(level: Optional[str] = None) -> str:
    """Explicit level, else the environment, else WARNING."""
    value = str(level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LEVEL).upper()
    if value not in LEVELS:
        raise ValueError(f"Unknown log level {value!r}, expected one of {', '.join(LEVELS)}")
    return value


def configure_logging(level: Optional[str] = None) -> str:
    resolved = resolve_level(level)
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        # stderr, so game output on stdout stays readable
        "handlers": {
            "console": {
                "level": resolved,
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            "settlers": {
                "handlers": ["console"],
                "level": resolved,
                "propagate": False,
            },
        },
    }
    logging.config.dictConfig(logging_config)
    return resolved
