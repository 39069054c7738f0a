"""
Logging Configuration Module.

This module provides the central logging configuration dictionary for the
application. All handlers carry the PHI-sanitizing filter.
"""

import copy
import logging
import logging.config
from typing import Any

LOGGING_CONFIG_BASE: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "filters": {
        "phi_sanitizer": {
            "()": "naretbox.core.utils.logging.PHISanitizingFilter",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "standard",
            "filters": ["phi_sanitizer"],
            "stream": "ext://sys.stdout",
        },
    },
    "loggers": {
        "naretbox": {
            "level": "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
        "uvicorn": {
            "level": "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
        "sqlalchemy.engine": {
            "level": "WARNING",
            "handlers": ["console"],
            "propagate": False,
        },
    },
}


def build_logging_config(log_level: str = "INFO") -> dict[str, Any]:
    """Return a copy of the base configuration with *log_level* applied."""
    config = copy.deepcopy(LOGGING_CONFIG_BASE)
    config["handlers"]["console"]["level"] = log_level
    for name in ("naretbox", "uvicorn"):
        config["loggers"][name]["level"] = log_level
    return config


def setup_logging(log_level: str = "INFO", config: dict[str, Any] | None = None) -> None:
    """
    Configure the logging system with the provided configuration or default.

    Args:
        log_level: Level applied to the application loggers
        config: Optional logging configuration dictionary to use instead of the default
    """
    logging.config.dictConfig(config or build_logging_config(log_level))
    logging.getLogger(__name__).debug("Logging configured successfully")
