"""
Logging Utility Module.

This module provides logging configuration and utilities for the application,
with care for PHI protection: patient e-mail addresses never reach the logs
in plain text.
"""

import logging
import os
import re
import sys

_EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_REDACTED = "[REDACTED EMAIL]"


class PHISanitizingFilter(logging.Filter):
    """Custom logging filter to mask e-mail addresses in log records."""

    def __init__(self, name: str = "PHISanitizer"):
        super().__init__(name)

    def filter(self, record: logging.LogRecord) -> bool:
        original_message = record.getMessage()
        sanitized_message = _EMAIL_PATTERN.sub(_REDACTED, original_message)

        if sanitized_message != original_message:
            # Bake the formatted message so args cannot reintroduce PHI
            record.msg = sanitized_message
            record.args = ()

        return True


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance for the specified name.

    The logger writes to stdout with the application's format and the
    PHI-sanitizing filter attached.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if it hasn't been done yet
    if not logger.handlers:
        log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
        log_level = getattr(logging, log_level_str, logging.INFO)

        logger.setLevel(log_level)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        console_handler.addFilter(PHISanitizingFilter())
        logger.addHandler(console_handler)

        # Prevent propagation to root logger to avoid duplicate logs
        logger.propagate = False

    return logger
