"""
Tests for the PHI-sanitizing logging utilities.
"""

import logging

from naretbox.core.logging_config import build_logging_config
from naretbox.core.utils.logging import PHISanitizingFilter, get_logger


def make_record(msg, *args):
    return logging.LogRecord("naretbox.test", logging.INFO, __file__, 1, msg, args, None)


def test_email_addresses_are_masked():
    record = make_record("Booking confirmed for %s", "ana.garcia@example.com")

    assert PHISanitizingFilter().filter(record) is True
    assert record.getMessage() == "Booking confirmed for [REDACTED EMAIL]"


def test_messages_without_phi_are_untouched():
    record = make_record("Computed %d slots", 90)

    PHISanitizingFilter().filter(record)

    assert record.args == (90,)
    assert record.getMessage() == "Computed 90 slots"


def test_get_logger_attaches_filter_once():
    logger = get_logger("naretbox.tests.logging")
    again = get_logger("naretbox.tests.logging")

    assert logger is again
    assert len(logger.handlers) == 1
    assert any(isinstance(f, PHISanitizingFilter) for f in logger.handlers[0].filters)


def test_build_logging_config_applies_level():
    config = build_logging_config("DEBUG")

    assert config["loggers"]["naretbox"]["level"] == "DEBUG"
    assert config["handlers"]["console"]["filters"] == ["phi_sanitizer"]
