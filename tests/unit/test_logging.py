"""Unit tests for _logging.py"""

import logging

from adrpub._logging import configure_logging


def test_configure_logging_is_idempotent():
    """Repeated calls keep a single handler and apply the latest level."""
    configure_logging("INFO")
    configure_logging("DEBUG")
    logger = logging.getLogger("adrpub")
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG
    configure_logging("INFO")


def test_configure_logging_unknown_level_defaults_to_info():
    configure_logging("chatty")
    assert logging.getLogger("adrpub").level == logging.INFO
