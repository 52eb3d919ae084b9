"""Tests for logging configuration."""

from __future__ import annotations

import logging

from ukwac_stream.utils.logging_setup import PACKAGE_LOGGER, setup_logging


class TestSetupLogging:
    def test_level_applies_to_package_loggers(self):
        setup_logging("DEBUG")
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        assert logging.getLogger("ukwac_stream.stream.scanner").isEnabledFor(logging.DEBUG)
        assert logging.getLogger().level == logging.WARNING
        assert not logging.getLogger("somelib").isEnabledFor(logging.INFO)
        setup_logging("WARNING")

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty")
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO
        setup_logging("WARNING")
