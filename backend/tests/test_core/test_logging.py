"""
Tests for autoscaler_broker/core/logging.py
"""

import logging

from autoscaler_broker.core.logging import ROOT_LOGGER_NAME, configure_logging


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_sets_level(self):
        logger = configure_logging("DEBUG")
        assert logger.name == ROOT_LOGGER_NAME
        assert logger.level == logging.DEBUG

    def test_repeated_calls_add_one_handler(self):
        configure_logging("INFO")
        configure_logging("WARNING")

        logger = logging.getLogger(ROOT_LOGGER_NAME)
        broker_handlers = [h for h in logger.handlers if getattr(h, "_broker_handler", False)]
        assert len(broker_handlers) == 1
        assert logger.level == logging.WARNING
