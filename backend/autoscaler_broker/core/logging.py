"""
Logging setup for the broker process
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
ROOT_LOGGER_NAME = "autoscaler_broker"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a stream handler to the package logger

    Safe to call more than once; only the level is updated on later calls.

    Args:
        level: Log level name (e.g. "INFO", "DEBUG")

    Returns:
        The package logger
    """
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level.upper())

    if not any(getattr(h, "_broker_handler", False) for h in package_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._broker_handler = True  # type: ignore[attr-defined]
        package_logger.addHandler(handler)

    return package_logger
