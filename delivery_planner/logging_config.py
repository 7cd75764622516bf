"""
Logging setup for the delivery planner.

Report output goes to stdout with print(); log messages (skipped jobs,
processing counts, file errors) go to stderr through the "delivery_planner"
logger so they never mix into a saved or piped report.

Usage:
    from delivery_planner.logging_config import setup_logging, get_logger

    setup_logging(log_level=logging.DEBUG)
    logger = get_logger(__name__)
"""

import logging
import sys
from typing import Optional, TextIO

APP_LOGGER = "delivery_planner"


def setup_logging(
    log_level: int = logging.INFO,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the application logger with a single console handler.

    Args:
        log_level: Minimum log level (default: INFO)
        stream: Where to write log lines (default: sys.stderr)

    Returns:
        The configured "delivery_planner" logger
    """
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(log_level)
    logger.propagate = False

    # Allows re-configuration (tests, Streamlit reruns)
    logger.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-8s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logger.debug(f"Logging configured at level {logging.getLevelName(log_level)}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger under the "delivery_planner" namespace.

    Module names outside the package (e.g. "plan_from_csv") are prefixed so
    they share the handler set up by setup_logging().
    """
    if not name.startswith(APP_LOGGER):
        name = f"{APP_LOGGER}.{name}"

    return logging.getLogger(name)
