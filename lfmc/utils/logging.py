"""
Logging utilities for lfmc.

This module provides the process-wide logging configuration: a debug
log file plus a quieter console sink.
"""

import logging
import sys
from typing import Optional

from ..constants import DEFAULT_LOG_FILE

LOG_FORMAT = "%(asctime)s.%(msecs)03d [ %(levelname)s ] %(filename)s:%(lineno)d %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

PACKAGE_LOGGER = "lfmc"


def setup_logging(
    verbose: bool = False,
    log_file: Optional[str] = DEFAULT_LOG_FILE,
    stream=None,
) -> logging.Logger:
    """
    Setup logging for the lfmc package logger.

    Args:
        verbose: Echo DEBUG records to the console instead of WARNING and up
        log_file: File receiving every DEBUG record; None or "" disables it
        stream: Console stream (defaults to stderr so stdout carries only the summary)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Re-running setup replaces handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)  # Reduce HTTP client noise

    return logger
