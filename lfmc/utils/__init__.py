"""
Utilities module for lfmc.

This module provides shared utility functions:
- Logging utilities for consistent logging setup
"""

from .logging import setup_logging, LOG_FORMAT

__all__ = [
    "setup_logging",
    "LOG_FORMAT",
]
