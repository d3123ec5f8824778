#!/usr/bin/env python3
"""
lfmc Package

Prints a Last.fm user's top artists over a lookback period as a
ready-to-post summary line.

This package provides both a command-line interface and a programmatic API.
"""

__version__ = "1.0.0"
__author__ = "lfmc"
__description__ = "Print your Last.fm top artists as a ready-to-post summary"
__license__ = "MIT"

# Import models for public API
from .models import ArtistEntry

# Import constants for public API
from .constants import (
    EXIT_SUCCESS,
    EXIT_INPUT_ERROR,
    EXIT_CONFIG_ERROR,
    EXIT_API_FAILURES,
    EXIT_RESPONSE_ERROR,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
    PERIOD_LABELS,
)

# Import configuration for public API
from .config import Config, ConfigError, build_uri

# Import core functionality for public API
from .core import (
    OutputError,
    InvalidPeriod,
    MalformedResponse,
    MissingField,
    construct_output,
)

# Import API functions for public API
from .api import LastFmApiError, fetch_top_artists

# Import CLI functionality for public API
from .cli import main, create_argument_parser

# Import utilities for public API
from .utils import setup_logging

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "ArtistEntry",
    # Constants
    "EXIT_SUCCESS",
    "EXIT_INPUT_ERROR",
    "EXIT_CONFIG_ERROR",
    "EXIT_API_FAILURES",
    "EXIT_RESPONSE_ERROR",
    "EXIT_INTERRUPTED",
    "EXIT_UNEXPECTED_ERROR",
    "PERIOD_LABELS",
    # Configuration
    "Config",
    "ConfigError",
    "build_uri",
    # Core functionality
    "OutputError",
    "InvalidPeriod",
    "MalformedResponse",
    "MissingField",
    "construct_output",
    # API functions
    "LastFmApiError",
    "fetch_top_artists",
    # CLI functions
    "main",
    "create_argument_parser",
    # Utilities
    "setup_logging",
]
