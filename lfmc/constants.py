#!/usr/bin/env python3
"""
Application Constants

This module contains the Last.fm endpoint details, run defaults and exit
codes used throughout the lfmc application.
"""

from pathlib import Path

# Exit codes for different failure modes
EXIT_SUCCESS = 0
EXIT_INPUT_ERROR = 2  # argparse usage errors
EXIT_CONFIG_ERROR = 3
EXIT_API_FAILURES = 4
EXIT_RESPONSE_ERROR = 5
EXIT_INTERRUPTED = 130  # Conventional exit code for Ctrl+C
EXIT_UNEXPECTED_ERROR = 10

# Last.fm web service
API_BASE_URL = "http://ws.audioscrobbler.com"
API_VERSION = "2.0"
API_METHOD = "user.gettopartists"
API_FORMAT = "json"
USER_AGENT = "lfmc/1.0"
DEFAULT_REQUEST_TIMEOUT = 10  # seconds

# Run defaults
DEFAULT_LIMIT = 5
DEFAULT_PERIOD = "7day"
DEFAULT_LOG_FILE = "lfmc.log"
DEFAULT_ENV_FILE = Path.home() / ".config" / "lfmc" / ".env"

# Lookback period -> label appended after "in the past"
PERIOD_LABELS = {
    "overall": "",
    "7day": " week",
    "1month": " month",
    "3month": " 3 months",
    "6month": " 6 months",
    "12month": " year",
}
