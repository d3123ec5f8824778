#!/usr/bin/env python3
"""
API package for lfmc.

This package provides the Last.fm web service call used by the CLI.
"""

from .client import (
    LastFmApiError,
    fetch_top_artists,
)

__all__ = [
    "LastFmApiError",
    "fetch_top_artists",
]
