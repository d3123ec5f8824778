#!/usr/bin/env python3
"""
Core functionality package for lfmc.

This package contains the transformation of a top-artists response into
the summary text.
"""

from .formatter import (
    OutputError,
    InvalidPeriod,
    MalformedResponse,
    MissingField,
    resolve_period_label,
    ending_for,
    parse_artist,
    construct_output,
)

__all__ = [
    "OutputError",
    "InvalidPeriod",
    "MalformedResponse",
    "MissingField",
    "resolve_period_label",
    "ending_for",
    "parse_artist",
    "construct_output",
]
