#!/usr/bin/env python3
"""
Data Models Module

This module contains the data structures used throughout lfmc.
"""

from .artist import ArtistEntry

__all__ = [
    "ArtistEntry",
]
