#!/usr/bin/env python3
"""
Artist Data Models

This module contains data structures for entries of the Last.fm
top-artists response.
"""

from typing import NamedTuple


class ArtistEntry(NamedTuple):
    """
    One artist of a user.gettopartists response.

    Attributes:
        name: Artist name
        playcount: Play count exactly as Last.fm sends it (a numeric string)
    """

    name: str
    playcount: str

    def render(self, ending: str = "") -> str:
        """Render as the ` Name (123),` chunk used in the summary line."""
        return f" {self.name} ({self.playcount}){ending}"
