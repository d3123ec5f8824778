#!/usr/bin/env python3
"""
Tests for the artist entry model.
"""

import unittest

from lfmc.models import ArtistEntry


class TestArtistEntry(unittest.TestCase):
    def test_render_with_ending(self):
        self.assertEqual(ArtistEntry("Fia", "12").render(", &"), " Fia (12), &")

    def test_render_without_ending(self):
        self.assertEqual(ArtistEntry("Sigur Rós", "3").render(), " Sigur Rós (3)")

    def test_playcount_kept_as_text(self):
        entry = ArtistEntry(name="Fia", playcount="0012")
        self.assertEqual(entry.playcount, "0012")


if __name__ == "__main__":
    unittest.main()
