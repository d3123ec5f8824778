"""
Output formatting module.

This module turns a Last.fm user.gettopartists payload into the summary
string printed by lfmc, e.g.

    ♫ My Top 3 played artists in the past week via #LastFM ♫:
     Fia (12), Sea (9), & Tha (4).

No logging is configured here; diagnostics go to the logger passed in,
or to this module's logger.
"""

import logging
from typing import TYPE_CHECKING, Any, Optional

from ..constants import PERIOD_LABELS
from ..models import ArtistEntry

if TYPE_CHECKING:
    from ..config.env import Config

HEADER_TEMPLATE = "♫ My Top {limit} played artists in the past{label} via #LastFM ♫:\n"


class OutputError(Exception):
    """Base class for errors raised while building the summary."""
    pass


class InvalidPeriod(OutputError):
    """Raised when the configured period is not one Last.fm accepts."""

    def __init__(self, period: str):
        self.period = period
        self.allowed = tuple(PERIOD_LABELS)
        quoted = [f'"{p}"' for p in self.allowed]
        super().__init__(
            f"Period {period} not allowed. "
            f"Only allow {', '.join(quoted[:-1])}, or {quoted[-1]}."
        )


class MalformedResponse(OutputError):
    """Raised when the payload has no artist list at topartists.artist."""

    def __init__(self, message: str = "Error parsing JSON."):
        super().__init__(message)


class MissingField(OutputError):
    """Raised when an artist entry lacks a string name or playcount."""

    def __init__(self, message: str, field: str, index: int):
        self.field = field
        self.index = index
        super().__init__(message)


def resolve_period_label(period: str) -> str:
    """Map a period to its label, e.g. "7day" -> " week"."""
    try:
        return PERIOD_LABELS[period]
    except (KeyError, TypeError):
        raise InvalidPeriod(period) from None


def ending_for(index: int, limit: int) -> str:
    """
    Punctuation after the artist at ``index``.

    Computed against the requested ``limit`` rather than the number of
    artists returned, so a short response leaves the "&" misplaced.
    """
    if index <= limit - 3:
        return ","
    if index == limit - 2:
        return ", &"
    return ""


def parse_artist(entry: Any, index: int) -> ArtistEntry:
    """
    Extract name and playcount from one element of topartists.artist.

    Raises:
        MissingField: If either field is absent or not a string
    """
    if not isinstance(entry, dict):
        raise MissingField("Artist not found.", field="name", index=index)

    name = entry.get("name")
    if not isinstance(name, str):
        raise MissingField("Artist not found.", field="name", index=index)

    playcount = entry.get("playcount")
    if not isinstance(playcount, str):
        raise MissingField("Playcount not found.", field="playcount", index=index)

    return ArtistEntry(name=name, playcount=playcount)


def _artist_list(payload: Any) -> list:
    topartists = payload.get("topartists") if isinstance(payload, dict) else None
    artists = topartists.get("artist") if isinstance(topartists, dict) else None
    if not isinstance(artists, list):
        raise MalformedResponse()
    return artists


def construct_output(
    config: "Config",
    payload: Any,
    logger: Optional[logging.Logger] = None,
) -> str:
    """
    Build the summary string from a decoded top-artists payload.

    Args:
        config: Run configuration; its period and limit shape the text
        payload: Decoded JSON document returned by Last.fm
        logger: Optional diagnostic sink (defaults to the module logger)

    Returns:
        The header line followed by every artist and a closing period

    Raises:
        InvalidPeriod: Before the payload is inspected, if the period is unknown
        MalformedResponse: If topartists.artist is missing or not a list
        MissingField: If an artist lacks a string name or playcount
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    label = resolve_period_label(config.period)
    logger.debug(f"period={label!r}")

    output = HEADER_TEMPLATE.format(limit=config.limit, label=label)
    logger.debug(f"output={output!r}")

    artists = _artist_list(payload)

    for i, entry in enumerate(artists):
        logger.debug(f"i={i},artist={entry!r}")
        ending = ending_for(i, config.limit)
        artist = parse_artist(entry, i)
        output += artist.render(ending)

    output += "."
    logger.debug(f"output={output!r}")
    return output
