"""
Last.fm API client module.

This module performs the single user.gettopartists request of a run and
hands back the decoded JSON document. Nothing is retried.
"""

import logging
import time
from typing import Any, Optional

import requests

from ..config.env import Config
from ..constants import DEFAULT_REQUEST_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


class LastFmApiError(Exception):
    """Raised when Last.fm answers with an error document."""

    def __init__(self, code: Any, message: str):
        self.code = code
        self.message = message
        super().__init__(f"Last.fm error {code}: {message}")


def fetch_top_artists(
    config: Config,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> Any:
    """
    Fetch the top-artists document for the configured user.

    Args:
        config: Run configuration used to build the request URI
        timeout: Seconds before the request is abandoned
        session: Optional requests session (defaults to module-level requests)

    Returns:
        The decoded JSON document

    Raises:
        requests.RequestException: On transport failures
        ValueError: If the body is not valid JSON
        LastFmApiError: If Last.fm reports an error (bad key, unknown user, ...)
    """
    http = session if session is not None else requests
    headers = {"User-Agent": USER_AGENT}

    logger.debug(f"GET {config.masked_uri()}")
    start_time = time.time()
    try:
        response = http.get(config.build_uri(), headers=headers, timeout=timeout)
    except requests.RequestException as e:
        logger.error(f"Request to Last.fm failed: {e}")
        raise

    duration = time.time() - start_time
    logger.debug(f"Last.fm answered {response.status_code} in {duration:.2f}s")

    try:
        payload = response.json()
    except ValueError:
        logger.error("Could not convert response to JSON.")
        raise

    if isinstance(payload, dict) and "error" in payload:
        error = LastFmApiError(payload["error"], payload.get("message", "Unknown error"))
        logger.error(str(error))
        raise error

    return payload
