"""
CLI main application module.

This module contains the process entry point: it loads the configuration,
performs the Last.fm request, prints the summary and maps every failure
to an exit code.
"""

import logging
import sys

import requests

from ..constants import (
    EXIT_CONFIG_ERROR,
    EXIT_API_FAILURES,
    EXIT_RESPONSE_ERROR,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
)
from ..api import LastFmApiError, fetch_top_artists
from ..config import Config, ConfigError
from ..core import InvalidPeriod, OutputError, construct_output, resolve_period_label
from ..utils import setup_logging
from .parser import create_argument_parser

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main entry point for the script."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(verbose=args.verbose, log_file=args.log_file or None)
    except OSError as e:
        setup_logging(verbose=args.verbose, log_file=None)
        logger.warning(f"Cannot open log file {args.log_file}, logging to console only: {e}")
    logger.debug("main running ...")

    try:
        config = Config.load(cli_args=args)
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(EXIT_CONFIG_ERROR)

    try:
        resolve_period_label(config.period)

        if args.dry_run:
            print(config.masked_uri())
            logger.debug("Dry run finished without calling Last.fm")
            return

        payload = fetch_top_artists(config)

        logger.debug("Constructing output ...")
        output = construct_output(config, payload)
        print(f"\n{output}\n")

    except InvalidPeriod as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(EXIT_CONFIG_ERROR)
    except OutputError as e:
        logger.error(f"Unexpected response from Last.fm: {e}")
        sys.exit(EXIT_RESPONSE_ERROR)
    except LastFmApiError as e:
        logger.error(f"Last.fm rejected the request: {e.message}")
        sys.exit(EXIT_API_FAILURES)
    except (requests.RequestException, ValueError) as e:
        logger.error(f"Could not fetch top artists: {e}")
        sys.exit(EXIT_API_FAILURES)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user (Ctrl+C)")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(EXIT_UNEXPECTED_ERROR)

    logger.debug("main finished.")
