"""
Run configuration module.

This module provides the immutable Config value object holding the four
request parameters of a run, and the request URI built from them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from ..constants import (
    API_BASE_URL,
    API_FORMAT,
    API_METHOD,
    API_VERSION,
    DEFAULT_LIMIT,
    DEFAULT_PERIOD,
)
from .schema import ConfigSchema
from .loader import ConfigLoader

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass(frozen=True)
class Config:
    """
    Immutable configuration for a single run.

    Attributes:
        api_key: Last.fm API key, passed through as a query parameter
        username: Account whose top artists are requested
        limit: Number of artists requested (>= 1)
        period: Lookback period, checked by the output formatter
    """

    api_key: str
    username: str
    limit: int = DEFAULT_LIMIT
    period: str = DEFAULT_PERIOD

    def __post_init__(self):
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise ConfigError(f"Limit must be an integer, got {self.limit!r}")
        if self.limit < 1:
            raise ConfigError(f"Limit must be at least 1, got {self.limit}")

    @staticmethod
    def load(
        cli_args: Optional[Any] = None,
        cli_overrides: Optional[Mapping[str, str]] = None,
        env_file: Optional[str] = None,
    ) -> "Config":
        """
        Load configuration from all sources with precedence handling.

        Args:
            cli_args: Parsed argparse namespace
            cli_overrides: Optional mapping of env var name to value
            env_file: Optional dotenv file replacing the default location

        Returns:
            Configured Config instance

        Raises:
            ConfigError: If required fields are missing or invalid
        """
        try:
            schema = ConfigLoader.load(
                schema=ConfigSchema,
                cli_args=cli_args,
                cli_overrides=cli_overrides,
                env_file=env_file,
            )
        except ValueError as e:
            raise ConfigError(str(e)) from e

        config = Config(
            api_key=schema.api_key,
            username=schema.username,
            limit=schema.limit,
            period=schema.period,
        )
        logger.debug(f"Configuration loaded: {config.mask()}")
        return config

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Config":
        """
        Create Config instance from a mapping of env var names (useful for testing).

        Raises:
            ConfigError: If required fields are missing or the limit is not a number
        """
        api_key = mapping.get("API_KEY")
        username = mapping.get("USERNAME")

        missing_required = []
        if not api_key:
            missing_required.append("API_KEY")
        if not username:
            missing_required.append("USERNAME")

        if missing_required:
            raise ConfigError(f"Missing required configuration: {', '.join(missing_required)}")

        try:
            limit = int(mapping.get("LIMIT", DEFAULT_LIMIT))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"LIMIT must be an integer: {mapping.get('LIMIT')!r}") from e

        return cls(
            api_key=api_key,
            username=username,
            limit=limit,
            period=mapping.get("PERIOD", DEFAULT_PERIOD),
        )

    def build_uri(self) -> str:
        """Return the user.gettopartists request URI for this configuration."""
        return build_uri(self)

    def to_dict(self) -> dict:
        return asdict(self)

    def mask(self) -> dict:
        """Return a copy that is safe to log (hides the API key)."""
        masked = self.to_dict()
        masked["api_key"] = "***" if self.api_key else None
        return masked

    def masked_uri(self) -> str:
        return _format_uri(self.username, "***", self.period, self.limit)


def build_uri(config: Config) -> str:
    """
    Build the Last.fm request URI.

    The query carries method, user, api_key, format, period and limit.
    Values are percent-encoded; URL-safe values pass through unchanged.
    """
    return _format_uri(config.username, config.api_key, config.period, config.limit)


def _format_uri(username: str, api_key: str, period: str, limit: int) -> str:
    query = urlencode(
        {
            "method": API_METHOD,
            "user": username,
            "api_key": api_key,
            "format": API_FORMAT,
            "period": period,
            "limit": limit,
        },
        safe="*",
    )
    return f"{API_BASE_URL}/{API_VERSION}/?{query}"
