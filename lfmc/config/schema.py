"""
Configuration schema definition using Pydantic.

This module defines the declarative configuration schema that serves as
the single source of truth for the run parameters of lfmc.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..constants import DEFAULT_LIMIT, DEFAULT_PERIOD


class ConfigSchema(BaseModel):
    """
    Declarative configuration schema.

    Each field can be set via environment variables or CLI arguments.
    The period is deliberately left unconstrained here; unknown periods are
    rejected by the output formatter with a dedicated error.
    """

    api_key: str = Field(
        ...,
        description="Your Last.fm API key",
        json_schema_extra={
            "env_var": "API_KEY",
            "cli_arg": "api_key",
            "cli_short": "-k",
            "sensitive": True,
        }
    )

    username: str = Field(
        ...,
        description="Your Last.fm username",
        json_schema_extra={
            "env_var": "USERNAME",
            "cli_arg": "username",
            "cli_short": "-u",
        }
    )

    limit: int = Field(
        DEFAULT_LIMIT,
        ge=1,
        description=f"The number of artists to list (default: {DEFAULT_LIMIT})",
        json_schema_extra={
            "env_var": "LIMIT",
            "cli_arg": "limit",
            "cli_short": "-l",
        }
    )

    period: str = Field(
        DEFAULT_PERIOD,
        description=(
            "The lookback period: overall, 7day, 1month, 3month, 6month "
            f"or 12month (default: {DEFAULT_PERIOD})"
        ),
        json_schema_extra={
            "env_var": "PERIOD",
            "cli_arg": "period",
            "cli_short": "-p",
        }
    )

    @field_validator('api_key', 'username', mode='before')
    @classmethod
    def reject_blank(cls, v: Any) -> Any:
        """Reject values that are empty once whitespace is stripped."""
        if isinstance(v, str) and not v.strip():
            raise ValueError("must not be empty")
        return v

    model_config = {
        "validate_assignment": True,
        "extra": "forbid"
    }
