"""
Schema-driven configuration loader.

This module provides a ConfigLoader that uses the configuration schema
to automatically load, validate, and merge configuration from multiple sources.
"""

import logging
import os
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Dict, Any, Optional, Mapping, Union

from dotenv import load_dotenv
from pydantic import ValidationError

from .. import __version__
from ..constants import DEFAULT_ENV_FILE, DEFAULT_LOG_FILE
from .schema import ConfigSchema


logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and validates configuration using a schema-driven approach."""

    @staticmethod
    def load(
        schema: type[ConfigSchema] = ConfigSchema,
        cli_args: Optional[Namespace] = None,
        cli_overrides: Optional[Mapping[str, Any]] = None,
        env_file: Optional[Union[str, Path]] = None,
    ) -> ConfigSchema:
        """
        Load configuration from all sources with precedence handling.

        Loading order (lowest to highest priority):
        1. Schema defaults
        2. dotenv file (~/.config/lfmc/.env unless another path is given);
           never overrides variables already present in the environment
        3. OS environment variables
        4. CLI arguments
        5. Direct overrides keyed by env var name (highest priority)

        Args:
            schema: The configuration schema class to use
            cli_args: Parsed CLI arguments (if available)
            cli_overrides: Mapping of env var name to value
            env_file: dotenv file to read; falls back to --env-file, then the default

        Returns:
            Validated configuration instance

        Raises:
            ValueError: If configuration validation fails
        """
        config_dict: Dict[str, Any] = {}

        if env_file is None and cli_args is not None:
            env_file = getattr(cli_args, "env_file", None)
        _load_from_dotenv_file(env_file if env_file is not None else DEFAULT_ENV_FILE)

        for field_name, field_info in schema.model_fields.items():
            env_var = _extra(field_info).get("env_var")
            if env_var:
                env_value = os.getenv(env_var)
                if env_value is not None:
                    # Empty strings fall through to the default
                    stripped = env_value.strip()
                    if stripped:
                        config_dict[field_name] = stripped

        if cli_args:
            for field_name, field_info in schema.model_fields.items():
                cli_arg = _extra(field_info).get("cli_arg")
                if cli_arg and hasattr(cli_args, cli_arg):
                    cli_value = getattr(cli_args, cli_arg)
                    if cli_value is not None:
                        config_dict[field_name] = _clean(cli_value)

        if cli_overrides:
            for field_name, field_info in schema.model_fields.items():
                env_var = _extra(field_info).get("env_var")
                if env_var in cli_overrides and cli_overrides[env_var] is not None:
                    config_dict[field_name] = _clean(cli_overrides[env_var])

        try:
            config = schema(**config_dict)
            logger.debug("Configuration loaded and validated successfully")
            return config
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = error["loc"][0] if error["loc"] else "config"
                field_info = schema.model_fields.get(field)
                env_var = _extra(field_info).get("env_var") if field_info else str(field).upper()
                errors.append(f"{env_var}: {error['msg']}")

            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
            raise ValueError(error_msg) from e

    @staticmethod
    def generate_cli_parser(
        schema: type[ConfigSchema] = ConfigSchema,
        description: str = "Print your Last.fm top artists as a ready-to-post summary",
    ) -> ArgumentParser:
        """
        Generate an ArgumentParser from the configuration schema.

        Schema-backed options default to None so that the loader can tell
        an explicit flag apart from an environment or default value.
        """
        parser = ArgumentParser(
            prog="lfmc",
            description=description,
            epilog="""
Examples:
  lfmc -k YOUR_API_KEY -u rj
  lfmc --username rj --limit 10 --period 3month
  API_KEY=... USERNAME=rj lfmc --period overall --dry-run
            """,
        )

        for field_name, field_info in schema.model_fields.items():
            extra = _extra(field_info)
            cli_arg = extra.get("cli_arg")
            if not cli_arg:
                continue

            flags = [f"--{cli_arg.replace('_', '-')}"]
            if extra.get("cli_short"):
                flags.insert(0, extra["cli_short"])

            kwargs = {
                "dest": cli_arg,
                "help": f"{field_info.description} [env: {extra.get('env_var', field_name.upper())}]",
                "default": None,
            }
            if field_info.annotation is int:
                kwargs["type"] = int

            parser.add_argument(*flags, **kwargs)

        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Echo debug logging to the console",
        )
        parser.add_argument(
            "--log-file",
            default=DEFAULT_LOG_FILE,
            help=f"Debug log file path, empty to disable (default: {DEFAULT_LOG_FILE})",
        )
        parser.add_argument(
            "--env-file",
            default=None,
            help=f"dotenv file to read settings from (default: {DEFAULT_ENV_FILE})",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Validate the configuration and print the request URI without calling Last.fm",
        )
        parser.add_argument(
            "-V",
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )

        return parser


def _extra(field_info) -> dict:
    return field_info.json_schema_extra or {}


def _clean(value: Any) -> Any:
    """Strip strings; an explicit empty string is kept so validation can report it."""
    if isinstance(value, str):
        return value.strip()
    return value


def _load_from_dotenv_file(path: Union[str, Path]) -> None:
    """Load values from a dotenv file without overriding the environment."""
    if os.path.exists(path):
        load_dotenv(path, override=False)
        logger.debug(f"Loaded configuration from {path}")
    else:
        logger.debug(f"{path} not found, skipping")
