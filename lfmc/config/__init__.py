"""
Configuration management for lfmc.

This module provides centralized configuration handling with support for
environment variables, a dotenv file under ~/.config/lfmc and CLI overrides.

Uses a schema-driven approach with Pydantic for validation.
"""

from .env import Config, ConfigError, build_uri
from .schema import ConfigSchema
from .loader import ConfigLoader

__all__ = ["Config", "ConfigError", "build_uri", "ConfigSchema", "ConfigLoader"]
