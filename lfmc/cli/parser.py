"""
CLI argument parser module.

The parser is generated from the configuration schema, so every config
field gets a flag that mirrors its environment variable.
"""

from ..config.loader import ConfigLoader


def create_argument_parser():
    """Create and configure the argument parser."""
    return ConfigLoader.generate_cli_parser()
