"""CLI command implementations for the cargoscene application.

This package contains subcommands for the cargoscene CLI, including:
- validate: Validate a layout request file
"""

from cargoscene.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
