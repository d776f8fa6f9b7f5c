"""CLI command implementations for the sheetcut application.

This package contains subcommands for the sheetcut CLI, including:
- validate: Validate a job file
"""

from sheetcut.cli.commands.validate import display_load_error, validate

__all__ = ["display_load_error", "validate"]
