"""CLI command implementations for the seatplanner application.

This package contains subcommands for the seatplanner CLI, including:
- validate: Validate a configuration file
"""

from seatplanner.cli.commands.validate import (
    display_load_error,
    display_validation_result,
    validate_command,
)

__all__ = ["display_load_error", "display_validation_result", "validate_command"]
