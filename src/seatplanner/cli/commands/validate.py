"""Validate command for checking configuration files.

This module provides the `validate` command that checks a JSON configuration
file for errors and warnings, including seating advisories.
"""

from pathlib import Path
from typing import Annotated

import typer

from seatplanner.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def _echo_errors(result: ValidationResult) -> None:
    typer.echo("Errors:", err=True)
    for error in result.errors:
        typer.echo(f"  {error.path or '(root)'}: {error.message}", err=True)
        if error.value is not None:
            typer.echo(f"    Value: {error.value!r}", err=True)


def display_load_error(error: ConfigError) -> None:
    """Print why a configuration could not be loaded."""
    _echo_errors(ValidationResult.from_config_error(error))


def display_validation_result(result: ValidationResult) -> None:
    """Print errors, warnings and a closing verdict."""
    if result.errors:
        _echo_errors(result)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a seat plan configuration file.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        seatplanner validate church.json
    """
    typer.echo(f"Validating {config_file}...\n")

    try:
        result = validate_config(load_config(config_file))
    except ConfigError as e:
        result = ValidationResult.from_config_error(e)

    display_validation_result(result)
    raise typer.Exit(code=result.exit_code)
