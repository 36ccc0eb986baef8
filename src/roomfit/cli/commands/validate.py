"""The ``validate`` command: load a scenario and report what is wrong with it."""

from collections.abc import Iterator
from pathlib import Path
from typing import Annotated, Any

import typer

from roomfit.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    scenario_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON scenario file to validate"),
    ],
) -> None:
    """Validate a scenario file.

    Exit codes:
        0 - Scenario is valid with no warnings
        1 - Scenario has errors (cannot be used)
        2 - Scenario is valid but has warnings

    Example:
        roomfit validate living-room.json
    """
    typer.echo(f"Validating {scenario_file}...\n")

    try:
        config = load_config(scenario_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo("\nValidation failed.", err=True)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _report(result)
    raise typer.Exit(code=result.exit_code)


def display_load_error(error: ConfigError) -> None:
    """Write a scenario loading error to stderr."""
    typer.echo("Errors:", err=True)
    for line in _load_error_lines(error):
        typer.echo(line, err=True)


def _load_error_lines(error: ConfigError) -> Iterator[str]:
    if error.error_type == "file_not_found":
        yield f"  File not found: {error.path}"
    elif error.error_type == "json_parse":
        yield "  Invalid JSON syntax"
        for detail in error.details:
            yield (
                f"    Line {detail.get('line', '?')}, Column {detail.get('column', '?')}: "
                f"{detail.get('message', 'Unknown error')}"
            )
    elif error.error_type == "validation":
        for detail in error.details:
            yield from _issue_lines(
                detail.get("path", "unknown"),
                detail.get("message", "Unknown error"),
                detail.get("value"),
            )
    else:
        yield f"  {error.message}"


def _issue_lines(path: str, message: str, value: Any = None) -> Iterator[str]:
    yield f"  {path}: {message}"
    if value is not None and not isinstance(value, (dict, list)):
        yield f"    Value: {value!r}"


def _report(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for issue in result.errors:
            for line in _issue_lines(issue.path, issue.message, issue.value):
                typer.echo(line, err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for issue in result.warnings:
            typer.echo(f"  {issue.path}: {issue.message}")
            if issue.suggestion:
                typer.echo(f"    Suggestion: {issue.suggestion}")
        typer.echo()

    errors, warnings = len(result.errors), len(result.warnings)
    if errors:
        typer.echo(
            f"Validation failed: {errors} error(s), {warnings} warning(s)", err=True
        )
    elif warnings:
        typer.echo(f"Validation passed with {warnings} warning(s)")
    else:
        typer.echo("Validation passed. Scenario is valid.")
