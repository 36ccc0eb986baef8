"""CLI command implementations for the roomfit application.

This package contains subcommands for the roomfit CLI, including:
- validate: Validate a scenario file
- watch: Re-evaluate a scenario while simulated detection runs
"""

from roomfit.cli.commands.validate import display_load_error, validate_command
from roomfit.cli.commands.watch import run_watch, watch_command

__all__ = ["display_load_error", "run_watch", "validate_command", "watch_command"]
