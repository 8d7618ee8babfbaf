"""CLI entry point for gemmit.

This module provides the main CLI application that combines the default
commit flow with the configuration subcommands.
"""

import typer

from gemmit.cli.config import config_app
from gemmit.cli.main import main_command

# Main application
app = typer.Typer(
    name="gemmit",
    help="gemmit: AI-assisted interactive git commits",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Set the main callback for default behavior
app.callback(invoke_without_command=True)(main_command)


__all__ = ["app"]
