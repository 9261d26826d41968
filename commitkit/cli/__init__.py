"""CLI entry point for commitkit.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from commitkit.cli.changelog import changelog_app, stats_command
from commitkit.cli.hooks import hooks_app, prepare_msg_command, validate_command
from commitkit.cli.main import main_command
from commitkit.cli.template import template_app

# Main application
app = typer.Typer(
    name="commitkit",
    help="commitkit: conventional commit composer and validator",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(hooks_app, name="hooks")
app.add_typer(template_app, name="template")
app.add_typer(changelog_app, name="changelog")

# Add individual commands
app.command("validate")(validate_command)
app.command("prepare-msg")(prepare_msg_command)
app.command("stats")(stats_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "hooks_app",
    "template_app",
    "changelog_app",
    "main_command",
    "validate_command",
    "prepare_msg_command",
    "stats_command",
]
