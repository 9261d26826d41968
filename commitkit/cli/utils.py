"""Shared utility functions for CLI commands."""

from pathlib import Path
from typing import Optional

import typer

from commitkit.config import CommitKitConfig, ConfigError, load_config


def load_config_or_exit(config_path: Optional[Path] = None) -> CommitKitConfig:
    """Load the configuration, exiting with an error message on failure."""
    try:
        return load_config(config_path)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def echo_message_block(message: str, title: str = "Commit Message") -> None:
    """Print a message between separator lines."""
    typer.echo(f"--- {title} ---")
    typer.echo(message)
    typer.echo("-" * (len(title) + 8))


def verbose_echo(verbose: bool, text: str) -> None:
    """Print a progress line to stderr when verbose output is enabled."""
    if verbose:
        typer.echo(text, err=True)
