"""CLI commands for changelog maintenance and commit statistics."""

from pathlib import Path
from typing import Optional

import typer

from commitkit.changelog import ChangelogError, ChangelogNotFoundError, update_changelog_version
from commitkit.git import GitError, get_repo_root
from commitkit.stats import collect_commit_stats, format_summary
from commitkit.cli.utils import load_config_or_exit

# Subcommand group for changelog management
changelog_app = typer.Typer(
    name="changelog",
    help="Maintain the project changelog",
    add_completion=False,
)


@changelog_app.command("release")
def changelog_release(
    version: str = typer.Argument(..., help="Version to release, e.g. 1.2.0"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config file"),
) -> None:
    """Move the Unreleased entries under a new version header."""
    config = load_config_or_exit(config_path)
    changelog_path = Path.cwd() / config.changelog_file

    try:
        promoted = update_changelog_version(changelog_path, version)
    except ChangelogNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except ChangelogError as e:
        typer.echo(f"Changelog error: {e}", err=True)
        raise typer.Exit(1)

    if promoted:
        typer.echo(f"✓ Released {version} in {changelog_path.name}")
    else:
        typer.echo(f"No '## Unreleased' section in {changelog_path.name}; nothing to release.", err=True)


def stats_command(
    days: Optional[int] = typer.Option(
        None,
        "--days",
        help="Number of days to analyze (default: all history)",
    ),
) -> None:
    """Show commit statistics for the current repository."""
    try:
        repo_root = get_repo_root()
        stats = collect_commit_stats(repo_root, days)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(format_summary(stats, days))
