"""CLI commands used by and for git hooks."""

from pathlib import Path
from typing import Optional

import typer

from commitkit.hooks import (
    COMMIT_MSG,
    PREPARE_COMMIT_MSG,
    GitHookManager,
    HookError,
    prepare_message,
)
from commitkit.validation import VALIDATION_MESSAGES, validate_file
from commitkit.cli.utils import load_config_or_exit

# Subcommand group for hook management
hooks_app = typer.Typer(
    name="hooks",
    help="Install or remove commitkit git hooks",
    add_completion=False,
)

CONFIG_OPTION_HELP = "Path to config file (default: .commitkit.yaml in current or home directory)"


def _hook_manager() -> GitHookManager:
    repo_root = GitHookManager.find_repo_root(Path.cwd())
    if repo_root is None:
        typer.echo("Error: Not in a git repository", err=True)
        raise typer.Exit(1)
    return GitHookManager(repo_root)


def validate_command(
    message_file: Path = typer.Argument(
        ...,
        help="File containing the commit message (as passed to the commit-msg hook)",
    ),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_OPTION_HELP),
) -> None:
    """Validate a commit message file against the conventional commit format."""
    config = load_config_or_exit(config_path)

    kind = validate_file(message_file, config.validation_rules())
    if kind is not None:
        typer.echo(f"Error: {VALIDATION_MESSAGES[kind]}", err=True)
        raise typer.Exit(1)

    typer.echo("Commit message is valid.")


def prepare_msg_command(
    message: str = typer.Argument(
        ...,
        help="The commit message git is about to use",
    ),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_OPTION_HELP),
) -> None:
    """Print the message converted to conventional format (prepare-commit-msg hook)."""
    config = load_config_or_exit(config_path)
    typer.echo(prepare_message(message, config.types, config.use_emoji))


@hooks_app.command("install")
def hooks_install(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="List the installed hooks"),
) -> None:
    """Install the prepare-commit-msg and commit-msg hooks."""
    manager = _hook_manager()
    try:
        manager.install_prepare_commit_msg_hook()
        manager.install_commit_msg_hook()
    except HookError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Git hooks installed successfully!")
    if verbose:
        typer.echo("Installed hooks:")
        typer.echo(f"  - {PREPARE_COMMIT_MSG}: For automatically formatting messages")
        typer.echo(f"  - {COMMIT_MSG}: For validating commit messages")


@hooks_app.command("uninstall")
def hooks_uninstall() -> None:
    """Remove the commitkit hooks."""
    manager = _hook_manager()
    try:
        removed = [name for name in (PREPARE_COMMIT_MSG, COMMIT_MSG) if manager.remove_hook(name)]
    except HookError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if removed:
        typer.echo(f"Removed hooks: {', '.join(removed)}")
    else:
        typer.echo("No commitkit hooks were installed.")


@hooks_app.command("status")
def hooks_status() -> None:
    """Show which commitkit hooks are installed."""
    manager = _hook_manager()
    for name in (PREPARE_COMMIT_MSG, COMMIT_MSG):
        state = "installed" if manager.is_hook_installed(name) else "not installed"
        typer.echo(f"  {name}: {state}")
