"""Main CLI command for composing and committing a message."""

from pathlib import Path
from typing import Optional

import typer

from commitkit import __version__
from commitkit.changelog import ChangelogError, ChangelogManager
from commitkit.config import CommitKitConfig
from commitkit.git import (
    GitError,
    NoStagedChangesError,
    has_staged_changes,
    is_git_repo,
    run_git_commit,
)
from commitkit.message import CommitFields
from commitkit.prompt import Prompter
from commitkit.templates import (
    TemplateError,
    TemplateManager,
    collect_placeholders,
    fill_template,
)
from commitkit.cli.utils import echo_message_block, load_config_or_exit, verbose_echo


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"commitkit {__version__}")
        raise typer.Exit(0)


def collect_standard_fields(prompter: Prompter, config: CommitKitConfig) -> CommitFields:
    """Ask for type, scope, subject, body and footer."""
    commit_type = prompter.prompt_prefix(config.prefixes)
    scope = prompter.prompt_scope(config.scopes)
    subject = prompter.prompt_subject(config.max_subject_len)
    body = prompter.prompt_body()
    footer = prompter.prompt_footer()
    return CommitFields(
        type=commit_type,
        scope=scope or None,
        subject=subject,
        body=body or None,
        footer=footer or None,
    )


def collect_template_fields(
    prompter: Prompter,
    config: CommitKitConfig,
    template_name: str,
) -> CommitFields:
    """Fill a named template interactively.

    Raises:
        TemplateNotFoundError: If the template does not exist.
    """
    manager = TemplateManager(config.templates_path())
    template = manager.require_template(template_name)

    typer.echo(f"Using template: {template.name} - {template.description}")
    values = prompter.prompt_template_values(collect_placeholders(template))
    filled = fill_template(template, values, default_type=config.default_type)
    return filled.to_fields()


def update_changelog_for(fields: CommitFields, config: CommitKitConfig, verbose: bool) -> None:
    """Add a changelog entry for a commit in the current directory."""
    verbose_echo(verbose, "Updating changelog...")
    cwd = Path.cwd()
    manager = ChangelogManager(cwd / config.changelog_file, cwd.name)
    manager.add_entry(fields.type, fields.scope, fields.subject, fields.body)
    verbose_echo(verbose, "Changelog updated successfully.")


def main_command(
    ctx: typer.Context,
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Print the message instead of committing",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show progress output",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: .commitkit.yaml in current or home directory)",
    ),
    emoji: bool = typer.Option(
        False,
        "--emoji",
        help="Decorate the message with the commit type's emoji",
    ),
    template: Optional[str] = typer.Option(
        None,
        "--template",
        "-t",
        help="Compose the message from a named template",
    ),
    changelog: bool = typer.Option(
        False,
        "--changelog",
        help="Add an entry to the changelog after committing",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Compose a conventional commit message interactively and commit it."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    config = load_config_or_exit(config_path)

    use_emoji = emoji or config.use_emoji
    update_changelog = changelog or config.update_changelog

    try:
        if not is_git_repo():
            raise GitError("Not in a git repository")

        if not dry_run and not has_staged_changes():
            raise NoStagedChangesError(
                "No staged changes to commit. Stage your changes with 'git add' first."
            )

        verbose_echo(verbose, "Starting interactive commit process...")
        prompter = Prompter()
        if template:
            fields = collect_template_fields(prompter, config, template)
        else:
            fields = collect_standard_fields(prompter, config)

        message = fields.render(use_emoji=use_emoji)
        verbose_echo(verbose, "Commit message generated successfully.")

        if dry_run:
            echo_message_block(message)
            verbose_echo(verbose, "Dry run mode: No commit was made.")
            return

        verbose_echo(verbose, "Executing git commit...")
        output = run_git_commit(message, config.sign_off_commits)
        if output:
            typer.echo(output)
        typer.echo("Successfully committed changes!")

        if update_changelog:
            update_changelog_for(fields, config, verbose)

    except NoStagedChangesError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except TemplateError as e:
        typer.echo(f"Template error: {e}", err=True)
        raise typer.Exit(1)
    except ChangelogError as e:
        typer.echo(f"Changelog error: {e}", err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
