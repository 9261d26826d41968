"""CLI commands for commit template management."""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from commitkit.templates import (
    CommitTemplate,
    TemplateError,
    TemplateManager,
    collect_placeholders,
)
from commitkit.cli.utils import load_config_or_exit

# Subcommand group for template management
template_app = typer.Typer(
    name="template",
    help="Manage commit message templates",
    add_completion=False,
)


def _template_manager(config_path: Optional[Path]) -> TemplateManager:
    config = load_config_or_exit(config_path)
    try:
        return TemplateManager(config.templates_path())
    except TemplateError as e:
        typer.echo(f"Template error: {e}", err=True)
        raise typer.Exit(1)


@template_app.command("list")
def template_list(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config file"),
) -> None:
    """List available templates."""
    manager = _template_manager(config_path)
    templates = manager.list_templates()

    typer.echo(f"Templates in {manager.template_dir}:")
    typer.echo()
    for template in templates:
        typer.echo(f"  • {template.name}")
        if template.description:
            typer.echo(f"    {template.description}")
    typer.echo()
    typer.echo("Use 'commitkit --template <name>' to commit with a template.")


@template_app.command("show")
def template_show(
    name: str = typer.Argument(..., help="Template name"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config file"),
) -> None:
    """Show a template and the values it asks for."""
    manager = _template_manager(config_path)
    template = manager.get_template(name)
    if template is None:
        typer.echo(f"Template '{name}' not found", err=True)
        raise typer.Exit(1)

    typer.echo(f"Template: {template.name}")
    typer.echo("=" * 50)
    typer.echo(f"Description: {template.description}")
    typer.echo()
    typer.echo("Subject:")
    typer.echo(f"  {template.subject_template}")
    if template.body_template:
        typer.echo()
        typer.echo("Body:")
        typer.echo("  " + template.body_template.replace("\n", "\n  "))
    if template.footer_template:
        typer.echo()
        typer.echo("Footer:")
        typer.echo(f"  {template.footer_template}")

    placeholders = collect_placeholders(template)
    if placeholders:
        typer.echo()
        typer.echo(f"Placeholders: {', '.join(placeholders)}")


@template_app.command("add")
def template_add(
    name: str = typer.Argument(..., help="Template name"),
    subject: str = typer.Option(..., "--subject", "-s", help="Subject template, e.g. 'feat({area}): add {thing}'"),
    description: str = typer.Option("", "--description", "-d", help="Short description"),
    body: Optional[str] = typer.Option(None, "--body", "-b", help="Body template (use \\n for new lines)"),
    footer: Optional[str] = typer.Option(None, "--footer", "-f", help="Footer template"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config file"),
) -> None:
    """Add or replace a template."""
    manager = _template_manager(config_path)
    try:
        template = CommitTemplate(
            name=name,
            description=description,
            subject_template=subject,
            body_template=body.replace("\\n", "\n") if body else None,
            footer_template=footer,
        )
        manager.add_template(template)
    except ValidationError as e:
        typer.echo(f"Invalid template: {e}", err=True)
        raise typer.Exit(1)
    except TemplateError as e:
        typer.echo(f"Template error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Template '{template.name}' saved")


@template_app.command("remove")
def template_remove(
    name: str = typer.Argument(..., help="Template name"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config file"),
) -> None:
    """Remove a template."""
    manager = _template_manager(config_path)
    try:
        removed = manager.delete_template(name)
    except TemplateError as e:
        typer.echo(f"Template error: {e}", err=True)
        raise typer.Exit(1)

    if not removed:
        typer.echo(f"Template '{name}' not found", err=True)
        raise typer.Exit(1)
    typer.echo(f"Removed template: {name}")
