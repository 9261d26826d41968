"""Interactive prompts for composing a commit message."""

from typing import Iterable

import typer

from commitkit.config import Prefix


class Prompter:
    """Collects commit message parts from the terminal."""

    def prompt_prefix(self, prefixes: list[Prefix]) -> str:
        """Ask for the commit type."""
        typer.echo("Select commit type:")
        for i, prefix in enumerate(prefixes, 1):
            typer.echo(f"  {i}. {prefix.title}: {prefix.description}")

        choice = typer.prompt(f"Enter a number (1-{len(prefixes)})", type=int, default=1)
        if choice < 1 or choice > len(prefixes):
            typer.echo("Invalid selection. Using default type.", err=True)
            return prefixes[0].title
        return prefixes[choice - 1].title

    def prompt_scope(self, scopes: list[str]) -> str:
        """Ask for an optional scope. Returns "" when skipped."""
        if not scopes:
            return ""

        typer.echo("Select scope (optional):")
        typer.echo("  0. None")
        for i, scope in enumerate(scopes, 1):
            typer.echo(f"  {i}. {scope}")

        choice = typer.prompt(f"Enter a number (0-{len(scopes)})", type=int, default=0)
        if choice < 1 or choice > len(scopes):
            return ""
        return scopes[choice - 1]

    def prompt_subject(self, max_length: int) -> str:
        """Ask for the subject until a non-empty one within max_length is given."""
        while True:
            subject = typer.prompt(f"Enter commit subject (max {max_length} characters)").strip()
            if not subject:
                typer.echo("Subject cannot be empty.", err=True)
            elif len(subject) > max_length:
                typer.echo(f"Subject is too long ({len(subject)} > {max_length}).", err=True)
            else:
                return subject

    def prompt_body(self) -> str:
        """Ask for a multi-line body, finished by an empty line."""
        typer.echo("Enter commit body (empty line to finish, leave empty to skip):")
        lines = []
        while True:
            line = typer.prompt("", default="", show_default=False, prompt_suffix="")
            if not line.strip():
                break
            lines.append(line)
        return "\n".join(lines).strip()

    def prompt_footer(self) -> str:
        """Ask for an optional footer."""
        return typer.prompt("Enter commit footer (optional)", default="", show_default=False).strip()

    def prompt_custom(self, message: str) -> str:
        """Ask for a free-form value."""
        return typer.prompt(message, default="", show_default=False)

    def prompt_template_values(self, names: Iterable[str]) -> dict[str, str]:
        """Ask for a value for each template placeholder."""
        return {name: self.prompt_custom(f"Enter value for {name}") for name in names}
