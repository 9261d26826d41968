"""Template collection stored as one YAML file per template.

Contains:
- TemplateError / TemplateNotFoundError: Exceptions for template handling
- TemplateManager: Load, add, delete and look up templates in a directory
"""

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from commitkit.templates.models import DEFAULT_TEMPLATES, CommitTemplate


TEMPLATE_SUFFIX = ".yaml"


class TemplateError(Exception):
    """Raised when a template cannot be read or written."""

    pass


class TemplateNotFoundError(TemplateError):
    """Raised when a requested template does not exist."""

    pass


class TemplateManager:
    """Manages the templates stored in a template directory."""

    def __init__(self, template_dir: Union[str, Path]):
        self.template_dir = Path(template_dir).expanduser()
        self._templates: dict[str, CommitTemplate] = {}

        try:
            self.template_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise TemplateError(f"Failed to create template directory {self.template_dir}: {e}") from e

        self.load_templates()

    def _template_path(self, name: str) -> Path:
        return self.template_dir / f"{name}{TEMPLATE_SUFFIX}"

    def load_templates(self) -> None:
        """(Re)load all templates from the directory.

        Seeds the default templates if the directory holds none.
        """
        self._templates.clear()

        for path in sorted(self.template_dir.glob(f"*{TEMPLATE_SUFFIX}")):
            if path.is_file():
                template = self._load_template_file(path)
                self._templates[template.name] = template

        if not self._templates:
            for template in DEFAULT_TEMPLATES:
                self.add_template(template)

    def _load_template_file(self, path: Path) -> CommitTemplate:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise TemplateError(f"Failed to read template file {path}: {e}") from e

        if not isinstance(data, dict):
            raise TemplateError(f"Failed to parse template file {path}: expected a mapping")

        try:
            return CommitTemplate(**data)
        except ValidationError as e:
            raise TemplateError(f"Failed to parse template file {path}: {e}") from e

    def get_template(self, name: str) -> Optional[CommitTemplate]:
        """Get a template by name, or None if it does not exist."""
        return self._templates.get(name)

    def require_template(self, name: str) -> CommitTemplate:
        """Get a template by name.

        Raises:
            TemplateNotFoundError: If no template has that name.
        """
        template = self.get_template(name)
        if template is None:
            raise TemplateNotFoundError(f"Template '{name}' not found")
        return template

    def list_templates(self) -> list[CommitTemplate]:
        """Return all templates sorted by name."""
        return [self._templates[name] for name in sorted(self._templates)]

    def add_template(self, template: CommitTemplate) -> None:
        """Save a template, replacing any template with the same name."""
        path = self._template_path(template.name)
        try:
            with open(path, "w", encoding="utf-8") as f:
                yaml.dump(
                    template.model_dump(),
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    allow_unicode=True,
                )
        except OSError as e:
            raise TemplateError(f"Failed to write template file {path}: {e}") from e

        self._templates[template.name] = template

    def delete_template(self, name: str) -> bool:
        """Delete a template.

        Returns:
            True if the template existed and was removed, False otherwise.
        """
        if self._templates.pop(name, None) is None:
            return False

        path = self._template_path(name)
        if path.exists():
            try:
                path.unlink()
            except OSError as e:
                raise TemplateError(f"Failed to delete template file {path}: {e}") from e
        return True
