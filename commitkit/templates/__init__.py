"""Commit message templates for commitkit.

This package provides:
- models: CommitTemplate, FilledTemplate, DEFAULT_TEMPLATES
- fill: fill_placeholders, collect_placeholders, fill_template
- manager: TemplateManager, TemplateError, TemplateNotFoundError
"""

# Models
from commitkit.templates.models import (
    DEFAULT_TEMPLATES,
    CommitTemplate,
    FilledTemplate,
)

# Filling
from commitkit.templates.fill import (
    collect_placeholders,
    fill_placeholders,
    fill_template,
)

# Collection
from commitkit.templates.manager import (
    TemplateError,
    TemplateManager,
    TemplateNotFoundError,
)


__all__ = [
    # Models
    "CommitTemplate",
    "FilledTemplate",
    "DEFAULT_TEMPLATES",
    # Filling
    "fill_placeholders",
    "collect_placeholders",
    "fill_template",
    # Collection
    "TemplateManager",
    "TemplateError",
    "TemplateNotFoundError",
]
