"""Data models for commitkit templates.

Contains:
- CommitTemplate: Pydantic model for a named commit message template
- FilledTemplate: Result of filling a template with values
- DEFAULT_TEMPLATES: Templates seeded into an empty collection
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, field_validator

from commitkit.message import CommitFields


class CommitTemplate(BaseModel):
    """A reusable commit message template.

    Attributes:
        name: Unique key of the template within a collection.
        description: Short human description shown in listings.
        subject_template: Subject text with {placeholder} tokens.
        body_template: Optional body text with {placeholder} tokens.
        footer_template: Optional footer text with {placeholder} tokens.
    """

    name: str
    description: str = ""
    subject_template: str
    body_template: Optional[str] = None
    footer_template: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """Ensure name is usable as a file stem."""
        v = v.strip()
        if not v:
            raise ValueError("Template name cannot be empty")
        if "/" in v or "\\" in v:
            raise ValueError(f"Template name cannot contain path separators: {v!r}")
        return v


@dataclass
class FilledTemplate:
    """A template after placeholder substitution."""

    type: str
    scope: str
    subject: str
    body: str
    footer: str

    def to_fields(self) -> CommitFields:
        """Convert to CommitFields for assembly and changelog updates."""
        return CommitFields(
            type=self.type,
            scope=self.scope or None,
            subject=self.subject,
            body=self.body or None,
            footer=self.footer or None,
        )


DEFAULT_TEMPLATES = [
    CommitTemplate(
        name="feature",
        description="Template for new features",
        subject_template="add {feature_name}",
        body_template=(
            "This change adds the ability to {description}\n\n"
            "The following functionality is now available:\n"
            "- {point_1}\n"
            "- {point_2}"
        ),
        footer_template="Closes #{issue_number}",
    ),
    CommitTemplate(
        name="bugfix",
        description="Template for bug fixes",
        subject_template="fix {issue_description}",
        body_template="This fixes an issue where {problem_description}\n\nRoot cause: {root_cause}",
        footer_template="Fixes #{issue_number}",
    ),
    CommitTemplate(
        name="refactor",
        description="Template for code refactoring",
        subject_template="refactor {component_name}",
        body_template=(
            "This refactors {component_name} to improve {goal}\n\n"
            "Changes:\n"
            "- {change_1}\n"
            "- {change_2}"
        ),
        footer_template=None,
    ),
]
