"""Commit message assembly.

Builds the final message text from its typed parts:

    <type>(<scope>): <subject>

    <body>

    <footer>
"""

import re
from typing import Optional

from pydantic import BaseModel, field_validator

from commitkit.emoji import decorate


_TYPE_RE = re.compile(r"\w+")
_SCOPE_RE = re.compile(r"[\w-]+")


class CommitFields(BaseModel):
    """Typed parts of a single commit message.

    Attributes:
        type: Conventional commit type (feat, fix, docs, etc.).
        scope: Optional scope rendered in parentheses after the type.
        subject: Single-line description.
        body: Optional free-form body, internal newlines preserved.
        footer: Optional footer (e.g., "Closes #12").
    """

    type: str
    scope: Optional[str] = None
    subject: str
    body: Optional[str] = None
    footer: Optional[str] = None

    @field_validator("type")
    @classmethod
    def type_must_be_word(cls, v: str) -> str:
        """Ensure type is a single word token."""
        if not _TYPE_RE.fullmatch(v):
            raise ValueError(f"Invalid commit type: {v!r}")
        return v

    @field_validator("scope")
    @classmethod
    def scope_must_be_token(cls, v: Optional[str]) -> Optional[str]:
        """Ensure scope only uses word characters and hyphens."""
        if not v:
            return None
        if not _SCOPE_RE.fullmatch(v):
            raise ValueError(f"Invalid scope: {v!r}")
        return v

    def render(self, use_emoji: bool = False) -> str:
        """Render these fields as a commit message."""
        return build_commit_message_with_emoji(
            self.type,
            self.scope or "",
            self.subject,
            self.body or "",
            self.footer or "",
            use_emoji,
        )


def build_commit_message(
    commit_type: str,
    scope: str,
    subject: str,
    body: str,
    footer: str,
) -> str:
    """Build a commit message from its components.

    No validation is done here; an empty subject yields a header ending in ": ".

    Args:
        commit_type: The commit type.
        scope: Scope, omitted from the header when empty.
        subject: Subject line text.
        body: Body text, appended verbatim after a blank line when non-empty.
        footer: Footer text, appended after a blank line when non-empty.

    Returns:
        The assembled commit message.
    """
    header = commit_type
    if scope:
        header += f"({scope})"
    message = f"{header}: {subject}"

    if body:
        message += "\n\n" + body

    if footer:
        # A body that already ends with a newline only needs one more
        if body and body.endswith("\n"):
            message += "\n"
        else:
            message += "\n\n"
        message += footer

    return message


def build_commit_message_with_emoji(
    commit_type: str,
    scope: str,
    subject: str,
    body: str,
    footer: str,
    use_emoji: bool,
) -> str:
    """Build a commit message and optionally decorate it with the type's emoji."""
    message = build_commit_message(commit_type, scope, subject, body, footer)
    return decorate(commit_type, message, use_emoji)
