"""CHANGELOG.md maintenance for commitkit.

The changelog is edited as a plain list of lines. Version sections start with
a "## " header; the first such header from the top is the active section and
new entries are always inserted directly below it (newest first).

Contains:
- ChangelogError / ChangelogNotFoundError: Exceptions for changelog handling
- ChangelogManager: Add entries and promote the Unreleased section
- add_changelog_entry / update_changelog_version: Functional wrappers
"""

from datetime import date
from pathlib import Path
from typing import Optional, Union

from commitkit.emoji import get_changelog_label


SECTION_PREFIX = "## "
UNRELEASED = "Unreleased"

CHANGELOG_HEADER = """# Changelog

All notable changes to {project_name} will be documented in this file.

The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.0.0/),
and this project adheres to [Semantic Versioning](https://semver.org/spec/v2.0.0.html).

"""


class ChangelogError(Exception):
    """Raised when the changelog cannot be read or written."""

    pass


class ChangelogNotFoundError(ChangelogError):
    """Raised when an operation needs an existing changelog and there is none."""

    pass


def _today() -> str:
    return date.today().strftime("%Y-%m-%d")


def format_section_header(label: str) -> str:
    """Format a dated section header, e.g. "## 1.2.0 (2024-05-01)"."""
    return f"{SECTION_PREFIX}{label} ({_today()})"


def format_entry(
    commit_type: str,
    scope: Optional[str],
    subject: str,
    body: Optional[str] = None,
) -> str:
    """Format a changelog entry for a commit.

    Example:
        - **Fixed** (core): resolve crash on startup
          - null config no longer dereferenced

    Args:
        commit_type: Commit type, mapped to its changelog label.
        scope: Optional scope shown after the label.
        subject: Commit subject.
        body: Optional body; each non-blank line becomes a sub-bullet.

    Returns:
        The entry text (may span several lines).
    """
    entry = f"- **{get_changelog_label(commit_type)}**"
    if scope:
        entry += f" ({scope})"
    entry += f": {subject}"

    if body:
        for line in body.splitlines():
            if line.strip():
                entry += f"\n  - {line.strip()}"

    return entry


class ChangelogManager:
    """Reads, edits and rewrites a changelog file."""

    def __init__(self, path: Union[str, Path], project_name: str, version: Optional[str] = None):
        self.path = Path(path)
        self.project_name = project_name
        self.version = version

    def with_version(self, version: str) -> "ChangelogManager":
        """Set the version used when a new section has to be created."""
        self.version = version
        return self

    def _header_lines(self) -> tuple[list[str], bool]:
        """Lines of the standard header for a changelog that does not exist yet."""
        return self._split_lines(CHANGELOG_HEADER.format(project_name=self.project_name))

    def _read_lines(self) -> tuple[list[str], bool]:
        """Read the file as a list of lines plus whether it ended with a newline."""
        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ChangelogError(f"Failed to read changelog file {self.path}: {e}") from e
        return self._split_lines(content)

    @staticmethod
    def _split_lines(content: str) -> tuple[list[str], bool]:
        if not content:
            return [], False

        trailing_newline = content.endswith("\n")
        lines = content.split("\n")
        if trailing_newline:
            lines.pop()
        return lines, trailing_newline

    def _write_lines(self, lines: list[str], trailing_newline: bool) -> None:
        content = "\n".join(lines)
        if trailing_newline and lines:
            content += "\n"
        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ChangelogError(f"Failed to write changelog file {self.path}: {e}") from e

    def add_entry(
        self,
        commit_type: str,
        scope: Optional[str],
        subject: str,
        body: Optional[str] = None,
    ) -> None:
        """Add an entry for a commit at the top of the active section.

        Creates the changelog with its standard header if it does not exist,
        and a new section (current version or "Unreleased") if it has none.

        Raises:
            ChangelogError: If the file cannot be read or written.
        """
        if self.path.exists():
            lines, trailing_newline = self._read_lines()
        else:
            lines, trailing_newline = self._header_lines()
        entry = format_entry(commit_type, scope, subject, body)

        section_index = next(
            (i for i, line in enumerate(lines) if line.startswith(SECTION_PREFIX)),
            None,
        )

        if section_index is not None:
            lines[section_index + 1:section_index + 1] = ["", entry]
        else:
            lines.append(format_section_header(self.version or UNRELEASED))
            lines.append("")
            lines.append(entry)

        self._write_lines(lines, trailing_newline)

    def update_version(self, new_version: str) -> bool:
        """Turn the Unreleased section into a dated release section.

        Entries under "## Unreleased" move under "## <new_version> (<date>)" and
        a fresh, empty "## Unreleased" header is placed above it.

        Returns:
            True if an Unreleased section was promoted. False if there was
            none, in which case the file content is left unchanged.

        Raises:
            ChangelogNotFoundError: If the changelog file does not exist.
            ChangelogError: If the file cannot be read or written.
        """
        if not self.path.exists():
            raise ChangelogNotFoundError(f"Changelog file does not exist: {self.path}")

        lines, trailing_newline = self._read_lines()
        promoted = False

        for i, line in enumerate(lines):
            if line.startswith(f"{SECTION_PREFIX}{UNRELEASED}"):
                lines[i] = format_section_header(new_version)
                lines[i:i] = [f"{SECTION_PREFIX}{UNRELEASED}", ""]
                promoted = True
                break

        self._write_lines(lines, trailing_newline)
        return promoted


def add_changelog_entry(
    path: Union[str, Path],
    project_name: str,
    commit_type: str,
    scope: Optional[str],
    subject: str,
    body: Optional[str] = None,
    version: Optional[str] = None,
) -> None:
    """Add a commit entry to the changelog at path."""
    ChangelogManager(path, project_name, version).add_entry(commit_type, scope, subject, body)


def update_changelog_version(path: Union[str, Path], new_version: str) -> bool:
    """Promote the Unreleased section of the changelog at path to new_version."""
    return ChangelogManager(path, project_name="").update_version(new_version)
