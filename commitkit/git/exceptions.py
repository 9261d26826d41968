"""Exceptions raised by the git wrapper.

- GitError: Base class; also used for "not a repository" and missing git
- GitCommandError: A git invocation exited with a failure status
- NoStagedChangesError: Nothing is staged for the commit
"""

from typing import Sequence


class GitError(Exception):
    """Base exception for git failures."""

    pass


class GitCommandError(GitError):
    """A git command exited with a failure status."""

    def __init__(self, command: Sequence[str], stderr: str = "", returncode: int = 1):
        self.command = list(command)
        self.stderr = stderr.strip()
        self.returncode = returncode
        message = f"Git command failed: git {' '.join(self.command)}"
        if self.stderr:
            message += f"\n{self.stderr}"
        super().__init__(message)


class NoStagedChangesError(GitError):
    """Raised when a commit is attempted with an empty index."""

    pass
