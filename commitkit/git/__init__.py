"""Git wrapper module for commitkit.

This package provides:
- exceptions: GitError, GitCommandError, NoStagedChangesError
- runner: _run_git_command, get_repo_root, is_git_repo
- commit: has_staged_changes, run_git_commit, get_log_lines
"""

# Exceptions
from commitkit.git.exceptions import (
    GitCommandError,
    GitError,
    NoStagedChangesError,
)

# Runner utilities
from commitkit.git.runner import (
    _run_git_command,
    get_repo_root,
    is_git_repo,
)

# Commit and history utilities
from commitkit.git.commit import (
    LOG_FORMAT,
    get_log_lines,
    has_staged_changes,
    run_git_commit,
)


__all__ = [
    # Exceptions
    "GitCommandError",
    "GitError",
    "NoStagedChangesError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    "is_git_repo",
    # Commit
    "LOG_FORMAT",
    "get_log_lines",
    "has_staged_changes",
    "run_git_commit",
]
