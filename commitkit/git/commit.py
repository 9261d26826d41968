"""Committing and history access.

Contains:
- has_staged_changes: Whether the index differs from HEAD
- run_git_commit: Create a commit with a given message
- get_log_lines: Commit history lines for statistics
"""

import subprocess
from pathlib import Path
from typing import Optional, Union

from commitkit.git.exceptions import GitCommandError, GitError
from commitkit.git.runner import _run_git_command

# hash|author|email|date|subject
LOG_FORMAT = "--pretty=format:%h|%an|%ae|%ad|%s"

# stderr of "git log" on a branch with no commits (current and older git)
EMPTY_HISTORY_MARKERS = ("does not have any commits yet", "bad default revision 'HEAD'")


def has_staged_changes() -> bool:
    """Check if there are staged changes ready to commit.

    Raises:
        GitError: If git cannot be run.
    """
    try:
        result = subprocess.run(
            ["git", "diff", "--cached", "--quiet"],
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")

    # Exit code 1 means the index differs from HEAD
    if result.returncode not in (0, 1):
        raise GitCommandError(["diff", "--cached", "--quiet"], result.stderr or "", result.returncode)
    return result.returncode == 1


def run_git_commit(message: str, sign_off: bool = False) -> str:
    """Commit the staged changes with the given message.

    Args:
        message: Full commit message.
        sign_off: Add a Signed-off-by trailer (git commit -s).

    Returns:
        The output of git commit.

    Raises:
        GitError: If the commit fails.
    """
    args = ["commit", "-m", message]
    if sign_off:
        args.append("-s")
    return _run_git_command(args)


def get_log_lines(days: Optional[int] = None, cwd: Optional[Union[str, Path]] = None) -> list[str]:
    """Get commit history as "hash|author|email|date|subject" lines.

    Args:
        days: Only include commits from the last N days.
        cwd: Repository directory.

    Returns:
        List of log lines, empty if the repository has no commits.

    Raises:
        GitError: If git fails for any other reason.
    """
    args = ["log", LOG_FORMAT, "--date=short"]
    if days is not None:
        args.append(f"--since={days} days ago")

    try:
        output = _run_git_command(args, cwd=cwd)
    except GitCommandError as e:
        if any(marker in e.stderr for marker in EMPTY_HISTORY_MARKERS):
            return []
        raise
    if not output:
        return []
    return output.split("\n")
