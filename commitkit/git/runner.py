"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the current git repository
- is_git_repo: Check whether the working directory is inside a repository
"""

import subprocess
from pathlib import Path
from typing import Optional, Union

from commitkit.git.exceptions import GitCommandError, GitError


def _run_git_command(args: list[str], cwd: Optional[Union[str, Path]] = None) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        cwd: Directory to run git in (defaults to the current directory).

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
            cwd=cwd,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        raise GitCommandError(args, e.stderr or "", e.returncode) from e
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        GitError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"])
        return Path(root)
    except GitError:
        raise GitError("Not in a git repository. Please run this command from within a git repo.")


def is_git_repo() -> bool:
    """Check whether the current directory is inside a git work tree."""
    try:
        return _run_git_command(["rev-parse", "--is-inside-work-tree"]) == "true"
    except GitError:
        return False
