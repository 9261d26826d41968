"""Git hook installation and hook-time message handling.

Contains:
- GitHookManager: Install, remove and inspect commitkit hooks in a repository
- prepare_message: Turn a free-form message into a conventional one
"""

import os
import stat
from pathlib import Path
from typing import Optional, Union

from commitkit.emoji import decorate
from commitkit.validation import HEADER_RE


PREPARE_COMMIT_MSG = "prepare-commit-msg"
COMMIT_MSG = "commit-msg"

# git strips lines starting with this from the final message
COMMENT_CHAR = "#"

PREPARE_COMMIT_MSG_HOOK = """#!/bin/sh
# commitkit prepare-commit-msg hook
#
# Called by "git commit" with the name of the file that has the commit
# message, followed by the description of the commit message's source.

if command -v commitkit > /dev/null 2>&1; then
    ORIG_MSG=$(cat "$1")
    if NEW_MSG=$(commitkit prepare-msg -- "$ORIG_MSG"); then
        printf '%s\\n' "$NEW_MSG" > "$1"
    fi
fi
"""

COMMIT_MSG_HOOK = """#!/bin/sh
# commitkit commit-msg hook
#
# Called by "git commit" with the name of the file that has the commit
# message. A non-zero exit status aborts the commit.

if command -v commitkit > /dev/null 2>&1; then
    commitkit validate "$1"
    exit $?
fi

exit 0
"""

HOOK_SCRIPTS = {
    PREPARE_COMMIT_MSG: PREPARE_COMMIT_MSG_HOOK,
    COMMIT_MSG: COMMIT_MSG_HOOK,
}


class HookError(Exception):
    """Raised when a hook cannot be installed or removed."""

    pass


class GitHookManager:
    """Manages commitkit hooks in a git repository."""

    def __init__(self, repo_path: Union[str, Path]):
        self.repo_path = Path(repo_path)

    @property
    def hooks_dir(self) -> Path:
        """Path to .git/hooks."""
        return self.repo_path / ".git" / "hooks"

    def is_git_repo(self) -> bool:
        """Check if repo_path contains a .git directory."""
        return (self.repo_path / ".git").exists()

    def _install_hook(self, name: str) -> Path:
        hook_path = self.hooks_dir / name
        try:
            self.hooks_dir.mkdir(parents=True, exist_ok=True)
            hook_path.write_text(HOOK_SCRIPTS[name], encoding="utf-8")
            # rwxr-xr-x
            os.chmod(
                hook_path,
                stat.S_IRWXU | stat.S_IRGRP | stat.S_IXGRP | stat.S_IROTH | stat.S_IXOTH,
            )
        except OSError as e:
            raise HookError(f"Failed to install {name} hook at {hook_path}: {e}") from e
        return hook_path

    def install_prepare_commit_msg_hook(self) -> Path:
        """Install the prepare-commit-msg hook."""
        return self._install_hook(PREPARE_COMMIT_MSG)

    def install_commit_msg_hook(self) -> Path:
        """Install the commit-msg validation hook."""
        return self._install_hook(COMMIT_MSG)

    def remove_hook(self, name: str) -> bool:
        """Remove a hook.

        Returns:
            True if the hook existed and was removed, False otherwise.
        """
        hook_path = self.hooks_dir / name
        if not hook_path.exists():
            return False
        try:
            hook_path.unlink()
        except OSError as e:
            raise HookError(f"Failed to remove {name} hook at {hook_path}: {e}") from e
        return True

    def is_hook_installed(self, name: str) -> bool:
        """Check if a hook file exists."""
        return (self.hooks_dir / name).exists()

    @staticmethod
    def find_repo_root(start_dir: Union[str, Path]) -> Optional[Path]:
        """Find the repository root by walking up from start_dir.

        Returns:
            The first directory containing .git, or None.
        """
        current = Path(start_dir).resolve()
        for candidate in (current, *current.parents):
            if (candidate / ".git").exists():
                return candidate
        return None


def prepare_message(message: str, types: list[str], use_emoji: bool = False) -> str:
    """Prepare a message for the prepare-commit-msg hook.

    Lines starting with "#" are git's comments and are never prefixed. The
    first other non-blank line is the subject: if it already has a
    conventional header the message is returned as-is, otherwise it is
    prefixed with "chore" (or the first configured type if chore is not
    configured). Messages with no subject line are returned unchanged.

    Args:
        message: The message git is about to use.
        types: Configured commit types.
        use_emoji: Decorate the prefixed subject with the type's emoji.

    Returns:
        The prepared message.
    """
    lines = message.split("\n")
    subject_index = next(
        (i for i, line in enumerate(lines) if line.strip() and not line.startswith(COMMENT_CHAR)),
        None,
    )
    if subject_index is None:
        return message

    subject = lines[subject_index].strip()
    if HEADER_RE.match(subject):
        return message

    commit_type = "chore" if "chore" in types or not types else types[0]
    lines[subject_index] = decorate(commit_type, f"{commit_type}: {subject}", use_emoji)
    return "\n".join(lines).strip()
