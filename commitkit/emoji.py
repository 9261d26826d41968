"""Commit type lookup tables.

Contains:
- COMMIT_TYPE_EMOJIS: Symbol shown next to each commit type
- CHANGELOG_LABELS: Changelog section label for each commit type
- get_emoji_for_type / get_changelog_label: Lookups with graceful misses
- decorate: Insert the type's symbol after the first colon of a message
"""

from types import MappingProxyType
from typing import Optional


COMMIT_TYPE_EMOJIS = MappingProxyType({
    "feat": "✨",
    "fix": "🐛",
    "docs": "📚",
    "style": "💎",
    "refactor": "♻️",
    "perf": "🚀",
    "test": "🧪",
    "build": "🏗️",
    "ci": "👷",
    "chore": "🧹",
    "revert": "⏪",
})

CHANGELOG_LABELS = MappingProxyType({
    "feat": "Added",
    "fix": "Fixed",
    "perf": "Performance",
    "refactor": "Changed",
    "docs": "Documentation",
    "test": "Tests",
    "build": "Build",
    "ci": "CI",
    "chore": "Maintenance",
    "style": "Style",
    "revert": "Reverted",
})


def get_emoji_for_type(commit_type: str) -> Optional[str]:
    """Get the emoji for a commit type.

    Args:
        commit_type: Conventional commit type (feat, fix, ...).

    Returns:
        The emoji, or None if the type has no mapping.
    """
    return COMMIT_TYPE_EMOJIS.get(commit_type)


def get_changelog_label(commit_type: str) -> str:
    """Get the changelog label for a commit type.

    Unknown types are used as their own label.
    """
    return CHANGELOG_LABELS.get(commit_type, commit_type)


def decorate(commit_type: str, message: str, enabled: bool = True) -> str:
    """Insert the emoji for commit_type after the first colon of message.

    Example:
        decorate("feat", "feat: add new feature") -> "feat: ✨ add new feature"

    Args:
        commit_type: Type whose emoji should be inserted.
        message: An assembled commit message.
        enabled: When False the message is returned unchanged.

    Returns:
        The decorated message, or the original when disabled, when the type
        has no emoji, or when the message contains no colon.
    """
    if not enabled:
        return message

    emoji = get_emoji_for_type(commit_type)
    if emoji is None:
        return message

    head, sep, tail = message.partition(":")
    if not sep:
        return message

    return f"{head}: {emoji} {tail.lstrip(' ')}"
