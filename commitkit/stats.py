"""Commit statistics from git history.

Contains:
- CommitStats: Counters by type, scope, author and date
- parse_log_line / analyze_commits: Build statistics from log lines
- format_summary: Human-readable report
- collect_commit_stats: Run git log and analyze the result
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Union

from commitkit.git import get_log_lines
from commitkit.validation import HEADER_RE


TOP_N = 5


@dataclass
class LogEntry:
    """One commit from the history."""

    hash: str
    author: str
    email: str
    date: str
    subject: str


@dataclass
class CommitStats:
    """Aggregated commit statistics."""

    total_commits: int = 0
    type_counts: Counter = field(default_factory=Counter)
    scope_counts: Counter = field(default_factory=Counter)
    contributors: Counter = field(default_factory=Counter)
    commits_by_date: Counter = field(default_factory=Counter)


def parse_log_line(line: str) -> Optional[LogEntry]:
    """Parse a "hash|author|email|date|subject" log line.

    The subject may itself contain "|". Returns None for malformed lines.
    """
    parts = line.split("|", 4)
    if len(parts) < 5:
        return None
    return LogEntry(*parts)


def analyze_commits(lines: Iterable[str]) -> CommitStats:
    """Count commits by type, scope, author and date.

    Commits whose subject is not a conventional header still count towards
    the total, author and date counters.
    """
    stats = CommitStats()

    for line in lines:
        if not line:
            continue
        entry = parse_log_line(line)
        if entry is None:
            continue

        match = HEADER_RE.fullmatch(entry.subject)
        if match:
            stats.type_counts[match.group(1)] += 1
            if match.group(3):
                stats.scope_counts[match.group(3)] += 1

        stats.contributors[entry.author] += 1
        stats.commits_by_date[entry.date] += 1
        stats.total_commits += 1

    return stats


def _percent(count: int, total: int) -> float:
    return (count / total) * 100.0 if total else 0.0


def format_summary(stats: CommitStats, days: Optional[int] = None) -> str:
    """Render commit statistics as a text report."""
    period = str(days) if days is not None else "all"
    lines = [
        f"Commit statistics for the past {period} days:",
        "",
        f"Total commits: {stats.total_commits}",
        "",
        "Commit types:",
    ]

    for commit_type, count in stats.type_counts.most_common():
        lines.append(f"  {commit_type}: {count} ({_percent(count, stats.total_commits):.1f}%)")

    if stats.scope_counts:
        lines.append("")
        lines.append("Top scopes:")
        for scope, count in stats.scope_counts.most_common(TOP_N):
            lines.append(f"  {scope}: {count}")

    if stats.contributors:
        lines.append("")
        lines.append("Top contributors:")
        for author, count in stats.contributors.most_common(TOP_N):
            lines.append(f"  {author}: {count} ({_percent(count, stats.total_commits):.1f}%)")

    return "\n".join(lines)


def collect_commit_stats(
    repo_root: Optional[Union[str, Path]] = None,
    days: Optional[int] = None,
) -> CommitStats:
    """Analyze the history of the repository at repo_root.

    Raises:
        GitError: If the history cannot be read.
    """
    return analyze_commits(get_log_lines(days=days, cwd=repo_root))
