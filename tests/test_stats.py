"""Tests for commitkit.stats module."""

from commitkit.stats import (
    CommitStats,
    analyze_commits,
    collect_commit_stats,
    format_summary,
    parse_log_line,
)


class TestParseLogLine:
    """Tests for parse_log_line function."""

    def test_parses_fields(self):
        """Test splitting a log line."""
        entry = parse_log_line("a1b2c3d|Alice|alice@example.com|2024-05-01|feat: add x")
        assert entry.hash == "a1b2c3d"
        assert entry.author == "Alice"
        assert entry.date == "2024-05-01"
        assert entry.subject == "feat: add x"

    def test_subject_with_pipe(self):
        """Test pipes inside the subject are kept."""
        entry = parse_log_line("a|B|c|d|fix: a | b")
        assert entry.subject == "fix: a | b"

    def test_malformed(self):
        """Test short lines are skipped."""
        assert parse_log_line("a|b|c") is None


class TestAnalyzeCommits:
    """Tests for analyze_commits function."""

    def test_counts(self, sample_log_lines):
        """Test counters by type, scope, author and date."""
        stats = analyze_commits(sample_log_lines)

        assert stats.total_commits == 5
        assert stats.type_counts == {"feat": 2, "fix": 1, "docs": 1}
        assert stats.scope_counts == {"api": 2, "ui": 1}
        assert stats.contributors["Alice"] == 3
        assert stats.commits_by_date["2024-05-03"] == 2

    def test_skips_blank_and_malformed(self):
        """Test blank and malformed lines are ignored."""
        stats = analyze_commits(["", "garbage", "a|B|c|2024-01-01|chore: tidy"])
        assert stats.total_commits == 1
        assert stats.type_counts == {"chore": 1}


class TestFormatSummary:
    """Tests for format_summary function."""

    def test_report(self, sample_log_lines):
        """Test report sections."""
        summary = format_summary(analyze_commits(sample_log_lines), days=30)

        assert summary.startswith("Commit statistics for the past 30 days:")
        assert "Total commits: 5" in summary
        assert "  feat: 2 (40.0%)" in summary
        assert "Top scopes:" in summary
        assert "  api: 2" in summary
        assert "  Alice: 3 (60.0%)" in summary

    def test_all_history_and_empty(self):
        """Test empty statistics render without errors."""
        summary = format_summary(CommitStats())
        assert "past all days" in summary
        assert "Total commits: 0" in summary
        assert "Top scopes:" not in summary


class TestCollectCommitStats:
    """Tests for collect_commit_stats function."""

    def test_uses_git_log(self, mocker, sample_log_lines, temp_dir):
        """Test git log output is analyzed."""
        mock_log = mocker.patch("commitkit.stats.get_log_lines", return_value=sample_log_lines)

        stats = collect_commit_stats(temp_dir, days=7)

        mock_log.assert_called_once_with(days=7, cwd=temp_dir)
        assert stats.total_commits == 5
