"""Tests for commitkit.cli module."""

import os

import pytest
import yaml
from typer.testing import CliRunner

from commitkit import __version__
from commitkit.cli import app
from commitkit.git import GitCommandError, GitError


runner = CliRunner()


@pytest.fixture
def config_file(temp_dir):
    """Write a config file with no scopes and a temporary template directory."""
    path = temp_dir / "config.yaml"
    path.write_text(yaml.dump({
        "scopes": [],
        "templates_dir": str(temp_dir / "templates"),
        "min_subject_len": 10,
    }))
    return path


class TestVersion:
    """Tests for --version flag."""

    def test_prints_version(self):
        """Test version output."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"commitkit {__version__}" in result.output


class TestValidateCommand:
    """Tests for commitkit validate command."""

    def test_valid_message(self, temp_dir, config_file):
        """Test a conventional message passes."""
        message_file = temp_dir / "COMMIT_EDITMSG"
        message_file.write_text("feat(cli): add export button\n\nLonger body\n")

        result = runner.invoke(app, ["validate", str(message_file), "--config", str(config_file)])

        assert result.exit_code == 0
        assert "valid" in result.output

    def test_invalid_format(self, temp_dir, config_file):
        """Test free-form message fails with the format explanation."""
        message_file = temp_dir / "COMMIT_EDITMSG"
        message_file.write_text("updated some stuff\n")

        result = runner.invoke(app, ["validate", str(message_file), "--config", str(config_file)])

        assert result.exit_code == 1
        assert "Invalid format" in result.output

    def test_short_subject(self, temp_dir, config_file):
        """Test subject length is checked."""
        message_file = temp_dir / "COMMIT_EDITMSG"
        message_file.write_text("fix: typo\n")

        result = runner.invoke(app, ["validate", str(message_file), "--config", str(config_file)])

        assert result.exit_code == 1
        assert "too short" in result.output

    def test_unreadable_file(self, temp_dir, config_file):
        """Test missing file is reported as invalid."""
        result = runner.invoke(
            app, ["validate", str(temp_dir / "missing"), "--config", str(config_file)]
        )

        assert result.exit_code == 1
        assert "Invalid format" in result.output

    def test_bad_config(self, temp_dir):
        """Test missing explicit config exits with an error."""
        message_file = temp_dir / "COMMIT_EDITMSG"
        message_file.write_text("feat: add export button\n")

        result = runner.invoke(
            app, ["validate", str(message_file), "--config", str(temp_dir / "nope.yaml")]
        )

        assert result.exit_code == 1
        assert "Error" in result.output


class TestPrepareMsgCommand:
    """Tests for commitkit prepare-msg command."""

    def test_prefixes_free_form(self, config_file):
        """Test free-form message gets the chore type."""
        result = runner.invoke(app, ["prepare-msg", "update deps", "--config", str(config_file)])

        assert result.exit_code == 0
        assert result.output.strip() == "chore: update deps"

    def test_keeps_conventional(self, config_file):
        """Test conventional message is unchanged."""
        result = runner.invoke(
            app, ["prepare-msg", "fix(api): handle nulls", "--config", str(config_file)]
        )

        assert result.exit_code == 0
        assert result.output.strip() == "fix(api): handle nulls"

    def test_message_starting_with_dash(self, config_file):
        """Test a message that looks like an option is accepted after --."""
        result = runner.invoke(
            app, ["prepare-msg", "--config", str(config_file), "--", "-v fixed thing"]
        )

        assert result.exit_code == 0
        assert result.output.strip() == "chore: -v fixed thing"

    def test_editor_template_unchanged(self, config_file):
        """Test git's comment-only template is printed back unchanged."""
        message = "\n# Please enter the commit message for your changes.\n# with '#' will be ignored."

        result = runner.invoke(app, ["prepare-msg", "--config", str(config_file), "--", message])

        assert result.exit_code == 0
        assert "chore:" not in result.output
        assert result.output.strip() == message.strip()


class TestHooksCommands:
    """Tests for commitkit hooks subcommands."""

    def test_install_status_uninstall(self, mock_repo_root, monkeypatch):
        """Test the full hook lifecycle."""
        monkeypatch.chdir(mock_repo_root)

        result = runner.invoke(app, ["hooks", "install", "--verbose"])
        assert result.exit_code == 0
        assert "installed successfully" in result.output
        assert "commit-msg" in result.output
        hook = mock_repo_root / ".git" / "hooks" / "commit-msg"
        assert hook.exists()
        assert os.access(hook, os.X_OK)

        result = runner.invoke(app, ["hooks", "status"])
        assert result.exit_code == 0
        assert "prepare-commit-msg: installed" in result.output
        assert "commit-msg: installed" in result.output

        result = runner.invoke(app, ["hooks", "uninstall"])
        assert result.exit_code == 0
        assert "Removed hooks: prepare-commit-msg, commit-msg" in result.output
        assert not hook.exists()

    def test_uninstall_nothing(self, mock_repo_root, monkeypatch):
        """Test message when no hooks are installed."""
        monkeypatch.chdir(mock_repo_root)

        result = runner.invoke(app, ["hooks", "uninstall"])

        assert result.exit_code == 0
        assert "No commitkit hooks" in result.output

    def test_not_a_repo(self, temp_dir, monkeypatch, mocker):
        """Test error outside a repository."""
        monkeypatch.chdir(temp_dir)
        mocker.patch("commitkit.cli.hooks.GitHookManager.find_repo_root", return_value=None)

        result = runner.invoke(app, ["hooks", "install"])

        assert result.exit_code == 1
        assert "Not in a git repository" in result.output


class TestTemplateCommands:
    """Tests for commitkit template subcommands."""

    def test_list_defaults(self, config_file):
        """Test default templates are seeded and listed."""
        result = runner.invoke(app, ["template", "list", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "feature" in result.output
        assert "bugfix" in result.output
        assert "refactor" in result.output

    def test_add_show_remove(self, temp_dir, config_file):
        """Test adding, showing and removing a template."""
        result = runner.invoke(app, [
            "template", "add", "hotfix",
            "--subject", "fix({area}): patch {thing}",
            "--description", "Quick fixes",
            "--body", "Line one\\nLine two",
            "--config", str(config_file),
        ])
        assert result.exit_code == 0
        assert "hotfix" in result.output
        assert (temp_dir / "templates" / "hotfix.yaml").exists()

        result = runner.invoke(app, ["template", "show", "hotfix", "--config", str(config_file)])
        assert result.exit_code == 0
        assert "fix({area}): patch {thing}" in result.output
        assert "  Line one\n  Line two" in result.output
        assert "Placeholders: area, thing" in result.output

        result = runner.invoke(app, ["template", "remove", "hotfix", "--config", str(config_file)])
        assert result.exit_code == 0
        assert not (temp_dir / "templates" / "hotfix.yaml").exists()

    def test_show_missing(self, config_file):
        """Test unknown template exits with an error."""
        result = runner.invoke(app, ["template", "show", "nope", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_remove_missing(self, config_file):
        """Test removing an unknown template fails."""
        result = runner.invoke(app, ["template", "remove", "nope", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_add_invalid_name(self, config_file):
        """Test names with path separators are rejected."""
        result = runner.invoke(app, [
            "template", "add", "a/b", "--subject", "feat: x", "--config", str(config_file),
        ])

        assert result.exit_code == 1
        assert "Invalid template" in result.output


class TestChangelogCommands:
    """Tests for commitkit changelog and stats commands."""

    def test_release(self, temp_dir, config_file, monkeypatch, sample_changelog):
        """Test releasing the Unreleased section."""
        monkeypatch.chdir(temp_dir)
        (temp_dir / "CHANGELOG.md").write_text(sample_changelog)

        result = runner.invoke(app, ["changelog", "release", "1.1.0", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "Released 1.1.0" in result.output
        assert "## 1.1.0 (" in (temp_dir / "CHANGELOG.md").read_text()

    def test_release_without_unreleased(self, temp_dir, config_file, monkeypatch):
        """Test warning when nothing can be released."""
        monkeypatch.chdir(temp_dir)
        (temp_dir / "CHANGELOG.md").write_text("# Changelog\n\n## 1.0.0\n")

        result = runner.invoke(app, ["changelog", "release", "1.1.0", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "nothing to release" in result.output

    def test_release_missing_changelog(self, temp_dir, config_file, monkeypatch):
        """Test error when the changelog does not exist."""
        monkeypatch.chdir(temp_dir)

        result = runner.invoke(app, ["changelog", "release", "1.1.0", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_stats(self, mocker, temp_dir, sample_log_lines):
        """Test statistics report."""
        mocker.patch("commitkit.cli.changelog.get_repo_root", return_value=temp_dir)
        mocker.patch("commitkit.stats.get_log_lines", return_value=sample_log_lines)

        result = runner.invoke(app, ["stats", "--days", "30"])

        assert result.exit_code == 0
        assert "past 30 days" in result.output
        assert "Total commits: 5" in result.output

    def test_stats_git_error(self, mocker):
        """Test handling of git error."""
        mocker.patch("commitkit.cli.changelog.get_repo_root", side_effect=GitError("not a repo"))

        result = runner.invoke(app, ["stats"])

        assert result.exit_code == 1
        assert "error" in result.output.lower()

    def test_stats_log_failure(self, mocker, temp_dir):
        """Test a failing git log is reported instead of showing zero commits."""
        mocker.patch("commitkit.cli.changelog.get_repo_root", return_value=temp_dir)
        mocker.patch(
            "commitkit.stats.get_log_lines",
            side_effect=GitCommandError(["log"], "fatal: bad object HEAD", 128),
        )

        result = runner.invoke(app, ["stats"])

        assert result.exit_code == 1
        assert "bad object HEAD" in result.output
        assert "Total commits" not in result.output


class TestMainCommand:
    """Tests for the interactive commit flow."""

    def test_dry_run(self, mocker, config_file):
        """Test the composed message is printed without committing."""
        mocker.patch("commitkit.cli.main.is_git_repo", return_value=True)
        mock_commit = mocker.patch("commitkit.cli.main.run_git_commit")

        result = runner.invoke(
            app,
            ["--dry-run", "--config", str(config_file)],
            input="2\nhandle empty payload\n\n\n",
        )

        assert result.exit_code == 0
        assert "fix: handle empty payload" in result.output
        mock_commit.assert_not_called()

    def test_dry_run_with_emoji(self, mocker, config_file):
        """Test --emoji decorates the subject line."""
        mocker.patch("commitkit.cli.main.is_git_repo", return_value=True)

        result = runner.invoke(
            app,
            ["--dry-run", "--emoji", "--config", str(config_file)],
            input="1\nadd export button\n\n\n",
        )

        assert result.exit_code == 0
        assert "feat: ✨ add export button" in result.output

    def test_commit_with_changelog(self, mocker, temp_dir, config_file, monkeypatch):
        """Test committing and recording a changelog entry."""
        monkeypatch.chdir(temp_dir)
        mocker.patch("commitkit.cli.main.is_git_repo", return_value=True)
        mocker.patch("commitkit.cli.main.has_staged_changes", return_value=True)
        mock_commit = mocker.patch("commitkit.cli.main.run_git_commit", return_value="[main abc123]")

        result = runner.invoke(
            app,
            ["--changelog", "--config", str(config_file)],
            input="1\nadd export button\nsupports csv\n\nCloses #12\n",
        )

        assert result.exit_code == 0
        assert "Successfully committed" in result.output
        mock_commit.assert_called_once_with(
            "feat: add export button\n\nsupports csv\n\nCloses #12", False
        )
        changelog = (temp_dir / "CHANGELOG.md").read_text()
        assert "- **Added**: add export button\n  - supports csv" in changelog

    def test_no_staged_changes(self, mocker, config_file):
        """Test error when nothing is staged."""
        mocker.patch("commitkit.cli.main.is_git_repo", return_value=True)
        mocker.patch("commitkit.cli.main.has_staged_changes", return_value=False)

        result = runner.invoke(app, ["--config", str(config_file)])

        assert result.exit_code == 1
        assert "No staged changes" in result.output

    def test_not_a_repo(self, mocker, config_file):
        """Test error outside a repository."""
        mocker.patch("commitkit.cli.main.is_git_repo", return_value=False)

        result = runner.invoke(app, ["--config", str(config_file)])

        assert result.exit_code == 1
        assert "Not in a git repository" in result.output

    def test_template_flow(self, mocker, config_file):
        """Test composing from a template takes the type from its subject."""
        mocker.patch("commitkit.cli.main.is_git_repo", return_value=True)
        runner.invoke(app, [
            "template", "add", "hotfix",
            "--subject", "fix({area}): patch {thing}",
            "--config", str(config_file),
        ])

        result = runner.invoke(
            app,
            ["--dry-run", "--template", "hotfix", "--config", str(config_file)],
            input="parser\nthe tokenizer\n",
        )

        assert result.exit_code == 0
        assert "fix(parser): patch the tokenizer" in result.output

    def test_unknown_template(self, mocker, config_file):
        """Test unknown template exits with an error."""
        mocker.patch("commitkit.cli.main.is_git_repo", return_value=True)

        result = runner.invoke(app, ["--dry-run", "--template", "nope", "--config", str(config_file)])

        assert result.exit_code == 1
        assert "Template error" in result.output
