"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from commitkit.config import CommitKitConfig
from commitkit.validation import ValidationRules


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a mock git repository root directory."""
    # Create .git directory to simulate a git repo
    git_dir = temp_dir / ".git"
    git_dir.mkdir()
    return temp_dir


@pytest.fixture
def default_rules():
    """Validation rules with the default settings."""
    return ValidationRules()


@pytest.fixture
def sample_config(temp_dir):
    """Configuration using a temporary template directory."""
    return CommitKitConfig(templates_dir=str(temp_dir / "templates"))


@pytest.fixture
def sample_changelog():
    """A changelog with an Unreleased section and one released version."""
    return """# Changelog

All notable changes to demo will be documented in this file.

## Unreleased

- **Added**: add export button
- **Fixed** (api): handle empty payload

## 1.0.0 (2024-01-01)

- **Added**: initial release
"""


@pytest.fixture
def sample_log_lines():
    """Sample git log lines in hash|author|email|date|subject format."""
    return [
        "a1b2c3d|Alice|alice@example.com|2024-05-01|feat(api): add users endpoint",
        "b2c3d4e|Bob|bob@example.com|2024-05-01|fix(api): handle empty payload",
        "c3d4e5f|Alice|alice@example.com|2024-05-02|docs: update readme",
        "d4e5f6a|Alice|alice@example.com|2024-05-03|Merge branch 'main'",
        "e5f6a7b|Carol|carol@example.com|2024-05-03|feat(ui): add dark mode | beta",
    ]
