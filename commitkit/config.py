"""Configuration management for commitkit.

Handles reading the .commitkit.yaml file, looked up in the current directory
first and then in the home directory. When neither exists the defaults are
used and written to ~/.commitkit.yaml for the user to edit.
"""

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from commitkit.validation import ValidationRules


CONFIG_FILE_NAME = ".commitkit.yaml"


class ConfigError(Exception):
    """Raised when the configuration cannot be loaded."""

    pass


class Prefix(BaseModel):
    """A selectable commit type."""

    title: str
    description: str = ""


DEFAULT_PREFIXES = [
    Prefix(title="feat", description="A new feature"),
    Prefix(title="fix", description="A bug fix"),
    Prefix(title="docs", description="Documentation changes"),
    Prefix(title="style", description="Changes that do not affect code meaning"),
    Prefix(title="refactor", description="Code change that neither fixes a bug nor adds a feature"),
    Prefix(title="perf", description="Code change that improves performance"),
    Prefix(title="test", description="Adding missing tests or correcting existing tests"),
    Prefix(title="build", description="Changes that affect the build system or external dependencies"),
    Prefix(title="ci", description="Changes to CI configuration files and scripts"),
    Prefix(title="chore", description="Other changes that don't modify src or test files"),
    Prefix(title="revert", description="Reverts a previous commit"),
]

DEFAULT_SCOPES = ["core", "ui", "docs", "tests", "deps"]


class CommitKitConfig(BaseModel):
    """commitkit settings.

    Attributes:
        sign_off_commits: Add a Signed-off-by trailer (git commit -s).
        prefixes: Commit types offered when composing and accepted when validating.
        scopes: Scopes offered when composing.
        max_subject_len: Maximum subject length.
        min_subject_len: Minimum subject length (validation only).
        require_scope: Reject headers without a scope.
        use_emoji: Decorate messages with the type's emoji.
        update_changelog: Add a changelog entry after each commit.
        changelog_file: Changelog path, relative to the working directory.
        templates_dir: Directory holding the commit templates.
    """

    sign_off_commits: bool = False
    prefixes: list[Prefix] = DEFAULT_PREFIXES
    scopes: list[str] = DEFAULT_SCOPES
    max_subject_len: int = 72
    min_subject_len: int = 10
    require_scope: bool = False
    use_emoji: bool = False
    update_changelog: bool = False
    changelog_file: str = "CHANGELOG.md"
    templates_dir: str = "~/.commitkit/templates"

    @field_validator("prefixes")
    @classmethod
    def prefixes_must_not_be_empty(cls, v: list[Prefix]) -> list[Prefix]:
        """Ensure at least one commit type is configured."""
        if not v:
            raise ValueError("At least one prefix must be configured")
        return v

    @property
    def types(self) -> list[str]:
        """The configured commit type names, in order."""
        return [prefix.title for prefix in self.prefixes]

    @property
    def default_type(self) -> str:
        """The first configured commit type."""
        return self.prefixes[0].title

    def validation_rules(self) -> ValidationRules:
        """Build validation rules from these settings."""
        return ValidationRules(
            min_subject_length=self.min_subject_len,
            max_subject_length=self.max_subject_len,
            allowed_types=self.types,
            require_scope=self.require_scope,
        )

    def templates_path(self) -> Path:
        """The template directory with "~" expanded."""
        return Path(self.templates_dir).expanduser()


def get_home_config_path() -> Path:
    """Return path to ~/.commitkit.yaml."""
    return Path.home() / CONFIG_FILE_NAME


def find_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find the config file to use.

    Args:
        start_dir: Directory checked first (defaults to the current directory).

    Returns:
        Path of the first existing config file, or None.
    """
    start_dir = start_dir or Path.cwd()
    for candidate in (start_dir / CONFIG_FILE_NAME, get_home_config_path()):
        if candidate.exists():
            return candidate
    return None


def default_config_dict() -> dict:
    """Return the default configuration as a plain dictionary."""
    return CommitKitConfig().model_dump()


def save_config(path: Path, config: CommitKitConfig) -> None:
    """Save a configuration to path as YAML."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                config.model_dump(),
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
    except OSError as e:
        raise ConfigError(f"Failed to save config to {path}: {e}") from e


def load_config_file(path: Union[str, Path]) -> CommitKitConfig:
    """Load and validate a specific config file.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Failed to load config from {path}: expected a mapping")

    try:
        return CommitKitConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e


def load_config(path: Optional[Union[str, Path]] = None) -> CommitKitConfig:
    """Load the commitkit configuration.

    Args:
        path: Explicit config file. When omitted the current directory and the
            home directory are searched.

    Returns:
        The loaded configuration, or the defaults if no file exists.
    """
    if path is not None:
        return load_config_file(path)

    config_file = find_config_file()
    if config_file is not None:
        return load_config_file(config_file)

    config = CommitKitConfig()
    home_config = get_home_config_path()
    try:
        save_config(home_config, config)
    except ConfigError:
        # Writing the starter file is optional
        pass
    return config
