"""Conventional commit parsing and validation.

Contains:
- ValidationRules: Subject length bounds, allowed types and scope policy
- ValidationErrorKind: One member per distinct failure
- parse_header: Parse a header line into type, scope and subject
- validate_message / validate_file: Check a message against the rules
- CommitValidationError: Exception form of a failed validation
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union


# type(scope): subject
HEADER_RE = re.compile(r"(\w+)(\(([\w-]+)\))?: (.+)")

DEFAULT_TYPES = [
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
    "build",
    "ci",
    "chore",
    "revert",
]


class ValidationErrorKind(Enum):
    """Reasons a commit message can be rejected."""

    INVALID_FORMAT = "invalid_format"
    INVALID_TYPE = "invalid_type"
    INVALID_SCOPE = "invalid_scope"
    SUBJECT_TOO_SHORT = "subject_too_short"
    SUBJECT_TOO_LONG = "subject_too_long"


VALIDATION_MESSAGES = {
    ValidationErrorKind.INVALID_FORMAT: "Invalid format. Expected: <type>[(scope)]: <subject>",
    ValidationErrorKind.INVALID_TYPE: "Invalid commit type. Use one of the conventional commit types.",
    ValidationErrorKind.INVALID_SCOPE: "Missing scope. A scope is required: <type>(<scope>): <subject>",
    ValidationErrorKind.SUBJECT_TOO_SHORT: "Subject is too short. Make it more descriptive.",
    ValidationErrorKind.SUBJECT_TOO_LONG: "Subject is too long. Keep it under the maximum length.",
}


class CommitValidationError(Exception):
    """Raised when a commit message fails validation."""

    def __init__(self, kind: ValidationErrorKind):
        self.kind = kind
        super().__init__(VALIDATION_MESSAGES[kind])


@dataclass
class ValidationRules:
    """Constraints applied to a commit header."""

    min_subject_length: int = 10
    max_subject_length: int = 72
    allowed_types: list[str] = field(default_factory=lambda: DEFAULT_TYPES.copy())
    require_scope: bool = False


@dataclass
class ParsedHeader:
    """The parts of a conventional commit header."""

    type: str
    scope: Optional[str]
    subject: str


def first_line(message: str) -> str:
    """Return the first line of message without its line terminator."""
    return message.split("\n", 1)[0].rstrip("\r")


def parse_header(line: str) -> Optional[ParsedHeader]:
    """Parse a header line against the conventional commit grammar.

    Args:
        line: A single line, e.g. "fix(core): resolve crash".

    Returns:
        ParsedHeader, or None if the line does not match.
    """
    match = HEADER_RE.fullmatch(line)
    if not match:
        return None
    return ParsedHeader(type=match.group(1), scope=match.group(3), subject=match.group(4))


def validate_message(message: str, rules: ValidationRules) -> Optional[ValidationErrorKind]:
    """Validate the first line of a commit message.

    Checks run in order and the first failure is returned:
    format, type, scope, subject too short, subject too long.
    Subject length is counted in characters, so a non-ASCII subject is
    measured the same as an ASCII one of equal length.

    Args:
        message: Full commit message text.
        rules: Validation constraints.

    Returns:
        None if the message is valid, otherwise the failing ValidationErrorKind.
    """
    header = parse_header(first_line(message))
    if header is None:
        return ValidationErrorKind.INVALID_FORMAT

    if header.type not in rules.allowed_types:
        return ValidationErrorKind.INVALID_TYPE

    if rules.require_scope and header.scope is None:
        return ValidationErrorKind.INVALID_SCOPE

    if len(header.subject) < rules.min_subject_length:
        return ValidationErrorKind.SUBJECT_TOO_SHORT

    if len(header.subject) > rules.max_subject_length:
        return ValidationErrorKind.SUBJECT_TOO_LONG

    return None


def validate_file(path: Union[str, Path], rules: ValidationRules) -> Optional[ValidationErrorKind]:
    """Validate a commit message stored in a file.

    A file that cannot be read is reported as INVALID_FORMAT.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return ValidationErrorKind.INVALID_FORMAT
    return validate_message(content, rules)


def check_message(message: str, rules: ValidationRules) -> None:
    """Validate a commit message, raising on failure.

    Raises:
        CommitValidationError: If the message is rejected.
    """
    kind = validate_message(message, rules)
    if kind is not None:
        raise CommitValidationError(kind)
