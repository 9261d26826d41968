"""Placeholder substitution for commit templates.

Contains:
- fill_placeholders: Replace {name} tokens in a string
- collect_placeholders: Distinct placeholder names of a template, in order
- fill_template: Fill a template and derive its type and scope
"""

import re
from typing import Mapping

from commitkit.templates.models import CommitTemplate, FilledTemplate


PLACEHOLDER_RE = re.compile(r"\{([^{}]+)\}")

# type(scope): at the start of a filled subject
_SUBJECT_PREFIX_RE = re.compile(r"^(\w+)(?:\(([\w-]+)\))?:")


def fill_placeholders(template: str, values: Mapping[str, str]) -> str:
    """Replace every {name} in template for each name in values.

    Placeholders without a value are left as-is. Replacement is literal;
    substituted text is not scanned again.

    Args:
        template: Text containing {name} tokens.
        values: Mapping of placeholder name to replacement text.

    Returns:
        The filled text.
    """

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name in values:
            return values[name]
        return match.group(0)

    return PLACEHOLDER_RE.sub(_replace, template)


def collect_placeholders(template: CommitTemplate) -> list[str]:
    """Collect the distinct placeholder names used by a template.

    Subject, body and footer are scanned in that order; a name used in
    several places is returned once, at its first position.
    """
    names: list[str] = []
    for text in (template.subject_template, template.body_template, template.footer_template):
        if not text:
            continue
        for match in PLACEHOLDER_RE.finditer(text):
            name = match.group(1)
            if name not in names:
                names.append(name)
    return names


def fill_template(
    template: CommitTemplate,
    values: Mapping[str, str],
    default_type: str = "feat",
) -> FilledTemplate:
    """Fill a template and work out the commit type and scope.

    If the filled subject starts with "type(scope):" or "type:", the type and
    scope are taken from it and removed from the subject. Otherwise
    default_type is used with no scope and the subject is kept as filled.

    Args:
        template: The template to fill.
        values: Values for the template's placeholders.
        default_type: Type used when the subject carries none.

    Returns:
        FilledTemplate with type, scope, subject, body and footer.
    """
    subject = fill_placeholders(template.subject_template, values)
    body = fill_placeholders(template.body_template, values) if template.body_template else ""
    footer = fill_placeholders(template.footer_template, values) if template.footer_template else ""

    match = _SUBJECT_PREFIX_RE.match(subject)
    if match:
        commit_type = match.group(1)
        scope = match.group(2) or ""
        subject = subject[match.end():].strip()
    else:
        commit_type = default_type
        scope = ""

    return FilledTemplate(
        type=commit_type,
        scope=scope,
        subject=subject,
        body=body,
        footer=footer,
    )
