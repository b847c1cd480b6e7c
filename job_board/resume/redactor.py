"""PII redaction for generated resumes."""

import re

from job_board.profile.models import ProfileData

REDACTION_PLACEHOLDER = "[REDACTED]"

EMAIL_PATTERN = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)
# Nine or more digits on one line, optionally separated by spaces, tabs,
# parentheses, dots or hyphens, with an optional leading '+'.
PHONE_PATTERN = re.compile(r"\+?\d(?:[ \t().-]*\d){8,}")
URL_PATTERN = re.compile(r"https?://[^\s)]+", re.IGNORECASE)


def _replace_literal(text: str, value: str, placeholder: str) -> str:
    # Placeholders already in the text are left intact, so a name that happens
    # to occur inside the token cannot corrupt it.
    pattern = re.compile(re.escape(value), re.IGNORECASE)
    if not placeholder:
        return pattern.sub("", text)
    return placeholder.join(pattern.sub(lambda _: placeholder, part) for part in text.split(placeholder))


def redact_markdown(markdown: str, record, placeholder: str = REDACTION_PLACEHOLDER) -> str:
    """Return a copy of markdown with names, contacts, URLs and country replaced."""
    profile = ProfileData.from_record(record)
    output = markdown or ""

    for value in (profile.full_name, profile.first_name, profile.last_name):
        if value:
            output = _replace_literal(output, value, placeholder)

    for pattern in (EMAIL_PATTERN, PHONE_PATTERN, URL_PATTERN):
        output = pattern.sub(lambda _: placeholder, output)

    if profile.country:
        output = _replace_literal(output, profile.country, placeholder)

    return output
