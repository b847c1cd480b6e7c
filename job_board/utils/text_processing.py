"""Field normalization and small text helpers shared by the resume composer."""

import json
from typing import Any


def sanitize_text(value: Any) -> str:
    """Convert a scalar field value to trimmed text ('' for None)."""
    if value is None:
        return ""
    return str(value).strip()


def parse_repeatable(value: Any) -> list:
    """Normalize a repeated-value field to a list.

    Lists pass through. Strings are tried as a JSON array first and fall back
    to a comma-delimited split with blank segments dropped.
    """
    if not value:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except ValueError:
            return [part.strip() for part in value.split(",") if part.strip()]
        return parsed if isinstance(parsed, list) else []
    return []


def join_present(parts: list[str], separator: str) -> str:
    """Join the non-empty parts with separator."""
    return separator.join(p for p in parts if p)


def format_date_range(start: Any, end: Any, is_current: Any = False) -> str:
    """Render a start/end pair; a truthy current flag always renders 'Present'."""
    start_text = sanitize_text(start)
    end_text = "Present" if is_current else sanitize_text(end)
    if start_text and end_text:
        return f"{start_text} - {end_text}"
    return start_text or end_text
