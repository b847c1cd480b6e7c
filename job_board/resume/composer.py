"""Resume generation on profile writes.

A create or update of a candidate profile regenerates three derived fields
when any tracked source field changed (or nothing was generated yet):

- ``resume_generated``: the Markdown resume
- ``resume_generated_redacted``: the same Markdown with PII replaced
- ``resume_generated_pdf``: the Markdown rendered as PDF, when a renderer is
  available and succeeds

Nothing here raises on bad field data or renderer failures; the write that
triggered generation always goes through.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from job_board.profile.models import (
    GENERATED_FIELD,
    GENERATED_PDF_FIELD,
    GENERATED_REDACTED_FIELD,
    DERIVED_FIELDS,
    SOURCE_FIELDS,
)
from job_board.profile.records import ProfileRecord
from job_board.resume.builder import build_markdown
from job_board.resume.pdf_renderer import PdfRenderer, render_pdf
from job_board.resume.redactor import REDACTION_PLACEHOLDER, redact_markdown

logger = logging.getLogger("job_board.resume")


@dataclass
class GeneratedResume:
    markdown: str
    redacted: str
    pdf: Optional[bytes] = None


def has_generated_output(record: ProfileRecord) -> bool:
    return any(record.get(name) for name in DERIVED_FIELDS)


def changed_fields(record: ProfileRecord) -> list[str]:
    """Tracked fields whose value differs from the record's pre-write snapshot.

    A record without a snapshot (being created) reports every tracked field.
    """
    original = record.original()
    if original is None:
        return list(SOURCE_FIELDS)
    # == on lists and dicts is a deep, order-sensitive comparison
    return [name for name in SOURCE_FIELDS if original.get(name) != record.get(name)]


def has_source_changes(record: ProfileRecord) -> bool:
    return bool(changed_fields(record))


def should_generate(record: ProfileRecord) -> bool:
    return has_source_changes(record) or not has_generated_output(record)


def generate_resume(
    record: ProfileRecord,
    renderer: Optional[PdfRenderer] = None,
    placeholder: str = REDACTION_PLACEHOLDER,
) -> Optional[GeneratedResume]:
    """Build, redact and render from one pass; None when there is nothing to render."""
    markdown = build_markdown(record)
    if not markdown:
        return None

    redacted = redact_markdown(markdown, record, placeholder)

    pdf = None
    if renderer is not None:
        result = render_pdf(renderer, markdown)
        if result.ok:
            pdf = result.data

    return GeneratedResume(markdown=markdown, redacted=redacted, pdf=pdf)


def apply_resume(record: ProfileRecord, resume: GeneratedResume) -> None:
    record.set(GENERATED_FIELD, resume.markdown)
    record.set(GENERATED_REDACTED_FIELD, resume.redacted)
    if resume.pdf:
        record.set(GENERATED_PDF_FIELD, resume.pdf)


def generate_and_save_resume(
    record: ProfileRecord,
    save: Optional[Callable] = None,
    renderer: Optional[PdfRenderer] = None,
    placeholder: str = REDACTION_PLACEHOLDER,
    force: bool = False,
) -> bool:
    """Regenerate the derived resume fields of record if needed.

    ``save`` is called with the record once the fields are staged. Returns
    True when fields were written.
    """
    if not force and not should_generate(record):
        logger.debug("Resume unchanged, skipping regeneration")
        return False

    resume = generate_resume(record, renderer=renderer, placeholder=placeholder)
    if resume is None:
        logger.debug("Profile has no resume content, nothing to write")
        return False

    apply_resume(record, resume)
    if save is not None:
        save(record)

    logger.info(
        "Generated resume: %d chars, PDF %s",
        len(resume.markdown),
        f"{len(resume.pdf)} bytes" if resume.pdf else "skipped",
    )
    return True
