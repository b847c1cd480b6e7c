"""Candidate profile storage with resume generation on write."""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import sessionmaker

from job_board.models import FIELD_ATTRIBUTES, CandidateProfile
from job_board.profile.models import DERIVED_FIELDS
from job_board.resume.composer import generate_and_save_resume
from job_board.resume.pdf_renderer import PdfRenderer
from job_board.resume.redactor import REDACTION_PLACEHOLDER
from job_board.storage.hooks import OrmProfileRecord, register_resume_hooks

logger = logging.getLogger("job_board.storage")

# Fields callers may write; the generated resume columns are owned by the composer.
WRITABLE_FIELDS = frozenset(FIELD_ATTRIBUTES) - set(DERIVED_FIELDS)

REPEATED_FIELDS = frozenset({"skills", "languages", "work_experience", "education", "certifications"})

# Accepted value types per writable field; anything not listed is a nullable string.
FIELD_TYPES = {
    "user": (str,),
    "is_open_to_work": (bool,),
    **{name: (list, str, type(None)) for name in REPEATED_FIELDS},
}


class ProfileNotFoundError(LookupError):
    pass


def check_field_values(fields: dict):
    """Raise ValueError for unknown, read-only or wrongly typed profile fields."""
    unknown = set(fields) - WRITABLE_FIELDS
    if unknown:
        raise ValueError(f"Unknown or read-only profile fields: {', '.join(sorted(unknown))}")
    for name, value in fields.items():
        allowed = FIELD_TYPES.get(name, (str, type(None)))
        if not isinstance(value, allowed):
            expected = " or ".join("null" if t is type(None) else t.__name__ for t in allowed)
            raise ValueError(f"Field {name} must be {expected}, got {type(value).__name__}")


class ProfileStore:
    """Create, update and inspect candidate profiles.

    Every commit made through the store's session factory runs the resume hook,
    so generated fields land in the same transaction as the profile write.
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        renderer: Optional[PdfRenderer] = None,
        placeholder: str = REDACTION_PLACEHOLDER,
        register_hooks: bool = True,
    ):
        self.session_factory = session_factory
        self.renderer = renderer
        self.placeholder = placeholder
        if register_hooks:
            register_resume_hooks(session_factory, renderer=renderer, placeholder=placeholder)
        self.session = session_factory()

    def _apply_fields(self, profile: CandidateProfile, fields: dict):
        check_field_values(fields)
        for name, value in fields.items():
            setattr(profile, FIELD_ATTRIBUTES[name], value)

    def create_profile(self, fields: dict) -> CandidateProfile:
        """Insert a new profile; fields use record names (firstName, work_experience, ...)."""
        profile = CandidateProfile()
        self._apply_fields(profile, fields)
        self.session.add(profile)
        self.session.commit()
        logger.info("Created profile %s", profile.id)
        return profile

    def get_profile(self, profile_id: int) -> CandidateProfile:
        profile = self.session.get(CandidateProfile, profile_id)
        if profile is None:
            raise ProfileNotFoundError(f"Profile not found: {profile_id}")
        return profile

    def update_profile(self, profile_id: int, fields: dict) -> CandidateProfile:
        profile = self.get_profile(profile_id)
        self._apply_fields(profile, fields)
        self.session.commit()
        logger.info("Updated profile %s (%s)", profile_id, ", ".join(sorted(fields)) or "no fields")
        return profile

    def delete_profile(self, profile_id: int):
        profile = self.get_profile(profile_id)
        self.session.delete(profile)
        self.session.commit()
        logger.info("Deleted profile %s", profile_id)

    def regenerate_resume(self, profile_id: int) -> bool:
        """Rebuild the resume even if no source field changed. False when the profile is empty."""
        profile = self.get_profile(profile_id)
        written = generate_and_save_resume(
            OrmProfileRecord(profile),
            save=lambda _record: self.session.commit(),
            renderer=self.renderer,
            placeholder=self.placeholder,
            force=True,
        )
        logger.info("Regenerated resume for profile %s: %s", profile_id, "written" if written else "nothing to write")
        return written

    def get_stats(self) -> dict:
        """Get profile and resume statistics."""
        def count(*criteria) -> int:
            return self.session.scalar(select(func.count(CandidateProfile.id)).where(*criteria))

        return {
            "total_profiles": count(),
            "with_resume": count(CandidateProfile.resume_generated.is_not(None)),
            "with_pdf": count(CandidateProfile.resume_generated_pdf.is_not(None)),
            "open_to_work": count(CandidateProfile.is_open_to_work.is_(True)),
        }

    def close(self):
        if self.session is not None:
            self.session.close()
            self.session = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
