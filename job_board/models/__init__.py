"""ORM models for the job board."""

from .base import Base, make_session_factory, normalize_database_url
from .candidate_profile import FIELD_ATTRIBUTES, CandidateProfile

__all__ = [
    "Base",
    "make_session_factory",
    "normalize_database_url",
    "CandidateProfile",
    "FIELD_ATTRIBUTES",
]
