"""Candidate profile model — source fields plus the generated resume."""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import Boolean, DateTime, Integer, JSON, LargeBinary, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base

# Record field name -> model attribute.
FIELD_ATTRIBUTES = {
    "user": "user",
    "firstName": "first_name",
    "lastName": "last_name",
    "headline": "headline",
    "bio": "bio",
    "country": "country",
    "level": "level",
    "linkedin": "linkedin",
    "portfolio": "portfolio",
    "skills": "skills",
    "languages": "languages",
    "work_experience": "work_experience",
    "education": "education",
    "certifications": "certifications",
    "is_open_to_work": "is_open_to_work",
    "resume_generated": "resume_generated",
    "resume_generated_redacted": "resume_generated_redacted",
    "resume_generated_pdf": "resume_generated_pdf",
}


class CandidateProfile(Base):
    __tablename__ = "candidate_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user: Mapped[str] = mapped_column(String(64), default="", index=True)

    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    headline: Mapped[str | None] = mapped_column(String(500), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    country: Mapped[str | None] = mapped_column(String(255), nullable=True)
    level: Mapped[str | None] = mapped_column(String(100), nullable=True)
    linkedin: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    portfolio: Mapped[str | None] = mapped_column(String(2048), nullable=True)

    # Either a JSON list or a string (JSON array text or comma-separated)
    skills: Mapped[Any] = mapped_column(JSON, nullable=True)
    languages: Mapped[Any] = mapped_column(JSON, nullable=True)
    work_experience: Mapped[Any] = mapped_column(JSON, nullable=True)
    education: Mapped[Any] = mapped_column(JSON, nullable=True)
    certifications: Mapped[Any] = mapped_column(JSON, nullable=True)

    is_open_to_work: Mapped[bool] = mapped_column(Boolean, default=False)

    resume_generated: Mapped[str | None] = mapped_column(Text, nullable=True)
    resume_generated_redacted: Mapped[str | None] = mapped_column(Text, nullable=True)
    resume_generated_pdf: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)

    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def get(self, field: str):
        """Read a field by its record name (e.g. 'firstName')."""
        return getattr(self, FIELD_ATTRIBUTES[field])

    def to_dict(self) -> dict:
        """Record-named fields, without the PDF bytes."""
        data = {"id": self.id}
        for name in FIELD_ATTRIBUTES:
            if name != "resume_generated_pdf":
                data[name] = self.get(name)
        data["has_pdf"] = bool(self.resume_generated_pdf)
        data["created"] = self.created.isoformat() if self.created else None
        data["updated"] = self.updated.isoformat() if self.updated else None
        return data
