"""Profile data model."""

from dataclasses import dataclass, field
from typing import Any

from job_board.utils.text_processing import parse_repeatable, sanitize_text

# Record fields whose change triggers resume regeneration, in render order.
SOURCE_FIELDS = (
    "firstName",
    "lastName",
    "headline",
    "bio",
    "country",
    "level",
    "linkedin",
    "portfolio",
    "skills",
    "languages",
    "work_experience",
    "education",
    "certifications",
)

GENERATED_FIELD = "resume_generated"
GENERATED_REDACTED_FIELD = "resume_generated_redacted"
GENERATED_PDF_FIELD = "resume_generated_pdf"

DERIVED_FIELDS = (GENERATED_FIELD, GENERATED_REDACTED_FIELD, GENERATED_PDF_FIELD)


@dataclass
class WorkExperience:
    role: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    description: str = ""

    @classmethod
    def from_dict(cls, raw: dict) -> "WorkExperience":
        return cls(
            role=sanitize_text(raw.get("role")),
            company=sanitize_text(raw.get("company")),
            start_date=sanitize_text(raw.get("startDate")),
            end_date=sanitize_text(raw.get("endDate")),
            is_current=bool(raw.get("isCurrent")),
            description=sanitize_text(raw.get("description")),
        )


@dataclass
class Education:
    school: str = ""
    degree: str = ""
    field_of_study: str = ""
    start_date: str = ""
    end_date: str = ""
    is_current: bool = False
    description: str = ""

    @classmethod
    def from_dict(cls, raw: dict) -> "Education":
        return cls(
            school=sanitize_text(raw.get("school")),
            degree=sanitize_text(raw.get("degree")),
            field_of_study=sanitize_text(raw.get("fieldOfStudy")),
            start_date=sanitize_text(raw.get("startDate")),
            end_date=sanitize_text(raw.get("endDate")),
            is_current=bool(raw.get("isCurrent")),
            description=sanitize_text(raw.get("description")),
        )


@dataclass
class Certification:
    name: str = ""
    issuer: str = ""
    issued_date: str = ""
    credential_url: str = ""

    @classmethod
    def from_dict(cls, raw: dict) -> "Certification":
        return cls(
            name=sanitize_text(raw.get("name")),
            issuer=sanitize_text(raw.get("issuer")),
            issued_date=sanitize_text(raw.get("issuedDate")),
            credential_url=sanitize_text(raw.get("credentialUrl")),
        )


def _strings(value: Any) -> list[str]:
    return [text for text in (sanitize_text(v) for v in parse_repeatable(value)) if text]


def _entries(value: Any, entry_cls) -> list:
    # Non-mapping items in a structured list carry no named fields to render.
    return [entry_cls.from_dict(item) for item in parse_repeatable(value) if isinstance(item, dict)]


@dataclass
class ProfileData:
    """Normalized view of a candidate profile record."""

    first_name: str = ""
    last_name: str = ""
    headline: str = ""
    bio: str = ""
    country: str = ""
    level: str = ""
    linkedin: str = ""
    portfolio: str = ""
    skills: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    work_experience: list[WorkExperience] = field(default_factory=list)
    education: list[Education] = field(default_factory=list)
    certifications: list[Certification] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)

    @classmethod
    def from_record(cls, record) -> "ProfileData":
        """Read the tracked fields off a record exposing get(field)."""
        return cls(
            first_name=sanitize_text(record.get("firstName")),
            last_name=sanitize_text(record.get("lastName")),
            headline=sanitize_text(record.get("headline")),
            bio=sanitize_text(record.get("bio")),
            country=sanitize_text(record.get("country")),
            level=sanitize_text(record.get("level")),
            linkedin=sanitize_text(record.get("linkedin")),
            portfolio=sanitize_text(record.get("portfolio")),
            skills=_strings(record.get("skills")),
            languages=_strings(record.get("languages")),
            work_experience=_entries(record.get("work_experience"), WorkExperience),
            education=_entries(record.get("education"), Education),
            certifications=_entries(record.get("certifications"), Certification),
        )
