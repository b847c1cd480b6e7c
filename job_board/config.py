"""YAML config loading and validation."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from job_board.resume.redactor import REDACTION_PLACEHOLDER
from job_board.utils.logging_config import resolve_level


@dataclass
class PdfConfig:
    enabled: bool = True
    margin: float = 50
    font_name: str = "Helvetica"
    font_size: float = 12
    filename: str = "generated-resume.pdf"


@dataclass
class ResumeConfig:
    placeholder: str = REDACTION_PLACEHOLDER
    pdf: PdfConfig = field(default_factory=PdfConfig)


@dataclass
class DatabaseConfig:
    url: str = "sqlite:///data/job_board.db"
    echo: bool = False


@dataclass
class AppConfig:
    resume: ResumeConfig = field(default_factory=ResumeConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    log_dir: str = "logs"
    log_level: str = "INFO"


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load and validate configuration from YAML file."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Copy config.example.yaml to config.yaml and fill in your settings."
        )

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    config = AppConfig()

    # Resume
    resume_raw = raw.get("resume", {})
    pdf_raw = resume_raw.get("pdf", {})
    config.resume = ResumeConfig(
        placeholder=resume_raw.get("placeholder", REDACTION_PLACEHOLDER),
        pdf=PdfConfig(
            enabled=pdf_raw.get("enabled", True),
            margin=pdf_raw.get("margin", 50),
            font_name=pdf_raw.get("font_name", "Helvetica"),
            font_size=pdf_raw.get("font_size", 12),
            filename=pdf_raw.get("filename", "generated-resume.pdf"),
        ),
    )

    # Database (env var takes precedence)
    db_raw = raw.get("database", {})
    config.database = DatabaseConfig(
        url=os.environ.get("DATABASE_URL", db_raw.get("url", "sqlite:///data/job_board.db")),
        echo=db_raw.get("echo", False),
    )

    config.log_dir = os.environ.get("JOB_BOARD_LOG_DIR", raw.get("log_dir", "logs"))
    config.log_level = os.environ.get("JOB_BOARD_LOG_LEVEL", raw.get("log_level", "INFO"))

    return config


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    warnings = []

    if not config.resume.placeholder:
        warnings.append("Empty redaction placeholder - redacted text will simply be removed")

    pdf = config.resume.pdf
    if pdf.enabled and pdf.font_size <= 0:
        warnings.append("PDF font_size must be positive - PDF rendering will fail and be skipped")

    if pdf.enabled and pdf.margin < 0:
        warnings.append("PDF margin must not be negative")

    if pdf.enabled and not pdf.filename.lower().endswith(".pdf"):
        warnings.append("PDF filename should end with .pdf")

    try:
        resolve_level(config.log_level)
    except ValueError:
        warnings.append(f"Unknown log_level {config.log_level!r} - using INFO")

    return warnings
