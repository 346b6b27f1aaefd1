"""Data models for resumes, review scores, job suggestions and applications."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class JobCatalogEntry:
    title: str
    company: str
    keywords: tuple[str, ...]


@dataclass(frozen=True)
class JobCatalog:
    """Static job archetypes plus the fixed attributes every suggestion carries.

    ``skill_rules`` is ordered: the first ``(needle, skills)`` pair whose needle
    occurs in a job title wins, otherwise ``fallback_skills`` applies.
    """

    entries: tuple[JobCatalogEntry, ...]
    skill_rules: tuple[tuple[str, str], ...]
    fallback_skills: str
    base_url: str = "https://example.com/jobs/"
    location: str = "Remote / Hybrid"
    employment_type: str = "Full-time"


@dataclass
class Resume:
    id: int
    file_name: str
    file_path: str
    file_size: int
    extracted_text: str
    status: str = "UPLOADED"
    uploaded_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)


@dataclass
class ReviewScore:
    overall_score: float
    format_score: float
    content_score: float
    keyword_score: float
    feedback: str
    suggestions: str
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)
    id: int | None = None
    resume_id: int | None = None

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["created_at"] = self.created_at.isoformat()
        d["updated_at"] = self.updated_at.isoformat()
        return d


@dataclass
class JobSuggestion:
    job_title: str
    company: str
    description: str
    match_score: float
    location: str
    employment_type: str
    required_skills: str
    job_url: str
    status: str = "ACTIVE"
    suggested_at: datetime = field(default_factory=utc_now)
    id: int | None = None
    resume_id: int | None = None

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["suggested_at"] = self.suggested_at.isoformat()
        return d


@dataclass
class JobApplication:
    id: int
    job_suggestion_id: int
    resume_id: int
    status: str = "APPLIED"
    application_notes: str | None = None
    applied_at: datetime = field(default_factory=utc_now)
    response_date: datetime | None = None
    response_status: str | None = None
    response_message: str | None = None
