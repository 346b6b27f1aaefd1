"""Match resume text against the fixed job catalog."""
from __future__ import annotations

from resume_review.config import load_job_catalog
from resume_review.log import get_logger
from resume_review.models import JobCatalog, JobSuggestion, utc_now

log = get_logger(__name__)

BASE_MATCH_SCORE = 50.0
POINTS_PER_KEYWORD = 15.0

_DESCRIPTION_TEMPLATE = (
    "We are looking for a talented {title} to join our team. "
    "You will work on challenging projects using modern technologies "
    "and collaborate with a team of experienced professionals."
)

# Loaded once; never mutated afterwards.
JOB_CATALOG: JobCatalog = load_job_catalog()


def match_score(resume_text: str | None, keywords: tuple[str, ...]) -> float:
    low = (resume_text or "").lower()
    hits = sum(1 for kw in keywords if kw in low)
    return min(BASE_MATCH_SCORE + hits * POINTS_PER_KEYWORD, 100.0)


def required_skills(job_title: str, catalog: JobCatalog = JOB_CATALOG) -> str:
    for needle, skills in catalog.skill_rules:
        if needle in job_title:
            return skills
    return catalog.fallback_skills


def job_url(job_title: str, catalog: JobCatalog = JOB_CATALOG) -> str:
    return catalog.base_url + job_title.lower().replace(" ", "-")


def job_description(job_title: str) -> str:
    return _DESCRIPTION_TEMPLATE.format(title=job_title)


def compute_job_suggestions(
    resume_text: str | None, catalog: JobCatalog = JOB_CATALOG
) -> list[JobSuggestion]:
    """Return one suggestion per catalog entry, in catalog order."""
    now = utc_now()
    suggestions = [
        JobSuggestion(
            job_title=entry.title,
            company=entry.company,
            description=job_description(entry.title),
            match_score=match_score(resume_text, entry.keywords),
            location=catalog.location,
            employment_type=catalog.employment_type,
            required_skills=required_skills(entry.title, catalog),
            job_url=job_url(entry.title, catalog),
            suggested_at=now,
        )
        for entry in catalog.entries
    ]
    log.debug(
        "Matched resume against %d catalog jobs: %s",
        len(suggestions),
        ", ".join(f"{s.job_title}={s.match_score:.0f}" for s in suggestions),
    )
    return suggestions
