"""Load env configuration and the static job catalog."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from resume_review.models import JobCatalog, JobCatalogEntry

# Plain module logger: resume_review.log reads its settings from here.
log = logging.getLogger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
DEFAULT_CATALOG_PATH: Path = Path(__file__).resolve().parent / "job_catalog.yaml"


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def get_env_int(key: str, default: int) -> int:
    raw = get_env(key)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        log.warning("Ignoring non-integer %s=%r, using %d", key, raw, default)
        return default


DATA_DIR: Path = Path(get_env("DATA_DIR") or ROOT_DIR / "data")
UPLOAD_DIR: Path = Path(get_env("UPLOAD_DIR") or DATA_DIR / "uploads")
REPORTS_DIR: Path = Path(get_env("REPORTS_DIR") or ROOT_DIR / "reports")
MAX_FILE_SIZE_BYTES: int = get_env_int("MAX_FILE_SIZE_MB", 10) * 1024 * 1024
CATALOG_PATH: Path = Path(get_env("JOB_CATALOG_PATH") or DEFAULT_CATALOG_PATH)
LOG_LEVEL: str = get_env("LOG_LEVEL", "INFO").upper()
LOG_DIR: Path = Path(get_env("LOG_DIR") or ROOT_DIR / "logs")
LOG_TO_FILE: bool = get_env("LOG_TO_FILE", "1").lower() not in ("0", "false", "no")


def ensure_dirs() -> None:
    for d in (DATA_DIR, UPLOAD_DIR, REPORTS_DIR):
        d.mkdir(parents=True, exist_ok=True)


def _parse_entry(raw: Any, index: int) -> JobCatalogEntry:
    if not isinstance(raw, dict):
        raise ValueError(f"Job catalog entry #{index} must be a mapping")
    title = str(raw.get("title") or "").strip()
    company = str(raw.get("company") or "").strip()
    if not title or not company:
        raise ValueError(f"Job catalog entry #{index} needs a title and a company")
    raw_keywords = raw.get("keywords") or []
    if not isinstance(raw_keywords, list):
        raise ValueError(f"Job catalog entry {title!r}: keywords must be a list")
    keywords = tuple(str(k).strip().lower() for k in raw_keywords if str(k).strip())
    if not keywords:
        raise ValueError(f"Job catalog entry {title!r} has no keywords")
    return JobCatalogEntry(title=title, company=company, keywords=keywords)


def _parse_skill_rule(rule: Any, index: int) -> tuple[str, str] | None:
    if not isinstance(rule, dict):
        raise ValueError(f"required_skills rule #{index} must be a mapping with title_contains and skills")
    needle = str(rule.get("title_contains") or "").strip()
    skills = str(rule.get("skills") or "").strip()
    if needle and skills:
        return needle, skills
    return None


def load_job_catalog(path: Path | None = None) -> JobCatalog:
    """Parse the job catalog YAML into an immutable :class:`JobCatalog`."""
    path = path or CATALOG_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    entries = tuple(_parse_entry(raw, i) for i, raw in enumerate(data.get("jobs") or []))
    if not entries:
        raise ValueError(f"Job catalog {path} defines no jobs")

    rules: list[tuple[str, str]] = []
    for i, rule in enumerate(data.get("required_skills") or []):
        parsed = _parse_skill_rule(rule, i)
        if parsed:
            rules.append(parsed)

    catalog = JobCatalog(
        entries=entries,
        skill_rules=tuple(rules),
        fallback_skills=str(data.get("fallback_skills") or "Technical Skills, Problem Solving, Teamwork"),
        base_url=str(data.get("base_url") or "https://example.com/jobs/"),
        location=str(data.get("location") or "Remote / Hybrid"),
        employment_type=str(data.get("employment_type") or "Full-time"),
    )
    log.debug("Loaded job catalog from %s (%d jobs)", path.name, len(entries))
    return catalog
