"""Render a resume review as a Markdown report."""
from __future__ import annotations

import re
from datetime import date
from pathlib import Path

from resume_review.config import REPORTS_DIR
from resume_review.log import get_logger
from resume_review.models import JobApplication, JobSuggestion, Resume, ReviewScore

log = get_logger(__name__)


def _truncate(text: str, width: int) -> str:
    return text[:width] + ("…" if len(text) > width else "")


def _bullets(block: str) -> list[str]:
    """Turn the newline-separated feedback/suggestion text into list items."""
    items = [line.strip().lstrip("•✓").strip() for line in block.splitlines()]
    return [f"- {item}" for item in items if item]


def build_review_report(
    resume: Resume,
    review: ReviewScore,
    suggestions: list[JobSuggestion],
    applications: list[JobApplication] | None = None,
) -> str:
    applications = applications or []
    review_date = review.created_at.strftime("%Y-%m-%d")
    lines: list[str] = [f"# Resume Review — {resume.file_name} ({review_date})", ""]

    lines.append(f"**Overall score: {review.overall_score:.0f}/100**")
    lines.append("")
    lines.append("| Format | Content | Keywords |")
    lines.append("|-------:|--------:|---------:|")
    lines.append(f"| {review.format_score:.0f} | {review.content_score:.0f} | {review.keyword_score:.0f} |")
    lines.append("")

    lines.append("## Feedback")
    lines.append("")
    lines.extend(_bullets(review.feedback))
    lines.append("")

    lines.append("## Suggestions")
    lines.append("")
    lines.extend(_bullets(review.suggestions))
    lines.append("")

    ranked = sorted(suggestions, key=lambda s: -s.match_score)
    if ranked:
        lines.append("---")
        lines.append("")
        lines.append("## Job Matches")
        lines.append("")
        lines.append("| # | Role | Company | Match | Skills | Link |")
        lines.append("|--:|------|---------|------:|--------|------|")
        for i, s in enumerate(ranked, 1):
            lines.append(
                f"| {i} | {_truncate(s.job_title, 40)} | {_truncate(s.company, 22)} "
                f"| {s.match_score:.0f}% | {_truncate(s.required_skills, 48)} | [View]({s.job_url}) |"
            )
        lines.append("")

    if applications:
        by_id = {s.id: s for s in suggestions}
        lines.append("---")
        lines.append("")
        lines.append("## Applications")
        lines.append("")
        for a in applications:
            job = by_id.get(a.job_suggestion_id)
            label = f"**{job.job_title}** @ {job.company}" if job else f"Suggestion #{a.job_suggestion_id}"
            line = f"- {label} — _{a.status}_ — {a.applied_at.strftime('%Y-%m-%d %H:%M')}"
            if a.response_status:
                line += f" — response: {a.response_status}"
            lines.append(line)
        lines.append("")

    log.info("Built review report for %s: %d job matches", resume.file_name, len(ranked))
    return "\n".join(lines)


def write_report(
    content: str,
    name: str,
    reports_dir: Path | None = None,
    resume_id: int | None = None,
) -> Path:
    """Write *content* as ``review_[<id>_]<stem>_<date>.md``, never replacing an existing report."""
    reports_dir = Path(reports_dir or REPORTS_DIR)
    reports_dir.mkdir(parents=True, exist_ok=True)
    stem = re.sub(r"[^A-Za-z0-9_-]+", "_", Path(name).stem).strip("_") or "resume"
    prefix = f"review_{resume_id}_{stem}" if resume_id is not None else f"review_{stem}"
    base = f"{prefix}_{date.today().isoformat()}"
    path = reports_dir / f"{base}.md"
    n = 2
    while path.exists():
        path = reports_dir / f"{base}_{n}.md"
        n += 1
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
