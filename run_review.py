#!/usr/bin/env python3
"""Entry point to review a resume file from the command line."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from resume_review.errors import InvalidResumeError
from resume_review.log import get_logger

log = get_logger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score a resume and suggest matching jobs.")
    parser.add_argument("resume", type=Path, help="Path to a PDF, DOCX or TXT resume")
    parser.add_argument(
        "--write-report",
        action="store_true",
        help="Also write the Markdown report to the reports directory",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    from resume_review.report import build_review_report, write_report
    from resume_review.service import ResumeReviewService

    service = ResumeReviewService()
    try:
        resume = service.register_resume(args.resume)
    except InvalidResumeError as exc:
        log.error("Cannot review %s: %s", args.resume, exc)
        return 1

    review = service.generate_review_score(resume.id)
    suggestions = service.generate_job_suggestions(resume.id)
    report = build_review_report(resume, review, suggestions)
    print(report)

    log.info("Review complete.")
    log.info("  Overall score: %.1f", review.overall_score)
    best = max(suggestions, key=lambda s: s.match_score)
    log.info("  Best match: %s @ %s (%.0f)", best.job_title, best.company, best.match_score)
    if args.write_report:
        path = write_report(report, resume.file_name, resume_id=resume.id)
        log.info("  Report: %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
