"""Combine sub-scores, feedback and suggestions into one review."""
from __future__ import annotations

from resume_review.feedback import generate_feedback, generate_suggestions
from resume_review.log import get_logger
from resume_review.models import ReviewScore, utc_now
from resume_review.scoring import clamp_score, content_score, format_score, keyword_score

log = get_logger(__name__)


def compute_review_score(file_name: str | None, extracted_text: str | None) -> ReviewScore:
    """Score a resume from its file name and extracted text.

    Never raises for empty input; an empty body yields low content and
    keyword scores and the extraction-failure suggestion.
    """
    fmt = format_score(file_name)
    content = content_score(extracted_text)
    keywords = keyword_score(extracted_text)
    overall = (fmt + content + keywords) / 3

    now = utc_now()
    review = ReviewScore(
        overall_score=clamp_score(overall),
        format_score=clamp_score(fmt),
        content_score=clamp_score(content),
        keyword_score=clamp_score(keywords),
        feedback=generate_feedback(fmt, content, keywords),
        suggestions=generate_suggestions(extracted_text),
        created_at=now,
        updated_at=now,
    )
    log.debug(
        "Reviewed %s: overall=%.1f format=%.1f content=%.1f keyword=%.1f",
        file_name, review.overall_score, fmt, content, keywords,
    )
    return review
