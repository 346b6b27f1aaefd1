"""Human-readable feedback and improvement suggestions for a reviewed resume."""
from __future__ import annotations

import re

EXTRACTION_FAILED_MESSAGE = "Resume content could not be extracted. Ensure the PDF is valid."

# (category, [(threshold, message), ...]): first threshold met wins, last is the floor
_FEEDBACK_TIERS: tuple[tuple[str, tuple[tuple[float, str], ...]], ...] = (
    ("format", (
        (80, "Excellent resume format and structure."),
        (60, "Good resume format with room for improvement."),
        (0, "Resume format needs improvement. Consider using a cleaner layout."),
    )),
    ("content", (
        (80, "Strong content with comprehensive information."),
        (60, "Decent content coverage. Add more details to key sections."),
        (0, "Content needs expansion. Include all important sections."),
    )),
    ("keyword", (
        (80, "Excellent use of industry keywords and technical terms."),
        (60, "Good keyword usage. Consider adding more industry-specific terms."),
        (0, "Add more relevant keywords to improve ATS compatibility."),
    )),
)

_SECTION_SUGGESTIONS: tuple[tuple[str, str], ...] = (
    ("experience", "Add a detailed 'Experience' section with your work history."),
    ("education", "Include an 'Education' section with degrees and certifications."),
    ("skill", "Create a 'Skills' section highlighting technical and soft skills."),
    ("project", "Consider adding a 'Projects' section showcasing your work."),
)

_GENERIC_SUGGESTIONS: tuple[str, ...] = (
    "Ensure proper spelling and grammar throughout.",
    "Use action verbs to describe your achievements.",
    "Quantify your accomplishments with metrics and numbers.",
)

_EMAIL_RE = re.compile(r"[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}", re.IGNORECASE)
_MIN_CONTENT_LENGTH = 500


def _tier_message(score: float, tiers: tuple[tuple[float, str], ...]) -> str:
    for threshold, message in tiers:
        if score >= threshold:
            return message
    return tiers[-1][1]


def generate_feedback(format_score: float, content_score: float, keyword_score: float) -> str:
    scores = {"format": format_score, "content": content_score, "keyword": keyword_score}
    lines = [
        f"• {_tier_message(scores[category], tiers)}\n"
        for category, tiers in _FEEDBACK_TIERS
    ]
    return "".join(lines)


def generate_suggestions(text: str | None) -> str:
    """One line per missing resume element, then three generic tips.

    Empty text short-circuits to a single extraction-failure message.
    """
    if not text:
        return EXTRACTION_FAILED_MESSAGE

    low = text.lower()
    items = [msg for marker, msg in _SECTION_SUGGESTIONS if marker not in low]
    if not _EMAIL_RE.search(text):
        items.append("Make sure your email address is clearly visible.")
    if len(text) < _MIN_CONTENT_LENGTH:
        items.append("Expand your resume content for more detailed information.")
    items.extend(_GENERIC_SUGGESTIONS)
    return "".join(f"✓ {item}\n" for item in items)
