"""Heuristic resume sub-scores: format, content and keyword coverage."""
from __future__ import annotations

import re

MAX_SCORE = 100.0
EMPTY_TEXT_SCORE = 20.0

TECH_KEYWORDS: tuple[str, ...] = (
    "java", "python", "javascript", "sql", "rest api", "cloud",
    "aws", "docker", "kubernetes", "git", "spring", "react", "angular",
)

SOFT_KEYWORDS: tuple[str, ...] = (
    "leadership", "communication", "teamwork", "problem solving",
    "project management", "agile", "analytical",
)

# (alternatives, points): any alternative present in the lower-cased text earns the points
SECTION_MARKERS: tuple[tuple[tuple[str, ...], float], ...] = (
    (("experience", "employment"), 15),
    (("education", "degree"), 10),
    (("skill",), 10),
    (("project", "achievement"), 10),
    (("certification", "license"), 5),
    (("email", "@"), 5),
)

_PHONE_RE = re.compile(r"\d{3}[-.]?\d{3}[-.]?\d{4}")


def clamp_score(score: float) -> float:
    return max(0.0, min(score, MAX_SCORE))


def format_score(file_name: str | None) -> float:
    """Score the upload's file name: PDF bonus, penalty for odd lengths."""
    name = file_name or ""
    score = 60.0
    if name.lower().endswith(".pdf"):
        score += 20
    if len(name) < 5 or len(name) > 50:
        score -= 10
    return min(score, MAX_SCORE)


def content_score(text: str | None) -> float:
    if not text:
        return EMPTY_TEXT_SCORE

    low = text.lower()
    score = 50.0
    for alternatives, points in SECTION_MARKERS:
        if any(a in low for a in alternatives):
            score += points
    if "phone" in low or _PHONE_RE.search(low):
        score += 5
    return min(score, MAX_SCORE)


def keyword_score(text: str | None) -> float:
    """Base 40, +2 per technical and +1.5 per soft-skill keyword found.

    Matching is plain substring containment, so "javascript" also counts
    towards "java".
    """
    if not text:
        return EMPTY_TEXT_SCORE

    low = text.lower()
    score = 40.0
    score += 2 * sum(1 for kw in TECH_KEYWORDS if kw in low)
    score += 1.5 * sum(1 for kw in SOFT_KEYWORDS if kw in low)
    return min(score, MAX_SCORE)
