import dataclasses

import pytest

from resume_review.matcher import (
    JOB_CATALOG,
    compute_job_suggestions,
    job_description,
    job_url,
    match_score,
    required_skills,
)

TITLES = [
    "Senior Software Engineer",
    "Full Stack Developer",
    "Backend Developer",
    "DevOps Engineer",
    "Data Engineer",
]


def _scores(text):
    return {s.job_title: s.match_score for s in compute_job_suggestions(text)}


def test_always_five_suggestions_in_catalog_order():
    for text in ("", None, "docker", "sql data python " * 50):
        suggestions = compute_job_suggestions(text)
        assert [s.job_title for s in suggestions] == TITLES


def test_devops_keywords_match():
    scores = _scores("docker, kubernetes, aws")
    assert scores["DevOps Engineer"] == 95.0
    assert scores["Senior Software Engineer"] == 50.0
    assert scores["Data Engineer"] == 50.0


def test_match_is_case_insensitive_substring():
    scores = _scores("JavaScript, React and REST APIs")
    assert scores["Full Stack Developer"] == 95.0
    # "java" is a substring of "javascript"
    assert scores["Senior Software Engineer"] == 65.0


def test_empty_text_scores_base():
    assert set(_scores("").values()) == {50.0}


def test_match_score_is_capped():
    assert match_score("a b c d", ("a", "b", "c", "d")) == 100.0
    assert match_score(None, ("java",)) == 50.0


def test_required_skills_first_match_wins():
    assert required_skills("Senior Backend Developer").startswith("5+ years experience")
    assert required_skills("Backend Developer") == "REST API, SQL, Java/Python, Microservices, Cloud"
    assert required_skills("Full Stack Developer") == "JavaScript, React, Node.js, SQL, Git"
    assert required_skills("DevOps Engineer") == "Docker, Kubernetes, AWS, CI/CD, Linux"
    assert required_skills("Data Engineer") == "Technical Skills, Problem Solving, Teamwork"


def test_fixed_suggestion_attributes():
    s = compute_job_suggestions("python")[1]
    assert s.company == "Digital Solutions Inc"
    assert s.job_url == "https://example.com/jobs/full-stack-developer"
    assert s.description == job_description("Full Stack Developer")
    assert "talented Full Stack Developer" in s.description
    assert s.location == "Remote / Hybrid"
    assert s.employment_type == "Full-time"
    assert s.status == "ACTIVE"


def test_job_url_slug():
    assert job_url("Senior Software Engineer") == "https://example.com/jobs/senior-software-engineer"


def test_rerun_gives_same_scores_but_new_objects(strong_resume_text):
    first = compute_job_suggestions(strong_resume_text)
    second = compute_job_suggestions(strong_resume_text)
    assert [s.match_score for s in first] == [s.match_score for s in second]
    assert all(a is not b for a, b in zip(first, second))


def test_catalog_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        JOB_CATALOG.entries[0].title = "Changed"  # type: ignore[misc]
