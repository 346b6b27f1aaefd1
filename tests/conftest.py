import os
from pathlib import Path

import pytest

os.environ.setdefault("LOG_TO_FILE", "0")

STRONG_RESUME = """Jane Doe
Email: jane.doe@example.com | Phone: 555-123-4567

Experience
Senior engineer building Java and Spring microservices on AWS with Docker and Kubernetes.

Education
B.Sc. degree in Computer Science

Skills
Python, SQL, Git, React, REST API design, cloud architecture

Projects
Led agile teams with strong leadership and communication.

Certifications
AWS Solutions Architect certification
"""


@pytest.fixture
def strong_resume_text() -> str:
    """
    A resume hitting every section marker and a good share of keywords.
    """
    return STRONG_RESUME


@pytest.fixture
def service(tmp_path: Path):
    """
    A fresh in-memory service whose uploads land in a temp directory.
    """
    from resume_review.service import ResumeReviewService

    return ResumeReviewService(upload_dir=tmp_path / "uploads")
