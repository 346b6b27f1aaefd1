"""Review service: resume registry, review and suggestion history, applications.

Everything is held in memory for the lifetime of the process. Generating a
review or suggestions again for the same resume appends new records rather
than replacing earlier ones, so the history of runs stays visible.
"""
from __future__ import annotations

import hashlib
import itertools
import threading
import uuid
from pathlib import Path

from resume_review import config
from resume_review.errors import InvalidResumeError, ResourceNotFoundError
from resume_review.log import get_logger
from resume_review.matcher import JOB_CATALOG, compute_job_suggestions
from resume_review.models import JobApplication, JobCatalog, JobSuggestion, Resume, ReviewScore, utc_now
from resume_review.resume_parser import SUPPORTED_SUFFIXES, extract_text
from resume_review.review import compute_review_score
from resume_review.tracker import ApplicationTracker

log = get_logger(__name__)


def upload_fingerprint(file_name: str, content: bytes) -> str:
    """Identify an upload by name and content, so a changed file with the same name is new."""
    digest = hashlib.sha256(content).hexdigest()[:16]
    return f"{file_name}:{digest}"


class ResumeReviewService:
    def __init__(
        self,
        upload_dir: Path | None = None,
        max_file_size: int | None = None,
        catalog: JobCatalog | None = None,
    ) -> None:
        self.upload_dir = Path(upload_dir or config.UPLOAD_DIR)
        self.max_file_size = max_file_size or config.MAX_FILE_SIZE_BYTES
        self.catalog = catalog or JOB_CATALOG
        self.tracker = ApplicationTracker()

        self._resumes: dict[int, Resume] = {}
        self._reviews: dict[int, ReviewScore] = {}
        self._suggestions: dict[int, JobSuggestion] = {}
        self._resume_ids = itertools.count(1)
        self._review_ids = itertools.count(1)
        self._suggestion_ids = itertools.count(1)
        self._lock = threading.Lock()

    # ── Resumes ──────────────────────────────────────────────────────────

    def upload_resume(self, file_name: str, content: bytes) -> Resume:
        """Store an uploaded file, extract its text and register it."""
        log.info("Starting resume upload for file: %s", file_name)
        if not content:
            raise InvalidResumeError("File cannot be empty")
        if len(content) > self.max_file_size:
            raise InvalidResumeError("File size exceeds maximum allowed size")
        suffix = Path(file_name).suffix.lower()
        if suffix not in SUPPORTED_SUFFIXES:
            raise InvalidResumeError(f"Unsupported resume format: {suffix or file_name}")

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        dest = self.upload_dir / f"{uuid.uuid4()}_{Path(file_name).name}"
        dest.write_bytes(content)
        log.info("File saved to %s", dest)

        return self._register(file_name, dest, len(content))

    def register_resume(self, path: Path) -> Resume:
        """Register a file already on disk without copying it."""
        path = Path(path)
        if not path.is_file():
            raise InvalidResumeError(f"No such file: {path}")
        if path.suffix.lower() not in SUPPORTED_SUFFIXES:
            raise InvalidResumeError(f"Unsupported resume format: {path.suffix or path.name}")
        return self._register(path.name, path, path.stat().st_size)

    def _register(self, file_name: str, path: Path, size: int) -> Resume:
        text = extract_text(path)
        with self._lock:
            resume = Resume(
                id=next(self._resume_ids),
                file_name=file_name,
                file_path=str(path),
                file_size=size,
                extracted_text=text,
            )
            self._resumes[resume.id] = resume
        log.info("Resume saved with ID: %d (%d chars extracted)", resume.id, len(text))
        return resume

    def get_resume(self, resume_id: int) -> Resume:
        resume = self._resumes.get(resume_id)
        if resume is None:
            raise ResourceNotFoundError("Resume", resume_id)
        return resume

    def list_resumes(self) -> list[Resume]:
        with self._lock:
            return list(self._resumes.values())

    def delete_resume(self, resume_id: int) -> None:
        resume = self.get_resume(resume_id)
        path = Path(resume.file_path)
        if path.parent.resolve() == self.upload_dir.resolve():
            path.unlink(missing_ok=True)
        with self._lock:
            del self._resumes[resume_id]
            for store in (self._reviews, self._suggestions):
                for key in [k for k, v in store.items() if v.resume_id == resume_id]:
                    del store[key]
        dropped = self.tracker.delete_for_resume(resume_id)
        log.info("Resume deleted with ID: %d (%d applications dropped)", resume_id, dropped)

    def get_resume_status(self, resume_id: int) -> str:
        return self.get_resume(resume_id).status

    def update_resume_status(self, resume_id: int, status: str) -> Resume:
        resume = self.get_resume(resume_id)
        resume.status = status
        resume.updated_at = utc_now()
        return resume

    # ── Review scores ────────────────────────────────────────────────────

    def generate_review_score(self, resume_id: int) -> ReviewScore:
        log.info("Generating review score for resume ID: %d", resume_id)
        resume = self.get_resume(resume_id)
        review = compute_review_score(resume.file_name, resume.extracted_text)
        with self._lock:
            review.id = next(self._review_ids)
            review.resume_id = resume_id
            self._reviews[review.id] = review
        log.info("Review score generated with ID: %d (overall %.1f)", review.id, review.overall_score)
        return review

    def get_review_score(self, resume_id: int) -> ReviewScore:
        """Most recent review for *resume_id*."""
        self.get_resume(resume_id)
        with self._lock:
            reviews = [r for r in self._reviews.values() if r.resume_id == resume_id]
        if not reviews:
            raise ResourceNotFoundError("Review score for resume", resume_id)
        return max(reviews, key=lambda r: r.id or 0)

    # ── Job suggestions ──────────────────────────────────────────────────

    def generate_job_suggestions(self, resume_id: int) -> list[JobSuggestion]:
        log.info("Generating job suggestions for resume ID: %d", resume_id)
        resume = self.get_resume(resume_id)
        suggestions = compute_job_suggestions(resume.extracted_text, self.catalog)
        with self._lock:
            for s in suggestions:
                s.id = next(self._suggestion_ids)
                s.resume_id = resume_id
                self._suggestions[s.id] = s
        log.info("Generated %d job suggestions for resume ID: %d", len(suggestions), resume_id)
        return suggestions

    def get_job_suggestions(self, resume_id: int) -> list[JobSuggestion]:
        """All suggestions for *resume_id*, best match first."""
        self.get_resume(resume_id)
        with self._lock:
            found = [s for s in self._suggestions.values() if s.resume_id == resume_id]
        return sorted(found, key=lambda s: -s.match_score)

    def get_job_suggestion(self, suggestion_id: int) -> JobSuggestion:
        suggestion = self._suggestions.get(suggestion_id)
        if suggestion is None:
            raise ResourceNotFoundError("Job suggestion", suggestion_id)
        return suggestion

    # ── Applications ─────────────────────────────────────────────────────

    def apply_for_job(
        self, job_suggestion_id: int, resume_id: int, notes: str | None = None
    ) -> JobApplication:
        log.info("Applying for job suggestion ID: %d with resume ID: %d", job_suggestion_id, resume_id)
        self.get_job_suggestion(job_suggestion_id)
        self.get_resume(resume_id)
        return self.tracker.record_application(job_suggestion_id, resume_id, notes)

    def get_applications_for_resume(self, resume_id: int) -> list[JobApplication]:
        self.get_resume(resume_id)
        return self.tracker.for_resume(resume_id)

    def get_application(self, application_id: int) -> JobApplication:
        return self.tracker.get(application_id)

    def update_application_status(self, application_id: int, status: str) -> JobApplication:
        log.info("Updating application ID: %d status to: %s", application_id, status)
        return self.tracker.update_status(application_id, status)

    def update_application_response(
        self, application_id: int, response_status: str, response_message: str
    ) -> JobApplication:
        log.info("Updating application ID: %d response", application_id)
        return self.tracker.update_response(application_id, response_status, response_message)

    def delete_application(self, application_id: int) -> None:
        self.tracker.delete(application_id)
