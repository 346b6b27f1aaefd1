"""Track job applications made against suggestions (in-memory)."""
from __future__ import annotations

import itertools
import threading

from resume_review.errors import AlreadyAppliedError, ResourceNotFoundError
from resume_review.log import get_logger
from resume_review.models import JobApplication, utc_now

log = get_logger(__name__)

APPLICATION_STATUSES: tuple[str, ...] = (
    "APPLIED", "INTERVIEWING", "OFFERED", "ACCEPTED", "REJECTED", "WITHDRAWN",
)


def _normalize_status(status: str) -> str:
    value = (status or "").strip().upper()
    if value not in APPLICATION_STATUSES:
        raise ValueError(
            f"Unknown application status {status!r}; expected one of {', '.join(APPLICATION_STATUSES)}"
        )
    return value


class ApplicationTracker:
    """Applications keyed by id, at most one per (suggestion, resume) pair."""

    def __init__(self) -> None:
        self._applications: dict[int, JobApplication] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def record_application(
        self, job_suggestion_id: int, resume_id: int, notes: str | None = None
    ) -> JobApplication:
        with self._lock:
            for app in self._applications.values():
                if app.job_suggestion_id == job_suggestion_id and app.resume_id == resume_id:
                    raise AlreadyAppliedError("Already applied for this job")
            app = JobApplication(
                id=next(self._ids),
                job_suggestion_id=job_suggestion_id,
                resume_id=resume_id,
                application_notes=notes,
            )
            self._applications[app.id] = app
        log.info("Job application created with ID: %d", app.id)
        return app

    def get(self, application_id: int) -> JobApplication:
        app = self._applications.get(application_id)
        if app is None:
            raise ResourceNotFoundError("Job application", application_id)
        return app

    def for_resume(self, resume_id: int) -> list[JobApplication]:
        """Applications for *resume_id*, most recent first."""
        with self._lock:
            apps = [a for a in self._applications.values() if a.resume_id == resume_id]
        return sorted(apps, key=lambda a: (a.applied_at, a.id), reverse=True)

    def update_status(self, application_id: int, status: str) -> JobApplication:
        app = self.get(application_id)
        app.status = _normalize_status(status)
        log.debug("Updated application %d → %s", application_id, app.status)
        return app

    def update_response(
        self, application_id: int, response_status: str, response_message: str
    ) -> JobApplication:
        app = self.get(application_id)
        app.response_status = response_status
        app.response_message = response_message
        app.response_date = utc_now()
        log.debug("Recorded response for application %d: %s", application_id, response_status)
        return app

    def delete(self, application_id: int) -> None:
        with self._lock:
            if self._applications.pop(application_id, None) is None:
                raise ResourceNotFoundError("Job application", application_id)
        log.info("Job application deleted with ID: %d", application_id)

    def delete_for_resume(self, resume_id: int) -> int:
        with self._lock:
            doomed = [i for i, a in self._applications.items() if a.resume_id == resume_id]
            for i in doomed:
                del self._applications[i]
        return len(doomed)
