"""Errors raised by the review service around the scoring core."""
from __future__ import annotations


class ResourceNotFoundError(LookupError):
    """A resume, review, suggestion or application id is unknown."""

    def __init__(self, entity: str, ident: object) -> None:
        super().__init__(f"{entity} not found with ID: {ident}")
        self.entity = entity
        self.ident = ident


class InvalidResumeError(ValueError):
    """The uploaded file cannot be accepted (empty, too large, wrong type)."""


class AlreadyAppliedError(ValueError):
    """An application already exists for this suggestion and resume."""
