"""Exception types for job submission and access checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


class JobPostingError(Exception):
    """Base exception for job posting operations."""


SUBMISSION_FAILED_MESSAGE = "We couldn't save the job. Please check your connection and try again."


@dataclass
class JobSubmissionError(JobPostingError):
    """Raised when creating or updating a job fails at the transport or server.

    Submission errors are operation-level: they carry one user-facing message
    for the attempted operation and never map onto individual form fields.
    """

    message: str = SUBMISSION_FAILED_MESSAGE
    operation: str | None = None
    status_code: int | None = None
    details: Mapping[str, Any] | None = None
    original: Exception | None = None

    def __str__(self) -> str:
        return self.message


@dataclass
class SubmissionNetworkError(JobSubmissionError):
    """Raised when the job board API cannot be reached."""


@dataclass
class SubmissionRejectedError(JobSubmissionError):
    """Raised when the server refuses the payload (400, 409 or 422)."""


@dataclass
class SubmissionUnauthorizedError(JobSubmissionError):
    """Raised when the caller may not create or edit the job (401 or 403)."""


class JobPostingAccessError(JobPostingError, PermissionError):
    """Raised when a user without a posting role opens the wizard."""


__all__ = [
    "JobPostingAccessError",
    "JobPostingError",
    "JobSubmissionError",
    "SUBMISSION_FAILED_MESSAGE",
    "SubmissionNetworkError",
    "SubmissionRejectedError",
    "SubmissionUnauthorizedError",
]
