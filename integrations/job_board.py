"""HTTP client for the job board API used by the posting wizard."""

from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import quote

import requests

from core.categories import Category, normalize_categories
from core.config import Settings, load_settings
from core.errors import (
    JobSubmissionError,
    SubmissionNetworkError,
    SubmissionRejectedError,
    SubmissionUnauthorizedError,
)

logger = logging.getLogger(__name__)

JOBS_PATH = "/api/jobs"
CATEGORIES_PATH = "/api/job-categories"

_HEADERS = {"Accept": "application/json", "User-Agent": "JobPostingWizard/1.0"}
_REJECTED_STATUSES = frozenset({400, 409, 422})
_UNAUTHORIZED_STATUSES = frozenset({401, 403})

REJECTED_MESSAGE = "The job could not be saved. Please review the details and try again."
UNAUTHORIZED_MESSAGE = "You are not allowed to post or edit this job."


def unwrap_envelope(body: Any) -> Any:
    """Return the payload inside ``{"success": ..., "data": ...}`` responses."""

    if isinstance(body, Mapping) and "data" in body and body.get("data") is not None:
        return body["data"]
    return body


def _server_message(body: Any) -> str | None:
    if isinstance(body, Mapping):
        for key in ("message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
    return None


class JobBoardClient:
    """Thin ``requests`` wrapper around the job endpoints.

    ``session`` may be any object with a ``request`` method compatible with
    :class:`requests.Session`, which keeps tests free of network access.
    """

    def __init__(
        self,
        base_url: str,
        *,
        token: str | None = None,
        timeout: float = 15.0,
        session: requests.Session | None = None,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("base_url is required for the job board client.")
        self.base_url = base_url.strip().rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._headers = dict(_HEADERS)
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        token: str | None = None,
        session: requests.Session | None = None,
    ) -> "JobBoardClient":
        settings = settings or load_settings()
        if not settings.api_base_url:
            raise ValueError("JOB_BOARD_API_URL is not configured.")
        return cls(settings.api_base_url, token=token, timeout=settings.api_timeout, session=session)

    def _request(self, method: str, path: str, *, operation: str, json: Any = None) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self._session.request(method, url, json=json, headers=self._headers, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise SubmissionNetworkError(operation=operation, original=exc) from exc

        try:
            body = response.json()
        except ValueError:
            body = None

        status = response.status_code
        if status >= 400:
            details = body if isinstance(body, Mapping) else None
            message = _server_message(body)
            logger.warning("%s %s returned %s", method, url, status)
            if status in _REJECTED_STATUSES:
                raise SubmissionRejectedError(
                    message=message or REJECTED_MESSAGE,
                    operation=operation,
                    status_code=status,
                    details=details,
                )
            if status in _UNAUTHORIZED_STATUSES:
                raise SubmissionUnauthorizedError(
                    message=UNAUTHORIZED_MESSAGE,
                    operation=operation,
                    status_code=status,
                    details=details,
                )
            raise JobSubmissionError(operation=operation, status_code=status, details=details)

        if isinstance(body, Mapping) and body.get("success") is False:
            raise SubmissionRejectedError(
                message=_server_message(body) or REJECTED_MESSAGE,
                operation=operation,
                status_code=status,
                details=body,
            )
        return unwrap_envelope(body)

    def _job_path(self, job_id: str) -> str:
        return f"{JOBS_PATH}/{quote(job_id, safe='')}"

    @staticmethod
    def _as_job(data: Any, operation: str, *, allow_empty: bool = False) -> dict[str, Any]:
        # a 2xx write without a body has still been applied on the server
        if data is None and allow_empty:
            return {}
        if not isinstance(data, Mapping):
            raise JobSubmissionError(operation=operation, details={"body": data})
        return dict(data)

    def create_job(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        data = self._request("POST", JOBS_PATH, operation="create_job", json=dict(payload))
        return self._as_job(data, "create_job", allow_empty=True)

    def update_job(self, job_id: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        data = self._request("PUT", self._job_path(job_id), operation="update_job", json=dict(payload))
        return self._as_job(data, "update_job", allow_empty=True)

    def fetch_job(self, job_id: str) -> dict[str, Any]:
        """Return the job record for ``job_id`` with any envelope removed."""

        data = self._request("GET", self._job_path(job_id), operation="fetch_job")
        return self._as_job(data, "fetch_job")

    def fetch_categories(self) -> list[Category]:
        return normalize_categories(self._request("GET", CATEGORIES_PATH, operation="fetch_categories"))

    def submit(self, payload: Mapping[str, Any], *, job_id: str | None = None) -> Mapping[str, Any]:
        """Create the job, or update it when ``job_id`` is given."""

        if job_id:
            return self.update_job(job_id, payload)
        return self.create_job(payload)


__all__ = ["CATEGORIES_PATH", "JOBS_PATH", "JobBoardClient", "unwrap_envelope"]
