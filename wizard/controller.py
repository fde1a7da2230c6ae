"""Step navigation and submission control for the job posting wizard."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Mapping, MutableMapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Protocol, cast

import streamlit as st

from core.categories import CategoryLookup
from core.config import Settings
from core.errors import JobSubmissionError
from core.location_prefill import apply_reverse_geocode
from core.schema_mapper import from_api, summarize_location, to_api
from core.step_validator import FieldErrors, validate, validate_all
from core.validators import coerce_text
from models.job_posting import JobPostingForm
from utils.logging_context import log_context
from wizard.access import ensure_can_post_jobs
from wizard.session import WizardSession, clear_session, load_session, store_session
from wizard.steps import FIRST_STEP, LAST_STEP, WizardStep, get_step

logger = logging.getLogger(__name__)

_SALARY_FIELDS = frozenset({"salary_min", "salary_max"})


class JobSubmitter(Protocol):
    """Creates (``job_id is None``) or updates a job from an API payload."""

    def submit(self, payload: Mapping[str, Any], *, job_id: str | None = None) -> Mapping[str, Any]: ...


class SubmissionStatus(StrEnum):
    SUBMITTED = "submitted"
    BLOCKED = "blocked"
    FAILED = "failed"
    BUSY = "busy"


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a draft-save or publish attempt."""

    status: SubmissionStatus
    job: Mapping[str, Any] | None = None
    message: str | None = None
    errors: FieldErrors = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is SubmissionStatus.SUBMITTED


class WizardController:
    """Own the wizard session and gate navigation and publishing.

    Forward navigation and publishing are blocked by field errors from
    :mod:`core.step_validator`; saving a draft and moving backwards never
    are. Submission failures are reported through ``submission_error`` and
    never turn into field errors. The session lives in ``session_state``
    (``st.session_state`` by default) so a rerun of the screen resumes it;
    passing ``form`` always starts a fresh session.
    """

    def __init__(
        self,
        *,
        submitter: JobSubmitter,
        form: JobPostingForm | None = None,
        job_id: str | None = None,
        record_status: str | None = None,
        categories: CategoryLookup | None = None,
        settings: Settings | None = None,
        role: str | Iterable[str] | None = None,
        wizard_id: str = "default",
        session_state: MutableMapping[str, object] | None = None,
        session_id: str | None = None,
    ) -> None:
        if role is not None:
            ensure_can_post_jobs(role)
        self._submitter = submitter
        self._categories = categories
        self._wizard_id = wizard_id
        self._state = cast(
            MutableMapping[str, object],
            session_state if session_state is not None else st.session_state,
        )
        self._session_id = session_id or uuid.uuid4().hex[:12]

        session = load_session(self._state, wizard_id) if form is None else None
        if session is None:
            if form is None:
                form = JobPostingForm(currency=settings.default_currency) if settings else JobPostingForm()
            session = WizardSession(form=form, job_id=job_id, record_status=record_status)
            store_session(self._state, session, wizard_id)
        self._session: WizardSession | None = session

    @classmethod
    def from_record(cls, record: Mapping[str, Any], *, submitter: JobSubmitter, **kwargs: Any) -> "WizardController":
        """Start an edit session seeded from a fetched job record.

        The record status is kept as :attr:`record_status`; saving still sends
        ``draft`` and publishing ``active``.
        """

        job_id = str(record.get("_id") or record.get("id") or "") or None
        status = coerce_text(record.get("status")) or None
        return cls(submitter=submitter, form=from_api(record), job_id=job_id, record_status=status, **kwargs)

    # ------------------------------------------------------------------
    # state accessors
    # ------------------------------------------------------------------

    def _require_session(self) -> WizardSession:
        if self._session is None:
            raise RuntimeError("The wizard session has ended")
        return self._session

    @property
    def is_active(self) -> bool:
        return self._session is not None

    @property
    def current_step(self) -> int:
        return self._require_session().current_step

    @property
    def step(self) -> WizardStep:
        return get_step(self.current_step)

    @property
    def form(self) -> JobPostingForm:
        return self._require_session().form

    @property
    def errors(self) -> FieldErrors:
        return dict(self._require_session().errors)

    @property
    def job_id(self) -> str | None:
        return self._require_session().job_id

    @property
    def record_status(self) -> str | None:
        return self._require_session().record_status

    @property
    def is_submitting(self) -> bool:
        return self._require_session().submitting

    @property
    def submission_error(self) -> str | None:
        return self._require_session().submission_error

    # ------------------------------------------------------------------
    # editing
    # ------------------------------------------------------------------

    def update(self, **changes: Any) -> JobPostingForm:
        """Replace the form with ``changes`` applied and clear their errors."""

        session = self._require_session()
        session.form = session.form.with_changes(**changes)
        cleared = set(changes)
        if cleared & _SALARY_FIELDS:
            cleared.add("salary")
        session.errors = {key: message for key, message in session.errors.items() if key not in cleared}
        return session.form

    def prefill_location(
        self,
        result: Mapping[str, Any] | None,
        *,
        latitude: float | None = None,
        longitude: float | None = None,
    ) -> JobPostingForm:
        """Apply a reverse-geocoding result to the location fields."""

        session = self._require_session()
        form = apply_reverse_geocode(session.form, result, latitude=latitude, longitude=longitude)
        if form is not session.form:
            session.form = form
            for key in ("location", "city", "state", "country"):
                session.errors.pop(key, None)
        return session.form

    # ------------------------------------------------------------------
    # navigation
    # ------------------------------------------------------------------

    def go_to_step(self, target: int) -> bool:
        """Move to ``target``; forward moves require the current step to be valid.

        Returns:
            ``True`` when the transition happened, ``False`` when validation
            refused it (the errors are then available via :attr:`errors`).

        Raises:
            ValueError: If ``target`` is outside ``0..5``.
        """

        session = self._require_session()
        target_step = get_step(target)
        current = session.current_step
        if target <= current:
            if target < current:
                session.errors = {}
            session.current_step = target
            return True

        with log_context(session_id=self._session_id, wizard_step=get_step(current).key, operation="navigate"):
            errors = validate(session.form, current)
            if errors:
                session.errors = errors
                logger.info("Blocked move to %s: %s", target_step.key, ", ".join(sorted(errors)))
                return False
            session.current_step = target
            session.errors = {}
            logger.debug("Moved to step %s", target_step.key)
        return True

    def next_step(self) -> bool:
        return self.go_to_step(min(self.current_step + 1, LAST_STEP))

    def previous_step(self) -> bool:
        return self.go_to_step(max(self.current_step - 1, FIRST_STEP))

    # ------------------------------------------------------------------
    # submission
    # ------------------------------------------------------------------

    def save_draft(self) -> SubmissionResult:
        """Submit the form as a draft without any validation gate."""

        return self._submit("draft", operation="save_draft")

    def publish(self) -> SubmissionResult:
        """Validate every gated step, then submit the form as an open job.

        On a validation failure the wizard jumps to the first failing step
        and surfaces its errors instead of submitting.
        """

        session = self._require_session()
        if session.submitting:
            return self._busy("publish")
        summary = validate_all(session.form)
        if not summary.is_valid:
            first_failing = cast(int, summary.first_failing_step)
            session.current_step = first_failing
            session.errors = dict(summary.errors)
            with log_context(session_id=self._session_id, wizard_step=get_step(first_failing).key, operation="publish"):
                logger.info("Publish blocked by %s", ", ".join(sorted(summary.errors)))
            return SubmissionResult(SubmissionStatus.BLOCKED, errors=dict(summary.errors))
        return self._submit("open", operation="publish")

    def _busy(self, operation: str) -> SubmissionResult:
        with log_context(session_id=self._session_id, operation=operation):
            logger.info("Ignoring %s while another submission is in flight", operation)
        return SubmissionResult(SubmissionStatus.BUSY)

    def _submit(self, status: str, *, operation: str) -> SubmissionResult:
        session = self._require_session()
        if session.submitting:
            return self._busy(operation)
        payload = to_api(session.form, status)
        session.submitting = True
        session.submission_error = None
        with log_context(session_id=self._session_id, wizard_step=get_step(session.current_step).key, operation=operation):
            try:
                job = self._submitter.submit(payload, job_id=session.job_id)
            except JobSubmissionError as exc:
                session.submission_error = exc.message
                logger.warning("Submission failed (status=%s): %s", exc.status_code, exc.message)
                return SubmissionResult(SubmissionStatus.FAILED, message=exc.message)
            finally:
                session.submitting = False
            logger.info("Job %s submitted as %s", session.job_id or "(new)", payload["status"])
        self.discard()
        return SubmissionResult(SubmissionStatus.SUBMITTED, job=job)

    def discard(self) -> None:
        """End the session, e.g. when the user navigates away."""

        clear_session(self._state, self._wizard_id)
        self._session = None

    # ------------------------------------------------------------------
    # review helpers
    # ------------------------------------------------------------------

    def category_name(self) -> str | None:
        """Return the display name of the selected category, if resolvable."""

        category_id = self.form.category_id
        if not category_id or self._categories is None:
            return None
        return self._categories.name_for(category_id)

    def review_summary(self) -> dict[str, str]:
        """Return the display strings shown on the review step."""

        form = self.form
        if form.has_salary_range:
            salary = f"{form.currency} {form.salary_min:,.0f} - {form.salary_max:,.0f} / {form.salary_period}"
        else:
            salary = "Not specified"
        return {
            "title": form.title,
            "company": form.company,
            "category": self.category_name() or form.category_id,
            "job_type": form.job_type.replace("-", " ").title(),
            "location": summarize_location(form),
            "salary": salary,
        }


__all__ = ["JobSubmitter", "SubmissionResult", "SubmissionStatus", "WizardController"]
