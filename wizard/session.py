"""Ephemeral per-screen state of the job posting wizard."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass, field

from constants.keys import wizard_session_key
from models.job_posting import JobPostingForm


@dataclass
class WizardSession:
    """Current step, live form and outstanding errors of one wizard screen.

    ``errors`` holds field-level validation messages only; the last failed
    submission is tracked separately in ``submission_error``.
    """

    form: JobPostingForm = field(default_factory=JobPostingForm)
    current_step: int = 0
    errors: dict[str, str] = field(default_factory=dict)
    job_id: str | None = None
    submitting: bool = False
    submission_error: str | None = None
    # status of the fetched record; edits are resubmitted as draft or active
    record_status: str | None = None

    @property
    def is_edit(self) -> bool:
        return self.job_id is not None


def load_session(state: MutableMapping[str, object], wizard_id: str = "default") -> WizardSession | None:
    """Return the session stored for ``wizard_id``, if any."""

    session = state.get(wizard_session_key(wizard_id))
    return session if isinstance(session, WizardSession) else None


def store_session(state: MutableMapping[str, object], session: WizardSession, wizard_id: str = "default") -> None:
    state[wizard_session_key(wizard_id)] = session


def clear_session(state: MutableMapping[str, object], wizard_id: str = "default") -> None:
    state.pop(wizard_session_key(wizard_id), None)


__all__ = ["WizardSession", "clear_session", "load_session", "store_session"]
