"""Job posting wizard: step metadata, session state and the controller."""

from __future__ import annotations

from .access import can_post_jobs, ensure_can_post_jobs
from .controller import JobSubmitter, SubmissionResult, SubmissionStatus, WizardController
from .session import WizardSession
from .steps import WIZARD_STEPS, WizardStep, get_step

__all__ = [
    "JobSubmitter",
    "SubmissionResult",
    "SubmissionStatus",
    "WIZARD_STEPS",
    "WizardController",
    "WizardSession",
    "WizardStep",
    "can_post_jobs",
    "ensure_can_post_jobs",
    "get_step",
]
