"""Step-local validation rules for the job posting wizard."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Final, Mapping

from constants.job_posting import PUBLISH_GATED_STEPS, WIZARD_STEP_COUNT
from core.validators import is_blank
from models.job_posting import JobPostingForm

FieldErrors = dict[str, str]
StepRule = Callable[[JobPostingForm], FieldErrors]

TITLE_REQUIRED: Final[str] = "Job title is required"
DESCRIPTION_REQUIRED: Final[str] = "Job description is required"
CATEGORY_REQUIRED: Final[str] = "Please select a category"
COMPANY_REQUIRED: Final[str] = "Company name is required"
LOCATION_REQUIRED: Final[str] = "Location is required"
SALARY_RANGE_INVALID: Final[str] = "Minimum salary cannot be greater than maximum"
SALARY_NOT_NUMERIC: Final[str] = "Salary must be valid numbers"


def _basic_info(form: JobPostingForm) -> FieldErrors:
    errors: FieldErrors = {}
    if is_blank(form.title):
        errors["title"] = TITLE_REQUIRED
    if is_blank(form.description):
        errors["description"] = DESCRIPTION_REQUIRED
    if is_blank(form.category_id):
        errors["category_id"] = CATEGORY_REQUIRED
    return errors


def _company(form: JobPostingForm) -> FieldErrors:
    errors: FieldErrors = {}
    if is_blank(form.company):
        errors["company"] = COMPANY_REQUIRED
    if is_blank(form.location):
        errors["location"] = LOCATION_REQUIRED
    return errors


def _job_details(form: JobPostingForm) -> FieldErrors:
    # ``salary`` is a synthetic key covering both bounds.
    if form.has_invalid_salary:
        return {"salary": SALARY_NOT_NUMERIC}
    if form.has_salary_range and form.salary_min > form.salary_max:  # type: ignore[operator]
        return {"salary": SALARY_RANGE_INVALID}
    return {}


STEP_RULES: Final[Mapping[int, StepRule]] = {
    0: _basic_info,
    1: _company,
    2: _job_details,
}


def validate(form: JobPostingForm, step: int) -> FieldErrors:
    """Return the field errors blocking ``step``; an empty dict means valid.

    Steps 3 to 5 only hold optional fields and never block.

    Raises:
        ValueError: If ``step`` is outside ``0..5``.
    """

    if isinstance(step, bool) or not isinstance(step, int) or not 0 <= step < WIZARD_STEP_COUNT:
        raise ValueError(f"Wizard step must be between 0 and {WIZARD_STEP_COUNT - 1}, got {step!r}")
    rule = STEP_RULES.get(step)
    if rule is None:
        return {}
    return rule(form)


@dataclass(frozen=True)
class ValidationSummary:
    """Outcome of validating every publish-gated step."""

    first_failing_step: int | None = None
    errors: FieldErrors = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return self.first_failing_step is None


def validate_all(form: JobPostingForm) -> ValidationSummary:
    """Validate steps 0 to 4 in order and stop at the first failing step."""

    for step in PUBLISH_GATED_STEPS:
        errors = validate(form, step)
        if errors:
            return ValidationSummary(first_failing_step=step, errors=errors)
    return ValidationSummary()


__all__ = [
    "CATEGORY_REQUIRED",
    "COMPANY_REQUIRED",
    "DESCRIPTION_REQUIRED",
    "FieldErrors",
    "LOCATION_REQUIRED",
    "SALARY_NOT_NUMERIC",
    "SALARY_RANGE_INVALID",
    "TITLE_REQUIRED",
    "ValidationSummary",
    "validate",
    "validate_all",
]
