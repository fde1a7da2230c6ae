"""Static metadata for the six job posting wizard steps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from constants.job_posting import WIZARD_STEP_COUNT


@dataclass(frozen=True)
class WizardStep:
    """Metadata describing an individual wizard step.

    ``fields`` lists the form fields edited on the step.
    """

    index: int
    key: str
    label: str
    fields: tuple[str, ...] = ()


WIZARD_STEPS: Final[tuple[WizardStep, ...]] = (
    WizardStep(
        0,
        "basic_info",
        "Basic Info",
        ("title", "description", "category_id", "subcategory", "job_type", "experience_level"),
    ),
    WizardStep(
        1,
        "company",
        "Company",
        (
            "company",
            "company_website",
            "company_size",
            "company_industry",
            "location",
            "city",
            "state",
            "country",
            "latitude",
            "longitude",
            "is_remote",
            "remote_type",
        ),
    ),
    WizardStep(
        2,
        "job_details",
        "Job Details",
        (
            "salary_min",
            "salary_max",
            "currency",
            "salary_period",
            "salary_negotiable",
            "salary_confidential",
            "benefits",
        ),
    ),
    WizardStep(
        3,
        "requirements",
        "Requirements",
        (
            "requirements",
            "responsibilities",
            "qualifications",
            "skills",
            "certifications",
            "languages",
            "other_requirements",
            "tags",
            "education_level",
            "education_field",
            "education_required",
            "experience_years",
            "experience_description",
        ),
    ),
    WizardStep(
        4,
        "application",
        "Application Process",
        (
            "application_method",
            "deadline",
            "start_date",
            "contact_email",
            "contact_phone",
            "application_url",
            "instructions",
            "visibility",
        ),
    ),
    WizardStep(5, "review", "Review & Publish"),
)

FIRST_STEP: Final[int] = 0
LAST_STEP: Final[int] = WIZARD_STEP_COUNT - 1


def get_step(index: int) -> WizardStep:
    """Return the step at ``index``.

    Raises:
        ValueError: If ``index`` is outside ``0..5``.
    """

    if isinstance(index, bool) or not isinstance(index, int) or not FIRST_STEP <= index <= LAST_STEP:
        raise ValueError(f"Wizard step must be between {FIRST_STEP} and {LAST_STEP}, got {index!r}")
    return WIZARD_STEPS[index]


def step_for_field(field_name: str) -> WizardStep | None:
    """Return the step that edits ``field_name``; ``salary`` maps to job details."""

    if field_name == "salary":
        return WIZARD_STEPS[2]
    for step in WIZARD_STEPS:
        if field_name in step.fields:
            return step
    return None


__all__ = ["FIRST_STEP", "LAST_STEP", "WIZARD_STEPS", "WizardStep", "get_step", "step_for_field"]
