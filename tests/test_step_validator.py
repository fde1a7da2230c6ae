import pytest

from core.step_validator import (
    CATEGORY_REQUIRED,
    COMPANY_REQUIRED,
    DESCRIPTION_REQUIRED,
    LOCATION_REQUIRED,
    SALARY_NOT_NUMERIC,
    SALARY_RANGE_INVALID,
    TITLE_REQUIRED,
    validate,
    validate_all,
)
from models.job_posting import JobPostingForm


def test_basic_info_requires_title_description_and_category() -> None:
    errors = validate(JobPostingForm(title="   "), 0)

    assert errors == {
        "title": TITLE_REQUIRED,
        "description": DESCRIPTION_REQUIRED,
        "category_id": CATEGORY_REQUIRED,
    }
    assert errors["title"] == "Job title is required"


def test_company_step_requires_name_and_location() -> None:
    assert validate(JobPostingForm(), 1) == {"company": COMPANY_REQUIRED, "location": LOCATION_REQUIRED}
    assert validate(JobPostingForm(company="Acme", location="NYC"), 1) == {}


def test_inverted_salary_range_is_reported_on_synthetic_key() -> None:
    form = JobPostingForm(salary_min=5000, salary_max=3000)

    assert validate(form, 2) == {"salary": "Minimum salary cannot be greater than maximum"}
    assert SALARY_RANGE_INVALID == "Minimum salary cannot be greater than maximum"


@pytest.mark.parametrize(
    ("salary_min", "salary_max"),
    [(None, None), (5000, None), (None, 3000), (3000, 3000), (3000, 5000)],
)
def test_salary_range_only_checked_when_both_bounds_present(salary_min, salary_max) -> None:
    assert validate(JobPostingForm(salary_min=salary_min, salary_max=salary_max), 2) == {}


@pytest.mark.parametrize(
    ("salary_min", "salary_max"),
    [("nan", "100"), ("100", "inf"), ("-inf", None), ("abc", 5000), (None, "lots")],
)
def test_unusable_salary_text_is_reported(salary_min, salary_max) -> None:
    form = JobPostingForm(salary_min=salary_min, salary_max=salary_max)

    assert validate(form, 2) == {"salary": SALARY_NOT_NUMERIC}
    assert SALARY_NOT_NUMERIC == "Salary must be valid numbers"


@pytest.mark.parametrize("step", [3, 4, 5])
def test_optional_steps_never_block(step: int) -> None:
    assert validate(JobPostingForm(), step) == {}


@pytest.mark.parametrize("step", [-1, 6, True])
def test_out_of_range_step_is_rejected(step) -> None:
    with pytest.raises(ValueError):
        validate(JobPostingForm(), step)


def test_validate_all_stops_at_first_failing_step(complete_form: JobPostingForm) -> None:
    summary = validate_all(complete_form.with_changes(company="", salary_min=90000))

    assert summary.first_failing_step == 1
    assert summary.errors == {"company": COMPANY_REQUIRED}
    assert not summary.is_valid


def test_validate_all_passes_complete_form(complete_form: JobPostingForm) -> None:
    summary = validate_all(complete_form)

    assert summary.is_valid
    assert summary.errors == {}
