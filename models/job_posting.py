"""Pydantic model for the flat job posting form edited by the wizard."""

from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from constants.job_posting import (
    DEFAULT_APPLICATION_METHOD,
    DEFAULT_CURRENCY,
    DEFAULT_JOB_TYPE,
    DEFAULT_REMOTE_TYPE,
    DEFAULT_SALARY_PERIOD,
    DEFAULT_VISIBILITY,
)
from core.validators import coerce_int, coerce_number, coerce_string_list, coerce_text
from utils.date_utils import to_iso_date


class LanguageRequirement(BaseModel):
    """A spoken language requirement with an optional proficiency."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    language: str
    proficiency: str = ""

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_language(cls, value: Any) -> Any:
        """Allow ``"German"`` as shorthand for ``{"language": "German"}``."""

        if isinstance(value, str):
            return {"language": value}
        if isinstance(value, dict) and "language" not in value and "name" in value:
            return {**value, "language": value["name"]}
        return value

    @field_validator("language", "proficiency", mode="before")
    @classmethod
    def _trim(cls, value: object) -> str:
        return coerce_text(value)


_TEXT_FIELDS: tuple[str, ...] = (
    "title",
    "description",
    "category_id",
    "subcategory",
    "experience_level",
    "company",
    "company_website",
    "company_size",
    "company_industry",
    "location",
    "city",
    "state",
    "country",
    "remote_type",
    "education_level",
    "education_field",
    "experience_description",
    "contact_email",
    "contact_phone",
    "application_url",
    "instructions",
)

_LIST_FIELDS: tuple[str, ...] = (
    "benefits",
    "requirements",
    "responsibilities",
    "qualifications",
    "skills",
    "certifications",
    "other_requirements",
    "tags",
)


class JobPostingForm(BaseModel):
    """Everything the job posting wizard can edit, as one flat record.

    Every field carries a canonical empty value: ``""`` for text, ``[]`` for
    lists, ``False`` for flags and ``None`` only for numeric optionals. The
    model is frozen; use :meth:`with_changes` to derive an updated copy.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # basic info
    title: str = ""
    description: str = ""
    category_id: str = ""
    subcategory: str = ""
    job_type: str = DEFAULT_JOB_TYPE
    experience_level: str = ""

    # company
    company: str = ""
    company_website: str = ""
    company_size: str = ""
    company_industry: str = ""

    # location
    location: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    is_remote: bool = False
    remote_type: str = ""

    # compensation
    # unparsable text is kept verbatim so the job details step can report it
    salary_min: Union[float, str, None] = None
    salary_max: Union[float, str, None] = None
    currency: str = DEFAULT_CURRENCY
    salary_period: str = DEFAULT_SALARY_PERIOD
    salary_negotiable: bool = False
    salary_confidential: bool = False

    # lists
    benefits: List[str] = Field(default_factory=list)
    requirements: List[str] = Field(default_factory=list)
    responsibilities: List[str] = Field(default_factory=list)
    qualifications: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)
    languages: List[LanguageRequirement] = Field(default_factory=list)
    other_requirements: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)

    # education and experience
    education_level: str = ""
    education_field: str = ""
    education_required: bool = False
    experience_years: Optional[int] = None
    experience_description: str = ""

    # application process
    application_method: str = DEFAULT_APPLICATION_METHOD
    deadline: str = ""
    start_date: str = ""
    contact_email: str = ""
    contact_phone: str = ""
    application_url: str = ""
    instructions: str = ""
    visibility: str = DEFAULT_VISIBILITY

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _normalise_text(cls, value: object) -> str:
        """Map ``None`` and non-scalar inputs to ``""`` and trim whitespace."""

        return coerce_text(value)

    @field_validator(*_LIST_FIELDS, mode="before")
    @classmethod
    def _normalise_list(cls, value: object) -> list[str]:
        return coerce_string_list(value)

    @field_validator("languages", mode="before")
    @classmethod
    def _normalise_languages(cls, value: object) -> list[object]:
        if not isinstance(value, (list, tuple)):
            return []
        kept: list[object] = []
        for item in value:
            if isinstance(item, dict) and not (item.get("language") or item.get("name")):
                continue
            if isinstance(item, (str, dict, LanguageRequirement)) and item:
                kept.append(item)
        return kept

    @field_validator("languages")
    @classmethod
    def _drop_blank_languages(cls, value: list[LanguageRequirement]) -> list[LanguageRequirement]:
        return [item for item in value if item.language]

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _normalise_number(cls, value: object) -> Optional[float]:
        return coerce_number(value)

    @field_validator("salary_min", "salary_max", mode="before")
    @classmethod
    def _normalise_salary(cls, value: object) -> Union[float, str, None]:
        number = coerce_number(value)
        if number is None and isinstance(value, str) and value.strip():
            return value.strip()
        return number

    @field_validator("experience_years", mode="before")
    @classmethod
    def _normalise_years(cls, value: object) -> Optional[int]:
        return coerce_int(value)

    @field_validator("deadline", "start_date", mode="before")
    @classmethod
    def _normalise_date(cls, value: object) -> str:
        """Keep only the ``YYYY-MM-DD`` part of date inputs."""

        return to_iso_date(value)

    @field_validator("job_type", mode="before")
    @classmethod
    def _default_job_type(cls, value: object) -> str:
        return coerce_text(value) or DEFAULT_JOB_TYPE

    @field_validator("currency", mode="before")
    @classmethod
    def _default_currency(cls, value: object) -> str:
        return coerce_text(value).upper() or DEFAULT_CURRENCY

    @field_validator("salary_period", mode="before")
    @classmethod
    def _default_period(cls, value: object) -> str:
        return coerce_text(value) or DEFAULT_SALARY_PERIOD

    @field_validator("application_method", mode="before")
    @classmethod
    def _default_method(cls, value: object) -> str:
        return coerce_text(value) or DEFAULT_APPLICATION_METHOD

    @field_validator("visibility", mode="before")
    @classmethod
    def _default_visibility(cls, value: object) -> str:
        return coerce_text(value) or DEFAULT_VISIBILITY

    @field_validator("is_remote", "salary_negotiable", "salary_confidential", "education_required", mode="before")
    @classmethod
    def _normalise_flag(cls, value: object) -> bool:
        return bool(value) if value is not None else False

    @model_validator(mode="before")
    @classmethod
    def _default_remote_type(cls, data: Any) -> Any:
        """A remote job without an explicit arrangement is fully remote."""

        if isinstance(data, dict) and data.get("is_remote") and not coerce_text(data.get("remote_type")):
            return {**data, "remote_type": DEFAULT_REMOTE_TYPE}
        return data

    def with_changes(self, **changes: Any) -> "JobPostingForm":
        """Return a new validated form with ``changes`` applied.

        Raises:
            ValueError: If a change names an unknown field.
        """

        unknown = sorted(key for key in changes if key not in type(self).model_fields)
        if unknown:
            raise ValueError(f"Unknown form fields: {', '.join(unknown)}")
        payload = self.model_dump(mode="python")
        payload.update(changes)
        return type(self).model_validate(payload)

    @property
    def has_salary_range(self) -> bool:
        return isinstance(self.salary_min, float) and isinstance(self.salary_max, float)

    @property
    def has_invalid_salary(self) -> bool:
        return isinstance(self.salary_min, str) or isinstance(self.salary_max, str)

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


__all__ = ["JobPostingForm", "LanguageRequirement"]
