"""Bidirectional mapping between the wizard form and API job records.

``from_api`` reads liberally: every legacy layout listed in
:mod:`models.job_record` is accepted and any missing or oddly shaped field
degrades to the form's canonical empty value. ``to_api`` writes sparsely:
optional sections are omitted instead of being sent empty, matching the
backend's partial-update semantics.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from constants.job_posting import (
    API_STATUSES,
    DEFAULT_VISIBILITY,
    UI_STATUS_TO_API,
    EnumKind,
)
from core.enum_normalizer import to_api_enum, to_ui_enum
from core.validators import coerce_number, coerce_string_list, coerce_text, deduplicate_preserve_order
from models.job_posting import JobPostingForm
from models.job_record import LocationSource, resolve_company, resolve_location_source

logger = logging.getLogger(__name__)

LOCATION_NOT_SPECIFIED = "Location not specified"


def _as_mapping(value: object) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _reference_id(value: object) -> str:
    """Return the id of a reference given as a string or ``{_id|id}`` object."""

    if isinstance(value, Mapping):
        return coerce_text(value.get("_id") or value.get("id"))
    return coerce_text(value)


def _first_present(*values: object) -> object:
    for value in values:
        if value is not None and value != "":
            return value
    return None


###############################################################################
# API -> form
###############################################################################


def _job_type(record: Mapping[str, Any]) -> str:
    raw = coerce_text(_first_present(record.get("jobType"), record.get("type")))
    if not raw:
        return ""
    return to_ui_enum(EnumKind.JOB_TYPE, raw)


def _location_fields(location: LocationSource, record: Mapping[str, Any]) -> dict[str, Any]:
    data = location.data
    if location.is_legacy:
        logger.debug("Reading legacy top-level location block")
    coordinates = _as_mapping(data.get("coordinates"))
    remote_type = coerce_text(data.get("remoteType"))
    raw_remote = data.get("isRemote")
    if raw_remote is None:
        raw_remote = remote_type in {"remote", "hybrid"} or bool(record.get("remote"))
    is_remote = bool(raw_remote)
    return {
        "location": data.get("address"),
        "city": data.get("city"),
        "state": data.get("state"),
        "country": data.get("country"),
        "latitude": coordinates.get("lat"),
        "longitude": coordinates.get("lng"),
        "is_remote": is_remote,
        "remote_type": remote_type,
    }


def _salary_fields(record: Mapping[str, Any]) -> dict[str, Any]:
    salary = _as_mapping(record.get("salary"))

    def _flag(name: str) -> bool:
        value = salary.get(name)
        if value is None:
            value = record.get(name)
        return bool(value)

    period = coerce_text(salary.get("period"))
    return {
        "salary_min": coerce_number(salary.get("min")),
        "salary_max": coerce_number(salary.get("max")),
        "currency": salary.get("currency"),
        "salary_period": to_ui_enum(EnumKind.SALARY_PERIOD, period) if period else "",
        "salary_negotiable": _flag("isNegotiable"),
        "salary_confidential": _flag("isConfidential"),
    }


def _requirement_fields(raw: object) -> dict[str, Any]:
    if isinstance(raw, (list, tuple, str)):
        logger.debug("Reading legacy flat requirements list")
        return {"requirements": coerce_string_list(raw)}
    requirements = _as_mapping(raw)
    education = _as_mapping(requirements.get("education"))
    experience = _as_mapping(requirements.get("experience"))
    languages = requirements.get("languages")
    return {
        "skills": requirements.get("skills"),
        "other_requirements": requirements.get("other"),
        "certifications": requirements.get("certifications"),
        "languages": languages if isinstance(languages, list) else [],
        "education_level": education.get("level"),
        "education_field": education.get("field"),
        "education_required": education.get("isRequired"),
        "experience_years": experience.get("years"),
        "experience_description": experience.get("description"),
    }


def _application_fields(record: Mapping[str, Any]) -> dict[str, Any]:
    process = _as_mapping(record.get("applicationProcess"))
    return {
        "application_method": process.get("applicationMethod"),
        "deadline": _first_present(process.get("deadline"), record.get("expiresAt")),
        "start_date": process.get("startDate"),
        "contact_email": process.get("contactEmail"),
        "contact_phone": process.get("contactPhone"),
        "application_url": process.get("applicationUrl"),
        "instructions": process.get("instructions"),
    }


def from_api(record: Mapping[str, Any] | None) -> JobPostingForm:
    """Build a fully populated form from an API job record.

    Never raises on unexpected shapes: a missing or malformed section simply
    leaves the corresponding form fields at their empty values.
    """

    source: Mapping[str, Any] = record if isinstance(record, Mapping) else {}
    company = resolve_company(source)
    if company.shape == "name_only":
        logger.debug("Reading legacy bare-string company")
    requirements = source.get("requirements")
    experience = _as_mapping(_as_mapping(requirements).get("experience"))
    benefits = source.get("benefits")
    if benefits is None:
        benefits = company.raw.get("benefits")

    values: dict[str, Any] = {
        "title": source.get("title"),
        "description": source.get("description"),
        "category_id": _reference_id(_first_present(source.get("category"), source.get("categoryId"))),
        "subcategory": _reference_id(source.get("subcategory")),
        "job_type": _job_type(source),
        "experience_level": _first_present(source.get("experienceLevel"), experience.get("level")),
        "company": company.name,
        "company_website": company.website,
        "company_size": company.size,
        "company_industry": company.industry,
        **_location_fields(resolve_location_source(source), source),
        **_salary_fields(source),
        "benefits": [to_ui_enum(EnumKind.BENEFIT, item) for item in coerce_string_list(benefits)],
        **_requirement_fields(requirements),
        "responsibilities": source.get("responsibilities"),
        "qualifications": source.get("qualifications"),
        "tags": source.get("tags"),
        **_application_fields(source),
        "visibility": source.get("visibility"),
    }
    return JobPostingForm.model_validate(values)


###############################################################################
# form -> API
###############################################################################


def resolve_api_status(status: str) -> str:
    """Map a wizard status request onto the API vocabulary.

    ``draft`` and ``open`` are the values the wizard writes; API-native
    statuses such as ``closed`` pass through when a record is echoed back.

    Raises:
        ValueError: If ``status`` is neither a wizard nor an API status.
    """

    if status in UI_STATUS_TO_API:
        return UI_STATUS_TO_API[status]
    if status in API_STATUSES:
        return status
    raise ValueError(f"Unsupported job status: {status!r}")


def _location_payload(form: JobPostingForm) -> dict[str, Any] | None:
    has_location = any(
        (
            form.location,
            form.city,
            form.state,
            form.country,
            form.remote_type,
            form.is_remote,
            form.has_coordinates,
        )
    )
    if not has_location:
        return None
    location: dict[str, Any] = {"address": form.location}
    for key, value in (("city", form.city), ("state", form.state), ("country", form.country)):
        if value:
            location[key] = value
    location["isRemote"] = form.is_remote
    if form.remote_type:
        location["remoteType"] = form.remote_type
    if form.has_coordinates:
        location["coordinates"] = {"lat": form.latitude, "lng": form.longitude}
    return location


def _company_payload(form: JobPostingForm) -> dict[str, Any]:
    company: dict[str, Any] = {"name": form.company}
    for key, value in (
        ("website", form.company_website),
        ("size", form.company_size),
        ("industry", form.company_industry),
    ):
        if value:
            company[key] = value
    location = _location_payload(form)
    if location is not None:
        company["location"] = location
    return company


def _salary_payload(form: JobPostingForm) -> dict[str, Any] | None:
    if not form.has_salary_range:
        return None
    return {
        "min": form.salary_min,
        "max": form.salary_max,
        "currency": form.currency,
        "period": to_api_enum(EnumKind.SALARY_PERIOD, form.salary_period),
        "isNegotiable": form.salary_negotiable,
        "isConfidential": form.salary_confidential,
    }


def _requirements_payload(form: JobPostingForm) -> dict[str, Any] | list[str] | None:
    body: dict[str, Any] = {}
    for key, values in (
        ("skills", form.skills),
        ("other", form.other_requirements),
        ("certifications", form.certifications),
    ):
        if values:
            body[key] = list(values)
    if form.languages:
        body["languages"] = [item.model_dump(exclude_defaults=True) for item in form.languages]
    if form.education_level:
        education: dict[str, Any] = {"level": form.education_level}
        if form.education_field:
            education["field"] = form.education_field
        education["isRequired"] = form.education_required
        body["education"] = education
    if form.experience_years is not None:
        experience: dict[str, Any] = {"years": form.experience_years}
        if form.experience_description:
            experience["description"] = form.experience_description
        body["experience"] = experience

    legacy = list(form.requirements)
    if not body:
        return legacy or None
    if legacy:
        body["other"] = deduplicate_preserve_order([*body.get("other", []), *legacy])
    return body


def _application_payload(form: JobPostingForm) -> dict[str, Any]:
    process: dict[str, Any] = {"applicationMethod": form.application_method}
    for key, value in (
        ("deadline", form.deadline),
        ("startDate", form.start_date),
        ("contactEmail", form.contact_email),
        ("contactPhone", form.contact_phone),
        ("applicationUrl", form.application_url),
        ("instructions", form.instructions),
    ):
        if value:
            process[key] = value
    return process


def to_api(form: JobPostingForm, status: str) -> dict[str, Any]:
    """Serialize ``form`` into a sparse create/update payload.

    Args:
        form: The wizard form to send.
        status: ``"draft"`` or ``"open"``; API statuses pass through.

    Returns:
        The job payload. Optional sections (salary, benefits, requirements,
        company location and the optional top-level lists) are left out
        when they carry no data.
    """

    payload: dict[str, Any] = {
        "title": form.title,
        "description": form.description,
        "category": form.category_id,
        "subcategory": form.subcategory,
        "jobType": to_api_enum(EnumKind.JOB_TYPE, form.job_type),
    }
    if form.experience_level:
        payload["experienceLevel"] = form.experience_level
    payload["company"] = _company_payload(form)

    salary = _salary_payload(form)
    if salary is not None:
        payload["salary"] = salary
    if form.benefits:
        payload["benefits"] = [to_api_enum(EnumKind.BENEFIT, item) for item in form.benefits]
    requirements = _requirements_payload(form)
    if requirements is not None:
        payload["requirements"] = requirements

    payload["applicationProcess"] = _application_payload(form)
    payload["status"] = resolve_api_status(status)

    for key, values in (
        ("responsibilities", form.responsibilities),
        ("qualifications", form.qualifications),
        ("tags", form.tags),
    ):
        if values:
            payload[key] = list(values)
    if form.visibility != DEFAULT_VISIBILITY:
        payload["visibility"] = form.visibility
    return payload


def summarize_location(form: JobPostingForm) -> str:
    """Return the one-line location shown on the review step."""

    text = form.location or ", ".join(part for part in (form.city, form.state, form.country) if part)
    if not text:
        text = LOCATION_NOT_SPECIFIED
    if form.is_remote:
        label = "Hybrid" if form.remote_type == "hybrid" else "Remote"
        text = f"{text} ({label})"
    return text


__all__ = [
    "LOCATION_NOT_SPECIFIED",
    "from_api",
    "resolve_api_status",
    "summarize_location",
    "to_api",
]
