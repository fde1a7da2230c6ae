"""Pydantic models and record views for the job posting wizard."""

from .job_posting import JobPostingForm, LanguageRequirement
from .job_record import CompanyObject, LocationSource, resolve_company, resolve_location_source

__all__ = [
    "CompanyObject",
    "JobPostingForm",
    "LanguageRequirement",
    "LocationSource",
    "resolve_company",
    "resolve_location_source",
]
