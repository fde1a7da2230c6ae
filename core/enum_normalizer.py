"""Translation between human-facing and machine enum spellings."""

from __future__ import annotations

import re
from typing import Final, Mapping

from constants.job_posting import EnumKind

JOB_TYPE_TO_API: Final[Mapping[str, str]] = {
    "full-time": "full_time",
    "part-time": "part_time",
    "contract": "contract",
    "freelance": "freelance",
    "internship": "internship",
    "temporary": "temporary",
}

SALARY_PERIOD_TO_API: Final[Mapping[str, str]] = {
    "hour": "hourly",
    "day": "daily",
    "week": "weekly",
    "month": "monthly",
    "year": "yearly",
}

BENEFIT_TO_API: Final[Mapping[str, str]] = {
    "Health Insurance": "health_insurance",
    "Dental Insurance": "dental_insurance",
    "Vision Insurance": "vision_insurance",
    "Life Insurance": "life_insurance",
    "401(k) Matching": "retirement_401k",
    "Retirement Plan": "retirement_plan",
    "Paid Time Off": "paid_time_off",
    "Sick Leave": "sick_leave",
    "Parental Leave": "parental_leave",
    "Remote Work": "remote_work",
    "Flexible Hours": "flexible_hours",
    "Professional Development": "professional_development",
    "Stock Options": "stock_options",
    "Performance Bonus": "performance_bonus",
    "Gym Membership": "gym_membership",
    "Free Meals": "free_meals",
    "Transportation Allowance": "transportation_allowance",
    "Childcare Assistance": "childcare_assistance",
}


def _invert(table: Mapping[str, str]) -> dict[str, str]:
    return {machine: human for human, machine in table.items()}


_TO_API: Final[dict[EnumKind, Mapping[str, str]]] = {
    EnumKind.JOB_TYPE: JOB_TYPE_TO_API,
    EnumKind.SALARY_PERIOD: SALARY_PERIOD_TO_API,
    EnumKind.BENEFIT: BENEFIT_TO_API,
}
_TO_UI: Final[dict[EnumKind, Mapping[str, str]]] = {kind: _invert(table) for kind, table in _TO_API.items()}

_WHITESPACE_RE = re.compile(r"\s+")
_PARENS_RE = re.compile(r"[()]")


def synthesize_enum(value: str) -> str:
    """Derive a machine value for a label missing from the curated tables.

    Lowercases, strips parentheses and collapses whitespace runs into single
    underscores: ``"Pet Friendly (Dogs)"`` -> ``"pet_friendly_dogs"``.
    """

    cleaned = _PARENS_RE.sub("", value.strip().lower())
    return _WHITESPACE_RE.sub("_", cleaned.strip())


def _humanize(value: str) -> str:
    words = [word for word in value.split("_") if word]
    return " ".join(word[:1].upper() + word[1:] for word in words)


def to_api_enum(kind: EnumKind | str, value: str) -> str:
    """Return the machine spelling of ``value`` for ``kind``.

    Job types and salary periods outside their tables are passed through
    unchanged. Benefits are total: machine values (anything containing an
    underscore) pass through, curated labels are looked up and everything
    else is synthesized, which makes the mapping idempotent.
    """

    kind = EnumKind(kind)
    if kind is EnumKind.BENEFIT:
        if "_" in value:
            return value
        mapped = BENEFIT_TO_API.get(value)
        if mapped is not None:
            return mapped
        return synthesize_enum(value)
    return _TO_API[kind].get(value, value)


def to_ui_enum(kind: EnumKind | str, value: str) -> str:
    """Return the human spelling of ``value`` for ``kind``.

    Unknown job types and periods pass through. Unknown machine benefits are
    humanized (``"pet_friendly"`` -> ``"Pet Friendly"``); values without an
    underscore are already labels and are returned unchanged.
    """

    kind = EnumKind(kind)
    mapped = _TO_UI[kind].get(value)
    if mapped is not None:
        return mapped
    if kind is EnumKind.BENEFIT and "_" in value:
        return _humanize(value)
    return value


__all__ = [
    "BENEFIT_TO_API",
    "JOB_TYPE_TO_API",
    "SALARY_PERIOD_TO_API",
    "synthesize_enum",
    "to_api_enum",
    "to_ui_enum",
]
