"""Fixed vocabularies used by the job posting form and payload."""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class EnumKind(StrEnum):
    JOB_TYPE = "job_type"
    SALARY_PERIOD = "salary_period"
    BENEFIT = "benefit"

DEFAULT_JOB_TYPE: Final[str] = "full-time"
DEFAULT_CURRENCY: Final[str] = "USD"
DEFAULT_SALARY_PERIOD: Final[str] = "year"
DEFAULT_REMOTE_TYPE: Final[str] = "remote"
DEFAULT_APPLICATION_METHOD: Final[str] = "email"
DEFAULT_VISIBILITY: Final[str] = "public"

# UI status labels accepted by ``to_api``; API-native values pass through.
UI_STATUS_TO_API: Final[dict[str, str]] = {"draft": "draft", "open": "active"}
API_STATUSES: Final[frozenset[str]] = frozenset({"active", "draft", "closed", "filled"})

POSTING_ROLES: Final[frozenset[str]] = frozenset({"provider", "admin"})

WIZARD_STEP_COUNT: Final[int] = 6
# Steps checked before publishing; the last step only reviews.
PUBLISH_GATED_STEPS: Final[tuple[int, ...]] = (0, 1, 2, 3, 4)
