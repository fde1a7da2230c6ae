"""Role gate evaluated before the job posting wizard is mounted."""

from __future__ import annotations

from collections.abc import Iterable

from constants.job_posting import POSTING_ROLES
from core.errors import JobPostingAccessError


def _normalise_roles(roles: str | Iterable[str] | None) -> set[str]:
    if roles is None:
        return set()
    if isinstance(roles, str):
        roles = [roles]
    return {role.strip().lower() for role in roles if isinstance(role, str) and role.strip()}


def can_post_jobs(roles: str | Iterable[str] | None) -> bool:
    """Return ``True`` when any of ``roles`` may create or edit job postings."""

    return bool(_normalise_roles(roles) & POSTING_ROLES)


def ensure_can_post_jobs(roles: str | Iterable[str] | None) -> None:
    """Raise :class:`JobPostingAccessError` unless ``roles`` allow posting jobs."""

    if not can_post_jobs(roles):
        raise JobPostingAccessError("Only providers and admins can post jobs.")


__all__ = ["can_post_jobs", "ensure_can_post_jobs"]
