import pytest

from core.errors import JobPostingAccessError
from wizard.access import can_post_jobs, ensure_can_post_jobs


@pytest.mark.parametrize("roles", ["provider", "admin", " Admin ", ["client", "provider"]])
def test_posting_roles_allowed(roles) -> None:
    assert can_post_jobs(roles)
    ensure_can_post_jobs(roles)


@pytest.mark.parametrize("roles", [None, "", "client", ["client", "agency"]])
def test_other_roles_refused(roles) -> None:
    assert not can_post_jobs(roles)
    with pytest.raises(JobPostingAccessError, match="Only providers and admins"):
        ensure_can_post_jobs(roles)


def test_access_error_is_a_permission_error() -> None:
    assert issubclass(JobPostingAccessError, PermissionError)
