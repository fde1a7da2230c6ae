from pathlib import Path
import sys
from dataclasses import dataclass
from typing import Any, Mapping

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.errors import JobSubmissionError  # noqa: E402
from models.job_posting import JobPostingForm  # noqa: E402


@dataclass
class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("JOB_BOARD_API_URL", "JOB_BOARD_API_TIMEOUT", "JOB_DEFAULT_CURRENCY", "DEBUG_LOGS"):
        monkeypatch.delenv(key, raising=False)
    yield


class FakeSubmitter:
    """Records submitted payloads and replays scripted outcomes."""

    def __init__(self, *outcomes: Any) -> None:
        self.calls: list[tuple[dict[str, Any], str | None]] = []
        self._outcomes = list(outcomes)

    def submit(self, payload: Mapping[str, Any], *, job_id: str | None = None) -> Mapping[str, Any]:
        self.calls.append((dict(payload), job_id))
        outcome = self._outcomes.pop(0) if self._outcomes else {"_id": job_id or "job-1", **payload}
        if isinstance(outcome, JobSubmissionError):
            raise outcome
        return outcome


@pytest.fixture
def submitter() -> FakeSubmitter:
    return FakeSubmitter()


@pytest.fixture
def complete_form() -> JobPostingForm:
    """A form that passes every publish-gated step."""

    return JobPostingForm(
        title="Senior Plumber",
        description="Fix pipes across the metro area.",
        category_id="cat-plumbing",
        company="Acme Services",
        location="12 Main St, Springfield, IL, USA",
        city="Springfield",
        state="IL",
        country="USA",
        salary_min=50000,
        salary_max=70000,
    )


@pytest.fixture
def make_submitter() -> type[FakeSubmitter]:
    return FakeSubmitter
