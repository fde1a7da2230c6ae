"""Configuration loader for the job board API and wizard defaults.

Reads environment variables (a local ``.env`` file is honoured) or Streamlit
secrets and exposes the settings used by the API client and the wizard.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

import streamlit as st
from dotenv import load_dotenv

from constants.job_posting import DEFAULT_CURRENCY

DEFAULT_API_TIMEOUT = 15.0


@dataclass(slots=True)
class Settings:
    """Runtime configuration values.

    Attributes:
        api_base_url: Base URL of the job board API, if configured.
        api_timeout: Request timeout in seconds for job board calls.
        default_currency: Currency preselected on new job forms.
        debug_logs: Toggle verbose debug logging.
    """

    api_base_url: Optional[str]
    api_timeout: float
    default_currency: str
    debug_logs: bool


def _as_bool(value: Optional[str]) -> bool:
    """Interpret truthy string values as boolean True."""

    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_timeout(value: Optional[str]) -> float:
    if value is None:
        return DEFAULT_API_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        return DEFAULT_API_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_API_TIMEOUT


def _read_secrets() -> Mapping[str, str]:
    try:
        return dict(st.secrets)
    except (FileNotFoundError, KeyError, RuntimeError):
        # no secrets.toml outside ``streamlit run``
        return {}


def load_settings(secrets: Mapping[str, str] | None = None) -> Settings:
    """Load settings from Streamlit secrets or environment variables.

    Args:
        secrets: Optional mapping used instead of ``st.secrets``.
    """

    load_dotenv()
    source = _read_secrets() if secrets is None else secrets

    def _get(key: str) -> Optional[str]:
        value = source.get(key) or os.getenv(key)
        return str(value) if value is not None else None

    base_url = (_get("JOB_BOARD_API_URL") or "").strip().rstrip("/")
    currency = (_get("JOB_DEFAULT_CURRENCY") or "").strip().upper()
    return Settings(
        api_base_url=base_url or None,
        api_timeout=_as_timeout(_get("JOB_BOARD_API_TIMEOUT")),
        default_currency=currency or DEFAULT_CURRENCY,
        debug_logs=_as_bool(_get("DEBUG_LOGS")),
    )


__all__ = ["DEFAULT_API_TIMEOUT", "Settings", "load_settings"]
