"""Date helpers shared by the form model and the schema mapper."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

_ISO_DATE_PREFIX = re.compile(r"^(\d{4}-\d{2}-\d{2})")


def to_iso_date(value: Any) -> str:
    """Return ``value`` as a ``YYYY-MM-DD`` string, dropping any time part.

    Accepts ``date``/``datetime`` objects and ISO-like strings such as
    ``2024-05-01T09:30:00Z``. Anything unparsable resolves to ``""``.
    """

    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if not isinstance(value, str):
        return ""
    match = _ISO_DATE_PREFIX.match(value.strip())
    if not match:
        return ""
    try:
        return date.fromisoformat(match.group(1)).isoformat()
    except ValueError:
        return ""


__all__ = ["to_iso_date"]
