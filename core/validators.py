"""Helper validators shared across the form model and the schema mapper."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any


def deduplicate_preserve_order(value: object) -> list[str]:
    """Return ``value`` as a list of unique strings, preserving the original order."""

    seen: set[str] = set()
    result: list[str] = []
    for item in coerce_string_list(value):
        marker = item.casefold()
        if marker in seen:
            continue
        seen.add(marker)
        result.append(item)
    return result


def coerce_string_list(value: object) -> list[str]:
    """Return the non-blank string items of ``value``.

    A bare string becomes a one-item list; mappings, numbers and ``None``
    degrade to an empty list so legacy payloads never break a form.
    """

    if value is None or isinstance(value, Mapping):
        return []
    if isinstance(value, str):
        candidate_iter: Iterable[Any] = [value]
    elif isinstance(value, Iterable):
        candidate_iter = value
    else:
        return []

    result: list[str] = []
    for item in candidate_iter:
        if item is None or isinstance(item, (Mapping, list, tuple)):
            continue
        as_str = str(item).strip()
        if as_str:
            result.append(as_str)
    return result


def coerce_text(value: object) -> str:
    """Return a trimmed string for scalars, ``""`` for anything else."""

    if value is None or isinstance(value, (Mapping, list, tuple, set, bool)):
        return ""
    return str(value).strip()


def coerce_number(value: object) -> float | None:
    """Return ``value`` as a finite float when it is numeric or a numeric string.

    ``nan`` and infinities resolve to ``None`` like any other unusable input.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return None
    elif not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except (OverflowError, ValueError):
        return None
    return number if math.isfinite(number) else None


def coerce_int(value: object) -> int | None:
    """Return ``value`` as an int, truncating numeric input."""

    number = coerce_number(value)
    if number is None:
        return None
    return int(number)


def is_blank(value: object) -> bool:
    """Return ``True`` for ``None`` and whitespace-only strings."""

    if value is None:
        return True
    return isinstance(value, str) and not value.strip()
