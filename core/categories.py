"""Job category normalization and the read-only lookup used by the wizard."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from core.validators import coerce_text

_DEFAULT_DISPLAY_ORDER = 999


@dataclass(frozen=True)
class Category:
    """A selectable job category."""

    id: str
    name: str


class CategoryLookup(Protocol):
    """Resolves category ids to display names."""

    def name_for(self, category_id: str) -> str | None: ...


def _unwrap(raw: object) -> Sequence[Any]:
    if isinstance(raw, Mapping):
        data = raw.get("data")
        return data if isinstance(data, list) else []
    if isinstance(raw, list):
        return raw
    return []


def _display_order(entry: Mapping[str, Any]) -> float:
    value = entry.get("displayOrder")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return _DEFAULT_DISPLAY_ORDER
    return value


def normalize_categories(raw: object) -> list[Category]:
    """Return active categories from an API response, sorted for display.

    Accepts a bare list or a ``{"success": ..., "data": [...]}`` envelope.
    Entries flagged ``isActive: false`` or lacking an id or name are dropped;
    ``_id`` is preferred over ``id`` and entries without ``displayOrder`` sort
    last.
    """

    entries: list[tuple[float, int, Category]] = []
    for position, entry in enumerate(_unwrap(raw)):
        if not isinstance(entry, Mapping):
            continue
        if entry.get("isActive") is False:
            continue
        category_id = coerce_text(entry.get("_id") or entry.get("id"))
        name = coerce_text(entry.get("name"))
        if not category_id or not name:
            continue
        entries.append((_display_order(entry), position, Category(id=category_id, name=name)))
    entries.sort(key=lambda item: (item[0], item[1]))
    return [category for _, _, category in entries]


class StaticCategoryLookup:
    """``CategoryLookup`` over an already fetched list of categories."""

    def __init__(self, categories: Sequence[Category]) -> None:
        self._names = {category.id: category.name for category in categories}

    def name_for(self, category_id: str) -> str | None:
        return self._names.get(category_id)

    def __len__(self) -> int:
        return len(self._names)


__all__ = ["Category", "CategoryLookup", "StaticCategoryLookup", "normalize_categories"]
