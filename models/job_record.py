"""Tagged views over the legacy and current shapes of API job records.

Backend job records have accumulated several incompatible layouts. Instead
of probing types at every call site, the mapper resolves each ambiguous
section once through the precedence functions below.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from core.validators import coerce_text

CompanyShape = Literal["object", "name_only", "missing"]
LocationOrigin = Literal["company", "top_level", "missing"]


@dataclass(frozen=True)
class CompanyObject:
    """Company section of a record, whatever shape it arrived in."""

    shape: CompanyShape
    name: str = ""
    website: str = ""
    size: str = ""
    industry: str = ""
    raw: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LocationSource:
    """The location block selected for a record and where it came from."""

    origin: LocationOrigin
    data: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_legacy(self) -> bool:
        return self.origin == "top_level"


def _as_mapping(value: object) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def resolve_company(record: Mapping[str, Any]) -> CompanyObject:
    """Return the company section of ``record``.

    A bare string is the legacy layout and only carries the company name.
    """

    company = record.get("company")
    if isinstance(company, Mapping):
        return CompanyObject(
            shape="object",
            name=coerce_text(company.get("name")),
            website=coerce_text(company.get("website")),
            size=coerce_text(company.get("size")),
            industry=coerce_text(company.get("industry")),
            raw=company,
        )
    if isinstance(company, str) and company.strip():
        return CompanyObject(shape="name_only", name=company.strip())
    return CompanyObject(shape="missing")


def resolve_location_source(record: Mapping[str, Any]) -> LocationSource:
    """Pick the location block for ``record``.

    ``company.location`` is the current layout and wins over a top-level
    ``location``. A bare-string location is read as the address.
    """

    nested = _as_mapping(record.get("company")).get("location")
    for origin, candidate in (("company", nested), ("top_level", record.get("location"))):
        if isinstance(candidate, Mapping) and candidate:
            return LocationSource(origin=origin, data=candidate)  # type: ignore[arg-type]
        if isinstance(candidate, str) and candidate.strip():
            return LocationSource(origin=origin, data={"address": candidate.strip()})  # type: ignore[arg-type]
    return LocationSource(origin="missing")


__all__ = [
    "CompanyObject",
    "LocationSource",
    "resolve_company",
    "resolve_location_source",
]
