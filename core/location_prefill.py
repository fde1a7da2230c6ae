"""Prefill location fields from a reverse-geocoding result."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from core.validators import coerce_text
from models.job_posting import JobPostingForm


def format_address(result: Mapping[str, Any]) -> str:
    """Join street, city, region and country into a one-line address."""

    parts = (coerce_text(result.get(key)) for key in ("street", "city", "region", "country"))
    return ", ".join(part for part in parts if part)


def apply_reverse_geocode(
    form: JobPostingForm,
    result: Mapping[str, Any] | None,
    *,
    latitude: float | None = None,
    longitude: float | None = None,
) -> JobPostingForm:
    """Return ``form`` with its location fields replaced by ``result``.

    ``result`` follows the geocoder shape ``{street, city, region, country}``;
    the region fills the ``state`` field. An empty result only stores the
    coordinates so the user can type the address by hand.
    """

    changes: dict[str, Any] = {}
    if latitude is not None and longitude is not None:
        changes.update(latitude=latitude, longitude=longitude)
    if result:
        address = format_address(result)
        if address:
            changes["location"] = address
        changes.update(
            city=coerce_text(result.get("city")),
            state=coerce_text(result.get("region")),
            country=coerce_text(result.get("country")),
        )
    if not changes:
        return form
    return form.with_changes(**changes)


__all__ = ["apply_reverse_geocode", "format_address"]
