from core.location_prefill import apply_reverse_geocode, format_address
from models.job_posting import JobPostingForm


def test_format_address_skips_missing_parts() -> None:
    result = {"street": "1 Main St", "city": "Austin", "region": None, "country": "USA"}

    assert format_address(result) == "1 Main St, Austin, USA"


def test_apply_reverse_geocode_fills_location_fields() -> None:
    form = JobPostingForm(title="Roofer", location="old")

    updated = apply_reverse_geocode(
        form,
        {"street": "1 Main St", "city": "Austin", "region": "TX", "country": "USA"},
        latitude=30.2,
        longitude=-97.7,
    )

    assert updated.location == "1 Main St, Austin, TX, USA"
    assert (updated.city, updated.state, updated.country) == ("Austin", "TX", "USA")
    assert (updated.latitude, updated.longitude) == (30.2, -97.7)
    assert updated.title == "Roofer"
    assert form.location == "old"


def test_empty_result_only_stores_coordinates() -> None:
    form = JobPostingForm(location="typed by hand")

    updated = apply_reverse_geocode(form, None, latitude=1.0, longitude=2.0)

    assert updated.location == "typed by hand"
    assert updated.has_coordinates
    assert apply_reverse_geocode(form, {}) is form
