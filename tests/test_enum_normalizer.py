import pytest

from constants.job_posting import EnumKind
from core.enum_normalizer import (
    BENEFIT_TO_API,
    JOB_TYPE_TO_API,
    SALARY_PERIOD_TO_API,
    synthesize_enum,
    to_api_enum,
    to_ui_enum,
)


def test_job_type_and_period_tables_round_trip() -> None:
    for label, machine in JOB_TYPE_TO_API.items():
        assert to_api_enum(EnumKind.JOB_TYPE, label) == machine
        assert to_ui_enum(EnumKind.JOB_TYPE, machine) == label
    for label, machine in SALARY_PERIOD_TO_API.items():
        assert to_api_enum("salary_period", label) == machine
        assert to_ui_enum("salary_period", machine) == label


def test_unknown_job_type_and_period_pass_through() -> None:
    assert to_api_enum(EnumKind.JOB_TYPE, "seasonal") == "seasonal"
    assert to_ui_enum(EnumKind.JOB_TYPE, "seasonal") == "seasonal"
    assert to_api_enum(EnumKind.SALARY_PERIOD, "fortnight") == "fortnight"


def test_curated_benefit_label_maps_to_machine_value() -> None:
    assert to_api_enum(EnumKind.BENEFIT, "401(k) Matching") == "retirement_401k"
    assert to_ui_enum(EnumKind.BENEFIT, "retirement_401k") == "401(k) Matching"
    assert len(BENEFIT_TO_API) == len(set(BENEFIT_TO_API.values()))


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("Pet Friendly", "pet_friendly"),
        ("Pet Friendly (Dogs)", "pet_friendly_dogs"),
        ("  Team   Lunches ", "team_lunches"),
        ("Bonus", "bonus"),
    ],
)
def test_synthesize_enum(label: str, expected: str) -> None:
    assert synthesize_enum(label) == expected
    assert to_api_enum(EnumKind.BENEFIT, label) == expected


@pytest.mark.parametrize(
    "value",
    ["Health Insurance", "health_insurance", "Pet Friendly (Dogs)", "pet_friendly_dogs", "Bonus", ""],
)
def test_benefit_mapping_is_idempotent(value: str) -> None:
    once = to_api_enum(EnumKind.BENEFIT, value)
    assert to_api_enum(EnumKind.BENEFIT, once) == once


def test_unknown_machine_benefit_is_humanized() -> None:
    assert to_ui_enum(EnumKind.BENEFIT, "pet_friendly") == "Pet Friendly"
    assert to_ui_enum(EnumKind.BENEFIT, "Already A Label") == "Already A Label"


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValueError):
        to_api_enum("colour", "red")
