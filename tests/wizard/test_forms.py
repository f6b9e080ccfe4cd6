"""
Tests for onboarding form data and per-step validity.
"""

import pytest
from pydantic import ValidationError

from onboarding.forms import (
    FormData,
    STEP_REQUIRED_FIELDS,
    is_field_set,
    is_step_valid,
    missing_fields,
    parse_household_size,
)


class TestFormDefaults:
    def test_empty_form(self):
        form = FormData()
        assert form.name == ""
        assert form.household_size == ""
        assert form.residence_size == ""
        assert form.has_garden is False
        assert form.has_solar_panels is False
        for step in STEP_REQUIRED_FIELDS:
            assert not is_step_valid(form, step)


class TestAssignment:
    def test_rejects_unknown_option(self):
        form = FormData()
        with pytest.raises(ValidationError):
            form.transportation_type = "spaceship"
        assert form.transportation_type == ""

    def test_accepts_known_option(self):
        form = FormData()
        form.heating_type = "gas"
        assert form.heating_type == "gas"

    def test_household_size_number_kept_as_text(self):
        form = FormData()
        form.household_size = 4
        assert form.household_size == "4"

    def test_household_size_none_clears(self):
        form = FormData(household_size="2")
        form.household_size = None
        assert form.household_size == ""


class TestParseHouseholdSize:
    @pytest.mark.parametrize("text,expected", [
        ("3", 3),
        (" 12 ", 12),
        ("2.0", 2),
        ("", None),
        ("0", None),
        ("-1", None),
        ("2.5", None),
        ("three", None),
    ])
    def test_parse(self, text, expected):
        assert parse_household_size(text) == expected


class TestStepValidity:
    def test_step1_requires_all_three(self):
        form = FormData(name="Ana", household_size="3")
        assert not is_step_valid(form, 1)
        assert missing_fields(form, 1) == ["residence_size"]

        form.residence_size = "small"
        assert is_step_valid(form, 1)

    def test_step1_blank_name_is_unset(self):
        form = FormData(name="   ", household_size="3", residence_size="large")
        assert not is_field_set(form, "name")
        assert not is_step_valid(form, 1)

    def test_step1_invalid_household_is_unset(self):
        form = FormData(name="Ana", household_size="0", residence_size="large")
        assert missing_fields(form, 1) == ["household_size"]

    def test_optional_toggles_do_not_gate(self):
        form = FormData(transportation_type="walk")
        assert is_step_valid(form, 2)
        form.heating_type = "none"
        assert is_step_valid(form, 3)

    def test_step4_requires_recycling(self):
        form = FormData()
        assert missing_fields(form, 4) == ["recycling_habit"]
        form.recycling_habit = "never"
        assert is_step_valid(form, 4)

    def test_unknown_step_is_invalid(self, complete_form):
        assert not is_step_valid(complete_form, 0)
        assert not is_step_valid(complete_form, 5)

    def test_each_step_only_checks_its_own_fields(self):
        form = FormData(heating_type="electric")
        assert not is_step_valid(form, 1)
        assert not is_step_valid(form, 2)
        assert is_step_valid(form, 3)
