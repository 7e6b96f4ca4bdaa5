"""Tests for boundary sanitation and allocation table validation."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from config.defaults import DEFAULT_SPLIT, ALLOCATION_PRESETS
from data.validator import (
    to_finite_or_zero,
    sanitize_inputs,
    max_left_for,
    max_percent_for,
    validate_split,
    validate_allocation_table,
    validate_presets,
    validate_forecast,
)
from models.inputs import ModelInputs


class TestSanitation:
    def test_to_finite_or_zero(self):
        assert to_finite_or_zero("12.5") == 12.5
        assert to_finite_or_zero(None) == 0
        assert to_finite_or_zero("") == 0
        assert to_finite_or_zero(float("-inf")) == 0
        assert to_finite_or_zero(-3) == -3

    def test_sanitize_inputs(self):
        clean = sanitize_inputs(ModelInputs(cartons_delivered=-1, online_units=10,
                                            hourly_rate=None, stores=2.6, weeks_per_year=-52))
        assert clean.cartons_delivered == 0
        assert clean.online_units == 10
        assert clean.hourly_rate == 0
        assert clean.stores == 3
        assert clean.weeks_per_year == 0

    def test_max_left(self):
        assert max_left_for(DEFAULT_SPLIT, "Demand") == pytest.approx(0.68)
        assert max_left_for({}, "LP") == 1.0
        assert max_left_for({"Demand": 1.0, "OMS": 0.5}, "LP") == 0.0

    def test_max_percent_never_exceeds_room(self):
        assert max_percent_for(DEFAULT_SPLIT, "Demand") == 68
        assert max_percent_for({"Demand": 0.315}, "LP") == 68
        assert max_percent_for({"Demand": 0.6, "Non-demand": 0.4}, "LP") == 0
        assert max_percent_for({}, "LP") == 100


class TestValidateSplit:
    def test_default_split_clean(self):
        result = validate_split(DEFAULT_SPLIT)
        assert result.is_valid
        assert result.warnings == []

    def test_over_allocation_warns(self):
        result = validate_split({"Demand": 0.8, "OMS": 0.5})
        assert result.is_valid
        assert any("normalised" in w for w in result.warnings)

    def test_unknown_category_warns(self):
        result = validate_split({"Demand": 0.5, "Seasonal": 0.1})
        assert any("Seasonal" in w for w in result.warnings)


class TestAllocationTables:
    def test_shipped_presets_valid(self):
        result = validate_presets()
        assert result.is_valid, result.errors

    def test_fraction_sum_checked(self):
        table = dict(ALLOCATION_PRESETS["v1"]["new"])
        table["Demand"] = {"Loadfill": 0.9}
        result = validate_allocation_table(table, "custom")
        assert not result.is_valid
        assert any("Demand" in e for e in result.errors)

    def test_missing_category_and_bad_process(self):
        result = validate_allocation_table({"Demand": {"Decant": 1.0}})
        assert not result.is_valid
        assert any("Missing categories" in e for e in result.errors)
        assert any("unknown process" in e for e in result.errors)

    def test_negative_fraction(self):
        table = dict(ALLOCATION_PRESETS["v2"]["current"])
        table["OMS"] = {"Online": 1.5, "Packaway": -0.5}
        result = validate_allocation_table(table)
        assert not result.is_valid


class TestValidateForecast:
    def test_unknown_process(self):
        result = validate_forecast({"Decant": 10, "Picking": 4})
        assert not result.is_valid

    def test_empty_warns(self):
        result = validate_forecast({})
        assert result.is_valid
        assert result.warnings


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
