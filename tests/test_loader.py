"""Tests for the forecast workbook importer."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pandas as pd
import pytest

from data.loader import (
    ForecastParseError,
    match_process,
    normalize_name,
    parse_forecast,
    parse_hours,
)
from data.sample_data import generate_sample_excel


def write_workbook(path, sheets):
    """sheets: {sheet_name: [[name, hours, ...], ...]} written without headers."""
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for name, rows in sheets.items():
            pd.DataFrame(rows).to_excel(writer, sheet_name=name, index=False, header=False)
    return path


class TestNameMatching:
    def test_normalize(self):
        assert normalize_name(" Digital Shop-keeping ") == "digitalshopkeeping"
        assert normalize_name(None) == ""
        assert normalize_name(float("nan")) == ""

    @pytest.mark.parametrize("text,expected", [
        ("Decant", "Decant"),
        ("LF", "Loadfill"),
        ("Sequence", "Loadfill"),
        ("Load Fill", "Loadfill"),
        ("Shopkeeping", "Digital"),
        ("Digital Shopkeeping", "Digital"),
        ("Pack away", "Packaway"),
        ("Online Picking", "Online"),
        ("Backfill team", "Backfill"),
    ])
    def test_aliases(self, text, expected):
        assert match_process(text) == expected

    def test_short_alias_needs_exact_match(self):
        assert match_process("Shelf") is None
        assert match_process("Total") is None
        assert match_process("") is None

    def test_total_lines_never_match(self):
        assert match_process("Online Total") is None
        assert match_process("Loadfill subtotal") is None
        assert match_process("Backfill") == "Backfill"


class TestParseHours:
    def test_thousands_separator(self):
        assert parse_hours("1,234.5") == 1234.5

    def test_numbers(self):
        assert parse_hours(42) == 42.0
        assert parse_hours(12.5) == 12.5

    def test_unusable(self):
        assert parse_hours("abc") is None
        assert parse_hours("") is None
        assert parse_hours(None) is None
        assert parse_hours(float("nan")) is None
        assert parse_hours(True) is None


class TestParseForecast:
    def test_sample_workbook(self, tmp_path):
        path = generate_sample_excel(str(tmp_path))
        forecast = parse_forecast(path)
        assert forecast == {
            "Decant": 150,
            "Loadfill": 405,  # Sequence + LF
            "Packaway": 28,
            "Digital": 120,
            "Online": 86,
        }

    def test_subtotal_rows_not_counted(self, tmp_path):
        path = write_workbook(tmp_path / "f.xlsx", {
            "Forecast Roster Hours": [
                ["Online Picking", 60],
                ["Online Packing", 26],
                ["Online Total", 86],
                ["Decant Sub-total", 150],
                ["Decant", 150],
            ],
        })
        assert parse_forecast(str(path)) == {"Online": 86, "Decant": 150}

    def test_sheet_name_case_insensitive(self, tmp_path):
        path = write_workbook(tmp_path / "f.xlsx", {
            "Summary": [["Decant", 1]],
            "FORECAST ROSTER HOURS": [["Decant", 99]],
        })
        assert parse_forecast(str(path)) == {"Decant": 99}

    def test_alternate_sheet_name(self, tmp_path):
        path = write_workbook(tmp_path / "f.xlsx", {
            "Summary": [["Decant", 1]],
            "Forecast Hours Alternate": [["Backfill", 12]],
        })
        assert parse_forecast(str(path)) == {"Backfill": 12}

    def test_falls_back_to_first_sheet(self, tmp_path):
        path = write_workbook(tmp_path / "f.xlsx", {
            "Sheet1": [["Decant", "1,250"], ["Backfill", 12], ["Unknown", 5]],
            "Other": [["Online", 3]],
        })
        assert parse_forecast(str(path)) == {"Decant": 1250, "Backfill": 12}

    def test_first_numeric_column_used(self, tmp_path):
        path = write_workbook(tmp_path / "f.xlsx", {
            "Forecast Roster Hours": [["Decant", "n/a", 64], ["Online", "", "abc"]],
        })
        assert parse_forecast(str(path)) == {"Decant": 64}

    def test_negative_hours_clamped(self, tmp_path):
        path = write_workbook(tmp_path / "f.xlsx", {"Forecast Roster Hours": [["Decant", -10]]})
        assert parse_forecast(str(path)) == {"Decant": 0}

    def test_csv(self, tmp_path):
        path = tmp_path / "forecast.csv"
        path.write_text('Process,Hours\nDecant,"1,100"\nLF,40\n')
        assert parse_forecast(str(path)) == {"Decant": 1100, "Loadfill": 40}

    def test_no_matching_rows(self, tmp_path):
        path = write_workbook(tmp_path / "f.xlsx", {"Sheet1": [["Apples", 3], ["Pears", 4]]})
        with pytest.raises(ForecastParseError):
            parse_forecast(str(path))

    def test_unreadable_file(self, tmp_path):
        path = tmp_path / "broken.xlsx"
        path.write_bytes(b"this is not a workbook")
        with pytest.raises(ForecastParseError):
            parse_forecast(str(path))

    def test_file_like_upload(self, tmp_path):
        path = generate_sample_excel(str(tmp_path))
        with open(path, "rb") as fh:
            forecast = parse_forecast(fh)
        assert forecast["Decant"] == 150


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
