"""Forecast roster hours import: XLSX/CSV into a {process: hours} mapping."""

import logging
import math
import re
from typing import Dict, List, Optional

import pandas as pd

from config.defaults import (
    FORECAST_SHEET_NAMES, PROCESS_ALIASES, MIN_FUZZY_ALIAS_LENGTH, SUMMARY_ROW_MARKERS,
)

logger = logging.getLogger(__name__)


class ForecastParseError(ValueError):
    """Raised when no usable forecast hours can be read from a file."""


def normalize_name(text) -> str:
    """Lowercase and keep letters only: 'Digital Shop-keeping ' -> 'digitalshopkeeping'."""
    if text is None or (isinstance(text, float) and math.isnan(text)):
        return ""
    return re.sub(r"[^a-z]", "", str(text).lower())


def is_summary_row(text) -> bool:
    name = normalize_name(text)
    return any(marker in name for marker in SUMMARY_ROW_MARKERS)


def match_process(text) -> Optional[str]:
    """Map free-text process names onto a process key.

    Short aliases (e.g. 'lf') must match the whole name; longer ones may
    appear anywhere in it. Longest aliases win. Total and subtotal lines
    never match.
    """
    name = normalize_name(text)
    if not name or is_summary_row(name):
        return None
    if name in PROCESS_ALIASES:
        return PROCESS_ALIASES[name]
    for alias in sorted(PROCESS_ALIASES, key=len, reverse=True):
        if len(alias) >= MIN_FUZZY_ALIAS_LENGTH and alias in name:
            return PROCESS_ALIASES[alias]
    return None


def parse_hours(value) -> Optional[float]:
    """Parse a cell as finite hours, tolerating thousands separators. None if unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.replace(",", "").replace(" ", "").strip()
        if not text:
            return None
        try:
            x = float(text)
        except ValueError:
            return None
    else:
        try:
            x = float(value)
        except (TypeError, ValueError):
            return None
    return x if math.isfinite(x) else None


def _match_sheet(sheet_names: List[str]) -> str:
    """Preferred forecast sheet by case-insensitive name, else the first sheet."""
    lower_map = {s.lower().strip(): s for s in sheet_names}
    for name in FORECAST_SHEET_NAMES:
        if name in lower_map:
            return lower_map[name]
    logger.info("No forecast sheet found in %s; using first sheet '%s'", sheet_names, sheet_names[0])
    return sheet_names[0]


def _read_frame(source) -> pd.DataFrame:
    name = str(getattr(source, "name", source)).lower()
    try:
        if name.endswith(".csv"):
            return pd.read_csv(source, header=None)
        xl = pd.ExcelFile(source)
        if not xl.sheet_names:
            raise ForecastParseError("Workbook has no worksheets.")
        sheet = _match_sheet(xl.sheet_names)
        return pd.read_excel(xl, sheet_name=sheet, header=None)
    except ForecastParseError:
        raise
    except Exception as e:
        raise ForecastParseError(f"Could not read forecast file: {e}") from e


def rows_to_forecast(df: pd.DataFrame) -> Dict[str, float]:
    """Scan (name, hours) rows. Column B is preferred; otherwise the first numeric cell after A."""
    forecast: Dict[str, float] = {}
    skipped = 0
    for row in df.itertuples(index=False):
        cells = list(row)
        if not cells:
            continue
        process = match_process(cells[0])
        if process is None:
            skipped += 1
            continue

        hours = None
        for cell in cells[1:]:
            hours = parse_hours(cell)
            if hours is not None:
                break
        if hours is None:
            skipped += 1
            continue

        # Several rows for one process (e.g. 'Sequence' and 'LF') add up
        forecast[process] = forecast.get(process, 0.0) + max(0.0, hours)

    logger.debug("Forecast import matched %d processes, skipped %d rows", len(forecast), skipped)
    return forecast


def parse_forecast(source) -> Dict[str, float]:
    """Load a forecast workbook (path or uploaded file) into {process: weekly hours}.

    Raises ForecastParseError if the file cannot be read or no rows match a process.
    """
    df = _read_frame(source)
    forecast = rows_to_forecast(df)
    if not forecast:
        raise ForecastParseError(
            "No forecast hours found. Expected process names in column A and hours in column B."
        )
    logger.info("Imported forecast hours for %s", ", ".join(sorted(forecast)))
    return forecast
