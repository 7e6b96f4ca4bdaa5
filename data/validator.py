"""Boundary sanitation for numeric inputs and validation of allocation tables."""

import math
from dataclasses import dataclass, field
from typing import Dict, List

from config.defaults import CATEGORIES, PROCESSES, DESTINATION_PROCESSES, ALLOCATION_PRESETS
from models.inputs import ModelInputs


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def to_finite_or_zero(value) -> float:
    """Coerce anything to a finite float, falling back to 0."""
    try:
        x = float(value)
    except (TypeError, ValueError):
        return 0.0
    return x if math.isfinite(x) else 0.0


def clamp(x: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, x))


def sanitize_inputs(inputs: ModelInputs) -> ModelInputs:
    """Clamp all inputs to their valid range. Stores is rounded and kept >= 1."""
    stores = to_finite_or_zero(inputs.stores)
    return ModelInputs(
        cartons_delivered=max(0.0, to_finite_or_zero(inputs.cartons_delivered)),
        online_units=max(0.0, to_finite_or_zero(inputs.online_units)),
        hourly_rate=max(0.0, to_finite_or_zero(inputs.hourly_rate)),
        stores=max(1, int(round(stores))),
        weeks_per_year=max(0.0, to_finite_or_zero(inputs.weeks_per_year)),
    )


def sanitize_split(split: Dict[str, float]) -> Dict[str, float]:
    """Every category present, each share finite and within [0, 1]."""
    return {k: clamp(to_finite_or_zero(split.get(k, 0.0))) for k in CATEGORIES}


def max_left_for(split: Dict[str, float], category: str) -> float:
    """Largest share `category` may take without the split exceeding 100%."""
    shares = sanitize_split(split)
    others = sum(v for k, v in shares.items() if k != category)
    return clamp(1.0 - others)


def max_percent_for(split: Dict[str, float], category: str) -> int:
    """Whole-percent slider ceiling for `category`; 0 when the split is already full."""
    return int(math.floor(max_left_for(split, category) * 100 + 1e-9))


def validate_split(split: Dict[str, float]) -> ValidationResult:
    result = ValidationResult()
    unknown = [k for k in split if k not in CATEGORIES]
    if unknown:
        result.warnings.append(f"Unknown categories ignored: {', '.join(unknown)}")

    total = sum(sanitize_split(split).values())
    if total > 1.0 + 1e-9:
        result.warnings.append(
            f"Category split totals {total:.0%}; shares will be normalised to 100%."
        )
    elif total == 0:
        result.warnings.append("Category split is empty; no cartons will be routed.")
    return result


def validate_allocation_table(table: Dict[str, Dict[str, float]], label: str = "Allocation") -> ValidationResult:
    """Check a category -> {process: fraction} table covers every category and sums to 1."""
    result = ValidationResult()

    missing = [c for c in CATEGORIES if c not in table]
    if missing:
        result.is_valid = False
        result.errors.append(f"{label}: Missing categories: {', '.join(missing)}")

    for category, routes in table.items():
        if category not in CATEGORIES:
            result.is_valid = False
            result.errors.append(f"{label}: Unknown category '{category}'")
            continue
        bad = [p for p in routes if p not in DESTINATION_PROCESSES]
        if bad:
            result.is_valid = False
            result.errors.append(f"{label}: {category} routes to unknown process(es): {', '.join(bad)}")
        if any(f < 0 for f in routes.values()):
            result.is_valid = False
            result.errors.append(f"{label}: {category} has a negative fraction")
        total = sum(routes.values())
        if abs(total - 1.0) > 1e-9:
            result.is_valid = False
            result.errors.append(f"{label}: {category} fractions sum to {total:.3f}, expected 1")

    return result


def validate_presets(presets: dict = None) -> ValidationResult:
    """Validate both model tables of every allocation preset."""
    presets = presets if presets is not None else ALLOCATION_PRESETS
    result = ValidationResult()
    for name, preset in presets.items():
        for model in ("current", "new"):
            r = validate_allocation_table(preset.get(model, {}), f"{name}/{model}")
            result.errors.extend(r.errors)
            result.warnings.extend(r.warnings)
    result.is_valid = not result.errors
    return result


def validate_forecast(forecast: Dict[str, float]) -> ValidationResult:
    result = ValidationResult()
    unknown = [p for p in forecast if p not in PROCESSES]
    if unknown:
        result.is_valid = False
        result.errors.append(f"Forecast: Unknown processes: {', '.join(unknown)}")
    if not forecast:
        result.warnings.append("Forecast: No process hours found.")
    return result
