"""State updates. Every edit produces a new ModelState and leaves the old one untouched."""

from dataclasses import fields, replace
from typing import Dict, List, Optional, Tuple

from config.defaults import (
    CATEGORIES, PROCESSES, UNIT_TYPES,
    ALLOCATION_PRESETS, FORECAST_TARGETS,
)
from data.validator import clamp, max_left_for, to_finite_or_zero
from engine.model_engine import compute_state
from models.inputs import ModelInputs
from models.issue import IssueScenario
from models.process import process_label
from models.state import ModelState

INPUT_FIELDS = {f.name for f in fields(ModelInputs)}
PROCESS_FIELDS = {"unit", "use_roster", "rate", "roster"}


# --- Issue catalog operations ---

def add_issue_impact(
    catalog: Tuple[IssueScenario, ...],
    issue_id: str,
    process: str,
    impact: float,
) -> Tuple[IssueScenario, ...]:
    """Return a catalog where `issue_id` inflates `process` by `impact` (replacing any existing value)."""
    if process not in PROCESSES:
        raise ValueError(f"Unknown process: {process}")
    if not any(i.issue_id == issue_id for i in catalog):
        raise ValueError(f"Unknown issue: {issue_id}")
    updated = []
    for issue in catalog:
        if issue.issue_id == issue_id:
            impact_map = dict(issue.impact)
            impact_map[process] = to_finite_or_zero(impact)
            issue = replace(issue, impact=impact_map)
        updated.append(issue)
    return tuple(updated)


def remove_issue_impact(
    catalog: Tuple[IssueScenario, ...],
    issue_id: str,
    process: str,
) -> Tuple[IssueScenario, ...]:
    """Return a catalog without the (issue, process) impact. Missing pairs are a no-op."""
    updated = []
    for issue in catalog:
        if issue.issue_id == issue_id and process in issue.impact:
            impact_map = {p: v for p, v in issue.impact.items() if p != process}
            issue = replace(issue, impact=impact_map)
        updated.append(issue)
    return tuple(updated)


# --- Field updates ---

def set_input(state: ModelState, field_name: str, value) -> ModelState:
    if field_name not in INPUT_FIELDS:
        raise ValueError(f"Unknown input field: {field_name}")
    x = max(0.0, to_finite_or_zero(value))
    if field_name == "stores":
        x = max(1, int(round(x)))
    return replace(state, inputs=replace(state.inputs, **{field_name: x}))


def set_share(state: ModelState, category: str, value) -> ModelState:
    """Set a category share, capped so the split never exceeds 100%."""
    if category not in CATEGORIES:
        raise ValueError(f"Unknown category: {category}")
    left = max_left_for(state.split, category)
    split = dict(state.split)
    split[category] = clamp(to_finite_or_zero(value), 0.0, left)
    return replace(state, split=split)


def set_process(state: ModelState, model: str, process: str, field_name: str, value) -> ModelState:
    if model not in ("current", "new"):
        raise ValueError(f"Unknown model: {model}")
    if process not in PROCESSES:
        raise ValueError(f"Unknown process: {process}")
    if field_name not in PROCESS_FIELDS:
        raise ValueError(f"Unknown process field: {field_name}")

    if field_name == "unit":
        if value not in UNIT_TYPES:
            raise ValueError(f"Unit must be one of {UNIT_TYPES}, got {value!r}")
    elif field_name == "use_roster":
        value = bool(value)
    else:
        value = max(0.0, to_finite_or_zero(value))

    attr = "current_cfg" if model == "current" else "new_cfg"
    cfgs = dict(getattr(state, attr))
    cfgs[process] = replace(cfgs[process], **{field_name: value})
    return replace(state, **{attr: cfgs})


def toggle_issue(state: ModelState, issue_id: str, enabled: Optional[bool] = None) -> ModelState:
    toggles = dict(state.issue_toggles)
    toggles[issue_id] = (not toggles.get(issue_id, False)) if enabled is None else bool(enabled)
    return replace(state, issue_toggles=toggles)


def set_forecast(state: ModelState, forecast: Optional[Dict[str, float]]) -> ModelState:
    """Replace the forecast override wholesale. Unknown processes are dropped."""
    if forecast is None:
        return replace(state, forecast=None)
    cleaned = {
        p: max(0.0, to_finite_or_zero(v))
        for p, v in forecast.items() if p in PROCESSES
    }
    return replace(state, forecast=cleaned)


def set_rule(state: ModelState, key: str, value) -> ModelState:
    if key == "allocation_preset" and value not in ALLOCATION_PRESETS:
        raise ValueError(f"Unknown allocation preset: {value}")
    if key == "forecast_target" and value not in FORECAST_TARGETS:
        raise ValueError(f"Forecast target must be one of {FORECAST_TARGETS}")
    if key == "clamp_benefit":
        value = bool(value)
    rule_config = dict(state.rule_config)
    rule_config[key] = value
    return replace(state, rule_config=rule_config)


def apply_action(state: ModelState, action: dict) -> ModelState:
    """Reduce one UI action into a new state."""
    kind = action.get("type")
    if kind == "set_input":
        return set_input(state, action["field"], action["value"])
    if kind == "set_share":
        return set_share(state, action["category"], action["value"])
    if kind == "set_process":
        return set_process(state, action["model"], action["process"], action["field"], action["value"])
    if kind == "toggle_issue":
        return toggle_issue(state, action["issue_id"], action.get("enabled"))
    if kind == "set_mitigation":
        return replace(state, mitigation=clamp(to_finite_or_zero(action["value"])))
    if kind == "set_forecast":
        return set_forecast(state, action["forecast"])
    if kind == "clear_forecast":
        return set_forecast(state, None)
    if kind == "set_rule":
        return set_rule(state, action["key"], action["value"])
    if kind == "add_issue_impact":
        catalog = add_issue_impact(state.issues, action["issue_id"], action["process"], action["impact"])
        return replace(state, issues=catalog)
    if kind == "remove_issue_impact":
        catalog = remove_issue_impact(state.issues, action["issue_id"], action["process"])
        return replace(state, issues=catalog)
    if kind == "reset":
        return ModelState()
    raise ValueError(f"Unknown action type: {kind}")


# --- Comparison ---

def compare_presets(state: ModelState, preset_names: Optional[List[str]] = None) -> List[dict]:
    """Per-process current/new hours and benefit under each allocation preset, plus a total row."""
    names = preset_names or list(ALLOCATION_PRESETS)
    results = {name: compute_state(set_rule(state, "allocation_preset", name)) for name in names}

    rows = []
    for p in PROCESSES:
        row = {"Process": process_label(p)}
        for name in names:
            cur, new = results[name].current_hours[p], results[name].new_hours[p]
            row[f"{name} Current"] = cur
            row[f"{name} New"] = new
            row[f"{name} Benefit"] = cur - new
        rows.append(row)

    total_row = {"Process": "Total"}
    for name in names:
        total_row[f"{name} Current"] = results[name].total_current_hours
        total_row[f"{name} New"] = results[name].total_new_hours
        total_row[f"{name} Benefit"] = results[name].benefit_hours
    rows.append(total_row)
    return rows
