"""Hours, issue multipliers and benefit aggregation (steps 4 to 6 of the model)."""

from typing import Dict, Iterable, List, Optional, Tuple

from config.defaults import (
    PROCESSES, DESTINATION_PROCESSES,
    CLAMP_BENEFIT, DEFAULT_FORECAST_TARGET,
)
from data.validator import clamp, sanitize_inputs, to_finite_or_zero
from engine.allocation_engine import allocate_both_models
from models.inputs import ModelInputs
from models.issue import IssueScenario, default_issue_catalog
from models.process import ProcessConfig, process_label
from models.state import ModelState
from models.totals import ComputedTotals, ProcessVolumes


def forecast_applies(model: str, rule_config: Optional[dict] = None) -> bool:
    cfg = rule_config or {}
    target = cfg.get("forecast_target", DEFAULT_FORECAST_TARGET)
    return target == "both" or target == model


def process_base_hours(
    cfg: ProcessConfig,
    units: float,
    forecast_hours: Optional[float] = None,
) -> Tuple[float, str]:
    """Hours before issues, and where they came from.

    Precedence: roster override, then forecast hours, then rate x volume.
    """
    if cfg.use_roster:
        return max(0.0, to_finite_or_zero(cfg.roster)), "roster"
    if forecast_hours is not None:
        return max(0.0, to_finite_or_zero(forecast_hours)), "forecast"
    rate = max(0.0, to_finite_or_zero(cfg.rate))
    return rate * max(0.0, to_finite_or_zero(units)) / 1000, "rate"


def issue_multiplier(
    process: str,
    issues: Iterable[IssueScenario],
    issue_toggles: Dict[str, bool],
    mitigation: float = 0.0,
) -> float:
    """Compound multiplier of every enabled issue for one process.

    Each issue contributes (1 + impact x (1 - mitigation)); pass
    mitigation=0 for the current model.
    """
    keep = 1.0 - clamp(to_finite_or_zero(mitigation))
    mult = 1.0
    for issue in issues:
        if issue_toggles.get(issue.issue_id):
            mult *= 1.0 + to_finite_or_zero(issue.impact_for(process)) * keep
    # Large negative impacts must not flip hours negative
    return max(0.0, mult)


def compute_model_hours(
    cfgs: Dict[str, ProcessConfig],
    volumes: ProcessVolumes,
    multipliers: Dict[str, float],
    forecast: Optional[Dict[str, float]] = None,
):
    """Return (base_hours, final_hours, sources) per process for one model."""
    forecast = forecast or {}
    base, final, sources = {}, {}, {}
    for p in PROCESSES:
        cfg = cfgs.get(p, ProcessConfig())
        units = volumes.units_for(p, cfg.unit)
        hours, source = process_base_hours(cfg, units, forecast.get(p))
        base[p] = hours
        final[p] = hours * multipliers[p]
        sources[p] = source
    return base, final, sources


def compute_model(
    inputs: ModelInputs,
    split: Dict[str, float],
    current_cfg: Dict[str, ProcessConfig],
    new_cfg: Dict[str, ProcessConfig],
    issue_toggles: Dict[str, bool],
    mitigation: float,
    forecast_override: Optional[Dict[str, float]] = None,
    issues: Optional[Iterable[IssueScenario]] = None,
    rule_config: Optional[dict] = None,
) -> ComputedTotals:
    """Full pipeline: inputs -> allocation -> hours -> issues -> benefit."""
    cfg = rule_config or {}
    clamp_benefit = cfg.get("clamp_benefit", CLAMP_BENEFIT)
    issues = tuple(issues) if issues is not None else default_issue_catalog()
    toggles = issue_toggles or {}

    inputs = sanitize_inputs(inputs)
    category_cartons, current_units, new_units = allocate_both_models(
        inputs.cartons_delivered, inputs.online_units, split, cfg,
    )

    current_mult = {p: issue_multiplier(p, issues, toggles, 0.0) for p in PROCESSES}
    new_mult = {p: issue_multiplier(p, issues, toggles, mitigation) for p in PROCESSES}

    cur_forecast = forecast_override if forecast_applies("current", cfg) else None
    new_forecast = forecast_override if forecast_applies("new", cfg) else None

    cur_base, cur_hours, cur_src = compute_model_hours(current_cfg, current_units, current_mult, cur_forecast)
    new_base, new_hours, new_src = compute_model_hours(new_cfg, new_units, new_mult, new_forecast)

    total_current = sum(cur_hours.values())
    total_new = sum(new_hours.values())
    benefit = total_current - total_new
    if clamp_benefit:
        benefit = max(0.0, benefit)

    weekly_savings = benefit * inputs.hourly_rate
    network_weekly_hours = benefit * inputs.stores
    network_weekly_savings = weekly_savings * inputs.stores

    return ComputedTotals(
        cartons=inputs.cartons_delivered,
        online_units=inputs.online_units,
        category_cartons=category_cartons,
        current_units=current_units,
        new_units=new_units,
        current_base_hours=cur_base,
        new_base_hours=new_base,
        current_multipliers=current_mult,
        new_multipliers=new_mult,
        current_hours=cur_hours,
        new_hours=new_hours,
        total_current_hours=total_current,
        total_new_hours=total_new,
        benefit_hours=benefit,
        weekly_savings=weekly_savings,
        network_weekly_benefit_hours=network_weekly_hours,
        network_weekly_savings=network_weekly_savings,
        network_annual_benefit_hours=network_weekly_hours * inputs.weeks_per_year,
        network_annual_savings=weekly_savings * inputs.network_weeks,
        hours_source={"current": cur_src, "new": new_src},
    )


def compute_state(state: ModelState) -> ComputedTotals:
    return compute_model(
        state.inputs, state.split, state.current_cfg, state.new_cfg,
        state.issue_toggles, state.mitigation, state.forecast,
        issues=state.issues, rule_config=state.rule_config,
    )


def process_rows(totals: ComputedTotals, include_issues: bool = True) -> List[dict]:
    """Per-process current/new hours for charts and tables."""
    current = totals.current_hours if include_issues else totals.current_base_hours
    new = totals.new_hours if include_issues else totals.new_base_hours
    return [
        {
            "process": p,
            "label": process_label(p),
            "current": current[p],
            "new": new[p],
            "delta": current[p] - new[p],
        }
        for p in PROCESSES
    ]


def hours_per_thousand_cartons(
    totals: ComputedTotals,
    new_cfg: Dict[str, ProcessConfig],
    issues: Iterable[IssueScenario],
    issue_toggles: Dict[str, bool],
    mitigation: float,
) -> Dict[str, float]:
    """New-model labour intensity per 1000 inbound cartons for each destination.

    Online-unit processes are rescaled by online units per carton.
    """
    issues = tuple(issues)
    online_per_carton = totals.online_units / max(1.0, totals.cartons)
    result = {}
    for p in DESTINATION_PROCESSES:
        cfg = new_cfg.get(p, ProcessConfig())
        base = cfg.rate * (online_per_carton if cfg.unit == "online" else 1.0)
        result[p] = base * issue_multiplier(p, issues, issue_toggles, mitigation)
    return result


def format_number(value, decimals: int = 0) -> str:
    """Thousands-separated display string; anything non-finite shows as "0"."""
    x = to_finite_or_zero(value)
    if round(x, decimals) == 0:
        x = 0.0
    return f"{x:,.{decimals}f}"
