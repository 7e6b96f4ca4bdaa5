"""Generates human-readable explanations for per-process hour figures."""

from typing import Dict, List, Optional

from config.defaults import CATEGORIES
from engine.allocation_engine import get_allocation_table
from models.issue import IssueScenario
from models.process import ProcessConfig, process_label
from models.totals import ComputedTotals


def explain_routing(
    process: str,
    model: str,
    category_cartons: Dict[str, float],
    rule_config: Optional[dict] = None,
) -> List[str]:
    """Which categories feed a process, and how many cartons each contributes."""
    if process == "Decant":
        total = sum(category_cartons.values())
        return [f"Decant handles every inbound carton ({total:,.0f} routed through categories)."]

    table = get_allocation_table(model, rule_config)
    lines = []
    for category in CATEGORIES:
        fraction = table.get(category, {}).get(process, 0.0)
        if fraction > 0:
            volume = category_cartons.get(category, 0.0)
            lines.append(f"{category}: {fraction:.0%} of {volume:,.0f} = {volume * fraction:,.0f} cartons")
    if not lines:
        lines.append(f"No categories route to {process_label(process)} in the {model} model.")
    return lines


def explain_process(
    process: str,
    model: str,
    cfg: ProcessConfig,
    totals: ComputedTotals,
    issues: List[IssueScenario],
    issue_toggles: Dict[str, bool],
    mitigation: float,
    rule_config: Optional[dict] = None,
) -> List[str]:
    """Produce step-by-step explanation of one process's weekly hours."""
    is_new = model == "new"
    volumes = totals.new_units if is_new else totals.current_units
    base = (totals.new_base_hours if is_new else totals.current_base_hours)[process]
    mult = (totals.new_multipliers if is_new else totals.current_multipliers)[process]
    final = (totals.new_hours if is_new else totals.current_hours)[process]
    source = totals.hours_source.get(model, {}).get(process, "rate")
    label = process_label(process)

    steps = []

    if cfg.unit == "online":
        steps.append(f"Step 1 - Volume: {label} is driven by online units => {volumes.online_units:,.0f} units")
    else:
        steps.append(f"Step 1 - Volume: {volumes.cartons.get(process, 0.0):,.0f} cartons routed to {label}")
        steps.extend(f"    {line}" for line in explain_routing(process, model, totals.category_cartons, rule_config))

    if source == "roster":
        steps.append(f"Step 2 - Hours: Roster override => {base:,.1f} hrs (rate ignored)")
    elif source == "forecast":
        steps.append(f"Step 2 - Hours: Imported forecast => {base:,.1f} hrs (rate ignored)")
    else:
        units = volumes.units_for(process, cfg.unit)
        steps.append(
            f"Step 2 - Hours: {cfg.rate:g} hrs per 1000 x {units:,.0f} units / 1000 = {base:,.1f} hrs"
        )

    active = [i for i in issues if issue_toggles.get(i.issue_id) and i.impact_for(process)]
    if active:
        keep = 1 - mitigation if is_new else 1.0
        parts = [f"(1 {i.impact_for(process) * keep:+.1%})" for i in active]
        note = f" after {mitigation:.0%} mitigation" if is_new else ""
        steps.append(f"Step 3 - Issues{note}: {' x '.join(parts)} = x{mult:.3f}")
    else:
        steps.append("Step 3 - Issues: none affecting this process => x1.000")

    steps.append(f"Step 4 - Final: {base:,.1f} x {mult:.3f} = {final:,.1f} hrs/week")
    return steps


def explain_benefit(totals: ComputedTotals, hourly_rate: float, stores: int, weeks_per_year: float) -> List[str]:
    return [
        f"Current model: {totals.total_current_hours:,.1f} hrs/week",
        f"New model: {totals.total_new_hours:,.1f} hrs/week",
        f"Benefit: {totals.benefit_hours:,.1f} hrs x ${hourly_rate:,.2f} = ${totals.weekly_savings:,.0f}/week per store",
        f"Network: x {stores} stores x {weeks_per_year:g} weeks = ${totals.network_annual_savings:,.0f}/year",
    ]
