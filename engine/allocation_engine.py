"""Category split normalisation and carton routing (steps 1 to 3 of the model)."""

from typing import Dict, List, Optional

from config.defaults import (
    CATEGORIES, PROCESSES, DESTINATION_PROCESSES,
    ALLOCATION_PRESETS, DEFAULT_ALLOCATION_PRESET,
)
from data.validator import sanitize_split, to_finite_or_zero
from models.totals import ProcessVolumes


def get_allocation_table(model: str, rule_config: Optional[dict] = None) -> Dict[str, Dict[str, float]]:
    """Look up the routing table for "current" or "new" under the configured preset."""
    cfg = rule_config or {}
    preset_name = cfg.get("allocation_preset", DEFAULT_ALLOCATION_PRESET)
    return ALLOCATION_PRESETS[preset_name][model]


def normalize_split(split: Dict[str, float]) -> Dict[str, float]:
    """Effective share per category.

    Shares are divided by their actual sum; an empty split divides by 1 so
    every effective share is 0.
    """
    shares = sanitize_split(split)
    total = sum(shares.values()) or 1.0
    return {k: v / total for k, v in shares.items()}


def compute_category_cartons(cartons: float, split: Dict[str, float]) -> Dict[str, float]:
    cartons = max(0.0, to_finite_or_zero(cartons))
    shares = normalize_split(split)
    return {k: cartons * shares[k] for k in CATEGORIES}


def allocate_cartons(
    cartons: float,
    online_units: float,
    category_cartons: Dict[str, float],
    table: Dict[str, Dict[str, float]],
) -> ProcessVolumes:
    """Route category cartons to processes through an allocation table.

    Decant handles every inbound carton. Online units are carried as a
    separate stream and never mix with routed cartons.
    """
    routed = {p: 0.0 for p in PROCESSES}
    routed["Decant"] = max(0.0, to_finite_or_zero(cartons))

    for category, volume in category_cartons.items():
        for process, fraction in table.get(category, {}).items():
            routed[process] += volume * fraction

    return ProcessVolumes(
        cartons=routed,
        online_units=max(0.0, to_finite_or_zero(online_units)),
    )


def allocate_both_models(
    cartons: float,
    online_units: float,
    split: Dict[str, float],
    rule_config: Optional[dict] = None,
):
    """Return (category_cartons, current_volumes, new_volumes)."""
    category_cartons = compute_category_cartons(cartons, split)
    current = allocate_cartons(cartons, online_units, category_cartons,
                               get_allocation_table("current", rule_config))
    new = allocate_cartons(cartons, online_units, category_cartons,
                           get_allocation_table("new", rule_config))
    return category_cartons, current, new


def flow_links(
    category_cartons: Dict[str, float],
    model: str = "new",
    rule_config: Optional[dict] = None,
) -> List[dict]:
    """Decant -> category -> process links for the carton flow diagram."""
    table = get_allocation_table(model, rule_config)
    links = []
    for category in CATEGORIES:
        volume = category_cartons.get(category, 0.0)
        if volume <= 0:
            continue
        links.append({"source": "Decant", "target": category, "value": volume})
        for process, fraction in table.get(category, {}).items():
            if process in DESTINATION_PROCESSES and fraction > 0:
                links.append({"source": category, "target": process, "value": volume * fraction})
    return links
