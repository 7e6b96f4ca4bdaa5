from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class ProcessVolumes:
    """Routed cartons per process plus the separate online-unit stream."""
    cartons: Dict[str, float]
    online_units: float

    def units_for(self, process: str, unit: str) -> float:
        if unit == "online":
            return self.online_units
        return self.cartons.get(process, 0.0)

    @property
    def routed_cartons(self) -> float:
        """Cartons routed to destination processes (Decant excluded)."""
        return sum(v for p, v in self.cartons.items() if p != "Decant")


@dataclass(frozen=True)
class ComputedTotals:
    cartons: float
    online_units: float
    category_cartons: Dict[str, float]
    current_units: ProcessVolumes
    new_units: ProcessVolumes
    current_base_hours: Dict[str, float]    # Before issue multipliers
    new_base_hours: Dict[str, float]
    current_multipliers: Dict[str, float]
    new_multipliers: Dict[str, float]
    current_hours: Dict[str, float]         # After issue multipliers
    new_hours: Dict[str, float]
    total_current_hours: float
    total_new_hours: float
    benefit_hours: float                    # May be negative unless clamped
    weekly_savings: float
    network_weekly_benefit_hours: float
    network_weekly_savings: float
    network_annual_benefit_hours: float
    network_annual_savings: float
    hours_source: Dict[str, Dict[str, str]] = field(default_factory=dict)  # model -> process -> source
