from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from config.defaults import (
    DEFAULT_SPLIT, DEFAULT_MITIGATION, DEFAULT_ALLOCATION_PRESET,
    CLAMP_BENEFIT, DEFAULT_FORECAST_TARGET,
)
from models.inputs import ModelInputs
from models.issue import IssueScenario, default_issue_catalog
from models.process import ProcessConfig, default_current_configs, default_new_configs


def default_rule_config() -> dict:
    return {
        "allocation_preset": DEFAULT_ALLOCATION_PRESET,
        "clamp_benefit": CLAMP_BENEFIT,
        "forecast_target": DEFAULT_FORECAST_TARGET,
    }


@dataclass(frozen=True)
class ModelState:
    """Everything the engine needs. Updates go through engine.scenario_engine.apply_action."""
    inputs: ModelInputs = field(default_factory=ModelInputs)
    split: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_SPLIT))
    current_cfg: Dict[str, ProcessConfig] = field(default_factory=default_current_configs)
    new_cfg: Dict[str, ProcessConfig] = field(default_factory=default_new_configs)
    issues: Tuple[IssueScenario, ...] = field(default_factory=default_issue_catalog)
    issue_toggles: Dict[str, bool] = field(default_factory=dict)
    mitigation: float = DEFAULT_MITIGATION
    forecast: Optional[Dict[str, float]] = None
    rule_config: dict = field(default_factory=default_rule_config)

    @property
    def enabled_issue_ids(self) -> Tuple[str, ...]:
        return tuple(i.issue_id for i in self.issues if self.issue_toggles.get(i.issue_id))
