from dataclasses import dataclass
from typing import Dict

from config.defaults import DEFAULT_CURRENT, DEFAULT_NEW, PROCESS_LABELS


@dataclass(frozen=True)
class ProcessConfig:
    unit: str = "cartons"      # "cartons" or "online"
    use_roster: bool = False   # Fixed weekly roster hours instead of rate x volume
    rate: float = 0.0          # Hours per 1000 units
    roster: float = 0.0        # Weekly roster hours


def process_label(process: str) -> str:
    return PROCESS_LABELS.get(process, process)


def build_configs(raw: Dict[str, dict]) -> Dict[str, ProcessConfig]:
    """Convert a {process: {unit, use_roster, rate, roster}} dict into ProcessConfig values."""
    return {p: ProcessConfig(**cfg) for p, cfg in raw.items()}


def default_current_configs() -> Dict[str, ProcessConfig]:
    return build_configs(DEFAULT_CURRENT)


def default_new_configs() -> Dict[str, ProcessConfig]:
    return build_configs(DEFAULT_NEW)
