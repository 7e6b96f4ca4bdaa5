from dataclasses import dataclass, field
from typing import Dict, Tuple

from config.defaults import ISSUES


@dataclass(frozen=True)
class IssueScenario:
    issue_id: str
    name: str
    impact: Dict[str, float] = field(default_factory=dict)  # process -> fractional delta

    def impact_for(self, process: str) -> float:
        return self.impact.get(process, 0.0)


def default_issue_catalog() -> Tuple[IssueScenario, ...]:
    return tuple(
        IssueScenario(issue_id=i["id"], name=i["name"], impact=dict(i["impact"]))
        for i in ISSUES
    )
