"""In-memory report registry for hosts without one of their own."""

from typing import List, Optional

from .models import ReportArtifact, ReportType, Rule


class ReportRegistry:
    """Collects report artifacts in registration order."""

    def __init__(self) -> None:
        self.artifacts: List[ReportArtifact] = []

    def add_report(self, label: str, rule: Rule, report_type: ReportType, url: Optional[str]) -> None:
        self.artifacts.append(ReportArtifact(label=label, rule=rule, report_type=report_type, url=url))

    def for_rule(self, rule_id: str) -> List[ReportArtifact]:
        return [a for a in self.artifacts if a.rule.id == rule_id]

    def __len__(self) -> int:
        return len(self.artifacts)
